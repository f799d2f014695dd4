import pytest

from oddstrack.core.errors import NormalizationError
from oddstrack.core.validation import normalize, extract_candidates, to_number

def test_normalize_adds_marker():
    assert normalize("2.45") == "2.45x"
    assert normalize("2.45x") == "2.45x"
    assert normalize("10.0") == "10.0x"

def test_normalize_idempotent():
    for tok in ("1.00", "1.00x", "123.456", "0.5x"):
        once = normalize(tok)
        assert normalize(once) == once

@pytest.mark.parametrize("bad", ["", "2", "2.", ".45", "2.45xx", "2,45", "abc", "2.45X", " 2.45", "x2.45", "-1.20", "٢.٤٥", "２.５"])
def test_normalize_rejects(bad):
    with pytest.raises(NormalizationError) as ei:
        normalize(bad)
    assert ei.value.token == bad

def test_normalize_rejects_non_string():
    with pytest.raises(NormalizationError):
        normalize(None)

def test_extract_candidates_in_order():
    text = "Round 1.25x then 10.07x\n  bad 3x, 2.5 and 4.00x!"
    assert extract_candidates(text) == ["1.25x", "10.07x", "4.00x"]

def test_extract_candidates_empty():
    assert extract_candidates("") == []
    assert extract_candidates("no numbers 2.5 here") == []

def test_to_number():
    assert to_number("2.45x") == 2.45

def test_extract_ignores_non_ascii_digits():
    assert extract_candidates("٣.٠٠x １.５x 1.50x") == ["1.50x"]
