import re

from oddstrack.core.errors import NormalizationError

MARKER = "x"

# bare decimal or decimal + marker, ASCII digits only
VALUE_RE = re.compile(r"([0-9]+\.[0-9]+)x?")
# what counts as a multiplier inside free recognized text
CANDIDATE_RE = re.compile(r"([0-9]+\.[0-9]+)x")


def normalize(raw: str) -> str:
    """Return the canonical ``"n.nnx"`` form of ``raw``.

    Raises NormalizationError with the offending token if it is not a decimal
    with a fractional part, optionally followed by a single marker.
    """
    m = VALUE_RE.fullmatch(raw) if isinstance(raw, str) else None
    if not m:
        raise NormalizationError(str(raw))
    return m.group(1) + MARKER


def extract_candidates(text: str) -> list[str]:
    # finditer yields non-overlapping matches left to right
    return [m.group(1) + MARKER for m in CANDIDATE_RE.finditer(text or "")]


def to_number(value: str) -> float:
    return float(value.removesuffix(MARKER))
