import pytest

from oddstrack.analytics.prediction import predict, trimmed_mean, forecast, moving_window_mean, FORECAST, MOVING_WINDOW
from oddstrack.analytics.stats import describe
from oddstrack.core.errors import InsufficientData

def test_moving_window_needs_five():
    with pytest.raises(InsufficientData) as ei:
        predict([1.0, 2.0, 3.0, 4.0], mode=MOVING_WINDOW)
    assert "5" in ei.value.message
    out = predict([1.0, 2.0, 3.0, 4.0, 5.0], mode=MOVING_WINDOW).as_dict()
    assert out == {'mode': MOVING_WINDOW, 'nextValue': "3.00"}

def test_moving_window_uses_last_entries():
    p = moving_window_mean([100.0, 1.0, 1.0, 2.0, 2.0, 4.0], window=5)
    assert p.next_value == pytest.approx(2.0)

def test_forecast_needs_one():
    with pytest.raises(InsufficientData):
        forecast([])

def test_forecast_known_values():
    out = predict([float(i) for i in range(1, 11)], mode=FORECAST).as_dict()
    assert out['simpleMean'] == "5.50" and out['nextValue'] == "5.50"
    assert out['median'] == "5.50"
    assert out['trimmedMean'] == "5.50"
    assert out['lowRiskOdd'] == "2.80"
    assert out['mediumRiskOdd'] == "5.50"
    assert out['highRiskOdd'] == "8.20"

def test_trimmed_mean_drops_extremes():
    vals = [1.0] + [2.0] * 8 + [50.0]
    assert trimmed_mean(vals, 0.10) == pytest.approx(2.0)

def test_trimmed_mean_n5_equals_mean():
    vals = [1.1, 9.0, 2.5, 3.0, 1.4]
    assert trimmed_mean(vals, 0.10) == pytest.approx(sum(vals) / 5)

def test_trimmed_mean_falls_back_when_everything_trimmed():
    assert trimmed_mean([1.0, 3.0], 0.5) == pytest.approx(2.0)

def test_medium_risk_matches_median():
    for vals in ([1.2], [3.0, 1.0], [1.5, 2.7, 1.01, 9.9, 1.33, 2.0], [5.0, 5.0, 1.0, 2.0, 8.0, 1.1, 1.9]):
        out = forecast(vals).as_dict()
        assert out['mediumRiskOdd'] == out['median'] == describe(vals).as_dict()['median']

def test_unknown_mode():
    with pytest.raises(ValueError):
        predict([1.0], mode="oracle")

def test_moving_window_rejects_empty_window():
    with pytest.raises(ValueError):
        moving_window_mean([], window=0)
    with pytest.raises(ValueError):
        predict([1.0, 2.0], mode=MOVING_WINDOW, window=0)
