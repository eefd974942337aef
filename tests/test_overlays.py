"""
Unit tests for overlay dispatch.

Tests cover:
- Parameter resolution (defaults, period, extra parameters)
- Output line names per overlay type
- Errors for unknown types and parameters
"""

import pytest

from config.schema import IndicatorDefaultsConfig
from domain import InsufficientDataError, InvalidParameterError, OHLCBar, OverlayType, PriceSeries
from domain.indicators import bollinger_bands, macd, sma, stochastic
from domain.overlays import (
    OverlaySpec,
    compute_overlay,
    default_name,
    default_parameters,
    resolve_parameters,
)


@pytest.fixture
def defaults():
    return IndicatorDefaultsConfig()


@pytest.fixture
def prices():
    closes = [100 + (i % 7) - (i % 3) + i * 0.5 for i in range(60)]
    bars = [
        OHLCBar(
            open=c,
            high=c + 1.0,
            low=c - 1.0,
            close=c,
            volume=None if i % 10 == 0 else 1000 + i,
        )
        for i, c in enumerate(closes)
    ]
    return PriceSeries.from_bars(bars)


class TestParameters:
    """Tests for parameter resolution."""

    def test_defaults(self, defaults):
        assert default_parameters(OverlayType.MACD, defaults) == {"fast": 12, "slow": 26, "signal": 9}
        assert default_parameters(OverlayType.VOLUME, defaults) == {}

    def test_period_maps_to_main_parameter(self, defaults):
        spec = OverlaySpec(type=OverlayType.STOCHASTIC, period=5)
        assert resolve_parameters(spec, defaults) == {"k_period": 5, "d_period": 3}

    def test_parameters_override_period(self, defaults):
        spec = OverlaySpec(type=OverlayType.SMA, period=5, parameters={"period": 8})
        assert resolve_parameters(spec, defaults) == {"period": 8}

    def test_unknown_parameter(self, defaults):
        spec = OverlaySpec(type=OverlayType.RSI, parameters={"window": 3})
        with pytest.raises(InvalidParameterError) as exc_info:
            resolve_parameters(spec, defaults)
        assert exc_info.value.parameter == "window"

    def test_period_not_supported_for_macd(self, defaults):
        spec = OverlaySpec(type=OverlayType.MACD, period=10)
        with pytest.raises(InvalidParameterError):
            resolve_parameters(spec, defaults)

    def test_type_from_string(self):
        assert OverlaySpec(type="Bollinger").type == OverlayType.BOLLINGER_BANDS

    def test_unknown_type(self):
        with pytest.raises(InvalidParameterError):
            OverlaySpec(type="ichimoku")

    def test_default_name(self):
        assert default_name(OverlayType.SMA, {"period": 20}) == "SMA(20)"
        assert default_name(OverlayType.MACD, {"fast": 12, "slow": 26, "signal": 9}) == "MACD(12,26,9)"
        assert default_name(OverlayType.VOLUME, {}) == "Volume"


class TestCompute:
    """Tests for compute_overlay."""

    def test_sma(self, prices, defaults):
        result = compute_overlay(OverlaySpec(type=OverlayType.SMA, period=5), prices, defaults)
        assert result.name == "SMA(5)"
        assert result.series == {"sma": sma(prices.closes, 5)}
        assert len(result) == len(prices)

    def test_bollinger_lines(self, prices, defaults):
        spec = OverlaySpec(type=OverlayType.BOLLINGER_BANDS, parameters={"k": 1.5})
        result = compute_overlay(spec, prices, defaults)
        upper, middle, lower = bollinger_bands(prices.closes, 20, 1.5)
        assert result.series == {"upper": upper, "middle": middle, "lower": lower}
        assert result.parameters == {"period": 20, "k": 1.5}

    def test_macd_lines(self, prices, defaults):
        result = compute_overlay(OverlaySpec(type=OverlayType.MACD), prices, defaults)
        line, signal, histogram = macd(prices.closes)
        assert list(result.series) == ["macd", "signal", "histogram"]
        assert result.series["histogram"] == histogram

    def test_stochastic_lines(self, prices, defaults):
        result = compute_overlay(OverlaySpec(type=OverlayType.STOCHASTIC), prices, defaults)
        k, d = stochastic(prices.highs, prices.lows, prices.closes)
        assert result.series == {"k": k, "d": d}

    @pytest.mark.parametrize("overlay_type,line", [
        (OverlayType.EMA, "ema"),
        (OverlayType.RSI, "rsi"),
        (OverlayType.ATR, "atr"),
    ])
    def test_single_line_overlays(self, prices, defaults, overlay_type, line):
        result = compute_overlay(OverlaySpec(type=overlay_type), prices, defaults)
        assert list(result.series) == [line]
        assert len(result.series[line]) == len(prices)

    def test_volume_passthrough(self, prices, defaults):
        result = compute_overlay(OverlaySpec(type=OverlayType.VOLUME), prices, defaults)
        assert result.series["volume"] == prices.volumes
        assert result.series["volume"] is not prices.volumes
        assert result.series["volume"][0] is None

    def test_accepts_bars(self, defaults):
        bars = [OHLCBar(open=c, high=c, low=c, close=c) for c in (1.0, 2.0, 3.0)]
        result = compute_overlay(OverlaySpec(type=OverlayType.SMA, period=2), bars, defaults)
        assert result.series["sma"] == [None, 1.5, 2.5]

    def test_custom_name(self, prices, defaults):
        spec = OverlaySpec(type=OverlayType.EMA, name="Fast EMA", period=8)
        assert compute_overlay(spec, prices, defaults).name == "Fast EMA"

    def test_configured_defaults_used(self, prices):
        defaults = IndicatorDefaultsConfig(rsi={"period": 5})
        result = compute_overlay(OverlaySpec(type=OverlayType.RSI), prices, defaults)
        assert result.parameters == {"period": 5}
        assert result.series["rsi"][5] is not None

    def test_engine_errors_propagate(self, prices, defaults):
        with pytest.raises(InsufficientDataError):
            compute_overlay(OverlaySpec(type=OverlayType.SMA, period=100), prices, defaults)
        with pytest.raises(InvalidParameterError):
            compute_overlay(OverlaySpec(type=OverlayType.SMA, period=0), prices, defaults)
