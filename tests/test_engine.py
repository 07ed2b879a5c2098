"""Tests for scenario building, the risk aggregator and sensitivity curves."""

import warnings
from datetime import datetime, timedelta

import numpy as np
import pytest

from fx_risk.engine import AVERAGE_MATURITY_YEARS, RiskMetrics, calculate_risk_metrics
from fx_risk.hedging import calculate_optimal_hedge_ratio
from fx_risk.pnl import calculate_unhedged_pnl
from fx_risk.reporting import LOSS_DISTRIBUTION, classify_pnl, loss_distribution, risk_badge
from fx_risk.risk_metrics import calculate_var
from fx_risk.scenario import (
    DEFAULT_PARAMETERS,
    RiskScenario,
    ScenarioParameters,
    build_risk_scenario,
    validate_parameters,
)
from fx_risk.sensitivity import generate_pnl_sensitivity
from fx_risk.trades import LONG, SHORT, Trade, generate_fx_trades

NOW = datetime(2024, 6, 1)


@pytest.fixture
def single_long():
    return [Trade("FX-000", 1_000_000, NOW - timedelta(days=5), NOW + timedelta(days=60), LONG)]


@pytest.fixture
def book():
    return generate_fx_trades(100, rng=np.random.default_rng(42), now=NOW)


class TestScenario:
    """Tests for scenario parameters and derivation."""

    def test_defaults(self):
        params = ScenarioParameters()
        assert params.current_fx_rate == 4.65
        assert params.interest_rate_shock == 200
        assert params.volatility == 0.15
        assert params.number_of_trades == 100
        assert params.time_horizon == 30

    def test_replace_returns_new_snapshot(self):
        updated = DEFAULT_PARAMETERS.replace(volatility=0.3)
        assert updated.volatility == 0.3
        assert DEFAULT_PARAMETERS.volatility == 0.15
        assert updated != DEFAULT_PARAMETERS

    def test_build_scenario(self):
        scenario = build_risk_scenario(DEFAULT_PARAMETERS)
        assert scenario.current_fx_rate == 4.65
        assert scenario.shocked_fx_rate == pytest.approx(4.65 * (1 + 0.02 * 30 / 365))
        assert scenario.interest_rate_shock == 200
        assert scenario.volatility == 0.15

    def test_zero_shock_scenario(self):
        scenario = build_risk_scenario(DEFAULT_PARAMETERS.replace(interest_rate_shock=0))
        assert scenario.shocked_fx_rate == scenario.current_fx_rate

    def test_validate_in_range_no_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert validate_parameters(DEFAULT_PARAMETERS) is DEFAULT_PARAMETERS

    @pytest.mark.parametrize(
        "changes",
        [
            {"current_fx_rate": 6.0},
            {"interest_rate_shock": -750},
            {"volatility": 0.9},
            {"number_of_trades": 10},
            {"time_horizon": 400},
        ],
    )
    def test_validate_out_of_range_warns(self, changes):
        params = DEFAULT_PARAMETERS.replace(**changes)
        field = next(iter(changes))
        with pytest.warns(UserWarning, match=field):
            validate_parameters(params)

    @pytest.mark.parametrize(
        "changes",
        [
            {"current_fx_rate": "4.65"},
            {"volatility": float("nan")},
            {"interest_rate_shock": float("inf")},
            {"number_of_trades": 100.5},
            {"number_of_trades": -5},
            {"time_horizon": None},
        ],
    )
    def test_validate_malformed_raises(self, changes):
        with pytest.raises(ValueError):
            validate_parameters(DEFAULT_PARAMETERS.replace(**changes))


class TestRiskMetrics:
    """Tests for the full aggregation pipeline."""

    def test_single_trade_scenario(self, single_long):
        scenario = build_risk_scenario(DEFAULT_PARAMETERS)
        metrics = calculate_risk_metrics(single_long, scenario)

        assert metrics.total_exposure_usd == 1_000_000
        assert metrics.unhedged_pnl == pytest.approx(7_644, abs=1)
        assert metrics.total_pnl == metrics.unhedged_pnl

        forward_rate = 4.65 * (1 + 0.02 * AVERAGE_MATURITY_YEARS)
        expected_cost = 1_000_000 * (forward_rate - 4.65)
        assert metrics.hedge_cost == pytest.approx(expected_cost)

        expected_ratio = calculate_optimal_hedge_ratio(1_000_000, 0.15, expected_cost)
        assert metrics.optimal_hedge_ratio == pytest.approx(expected_ratio)
        assert metrics.hedged_pnl == pytest.approx(
            metrics.unhedged_pnl * (1 - expected_ratio) - expected_cost * expected_ratio
        )
        assert metrics.value_at_risk == pytest.approx(calculate_var(1_000_000, 0.15))

    def test_book_scenario_invariants(self, book):
        scenario = build_risk_scenario(DEFAULT_PARAMETERS)
        metrics = calculate_risk_metrics(book, scenario)

        assert metrics.total_exposure_usd == pytest.approx(sum(t.notional_usd for t in book))
        assert metrics.unhedged_pnl == pytest.approx(
            calculate_unhedged_pnl(book, scenario.current_fx_rate, scenario.shocked_fx_rate)
        )
        assert 0.0 <= metrics.optimal_hedge_ratio <= 1.0
        assert metrics.value_at_risk >= 0

    def test_empty_book(self):
        scenario = build_risk_scenario(DEFAULT_PARAMETERS)
        metrics = calculate_risk_metrics([], scenario)

        assert metrics.total_exposure_usd == 0.0
        assert metrics.unhedged_pnl == 0.0
        assert metrics.hedge_cost == 0.0
        assert metrics.optimal_hedge_ratio == 1.0
        assert metrics.hedged_pnl == 0.0
        assert metrics.value_at_risk == 0.0

    def test_empty_book_zero_volatility(self):
        scenario = RiskScenario(4.65, 4.65, 0, 0.0)
        metrics = calculate_risk_metrics([], scenario)
        assert metrics.optimal_hedge_ratio == 0.0

    def test_out_of_range_inputs_do_not_crash(self, book):
        scenario = RiskScenario(
            current_fx_rate=7.0, shocked_fx_rate=2.0, interest_rate_shock=-900, volatility=-0.1
        )
        metrics = calculate_risk_metrics(book, scenario)
        assert 0.0 <= metrics.optimal_hedge_ratio <= 1.0

    def test_to_dict(self, single_long):
        metrics = calculate_risk_metrics(single_long, build_risk_scenario())
        as_dict = metrics.to_dict()
        assert set(as_dict) == {
            "total_exposure_usd",
            "total_pnl",
            "unhedged_pnl",
            "hedged_pnl",
            "optimal_hedge_ratio",
            "hedge_cost",
            "value_at_risk",
        }
        assert isinstance(metrics, RiskMetrics)

    def test_metrics_immutable(self, single_long):
        metrics = calculate_risk_metrics(single_long, build_risk_scenario())
        with pytest.raises(AttributeError):
            metrics.total_pnl = 0.0


class TestSensitivity:
    """Tests for the P&L sensitivity curve."""

    def test_shape(self, book):
        curve = generate_pnl_sensitivity(book, 4.65)
        assert len(curve) == 51
        assert list(curve.columns) == ["fx_rate", "pnl", "hedged_pnl"]

    def test_custom_steps(self, book):
        assert len(generate_pnl_sensitivity(book, 4.65, 0.2, steps=8)) == 9

    def test_numpy_integer_steps(self, book):
        curve = generate_pnl_sensitivity(book, 4.65, 0.5, np.int64(10))
        assert len(curve) == 11

    def test_strictly_increasing_and_symmetric(self, book):
        curve = generate_pnl_sensitivity(book, 4.65, 0.5, 50)
        assert curve["fx_rate"].is_monotonic_increasing
        assert curve["fx_rate"].diff().dropna().gt(0).all()
        assert curve["fx_rate"].iloc[0] == pytest.approx(4.15)
        assert curve["fx_rate"].iloc[-1] == pytest.approx(5.15)

    def test_midpoint_is_flat(self, book):
        curve = generate_pnl_sensitivity(book, 4.65, 0.5, 50)
        mid = curve.iloc[25]
        assert mid["fx_rate"] == pytest.approx(4.65)
        assert mid["pnl"] == pytest.approx(0.0, abs=1e-9)

    def test_values_in_millions(self, single_long):
        curve = generate_pnl_sensitivity(single_long, 4.65, 0.5, 50)
        assert curve["pnl"].iloc[-1] == pytest.approx(0.5)
        assert curve["pnl"].iloc[0] == pytest.approx(-0.5)

    def test_hedged_is_thirty_percent(self, book):
        curve = generate_pnl_sensitivity(book, 4.65)
        np.testing.assert_allclose(curve["hedged_pnl"], curve["pnl"] * 0.3)

    def test_short_book_slopes_down(self):
        trades = [Trade("FX-000", 2_000_000, NOW, NOW + timedelta(days=30), SHORT)]
        curve = generate_pnl_sensitivity(trades, 4.0, 0.25, 10)
        assert curve["pnl"].is_monotonic_decreasing

    @pytest.mark.parametrize("kwargs", [{"steps": 0}, {"steps": -3}, {"steps": 2.5}, {"shock_range": 0}])
    def test_invalid_arguments(self, book, kwargs):
        with pytest.raises(ValueError):
            generate_pnl_sensitivity(book, 4.65, **kwargs)


class TestReporting:
    """Tests for classification and the loss distribution table."""

    @pytest.mark.parametrize(
        "pnl,expected",
        [(1.0, "positive"), (0.0, "neutral"), (-5_000_000, "neutral"), (-10_000_001, "negative")],
    )
    def test_classify_pnl(self, pnl, expected):
        assert classify_pnl(pnl) == expected

    def test_risk_badge(self):
        assert risk_badge(-6_000_000) == "High Risk"
        assert risk_badge(-5_000_000) == "Moderate Risk"
        assert risk_badge(1_000) == "Moderate Risk"

    def test_loss_distribution(self):
        table = loss_distribution()
        assert list(table["scenario"]) == [row[0] for row in LOSS_DISTRIBUTION]
        assert table["probability"].sum() == pytest.approx(1.0)
        assert table["loss"].is_monotonic_decreasing
