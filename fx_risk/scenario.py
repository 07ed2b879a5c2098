"""
Scenario Module
===============
Immutable scenario parameters and the derived risk scenario that the
engine evaluates.

Each parameter change produces a new ``ScenarioParameters`` value; the
caller owns any change detection or memoization.

Derived Quantity:
    S_shocked = S · (1 + (Δr_bps / 10,000) · horizon_days / 365)
"""

import dataclasses
import math
import numbers
import warnings
from dataclasses import dataclass
from typing import Dict, Tuple

from fx_risk.rates import calculate_shocked_fx_rate


# ─────────────────────────────────────────────────────────────
# Constants
# ─────────────────────────────────────────────────────────────
DAYS_PER_YEAR: int = 365

# Sane ranges (inclusive) for interactive use. Values outside them are
# accepted with a warning.
PARAMETER_BOUNDS: Dict[str, Tuple[float, float]] = {
    "current_fx_rate": (3.5, 5.5),
    "interest_rate_shock": (-500, 500),
    "volatility": (0.05, 0.50),
    "number_of_trades": (50, 500),
    "time_horizon": (1, 365),
}


@dataclass(frozen=True)
class ScenarioParameters:
    """User-facing simulation inputs."""

    current_fx_rate: float = 4.65       # MYR per USD
    interest_rate_shock: int = 200      # bps
    volatility: float = 0.15            # annualized
    number_of_trades: int = 100
    time_horizon: int = 30              # days

    def replace(self, **changes) -> "ScenarioParameters":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)


DEFAULT_PARAMETERS = ScenarioParameters()


@dataclass(frozen=True)
class RiskScenario:
    """One hypothetical market state."""

    current_fx_rate: float
    shocked_fx_rate: float
    interest_rate_shock: int
    volatility: float


def validate_parameters(params: ScenarioParameters) -> ScenarioParameters:
    """
    Check parameter shape and warn on values outside the sane ranges.

    Parameters
    ----------
    params : ScenarioParameters
        Parameters to check.

    Returns
    -------
    ScenarioParameters
        The same parameters, unchanged.

    Raises
    ------
    ValueError
        If a field is non-numeric or non-finite, or the trade count is
        not a non-negative integer.
    """
    for field in dataclasses.fields(params):
        value = getattr(params, field.name)
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise ValueError(f"{field.name} must be numeric, got {value!r}")
        if not math.isfinite(value):
            raise ValueError(f"{field.name} must be finite, got {value!r}")

    if not isinstance(params.number_of_trades, numbers.Integral):
        raise ValueError(
            f"number_of_trades must be an integer, got {params.number_of_trades!r}"
        )
    if params.number_of_trades < 0:
        raise ValueError(
            f"number_of_trades must be non-negative, got {params.number_of_trades}"
        )

    for name, (low, high) in PARAMETER_BOUNDS.items():
        value = getattr(params, name)
        if not low <= value <= high:
            warnings.warn(
                f"{name}={value} is outside the expected range [{low}, {high}]",
                UserWarning,
                stacklevel=2,
            )

    return params


def build_risk_scenario(params: ScenarioParameters = DEFAULT_PARAMETERS) -> RiskScenario:
    """
    Derive the risk scenario for a parameter snapshot.

    The shocked rate applies the rate shock over ``time_horizon / 365``
    years.
    """
    shocked_rate = calculate_shocked_fx_rate(
        params.current_fx_rate,
        params.interest_rate_shock,
        params.time_horizon / DAYS_PER_YEAR,
    )

    return RiskScenario(
        current_fx_rate=params.current_fx_rate,
        shocked_fx_rate=shocked_rate,
        interest_rate_shock=params.interest_rate_shock,
        volatility=params.volatility,
    )
