"""
Trade Book Module
=================
Synthetic USD/MYR FX exposure book: trade records, batch generation,
and book-level aggregation.

Generation Model (per trade):
    Notional:     N = 50,000 + U · 2,000,000          U ~ Uniform[0, 1)
    Direction:    long if U > 0.5 else short
    Maturity:     now + (⌊U · 365⌋ + 30) days
    Trade date:   now - U · 90 days
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────
# Constants
# ─────────────────────────────────────────────────────────────
LONG: str = "long"
SHORT: str = "short"
DIRECTIONS = (LONG, SHORT)

MIN_NOTIONAL_USD: float = 50_000.0
NOTIONAL_RANGE_USD: float = 2_000_000.0

MIN_DAYS_TO_MATURITY: int = 30
MATURITY_RANGE_DAYS: int = 365
TRADE_DATE_LOOKBACK_DAYS: int = 90

DEFAULT_TRADE_COUNT: int = 100
TRADE_ID_PREFIX: str = "FX-"


@dataclass(frozen=True)
class Trade:
    """One FX exposure in the book."""

    id: str
    notional_usd: float
    trade_date: datetime
    maturity_date: datetime
    direction: str

    @property
    def is_long(self) -> bool:
        return self.direction == LONG

    @property
    def sign(self) -> int:
        """+1 for long exposures, -1 for short."""
        return 1 if self.is_long else -1


def format_trade_id(index: int) -> str:
    """Sequential trade id, zero-padded to three digits (``FX-007``)."""
    return f"{TRADE_ID_PREFIX}{index:03d}"


def generate_fx_trades(
    count: int = DEFAULT_TRADE_COUNT,
    rng: Optional[np.random.Generator] = None,
    now: Optional[datetime] = None,
) -> List[Trade]:
    """
    Generate a synthetic book of FX exposures.

    Parameters
    ----------
    count : int
        Number of trades to generate (default: 100).
    rng : np.random.Generator, optional
        Random source. An unseeded generator is created when omitted;
        pass ``np.random.default_rng(seed)`` for reproducible books.
    now : datetime, optional
        Generation timestamp that trade and maturity dates are offset
        from (default: ``datetime.now()``).

    Returns
    -------
    list of Trade
        ``count`` trades with ids ``FX-000`` ... in generation order.

    Raises
    ------
    ValueError
        If ``count`` is not a non-negative integer.
    """
    if isinstance(count, bool) or not isinstance(count, (int, np.integer)):
        raise ValueError(f"Trade count must be an integer, got {count!r}")
    if count < 0:
        raise ValueError(f"Trade count must be non-negative, got {count}")

    if rng is None:
        rng = np.random.default_rng()
    if now is None:
        now = datetime.now()

    notionals = MIN_NOTIONAL_USD + rng.random(count) * NOTIONAL_RANGE_USD
    is_long = rng.random(count) > 0.5
    days_to_maturity = (
        np.floor(rng.random(count) * MATURITY_RANGE_DAYS).astype(int)
        + MIN_DAYS_TO_MATURITY
    )
    days_since_trade = rng.random(count) * TRADE_DATE_LOOKBACK_DAYS

    trades = [
        Trade(
            id=format_trade_id(i),
            notional_usd=float(notionals[i]),
            trade_date=now - timedelta(days=float(days_since_trade[i])),
            maturity_date=now + timedelta(days=int(days_to_maturity[i])),
            direction=LONG if is_long[i] else SHORT,
        )
        for i in range(count)
    ]

    logger.debug("Generated %d FX trades", len(trades))
    return trades


def trades_to_frame(trades: Sequence[Trade]) -> pd.DataFrame:
    """
    Tabulate a trade book.

    Parameters
    ----------
    trades : sequence of Trade
        Trade book.

    Returns
    -------
    pd.DataFrame
        Indexed by trade id with columns notional_usd, trade_date,
        maturity_date, direction.
    """
    frame = pd.DataFrame(
        [
            {
                "id": t.id,
                "notional_usd": t.notional_usd,
                "trade_date": t.trade_date,
                "maturity_date": t.maturity_date,
                "direction": t.direction,
            }
            for t in trades
        ],
        columns=["id", "notional_usd", "trade_date", "maturity_date", "direction"],
    )
    return frame.set_index("id")


def total_exposure(trades: Sequence[Trade]) -> float:
    """Sum of notionals, direction-agnostic."""
    return float(sum(t.notional_usd for t in trades))


def get_book_summary(trades: Sequence[Trade]) -> Dict[str, float]:
    """
    Compute exposure breakdown for a trade book.

    Returns
    -------
    dict
        Trade counts, gross/long/short/net exposure in USD.
    """
    long_exposure = sum(t.notional_usd for t in trades if t.is_long)
    short_exposure = sum(t.notional_usd for t in trades if not t.is_long)

    return {
        "num_trades": len(trades),
        "num_long": sum(1 for t in trades if t.is_long),
        "num_short": sum(1 for t in trades if not t.is_long),
        "gross_exposure_usd": float(long_exposure + short_exposure),
        "long_exposure_usd": float(long_exposure),
        "short_exposure_usd": float(short_exposure),
        "net_exposure_usd": float(long_exposure - short_exposure),
    }
