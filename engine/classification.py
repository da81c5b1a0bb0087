"""
Threshold tables that map a ratio value to a qualitative rating.

Each ratio owns an ordered tuple of bands. Bands are evaluated top-down and the
first whose predicate matches wins, so every value lands in exactly one band.
Liquidity ratios are "higher is better"; leverage ratios are "lower is better"
and are therefore evaluated in the reverse direction.

Boundaries are kept exactly as published in the interpretation guide, even
where inclusive/exclusive edges differ between ratios:

    Current          > 2.0 | [1.5, 2.0]   | [1.0, 1.5)   | [0.5, 1.0)   | < 0.5
    Quick            > 1.5 | [1.0, 1.5]   | [0.7, 1.0)   | [0.3, 0.7)   | < 0.3
    Debt-to-Equity   < 0.5 | [0.5, 1.0]   | (1.0, 2.0]   | (2.0, 5.0]   | > 5.0
    Debt-to-Assets   < 0.3 | [0.30, 0.50] | (0.50, 0.70] | (0.70, 0.90] | > 0.90
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable


class Rating(str, Enum):
    """Qualitative buckets, best first."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    CRITICAL = "Critical"

    @property
    def label(self) -> str:
        return self.value

    @property
    def emoji(self) -> str:
        return RATING_EMOJI[self]


RATING_EMOJI = {
    Rating.EXCELLENT: "🚀",
    Rating.GOOD: "👍",
    Rating.FAIR: "😐",
    Rating.POOR: "🚩",
    Rating.CRITICAL: "🚨",
}


@dataclass(frozen=True)
class Band:
    """One row of a threshold table."""

    rating: Rating
    matches: Callable[[float], bool]
    range_label: str


CURRENT_RATIO_BANDS: tuple[Band, ...] = (
    Band(Rating.EXCELLENT, lambda v: v > 2.0, "> 2.0"),
    Band(Rating.GOOD, lambda v: v >= 1.5, "1.5 - 2.0"),
    Band(Rating.FAIR, lambda v: v >= 1.0, "1.0 - 1.5"),
    Band(Rating.POOR, lambda v: v >= 0.5, "0.5 - 1.0"),
    Band(Rating.CRITICAL, lambda v: True, "< 0.5"),
)

QUICK_RATIO_BANDS: tuple[Band, ...] = (
    Band(Rating.EXCELLENT, lambda v: v > 1.5, "> 1.5"),
    Band(Rating.GOOD, lambda v: v >= 1.0, "1.0 - 1.5"),
    Band(Rating.FAIR, lambda v: v >= 0.7, "0.7 - 1.0"),
    Band(Rating.POOR, lambda v: v >= 0.3, "0.3 - 0.7"),
    Band(Rating.CRITICAL, lambda v: True, "< 0.3"),
)

DEBT_TO_EQUITY_BANDS: tuple[Band, ...] = (
    Band(Rating.EXCELLENT, lambda v: v < 0.5, "< 0.5"),
    Band(Rating.GOOD, lambda v: 0.5 <= v <= 1.0, "0.5 - 1.0"),
    Band(Rating.FAIR, lambda v: 1.0 < v <= 2.0, "1.0 - 2.0"),
    Band(Rating.POOR, lambda v: 2.0 < v <= 5.0, "2.0 - 5.0"),
    Band(Rating.CRITICAL, lambda v: True, "> 5.0"),
)

DEBT_TO_ASSETS_BANDS: tuple[Band, ...] = (
    Band(Rating.EXCELLENT, lambda v: v < 0.30, "< 0.30"),
    Band(Rating.GOOD, lambda v: 0.30 <= v <= 0.50, "0.30 - 0.50"),
    Band(Rating.FAIR, lambda v: 0.50 < v <= 0.70, "0.50 - 0.70"),
    Band(Rating.POOR, lambda v: 0.70 < v <= 0.90, "0.70 - 0.90"),
    Band(Rating.CRITICAL, lambda v: True, "> 0.90"),
)

BANDS_BY_RATIO: dict[str, tuple[Band, ...]] = {
    "current_ratio": CURRENT_RATIO_BANDS,
    "quick_ratio": QUICK_RATIO_BANDS,
    "debt_to_equity": DEBT_TO_EQUITY_BANDS,
    "debt_to_assets": DEBT_TO_ASSETS_BANDS,
}


def classify_value(value: float, bands: tuple[Band, ...]) -> Rating:
    """Return the rating of the first band matching ``value``."""
    for band in bands:
        if band.matches(value):
            return band.rating
    # Every table ends with a catch-all band
    raise ValueError(f"No band matched value {value!r}")


def classify(ratio_key: str, value: float) -> Rating:
    """
    Classify an unrounded ratio value.

    Args:
        ratio_key: One of ``current_ratio``, ``quick_ratio``,
            ``debt_to_equity``, ``debt_to_assets``
        value: The ratio value before rounding

    Raises:
        KeyError: If the ratio key is unknown
    """
    try:
        bands = BANDS_BY_RATIO[ratio_key]
    except KeyError:
        raise KeyError(f"Unknown ratio: {ratio_key}") from None
    return classify_value(value, bands)
