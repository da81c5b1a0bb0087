"""Ratio computation and classification engine."""

from engine.classification import Rating, classify
from engine.ratios import (
    FinancialInputs,
    RatioReport,
    RatioResult,
    ValidationError,
    compute_ratios,
    interpretation_guide,
)

__all__ = [
    "Rating",
    "classify",
    "FinancialInputs",
    "RatioReport",
    "RatioResult",
    "ValidationError",
    "compute_ratios",
    "interpretation_guide",
]
