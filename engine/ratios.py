"""
Financial ratio computation engine.

Computes the four liquidity/solvency ratios of a single balance sheet and
classifies each one against its threshold table.

CONVENTIONS:
1. All six inputs must be finite numbers, otherwise nothing is computed
2. A zero denominator makes that ratio undefined; the other ratios still compute
3. Values are rounded to 2 decimals (half away from zero) for display only
4. Classification always uses the UNROUNDED value
"""

import math
import re
from dataclasses import dataclass, fields
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Callable, Iterator, Mapping, Optional, Union

from config.logging_config import get_logger
from engine.classification import BANDS_BY_RATIO, Band, Rating, classify_value

logger = get_logger(__name__)

VALIDATION_MESSAGE = "All fields must contain valid numeric values."

TWO_PLACES = Decimal("0.01")

# Leading currency markers accepted on numeric strings: "$", "MXN$", "C$", "€", "CHF" ...
_CURRENCY_PREFIX = re.compile(r"^(?:[A-Z]{0,3}\$|[€£¥₹₽]|CHF|R(?=[\d.\-]))")


class ValidationError(ValueError):
    """Raised when one or more inputs are not finite numbers."""

    def __init__(self, fields: Optional[list[str]] = None, message: str = VALIDATION_MESSAGE):
        super().__init__(message)
        self.message = message
        self.fields = list(fields or [])


@dataclass(frozen=True)
class FinancialInputs:
    """Balance sheet figures for one reporting period, in one currency."""

    current_assets: float
    current_liabilities: float
    inventory: float
    total_assets: float
    total_liabilities: float
    shareholders_equity: float

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def invalid_fields(self) -> list[str]:
        """Names of fields that are not finite real numbers."""
        invalid = []
        for name in self.field_names():
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                invalid.append(name)
            elif not math.isfinite(value):
                invalid.append(name)
        return invalid

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FinancialInputs":
        """
        Create FinancialInputs from a mapping of raw values.

        Values may be numbers or numeric strings with thousands separators
        and a leading currency symbol. CamelCase keys are accepted.

        Raises:
            ValidationError: If any field is missing or not a finite number
        """
        field_aliases = {
            "current_assets": ["current_assets", "currentAssets"],
            "current_liabilities": ["current_liabilities", "currentLiabilities"],
            "inventory": ["inventory", "inventories"],
            "total_assets": ["total_assets", "totalAssets"],
            "total_liabilities": ["total_liabilities", "totalLiabilities"],
            "shareholders_equity": [
                "shareholders_equity",
                "shareholdersEquity",
                "total_equity",
                "equity",
            ],
        }

        processed: dict[str, float] = {}
        invalid: list[str] = []
        for field_name in cls.field_names():
            value = None
            for alias in field_aliases[field_name]:
                if alias in data:
                    value = data[alias]
                    break

            parsed = parse_amount(value)
            if parsed is None:
                invalid.append(field_name)
            else:
                processed[field_name] = parsed

        if invalid:
            raise ValidationError(invalid)

        return cls(**processed)

    def to_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in self.field_names()}


def parse_amount(value: Any) -> Optional[float]:
    """
    Parse one input amount.

    Returns None for anything that is not a finite real number, including
    empty strings, NaN and infinities.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip().replace(",", "").replace(" ", "")
        text = _CURRENCY_PREFIX.sub("", text)
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    return number


def round_ratio(value: float) -> float:
    """Round to 2 decimals, half away from zero, on the shortest repr of ``value``."""
    if not math.isfinite(value):
        return value
    with localcontext() as ctx:
        # Enough digits to quantize any finite float
        ctx.prec = 400
        rounded = Decimal(repr(value)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    # Adding 0.0 turns -0.0 into 0.0
    return float(rounded) + 0.0


@dataclass(frozen=True)
class RatioDefinition:
    """Static description of one ratio."""

    key: str
    name: str
    category: str
    description: str
    numerator: Callable[[FinancialInputs], float]
    denominator: Callable[[FinancialInputs], float]
    zero_message: str

    @property
    def bands(self) -> tuple[Band, ...]:
        return BANDS_BY_RATIO[self.key]


RATIO_DEFINITIONS: tuple[RatioDefinition, ...] = (
    RatioDefinition(
        key="current_ratio",
        name="Current Ratio",
        category="liquidity",
        description=(
            "Measures the company's ability to pay its short-term debts "
            "with its most liquid assets."
        ),
        numerator=lambda i: i.current_assets,
        denominator=lambda i: i.current_liabilities,
        zero_message="current liabilities is zero",
    ),
    RatioDefinition(
        key="quick_ratio",
        name="Quick Ratio",
        category="liquidity",
        description=(
            "Measures the company's ability to pay its short-term debts "
            "without relying on inventory."
        ),
        numerator=lambda i: i.current_assets - i.inventory,
        denominator=lambda i: i.current_liabilities,
        zero_message="current liabilities is zero",
    ),
    RatioDefinition(
        key="debt_to_equity",
        name="Debt-to-Equity Ratio",
        category="solvency",
        description=(
            "Measures the share of financing that comes from debt versus "
            "the owners' capital."
        ),
        numerator=lambda i: i.total_liabilities,
        denominator=lambda i: i.shareholders_equity,
        zero_message="shareholders' equity is zero",
    ),
    RatioDefinition(
        key="debt_to_assets",
        name="Debt-to-Assets Ratio",
        category="solvency",
        description=(
            "Measures the percentage of the company's assets that is "
            "financed with debt."
        ),
        numerator=lambda i: i.total_liabilities,
        denominator=lambda i: i.total_assets,
        zero_message="total assets is zero",
    ),
)

DEFINITIONS_BY_KEY = {d.key: d for d in RATIO_DEFINITIONS}


@dataclass(frozen=True)
class RatioResult:
    """Outcome of one ratio: a rounded value and its classification."""

    key: str
    name: str
    category: str
    description: str
    value: Optional[float]
    raw_value: Optional[float]
    rating: Optional[Rating]
    classification: str

    @property
    def is_defined(self) -> bool:
        return self.value is not None

    @property
    def display_value(self) -> str:
        if self.value is None:
            return "N/A"
        return f"{self.value:.2f}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "name": self.name,
            "category": self.category,
            "description": self.description,
            "value": self.value,
            "display_value": self.display_value,
            "rating": self.rating.value if self.rating else None,
            "classification": self.classification,
        }


@dataclass(frozen=True)
class RatioReport:
    """The four ratio results of one computation."""

    current: RatioResult
    quick: RatioResult
    debt_to_equity: RatioResult
    debt_to_assets: RatioResult

    def __iter__(self) -> Iterator[RatioResult]:
        return iter((self.current, self.quick, self.debt_to_equity, self.debt_to_assets))

    def __len__(self) -> int:
        return 4

    def by_category(self, category: str) -> list[RatioResult]:
        return [r for r in self if r.category == category]

    def as_dict(self) -> dict[str, dict[str, Any]]:
        return {result.key: result.to_dict() for result in self}


def compute_ratio(definition: RatioDefinition, inputs: FinancialInputs) -> RatioResult:
    """Compute and classify a single ratio."""
    denominator = definition.denominator(inputs)

    if denominator == 0:
        logger.info(f"{definition.name} undefined: {definition.zero_message}")
        return RatioResult(
            key=definition.key,
            name=definition.name,
            category=definition.category,
            description=definition.description,
            value=None,
            raw_value=None,
            rating=None,
            classification=definition.zero_message,
        )

    raw = definition.numerator(inputs) / denominator
    rating = classify_value(raw, definition.bands)
    return RatioResult(
        key=definition.key,
        name=definition.name,
        category=definition.category,
        description=definition.description,
        value=round_ratio(raw),
        raw_value=raw,
        rating=rating,
        classification=rating.label,
    )


def compute_ratios(inputs: Union[FinancialInputs, Mapping[str, Any]]) -> RatioReport:
    """
    Compute all four ratios.

    Args:
        inputs: FinancialInputs, or a raw mapping parsed with
            FinancialInputs.from_dict

    Returns:
        RatioReport with the current, quick, debt-to-equity and
        debt-to-assets results

    Raises:
        ValidationError: If any input is not a finite number
    """
    if not isinstance(inputs, FinancialInputs):
        inputs = FinancialInputs.from_dict(inputs)

    invalid = inputs.invalid_fields()
    if invalid:
        raise ValidationError(invalid)

    results = {d.key: compute_ratio(d, inputs) for d in RATIO_DEFINITIONS}
    logger.debug(
        "Computed ratios: "
        + ", ".join(f"{key}={r.display_value} ({r.classification})" for key, r in results.items())
    )

    return RatioReport(
        current=results["current_ratio"],
        quick=results["quick_ratio"],
        debt_to_equity=results["debt_to_equity"],
        debt_to_assets=results["debt_to_assets"],
    )


def interpretation_guide() -> list[dict[str, Any]]:
    """
    Threshold ranges of every ratio, best bucket first.

    Useful for printing the guide next to a report.
    """
    guide = []
    for definition in RATIO_DEFINITIONS:
        guide.append(
            {
                "key": definition.key,
                "name": definition.name,
                "category": definition.category,
                "bands": [
                    {
                        "range": band.range_label,
                        "rating": band.rating.value,
                        "emoji": band.rating.emoji,
                    }
                    for band in definition.bands
                ],
            }
        )
    return guide
