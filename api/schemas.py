"""
Pydantic request and response models for the API.

All computed responses include a data_timestamp.
"""

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, Field

# Amounts may be sent as numbers or as typed text ("1,250,000.50")
Amount = Optional[Union[float, str]]


class TimestampedResponse(BaseModel):
    """Base response with timestamp."""
    data_timestamp: datetime = Field(
        default_factory=datetime.now,
        description="When this response was computed",
    )


# ============ Request Models ============

class FinancialInputsRequest(BaseModel):
    """Balance sheet figures for one period."""
    current_assets: Amount = None
    current_liabilities: Amount = None
    inventory: Amount = None
    total_assets: Amount = None
    total_liabilities: Amount = None
    shareholders_equity: Amount = None

    def amounts(self) -> dict[str, Amount]:
        return self.model_dump()


class AnalysisRequest(FinancialInputsRequest):
    """Full analysis request: figures plus report metadata."""
    company_ticker: str = ""
    currency: Optional[str] = None
    report_date: Optional[str] = None

    def amounts(self) -> dict[str, Amount]:
        return self.model_dump(exclude={"company_ticker", "currency", "report_date"})


# ============ Ratio Models ============

class RatioValue(BaseModel):
    """One computed ratio."""
    key: str
    name: str
    category: str
    description: str
    value: Optional[float] = None
    display_value: str
    rating: Optional[str] = None
    classification: str


class RatioSet(BaseModel):
    """The four ratios of one computation."""
    current_ratio: RatioValue
    quick_ratio: RatioValue
    debt_to_equity: RatioValue
    debt_to_assets: RatioValue


class RatiosResponse(TimestampedResponse):
    """Ratios response."""
    ratios: RatioSet


class GuideBand(BaseModel):
    range: str
    rating: str
    emoji: str


class GuideEntry(BaseModel):
    """Threshold ranges of one ratio."""
    key: str
    name: str
    category: str
    bands: list[GuideBand]


class GuideResponse(BaseModel):
    """Interpretation guide response."""
    guide: list[GuideEntry]
    disclaimer: str


# ============ Report Models ============

class InputEcho(BaseModel):
    """An input field as shown on the report."""
    key: str
    label: str
    display: str


class ReportResponse(TimestampedResponse):
    """A complete analysis report."""
    title: str
    company_ticker: str
    currency: str
    currency_symbol: str
    report_date: str
    inputs: list[InputEcho]
    ratios: RatioSet
    guide: list[GuideEntry]
    disclaimer: str


# ============ Currency Models ============

class CurrencyItem(BaseModel):
    code: str
    symbol: str
    name: str


class CurrencyListResponse(BaseModel):
    """Supported currencies."""
    default: str
    currencies: list[CurrencyItem]


# ============ Generic Models ============

class ErrorResponse(BaseModel):
    """Error response."""
    error: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
