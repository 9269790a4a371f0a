"""
Activity record and parse result.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import StatusCode
from .money import to_output

ISIN_PATTERN = r"^[A-Z]{2}(?![A-Z]{10})[A-Z0-9]{10}$"


class ActivityType(str, Enum):
    BUY = "Buy"
    SELL = "Sell"
    DIVIDEND = "Dividend"


class Activity(BaseModel):
    """
    One normalized financial event extracted from a document.

    Monetary fields are exact Decimals; they are converted to floats only by
    to_output(). Optional fields are either present and valid or None.
    """

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, extra="forbid", regex_engine="python-re"
    )

    broker: str = Field(min_length=1)
    type: ActivityType
    date: dt.date
    datetime: Optional[dt.datetime] = None
    isin: Optional[str] = Field(default=None, pattern=ISIN_PATTERN)
    wkn: Optional[str] = None
    company: str = Field(min_length=1)
    shares: Decimal = Field(gt=0)
    price: Decimal = Field(ge=0)
    amount: Decimal
    fee: Decimal = Field(ge=0)
    tax: Decimal = Field(ge=0)
    fx_rate: Optional[Decimal] = Field(default=None, gt=0, alias="fxRate")
    foreign_currency: Optional[str] = Field(default=None, alias="foreignCurrency")

    @field_validator("company", "wkn", "foreign_currency", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
        return v

    @model_validator(mode="after")
    def check_consistency(self) -> "Activity":
        if (self.fx_rate is None) != (self.foreign_currency is None):
            raise ValueError("fxRate and foreignCurrency must be present together")
        if self.type in (ActivityType.BUY, ActivityType.SELL) and not (self.isin or self.wkn):
            raise ValueError("Buy and Sell activities need an ISIN or a WKN")
        return self

    def to_output(self) -> dict[str, Any]:
        """Serialized record: floats for money, ISO strings, camelCase keys, no empty optionals."""
        record: dict[str, Any] = {
            "broker": self.broker,
            "type": self.type.value,
            "date": self.date.isoformat(),
            "company": self.company,
            "shares": to_output(self.shares),
            "price": to_output(self.price),
            "amount": to_output(self.amount),
            "fee": to_output(self.fee),
            "tax": to_output(self.tax),
        }
        if self.datetime is not None:
            record["datetime"] = self.datetime.strftime("%Y-%m-%dT%H:%M:%SZ")
        if self.isin:
            record["isin"] = self.isin
        if self.wkn:
            record["wkn"] = self.wkn
        if self.fx_rate is not None:
            record["fxRate"] = to_output(self.fx_rate)
            record["foreignCurrency"] = self.foreign_currency
        return record


@dataclass(frozen=True)
class ParseResult:
    activities: tuple[Activity, ...] = field(default_factory=tuple)
    status: StatusCode = StatusCode.SUCCESS

    @property
    def ok(self) -> bool:
        return self.status == StatusCode.SUCCESS

    def to_dict(self) -> dict[str, Any]:
        return {
            "activities": [a.to_output() for a in self.activities],
            "status": int(self.status),
        }

    @classmethod
    def failed(cls, status: StatusCode = StatusCode.EXTRACTION_FAILED) -> "ParseResult":
        return cls((), status)


__all__ = ["ISIN_PATTERN", "ActivityType", "Activity", "ParseResult"]
