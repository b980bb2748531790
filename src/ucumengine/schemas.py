"""Response models used to serialise engine results for the command line."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .core.quantity import Quantity
from .core.types import ComparisonResult, UnitInfo, ValidationResult

UnitType = Literal["metric", "non-metric", "special", "arbitrary"]


class IssueModel(BaseModel):
    message: str
    position: Optional[int] = None
    context: str = ""
    suggestion: Optional[str] = None


class ValidationModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    code: str
    valid: bool
    errors: List[IssueModel] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidationModel":
        return cls.model_validate(result.to_dict())


class QuantityModel(BaseModel):
    value: float
    code: str
    unit: str

    @classmethod
    def from_quantity(cls, quantity: Quantity) -> "QuantityModel":
        return cls.model_validate(quantity.to_dict())


class ConversionModel(BaseModel):
    value: float
    from_code: str
    to_code: str
    result: float


class InfoModel(BaseModel):
    code: str
    dimension: Dict[str, int]
    type: UnitType
    magnitude: float
    canonical: List[Tuple[str, int]]
    is_metric: bool
    is_special: bool
    is_arbitrary: bool
    display: str

    @classmethod
    def from_info(cls, info: UnitInfo, display: str) -> "InfoModel":
        return cls.model_validate({**info.to_dict(), "display": display})


class ComparisonModel(BaseModel):
    comparison: Literal[-1, 0, 1]
    convertible: bool
    equal: bool
    description: str
    a: QuantityModel
    b: QuantityModel
    converted_b: Optional[float] = None

    @classmethod
    def from_result(cls, result: ComparisonResult) -> "ComparisonModel":
        return cls.model_validate(result.to_dict())


class ErrorModel(BaseModel):
    error: str
    message: str
    position: Optional[int] = None


__all__ = [
    "IssueModel",
    "ValidationModel",
    "QuantityModel",
    "ConversionModel",
    "InfoModel",
    "ComparisonModel",
    "ErrorModel",
]
