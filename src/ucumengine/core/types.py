"""Result and classification types shared across the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from .quantity import Quantity


class AtomKind(str, Enum):
    """Closed set of atom variants held by the registry."""

    BASE = "base"
    PROPORTIONAL = "proportional"
    SPECIAL = "special"
    ARBITRARY = "arbitrary"


class UnitKind(str, Enum):
    """Classification of a whole unit expression."""

    METRIC = "metric"
    NON_METRIC = "non-metric"
    SPECIAL = "special"
    ARBITRARY = "arbitrary"


@dataclass
class ValidationIssue:
    message: str
    position: Optional[int] = None
    context: str = ""
    suggestion: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "position": self.position,
            "context": self.context,
            "suggestion": self.suggestion,
        }


@dataclass
class ValidationResult:
    valid: bool
    code: str = ""
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, issue: ValidationIssue) -> None:
        self.errors.append(issue)
        self.valid = False

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "code": self.code,
            "errors": [issue.to_dict() for issue in self.errors],
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class UnitInfo:
    """Dimensional summary of a valid unit code."""

    code: str
    dimension: Dict[str, int]
    type: UnitKind
    magnitude: float
    canonical: List[Tuple[str, int]]
    is_metric: bool
    is_special: bool
    is_arbitrary: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "dimension": dict(self.dimension),
            "type": self.type.value,
            "magnitude": self.magnitude,
            "canonical": [list(pair) for pair in self.canonical],
            "is_metric": self.is_metric,
            "is_special": self.is_special,
            "is_arbitrary": self.is_arbitrary,
        }


@dataclass(frozen=True)
class ComparisonResult:
    comparison: int
    convertible: bool
    a: "Quantity"
    b: "Quantity"
    converted_b: Optional[float] = None

    @property
    def equal(self) -> bool:
        return self.convertible and self.comparison == 0

    @property
    def description(self) -> str:
        if not self.convertible:
            return "Not comparable (incompatible units)"
        if self.comparison > 0:
            return "Greater than"
        if self.comparison < 0:
            return "Less than"
        return "Equal"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "comparison": self.comparison,
            "convertible": self.convertible,
            "equal": self.equal,
            "description": self.description,
            "a": self.a.to_dict(),
            "b": self.b.to_dict(),
            "converted_b": self.converted_b,
        }
