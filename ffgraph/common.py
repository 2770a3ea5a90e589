"""Shared result and exception types used across ffgraph modules."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class ValidationResult:
    """Result of validating a filter graph or one of its nodes."""

    valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, msg: str) -> None:
        self.errors.append(msg)
        self.valid = False

    def add_warning(self, msg: str) -> None:
        self.warnings.append(msg)

    def merge(self, other: "ValidationResult") -> None:
        """Merge another ValidationResult into this one."""
        if not other.valid:
            self.valid = False
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class FilterGraphError(Exception):
    """Base class for ffgraph errors."""


class NodeVariantError(FilterGraphError, TypeError):
    """Raised when a node is narrowed to a variant it does not hold."""


class StrictValidationError(FilterGraphError):
    """Raised by strict compilation when graph validation reports errors."""

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__("; ".join(result.errors) or "Filter graph failed validation")
