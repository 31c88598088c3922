"""Domain errors – invalid export definitions supplied by the caller."""

from __future__ import annotations

from typing import Any

from sqla_xlsx.kernel.errors.base import ExportError


class DomainError(ExportError):
    """Raised when an export definition breaks a rule of the export model."""

    code = "domain_error"


class ValidationError(DomainError):
    """An export option does not meet validation rules.

    ``errors`` is a list of option-level validation failures.
    """

    code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class ColumnSpecError(ValidationError):
    """A column descriptor could not be understood."""

    code = "invalid_column"

    def __init__(self, descriptor: Any, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid column descriptor {descriptor!r}: {reason}",
            errors=[{"column": repr(descriptor), "reason": reason}],
            **kwargs,
        )
        self.descriptor = descriptor


class HeaderCountMismatchError(ValidationError):
    """Explicit ``headers`` do not line up with the column list."""

    code = "header_count_mismatch"

    def __init__(self, expected: int, actual: int, **kwargs: Any) -> None:
        super().__init__(
            f"Expected {expected} headers, got {actual}",
            detail={"expected": expected, "actual": actual},
            **kwargs,
        )
        self.expected = expected
        self.actual = actual


class StyleError(ValidationError):
    """A style definition cannot be registered with the workbook."""

    code = "invalid_style"


__all__ = [
    "ColumnSpecError",
    "DomainError",
    "HeaderCountMismatchError",
    "StyleError",
    "ValidationError",
]
