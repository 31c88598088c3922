"""Root error class for the sqla-xlsx error hierarchy."""

from __future__ import annotations

from typing import Any


class ExportError(Exception):
    """Root of every error raised while configuring or running an export.

    ``code`` is a stable slug per subclass; ``detail`` carries the values
    that explain the failure (column counts, setting names, ...). Chain the
    triggering exception with ``raise ... from exc``; :meth:`to_dict`
    reports it.
    """

    code: str = "export_error"

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail or {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form, suitable as structlog event fields."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["ExportError"]
