"""Application-layer errors – problems wiring an export call together."""

from __future__ import annotations

from typing import Any

from sqla_xlsx.kernel.errors.base import ExportError


class ApplicationError(ExportError):
    """Cross-cutting application-layer concern."""

    code = "application_error"


class MissingSessionError(ApplicationError):
    """Records must be queried but no session was supplied."""

    code = "missing_session"

    def __init__(self, model: str, **kwargs: Any) -> None:
        super().__init__(
            f"{model}.to_xlsx() needs a session when no data is passed",
            **kwargs,
        )
        self.model = model


__all__ = ["ApplicationError", "MissingSessionError"]
