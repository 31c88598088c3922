"""Observability – structured logging."""
from sqla_xlsx.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
