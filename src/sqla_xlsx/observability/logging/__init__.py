"""Observability – structlog configuration and logger lookup."""
from sqla_xlsx.observability.logging.factory import JsonLoggerFactory
from sqla_xlsx.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
