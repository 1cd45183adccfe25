"""Logging setup for the auth panel.

Form contents are personal data: email addresses are redacted before they
reach a log line and passwords are never logged at all.
"""
import logging

from ..config import LOG_LEVEL

LOGGER_NAME = "auth_panel"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Configure the package logger once and return it."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Reflex re-imports the app module on hot reload
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    return logger


def redact_email(email: str) -> str:
    """Mask the local part of an address: 'jane@example.com' -> 'j***@example.com'."""
    local, sep, domain = email.partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"
