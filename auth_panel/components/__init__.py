"""Reusable UI components."""
from .fields import field_error, text_field, password_field, submit_button, mode_link

__all__ = ["field_error", "text_field", "password_field", "submit_button", "mode_link"]
