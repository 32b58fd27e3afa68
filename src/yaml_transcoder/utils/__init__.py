"""Utility functions for the YAML Transcoder."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
