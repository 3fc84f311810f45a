"""Utility functions and helpers."""

from .validation import validate_binary, validate_prefix, validate_text

__all__ = ['validate_binary', 'validate_prefix', 'validate_text']
