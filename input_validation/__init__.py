"""
Input Validation and Sanitization App

This Django app decides whether untrusted client input looks like an
injection payload (SQL, NoSQL, script, path traversal) and always produces an
HTML-escaped rendering of it that is safe to store and display.
"""

from .patterns import has_path_traversal_pattern, has_sql_injection_pattern, has_xss_pattern
from .sanitizers import sanitize
from .validators import InputType, ValidationResult, validate_input

__all__ = [
    'InputType',
    'ValidationResult',
    'has_path_traversal_pattern',
    'has_sql_injection_pattern',
    'has_xss_pattern',
    'sanitize',
    'validate_input',
]
