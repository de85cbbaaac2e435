"""Configuration for input_validation."""

from typing import Any, Dict

# Defaults, overridable through the INPUT_VALIDATION settings dict
DEFAULTS: Dict[str, Any] = {
    'TEXT_MAX_LENGTH': 1000,
    'EMAIL_MAX_LENGTH': 254,  # RFC 5321
    'URL_MAX_LENGTH': 2048,
    'CHECK_XSS': True,
    'CHECK_PATH_TRAVERSAL': True,
    'LOG_DETECTIONS': True,
}


def get_setting(key: str, default: Any = None) -> Any:
    """
    Get an input validation setting from Django settings or use the default.

    Args:
        key: Setting name (e.g., 'TEXT_MAX_LENGTH')
        default: Value returned when neither settings nor DEFAULTS define the key

    Returns:
        The setting value or default
    """
    from django.conf import settings

    overrides = getattr(settings, 'INPUT_VALIDATION', None) or {}

    if key in overrides:
        return overrides[key]

    return DEFAULTS.get(key, default)
