"""
Django system checks for the INPUT_VALIDATION settings.

Run with:
    python manage.py check --tag input_validation
"""

from django.conf import settings
from django.core.checks import Error, Warning, register

from .conf import DEFAULTS

LENGTH_KEYS = ('TEXT_MAX_LENGTH', 'EMAIL_MAX_LENGTH', 'URL_MAX_LENGTH')
FLAG_KEYS = ('CHECK_XSS', 'CHECK_PATH_TRAVERSAL', 'LOG_DETECTIONS')


@register('input_validation')
def check_input_validation_settings(app_configs, **kwargs):
    """Check that INPUT_VALIDATION overrides are well-formed."""
    errors = []
    overrides = getattr(settings, 'INPUT_VALIDATION', None) or {}

    if not isinstance(overrides, dict):
        return [
            Error(
                'INPUT_VALIDATION must be a dict',
                hint=f'Got {type(overrides).__name__}',
                id='input_validation.E001',
            )
        ]

    for key in overrides:
        if key not in DEFAULTS:
            errors.append(
                Warning(
                    f'Unknown INPUT_VALIDATION key: {key}',
                    hint=f"Known keys: {', '.join(sorted(DEFAULTS))}",
                    id='input_validation.W001',
                )
            )

    for key in LENGTH_KEYS:
        value = overrides.get(key, DEFAULTS[key])
        # None disables the bound
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            errors.append(
                Error(
                    f'INPUT_VALIDATION[{key!r}] must be a positive integer or None',
                    id='input_validation.E002',
                )
            )

    for key in FLAG_KEYS:
        if not isinstance(overrides.get(key, DEFAULTS[key]), bool):
            errors.append(
                Error(
                    f'INPUT_VALIDATION[{key!r}] must be a boolean',
                    id='input_validation.E003',
                )
            )

    if overrides.get('CHECK_XSS') is False:
        errors.append(
            Warning(
                'Script pattern detection is disabled',
                hint='Sanitized values stay escaped, but <script> payloads are no longer rejected',
                id='input_validation.W002',
            )
        )

    return errors
