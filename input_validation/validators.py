"""
Input validation entry points.

``validate_input`` is the single call request handlers make for each untrusted
field. It always returns a ``ValidationResult`` carrying:
- the verdict (``is_valid``)
- the ordered error messages (threat checks first, then format checks)
- the sanitized value, populated even when the input is rejected

Handlers must store and render ``sanitized``, never the raw value.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Tuple, Union

from django.core.exceptions import ImproperlyConfigured, ValidationError
from django.core.validators import EmailValidator, URLValidator
from django.utils.deconstruct import deconstructible

from .conf import get_setting
from .exceptions import VALIDATION_ERROR, InputValidationFailed, UnsupportedInputTypeError
from .patterns import PATH_TRAVERSAL_RULES, SQL_INJECTION_RULES, XSS_RULES, match_categories
from .sanitizers import sanitize

logger = logging.getLogger(__name__)


class InputType(str, Enum):
    """Logical kinds of field the validator understands."""

    TEXT = 'text'
    EMAIL = 'email'
    URL = 'url'
    PHONE = 'phone'
    NUMERIC = 'numeric'
    DATE = 'date'


MESSAGES = {
    'sql': 'Input contains potentially dangerous SQL patterns',
    'script': 'Input contains potentially dangerous script patterns',
    'path': 'Input contains potentially dangerous path patterns',
    'max_length': 'Must be no more than {max_length} characters',
    'email': 'Invalid email format',
    'url': 'Invalid URL format',
    'phone': 'Invalid phone number format',
    'numeric': 'Must be a number',
    'date': 'Invalid date',
}


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    errors: Tuple[str, ...]
    sanitized: str

    def as_dict(self) -> Dict[str, Any]:
        """Client-facing representation."""
        return {
            'isValid': self.is_valid,
            'errors': list(self.errors),
            'sanitized': self.sanitized,
        }


PHONE_PATTERN = re.compile(r'^[\d\s\-+()]+$')
NUMERIC_PATTERN = re.compile(r'^[+-]?\d+(?:\.\d+)?$')
DATE_PATTERN = re.compile(r'^(\d{4})-(\d{2})-(\d{2})$')

_email_validator = EmailValidator()
_url_validator = URLValidator(schemes=['http', 'https'])


def _exceeds(value: str, setting: str) -> bool:
    max_length = get_setting(setting)
    return max_length is not None and len(value) > max_length


def _check_text(value: str) -> List[str]:
    if _exceeds(value, 'TEXT_MAX_LENGTH'):
        return [MESSAGES['max_length'].format(max_length=get_setting('TEXT_MAX_LENGTH'))]
    return []


def _check_email(value: str) -> List[str]:
    # CR/LF would allow header injection; strip() would hide trailing ones
    if '\r' in value or '\n' in value:
        return [MESSAGES['email']]

    value = value.strip()
    if value.count('@') != 1:
        return [MESSAGES['email']]

    try:
        _email_validator(value)
    except ValidationError:
        return [MESSAGES['email']]

    if _exceeds(value, 'EMAIL_MAX_LENGTH'):
        return [MESSAGES['email']]

    return []


def _check_url(value: str) -> List[str]:
    value = value.strip()
    if _exceeds(value, 'URL_MAX_LENGTH'):
        return [MESSAGES['url']]

    try:
        _url_validator(value)
    except ValidationError:
        return [MESSAGES['url']]

    return []


def _check_phone(value: str) -> List[str]:
    value = value.strip()
    if not PHONE_PATTERN.match(value) or not any(char.isdigit() for char in value):
        return [MESSAGES['phone']]
    return []


def _check_numeric(value: str) -> List[str]:
    if not NUMERIC_PATTERN.match(value.strip()):
        return [MESSAGES['numeric']]
    return []


def _check_date(value: str) -> List[str]:
    match = DATE_PATTERN.match(value.strip())
    if not match:
        return [MESSAGES['date']]

    year, month, day = (int(part) for part in match.groups())
    try:
        date(year, month, day)
    except ValueError:
        return [MESSAGES['date']]

    return []


FORMAT_CHECKS: Dict[InputType, Callable[[str], List[str]]] = {
    InputType.TEXT: _check_text,
    InputType.EMAIL: _check_email,
    InputType.URL: _check_url,
    InputType.PHONE: _check_phone,
    InputType.NUMERIC: _check_numeric,
    InputType.DATE: _check_date,
}

_missing_checks = set(InputType) - set(FORMAT_CHECKS)
if _missing_checks:
    raise ImproperlyConfigured(
        f'No format check registered for: {sorted(t.value for t in _missing_checks)}'
    )


def coerce_input_type(input_type: Union[InputType, str]) -> InputType:
    if isinstance(input_type, InputType):
        return input_type

    try:
        return InputType(input_type)
    except (ValueError, TypeError):
        logger.error(f"validate_input called with unsupported type {input_type!r}")
        raise UnsupportedInputTypeError(input_type) from None


def _threat_errors(value: str) -> List[str]:
    errors = []
    detected = []

    # Order here is the order of the messages in ValidationResult.errors
    checks = (
        ('sql', SQL_INJECTION_RULES, True),
        ('script', XSS_RULES, get_setting('CHECK_XSS')),
        ('path', PATH_TRAVERSAL_RULES, get_setting('CHECK_PATH_TRAVERSAL')),
    )

    for message_key, rules, enabled in checks:
        if not enabled:
            continue
        categories = match_categories(value, rules)
        if categories:
            errors.append(MESSAGES[message_key])
            detected.extend(categories)

    if detected and get_setting('LOG_DETECTIONS'):
        logger.warning(
            f"Input rejected: matched {', '.join(detected)} (length={len(value)})"
        )

    return errors


def validate_input(value: str, input_type: Union[InputType, str] = InputType.TEXT) -> ValidationResult:
    """
    Validate and sanitize one untrusted field.

    Detection always runs on the raw value; escaping first could split the
    keyword and quote adjacency the rules look for.

    Args:
        value: Raw input string
        input_type: Declared field kind (InputType member or its value)

    Returns:
        ValidationResult with verdict, ordered errors and sanitized text

    Raises:
        UnsupportedInputTypeError: input_type is not an InputType
        TypeError: value is not a string
    """
    input_type = coerce_input_type(input_type)

    if not isinstance(value, str):
        raise TypeError(f'validate_input expects a string, got {type(value).__name__}')

    sanitized = sanitize(value)

    errors = _threat_errors(value)
    errors.extend(FORMAT_CHECKS[input_type](value))

    return ValidationResult(
        is_valid=not errors,
        errors=tuple(errors),
        sanitized=sanitized,
    )


def validate_payload(
    data: Mapping[str, Any],
    field_types: Mapping[str, Union[InputType, str]],
) -> Dict[str, ValidationResult]:
    """
    Validate every declared field of a submitted payload.

    Fields that are missing or None are skipped; other non-string values are
    converted with str() first.

    Args:
        data: Submitted form or JSON data
        field_types: Field name to input type

    Returns:
        Field name to ValidationResult, in field_types order
    """
    results = {}

    for field_name, input_type in field_types.items():
        value = data.get(field_name)
        if value is None:
            continue
        if not isinstance(value, str):
            value = str(value)
        results[field_name] = validate_input(value, input_type)

    return results


def collect_errors(results: Mapping[str, ValidationResult]) -> Dict[str, List[str]]:
    """Field-to-messages mapping for every invalid result."""
    return {
        field_name: list(result.errors)
        for field_name, result in results.items()
        if not result.is_valid
    }


def validate_or_raise(value: str, input_type: Union[InputType, str] = InputType.TEXT) -> str:
    """
    Return the sanitized value or raise a 400 carrying the errors.

    For plain API views that do not go through a serializer.
    """
    result = validate_input(value, input_type)
    if not result.is_valid:
        raise InputValidationFailed(detail=list(result.errors))
    return result.sanitized


@deconstructible
class InjectionPatternValidator:
    """
    Django validator that rejects values failing validate_input.

    Usable on model and form fields:

        comment = models.TextField(validators=[InjectionPatternValidator()])
    """

    code = VALIDATION_ERROR

    def __init__(self, input_type: Union[InputType, str] = InputType.TEXT):
        self.input_type = coerce_input_type(input_type)

    def __call__(self, value: Any) -> None:
        if not isinstance(value, str):
            return

        result = validate_input(value, self.input_type)
        if not result.is_valid:
            raise ValidationError(
                [ValidationError(message, code=self.code) for message in result.errors]
            )

    def __eq__(self, other):
        return isinstance(other, InjectionPatternValidator) and self.input_type == other.input_type

    def __hash__(self):
        return hash((type(self), self.input_type))
