"""
DRF integration for the input validation engine.

Serializers built from these pieces run ``validate_input`` at the request
boundary and hand the *sanitized* value to the view, so the raw value is never
stored or rendered.
"""

from typing import Any, Dict, Union

from rest_framework import serializers

from .exceptions import VALIDATION_ERROR
from .validators import (
    InputType,
    coerce_input_type,
    collect_errors,
    validate_input,
    validate_payload,
)


class ValidatedCharField(serializers.CharField):
    """
    CharField that rejects hostile input and returns the sanitized value.

    Built-in validators (max_length etc.) see the raw value; the engine runs
    after them and its sanitized output is what ends up in validated_data.
    """

    def __init__(self, *args, input_type: Union[InputType, str] = InputType.TEXT, **kwargs):
        self.input_type = coerce_input_type(input_type)
        # The engine inspects the value exactly as submitted
        kwargs.setdefault('trim_whitespace', False)
        super().__init__(*args, **kwargs)

    def run_validation(self, data: Any = serializers.empty) -> Any:
        value = super().run_validation(data)
        if not isinstance(value, str) or value == '':
            return value

        result = validate_input(value, self.input_type)
        if not result.is_valid:
            raise serializers.ValidationError(list(result.errors), code=VALIDATION_ERROR)

        return result.sanitized


class ValidatedSerializerMixin:
    """
    Mixin that validates declared fields with the engine in ``validate()``.

    Usage:
        class MySerializer(ValidatedSerializerMixin, serializers.Serializer):
            field_input_types = {'name': 'text', 'email': 'email'}
    """

    # Field name to InputType (or its value)
    field_input_types: Dict[str, Union[InputType, str]] = {}

    def validate(self, attrs: Dict[str, Any]) -> Dict[str, Any]:
        attrs = super().validate(attrs)  # type: ignore

        string_fields = {
            name: input_type
            for name, input_type in self.field_input_types.items()
            if isinstance(attrs.get(name), str) and attrs[name] != ''
        }
        results = validate_payload(attrs, string_fields)

        errors = collect_errors(results)
        if errors:
            raise serializers.ValidationError(errors, code=VALIDATION_ERROR)

        for name, result in results.items():
            attrs[name] = result.sanitized

        return attrs


# =============================================================================
# Example Serializers
# =============================================================================


class CommentSerializer(serializers.Serializer):
    """
    Comment body posted on a report.
    """

    comment = ValidatedCharField(max_length=500)


class CustomerSerializer(ValidatedSerializerMixin, serializers.Serializer):
    """
    Customer record creation.
    """

    field_input_types = {
        'company_name': InputType.TEXT,
        'contact_person': InputType.TEXT,
        'phone': InputType.PHONE,
        'email': InputType.EMAIL,
        'address': InputType.TEXT,
    }

    company_name = serializers.CharField(max_length=100, trim_whitespace=False)
    contact_person = serializers.CharField(max_length=100, trim_whitespace=False)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True)
    email = serializers.CharField(max_length=254, required=False, allow_blank=True)
    address = serializers.CharField(max_length=500, required=False, allow_blank=True, trim_whitespace=False)
