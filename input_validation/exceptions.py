"""
Exceptions raised by the input validation engine and its integrations.

Input-quality problems never raise from ``validate_input``; they are returned
in the result. Only caller misuse (an unknown input type) raises directly.
"""

from django.utils.translation import gettext_lazy as _
from rest_framework import status
from rest_framework.exceptions import APIException

VALIDATION_ERROR = 'VALIDATION_ERROR'
UNSUPPORTED_TYPE = 'UNSUPPORTED_TYPE'


class UnsupportedInputTypeError(ValueError):
    """The engine was called with an input type it does not know."""

    code = UNSUPPORTED_TYPE

    def __init__(self, input_type):
        self.input_type = input_type
        super().__init__(f'Unsupported input type: {input_type!r}')


class InputValidationFailed(APIException):
    """
    400 response for rejected user input.

    ``detail`` carries the validation errors verbatim, either as a list of
    messages or as a field-to-messages mapping.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = _('Invalid input.')
    default_code = VALIDATION_ERROR
