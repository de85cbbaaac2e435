from django.apps import AppConfig


class InputValidationConfig(AppConfig):
    """
    Configuration for the Input Validation app.

    This app provides:
    - Heuristic detection of SQL, NoSQL, script and path traversal payloads
    - HTML entity sanitization of untrusted text
    - validate_input, combining both into one result per field
    - DRF fields and serializer mixins that apply it at the request boundary
    """
    name = 'input_validation'
    verbose_name = 'Input Validation & Sanitization'

    def ready(self):
        """Register system checks."""
        from . import checks  # noqa: F401
