"""
Input sanitization utilities.

Sanitization here is entity encoding of the five characters that carry meaning
in HTML/markup contexts:

    &  ->  &amp;
    <  ->  &lt;
    >  ->  &gt;
    "  ->  &quot;
    '  ->  &#x27;

Nothing is ever stripped. A ``<script>`` tag survives as visible text with its
delimiters neutralized.

The transform is not idempotent: escaping already-escaped text encodes the
``&`` of each entity again. Apply it once, to the raw value, at the validation
boundary.
"""

import html
from typing import Any, Dict, List, Union


def sanitize(value: Any) -> Any:
    """
    Encode HTML-special characters in a raw string.

    Args:
        value: Raw input; only strings are encoded

    Returns:
        Display- and storage-safe string, or the value itself if not a string
    """
    if not isinstance(value, str):
        return value

    # html.escape replaces & first, so entities it produces are not re-encoded
    return html.escape(value, quote=True)


def sanitize_mapping(data: Union[Dict[str, Any], List[Any], Any]) -> Union[Dict[str, Any], List[Any], Any]:
    """
    Sanitize every string value of a decoded JSON payload.

    Nested dicts and lists are walked recursively; keys and non-string values
    are left untouched.

    Args:
        data: Dict, list or scalar to sanitize

    Returns:
        A new structure with sanitized string values
    """
    if isinstance(data, dict):
        return {key: sanitize_mapping(value) for key, value in data.items()}

    if isinstance(data, list):
        return [sanitize_mapping(item) for item in data]

    return sanitize(data)
