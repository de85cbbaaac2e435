"""
Heuristic detection rules for hostile input.

This module holds the fixed rule catalogues used to flag:
- SQL injection (set extraction, destruction, tautologies, comments, blind, exec)
- NoSQL operator injection
- Script/markup injection
- Path traversal

Every SQL rule needs a keyword or tautology shape in its structural context,
so a lone apostrophe or ampersand never matches on its own. Repetition is
bounded in every pattern to keep matching linear in the input length.
"""

import re
from dataclasses import dataclass
from typing import Any, List, Sequence


@dataclass(frozen=True)
class DetectionRule:
    """A single attack-family detector."""

    category: str
    pattern: re.Pattern

    def test(self, value: str) -> bool:
        return self.pattern.search(value) is not None


def _rule(category: str, pattern: str) -> DetectionRule:
    return DetectionRule(category, re.compile(pattern, re.IGNORECASE))


SQL_INJECTION_RULES = (
    _rule(
        'set_extraction',
        # Needs a quote, number or NULL before the keywords, or a
        # NULL/number/* select list after them
        r"(?:['\"\d)]|\bnull)\s{0,16}union\s+(?:all\s+)?select\b"
        r"|\bunion\s+(?:all\s+)?select\s+(?:null\b|\d|\*)",
    ),
    _rule(
        'schema_destruction',
        # Needs a statement break before, or a terminator after the table name
        r"(?:['\";]|\*/)\s{0,16}(?:(?:drop|alter|truncate)\s+table|delete\s+from)\b"
        r"|\b(?:drop|alter|truncate)\s+table\s+[\w.\[\]`]{1,128}\s{0,16}(?:;|--|/\*)",
    ),
    _rule(
        'tautology',
        # ' OR '1'='1  |  " AND a=a  |  OR 1=1
        r"['\"]\s*(?:or|and)\s+(['\"]?)(\w{1,64})\1\s*=\s*\1\2\b"
        r"|\bor\s+(\d{1,20})\s*=\s*\3\b",
    ),
    _rule(
        'comment_termination',
        r"'\s{0,16}(?:--|/\*)|\"(?:--|/\*)|'#|;(?:\s{0,16}(?:--|/\*)|#)",
    ),
    _rule(
        'time_based_blind',
        r"\bwaitfor\s+delay\b"
        r"|\b(?:pg_)?sleep\(\s*\d"
        r"|\bbenchmark\(\s*\d"
        r"|['\";][^\n]{0,256}?\b(?:(?:pg_)?sleep|benchmark)\("
        r"|\bif\s*\([^()]{0,128},\s*sleep\b",
    ),
    _rule(
        'privileged_execution',
        r"\bexec(?:ute)?\s+(?:(?:master\.\.?)?(?:dbo\.)?[xs]p_\w+|as\s+(?:login|user)\b)",
    ),
    _rule(
        'nosql_operator',
        r"\{[^{}]{0,256}?['\"]?\$[a-z]\w{0,31}['\"]?\s*:|\[\$[a-z]\w{0,31}\]",
    ),
)

XSS_RULES = (
    _rule('script_tag', r"<\s*script\b"),
    _rule('embedded_frame', r"<\s*(?:iframe|embed|object|applet)\b"),
    _rule('event_handler', r"<[^<>]{0,512}?\bon[a-z]{2,32}\s*="),
    _rule('script_url', r"\b(?:javascript|vbscript)\s*:|\bdata:text/html"),
    _rule(
        'dom_access',
        r"\bdocument\.(?:cookie|write|location)\b|\bwindow\.(?:location|open)\b",
    ),
    _rule('eval_call', r"\beval\s*\("),
)

PATH_TRAVERSAL_RULES = (
    _rule('dot_dot_slash', r"\.\.[/\\]"),
    _rule('encoded_traversal', r"\.\.(?:%2f|%5c|%c0%af|%c1%9c|%252f)|%2e%2e"),
    _rule('file_url', r"\bfile://"),
)


def match_categories(value: Any, rules: Sequence[DetectionRule] = SQL_INJECTION_RULES) -> List[str]:
    """
    Return the categories of every rule that matches, in catalogue order.

    Args:
        value: Raw, untrimmed input
        rules: Rule catalogue to evaluate

    Returns:
        List of matched category names (empty for non-strings)
    """
    if not isinstance(value, str) or not value:
        return []

    return [rule.category for rule in rules if rule.test(value)]


def _matches_any(value: Any, rules: Sequence[DetectionRule]) -> bool:
    if not isinstance(value, str) or not value:
        return False

    return any(rule.test(value) for rule in rules)


def has_sql_injection_pattern(value: Any) -> bool:
    """Check whether the raw value looks like an SQL or NoSQL injection payload."""
    return _matches_any(value, SQL_INJECTION_RULES)


def has_xss_pattern(value: Any) -> bool:
    """Check whether the raw value carries script or active markup."""
    return _matches_any(value, XSS_RULES)


def has_path_traversal_pattern(value: Any) -> bool:
    """Check whether the raw value tries to escape a directory."""
    return _matches_any(value, PATH_TRAVERSAL_RULES)
