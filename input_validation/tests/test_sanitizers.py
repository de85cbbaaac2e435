"""
Tests for sanitizers.
"""

from typing import Any, get_type_hints

from django.test import SimpleTestCase

from input_validation.sanitizers import sanitize, sanitize_mapping


class SanitizeTests(SimpleTestCase):
    """Tests for sanitize."""

    def test_escapes_special_characters(self):
        """Each special character should become its entity."""
        test_cases = [
            ('&', '&amp;'),
            ('<', '&lt;'),
            ('>', '&gt;'),
            ('"', '&quot;'),
            ("'", '&#x27;'),
        ]

        for raw, expected in test_cases:
            with self.subTest(raw=raw):
                self.assertEqual(sanitize(raw), expected)

    def test_script_tag_is_neutralized_not_removed(self):
        """Script tags should be escaped, keeping their content."""
        result = sanitize('<script>alert("XSS")</script>')
        self.assertEqual(result, '&lt;script&gt;alert(&quot;XSS&quot;)&lt;/script&gt;')
        self.assertNotIn('<script>', result)

    def test_mixed_text(self):
        result = sanitize("It's a test & verification <script>alert('xss')</script>")
        self.assertIn('It&#x27;s a test &amp; verification', result)
        self.assertNotIn('<script>', result)

    def test_plain_text_unchanged(self):
        """Text without special characters should pass through."""
        for value in ['Normal user input', 'Meeting at 3:00 PM', 'Zürich café 東京', '']:
            with self.subTest(value=value):
                self.assertEqual(sanitize(value), value)

    def test_whitespace_and_slashes_preserved(self):
        """Only the five special characters are encoded."""
        value = '  path/to/file \n\t end  '
        self.assertEqual(sanitize(value), value)

    def test_not_idempotent(self):
        """Sanitizing twice should double-escape ampersands."""
        once = sanitize('Tom & Jerry')
        self.assertEqual(once, 'Tom &amp; Jerry')
        self.assertEqual(sanitize(once), 'Tom &amp;amp; Jerry')

    def test_no_raw_special_characters_remain(self):
        value = '''<a href="x" title='y'>A & B</a>'''
        result = sanitize(value)
        for char in '<>"\'':
            with self.subTest(char=char):
                self.assertNotIn(char, result)
        self.assertEqual(result.count('&'), value.count('&') + 8)

    def test_non_string_returned_unchanged(self):
        for value in [None, 42, 3.5, True]:
            with self.subTest(value=value):
                self.assertIs(sanitize(value), value)

    def test_annotations_allow_non_strings(self):
        """Callers may pass any scalar, so the hints must not promise str."""
        self.assertEqual(get_type_hints(sanitize), {'value': Any, 'return': Any})


class SanitizeMappingTests(SimpleTestCase):
    """Tests for sanitize_mapping."""

    def test_nested_payload(self):
        data = {
            'name': '<b>Acme</b>',
            'count': 3,
            'contact': {'email': 'a@example.com', 'note': "O'Reilly"},
            'tags': ['<i>', 'plain', 7, {'label': '"quoted"'}],
            'active': None,
        }

        result = sanitize_mapping(data)

        self.assertEqual(result, {
            'name': '&lt;b&gt;Acme&lt;/b&gt;',
            'count': 3,
            'contact': {'email': 'a@example.com', 'note': 'O&#x27;Reilly'},
            'tags': ['&lt;i&gt;', 'plain', 7, {'label': '&quot;quoted&quot;'}],
            'active': None,
        })

    def test_does_not_mutate_input(self):
        data = {'name': '<b>'}
        sanitize_mapping(data)
        self.assertEqual(data, {'name': '<b>'})

    def test_keys_untouched(self):
        self.assertEqual(sanitize_mapping({'<k>': 'v'}), {'<k>': 'v'})

    def test_top_level_list_and_scalar(self):
        self.assertEqual(sanitize_mapping(['<', '>']), ['&lt;', '&gt;'])
        self.assertEqual(sanitize_mapping('&'), '&amp;')
