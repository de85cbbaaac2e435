"""
Tests for configuration and system checks.
"""

from django.test import SimpleTestCase, override_settings

from input_validation.checks import check_input_validation_settings
from input_validation.conf import DEFAULTS, get_setting


class GetSettingTests(SimpleTestCase):

    @override_settings(INPUT_VALIDATION={})
    def test_defaults(self):
        for key, value in DEFAULTS.items():
            with self.subTest(key=key):
                self.assertEqual(get_setting(key), value)

    @override_settings(INPUT_VALIDATION={'TEXT_MAX_LENGTH': 50})
    def test_override(self):
        self.assertEqual(get_setting('TEXT_MAX_LENGTH'), 50)
        self.assertEqual(get_setting('EMAIL_MAX_LENGTH'), 254)

    @override_settings(INPUT_VALIDATION=None)
    def test_missing_settings_dict(self):
        self.assertTrue(get_setting('CHECK_XSS'))

    def test_unknown_key_uses_default(self):
        self.assertEqual(get_setting('NOT_A_KEY', 'fallback'), 'fallback')


class SystemCheckTests(SimpleTestCase):

    def ids(self):
        return [message.id for message in check_input_validation_settings(None)]

    def test_project_settings_pass(self):
        self.assertEqual(self.ids(), [])

    @override_settings(INPUT_VALIDATION=['TEXT_MAX_LENGTH'])
    def test_not_a_dict(self):
        self.assertEqual(self.ids(), ['input_validation.E001'])

    @override_settings(INPUT_VALIDATION={'TEXT_MAX_LEN': 10})
    def test_unknown_key(self):
        self.assertEqual(self.ids(), ['input_validation.W001'])

    @override_settings(INPUT_VALIDATION={'TEXT_MAX_LENGTH': 0, 'URL_MAX_LENGTH': '2048'})
    def test_bad_lengths(self):
        self.assertEqual(self.ids(), ['input_validation.E002', 'input_validation.E002'])

    @override_settings(INPUT_VALIDATION={'TEXT_MAX_LENGTH': None})
    def test_disabled_length(self):
        self.assertEqual(self.ids(), [])

    @override_settings(INPUT_VALIDATION={'LOG_DETECTIONS': 'yes'})
    def test_bad_flag(self):
        self.assertEqual(self.ids(), ['input_validation.E003'])

    @override_settings(INPUT_VALIDATION={'CHECK_XSS': False})
    def test_xss_disabled_warning(self):
        self.assertEqual(self.ids(), ['input_validation.W002'])
