import os
import unittest

from tzfield import UTC, TimeZone
from tzfield.config import get_configured_timezone


class ConfiguredTimeZoneTests(unittest.TestCase):
    env_var = 'TZFIELD_TEST_TIMEZONE'

    def setUp(self):
        self.original = os.environ.get(self.env_var)

    def tearDown(self):
        if self.original is None:
            os.environ.pop(self.env_var, None)
        else:
            os.environ[self.env_var] = self.original

    def test_unset_returns_default(self):
        os.environ.pop(self.env_var, None)
        self.assertEqual(get_configured_timezone(self.env_var), UTC)
        tokyo = TimeZone.load('Asia/Tokyo')
        self.assertEqual(get_configured_timezone(self.env_var, default=tokyo), tokyo)

    def test_valid_name(self):
        os.environ[self.env_var] = 'America/New_York'
        self.assertEqual(get_configured_timezone(self.env_var).name, 'America/New_York')

    def test_invalid_name_falls_back_with_warning(self):
        for name in ('ErrName', 'Local'):
            with self.subTest(name=name):
                os.environ[self.env_var] = name
                with self.assertLogs('tzfield.config', level='WARNING') as logs:
                    self.assertEqual(get_configured_timezone(self.env_var), UTC)
                self.assertIn(self.env_var, logs.output[0])


if __name__ == '__main__':
    unittest.main()
