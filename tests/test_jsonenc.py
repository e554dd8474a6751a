import json
import unittest

from tzfield import UTC, TimeZone
from tzfield.jsonenc import TimeZoneJSONEncoder, default


class JSONEncodingHookTests(unittest.TestCase):
    def test_default_hook(self):
        data = {'zone': TimeZone.load('Asia/Tokyo'), 'fallback': UTC}
        self.assertEqual(json.loads(json.dumps(data, default=default)), {'zone': 'Asia/Tokyo', 'fallback': 'UTC'})

    def test_default_hook_rejects_other_objects(self):
        with self.assertRaises(TypeError):
            json.dumps({'x': object()}, default=default)

    def test_encoder_class(self):
        self.assertEqual(json.dumps([TimeZone.load('Europe/Paris')], cls=TimeZoneJSONEncoder), '["Europe/Paris"]')

    def test_matches_encode_json(self):
        z = TimeZone.load('America/New_York')
        self.assertEqual(json.dumps(z, cls=TimeZoneJSONEncoder), z.encode_json())


if __name__ == '__main__':
    unittest.main()
