# Copyright 2022 Jon Seager
# See LICENSE file for licensing details.

import io
import os

from pyfakefs.fake_filesystem_unittest import TestCase

from datasource import DataError, parse_data


class TestParseData(TestCase):
    def setUp(self):
        self.setUpPyfakefs()
        os.makedirs("/tmp", exist_ok=True)

    def test_parse_data_inline(self):
        self.assertEqual(parse_data('{"foo":"bar"}'), {"foo": "bar"})

    def test_parse_data_inline_list(self):
        self.assertEqual(parse_data('["apple", "pear"]'), ["apple", "pear"])

    def test_parse_data_inline_scalar(self):
        self.assertEqual(parse_data("12"), 12)
        self.assertIsNone(parse_data("null"))

    def test_parse_data_empty(self):
        self.assertIsNone(parse_data(""))
        self.assertIsNone(parse_data(None))

    def test_parse_data_file(self):
        with open("/tmp/data.json", "w+") as f:
            f.write('{"foo":"bar"}')
        self.assertEqual(parse_data("@/tmp/data.json"), {"foo": "bar"})

    def test_parse_data_yaml_file(self):
        with open("/tmp/data.yaml", "w+") as f:
            f.write("foo: bar\nfruits:\n  - apple\n  - pear\n")
        self.assertEqual(
            parse_data("@/tmp/data.yaml"), {"foo": "bar", "fruits": ["apple", "pear"]}
        )

    def test_parse_data_stdin(self):
        self.assertEqual(parse_data("@-", stdin=io.StringIO('{"foo":"bar"}')), {"foo": "bar"})

    def test_parse_data_bad_json(self):
        with self.assertRaises(DataError) as cm:
            parse_data("{foo")
        self.assertTrue(cm.exception.message.startswith("invalid json data (-data)"))

    def test_parse_data_bad_json_file(self):
        with open("/tmp/data", "w+") as f:
            f.write("{foo")
        with self.assertRaises(DataError) as cm:
            parse_data("@/tmp/data")
        self.assertIn("/tmp/data", cm.exception.message)

    def test_parse_data_bad_yaml_file(self):
        with open("/tmp/data.yml", "w+") as f:
            f.write("foo: [bar\n")
        with self.assertRaises(DataError):
            parse_data("@/tmp/data.yml")

    def test_parse_data_missing_file(self):
        with self.assertRaises(DataError) as cm:
            parse_data("@/tmp/missing.json")
        self.assertTrue(cm.exception.message.startswith("cannot read data file"))
