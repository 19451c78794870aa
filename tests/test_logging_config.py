"""JSON log formatting."""

import json
import logging
import unittest

from dealership.logging_config import JSONFormatter, setup_logging


class TestJSONFormatter(unittest.TestCase):

    def test_extra_fields_are_surfaced(self):
        record = logging.LogRecord("dealership.crud", logging.INFO, __file__, 1, "Updated car", None, None)
        record.car_id = "abc123"
        line = json.loads(JSONFormatter().format(record))
        self.assertEqual(line["message"], "Updated car")
        self.assertEqual(line["level"], "INFO")
        self.assertEqual(line["car_id"], "abc123")
        self.assertNotIn("error_code", line)

    def test_setup_replaces_handlers(self):
        root = logging.getLogger()
        saved = root.handlers[:], root.level
        try:
            setup_logging("debug", "json")
            setup_logging("warning", "text")
            self.assertEqual(len(root.handlers), 1)
            self.assertEqual(root.level, logging.WARNING)
            self.assertNotIsInstance(root.handlers[0].formatter, JSONFormatter)
        finally:
            root.handlers = saved[0]
            root.setLevel(saved[1])


if __name__ == "__main__":
    unittest.main()
