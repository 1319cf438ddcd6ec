import os
import tempfile
import unittest

import WCL

class TestLogging(unittest.TestCase):
    def setUp(self):
        self.saved = (WCL.loglevel, WCL.logdest, WCL.logfile, WCL.logcall,
                      WCL.LOG_MAXSIZE, WCL.compact_log_fmt, WCL._always_override_destination)

    def tearDown(self):
        (WCL.loglevel, WCL.logdest, WCL.logfile, WCL.logcall,
         WCL.LOG_MAXSIZE, WCL.compact_log_fmt, WCL._always_override_destination) = self.saved

    def test_log_to_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            WCL.logfile = os.path.join(tmpdir, "wcl.log")
            WCL.logdest = WCL.LOG_FILE
            WCL.loglevel = WCL.LOG_NOTICE

            WCL.log("Written to file", WCL.LOG_NOTICE)
            WCL.log("Filtered out", WCL.LOG_DEBUG)

            with open(WCL.logfile, "r") as file:
                lines = file.read().splitlines()

            self.assertEqual(len(lines), 1)
            self.assertIn("[Notice]", lines[0])
            self.assertTrue(lines[0].endswith("Written to file"))

    def test_log_file_rotation(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            WCL.logfile = os.path.join(tmpdir, "wcl.log")
            prevfile = WCL.logfile+".1"
            WCL.logdest = WCL.LOG_FILE
            WCL.loglevel = WCL.LOG_DEBUG
            WCL.LOG_MAXSIZE = 100

            WCL.log("First message, short enough to stay", WCL.LOG_DEBUG)
            self.assertTrue(os.path.isfile(WCL.logfile))
            self.assertFalse(os.path.isfile(prevfile))

            WCL.log("Second message, pushing the log past its size limit", WCL.LOG_DEBUG)
            self.assertFalse(os.path.isfile(WCL.logfile))
            with open(prevfile, "r") as file:
                rotated = file.read()
            self.assertIn("First message", rotated)
            self.assertIn("Second message", rotated)

            WCL.log("Third message, started in a fresh log file", WCL.LOG_DEBUG)
            with open(WCL.logfile, "r") as file:
                self.assertIn("Third message", file.read())

            WCL.log("Fourth message, rotating again over the old file", WCL.LOG_DEBUG)
            with open(prevfile, "r") as file:
                rotated = file.read()
            self.assertNotIn("First message", rotated)
            self.assertIn("Third message", rotated)
            self.assertIn("Fourth message", rotated)
            self.assertFalse(WCL._always_override_destination)

    def test_compact_format(self):
        messages = []
        WCL.logdest = WCL.LOG_CALLBACK
        WCL.logcall = messages.append
        WCL.loglevel = WCL.LOG_NOTICE
        WCL.compact_log_fmt = True

        WCL.log("Compact entry", WCL.LOG_NOTICE)
        self.assertEqual(len(messages), 1)
        self.assertNotIn("[Notice]", messages[0])
        self.assertTrue(messages[0].endswith("] Compact entry"))


if __name__ == '__main__':
    unittest.main(verbosity=2)
