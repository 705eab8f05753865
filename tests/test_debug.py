import logging
import os
import tempfile
import unittest

from fourinarow.debug import DebugLevel, DebugManager


class TestDebugManager(unittest.TestCase):
    def setUp(self):
        self.manager = DebugManager(level=DebugLevel.INFO)
        self.addCleanup(self.manager.configure, log_file="", level=DebugLevel.WARNING)

    def test_level_filtering(self):
        self.assertTrue(self.manager.is_enabled_for(DebugLevel.WARNING))
        self.assertFalse(self.manager.is_enabled_for(DebugLevel.DEBUG))
        self.manager.configure(level=DebugLevel.TRACE)
        self.assertTrue(self.manager.is_enabled_for(DebugLevel.TRACE))

    def test_component_filtering(self):
        self.manager.configure(components=["board"])
        self.assertTrue(self.manager.is_enabled_for(DebugLevel.INFO, "board"))
        self.assertFalse(self.manager.is_enabled_for(DebugLevel.INFO, "env"))
        self.assertTrue(self.manager.is_enabled_for(DebugLevel.INFO))

    def test_disabled(self):
        self.manager.configure(enabled=False)
        self.assertFalse(self.manager.is_enabled_for(DebugLevel.ERROR))

    def test_messages_reach_logger(self):
        with self.assertLogs("fourinarow", level=logging.INFO) as captured:
            self.manager.info("hello", "game")
            self.manager.debug("hidden", "game")
        self.assertEqual(len(captured.records), 1)
        self.assertIn("[game] hello", captured.output[0])

    def test_log_file(self):
        fd, path = tempfile.mkstemp(suffix=".log")
        os.close(fd)
        self.addCleanup(os.remove, path)
        self.manager.configure(log_file=path)
        self.manager.warning("to file", "cli")
        self.manager.configure(log_file="")
        with open(path) as f:
            self.assertIn("[cli] to file", f.read())

    def test_set_from_string(self):
        self.assertTrue(self.manager.set_from_string("debug"))
        self.assertEqual(self.manager.level, DebugLevel.DEBUG)
        self.assertFalse(self.manager.set_from_string("loud"))
        self.assertEqual(self.manager.level, DebugLevel.DEBUG)

    def test_timer(self):
        self.manager.start_timer("x")
        self.assertGreaterEqual(self.manager.end_timer("x"), 0.0)
        self.assertIsNone(self.manager.end_timer("x"))


if __name__ == '__main__':
    unittest.main()
