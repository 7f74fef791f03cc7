import logging
import unittest

from kryss.utils.logger import configure_logging, get_logger, resolve_level


class LoggerTests(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging()

    def test_level_names_are_resolved(self) -> None:
        self.assertEqual(resolve_level("info"), logging.INFO)
        self.assertEqual(resolve_level(" DEBUG "), logging.DEBUG)
        self.assertEqual(resolve_level(logging.ERROR), logging.ERROR)
        with self.assertRaises(ValueError):
            resolve_level("chatty")

    def test_configure_installs_single_handler(self) -> None:
        configure_logging("debug")
        configure_logging("info")
        root = logging.getLogger()
        self.assertEqual(len(root.handlers), 1)
        self.assertEqual(root.level, logging.INFO)
        self.assertEqual(logging.getLogger("urllib3").level, logging.INFO)

    def test_get_logger_defaults_to_package_name(self) -> None:
        self.assertEqual(get_logger().name, "kryss")
        self.assertEqual(get_logger("kryss.engine").name, "kryss.engine")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
