import logging
import tempfile
import unittest
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from ticklist.util.logger import resolve_level, setup_logger, setup_mode


class TestSetupLogger(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.name = "ticklist-test-logger"

    def tearDown(self) -> None:
        logger = logging.getLogger(self.name)
        for h in list(logger.handlers):
            h.close()
            logger.removeHandler(h)
        self.tmp.cleanup()

    def test_handlers_not_duplicated(self) -> None:
        setup_logger(self.name, is_file=True, home=self.tmp.name)
        logger = setup_logger(self.name, is_file=True, home=self.tmp.name)
        assert len(logger.handlers) == 2
        assert sum(isinstance(h, TimedRotatingFileHandler) for h in logger.handlers) == 1

    def test_file_receives_debug(self) -> None:
        logger = setup_logger(self.name, is_stream=False, is_file=True, home=self.tmp.name)
        logger.debug("hello file")
        for h in logger.handlers:
            h.flush()
        content = (Path(self.tmp.name) / f"{self.name}.log").read_text(encoding="utf-8")
        assert "hello file" in content

    def test_setup_mode_changes_stream_level_only(self) -> None:
        logger = setup_logger(self.name, is_file=True, home=self.tmp.name)
        setup_mode(is_debug=True, name=self.name)
        levels = {type(h): h.level for h in logger.handlers}
        assert levels[logging.StreamHandler] == logging.DEBUG
        setup_mode(is_debug=False, level="ERROR", name=self.name)
        levels = {type(h): h.level for h in logger.handlers}
        assert levels[logging.StreamHandler] == logging.ERROR
        assert levels[TimedRotatingFileHandler] == logging.DEBUG


    def test_unknown_level_falls_back_to_warning(self) -> None:
        logger = setup_logger(self.name, is_stream=True)
        setup_mode(is_debug=True, name=self.name)
        setup_mode(is_debug=False, level="verbose", name=self.name)
        assert all(h.level == logging.WARNING for h in logger.handlers)


class TestResolveLevel(unittest.TestCase):
    def test_known_names_and_numbers(self) -> None:
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level(" Error ") == logging.ERROR
        assert resolve_level(logging.INFO) == logging.INFO

    def test_unknown_name(self) -> None:
        with self.assertLogs("ticklist", level="WARNING"):
            assert resolve_level("verbose") == logging.WARNING


if __name__ == "__main__":
    unittest.main()
