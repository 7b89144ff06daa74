import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from ticklist.util import dirs


class TestLoadEnv(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.patch = mock.patch.dict(os.environ, {"TL_HOME_DIR": self.tmp.name})
        self.patch.start()
        for key in ("TL_DATA_PATH", "TL_LOG_LEVEL"):
            os.environ.pop(key, None)

    def tearDown(self) -> None:
        self.patch.stop()
        self.tmp.cleanup()

    def test_defaults(self) -> None:
        env = dirs.load_env()
        assert env["HOME_DIR"] == self.tmp.name
        assert env["DATA_PATH"] == (Path(self.tmp.name) / "ticklist.yaml").as_posix()
        assert env["LOG_LEVEL"] == "WARNING"

    def test_config_file(self) -> None:
        (Path(self.tmp.name) / "config.env").write_text(
            "# comment\n\nDATA_PATH = /data/tasks.db\nLOG_LEVEL=debug\nEXTRA=1\n",
            encoding="utf-8",
        )
        env = dirs.load_env()
        assert env["DATA_PATH"] == "/data/tasks.db"
        assert env["LOG_LEVEL"] == "DEBUG"
        assert env["EXTRA"] == "1"

    def test_environment_overrides_file(self) -> None:
        (Path(self.tmp.name) / "config.env").write_text("DATA_PATH=/data/tasks.db\n", encoding="utf-8")
        with mock.patch.dict(os.environ, {"TL_DATA_PATH": "/env/tasks.yaml"}):
            assert dirs.load_env()["DATA_PATH"] == "/env/tasks.yaml"

    def test_ensure_dirs(self) -> None:
        target = Path(self.tmp.name) / "nested" / "home"
        dirs.ensure_dirs(target.as_posix())
        assert target.is_dir()


if __name__ == "__main__":
    unittest.main()
