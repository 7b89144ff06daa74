import os
import re
from pathlib import Path

DEFAULT_HOME = os.environ.get("TL_HOME_DIR", (Path.home() / ".ticklist").as_posix())
DATA_FILE_NAME = "ticklist.yaml"
ENV_FILE_NAME = "config.env"
DEFAULT_LOG_LEVEL = "WARNING"


def get_home() -> str:
    return os.environ.get("TL_HOME_DIR", DEFAULT_HOME)


def ensure_dirs(home: str | None = None) -> None:
    _path = Path(home or get_home())
    _path.mkdir(parents=True, exist_ok=True)


def load_env(path: str | None = None) -> dict[str, str]:
    home = get_home()
    env: dict[str, str] = {}
    _path = Path(path or (Path(home) / ENV_FILE_NAME))
    if _path.exists():
        with _path.open(encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                m = re.match(r"([^=]+)=(.*)", line)
                if m:
                    key = m.group(1).strip()
                    val = m.group(2).strip()
                    env[key] = val

    # OS environment wins over config.env
    env.update(
        {
            "HOME_DIR": home,
            "DATA_PATH": os.environ.get(
                "TL_DATA_PATH",
                env.get("DATA_PATH", (Path(home) / DATA_FILE_NAME).as_posix()),
            ),
            "LOG_LEVEL": os.environ.get("TL_LOG_LEVEL", env.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper(),
        },
    )
    return env
