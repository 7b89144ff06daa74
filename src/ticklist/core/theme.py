from typing import Literal

from pyresults import Err

from ticklist.storage.base import THEME_KEY, KeyValueStore
from ticklist.util.logger import setup_logger

logger = setup_logger("ticklist")

Theme = Literal["theme-light", "theme-dark", "theme-neon"]

THEME_ORDER: tuple[Theme, ...] = ("theme-light", "theme-dark", "theme-neon")
DEFAULT_THEME: Theme = "theme-light"


def is_theme(name: object) -> bool:
    return name in THEME_ORDER


def next_theme(current: str | None) -> Theme:
    """Advance circularly; an unknown current theme counts as the first one."""
    idx = THEME_ORDER.index(current) if current in THEME_ORDER else 0  # type: ignore[arg-type]
    return THEME_ORDER[(idx + 1) % len(THEME_ORDER)]


def load_theme(kv: KeyValueStore) -> Theme:
    raw = kv.get(THEME_KEY)
    if raw is None:
        return DEFAULT_THEME
    try:
        name = raw.decode("utf-8").strip()
    except UnicodeDecodeError:
        logger.warning("Unreadable theme value; using %s", DEFAULT_THEME)
        return DEFAULT_THEME
    if not is_theme(name):
        logger.warning("Unknown theme %r; using %s", name, DEFAULT_THEME)
        return DEFAULT_THEME
    return name  # type: ignore[return-value]


def save_theme(kv: KeyValueStore, name: Theme) -> None:
    match kv.set(THEME_KEY, name.encode("utf-8")):
        case Err(e):
            logger.error("Failed to persist theme %s: %s", name, e)
