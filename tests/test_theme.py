import unittest

from ticklist.core.theme import DEFAULT_THEME, THEME_ORDER, load_theme, next_theme, save_theme
from ticklist.interfaces.style import FALLBACK_THEME_ICON, theme_icon
from ticklist.storage import THEME_KEY, MemoryKeyValueStore


class TestNextTheme(unittest.TestCase):
    def test_cycles_in_order(self) -> None:
        assert next_theme("theme-light") == "theme-dark"
        assert next_theme("theme-dark") == "theme-neon"
        assert next_theme("theme-neon") == "theme-light"

    def test_full_cycle_returns_to_start(self) -> None:
        cur = THEME_ORDER[0]
        for _ in range(len(THEME_ORDER)):
            cur = next_theme(cur)
        assert cur == THEME_ORDER[0]

    def test_unknown_counts_as_first(self) -> None:
        assert next_theme("theme-sepia") == "theme-dark"
        assert next_theme(None) == "theme-dark"


class TestLoadSaveTheme(unittest.TestCase):
    def test_missing_is_default(self) -> None:
        assert load_theme(MemoryKeyValueStore()) == DEFAULT_THEME

    def test_save_then_load(self) -> None:
        kv = MemoryKeyValueStore()
        save_theme(kv, "theme-neon")
        assert kv.get(THEME_KEY) == b"theme-neon"
        assert load_theme(kv) == "theme-neon"

    def test_unknown_or_garbage_is_default(self) -> None:
        for raw in (b"theme-sepia", b"\xff\xfe", b""):
            kv = MemoryKeyValueStore()
            kv.set(THEME_KEY, raw)
            assert load_theme(kv) == DEFAULT_THEME

    def test_save_failure_is_swallowed(self) -> None:
        kv = MemoryKeyValueStore(capacity=4)
        with self.assertLogs("ticklist", level="ERROR"):
            save_theme(kv, "theme-dark")
        assert load_theme(kv) == DEFAULT_THEME


class TestThemeIcon(unittest.TestCase):
    def test_icons(self) -> None:
        assert theme_icon("theme-light") == "🌙"
        assert theme_icon("theme-dark") == "☀️"
        assert theme_icon("theme-neon") == "⚡"
        assert theme_icon("other") == FALLBACK_THEME_ICON


if __name__ == "__main__":
    unittest.main()
