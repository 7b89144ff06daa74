THEME_ICON_MAP = {
    "theme-light": "🌙",
    "theme-dark": "☀️",
    "theme-neon": "⚡",
}
FALLBACK_THEME_ICON = "🔆"

COMPLETED_MARK = "✔"
PENDING_MARK = " "
DUE_MARK = "📅"
SHORT_ID_LENGTH = 12


def theme_icon(theme: str) -> str:
    return THEME_ICON_MAP.get(theme, FALLBACK_THEME_ICON)
