"""Centralized style constants for consistent theming across the app."""

# Accent colors
ACCENT_PRIMARY = "#2563eb"
ACCENT_PRIMARY_HOVER = "#1d4ed8"

# Status colors
COLOR_ERROR = "rgb(239, 68, 68)"

# Card sizing
CARD_MAX_WIDTH = "440px"
CARD_PADDING = "2em"

# Page background (soft blue gradient behind the card)
PAGE_BACKGROUND = "linear-gradient(135deg, #eff6ff 0%, #e0e7ff 100%)"
