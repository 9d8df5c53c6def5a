"""
Math Tutor - Shared Constants

Central location for constants used across the app.
"""

# =============================================================================
# ROUND PARAMETERS
# =============================================================================

ADDEND_MIN = 1
ADDEND_MAX = 10

# Operator symbols, drawn uniformly each round. No division.
OPERATORS = ("+", "-", "*")

# Longest accepted answer (10 * 10 = 100)
ANSWER_MAX_LENGTH = 3
ANSWER_DIGITS = "0123456789"

# Kid-friendly palette. Two different ones are picked each round.
EMOJIS = (
    "🍕", "🍎", "🍏", "🐵", "👽",
    "🧠", "🧜🏽‍♀️", "🧙🏿‍♂️", "🥷", "🐶",
    "🐹", "🐣", "🦄", "🐝", "🦉",
    "🦋", "🦖", "🐙", "🦞", "🐟",
    "🦔", "🐲", "🌻", "🌍", "🌈",
    "🍔", "🌮", "🍦", "🍩", "🍪",
)

# =============================================================================
# SOUNDS
# =============================================================================

SOUND_CORRECT = "correct"
SOUND_WRONG = "wrong"
DEFAULT_VOLUME = 0.6

# =============================================================================
# LAYOUT
# =============================================================================
# Viewport: width 60 + border(2) + padding(2) = 64 cols
#           height 22 + border(2) + padding(2) = 26 rows

VIEWPORT_CONTENT_COLS = 60
VIEWPORT_CONTENT_ROWS = 22

# Nerd Font icons (https://www.nerdfonts.com/cheat-sheet)
ICON_CALCULATOR = "󰃬"       # nf-md-calculator
ICON_MOON = "󰖙"             # nf-md-weather_night
ICON_SUN = "󰖨"              # nf-md-weather_sunny

# Result colors
COLOR_CORRECT = "#7bc48a"
COLOR_WRONG = "#c46b7b"
