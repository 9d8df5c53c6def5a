"""
Math Tutor - Emoji Arithmetic for Kids

A Textual TUI application providing one calm quiz screen:
- Two groups of emoji and an operator (+, -, *)
- Type a number, press Guess
- Correct / wrong feedback with a sound, then play again

Designed for ages 4-8. Keyboard only, no distractions.
"""

__version__ = "1.0.0"
