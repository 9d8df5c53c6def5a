#!/usr/bin/env python3
"""
Math Tutor - Main Textual TUI Application

Emoji arithmetic for kids: count the pictures, type the answer.

Keyboard controls:
- Digits: type an answer (up to 3 digits)
- Enter: guess, then play again
- F12: Toggle dark/light theme
"""

from textual.app import App, ComposeResult
from textual.containers import Container, Vertical, Horizontal
from textual.widgets import Static
from textual.binding import Binding
from textual.css.query import NoMatches
from textual.theme import Theme
from textual import events
import logging
import random

from .constants import ICON_CALCULATOR, ICON_MOON, ICON_SUN
from .config import Config, setup_logging
from .quiz_mode import QuizMode
from .sounds import SoundPlayer

logger = logging.getLogger(__name__)


class TutorTitle(Static):
    """Shows the app title above the viewport"""

    DEFAULT_CSS = """
    TutorTitle {
        width: 1fr;
        height: 1;
        text-align: center;
        color: $primary;
        text-style: bold;
    }
    """

    def render(self) -> str:
        return f"{ICON_CALCULATOR}  Math Tutor"


class ThemeBadge(Static):
    """F12 theme hint in the top-right corner"""

    DEFAULT_CSS = """
    ThemeBadge {
        width: auto;
        height: 1;
        color: $text-muted;
    }
    """

    def render(self) -> str:
        is_dark = "dark" in getattr(self.app, 'active_theme', 'dark')
        return f"F12 {ICON_MOON if is_dark else ICON_SUN}"


class MathTutorApp(App):
    """
    Math Tutor - one calm quiz screen.

    F12: Toggle dark/light mode
    """

    CSS = """
    Screen {
        background: $background;
    }

    #outer-container {
        width: 100%;
        height: 100%;
        align: center middle;
        background: $background;
    }

    #viewport-wrapper {
        width: auto;
        height: auto;
    }

    #title-row {
        width: 60;
        height: 1;
        margin-bottom: 1;
    }

    #viewport {
        width: 60;
        height: 22;
        border: heavy $primary;
        background: $surface;
        padding: 1;
    }
    """

    BINDINGS = [
        Binding("f12", "toggle_theme", "Theme", show=False, priority=True),
    ]

    def __init__(self, config: Config | None = None, player: SoundPlayer | None = None):
        super().__init__()
        self.config = config or Config()
        self.active_theme = self.config.theme
        self.rng = random.Random(self.config.seed)
        self.player = player or SoundPlayer(
            sounds_dir=self.config.sounds_dir,
            volume=self.config.volume,
            enabled=not self.config.mute,
        )

        self.register_theme(
            Theme(
                name="tutor-dark",
                primary="#9b7bc4",
                secondary="#7a5ca8",
                warning="#c4a060",
                error="#c46b7b",
                success="#7bc48a",
                accent="#c4a0e8",
                background="#1e1033",
                surface="#2a1845",
                panel="#2a1845",
                dark=True,
            )
        )
        self.register_theme(
            Theme(
                name="tutor-light",
                primary="#7a4ca0",
                secondary="#6a3c90",
                warning="#a08040",
                error="#a04050",
                success="#40a050",
                accent="#6a3c90",
                background="#f0e8f8",
                surface="#e8daf0",
                panel="#e8daf0",
                dark=False,
            )
        )
        self.theme = self.active_theme

    def compose(self) -> ComposeResult:
        """Create the UI layout"""
        with Container(id="outer-container"):
            with Vertical(id="viewport-wrapper"):
                with Horizontal(id="title-row"):
                    yield TutorTitle(id="tutor-title")
                    yield ThemeBadge(id="theme-badge")
                with Container(id="viewport"):
                    yield QuizMode(rng=self.rng, player=self.player, id="quiz")

    def on_unmount(self) -> None:
        self.player.cleanup()

    def action_toggle_theme(self) -> None:
        """Toggle between dark and light mode (F12)"""
        self.active_theme = "tutor-light" if self.active_theme == "tutor-dark" else "tutor-dark"
        self.theme = self.active_theme
        try:
            self.query_one("#theme-badge", ThemeBadge).refresh()
        except NoMatches:
            pass

    def on_key(self, event: events.Key) -> None:
        """Swallow F-keys and ctrl combos we don't use"""
        key = event.key
        if key.startswith("f") and key[1:].isdigit() and key != "f12":
            event.stop()
            event.prevent_default()
            return
        if key.startswith("ctrl+") and key not in {"ctrl+c", "ctrl+q"}:
            event.stop()
            event.prevent_default()


def main():
    """Entry point for Math Tutor"""
    config = Config.from_env()
    setup_logging(config)
    logger.info(f"Starting Math Tutor (theme={config.theme}, mute={config.mute})")

    app = MathTutorApp(config)
    app.run(mouse=False)  # Keyboard-only


if __name__ == "__main__":
    main()
