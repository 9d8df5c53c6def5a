"""
Quiz Mode - Emoji Arithmetic

One round on screen at a time:

    🐶🐶🐶
      +
    🦄🦄🦄🦄
    3 + 4 =   [ 7 ]   Guess

Type a number (digits only, up to 3), press Enter or Guess.
A sound plays, the result shows, and "Play Again?" starts a new round.
"""

from textual.widgets import Static, Input, Button
from textual.containers import Vertical, Horizontal, Center
from textual.app import ComposeResult
from rich.text import Text
import logging
import random

from .constants import SOUND_CORRECT, SOUND_WRONG, COLOR_CORRECT, COLOR_WRONG
from .round import RoundState, Round

logger = logging.getLogger(__name__)


class EmojiRow(Static):
    """A row of repeated emoji for one addend"""

    DEFAULT_CSS = """
    EmojiRow {
        width: 100%;
        height: 3;
        content-align: center middle;
        text-align: center;
    }
    """

    def __init__(self, **kwargs):
        super().__init__("", markup=False, **kwargs)


class QuizMode(Vertical):
    """
    The quiz screen. Owns a RoundState and mirrors it into widgets.
    """

    DEFAULT_CSS = """
    QuizMode {
        width: 100%;
        height: 100%;
        background: $surface;
    }

    #operator-display {
        width: 100%;
        height: 1;
        text-align: center;
        text-style: bold;
    }

    #equation-row {
        width: 100%;
        height: 3;
        margin-top: 1;
        align: center middle;
    }

    #equation {
        width: auto;
        height: 3;
        content-align: center middle;
        text-style: bold;
        color: $primary;
    }

    #answer-input {
        width: 9;
        height: 3;
        margin: 0 1;
        border: round $primary;
        text-align: center;
    }

    #answer-input:focus {
        border: round $accent;
    }

    #guess-button {
        min-width: 10;
    }

    #results {
        width: 100%;
        height: auto;
        margin-top: 1;
    }

    #result-text {
        width: 100%;
        height: 2;
        text-align: center;
        text-style: bold;
    }

    #play-again-row {
        width: 100%;
        height: auto;
    }
    """

    def __init__(self, rng: random.Random | None = None, player=None, **kwargs):
        super().__init__(**kwargs)
        self.state = RoundState(rng)
        self.player = player
        self.result_message = ""

    def compose(self) -> ComposeResult:
        yield EmojiRow(id="addend1-display")
        yield Static("", id="operator-display", markup=False)
        yield EmojiRow(id="addend2-display")
        with Horizontal(id="equation-row"):
            yield Static("", id="equation", markup=False)
            yield Input(placeholder="?", id="answer-input")
            yield Button("Guess", id="guess-button", variant="primary")
        with Vertical(id="results"):
            yield Static("", id="result-text")
            with Center(id="play-again-row"):
                yield Button("Play Again?", id="play-again", variant="primary")

    def on_mount(self) -> None:
        self.start_round()

    def start_round(self) -> None:
        """Reset everything and show a fresh round"""
        self.state.reset()
        self.show_round()

    def show_round(self) -> None:
        """Render the current round and clear any previous result"""
        current: Round = self.state.round
        self.query_one("#addend1-display", EmojiRow).update(current.addend1_display)
        self.query_one("#operator-display", Static).update(current.operator)
        self.query_one("#addend2-display", EmojiRow).update(current.addend2_display)
        self.query_one("#equation", Static).update(current.equation)

        self.result_message = ""
        self.query_one("#result-text", Static).update("")
        self.query_one("#results").display = False

        answer_input = self.query_one("#answer-input", Input)
        answer_input.value = self.state.answer
        answer_input.disabled = False
        answer_input.focus()
        self._sync_guess_button()

    def _sync_guess_button(self) -> None:
        self.query_one("#guess-button", Button).disabled = not self.state.can_guess

    def on_input_changed(self, event: Input.Changed) -> None:
        """Filter to digits (max 3) and write the filtered text back"""
        event.stop()
        text = event.input.value
        filtered = self.state.set_answer(text)
        if filtered != text:
            event.input.value = filtered
            event.input.cursor_position = len(filtered)
        self._sync_guess_button()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter in the answer box acts like Guess"""
        event.stop()
        if self.state.can_guess:
            self.submit_guess()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "guess-button":
            if self.state.can_guess:
                self.submit_guess()
        elif event.button.id == "play-again":
            self.start_round()

    def submit_guess(self) -> bool:
        """Check the answer, play feedback, show the result."""
        logger.debug(f"correct answer: {self.state.round.correct_answer}")
        logger.debug(f"answer: {self.state.answer}")

        correct = self.state.submit()
        if self.player is not None:
            self.player.play(SOUND_CORRECT if correct else SOUND_WRONG)

        if correct:
            self.result_message = "Correct"
            styled = Text(self.result_message, style=f"bold {COLOR_CORRECT}")
        else:
            answer = self.state.round.correct_answer
            self.result_message = f"Wrong!\nAnswer was: {answer}"
            styled = Text(self.result_message, style=f"bold {COLOR_WRONG}")

        self.query_one("#result-text", Static).update(styled)
        self.query_one("#results").display = True
        self.query_one("#answer-input", Input).disabled = True
        self._sync_guess_button()
        self.query_one("#play-again", Button).focus()
        return correct
