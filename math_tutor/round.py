"""
Round logic for the emoji math quiz.

Pure functions and a small state holder, kept free of Textual so they can be
tested without a terminal:
- Pick two addends, an operator and two different emojis
- Build the emoji rows shown above and below the operator
- Filter the typed answer and check it against the correct answer
"""

from dataclasses import dataclass
from enum import Enum
import random

from .constants import (
    ADDEND_MIN, ADDEND_MAX, OPERATORS, EMOJIS,
    ANSWER_MAX_LENGTH, ANSWER_DIGITS,
)


class RoundError(Exception):
    """Raised when round state is used out of order (e.g. guessing twice)."""


class Phase(Enum):
    """Two-state round cycle"""
    IDLE = 1      # Round ready, waiting for a guess
    ANSWERED = 2  # Showing the result, waiting for "play again"


def do_math(addend1: int, addend2: int, operator: str) -> int:
    """Evaluate one arithmetic case. Unknown operators give 0."""
    if operator == "+":
        return addend1 + addend2
    elif operator == "-":
        return addend1 - addend2
    elif operator == "*":
        return addend1 * addend2
    return 0


def generate_emoji_array(quantity: int, emoji: str) -> str:
    """Repeat an emoji once per unit: (3, "🐶") -> "🐶🐶🐶"."""
    return emoji * max(quantity, 0)


def pick_emojis(rng: random.Random, palette=EMOJIS) -> tuple[str, str]:
    """Draw two emojis from the palette, redrawing until they differ."""
    if len(set(palette)) < 2:
        raise ValueError("emoji palette needs at least two different emojis")
    while True:
        first = rng.choice(palette)
        second = rng.choice(palette)
        if first != second:
            return first, second


@dataclass(frozen=True)
class Round:
    """One round's parameters, all derived together."""
    addend1: int
    addend2: int
    operator: str
    addend1_emoji: str
    addend2_emoji: str
    addend1_display: str
    addend2_display: str
    correct_answer: int

    @property
    def equation(self) -> str:
        return f"{self.addend1} {self.operator} {self.addend2} ="


def make_round(addend1: int, addend2: int, operator: str,
               addend1_emoji: str, addend2_emoji: str) -> Round:
    """Build a Round whose displays and answer come from the given values."""
    return Round(
        addend1=addend1,
        addend2=addend2,
        operator=operator,
        addend1_emoji=addend1_emoji,
        addend2_emoji=addend2_emoji,
        addend1_display=generate_emoji_array(addend1, addend1_emoji),
        addend2_display=generate_emoji_array(addend2, addend2_emoji),
        correct_answer=do_math(addend1, addend2, operator),
    )


def new_round(rng: random.Random | None = None,
              palette=EMOJIS, operators=OPERATORS) -> Round:
    """Generate a fresh random round."""
    rng = rng or random.Random()
    addend1 = rng.randint(ADDEND_MIN, ADDEND_MAX)
    addend2 = rng.randint(ADDEND_MIN, ADDEND_MAX)
    operator = rng.choice(operators)
    emoji1, emoji2 = pick_emojis(rng, palette)
    return make_round(addend1, addend2, operator, emoji1, emoji2)


def filter_answer(text: str) -> str:
    """Keep digits only, at most ANSWER_MAX_LENGTH of them."""
    digits = "".join(c for c in text if c in ANSWER_DIGITS)
    return digits[:ANSWER_MAX_LENGTH]


def parse_guess(text: str) -> int | None:
    """Integer value of a typed guess, or None if no digits survive filtering."""
    digits = filter_answer(text)
    if not digits:
        return None
    return int(digits)


def is_correct(current: Round, text: str) -> bool:
    """Exact match only. An unparseable guess is just a wrong guess."""
    guess = parse_guess(text)
    return guess is not None and guess == current.correct_answer


class RoundState:
    """
    The mutable state behind the quiz screen.

    Everything is reset together by reset(); only set_answer() and submit()
    change it in between.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()
        # Drawn by the first reset(), so a seeded rng starts with its first round
        self.round: Round | None = None
        self.answer = ""
        self.guessed_correct = False
        self.showing_results = False

    @property
    def phase(self) -> Phase:
        return Phase.ANSWERED if self.showing_results else Phase.IDLE

    @property
    def can_guess(self) -> bool:
        return self.round is not None and bool(self.answer) and not self.showing_results

    def reset(self) -> Round:
        """Start a new round"""
        self.answer = ""
        self.guessed_correct = False
        self.showing_results = False
        self.round = new_round(self.rng)
        return self.round

    def set_answer(self, text: str) -> str:
        """Store the filtered answer and return it (for writing back to the input)."""
        self.answer = filter_answer(text)
        return self.answer

    def submit(self) -> bool:
        """Check the current answer and move to the ANSWERED phase."""
        if self.showing_results:
            raise RoundError("round already answered")
        if not self.answer:
            raise RoundError("no answer to check")
        if self.round is None:
            raise RoundError("no round in progress")
        self.guessed_correct = is_correct(self.round, self.answer)
        self.showing_results = True
        return self.guessed_correct
