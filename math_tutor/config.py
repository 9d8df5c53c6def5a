"""
Runtime settings from environment variables.

Textual owns the terminal, so there are no command-line flags. Parents and
developers tweak behaviour the same way as the sleep/battery demo switches:
MATH_TUTOR_MUTE=1 math-tutor
"""

from dataclasses import dataclass, field
from pathlib import Path
import logging
import os

from .constants import DEFAULT_VOLUME

logger = logging.getLogger(__name__)

TRUE_VALUES = {"1", "true", "yes", "on"}
THEMES = {"dark": "tutor-dark", "light": "tutor-light"}


@dataclass
class Config:
    sounds_dir: Path | None = None
    mute: bool = False
    volume: float = DEFAULT_VOLUME
    seed: int | None = None
    log_file: Path | None = None
    log_level: int = logging.INFO
    theme: str = "tutor-dark"
    # Malformed settings, logged by setup_logging once handlers exist
    problems: list[str] = field(default_factory=list)

    @classmethod
    def from_env(cls, environ=None) -> "Config":
        """Read settings, falling back to defaults for anything malformed."""
        env = os.environ if environ is None else environ
        config = cls()

        sounds_dir = env.get("MATH_TUTOR_SOUNDS_DIR")
        if sounds_dir:
            config.sounds_dir = Path(sounds_dir).expanduser()

        config.mute = env.get("MATH_TUTOR_MUTE", "").strip().lower() in TRUE_VALUES

        volume = env.get("MATH_TUTOR_VOLUME")
        if volume:
            try:
                config.volume = min(1.0, max(0.0, float(volume)))
            except ValueError:
                config.problems.append(f"Ignoring MATH_TUTOR_VOLUME={volume!r}: not a number")

        seed = env.get("MATH_TUTOR_SEED")
        if seed:
            try:
                config.seed = int(seed)
            except ValueError:
                config.problems.append(f"Ignoring MATH_TUTOR_SEED={seed!r}: not an integer")

        log_file = env.get("MATH_TUTOR_LOG")
        if log_file:
            config.log_file = Path(log_file).expanduser()

        level_name = env.get("MATH_TUTOR_LOG_LEVEL")
        if level_name:
            level = logging.getLevelName(level_name.strip().upper())
            if isinstance(level, int):
                config.log_level = level
            else:
                config.problems.append(f"Ignoring MATH_TUTOR_LOG_LEVEL={level_name!r}")

        theme = env.get("MATH_TUTOR_THEME")
        if theme:
            if theme.strip().lower() in THEMES:
                config.theme = THEMES[theme.strip().lower()]
            else:
                config.problems.append(f"Ignoring MATH_TUTOR_THEME={theme!r}: use dark or light")

        return config


def setup_logging(config: Config) -> None:
    """Send logs to a file if asked. Never to the terminal Textual draws on.

    Safe to call again: the handler from an earlier call is replaced, not doubled.
    """
    root = logging.getLogger("math_tutor")
    root.setLevel(config.log_level)
    for old in [h for h in root.handlers if getattr(h, "_math_tutor", False)]:
        root.removeHandler(old)
        old.close()

    if config.log_file is None:
        handler = logging.NullHandler()
    else:
        handler = logging.FileHandler(config.log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s"
        ))
    handler._math_tutor = True
    root.addHandler(handler)

    for problem in config.problems:
        logger.warning(problem)
