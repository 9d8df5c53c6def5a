"""
Sound feedback using pygame.mixer

Plays the short "correct" and "wrong" clips. Playback is fire-and-forget:
nothing waits for a clip to finish, and any audio problem is logged and
skipped so the quiz keeps working on machines without sound.
"""

from pathlib import Path
import logging
import os

from .constants import DEFAULT_VOLUME

logger = logging.getLogger(__name__)


def _find_libasound() -> str | None:
    """Locate libasound. find_library needs ldconfig, which minimal systems lack."""
    import ctypes
    import ctypes.util

    path = ctypes.util.find_library('asound')
    if path:
        return path
    for p in ('libasound.so.2', 'libasound.so'):
        try:
            ctypes.CDLL(p)
            return p
        except OSError:
            continue
    return None


# Suppress ALSA error/log messages before pygame imports ALSA.
# These corrupt Textual's stderr-based UI. Install null handlers for both paths.
def _suppress_alsa_output():
    try:
        import ctypes

        path = _find_libasound()
        if not path:
            return
        asound = ctypes.CDLL(path)

        # Handler types: error has int err, log has uint level
        HANDLER = ctypes.CFUNCTYPE(None, ctypes.c_char_p, ctypes.c_int,
                                   ctypes.c_char_p, ctypes.c_int, ctypes.c_char_p)
        LOG_HANDLER = ctypes.CFUNCTYPE(None, ctypes.c_char_p, ctypes.c_int,
                                       ctypes.c_char_p, ctypes.c_uint, ctypes.c_char_p)

        noop = lambda *_: None
        err_h, log_h = HANDLER(noop), LOG_HANDLER(noop)
        _suppress_alsa_output._refs = (err_h, log_h)  # prevent GC

        asound.snd_lib_error_set_handler(err_h)
        try:
            asound.snd_lib_log_set_handler(log_h)
        except AttributeError:
            pass
    except OSError as e:
        logger.debug(f"Could not silence ALSA: {e}")

_suppress_alsa_output()

# Suppress pygame welcome message (must be set before import)
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
import pygame
import pygame.mixer


def default_sounds_dir() -> Path:
    """Find the directory holding correct.wav / wrong.wav."""
    paths = [
        Path(__file__).parent.parent / "packs" / "core-sounds" / "content",
        Path.home() / ".math_tutor" / "sounds",
    ]
    for p in paths:
        if p.exists():
            return p
    return paths[0]


class SoundPlayer:
    """Loads named .wav clips on demand and plays them."""

    def __init__(self, sounds_dir: Path | None = None,
                 volume: float = DEFAULT_VOLUME, enabled: bool = True):
        self.sounds_dir = sounds_dir or default_sounds_dir()
        self.volume = volume
        self.enabled = enabled
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        self._missing: set[str] = set()
        self._mixer_initialized = False
        self._mixer_failed = False

    def _init_mixer(self) -> bool:
        """Initialize pygame mixer once. Remembers failure so we only log it once."""
        if self._mixer_initialized:
            return True
        if self._mixer_failed:
            return False
        try:
            if not pygame.mixer.get_init():
                # Larger buffer (2048) prevents ALSA underrun errors on slower hardware
                pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=2048)
            self._mixer_initialized = True
            return True
        except pygame.error as e:
            self._mixer_failed = True
            logger.warning(f"Audio unavailable, sounds disabled: {e}")
            return False

    def sound_path(self, name: str) -> Path:
        return self.sounds_dir / f"{name}.wav"

    def _load(self, name: str) -> "pygame.mixer.Sound | None":
        if name in self._sounds:
            return self._sounds[name]
        path = self.sound_path(name)
        try:
            sound = pygame.mixer.Sound(str(path))
        except (pygame.error, OSError) as e:
            logger.warning(f"Could not load sound {name!r} from {path}: {e}")
            self._missing.add(name)
            return None
        sound.set_volume(self.volume)
        self._sounds[name] = sound
        return sound

    def play(self, name: str) -> bool:
        """Start playing a clip. Returns False if it was skipped."""
        if not self.enabled or name in self._missing:
            return False

        if not self.sound_path(name).exists():
            logger.warning(f"Could not read sound: {name} (looked in {self.sounds_dir})")
            self._missing.add(name)
            return False

        if not self._init_mixer():
            return False

        sound = self._load(name)
        if sound is None:
            return False
        sound.play()
        return True

    def cleanup(self) -> None:
        """Stop all sounds and quit mixer."""
        if self._mixer_initialized:
            pygame.mixer.stop()
            pygame.mixer.quit()
            self._mixer_initialized = False
        self._sounds.clear()
