#!/usr/bin/env python3
"""
Generate feedback sounds for Math Tutor

Creates the two clips the quiz plays after a guess:
- correct.wav: A bright rising three-note chime
- wrong.wav: A soft falling "boing", gentle rather than scary
"""

import wave
import math
from pathlib import Path

SCRIPT_DIR = Path(__file__).parent
PROJECT_ROOT = SCRIPT_DIR.parent
SOUNDS_DIR = PROJECT_ROOT / "packs" / "core-sounds" / "content"

SAMPLE_RATE = 44100

# C major arpeggio, one octave up for sparkle
CORRECT_NOTES = [523.25, 659.25, 783.99]


def write_wav(filepath: Path, samples: list[int], sample_rate: int = SAMPLE_RATE):
    """Write mono 16-bit samples to a WAV file"""
    with wave.open(str(filepath), 'w') as wav_file:
        wav_file.setnchannels(1)
        wav_file.setsampwidth(2)
        wav_file.setframerate(sample_rate)
        frames = bytearray()
        for sample in samples:
            # Clamp to valid range
            sample = max(-32767, min(32767, sample))
            frames += sample.to_bytes(2, byteorder='little', signed=True)
        wav_file.writeframes(bytes(frames))
    print(f"  Created {filepath.name}")


def finalize_samples(samples: list[float], peak_level: float = 0.75) -> list[int]:
    """Normalize and convert to int16."""
    peak = max(abs(s) for s in samples) or 1
    return [int(s / peak * peak_level * 32767) for s in samples]


def chime_note(frequency: float, duration: float) -> list[float]:
    """
    Bright, playful tone - like a toy xylophone.
    Punchy attack, clear tone.
    """
    num_samples = int(SAMPLE_RATE * duration)
    samples = []
    fade_out_start = duration - 0.04

    for i in range(num_samples):
        t = i / SAMPLE_RATE

        # Punchy attack with slight overshoot
        if t < 0.005:
            attack = (t / 0.005) * 1.3
        elif t < 0.03:
            attack = 1.3 - 0.3 * ((t - 0.005) / 0.025)
        else:
            attack = 1.0

        sample = math.sin(2 * math.pi * frequency * t)             # fundamental
        sample += 0.5 * math.sin(2 * math.pi * frequency * 2 * t)  # body
        sample += 0.3 * math.sin(2 * math.pi * frequency * 4 * t)  # brightness

        sample *= attack * math.exp(-t * 5)

        if t > fade_out_start:
            sample *= 1 - (t - fade_out_start) / 0.04

        samples.append(sample)

    return samples


def generate_correct() -> list[int]:
    """Three quick rising notes, the last one held"""
    samples = []
    for i, freq in enumerate(CORRECT_NOTES):
        last = i == len(CORRECT_NOTES) - 1
        samples += chime_note(freq, 0.45 if last else 0.12)
    return finalize_samples(samples)


def generate_wrong() -> list[int]:
    """Falling boing: pitch slides down with a little wobble"""
    duration = 0.5
    num_samples = int(SAMPLE_RATE * duration)
    samples = []
    phase = 0.0

    for i in range(num_samples):
        t = i / SAMPLE_RATE
        freq = 330 * math.exp(-t * 2.5) + 110
        freq *= 1 + 0.03 * math.sin(2 * math.pi * 12 * t)  # wobble
        phase += 2 * math.pi * freq / SAMPLE_RATE

        sample = math.sin(phase) + 0.3 * math.sin(2 * phase)

        # 5ms fade-in prevents a click
        attack = min(1.0, t / 0.005)
        envelope = math.exp(-t * 4)
        samples.append(sample * attack * envelope)

    return finalize_samples(samples, peak_level=0.6)


def main():
    """Generate all sounds"""
    print("Generating Math Tutor sounds...")
    print()

    SOUNDS_DIR.mkdir(parents=True, exist_ok=True)

    write_wav(SOUNDS_DIR / "correct.wav", generate_correct())
    write_wav(SOUNDS_DIR / "wrong.wav", generate_wrong())

    print()
    print(f"Done! Sounds saved to {SOUNDS_DIR}")

if __name__ == "__main__":
    main()
