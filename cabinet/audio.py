"""
Best-effort sound effects.

SoundBoard.play() never raises and never blocks. Clips are loaded from the
assets directory (sounds/<clip>.wav or .ogg); a clip that cannot be loaded
falls back to a short generated tone. If the mixer itself cannot start,
audio is disabled for the rest of the process and play() does nothing.
"""

from pathlib import Path
from typing import Dict, Iterable, Optional

import numpy as np
import pygame

from cabinet.logging import get_logger

log = get_logger('audio')

SAMPLE_RATE = 22050

# Fallback tones: clip id -> (start Hz, end Hz, seconds)
TONES: Dict[str, tuple] = {
    'hit': (523.25, 659.25, 0.08),
    'flap': (440.0, 587.33, 0.06),
    'score': (659.25, 880.0, 0.10),
    'shoot': (880.0, 440.0, 0.05),
    'reload': (220.0, 330.0, 0.12),
    'pickup': (587.33, 1174.66, 0.12),
    'hurt': (300.0, 150.0, 0.15),
    'lose': (392.0, 261.63, 0.30),
    'game_over': (261.63, 130.81, 0.60),
    'win': (523.25, 1046.5, 0.50),
}


def generate_tone(start_hz: float, end_hz: float, duration: float, volume: float = 0.3) -> np.ndarray:
    """Frequency sweep with a short fade in and out, as 16-bit stereo samples."""
    num_samples = max(2, int(SAMPLE_RATE * duration))
    frequencies = np.linspace(start_hz, end_hz, num_samples)
    phase = np.cumsum(2.0 * np.pi * frequencies / SAMPLE_RATE)
    wave = np.sin(phase)

    envelope = np.ones(num_samples)
    fade_samples = max(1, int(num_samples * 0.1))
    envelope[:fade_samples] = np.linspace(0, 1, fade_samples)
    envelope[-fade_samples:] = np.linspace(1, 0, fade_samples)
    wave *= envelope

    samples = (wave * 32767 * volume).astype(np.int16)
    return np.column_stack((samples, samples))


class SoundBoard:
    """Named sound clips, played fire-and-forget.

    Args:
        enabled: False skips mixer initialisation entirely
        assets_dir: Directory containing a sounds/ folder
        clips: Clip ids to prepare up front (default: every known tone)
        volume: 0.0 - 1.0
    """

    def __init__(
        self,
        enabled: bool = True,
        assets_dir: Optional[Path] = None,
        clips: Optional[Iterable[str]] = None,
        volume: float = 0.5,
    ):
        self.enabled = enabled
        self.sounds: Dict[str, Optional[pygame.mixer.Sound]] = {}
        self._assets_dir = Path(assets_dir) if assets_dir else None
        self._volume = volume

        if self.enabled:
            self._init_audio(list(clips) if clips is not None else list(TONES))

    def _init_audio(self, clips: list) -> None:
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
        except Exception as e:
            log.warning("Audio initialization failed, sound disabled: %s", e)
            self.enabled = False
            self.sounds = {}
            return

        for clip in clips:
            self.sounds[clip] = self._load_clip(clip)

    def _load_clip(self, clip: str) -> Optional[pygame.mixer.Sound]:
        sound = None
        if self._assets_dir is not None:
            for ext in ('.wav', '.ogg'):
                path = self._assets_dir / 'sounds' / f'{clip}{ext}'
                if not path.exists():
                    continue
                try:
                    sound = pygame.mixer.Sound(str(path))
                    break
                except pygame.error as e:
                    log.warning("Could not load %s, using generated tone: %s", path, e)

        if sound is None and clip in TONES:
            try:
                sound = pygame.sndarray.make_sound(generate_tone(*TONES[clip]))
            except Exception as e:
                log.warning("Could not generate %s tone: %s", clip, e)
                return None

        if sound is not None:
            sound.set_volume(self._volume)
        return sound

    def play(self, clip: str) -> None:
        """Play a clip if possible. Failures are logged and dropped."""
        if not self.enabled:
            return
        sound = self.sounds.get(clip)
        if sound is None:
            log.debug("No sound for clip %s", clip)
            return
        try:
            sound.stop()
            sound.play()
        except Exception as e:
            log.debug("Could not play %s: %s", clip, e)
