# audio.py
import logging
from typing import Dict, Optional, Tuple

import numpy as np  # type: ignore
import pygame       # type: ignore

from .game import Event
from .session import Snapshot

logger = logging.getLogger(__name__)

# event -> (frequency Hz, duration s, waveform)
CUES: Dict[Event, Tuple[float, float, str]] = {
    Event.STARTED: (440, 0.1, "square"),
    Event.ATE:     (800, 0.1, "square"),
    Event.DIED:    (150, 0.5, "sawtooth"),
    Event.RESET:   (660, 0.1, "square"),
}

START_GAIN, END_GAIN = 0.1, 0.01


def tone(freq: float, duration: float, shape: str, sample_rate: int) -> np.ndarray:
    """Mono int16 samples with an exponential gain decay."""
    n = max(1, int(sample_rate * duration))
    t = np.arange(n) / sample_rate
    phase = t * freq
    if shape == "square":
        wave = np.where((phase % 1.0) < 0.5, 1.0, -1.0)
    elif shape == "sawtooth":
        wave = 2.0 * (phase - np.floor(phase + 0.5))
    else:
        wave = np.sin(2 * np.pi * phase)
    gain = START_GAIN * (END_GAIN / START_GAIN) ** (t / duration)
    return (wave * gain * (2**15 - 1)).astype(np.int16)


class SoundCues:
    """
    Session listener that plays a short synthesized tone per event.
    Never raises: with no mixer it stays silent.
    """

    def __init__(self, enabled: bool = True):
        self.sounds: Dict[Event, "pygame.mixer.Sound"] = {}
        if enabled:
            self._build()

    def _build(self) -> None:
        init: Optional[Tuple[int, int, int]] = pygame.mixer.get_init()
        if not init:
            logger.info("Mixer unavailable, sound cues disabled")
            return
        sample_rate, _size, channels = init
        try:
            for event, (freq, duration, shape) in CUES.items():
                samples = tone(freq, duration, shape, sample_rate)
                if channels > 1:
                    samples = np.repeat(samples[:, None], channels, axis=1)
                self.sounds[event] = pygame.sndarray.make_sound(np.ascontiguousarray(samples))
        except (pygame.error, ValueError) as exc:
            logger.info("Could not synthesize sound cues: %s", exc)
            self.sounds.clear()

    def __call__(self, event: Event, snapshot: Snapshot) -> None:
        sound = self.sounds.get(event)
        if sound is None:
            return
        try:
            sound.play()
        except pygame.error as exc:
            logger.debug("Playback of %s failed: %s", event.value, exc)
