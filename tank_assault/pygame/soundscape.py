"""Audio cue playback on top of pygame.mixer, with synthesised fallbacks."""

from __future__ import annotations

import math
import os
from array import array
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import pygame

# cue name -> (asset file relative to the audio directory, volume category)
SOUND_BANK: Dict[str, Tuple[str, str]] = {
    "shoot": ("effects/shoot.wav", "effects"),
    "explosion": ("effects/explosion.wav", "effects"),
    "hit": ("effects/hit.wav", "effects"),
    "menu_move": ("ui/menu_move.wav", "ui"),
    "menu_select": ("ui/menu_select.wav", "ui"),
}

# cue name -> (frequency Hz, duration s)
TONES: Dict[str, Tuple[float, float]] = {
    "shoot": (660.0, 0.12),
    "explosion": (140.0, 0.45),
    "hit": (320.0, 0.2),
    "menu_move": (520.0, 0.1),
    "menu_select": (760.0, 0.15),
}

FALLBACK_DRIVERS: List[Optional[str]] = [None, "pulse", "alsa", "dummy"]


def synthesise_tone(key: str, sample_rate: int, channels: int) -> bytes:
    """Signed 16-bit PCM for a short tone with a linear release tail."""

    frequency, duration = TONES.get(key, (440.0, 0.2))
    count = max(1, int(sample_rate * duration))
    release_start = count - max(1, int(count * 0.3))
    amplitude = 16383
    rough = key == "explosion"

    samples = array("h")
    for n in range(count):
        phase = 2.0 * math.pi * frequency * n / sample_rate
        value = math.sin(phase)
        if rough:
            value = 0.6 * value + 0.4 * math.sin(phase * 1.51)
        gain = 1.0 if n <= release_start else (count - n) / (count - release_start)
        samples.extend([int(amplitude * value * gain)] * channels)
    return samples.tobytes()


@contextmanager
def _audio_driver(driver: Optional[str]) -> Iterator[None]:
    previous = os.environ.get("SDL_AUDIODRIVER")
    if driver is None:
        os.environ.pop("SDL_AUDIODRIVER", None)
    else:
        os.environ["SDL_AUDIODRIVER"] = driver
    try:
        yield
    finally:
        if previous is None:
            os.environ.pop("SDL_AUDIODRIVER", None)
        else:
            os.environ["SDL_AUDIODRIVER"] = previous


class Soundscape:
    """Play named cues at a volume scaled by master and category levels."""

    def __init__(
        self,
        base_path: Path,
        *,
        enabled: bool = True,
        frequency: int = 44_100,
        size: int = -16,
        channels: int = 2,
        buffer: int = 512,
    ) -> None:
        self.base_path = Path(base_path)
        self.enabled = enabled
        self._mixer_ready = False
        self._cues: Dict[str, Tuple[pygame.mixer.Sound, str]] = {}
        self._volumes: Dict[str, float] = {"master": 1.0, "effects": 1.0, "ui": 0.8}
        self._reported: set[str] = set()
        self._status_message: Optional[str] = None
        self._mixer_args = dict(frequency=frequency, size=size, channels=channels, buffer=buffer)
        if enabled:
            self._open_mixer()

    @property
    def ready(self) -> bool:
        return self._mixer_ready

    @property
    def status_message(self) -> Optional[str]:
        return self._status_message

    # ------------------------------------------------------------------
    # Cues
    def load_bank(self, bank: Optional[Dict[str, Tuple[str, str]]] = None) -> None:
        for key, (filename, category) in (bank or SOUND_BANK).items():
            self.load(key, filename, category=category)

    def load(self, key: str, filename: str, *, category: str = "effects") -> None:
        """Register ``key`` from ``filename``, or from a synthesised tone when the file is unusable."""

        if not self._mixer_ready:
            return
        sound = self._read_asset(self.base_path / filename)
        if sound is None:
            sound = self._placeholder(key)
            if sound is None:
                return
            self._report(f"Missing audio asset '{filename}', using placeholder tone.", once_for=filename)
        self._cues[key] = (sound, category)

    def play(self, key: str, *, volume: Optional[float] = None) -> None:
        entry = self._cues.get(key) if self._mixer_ready else None
        if entry is None:
            return
        sound, category = entry
        level = self._volumes.get("master", 1.0) * self._volumes.get(category, 1.0)
        if volume is not None:
            level *= volume
        sound.set_volume(max(0.0, min(1.0, level)))
        sound.play()

    def play_cues(self, cues: Iterable[str]) -> None:
        for cue in cues:
            self.play(cue)

    def set_volume(self, category: str, value: float) -> None:
        self._volumes[category] = max(0.0, min(1.0, value))

    def get_volume(self, category: str) -> float:
        return self._volumes.get(category, 1.0)

    # ------------------------------------------------------------------
    # Mixer bootstrapping
    def _open_mixer(self) -> None:
        fixed = os.environ.get("SDL_AUDIODRIVER")
        last_error = ""
        for driver in [fixed] if fixed else FALLBACK_DRIVERS:
            with _audio_driver(driver):
                try:
                    pygame.mixer.quit()
                    pygame.mixer.init(**self._mixer_args)
                except pygame.error as exc:
                    last_error = str(exc)
                    continue
            self._mixer_ready = True
            if driver == "dummy":
                self._report("Audio device unavailable; running with SDL 'dummy' driver (no sound output).")
            return
        suffix = f": {last_error}" if last_error else ""
        self._report(f"Audio initialisation failed{suffix}. Sound remains muted.")

    def _read_asset(self, path: Path) -> Optional[pygame.mixer.Sound]:
        if not path.is_file():
            return None
        try:
            return pygame.mixer.Sound(path.as_posix())
        except pygame.error:
            return None

    def _placeholder(self, key: str) -> Optional[pygame.mixer.Sound]:
        mixer_format = pygame.mixer.get_init()
        if not mixer_format or abs(mixer_format[1]) != 16:
            return None
        sample_rate, _, channels = mixer_format
        try:
            return pygame.mixer.Sound(buffer=synthesise_tone(key, sample_rate, channels))
        except pygame.error:
            return None

    def _report(self, message: str, *, once_for: Optional[str] = None) -> None:
        tag = once_for or message
        if tag in self._reported:
            return
        self._reported.add(tag)
        if once_for is None:
            self._status_message = message
        print(f"[Soundscape] {message}")


__all__ = ["SOUND_BANK", "Soundscape", "synthesise_tone"]
