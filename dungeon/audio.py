"""Short sound effects cut out of a single sound file."""

from __future__ import annotations

import time
import wave
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame


@dataclass(frozen=True)
class SoundEffect:
    """A stretch of the effects file, in milliseconds, and its volume (0-100)."""

    start_ms: int
    end_ms: int
    volume: float


SOUND_EFFECTS: dict[str, SoundEffect] = {
    "Hit1": SoundEffect(2084, 2300, 17.0),
    "Hit2": SoundEffect(2120, 2500, 40.0),
    "PotionPickup": SoundEffect(0, 300, 30.0),
    "FireBusrt": SoundEffect(1085, 1600, 15.0),
    "KeyPickup": SoundEffect(625, 800, 30.0),
    "SwordSwing": SoundEffect(880, 1000, 18.0),
}

_MIXER_SIZES = {1: 8, 2: -16}


class SfxPlayer:
    """Plays one effect at a time from a WAV file holding all of them.

    Starting an effect stops the one playing; ``update`` is called each
    frame and stops the effect once its stretch of the file is over.
    When no audio device is available the player keeps time silently.
    """

    def __init__(self, path: str | Path) -> None:
        try:
            with wave.open(str(path), "rb") as wav:
                self._rate = wav.getframerate()
                self._width = wav.getsampwidth()
                self._channels = wav.getnchannels()
                frames = wav.getnframes()
                self._raw = wav.readframes(frames)
        except (wave.Error, EOFError) as exc:
            raise ValueError(f"{path}: not a usable WAV file: {exc}") from exc
        self.effects = dict(SOUND_EFFECTS)
        self.duration_ms = frames * 1000 / self._rate
        self.volume = 10.0
        self.current: str | None = None
        self.clock = time.monotonic
        self._started_at = 0.0
        self._playing = False
        self._sounds: dict[str, Any] = {}
        self._channel: Any = None
        self._mixer_ready = self._init_mixer()

    def _init_mixer(self) -> bool:
        size = _MIXER_SIZES.get(self._width)
        if size is None:
            return False
        wanted = (self._rate, size, self._channels)
        try:
            current = pygame.mixer.get_init()
            if current != wanted:
                if current is not None:
                    pygame.mixer.quit()
                pygame.mixer.init(
                    frequency=self._rate, size=size, channels=self._channels
                )
            return pygame.mixer.get_init() == wanted
        except (pygame.error, NotImplementedError):
            return False

    @property
    def playing(self) -> bool:
        return self._playing

    @property
    def offset_ms(self) -> float:
        """Position in the file of the effect being played, 0 when stopped."""
        if not self._playing or self.current is None:
            return 0.0
        start = self.effects[self.current].start_ms
        return start + (self.clock() - self._started_at) * 1000

    def clip(self, name: str) -> bytes:
        """Raw sample data of the named effect."""
        effect = self._effect(name)
        frame_size = self._width * self._channels
        start = effect.start_ms * self._rate // 1000 * frame_size
        end = effect.end_ms * self._rate // 1000 * frame_size
        return self._raw[start:end]

    def _effect(self, name: str) -> SoundEffect:
        try:
            return self.effects[name]
        except KeyError:
            raise KeyError(f"unknown sound effect {name!r}") from None

    def start(self, name: str) -> None:
        """Play the named effect from its start, cutting off any other."""
        effect = self._effect(name)
        if self._playing:
            self._stop()
        self.current = name
        self.volume = effect.volume
        self._started_at = self.clock()
        self._playing = True
        if self._mixer_ready:
            self._play_sound(name)

    def _play_sound(self, name: str) -> None:
        try:
            sound = self._sounds.get(name)
            if sound is None:
                sound = pygame.mixer.Sound(buffer=self.clip(name))
                self._sounds[name] = sound
            sound.set_volume(self.volume / 100)
            self._channel = sound.play()
        except pygame.error:
            self._mixer_ready = False
            self._channel = None

    def _stop(self) -> None:
        self._playing = False
        if self._channel is not None:
            self._channel.stop()
            self._channel = None

    def update(self) -> None:
        """Stop the current effect once playback has passed its end."""
        if not self._playing or self.current is None:
            return
        offset = self.offset_ms
        if offset > self.effects[self.current].end_ms or offset >= self.duration_ms:
            self._stop()