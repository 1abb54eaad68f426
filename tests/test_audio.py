import struct
import wave

import pygame
import pytest

from dungeon.audio import SOUND_EFFECTS, SfxPlayer, SoundEffect

RATE = 1000  # one frame per millisecond
FRAMES = 3000


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


@pytest.fixture
def wav_path(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    path = tmp_path / "sfx.wav"
    with wave.open(str(path), "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(RATE)
        wav.writeframes(struct.pack(f"<{FRAMES}h", *range(FRAMES)))
    yield path
    pygame.mixer.quit()


@pytest.fixture
def player(wav_path):
    sfx = SfxPlayer(wav_path)
    sfx.clock = FakeClock()
    return sfx


def samples(data):
    return list(struct.unpack(f"<{len(data) // 2}h", data))


def test_effect_table_matches_the_sound_file_layout():
    assert SOUND_EFFECTS["Hit1"] == SoundEffect(2084, 2300, 17.0)
    assert SOUND_EFFECTS["SwordSwing"] == SoundEffect(880, 1000, 18.0)
    assert set(SOUND_EFFECTS) == {
        "Hit1", "Hit2", "PotionPickup", "FireBusrt", "KeyPickup", "SwordSwing",
    }


def test_every_effect_ends_after_it_starts():
    for effect in SOUND_EFFECTS.values():
        assert effect.start_ms < effect.end_ms


def test_clip_covers_the_effect(player):
    for name, effect in SOUND_EFFECTS.items():
        assert samples(player.clip(name)) == list(range(effect.start_ms, effect.end_ms))


def test_duration(player):
    assert player.duration_ms == FRAMES


def test_unknown_effect_raises(player):
    with pytest.raises(KeyError):
        player.start("Explosion")
    assert player.playing is False


def test_start_sets_current_and_volume(player):
    player.start("KeyPickup")
    assert player.playing is True
    assert player.current == "KeyPickup"
    assert player.volume == SOUND_EFFECTS["KeyPickup"].volume
    assert player.offset_ms == SOUND_EFFECTS["KeyPickup"].start_ms


def test_update_keeps_playing_before_the_end(player):
    player.start("SwordSwing")
    player.clock.now += 0.05
    player.update()
    assert player.playing is True
    assert player.offset_ms > SOUND_EFFECTS["SwordSwing"].start_ms


def test_update_stops_after_the_end(player):
    player.start("SwordSwing")
    player.clock.now += 1.0
    player.update()
    assert player.playing is False
    assert player.offset_ms == 0.0


def test_starting_another_effect_replaces_the_first(player):
    player.start("Hit1")
    player.clock.now += 0.1
    player.start("Hit2")
    assert player.current == "Hit2"
    assert player.offset_ms == SOUND_EFFECTS["Hit2"].start_ms
    assert player.volume == SOUND_EFFECTS["Hit2"].volume


def test_stops_at_the_end_of_the_file(player):
    player.effects["Long"] = SoundEffect(2900, 9000, 50.0)
    player.start("Long")
    player.clock.now += 0.2
    player.update()
    assert player.playing is False


def test_update_without_effect_does_nothing(player):
    player.update()
    assert player.playing is False
    assert player.current is None


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        SfxPlayer(tmp_path / "absent.wav")


def test_not_a_wav_file_raises(tmp_path):
    path = tmp_path / "noise.wav"
    path.write_bytes(b"this is not audio at all")
    with pytest.raises(ValueError):
        SfxPlayer(path)