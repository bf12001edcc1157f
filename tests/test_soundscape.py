import os

import pygame
import pytest

from tank_assault.pygame.soundscape import SOUND_BANK, Soundscape, synthesise_tone


def _prepare_mixer() -> None:
    os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
    # Ensure we bootstrap with a clean mixer state so Soundscape can initialise.
    pygame.mixer.quit()


class RecordingSound:
    def __init__(self, log: list, name: str) -> None:
        self.log = log
        self.name = name
        self.volume = None

    def set_volume(self, value: float) -> None:
        self.volume = value

    def play(self) -> None:
        self.log.append(self.name)


@pytest.mark.parametrize("key", sorted(SOUND_BANK))
def test_soundscape_generates_placeholder_for_missing_assets(tmp_path, key) -> None:
    _prepare_mixer()
    try:
        soundscape = Soundscape(tmp_path, enabled=True)
        if not soundscape.ready:
            pytest.skip("pygame mixer not available in this environment")

        filename, category = SOUND_BANK[key]
        soundscape.load(key, filename, category=category)

        stored = soundscape._cues.get(key)  # type: ignore[attr-defined]
    finally:
        pygame.mixer.quit()

    assert stored is not None
    assert stored[1] == category


def test_cues_play_in_order_with_category_volume(tmp_path) -> None:
    soundscape = Soundscape(tmp_path, enabled=False)
    played: list = []
    shoot = RecordingSound(played, "shoot")
    select = RecordingSound(played, "menu_select")
    soundscape._mixer_ready = True  # type: ignore[attr-defined]
    soundscape._cues = {"shoot": (shoot, "effects"), "menu_select": (select, "ui")}  # type: ignore[attr-defined]
    soundscape.set_volume("master", 0.5)

    soundscape.play_cues(["shoot", "unknown", "menu_select", "shoot"])

    assert played == ["shoot", "menu_select", "shoot"]
    assert shoot.volume == pytest.approx(0.5)
    assert select.volume == pytest.approx(0.4)


def test_disabled_soundscape_is_silent(tmp_path) -> None:
    soundscape = Soundscape(tmp_path, enabled=False)

    soundscape.load_bank()
    soundscape.play("shoot")

    assert soundscape.ready is False
    assert soundscape._cues == {}  # type: ignore[attr-defined]


def test_volume_is_clamped(tmp_path) -> None:
    soundscape = Soundscape(tmp_path, enabled=False)

    soundscape.set_volume("effects", 1.7)
    soundscape.set_volume("ui", -0.2)

    assert soundscape.get_volume("effects") == 1.0
    assert soundscape.get_volume("ui") == 0.0


def test_soundscape_reports_dummy_fallback(monkeypatch, tmp_path) -> None:
    # Ensure no fixed driver is set so the fallback logic iterates candidates.
    monkeypatch.delenv("SDL_AUDIODRIVER", raising=False)

    init_state = {"init": None}
    attempted_drivers: list[object] = []

    def fake_init(**kwargs: object) -> None:
        driver = os.environ.get("SDL_AUDIODRIVER")
        attempted_drivers.append(driver)
        if driver == "dummy":
            init_state["init"] = (kwargs["frequency"], kwargs["size"], kwargs["channels"])
            return
        raise pygame.error("no audio device")

    def fake_quit() -> None:
        init_state["init"] = None

    monkeypatch.setattr(pygame.mixer, "init", fake_init)
    monkeypatch.setattr(pygame.mixer, "quit", fake_quit)
    monkeypatch.setattr(pygame.mixer, "get_init", lambda: init_state["init"])

    soundscape = Soundscape(tmp_path, enabled=True)

    assert attempted_drivers == [None, "pulse", "alsa", "dummy"]
    assert soundscape.ready is True
    assert soundscape.status_message is not None
    assert "dummy" in soundscape.status_message.lower()


def test_soundscape_reports_total_failure(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SDL_AUDIODRIVER", "alsa")

    def failing_init(**kwargs: object) -> None:
        raise pygame.error("device busy")

    monkeypatch.setattr(pygame.mixer, "init", failing_init)
    monkeypatch.setattr(pygame.mixer, "quit", lambda: None)

    soundscape = Soundscape(tmp_path, enabled=True)

    assert soundscape.ready is False
    assert "device busy" in (soundscape.status_message or "")
    assert os.environ["SDL_AUDIODRIVER"] == "alsa"


def test_placeholder_tone_length_matches_duration() -> None:
    mono = synthesise_tone("explosion", 8000, 1)
    stereo = synthesise_tone("explosion", 8000, 2)

    # 0.45 s at 8 kHz, two bytes per sample.
    assert len(mono) == 3600 * 2
    assert len(stereo) == 2 * len(mono)
