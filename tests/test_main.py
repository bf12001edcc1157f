import json

import pytest

import main


@pytest.fixture
def launches(monkeypatch):
    calls = []
    monkeypatch.setattr(main, "run_pygame", lambda **kwargs: calls.append(kwargs))
    return calls


def test_default_launch(launches) -> None:
    main.main([])

    assert launches == [{"catalog": None, "start_level": 1, "debug": False, "muted": False}]


def test_custom_catalog_bounds_start_level(launches, tmp_path, capsys) -> None:
    path = tmp_path / "levels.json"
    path.write_text(json.dumps({"levels": [{"name": "Yard", "spawns": [[600, 400]]}]}), encoding="utf-8")

    main.main(["--levels", str(path), "--mute"])
    assert len(launches[0]["catalog"]) == 1
    assert launches[0]["muted"] is True

    with pytest.raises(SystemExit) as excinfo:
        main.main(["--levels", str(path), "--level", "2"])
    assert excinfo.value.code == 2
    assert "--level must be between 1 and 1" in capsys.readouterr().err


@pytest.mark.parametrize("content", ["{not json", '{"levels": "nope"}'])
def test_bad_catalog_is_a_usage_error(launches, tmp_path, capsys, content) -> None:
    path = tmp_path / "levels.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main.main(["--levels", str(path)])

    assert excinfo.value.code == 2
    assert "--levels:" in capsys.readouterr().err
    assert launches == []


def test_missing_catalog_is_a_usage_error(launches, tmp_path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main.main(["--levels", str(tmp_path / "absent.json")])

    assert excinfo.value.code == 2
    assert "--levels:" in capsys.readouterr().err
