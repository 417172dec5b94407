"""Tests for JSON export and user config persistence."""

import json

from adapters.json_exporter import export_snapshot_json, snapshot_to_json
from core.config import AppSettings, write_user_env_vars
from core.domain.models import EmpireSnapshot, Planet


def test_export_snapshot_json(tmp_path):
    snapshot = EmpireSnapshot(
        url="https://en.ogame.example/",
        authenticated=True,
        planets=[Planet(name="Homeworld", coordinates="1:2:3", galaxy=1, system=2, position=3)],
        research={"Energy": 4},
    )

    out = export_snapshot_json(snapshot=snapshot, output_path=tmp_path / "out" / "state.json")
    data = json.loads(out.read_text(encoding="utf-8"))

    assert data["authenticated"] is True
    assert data["planets"][0]["coordinates"] == "1:2:3"
    assert data["research"] == {"Energy": 4}


def test_write_user_env_vars_merges(tmp_path):
    env = tmp_path / "cfg" / ".env"
    write_user_env_vars({"LIBOGAME_URL": "https://a.example", "LIBOGAME_USERNAME": "u"}, env_path=env)
    write_user_env_vars({"LIBOGAME_USERNAME": "v", "LIBOGAME_PASSWORD": None}, env_path=env)

    lines = env.read_text(encoding="utf-8").splitlines()

    assert "LIBOGAME_URL=https://a.example" in lines
    assert "LIBOGAME_USERNAME=v" in lines
    assert not any(line.startswith("LIBOGAME_PASSWORD") for line in lines)


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("LIBOGAME_URL", "https://env.example/")
    monkeypatch.setenv("LIBOGAME_SERVER_INDEX", "2")

    settings = AppSettings(_env_file=None)

    assert settings.url == "https://env.example/"
    assert settings.server_index == 2


def test_export_leaves_no_temporary_file(tmp_path):
    snapshot = EmpireSnapshot(url="https://en.ogame.example/")
    out = tmp_path / "state.json"
    out.write_text("stale", encoding="utf-8")

    export_snapshot_json(snapshot=snapshot, output_path=out)

    assert sorted(p.name for p in tmp_path.iterdir()) == ["state.json"]
    assert json.loads(out.read_text(encoding="utf-8"))["url"] == "https://en.ogame.example/"


def test_snapshot_to_json_is_stable():
    snapshot = EmpireSnapshot(url="u", research={"Laser": 2, "Energy": 1})
    text = snapshot_to_json(snapshot)

    assert text == snapshot_to_json(snapshot)
    assert text.index('"Energy"') < text.index('"Laser"')
    assert text.endswith("}\n")
