import json

from pager.config import DEFAULT_AUTOSAVE_INTERVAL, DEFAULT_AUTOSAVE_KEEP, load_settings


def test_missing_file_gives_defaults(tmp_path, capsys):
    settings = load_settings(str(tmp_path / "nope.json"))
    assert settings.autosave_enabled is False
    assert settings.autosave_interval == DEFAULT_AUTOSAVE_INTERVAL
    assert settings.autosave_keep == DEFAULT_AUTOSAVE_KEEP
    assert settings.buffer_root is None
    assert "Warning" in capsys.readouterr().out


def test_reads_values(tmp_path):
    path = tmp_path / "editor.json"
    path.write_text(json.dumps({"autosave_enabled": True, "autosave_interval": 2, "autosave_keep": 3, "buffer_root": "/tmp/pager"}), encoding="utf-8")
    settings = load_settings(str(path))
    assert settings.autosave_enabled is True
    assert settings.autosave_interval == 2.0
    assert settings.autosave_keep == 3
    assert settings.buffer_root == "/tmp/pager"


def test_bad_values_fall_back(tmp_path, capsys):
    path = tmp_path / "editor.json"
    path.write_text(json.dumps({"autosave_enabled": "yes", "autosave_interval": -1, "autosave_keep": 0}), encoding="utf-8")
    settings = load_settings(str(path))
    assert settings.autosave_enabled is False
    assert settings.autosave_interval == DEFAULT_AUTOSAVE_INTERVAL
    assert settings.autosave_keep == DEFAULT_AUTOSAVE_KEEP
    out = capsys.readouterr().out
    assert "autosave_enabled" in out and "autosave_interval" in out and "autosave_keep" in out


def test_malformed_json(tmp_path, capsys):
    path = tmp_path / "editor.json"
    path.write_text("{not json", encoding="utf-8")
    settings = load_settings(str(path))
    assert settings.autosave_interval == DEFAULT_AUTOSAVE_INTERVAL
    assert "Could not load" in capsys.readouterr().out
