import json
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_AUTOSAVE_INTERVAL = 5.0
DEFAULT_AUTOSAVE_KEEP = 10

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SETTINGS_PATH = os.path.join(PROJECT_ROOT, "config", "editor.json")


@dataclass
class EditorSettings:
    autosave_enabled: bool = False
    autosave_interval: float = DEFAULT_AUTOSAVE_INTERVAL
    autosave_keep: int = DEFAULT_AUTOSAVE_KEEP
    # directory that receives config/buffer; None means the project root
    buffer_root: Optional[str] = None


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def load_settings(path: Optional[str] = None) -> EditorSettings:
    """Load editor settings from config/editor.json, falling back to defaults.

    Problems with the file are reported as warnings; they never stop the editor.
    """
    settings_path = path or SETTINGS_PATH
    settings = EditorSettings()

    if not os.path.exists(settings_path):
        print(f"Warning: editor.json not found at {settings_path}, using defaults")
        return settings

    try:
        with open(settings_path, "r", encoding="utf-8") as settings_file:
            raw = json.load(settings_file) or {}
    except (OSError, ValueError) as exc:
        print(f"Warning: Could not load settings from {settings_path}: {exc}")
        return settings

    if not isinstance(raw, dict):
        print(f"Warning: {settings_path} must contain a JSON object, using defaults")
        return settings

    if "autosave_enabled" in raw:
        if isinstance(raw["autosave_enabled"], bool):
            settings.autosave_enabled = raw["autosave_enabled"]
        else:
            print(f"Warning: 'autosave_enabled' must be true or false, got {raw['autosave_enabled']!r}")

    if "autosave_interval" in raw:
        interval = raw["autosave_interval"]
        if _is_number(interval) and interval > 0:
            settings.autosave_interval = float(interval)
        else:
            print(f"Warning: 'autosave_interval' must be a positive number, got {interval!r}")

    if "autosave_keep" in raw:
        keep = raw["autosave_keep"]
        if isinstance(keep, int) and not isinstance(keep, bool) and keep >= 1:
            settings.autosave_keep = keep
        else:
            print(f"Warning: 'autosave_keep' must be an integer >= 1, got {keep!r}")

    if raw.get("buffer_root") is not None:
        root = raw["buffer_root"]
        if isinstance(root, str) and root:
            settings.buffer_root = root
        else:
            print(f"Warning: 'buffer_root' must be a directory path, got {root!r}")

    return settings
