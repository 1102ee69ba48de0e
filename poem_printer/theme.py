from typing import MutableMapping, Optional
import json
import os

from .config import THEME_KEY

DARK = "dark"
LIGHT = "light"
THEMES = (DARK, LIGHT)

def toggle(pref: Optional[str]) -> str:
    # unset renders without the dark class, so it flips to dark
    return LIGHT if pref == DARK else DARK

def theme_class(pref: Optional[str]) -> str:
    if pref == DARK:
        return "dark-theme"
    if pref == LIGHT:
        return ""
    return "auto-theme"

def toggle_icon(pref: Optional[str]) -> str:
    return "☀️" if pref == DARK else "🌙"


class PreferenceStore:
    """One string preference kept under a fixed key of a mapping."""

    def __init__(self, mapping: MutableMapping, key: str = THEME_KEY):
        self.mapping = mapping
        self.key = key

    def get(self) -> Optional[str]:
        value = self.mapping.get(self.key)
        return value if value in THEMES else None

    def set(self, pref: str):
        if pref not in THEMES:
            raise ValueError(f"unknown theme: {pref!r}")
        self.mapping[self.key] = pref

    def toggle(self) -> str:
        new = toggle(self.get())
        self.set(new)
        return new


def load_prefs(path: str) -> dict:
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)

def save_prefs(path: str, prefs: dict):
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(prefs, f, ensure_ascii=False, indent=2)
