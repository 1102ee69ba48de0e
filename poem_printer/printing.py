"""Standalone print files for the console tools."""
import os
from dataclasses import replace
import re

from .controller import ViewState
from .layout import render_page
from .theme import theme_class, toggle_icon

PRINT_DIR = os.path.join("data", "printed")

def slugify_path(path: str) -> str:
    s = path.strip().strip("/")
    s = re.sub(r"[^\w\-]+", "-", s, flags=re.UNICODE).strip("-")
    return s or "poem"

def write_print_file(state: ViewState, name: str, out_dir: str = PRINT_DIR, theme=None) -> str:
    """Render a poem page without controls; returns the written path."""
    if state.poem is None:
        raise ValueError("nothing to print")
    os.makedirs(out_dir, exist_ok=True)
    html = render_page(replace(state, status=None), theme_class=theme_class(theme), toggle_icon=toggle_icon(theme),
                       interactive=False)
    out_path = os.path.join(out_dir, f"{slugify_path(name)}.html")
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(html)
    return out_path
