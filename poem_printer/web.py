"""Flask front-end: one page, one POST route per control."""
from __future__ import annotations
from typing import Optional

from flask import Flask, redirect, request, url_for

from .api_client import GanjoorAPI
from .config import (
    THEME_KEY,
    EXTRACTOR_CONFIG_PATH,
    SAMPLE_POET,
    SAMPLE_TITLE,
    SAMPLE_POEM,
    load_extractor_config,
)
from .controller import PrinterController, ViewState
from .layout import render_page
from .theme import PreferenceStore, theme_class, toggle_icon

THEME_COOKIE_MAX_AGE = 365 * 24 * 3600
SAMPLE_FORM = {"poet": SAMPLE_POET, "title": SAMPLE_TITLE, "body": SAMPLE_POEM}


def _theme() -> Optional[str]:
    return PreferenceStore(dict(request.cookies), THEME_KEY).get()

def _page(state: ViewState, manual=None):
    pref = _theme()
    return render_page(state, theme_class=theme_class(pref), toggle_icon=toggle_icon(pref),
                       url_prefix=request.script_root, manual=manual)


def create_app(api: Optional[GanjoorAPI] = None, extractor_config_path: Optional[str] = None) -> Flask:
    app = Flask(__name__)
    api = api if api is not None else GanjoorAPI()
    extractor_config = load_extractor_config(extractor_config_path or EXTRACTOR_CONFIG_PATH)

    def controller() -> PrinterController:
        # one per request; workflows never share display state
        return PrinterController(api, extractor_config=extractor_config)

    @app.get("/")
    def index():
        manual = SAMPLE_FORM if request.args.get("sample") else None
        return _page(ViewState(), manual)

    @app.post("/extract")
    def extract():
        return _page(controller().extract_by_link(request.form.get("url", "")))

    @app.post("/random")
    def random_poem():
        return _page(controller().random_poem())

    @app.post("/manual")
    def manual():
        form = request.form
        return _page(controller().manual_entry(form.get("poet", ""), form.get("title", ""),
                                               form.get("body", "")))

    @app.post("/page")
    def page():
        return _page(controller().extract_from_page(request.form.get("url", "")))

    @app.post("/theme")
    def theme():
        new = PreferenceStore(dict(request.cookies), THEME_KEY).toggle()
        resp = redirect(url_for("index"))
        resp.set_cookie(THEME_KEY, new, max_age=THEME_COOKIE_MAX_AGE, samesite="Lax")
        return resp

    return app
