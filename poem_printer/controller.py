from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, Optional, Tuple

from .api_client import GanjoorAPI, resolve_poet_id, poet_name_from_record
from .config import (
    ExtractorConfig,
    STATUS_HIDE_AFTER,
    UNTITLED,
    UNKNOWN_POET,
    MSG_INVALID_LINK,
    MSG_LOADING_POEM,
    MSG_POEM_OK,
    MSG_POEM_ERR,
    MSG_LOADING_RANDOM,
    MSG_RANDOM_OK,
    MSG_RANDOM_ERR,
    MSG_EMPTY_BODY,
    MSG_MANUAL_OK,
    MSG_LOADING_PAGE,
    MSG_PAGE_EMPTY,
    MSG_PAGE_ERR,
)
from .errors import PrinterError, ValidationError, ParseError, EnrichmentFailure
from .fields import first_present, LINK_TITLE_CHAIN, RANDOM_TITLE_CHAIN, POEM_POET_CHAIN
from .formatter import flatten, split_body
from .layout import PoemView
from .link_validator import require_poem_path
from .page_extractor import extract_from_html, has_rhyme_hint

LOADING = "loading"
SUCCESS = "success"
ERROR = "error"

# trigger names, one per user control
EXTRACT = "extract"
RANDOM = "random"
MANUAL = "manual"
PAGE = "page"


@dataclass(frozen=True)
class Status:
    kind: str
    message: str
    hide_after: Optional[float] = None


@dataclass(frozen=True)
class ViewState:
    poem: Optional[PoemView] = None
    status: Optional[Status] = None
    disabled: FrozenSet[str] = field(default_factory=frozenset)


def _success(message: str) -> Status:
    return Status(SUCCESS, message, STATUS_HIDE_AFTER)

def _error(message: str) -> Status:
    return Status(ERROR, message)


class PrinterController:
    """
    Runs the user workflows and returns the resulting ViewState.

    Nothing here touches a display: `on_status` receives every status change
    (loading first, then the outcome) and `on_render` receives each poem that
    is shown. A failed workflow never renders.
    """

    def __init__(self, api: Optional[GanjoorAPI] = None, log: Callable[[str], None] = print,
                 on_status: Optional[Callable[[Status], None]] = None,
                 on_render: Optional[Callable[[PoemView], None]] = None,
                 extractor_config: Optional[ExtractorConfig] = None):
        self.api = api if api is not None else GanjoorAPI()
        self.log = log
        self.on_status = on_status
        self.on_render = on_render
        self.extractor_config = extractor_config
        self.disabled = set()
        self.state = ViewState()

    # ---------- state ----------
    def _notify(self, status: Status):
        if self.on_status is not None:
            self.on_status(status)

    def _show(self, poem: Optional[PoemView], status: Status) -> ViewState:
        if poem is not None and self.on_render is not None:
            self.on_render(poem)
        self._notify(status)
        self.state = ViewState(poem, status, frozenset(self.disabled))
        return self.state

    @contextmanager
    def _busy(self, trigger: str):
        self.disabled.add(trigger)
        try:
            yield
        finally:
            self.disabled.discard(trigger)

    def _run(self, trigger: str, loading: str, error_prefix: str,
             work: Callable[[], Tuple[PoemView, str]]) -> ViewState:
        poem, status = None, None
        with self._busy(trigger):
            loading_status = Status(LOADING, loading)
            self.state = ViewState(self.state.poem, loading_status, frozenset(self.disabled))
            self._notify(loading_status)
            try:
                poem, ok_message = work()
                status = _success(ok_message)
            except PrinterError as e:
                self.log(f"[ERR] {trigger}: {e}")
                poem, status = None, _error(error_prefix + str(e))
        return self._show(poem, status)

    # ---------- workflows ----------
    def extract_by_link(self, link: str) -> ViewState:
        try:
            path = require_poem_path(link)
        except ValidationError as e:
            return self._show(None, _error(str(e)))

        def work():
            self.log(f"[RUN] poem {path}")
            poem = self.api.fetch_poem_by_path(path)
            verses = self.api.fetch_verses(_poem_id(poem))
            view = PoemView(
                poet=first_present(poem, POEM_POET_CHAIN, UNKNOWN_POET),
                title=first_present(poem, LINK_TITLE_CHAIN, UNTITLED),
                lines=tuple(flatten(verses)),
            )
            self.log(f"[OK] {view.poet} / {view.title}: {len(view.lines)} lines")
            return view, MSG_POEM_OK

        return self._run(EXTRACT, MSG_LOADING_POEM, MSG_POEM_ERR, work)

    def random_poem(self) -> ViewState:
        def work():
            poem = self.api.fetch_random_poem()
            poem_id = _poem_id(poem)
            self.log(f"[RUN] random poem {poem_id}")
            try:
                poet = self._poet_name(poem)
            except EnrichmentFailure as e:
                self.log(f"[WARN] could not fetch poet info: {e}")
                poet = UNKNOWN_POET
            verses = self.api.fetch_verses(poem_id)
            view = PoemView(
                poet=poet,
                title=first_present(poem, RANDOM_TITLE_CHAIN, UNTITLED),
                lines=tuple(flatten(verses)),
            )
            return view, MSG_RANDOM_OK

        return self._run(RANDOM, MSG_LOADING_RANDOM, MSG_RANDOM_ERR, work)

    def _poet_name(self, poem) -> str:
        poet_id = resolve_poet_id(poem)
        if poet_id is None:
            self.log("[INFO] no poet id in random poem response")
            return UNKNOWN_POET
        try:
            record = self.api.fetch_poet(poet_id)
        except PrinterError as e:
            raise EnrichmentFailure(f"poet {poet_id}: {e}") from e
        return poet_name_from_record(record)

    def manual_entry(self, poet: str, title: str, body: str) -> ViewState:
        with self._busy(MANUAL):
            try:
                poem = manual_view(poet, title, body)
                status = _success(MSG_MANUAL_OK)
            except ValidationError as e:
                poem, status = None, _error(str(e))
        return self._show(poem, status)

    def extract_from_page(self, url: str) -> ViewState:
        """Heuristic fallback for pages the API cannot describe."""
        url = (url or "").strip()
        if not url.lower().startswith(("http://", "https://")):
            return self._show(None, _error(MSG_INVALID_LINK))

        def work():
            html = self.api.fetch_html(url)
            view = extract_from_html(html, self.extractor_config)
            if not view.lines:
                self.log(f"[skip] {url} -> no poem lines")
                raise ParseError(MSG_PAGE_EMPTY)
            hinted = sum(1 for line in view.lines if has_rhyme_hint(line, self.extractor_config))
            self.log(f"[OK] {url}: {len(view.lines)} lines, {hinted} with rhyme hint")
            return view, MSG_POEM_OK

        return self._run(PAGE, MSG_LOADING_PAGE, MSG_PAGE_ERR, work)


def _poem_id(poem) -> int:
    poem_id = poem.get("id") if isinstance(poem, dict) else None
    if poem_id is None:
        raise ParseError("poem record has no id")
    return poem_id

def manual_view(poet: str, title: str, body: str) -> PoemView:
    """Typed-in poem; its line breaks already separate the hemistichs."""
    text = (body or "").strip()
    if not text:
        raise ValidationError(MSG_EMPTY_BODY)
    return PoemView(
        poet=(poet or "").strip() or UNKNOWN_POET,
        title=(title or "").strip() or UNTITLED,
        lines=tuple(split_body(text)),
    )
