from __future__ import annotations
from typing import Any, Dict, List, Optional
from urllib.parse import quote
import requests

from .config import API_BASE, REQUEST_TIMEOUT, HEADERS, UNKNOWN_POET
from .errors import HttpError, NetworkError, ParseError
from .fields import first_present, POET_ID_CHAIN, POET_RECORD_NAME_CHAIN


class GanjoorAPI:
    """
    Thin client for the public Ganjoor API.
    One GET per call, no caching and no retry.
    """

    def __init__(self, base_url: str = API_BASE, timeout: float = REQUEST_TIMEOUT, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def _get(self, url: str):
        try:
            r = self.session.get(url, headers=HEADERS, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkError(str(e)) from e
        if not 200 <= r.status_code < 300:
            raise HttpError(r.status_code)
        return r

    def _get_json(self, endpoint: str) -> Any:
        r = self._get(f"{self.base_url}{endpoint}")
        try:
            return r.json()
        except ValueError as e:
            raise ParseError(f"پاسخ نامعتبر از {endpoint}") from e

    def fetch_poem_by_path(self, path: str) -> Dict[str, Any]:
        return self._get_json(f"/poem?url={quote(path, safe='')}")

    def fetch_verses(self, poem_id: int) -> List[Dict[str, Any]]:
        verses = self._get_json(f"/poem/{poem_id}/verses")
        if not isinstance(verses, list):
            raise ParseError(f"verses for poem {poem_id} is not a list")
        if not all(isinstance(v, dict) for v in verses):
            raise ParseError(f"verses for poem {poem_id} hold a non-record entry")
        return verses

    def fetch_random_poem(self) -> Dict[str, Any]:
        return self._get_json("/poem/random")

    def fetch_poet(self, poet_id: int) -> Dict[str, Any]:
        return self._get_json(f"/poet/{poet_id}")

    def fetch_html(self, url: str) -> str:
        return self._get(url).text


def resolve_poet_id(poem: Dict[str, Any]) -> Optional[int]:
    return first_present(poem, POET_ID_CHAIN)

def poet_name_from_record(record: Dict[str, Any], default: str = UNKNOWN_POET) -> str:
    return first_present(record, POET_RECORD_NAME_CHAIN, default)
