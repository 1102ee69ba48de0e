from typing import Optional
import re

from .config import SITE_URL, MSG_INVALID_LINK
from .errors import ValidationError

LINK_PATTERN = re.compile(r"ganjoor\.net/([^#?]+)", re.I)

def parse_link_to_path(url: str) -> Optional[str]:
    """
    Turn a ganjoor.net link into the poem path the API expects.
    'https://ganjoor.net/hafez/ghazal/sh1?x=1' -> '/hafez/ghazal/sh1'
    Anything without the ganjoor.net/<path> segment gives None.
    """
    if not url:
        return None
    m = LINK_PATTERN.search(url.strip())
    if not m:
        return None
    return "/" + m.group(1)

def require_poem_path(url: str) -> str:
    path = parse_link_to_path(url)
    if path is None:
        raise ValidationError(MSG_INVALID_LINK)
    return path

def _sanitize_path(value: str) -> str:
    if value is None:
        raise ValueError("path must not be None")
    v = value.strip()
    v = v.strip("/")
    v = " ".join(v.split())
    if not v:
        raise ValueError("path must not be empty or only slashes")
    return v

def build_poem_url(path: str) -> str:
    return f"{SITE_URL}/{_sanitize_path(path)}"
