from typing import Any, Dict, Iterable, List

from .config import HEMISTICH_SEPARATOR
from .errors import ParseError

def _text(value) -> str:
    return value if isinstance(value, str) else ""

def verse_to_line(verse: Dict[str, Any]) -> str:
    hemistichs = verse.get("hemistichs")
    if isinstance(hemistichs, list) and hemistichs:
        return HEMISTICH_SEPARATOR.join(
            _text(h.get("text")) if isinstance(h, dict) else "" for h in hemistichs
        )
    return _text(verse.get("text"))

def flatten(verses: Iterable[Dict[str, Any]]) -> List[str]:
    """
    Verse records -> display lines, in API order.
    Lines that are blank after trimming are dropped. A record that is not
    a mapping at all means the response is not a verse list.
    """
    lines = []
    for i, v in enumerate(verses):
        if not isinstance(v, dict):
            raise ParseError(f"verse {i} is not a record: {v!r}")
        line = verse_to_line(v)
        if line.strip():
            lines.append(line)
    return lines

def split_body(text: str) -> List[str]:
    """Free text whose line breaks already separate the hemistichs."""
    if not text:
        return []
    return [line for line in text.splitlines() if line.strip()]
