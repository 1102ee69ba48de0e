from typing import List, Optional, Tuple
from bs4 import BeautifulSoup

from .config import ExtractorConfig, UNTITLED, UNKNOWN_POET
from .layout import PoemView
from .formatter import split_body

TITLE_SEPARATOR = "»"

# elements that start a new line in the rendered text
BLOCK_TAGS = [
    "p", "div", "br", "li", "tr", "td", "h1", "h2", "h3", "h4", "h5", "h6",
    "section", "article", "header", "footer", "nav", "aside", "blockquote", "title",
]

def _is_breadcrumb(line: str, config: ExtractorConfig) -> bool:
    return config.breadcrumb_marker in line and config.breadcrumb_separator in line

def is_poetry_line(line: str, config: ExtractorConfig) -> bool:
    fits = config.min_poetry_length < len(line) < config.max_poetry_length
    return fits and config.has_script(line)

def has_rhyme_hint(line: str, config: Optional[ExtractorConfig] = None) -> bool:
    """Common verb endings; diagnostic only, never used to pick lines."""
    config = config or ExtractorConfig()
    return any(ending in line for ending in config.rhyme_endings)

def extract_poem_lines(text: str, config: Optional[ExtractorConfig] = None) -> List[str]:
    """
    Guess which lines of a page's visible text are verses.
    Never raises; an empty list is a valid answer.
    """
    config = config or ExtractorConfig()
    if not text:
        return []
    lines = [ln.strip() for ln in text.split("\n")]
    lines = [ln for ln in lines if ln]

    poem_lines: List[str] = []
    found_poetry = False
    for line in lines:
        # navigation, headers and footer
        if _is_breadcrumb(line, config):
            continue
        if any(marker in line for marker in config.terminators):
            break
        if len(line) < config.min_line_length:
            continue
        if any(marker in line for marker in config.late_terminators):
            break

        if is_poetry_line(line, config):
            poem_lines.append(line)
            found_poetry = True
        elif found_poetry and len(line) > config.continuation_length:
            poem_lines.append(line)
    return poem_lines

def extract_poem_text(text: str, config: Optional[ExtractorConfig] = None) -> str:
    return "\n".join(extract_poem_lines(text, config))

def extract_title_and_poet(title: Optional[str]) -> Tuple[str, str]:
    """
    'گنجور » حافظ » غزلیات » غزل شمارهٔ ۱' -> ('غزل شمارهٔ ۱', 'حافظ')
    Returns (title, poet).
    """
    if not title or TITLE_SEPARATOR not in title:
        return UNTITLED, UNKNOWN_POET
    parts = title.split(TITLE_SEPARATOR)
    poet = parts[1].strip() or UNKNOWN_POET
    poem_title = parts[-1].strip() or UNTITLED
    return poem_title, poet

def extract_from_html(html: str, config: Optional[ExtractorConfig] = None) -> PoemView:
    soup = BeautifulSoup(html or "", "html.parser")

    # Remove global noise
    for tag in soup.find_all(["script", "style", "noscript"]):
        tag.decompose()

    root = soup.body or soup
    # inline markup stays inside its line; only block ends break lines
    for tag in root.find_all(BLOCK_TAGS):
        tag.insert_after("\n")
    text = root.get_text()
    page_title = soup.title.get_text() if soup.title else None

    title, poet = extract_title_and_poet(page_title)
    body = extract_poem_text(text, config)
    return PoemView(poet=poet, title=title, lines=tuple(split_body(body)))
