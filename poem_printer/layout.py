from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence

from jinja2 import Environment
from markupsafe import Markup


@dataclass(frozen=True)
class VerseBlock:
    left: str
    right: Optional[str] = None  # None: a single centered line

    @property
    def is_pair(self) -> bool:
        return self.right is not None


@dataclass(frozen=True)
class PoemView:
    poet: str
    title: str
    lines: tuple

    @property
    def blocks(self) -> List[VerseBlock]:
        return layout(self.lines)


def layout(lines: Sequence[str]) -> List[VerseBlock]:
    """
    Pair consecutive lines (0,1), (2,3), ... into couplets.
    An odd trailing line becomes a single centered block.
    """
    blocks: List[VerseBlock] = []
    for i in range(0, len(lines), 2):
        first = lines[i]
        second = lines[i + 1] if i + 1 < len(lines) else None
        blocks.append(VerseBlock(first, second))
    return blocks

def blocks_to_lines(blocks: Sequence[VerseBlock]) -> List[str]:
    out: List[str] = []
    for b in blocks:
        out.append(b.left)
        if b.is_pair:
            out.append(b.right)
    return out


_env = Environment(autoescape=True)

POEM_TEMPLATE = _env.from_string("""\
{%- for block in blocks %}
<div class="verse">
{%- if block.is_pair %}
  <div class="hemistichs">
    <div class="hemistich">{{ block.left }}</div>
    <div class="hemistich">{{ block.right }}</div>
  </div>
{%- else %}
  <div style="text-align: center;">{{ block.left }}</div>
{%- endif %}
</div>
{%- endfor %}
""")

PAGE_TEMPLATE = _env.from_string("""\
<!DOCTYPE html>
<html lang="fa" dir="rtl">
<head>
<meta charset="utf-8">
<title>{{ poem.title ~ ' - ' ~ poem.poet if poem else 'چاپ شعر گنجور' }}</title>
<style>
body { font-family: Vazirmatn, Tahoma, sans-serif; margin: 2em; background: #fff; color: #222; }
body.dark-theme { background: #1e1e1e; color: #eee; }
@media (prefers-color-scheme: dark) {
  body.auto-theme { background: #1e1e1e; color: #eee; }
}
.status { padding: .6em 1em; border-radius: 4px; }
.status.loading { background: #e3f2fd; }
.status.success { background: #e8f5e9; animation: hide 0s {{ status.hide_after if status and status.hide_after else 0 }}s forwards; }
.status.error { background: #ffebee; }
@keyframes hide { to { visibility: hidden; height: 0; padding: 0; } }
.verse { margin: .4em 0; }
.hemistichs { display: flex; justify-content: space-between; gap: 3em; }
.hemistich { flex: 1; text-align: center; }
.icon-dark { display: none; }
@media (prefers-color-scheme: dark) {
  body.auto-theme .icon-light { display: none; }
  body.auto-theme .icon-dark { display: inline; }
}
@media print { form, .controls, .status { display: none; } }
</style>
</head>
<body class="{{ theme_class }}">
{%- if interactive %}
<div class="controls">
  <form method="post" action="{{ url_prefix }}/theme"><button id="themeToggle" type="submit">
  {%- if theme_class == "auto-theme" %}<span class="icon-light">🌙</span><span class="icon-dark">☀️</span>
  {%- else %}{{ toggle_icon }}{% endif -%}
  </button></form>
  <form method="post" action="{{ url_prefix }}/extract">
    <input id="urlInput" name="url" placeholder="https://ganjoor.net/...">
    <button id="extractBtn" type="submit"{% if 'extract' in disabled %} disabled{% endif %}>استخراج</button>
  </form>
  <form method="post" action="{{ url_prefix }}/page">
    <input name="url" placeholder="https://...">
    <button id="pageBtn" type="submit"{% if 'page' in disabled %} disabled{% endif %}>خواندن از صفحه</button>
  </form>
  <form method="post" action="{{ url_prefix }}/random">
    <button id="randomBtn" type="submit"{% if 'random' in disabled %} disabled{% endif %}>شعر تصادفی</button>
  </form>
  <form id="manualSection" method="post" action="{{ url_prefix }}/manual">
    <a href="{{ url_prefix }}/?sample=1">نمونه</a>
    <input id="manualPoetName" name="poet" placeholder="نام شاعر" value="{{ manual.poet }}">
    <input id="manualPoemTitle" name="title" placeholder="عنوان شعر" value="{{ manual.title }}">
    <textarea id="manualPoemText" name="body" rows="8">{{ manual.body }}</textarea>
    <button type="submit"{% if 'manual' in disabled %} disabled{% endif %}>نمایش</button>
  </form>
</div>
{%- endif %}
{%- if status %}
<div id="status" class="status {{ status.kind }}">{{ status.message }}</div>
{%- endif %}
{%- if poem %}
<div id="poemContainer">
  <h2 id="poetName">{{ poem.poet }}</h2>
  <h3 id="poemTitle">{{ poem.title }}</h3>
  <div id="poemContent">{{ poem_html }}</div>
</div>
{%- endif %}
</body>
</html>
""")


def render_poem_html(lines: Sequence[str]) -> str:
    return POEM_TEMPLATE.render(blocks=layout(lines))

def render_page(state, theme_class: str = "auto-theme", toggle_icon: str = "🌙",
                interactive: bool = True, url_prefix: str = "", manual=None) -> str:
    """
    Full HTML page for a ViewState. With interactive=False the forms are
    left out, which is what the print files use. `manual` prefills the
    manual form (keys poet, title, body).
    """
    poem = state.poem
    poem_html = Markup(render_poem_html(poem.lines)) if poem else ""
    return PAGE_TEMPLATE.render(
        poem=poem,
        poem_html=poem_html,
        status=state.status,
        disabled=state.disabled,
        theme_class=theme_class,
        toggle_icon=toggle_icon,
        interactive=interactive,
        url_prefix=url_prefix,
        manual=manual or {},
    )
