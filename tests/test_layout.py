from poem_printer.layout import VerseBlock, PoemView, layout, blocks_to_lines, render_poem_html, render_page

def test_pairs_and_trailing_single():
    assert layout(["A", "B", "C"]) == [VerseBlock("A", "B"), VerseBlock("C")]

def test_two_flattened_lines_pair_into_one_block():
    blocks = layout(["الف   ب", "ج"])
    assert blocks == [VerseBlock(left="الف   ب", right="ج")]
    assert blocks[0].is_pair

def test_empty():
    assert layout([]) == []

def test_single_line_is_centered_block():
    blocks = layout(["تنها"])
    assert blocks == [VerseBlock("تنها", None)]
    assert not blocks[0].is_pair

def test_deterministic_and_reserializes():
    lines = ["1", "2", "3", "4", "5", "6"]
    blocks = layout(lines)
    assert layout(lines) == blocks
    assert blocks_to_lines(blocks) == lines
    assert layout(blocks_to_lines(blocks)) == blocks

def test_odd_input_reserializes_too():
    lines = ["1", "2", "3"]
    assert layout(blocks_to_lines(layout(lines))) == layout(lines)

def test_poem_view_blocks():
    view = PoemView(poet="حافظ", title="غزل ۱", lines=("a", "b", "c"))
    assert view.blocks == [VerseBlock("a", "b"), VerseBlock("c")]

def test_render_poem_html():
    html = render_poem_html(["A", "B", "C"])
    assert html.count('class="verse"') == 2
    assert html.count('class="hemistich"') == 2
    assert 'text-align: center;">C</div>' in html

def test_render_escapes_text():
    html = render_poem_html(["<b>x</b>"])
    assert "<b>" not in html
    assert "&lt;b&gt;x&lt;/b&gt;" in html

def test_page_disables_running_trigger():
    from poem_printer.controller import ViewState, Status
    state = ViewState(status=Status("loading", "..."), disabled=frozenset({"extract"}))
    page = render_page(state)
    assert 'id="extractBtn" type="submit" disabled' in page
    assert 'id="randomBtn" type="submit">' in page
