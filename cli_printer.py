import os
import re
import sys

ROOT = os.path.dirname(os.path.abspath(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from poem_printer.controller import PrinterController, ViewState
from poem_printer.config import load_extractor_config, SAMPLE_POET, SAMPLE_TITLE, SAMPLE_POEM
from poem_printer.link_validator import parse_link_to_path, build_poem_url
from poem_printer.printing import write_print_file
from poem_printer.theme import PreferenceStore, load_prefs, save_prefs

PREFS_PATH = os.path.join("inputs", "config", "prefs.json")

ACTIONS = [
    "Print poem from ganjoor link",
    "Print a random poem",
    "Type a poem",
    "Read poem from any web page",
    "Print the sample poem",
    "Toggle theme",
]

# ---------- helpers ----------
def to_int_safe(s: str) -> int:
    m = re.search(r"(\d+)", str(s))
    if not m:
        raise ValueError("invalid number")
    return int(m.group(1))

def prompt_choice(items: list[str], title: str, extras: list[str] = None) -> str:
    if extras is None: extras = []
    opts = items + extras
    print(f"\n== {title} ==")
    for i, it in enumerate(opts, 1):
        print(f"{i}. {it}")
    while True:
        ans = input("Enter number: ").strip()
        try:
            idx = to_int_safe(ans)
            if 1 <= idx <= len(opts):
                return opts[idx-1]
        except ValueError:
            pass
        print("Invalid choice.")

def read_multiline(prompt: str) -> str:
    print(prompt + " (finish with an empty line)")
    lines = []
    while True:
        ln = input()
        if not ln.strip():
            break
        lines.append(ln)
    return "\n".join(lines)

def preview(state: ViewState, limit: int = 6):
    poem = state.poem
    print(f"--- {poem.poet} | {poem.title} ---")
    for block in poem.blocks[:limit]:
        if block.is_pair:
            print(f"{block.left}   ||   {block.right}")
        else:
            print(f"        {block.left}")
    if len(poem.blocks) > limit:
        print(f"... ({len(poem.blocks)} verses)")
    print("---------------")

def report(state: ViewState, name: str, theme):
    print(f"[{state.status.kind.upper()}] {state.status.message}")
    if state.poem is None:
        return
    preview(state)
    out = write_print_file(state, name, theme=theme)
    print(f"[saved] {out}")

# ---------- CLI ----------
def main():
    """
    Interactive printer:
    - fetch a poem by link or at random from the Ganjoor API,
      type one in, or pull one out of an arbitrary page;
    - each result is previewed and written to data/printed/<name>.html.
    """
    prefs = load_prefs(PREFS_PATH)
    store = PreferenceStore(prefs)
    controller = PrinterController(extractor_config=load_extractor_config())

    while True:
        action = prompt_choice(ACTIONS, f"Ganjoor printer (theme={store.get() or 'auto'})", extras=["Exit"])
        if action == "Exit":
            return
        if action == ACTIONS[0]:
            link = input("Ganjoor link: ").strip()
            path = parse_link_to_path(link)
            state = controller.extract_by_link(link)
            if state.poem is None and path is not None:
                print(f"[ERR] {state.status.message}")
                if input("Read the ganjoor page itself instead? (y/n): ").strip().lower().startswith("y"):
                    state = controller.extract_from_page(build_poem_url(path))
            report(state, path or "poem", store.get())
        elif action == ACTIONS[1]:
            state = controller.random_poem()
            name = state.poem.title if state.poem else "random"
            report(state, name, store.get())
        elif action == ACTIONS[2]:
            poet = input("Poet: ").strip()
            title = input("Title: ").strip()
            body = read_multiline("Poem text")
            report(controller.manual_entry(poet, title, body), title or "manual", store.get())
        elif action == ACTIONS[3]:
            url = input("Page URL: ").strip()
            state = controller.extract_from_page(url)
            report(state, state.poem.title if state.poem else "page", store.get())
        elif action == ACTIONS[4]:
            state = controller.manual_entry(SAMPLE_POET, SAMPLE_TITLE, SAMPLE_POEM)
            report(state, "sample", store.get())
        elif action == ACTIONS[5]:
            new = store.toggle()
            save_prefs(PREFS_PATH, prefs)
            print(f"[OK] theme -> {new}")

if __name__ == "__main__":
    main()
