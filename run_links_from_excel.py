import os
import sys
import csv
import time

ROOT = os.path.dirname(os.path.abspath(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from poem_printer.parser_excel import read_link_tasks
from poem_printer.controller import PrinterController
from poem_printer.printing import PRINT_DIR, write_print_file

FAILED_CSV = os.path.join("data", "metadata", "failed.csv")

def log_failure(row: int, link: str, reason: str, failed_csv: str = FAILED_CSV):
    os.makedirs(os.path.dirname(failed_csv), exist_ok=True)
    new_file = not os.path.exists(failed_csv)
    with open(failed_csv, "a", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        if new_file:
            w.writerow(["row", "link", "reason"])
        w.writerow([row, link, reason])

def print_links(excel_path: str, out_dir: str = PRINT_DIR, sleep_s: float = 0.3,
                controller: PrinterController = None, failed_csv: str = FAILED_CSV):
    controller = controller or PrinterController()
    tasks = read_link_tasks(excel_path)
    print(f"Links from Excel: {len(tasks)}")

    saved, skipped = 0, 0
    for t in tasks:
        if t.path is None:
            log_failure(t.row, t.link, "not_a_ganjoor_link", failed_csv)
            print(f"[skip] row {t.row}: {t.link} -> not a ganjoor link")
            skipped += 1
            continue
        state = controller.extract_by_link(t.link)
        if state.poem is None:
            log_failure(t.row, t.link, state.status.message, failed_csv)
            print(f"[skip] row {t.row}: {t.link} -> {state.status.message}")
            skipped += 1
        else:
            out = write_print_file(state, t.path, out_dir)
            print(f"[saved] {out}")
            saved += 1
        time.sleep(sleep_s)
    return saved, skipped

def main():
    """
    Usage:
      python run_links_from_excel.py <excel_path> [out_dir]
    Every cell holding a ganjoor.net link becomes one print file.
    """
    if len(sys.argv) < 2:
        print("Usage: python run_links_from_excel.py <excel_path> [out_dir]")
        sys.exit(1)
    excel_path = sys.argv[1]
    out_dir = sys.argv[2] if len(sys.argv) > 2 else PRINT_DIR
    saved, skipped = print_links(excel_path, out_dir)
    print(f"[DONE] saved={saved}, skipped={skipped}")

if __name__ == "__main__":
    main()
