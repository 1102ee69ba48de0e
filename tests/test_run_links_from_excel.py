import csv
import os
import pandas as pd

from poem_printer.controller import PrinterController
from poem_printer.errors import HttpError
from run_links_from_excel import print_links


class StubAPI:
    def fetch_poem_by_path(self, path):
        if path.endswith("sh404"):
            raise HttpError(404)
        return {"id": 1, "title": "غزل", "poetName": "حافظ"}

    def fetch_verses(self, poem_id):
        return [{"text": "یک"}, {"text": "دو"}]


def test_print_links(tmp_path):
    excel = tmp_path / "links.xlsx"
    pd.DataFrame([
        ["https://ganjoor.net/hafez/ghazal/sh1"],
        ["https://ganjoor.net/hafez/ghazal/sh404"],
        ["not a link"],
    ]).to_excel(excel, header=False, index=False)
    out_dir = tmp_path / "printed"
    failed = tmp_path / "metadata" / "failed.csv"

    controller = PrinterController(StubAPI(), log=lambda msg: None)
    saved, skipped = print_links(str(excel), str(out_dir), sleep_s=0,
                                 controller=controller, failed_csv=str(failed))

    assert (saved, skipped) == (1, 2)
    printed = os.listdir(out_dir)
    assert printed == ["hafez-ghazal-sh1.html"]
    html = (out_dir / printed[0]).read_text(encoding="utf-8")
    assert "حافظ" in html
    assert "urlInput" not in html
    assert "status success" not in html

    with open(failed, encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["row", "link", "reason"]
    assert [r[0] for r in rows[1:]] == ["2", "3"]
