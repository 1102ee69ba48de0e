from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import os
import pandas as pd  # requires: pip install pandas openpyxl

from .link_validator import parse_link_to_path

@dataclass
class LinkTask:
    row: int
    link: str
    path: Optional[str]  # None when the cell is not a ganjoor.net link

def read_link_tasks(excel_path: str) -> List[LinkTask]:
    """
    Read an Excel file holding poem links in any cell.
    Cells are scanned row by row, left to right; blank cells are skipped and
    repeated links are kept only once. Rows are 1-based as Excel shows them.
    Non-ganjoor cells are returned with path=None so the caller can report them.
    """
    if not os.path.exists(excel_path):
        raise FileNotFoundError(f"Excel file not found: {excel_path}")

    df = pd.read_excel(excel_path, header=None, dtype=str)
    if df.empty:
        return []

    tasks: List[LinkTask] = []
    seen = set()
    for row_idx, row in enumerate(df.itertuples(index=False), start=1):
        for v in row:
            if v is None or pd.isna(v):
                continue
            s = str(v).strip()
            if not s or s in seen:
                continue
            seen.add(s)
            tasks.append(LinkTask(row=row_idx, link=s, path=parse_link_to_path(s)))
    return tasks
