from __future__ import annotations

import csv
import io
from typing import Iterable

import pandas as pd

from ..core.constants import REPORT_FIELDS


def summaries_to_csv(rows: Iterable[dict]) -> bytes:
    """Write report rows to CSV bytes (UTF-8 with BOM so Excel opens it cleanly)."""
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=REPORT_FIELDS)
    writer.writeheader()
    for row in rows:
        writer.writerow(row)
    return out.getvalue().encode("utf-8-sig")


def summaries_to_excel(rows: Iterable[dict]) -> bytes:
    df = pd.DataFrame(list(rows), columns=REPORT_FIELDS)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="TimeTracking")
    return output.getvalue()
