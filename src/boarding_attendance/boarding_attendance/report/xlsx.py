from __future__ import annotations

import io
from typing import Any, Mapping, Sequence

import pandas as pd

from ..core.constants import EXPORT_SHEET_NAME


def rows_to_xlsx(rows: Sequence[Mapping[str, Any]], *, sheet_name: str = EXPORT_SHEET_NAME) -> bytes:
    """Serialize uniform records into a single-sheet workbook (header row + one row per record)."""

    df = pd.DataFrame(list(rows))

    # Write into memory (never to disk).
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return output.getvalue()
