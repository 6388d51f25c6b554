"""Export utilities for prospected leads."""
from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Optional, Sequence, Union

import pandas as pd

from .models import CSV_HEADERS, NormalizedLead
from .slug import slugify

LOGGER = logging.getLogger(__name__)

PathLike = Union[str, Path]

_LINE_TERMINATOR = "\n"


def leads_to_dataframe(leads: Sequence[NormalizedLead]) -> pd.DataFrame:
    """Convert leads into a :class:`pandas.DataFrame` with the export columns."""

    return pd.DataFrame([lead.as_row() for lead in leads], columns=list(CSV_HEADERS))


def leads_to_csv(leads: Sequence[NormalizedLead]) -> Optional[str]:
    """Render ``leads`` as comma separated text with every cell quoted.

    Returns ``None`` when there is nothing to export so callers can skip
    writing a header-only file.
    """

    if not leads:
        return None

    text = leads_to_dataframe(leads).to_csv(
        index=False,
        quoting=csv.QUOTE_ALL,
        doublequote=True,
        na_rep="",
        lineterminator=_LINE_TERMINATOR,
    )
    # Rows are separated, not terminated, by newlines.
    return text[: -len(_LINE_TERMINATOR)] if text.endswith(_LINE_TERMINATOR) else text


def export_leads(
    leads: Sequence[NormalizedLead],
    path: PathLike,
    *,
    sheet_name: str = "Leads",
) -> Optional[Path]:
    """Write leads to a CSV or Excel file, returning the path written.

    Nothing is written and ``None`` is returned for an empty collection.
    """

    if not leads:
        LOGGER.info("No leads to export - skipping %s", path)
        return None

    output_path = Path(path)
    suffix = output_path.suffix.lower()

    if suffix == ".csv":
        text = leads_to_csv(leads) or ""
        with output_path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(text)
    elif suffix in {".xlsx", ".xlsm"}:
        leads_to_dataframe(leads).to_excel(output_path, index=False, sheet_name=sheet_name, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported export file extension: {suffix}")

    LOGGER.info("Exported %s leads to %s", len(leads), output_path)
    return output_path


def default_export_filename(query: str, city: str, suffix: str = ".csv") -> str:
    """Return a download name such as ``prospectos_cafeteras_mlaga.csv``."""

    parts = [part for part in (slugify(query), slugify(city)) if part]
    return "_".join(["prospectos", *parts]) + suffix


__all__ = ["default_export_filename", "export_leads", "leads_to_csv", "leads_to_dataframe"]
