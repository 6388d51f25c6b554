"""Unit tests for :mod:`lead_prospector.exporters`."""

from __future__ import annotations

import csv
import io

import pandas as pd
import pytest

from lead_prospector.exporters import (
    default_export_filename,
    export_leads,
    leads_to_csv,
    leads_to_dataframe,
)
from lead_prospector.models import CSV_HEADERS


def _parse(text: str) -> list[list[str]]:
    return list(csv.reader(io.StringIO(text, newline="")))


def test_leads_to_csv_quotes_every_cell(sample_leads) -> None:
    text = leads_to_csv(sample_leads)

    first_line = text.split("\n", 1)[0]
    assert first_line == ",".join(f'"{header}"' for header in CSV_HEADERS)
    assert '"Bar ""El Quijote"", Tapas"' in text
    assert '"4"' in text
    assert not text.endswith("\n")


def test_leads_to_csv_round_trips_cell_values(sample_leads) -> None:
    rows = _parse(leads_to_csv(sample_leads))

    assert rows[0] == list(CSV_HEADERS)
    assert len(rows) == 3
    first, second = rows[1], rows[2]
    assert first[0] == 'Bar "El Quijote", Tapas'
    assert first[1] == "Calle Larios 1, Málaga"
    assert first[5] == "4"
    assert first[7] == sample_leads[0].email_body
    assert "\n" in first[7]
    assert second[0] == "Café Luz"
    assert second[1] == ""
    assert second[2] == ""
    assert second[3] == "No disponible"
    assert second[5] == "0"
    assert second[8] == sample_leads[1].chat_message


def test_leads_to_csv_empty_collection_is_noop() -> None:
    assert leads_to_csv([]) is None


def test_export_leads_to_csv_and_excel(sample_leads, tmp_path) -> None:
    csv_path = export_leads(sample_leads, tmp_path / "leads.csv")
    excel_path = export_leads(sample_leads, tmp_path / "leads.xlsx")

    assert csv_path.read_text(encoding="utf-8") == leads_to_csv(sample_leads)
    excel_frame = pd.read_excel(excel_path)
    assert list(excel_frame.columns) == list(CSV_HEADERS)
    assert excel_frame.loc[1, "Name"] == "Café Luz"


def test_export_leads_empty_collection_writes_nothing(tmp_path) -> None:
    target = tmp_path / "leads.csv"

    assert export_leads([], target) is None
    assert not target.exists()


def test_export_leads_rejects_unknown_extension(sample_leads, tmp_path) -> None:
    with pytest.raises(ValueError):
        export_leads(sample_leads, tmp_path / "leads.json")


def test_export_does_not_mutate_collection(sample_leads, tmp_path) -> None:
    before = list(sample_leads)

    export_leads(sample_leads, tmp_path / "leads.csv")

    assert sample_leads == before


def test_leads_to_dataframe_columns(sample_leads) -> None:
    frame = leads_to_dataframe(sample_leads)

    assert list(frame.columns) == list(CSV_HEADERS)
    assert frame.loc[0, "Stars"] == 4


def test_default_export_filename() -> None:
    assert default_export_filename("cafeterías", "Málaga") == "prospectos_cafeteras_mlaga.csv"
