import datetime as dt

import pytest
from openpyxl import Workbook

from appointments.analytics.aggregate import aggregate
from appointments.data.loader import IngestionError, load_rows, load_rows_from_bytes
from appointments.data.store import DataStore


def _write_xlsx(path, header, rows):
    wb = Workbook()
    ws = wb.active
    ws.append(header)
    for row in rows:
        ws.append(row)
    wb.save(path)
    return path


class TestCsv:
    def test_greek_headers_and_blank_rows(self, greek_csv_bytes):
        rows = load_rows_from_bytes("Ραντεβού.csv", greek_csv_bytes)
        assert len(rows) == 3
        assert rows[0]["Χρήστης δημιουργίας"] == "k_tsipasis"
        assert rows[2]["Source Type"] == "OnlineOSB"

    def test_mixed_date_formats_aggregate(self, greek_csv_bytes):
        result = aggregate(load_rows_from_bytes("export.csv", greek_csv_bytes))
        assert result["by_date"] == [
            {"date": "01/08/2025", "count": 1},
            {"date": "02/08/2025", "count": 1},
            {"date": "03/08/2025", "count": 1},
        ]
        assert result["by_location"] == [
            {"label": "ΒΟΤΑΝΙΚΟΣ", "count": 2},
            {"label": "ΒΟΛΟΣ", "count": 1},
        ]

    def test_greek_codepage_fallback(self):
        content = "Χρήστης;Πηγή\nk_tsipasis;SP4\n".encode("cp1253")
        rows = load_rows_from_bytes("export.txt", content)
        assert rows == [{"Χρήστης": "k_tsipasis", "Πηγή": "SP4"}]

    def test_single_column_with_spaced_header(self):
        content = "Χρήστης δημιουργίας\nk_tsipasis\ns_kouvari\n".encode("utf-8")
        rows = load_rows_from_bytes("users.csv", content)
        assert rows == [
            {"Χρήστης δημιουργίας": "k_tsipasis"},
            {"Χρήστης δημιουργίας": "s_kouvari"},
        ]

    @pytest.mark.parametrize("sep", [";", "\t", "|"])
    def test_other_delimiters(self, sep):
        content = sep.join(["Source Type", "Store"]) + "\n" + sep.join(["SP4", "ΒΟΛΟΣ 2"]) + "\n"
        rows = load_rows_from_bytes("export.csv", content.encode("utf-8"))
        assert rows == [{"Source Type": "SP4", "Store": "ΒΟΛΟΣ 2"}]

    def test_cells_stay_text(self):
        rows = load_rows_from_bytes("export.csv", b"Store,Date\n007,45870\n")
        assert rows == [{"Store": "007", "Date": "45870"}]


class TestExcel:
    def test_decoded_dates_and_numeric_stores(self, tmp_path):
        path = _write_xlsx(tmp_path / "export.xlsx", ["User", "Store", "Date"], [
            ["a", 101, dt.datetime(2025, 8, 1, 9, 30)],
            ["b", 102, dt.datetime(2025, 8, 2)],
            [None, None, None],
            ["a", 101, dt.datetime(2025, 8, 1, 17, 0)],
        ])
        rows = load_rows(path)
        assert len(rows) == 3
        assert rows[0]["Store"] == 101
        result = aggregate(rows)
        assert result["by_location"] == [{"label": "101", "count": 2}, {"label": "102", "count": 1}]
        assert result["by_date"] == [{"date": "01/08/2025", "count": 2}, {"date": "02/08/2025", "count": 1}]

    def test_missing_cells_become_none(self, tmp_path):
        path = _write_xlsx(tmp_path / "export.xlsx", ["User", "Store"], [["a", None], ["b", "Volos"]])
        rows = load_rows(path)
        assert rows[0] == {"User": "a", "Store": None}

    def test_corrupt_workbook(self):
        with pytest.raises(IngestionError):
            load_rows_from_bytes("export.xlsx", b"this is not a zip file")


class TestRejections:
    @pytest.mark.parametrize("name", ["export.pdf", "export.xls", "export"])
    def test_unsupported_extension(self, name):
        with pytest.raises(IngestionError, match="Unsupported file type"):
            load_rows_from_bytes(name, b"a,b\n1,2\n")

    def test_empty_content(self):
        with pytest.raises(IngestionError, match="empty"):
            load_rows_from_bytes("export.csv", b"")

    def test_missing_file(self, tmp_path):
        with pytest.raises(IngestionError, match="not found"):
            load_rows(tmp_path / "nope.csv")

    def test_ingestion_error_is_value_error(self):
        assert issubclass(IngestionError, ValueError)


class TestDataStore:
    def test_upload_replaces_rows(self, sample_store, greek_csv_bytes):
        sample_store.load_bytes("export.csv", greek_csv_bytes)
        assert sample_store.filename == "export.csv"
        assert sample_store.row_count() == 3
        assert sample_store.creators() == ["k_tsipasis", "s_sarellis", "cc_maria"]

    def test_failed_upload_keeps_previous_rows(self, sample_store):
        with pytest.raises(IngestionError):
            sample_store.load_bytes("export.pdf", b"%PDF")
        assert sample_store.row_count() == 8

    def test_metadata(self, sample_store):
        assert sample_store.is_loaded
        assert not DataStore().is_loaded
        assert sample_store.sources() == ["SP4", "OnlineOSB"]
        assert len(sample_store.locations()) == 5
        assert sample_store.date_bounds() == (dt.date(2025, 8, 1), dt.date(2025, 8, 6))
        assert sample_store.field_mapping() == {
            "creator": "Χρήστης δημιουργίας",
            "source": "Source Type",
            "location": "Υποκατάστημα",
            "date": "Ημερομηνία δημιουργίας",
        }
