from __future__ import annotations

import pytest

from appointments.data.store import DataStore


@pytest.fixture
def three_rows():
    return [
        {"Creator": "a", "Source": "S1", "Date": "01/01/2025"},
        {"Creator": "b", "Source": "S1", "Date": "02/01/2025"},
        {"Creator": "a", "Source": "S2", "Date": "01/01/2025"},
    ]


@pytest.fixture
def sample_store() -> DataStore:
    return DataStore().load_sample()


GREEK_CSV = (
    "Χρήστης δημιουργίας,Υποκατάστημα,Ημερομηνία δημιουργίας,Source Type\n"
    "k_tsipasis,ΒΟΤΑΝΙΚΟΣ,01/08/2025 10:15,SP4\n"
    "s_sarellis,ΒΟΛΟΣ,02.08.2025,SP4\n"
    ",,,\n"
    "cc_maria,ΒΟΤΑΝΙΚΟΣ,2025-08-03,OnlineOSB\n"
)


@pytest.fixture
def greek_csv_bytes() -> bytes:
    return GREEK_CSV.encode("utf-8")
