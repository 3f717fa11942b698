"""
Built-in demonstration data set, shaped like a real branch-network export.
"""
from __future__ import annotations

from appointments.data.schemas import Row

SAMPLE_FILENAME = "Sample Data"

_CREATOR = "Χρήστης δημιουργίας"
_STORE = "Υποκατάστημα"
_DATE = "Ημερομηνία δημιουργίας"
_SOURCE = "Source Type"

_SAMPLE = [
    ("k_tsipasis", "ΒΟΤΑΝΙΚΟΣ-ΣΤΡΥΜΟΝΟΣ 2 MOTO", "01/08/2025", "SP4"),
    ("s_sarellis", "ΒΟΛΟΣ ΒΟΛΟΣ- Λ.ΔΙΟΜ/ΝΙΚΗ ΖΩΝΗ", "01/08/2025", "SP4"),
    ("l_lianakis", "ΜΑΡΟΥΣΙ - ΚΗΦΙΣΙΑΣ 55 & ΑΜΑΡ. ΑΡΤΕΜΙΔΟΣ 1", "02/08/2025", "SP4"),
    ("e_davradi", "ΓΛΥΚΑ ΝΕΡΑ- Λ.ΛΑΥΡΙΟΥ 81", "03/08/2025", "SP4"),
    ("s_stamopoulos", "ΓΛΥΚΑ ΝΕΡΑ- Λ.ΛΑΥΡΙΟΥ 81", "04/08/2025", "SP4"),
    ("m_tsirigaki", "ΠΕΡΙΣΤΕΡΙ - Λ. ΚΗΦΙΣΟΥ 36", "05/08/2025", "SP4"),
    ("s_kouvari", "ΜΑΡΟΥΣΙ - ΚΗΦΙΣΙΑΣ 55 & ΑΜΑΡ. ΑΡΤΕΜΙΔΟΣ 1", "05/08/2025", "SP4"),
    ("call_center_agent1", "ΒΟΤΑΝΙΚΟΣ-ΣΤΡΥΜΟΝΟΣ 2 MOTO", "06/08/2025", "OnlineOSB"),
]


def sample_rows() -> list[Row]:
    """Fresh copy of the sample rows."""
    return [
        {_CREATOR: user, _STORE: store, _DATE: date, _SOURCE: source}
        for user, store, date, source in _SAMPLE
    ]
