"""
Workbook look: colours, fonts, fills, borders and alignments in one place.
"""
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

# ---------------------------------------------------------------------------
# Palette (matches the dashboard chart colours)
# ---------------------------------------------------------------------------
CHART_BLUE = "0088FE"
NAVY = "0D3B66"
PALE_BLUE = "E3F2FD"
STRIPE = "F5F5F5"
PALE_GOLD = "FFF8DC"
MUTED_TEXT = "666666"
GRID = "CCCCCC"
TOTAL_LINE = "999999"


def _font(size: int, color: str = "000000", **kwargs) -> Font:
    return Font(name="Calibri", size=size, color=color, **kwargs)


def _solid(color: str) -> PatternFill:
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


def _box(color: str, top: str = "thin", bottom: str = "thin") -> Border:
    side = Side(style="thin", color=color)
    return Border(left=side, right=side, top=Side(style=top, color=color), bottom=Side(style=bottom, color=color))


# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------
TITLE_FONT = _font(22, NAVY, bold=True)
SUBTITLE_FONT = _font(11, MUTED_TEXT, italic=True)
SECTION_FONT = _font(14, NAVY, bold=True)
HEADER_FONT = _font(11, "FFFFFF", bold=True)
BODY_FONT = _font(10)
TOTAL_FONT = _font(10, bold=True)
KPI_VALUE_FONT = _font(28, CHART_BLUE, bold=True)
KPI_LABEL_FONT = _font(10, MUTED_TEXT)
NOTE_FONT = _font(10, MUTED_TEXT, italic=True)

# ---------------------------------------------------------------------------
# Fills and borders
# ---------------------------------------------------------------------------
HEADER_FILL = _solid(NAVY)
STRIPE_FILL = _solid(STRIPE)
TOTAL_FILL = _solid(PALE_BLUE)
TOP_RANK_FILL = _solid(PALE_GOLD)

HEADER_BORDER = _box(NAVY, bottom="medium")
BODY_BORDER = _box(GRID)
TOTAL_BORDER = _box(TOTAL_LINE, top="medium", bottom="medium")

# ---------------------------------------------------------------------------
# Alignments
# ---------------------------------------------------------------------------
CENTER = Alignment(horizontal="center", vertical="center")
LEFT = Alignment(horizontal="left", vertical="center")
RIGHT = Alignment(horizontal="right", vertical="center")

# Cell kinds -> Excel number format (text cells get none)
NUMBER_FORMATS = {
    "count": "#,##0",
    "share": '0.0"%"',
}
