"""
Workbook palette and the named styles built from it.
"""
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

# Government of Canada web palette
CANADA_RED = "AF3C43"
NAVY = "26374A"
LINK_BLUE = "284162"
ROW_STRIPE = "F5F5F5"
GRID_GRAY = "CCCCCC"
MUTED_GRAY = "666666"


def _font(size: int, color: str, **kw) -> Font:
    return Font(name="Calibri", size=size, color=color, **kw)


def _solid(color: str) -> PatternFill:
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


def _box(color: str, bottom: Side | None = None) -> Border:
    side = Side(style="thin", color=color)
    return Border(left=side, right=side, top=side, bottom=bottom or side)


TITLE_FONT = _font(20, NAVY, bold=True)
SUBTITLE_FONT = _font(11, MUTED_GRAY, italic=True)
HEADER_FONT = _font(11, "FFFFFF", bold=True)
DATA_FONT = _font(10, "000000")
LINK_FONT = _font(10, LINK_BLUE, underline="single")

HEADER_FILL = _solid(NAVY)
ALTERNATE_FILL = _solid(ROW_STRIPE)

THIN_BORDER = _box(GRID_GRAY)
HEADER_BORDER = _box(NAVY, bottom=Side(style="medium", color=CANADA_RED))

CENTER = Alignment(horizontal="center", vertical="center")
LEFT = Alignment(horizontal="left", vertical="top")
WRAP = Alignment(horizontal="left", vertical="top", wrap_text=True)
