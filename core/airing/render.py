"""
Console rendering of humidity tables with rich.
"""

from rich import box
from rich.table import Table
from rich.text import Text

from .models import HumidityTable

SATURATED_STYLE = "bold red"


def _degrees(ascii_only: bool) -> str:
    return "C" if ascii_only else "°C"


def render_table(table: HumidityTable, ascii_only: bool = False) -> Table:
    """Build a rich Table for one humidity table.

    Args:
        table: Assembled rows and header temperatures
        ascii_only: Use ASCII box drawing and unit symbols

    Returns:
        Renderable rich Table
    """
    unit = _degrees(ascii_only)
    rendered = Table(
        box=box.ASCII if ascii_only else box.SQUARE,
        safe_box=ascii_only,
        show_header=True,
    )

    rendered.add_column(Text(table.title, style="italic"), no_wrap=True)
    for temperature in table.reference_temperatures:
        header = f"{temperature:.1f}{unit}"
        rendered.add_column(
            Text(header, style="bold"), justify="right", no_wrap=True, min_width=len(header)
        )

    for row in table.rows:
        cells = [f"{row.label} ({row.observed_temperature:.1f}{unit})"]
        for rh in row.projected_humidity:
            # Above 100 % the indoor air would gain moisture
            cells.append(Text(f"{rh:.1f}%", style=SATURATED_STYLE if rh > 100.0 else ""))
        rendered.add_row(*cells)

    return rendered
