"""Plain-text grid layout for picker results.

Names are laid out in fixed-width cells, as many per row as fit in the
available width. The selected name is shown in reverse video when color is
enabled and wrapped in brackets otherwise.
"""

from __future__ import annotations

from collections.abc import Sequence

SELECTED_STYLE = "\033[7m"
RESET_STYLE = "\033[0m"
ELLIPSIS = "…"
DEFAULT_CELL_WIDTH = 24


def grid_columns(width: int, cell_width: int) -> int:
    """Return how many ``cell_width`` cells fit in ``width`` (at least one)."""
    if cell_width <= 0:
        return 1
    return max(1, width // cell_width)


def fit_label(name: str, width: int) -> str:
    """Truncate ``name`` with an ellipsis and pad it to exactly ``width`` columns."""
    if width <= 0:
        return ""
    if len(name) > width:
        if width == 1:
            return ELLIPSIS
        name = name[: width - 1] + ELLIPSIS
    return name.ljust(width)


def _render_cell(name: str, cell_width: int, selected: bool, color: bool) -> str:
    # One column of each cell is reserved as a gutter.
    label_width = max(1, cell_width - 1)
    if not selected:
        return fit_label(name, label_width) + " "
    if color:
        return SELECTED_STYLE + fit_label(name, label_width) + RESET_STYLE + " "
    inner = fit_label(name, max(1, label_width - 2)).rstrip()
    return fit_label(f"[{inner}]", label_width) + " "


def render_grid(
    names: Sequence[str],
    selection: str = "",
    width: int = 80,
    cell_width: int = DEFAULT_CELL_WIDTH,
    color: bool = True,
) -> list[str]:
    """Render ``names`` into grid rows with trailing gutters stripped."""
    columns = grid_columns(width, cell_width)
    rows: list[str] = []
    for start in range(0, len(names), columns):
        chunk = names[start : start + columns]
        cells = [_render_cell(name, cell_width, name == selection, color) for name in chunk]
        rows.append("".join(cells).rstrip(" "))
    return rows
