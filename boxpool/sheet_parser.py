"""Excel pool sheet parsing and export.

Sheet layout (1-based):
    A1          away team label (free text, optional)
    B1          home team label (free text, optional)
    B2:K2       home digits, one per column
    A3:A12      away digits, one per row
    B3:K12      square owner names
"""

import logging
import random
from pathlib import Path
from typing import Optional

import openpyxl
from openpyxl.styles import Font

from .constants import (
    DIGITS,
    GRID_SIZE,
    SHEET_AWAY_DIGITS_COLUMN,
    SHEET_AWAY_LABEL_CELL,
    SHEET_FIRST_SQUARE_COLUMN,
    SHEET_FIRST_SQUARE_ROW,
    SHEET_HOME_DIGITS_ROW,
    SHEET_HOME_LABEL_CELL,
)
from .grid import BoxGrid, new_grid, shuffled_digits
from .teams import find_team_by_text

logger = logging.getLogger('boxpool.sheet_parser')


def parse_digit(cell_value) -> Optional[int]:
    """
    Parse a header digit cell.

    Examples:
        7 -> 7
        " 3 " -> 3
        "12" -> None
        None -> None
    """
    if cell_value is None:
        return None
    text = str(cell_value).strip()
    if text.endswith('.0'):
        text = text[:-2]
    if len(text) == 1 and text.isdigit():
        return int(text)
    return None


def _header_digits(values: list, axis: str, rng: Optional[random.Random]) -> list[int]:
    digits = [parse_digit(v) for v in values]
    if sorted(d for d in digits if d is not None) == DIGITS:
        return digits
    logger.warning(f'{axis} header is not a 0-9 permutation ({values}); drawing random digits')
    return shuffled_digits(rng)


def parse_grid_from_sheet(
    filepath: str | Path,
    sheet_name: Optional[str] = None,
    name: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> BoxGrid:
    """
    Parse a pool grid from an Excel sheet.

    Args:
        filepath: Path to the .xlsx file
        sheet_name: Sheet to read (default: active sheet)
        name: Pool name (default: configured pool name)
        rng: Random source for replacing unreadable header digits

    Returns:
        BoxGrid with names, header digits, and any recognized teams
    """
    wb = openpyxl.load_workbook(filepath, read_only=True, data_only=True)
    try:
        ws = wb[sheet_name] if sheet_name else wb.active
        rows = [
            list(row) for row in ws.iter_rows(
                min_row=1,
                max_row=SHEET_FIRST_SQUARE_ROW + GRID_SIZE - 1,
                max_col=SHEET_FIRST_SQUARE_COLUMN + GRID_SIZE - 1,
                values_only=True,
            )
        ]
    finally:
        wb.close()

    rows += [[] for _ in range(SHEET_FIRST_SQUARE_ROW + GRID_SIZE - 1 - len(rows))]

    def value(row: int, col: int):
        cells = rows[row - 1]
        return cells[col - 1] if col - 1 < len(cells) else None

    away_label = value(*SHEET_AWAY_LABEL_CELL)
    home_label = value(*SHEET_HOME_LABEL_CELL)
    home_team = find_team_by_text(str(home_label or ''))
    away_team = find_team_by_text(str(away_label or ''))

    home_numbers = _header_digits(
        [value(SHEET_HOME_DIGITS_ROW, SHEET_FIRST_SQUARE_COLUMN + c) for c in range(GRID_SIZE)],
        'home', rng,
    )
    away_numbers = _header_digits(
        [value(SHEET_FIRST_SQUARE_ROW + r, SHEET_AWAY_DIGITS_COLUMN) for r in range(GRID_SIZE)],
        'away', rng,
    )

    grid = new_grid(name=name, home_team=home_team, away_team=away_team)
    grid.home_numbers = home_numbers
    grid.away_numbers = away_numbers

    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            cell_value = value(SHEET_FIRST_SQUARE_ROW + r, SHEET_FIRST_SQUARE_COLUMN + c)
            if cell_value is not None and str(cell_value).strip():
                grid.update_square(r, c, str(cell_value).strip())

    logger.info(f'Parsed {grid.filled_count} names from {filepath}')
    return grid


def write_grid_to_sheet(
    grid: BoxGrid,
    filepath: str | Path,
    sheet_name: str = 'Pool',
) -> None:
    """
    Write a grid to a new Excel workbook in the parse layout.

    Winning squares are written in bold.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = sheet_name

    ws.cell(*SHEET_AWAY_LABEL_CELL).value = grid.away_team.name
    ws.cell(*SHEET_HOME_LABEL_CELL).value = grid.home_team.name

    for c, digit in enumerate(grid.home_numbers):
        ws.cell(row=SHEET_HOME_DIGITS_ROW, column=SHEET_FIRST_SQUARE_COLUMN + c).value = digit
    for r, digit in enumerate(grid.away_numbers):
        ws.cell(row=SHEET_FIRST_SQUARE_ROW + r, column=SHEET_AWAY_DIGITS_COLUMN).value = digit

    for row in grid.squares:
        for square in row:
            cell = ws.cell(
                row=SHEET_FIRST_SQUARE_ROW + square.row,
                column=SHEET_FIRST_SQUARE_COLUMN + square.column,
            )
            cell.value = square.player_name or None
            if square.is_winner:
                cell.font = Font(bold=True)

    wb.save(filepath)
    logger.info(f'Pool sheet saved to {filepath}')
