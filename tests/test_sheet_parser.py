"""Tests for Excel pool sheet import and export."""

import random

import openpyxl

from boxpool.models import QuarterScores
from boxpool.sheet_parser import parse_digit, parse_grid_from_sheet, write_grid_to_sheet
from boxpool.teams import CHIEFS, EAGLES

from conftest import AWAY_NUMBERS, HOME_NUMBERS


def build_sheet(path, home_digits, away_digits, names=None, home_label=None, away_label=None):
    """Write a sheet in the pool layout: digits on row 2 / column A, names from B3."""
    wb = openpyxl.Workbook()
    ws = wb.active
    ws['A1'] = away_label
    ws['B1'] = home_label
    for c, digit in enumerate(home_digits):
        ws.cell(row=2, column=2 + c).value = digit
    for r, digit in enumerate(away_digits):
        ws.cell(row=3 + r, column=1).value = digit
    for (r, c), name in (names or {}).items():
        ws.cell(row=3 + r, column=2 + c).value = name
    wb.save(path)


class TestParseDigit:
    """Tests for header cell parsing."""

    def test_int(self):
        assert parse_digit(7) == 7

    def test_text(self):
        assert parse_digit(' 3 ') == 3

    def test_float_from_excel(self):
        assert parse_digit(4.0) == 4

    def test_invalid(self):
        assert parse_digit('12') is None
        assert parse_digit('x') is None
        assert parse_digit(None) is None


class TestParseGrid:
    """Tests for reading a pool from a sheet."""

    def test_reads_digits_names_and_teams(self, tmp_path):
        path = tmp_path / 'pool.xlsx'
        build_sheet(
            path, HOME_NUMBERS, AWAY_NUMBERS,
            names={(0, 0): 'Mike', (3, 1): ' Sarah ', (9, 9): 'Bob'},
            home_label='Kansas City Chiefs', away_label='PHI',
        )

        grid = parse_grid_from_sheet(path, name='Office Pool')

        assert grid.name == 'Office Pool'
        assert grid.home_numbers == HOME_NUMBERS
        assert grid.away_numbers == AWAY_NUMBERS
        assert grid.home_team == CHIEFS
        assert grid.away_team == EAGLES
        assert grid.squares[0][0].player_name == 'Mike'
        assert grid.squares[3][1].player_name == 'Sarah'
        assert grid.squares[9][9].player_name == 'Bob'
        assert grid.filled_count == 3

    def test_unreadable_header_redrawn(self, tmp_path, caplog):
        path = tmp_path / 'pool.xlsx'
        build_sheet(path, [0, 1, 2, 3, 4, 5, 6, 7, 8, None], AWAY_NUMBERS)

        with caplog.at_level('WARNING', logger='boxpool.sheet_parser'):
            grid = parse_grid_from_sheet(path, rng=random.Random(3))

        assert sorted(grid.home_numbers) == list(range(10))
        assert grid.away_numbers == AWAY_NUMBERS
        assert 'home header is not a 0-9 permutation' in caplog.text

    def test_unknown_team_labels_use_defaults(self, tmp_path):
        path = tmp_path / 'pool.xlsx'
        build_sheet(path, HOME_NUMBERS, AWAY_NUMBERS, home_label='x', away_label='Us vs Them')

        grid = parse_grid_from_sheet(path)

        assert grid.home_team.abbreviation == 'KC'
        assert grid.away_team.abbreviation == 'PHI'


class TestWriteGrid:
    """Tests for exporting a pool to a sheet."""

    def test_round_trip(self, grid, tmp_path):
        grid.update_square(3, 1, 'Mike')
        grid.update_square(7, 2, 'Sarah')
        path = tmp_path / 'export.xlsx'

        write_grid_to_sheet(grid, path)
        parsed = parse_grid_from_sheet(path)

        assert parsed.home_numbers == grid.home_numbers
        assert parsed.away_numbers == grid.away_numbers
        assert parsed.squares[3][1].player_name == 'Mike'
        assert parsed.squares[7][2].player_name == 'Sarah'
        assert parsed.home_team == CHIEFS
        assert parsed.away_team == EAGLES

    def test_winners_in_bold(self, grid, tmp_path):
        grid.update_square(3, 1, 'Mike')
        grid.update_square(0, 0, 'Bob')
        grid.update_winners(QuarterScores(q1_home=7, q1_away=3))
        path = tmp_path / 'export.xlsx'

        write_grid_to_sheet(grid, path)

        ws = openpyxl.load_workbook(path).active
        assert ws.title == 'Pool'
        assert ws.cell(row=6, column=3).value == 'Mike'
        assert ws.cell(row=6, column=3).font.bold
        assert not ws.cell(row=3, column=2).font.bold
