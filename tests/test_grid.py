import pytest

from lifegrid.grid import Game, Grid, Rule, parse_game

BLINKER = ["+++++", "+++++", "+XXX+", "+++++", "+++++"]
BLOCK = ["++++", "+XX+", "+XX+", "++++"]


def _grid(lines):
    return Grid.from_lines(lines, len(lines), len(lines[0]))


def _transpose(grid):
    return ["".join(col) for col in zip(*grid.cells)]


def _live(grid):
    return {
        (r, c)
        for r, row in enumerate(grid.cells)
        for c, cell in enumerate(row)
        if cell == "X"
    }


def test_from_lines_truncates_to_columns():
    grid = Grid.from_lines(["XX+extra", "+X+more"], 2, 3)
    assert list(grid) == ["XX+", "+X+"]
    assert (grid.rows, grid.cols) == (2, 3)


def test_from_lines_too_few_rows():
    with pytest.raises(ValueError):
        Grid.from_lines(["XXX"], 2, 3)


def test_from_lines_short_row():
    with pytest.raises(ValueError):
        Grid.from_lines(["XXX", "X"], 2, 3)


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        Grid([["X", "+"], ["X"]])


def test_render_round_trip():
    grid = _grid(BLINKER)
    text = grid.render()
    assert text.endswith("\n\n")
    assert _grid(text.splitlines()[: grid.rows]) == grid


def test_copy_is_independent():
    grid = _grid(BLINKER)
    clone = grid.copy()
    clone.step()
    assert list(grid) == BLINKER
    assert clone != grid


def test_live_neighbours_full_grid():
    grid = _grid(["XXX", "XXX", "XXX"])
    assert grid.live_neighbours(1, 1) == 8
    assert grid.live_neighbours(0, 0) == 3


def test_live_neighbours_ignores_self():
    grid = _grid(["+++", "+X+", "+++"])
    assert grid.live_neighbours(1, 1) == 0
    assert all(grid.live_neighbours(r, c) == 1 for r, c in [(0, 0), (2, 2), (0, 1)])


def test_live_neighbours_out_of_range():
    with pytest.raises(IndexError):
        _grid(BLOCK).live_neighbours(4, 0)


def test_block_is_still_life():
    grid = _grid(BLOCK)
    assert grid.changes(Rule.CONWAY) == []
    assert grid.step() == []
    assert list(grid) == BLOCK


def test_blinker_rotates():
    grid = _grid(BLINKER)
    grid.step(Rule.CONWAY)
    assert list(grid) == _transpose(_grid(BLINKER))


def test_blinker_period_two():
    grid = _grid(BLINKER)
    grid.step()
    grid.step()
    assert list(grid) == BLINKER


def test_changes_are_row_major_and_match_step():
    grid = _grid(BLINKER)
    expected = grid.changes()
    assert expected == sorted(expected)
    assert grid.step() == expected


def test_toggle_twice_restores():
    grid = _grid(BLINKER)
    cells = [(0, 0), (2, 2)]
    grid.toggle(cells)
    assert grid[0, 0] == "X" and grid[2, 2] == "+"
    grid.toggle(cells)
    assert list(grid) == BLINKER


def test_birth_on_two_only_grows():
    grid = _grid(["+++++", "+X+X+", "+++++"])
    before = _live(grid)
    flipped = grid.step(Rule.BIRTH_ON_TWO)
    after = _live(grid)
    assert before < after
    assert after - before == set(flipped)


def test_birth_on_two_differs_from_conway():
    grid = _grid(["+++++", "+X+X+", "+++++"])
    assert grid.changes(Rule.CONWAY) == [(0, 0), (0, 1), (0, 2), (1, 1), (1, 3)][3:]
    assert (0, 2) in grid.changes(Rule.BIRTH_ON_TWO)


def test_parse_game():
    text = "1 5 5 3\n" + "\n".join(BLINKER) + "\n"
    game = parse_game(text)
    assert game == Game(task=1, grid=_grid(BLINKER), generations=3)


def test_parse_game_bad_header():
    with pytest.raises(ValueError):
        parse_game("1 5 five 3\n+++++\n")


def test_parse_game_short_header():
    with pytest.raises(ValueError):
        parse_game("1 5 5\n")


def test_parse_game_missing_rows():
    with pytest.raises(ValueError):
        parse_game("2 3 3 1\nXXX\n")


def test_parse_game_empty():
    with pytest.raises(ValueError):
        parse_game("")