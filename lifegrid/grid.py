"""Grid of cells and the rules that evolve it from one generation to the next."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

ALIVE = "X"
DEAD = "+"

_OFFSETS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


class Rule(enum.Enum):
    """How a cell's state and its live neighbour count decide a change."""

    CONWAY = "conway"
    """A live cell dies with fewer than 2 or more than 3 live neighbours;
    a dead cell comes alive with exactly 3."""

    BIRTH_ON_TWO = "birth-on-two"
    """A dead cell comes alive with exactly 2 live neighbours; live cells stay."""

    def flips(self, cell: str, neighbours: int) -> bool:
        """Return True if a cell in state ``cell`` changes state."""
        if self is Rule.CONWAY:
            return (cell == ALIVE and (neighbours < 2 or neighbours > 3)) or (
                cell == DEAD and neighbours == 3
            )
        return cell == DEAD and neighbours == 2


@dataclass
class Grid:
    """A rectangular board of cells, ``X`` for alive and ``+`` for dead."""

    cells: list[list[str]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.cells = [list(row) for row in self.cells]
        widths = {len(row) for row in self.cells}
        if len(widths) > 1:
            raise ValueError("grid rows must all have the same length")

    @classmethod
    def from_lines(cls, lines: Iterable[str], rows: int, cols: int) -> Grid:
        """Build a grid from the first ``cols`` characters of ``rows`` lines."""
        if rows < 0 or cols < 0:
            raise ValueError("grid dimensions must not be negative")
        taken: list[str] = []
        iterator = iter(lines)
        for index in range(rows):
            try:
                line = next(iterator)
            except StopIteration:
                raise ValueError(
                    f"expected {rows} grid rows, found {index}"
                ) from None
            line = line.rstrip("\r\n")
            if len(line) < cols:
                raise ValueError(
                    f"grid row {index} has {len(line)} cells, expected {cols}"
                )
            taken.append(line[:cols])
        return cls([list(row) for row in taken])

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def __getitem__(self, position: tuple[int, int]) -> str:
        row, col = position
        self._check(row, col)
        return self.cells[row][col]

    def __iter__(self) -> Iterator[str]:
        return ("".join(row) for row in self.cells)

    def copy(self) -> Grid:
        """Return an independent copy of this grid."""
        return Grid([list(row) for row in self.cells])

    def render(self) -> str:
        """Return each row on its own line followed by a blank line."""
        return "".join(line + "\n" for line in self) + "\n"

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) is outside the grid")

    def live_neighbours(self, row: int, col: int) -> int:
        """Count live cells among the up to eight cells around ``(row, col)``."""
        self._check(row, col)
        return sum(
            1
            for dr, dc in _OFFSETS
            if 0 <= row + dr < self.rows
            and 0 <= col + dc < self.cols
            and self.cells[row + dr][col + dc] == ALIVE
        )

    def changes(self, rule: Rule = Rule.CONWAY) -> list[tuple[int, int]]:
        """Return, in row-major order, the cells that ``rule`` would flip."""
        return [
            (row, col)
            for row, line in enumerate(self.cells)
            for col, cell in enumerate(line)
            if rule.flips(cell, self.live_neighbours(row, col))
        ]

    def toggle(self, cells: Iterable[tuple[int, int]]) -> None:
        """Flip every listed cell: alive becomes dead, anything else alive."""
        for row, col in cells:
            self._check(row, col)
            self.cells[row][col] = DEAD if self.cells[row][col] == ALIVE else ALIVE

    def step(self, rule: Rule = Rule.CONWAY) -> list[tuple[int, int]]:
        """Advance one generation in place and return the cells that flipped."""
        flipped = self.changes(rule)
        self.toggle(flipped)
        return flipped


@dataclass
class Game:
    """A parsed input: which task to run, the starting grid and generation count."""

    task: int
    grid: Grid
    generations: int


def parse_game(text: str) -> Game:
    """Parse a header ``task rows cols generations`` followed by the grid rows."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("input is empty")
    header = lines[0].split()
    if len(header) < 4:
        raise ValueError("header must hold task, rows, columns and generations")
    try:
        task, rows, cols, generations = (int(value) for value in header[:4])
    except ValueError:
        raise ValueError("header values must be integers") from None
    if generations < 0:
        raise ValueError("generation count must not be negative")
    grid = Grid.from_lines(lines[1:], rows, cols)
    return Game(task=task, grid=grid, generations=generations)