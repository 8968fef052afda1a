# lifegrid

Conway's Game of Life on a bounded (non-wrapping) grid. Live cells are `X`,
dead cells are `+`. Cells beyond the edge count as dead.

## Input format

A game file starts with four integers on its first line: the task number,
the number of rows, the number of columns and the number of generations.
The grid follows, one row per line; only the first *columns* characters of
each row are used:

```
1 3 3 2
+X+
+X+
+X+
```

A missing or non-integer header value, a negative generation count, too few
rows or a row that is too short is reported as invalid input.

## Tasks

- **Task 1** writes the starting grid and then the grid after each generation,
  each grid followed by a blank line.
- **Task 2** writes one line per generation: the generation number followed by
  the row and column of each cell that changed state, in row-major order.
- **Task 3** builds a full binary tree of grids with the generation count as
  its depth. The left child of a node applies the rule "a dead cell with
  exactly two live neighbours comes alive" (live cells stay alive); the right
  child applies the standard rules. Every grid in the tree is written in
  preorder.
- Any other task number writes an empty output file.

## Command line

```
lifegrid input.txt output.txt
```

The command reads the game from the first file and writes the task's output
to the second. It exits with status 1 and a message on standard error if a
file cannot be read or written or the input is invalid, and 0 otherwise.

## Library use

```python
from lifegrid.grid import Grid, Rule, parse_game
from lifegrid.tasks import run_game, evolve, change_log, build_tree

game = parse_game(open("input.txt").read())
print(run_game(game), end="")

for board in evolve(game.grid, 4):
    print(board.render(), end="")

for flipped in change_log(game.grid, 4):
    print(flipped)
```

- `lifegrid.grid`
  - `Grid` holds the cells; `Grid.from_lines(lines, rows, cols)` builds one,
    `copy()`, `render()`, `live_neighbours(row, col)`, `changes(rule)`
    (cells that would flip), `toggle(cells)` and `step(rule)`, which advances
    the grid in place and returns the list of flipped cells. `grid[row, col]`
    reads a cell; iterating a grid yields its rows as strings.
  - `Rule.CONWAY` and `Rule.BIRTH_ON_TWO` are the two rules.
  - `parse_game(text)` returns a `Game` with `task`, `grid` and `generations`.
- `lifegrid.tasks`
  - `evolve(grid, generations)` yields a copy of the grid after each step and
    leaves the given grid untouched; `change_log(grid, generations)` yields
    the flipped cells of each step.
  - `render_generations`, `render_change_log` and `render_tree` produce the
    text of tasks 1, 2 and 3; `run_game(game)` picks the one the game asks for.
  - `build_tree(grid, depth)` returns the root `TreeNode`; its `preorder()`
    yields every node, each with its `grid`, `left` and `right`.
- `lifegrid.cli.main(argv=None)` runs the command and returns its exit status.

## What it does not do

The package works only on text: it has no graphical or animated display of
the board, and the grid never wraps around its edges.

## Tests

```
pip install .[test]
pytest
```