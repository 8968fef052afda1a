"""The three tasks: generation dumps, change logs and the two-rule decision tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

from .grid import Game, Grid, Rule


def _require_non_negative(generations: int) -> None:
    if generations < 0:
        raise ValueError("generation count must not be negative")


def _evolve(grid: Grid, generations: int) -> Iterator[Grid]:
    current = grid.copy()
    for _ in range(generations):
        current.step(Rule.CONWAY)
        yield current.copy()


def evolve(grid: Grid, generations: int) -> Iterator[Grid]:
    """Yield a copy of the board after each of ``generations`` Conway steps.

    The given grid is left untouched.
    """
    _require_non_negative(generations)
    return _evolve(grid, generations)


def _change_log(grid: Grid, generations: int) -> Iterator[list[tuple[int, int]]]:
    current = grid.copy()
    for _ in range(generations):
        yield current.step(Rule.CONWAY)


def change_log(grid: Grid, generations: int) -> Iterator[list[tuple[int, int]]]:
    """Yield, per generation, the cells that flip, in row-major order."""
    _require_non_negative(generations)
    return _change_log(grid, generations)


def render_generations(grid: Grid, generations: int) -> str:
    """Render the starting board and the board after every generation."""
    return grid.render() + "".join(
        board.render() for board in evolve(grid, generations)
    )


def render_change_log(grid: Grid, generations: int) -> str:
    """Render one line per generation: its number, then ``row col`` per flip."""
    return "".join(
        f"{number}" + "".join(f" {row} {col}" for row, col in cells) + "\n"
        for number, cells in enumerate(change_log(grid, generations), start=1)
    )


@dataclass
class TreeNode:
    """A board in the decision tree.

    The left child follows the birth-on-two rule, the right child Conway's rule.
    """

    grid: Grid
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    def preorder(self) -> Iterator[TreeNode]:
        """Yield this node, then its left subtree, then its right subtree."""
        stack: list[TreeNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)


def _grow(grid: Grid, remaining: int) -> TreeNode:
    node = TreeNode(grid)
    if remaining:
        left = grid.copy()
        left.step(Rule.BIRTH_ON_TWO)
        right = grid.copy()
        right.step(Rule.CONWAY)
        node.left = _grow(left, remaining - 1)
        node.right = _grow(right, remaining - 1)
    return node


def build_tree(grid: Grid, depth: int) -> TreeNode:
    """Build the full binary tree of boards reachable in ``depth`` steps."""
    _require_non_negative(depth)
    return _grow(grid.copy(), depth)


def render_tree(grid: Grid, depth: int) -> str:
    """Render every board of the decision tree in preorder."""
    return "".join(node.grid.render() for node in build_tree(grid, depth).preorder())


def run_game(game: Game) -> str:
    """Run the task a game asks for and return its output text.

    Task 1 dumps every generation, task 2 logs the changes and task 3 dumps
    the decision tree; any other task number produces no output.
    """
    if game.task == 1:
        return render_generations(game.grid, game.generations)
    if game.task == 2:
        return render_change_log(game.grid, game.generations)
    if game.task == 3:
        return render_tree(game.grid, game.generations)
    return ""