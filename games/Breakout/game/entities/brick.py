"""Brick entity and the fixed-size brick grid.

Bricks never move. Each cell's rectangle comes from the layout formula,
and a destroyed brick stays destroyed until the whole grid is rebuilt.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from ...config import (
    BRICK_ROWS, BRICK_COLS, BRICK_WIDTH, BRICK_HEIGHT, BRICK_PADDING,
    BRICK_OFFSET_LEFT, BRICK_OFFSET_TOP,
)


@dataclass(frozen=True)
class BrickLayout:
    """Brick grid shape and layout constants.

    Cell (row, col) has its top-left corner at
    (left + col * (width + padding), top + row * (height + padding)).
    """

    rows: int = BRICK_ROWS
    cols: int = BRICK_COLS
    width: float = BRICK_WIDTH
    height: float = BRICK_HEIGHT
    padding: float = BRICK_PADDING
    left: float = BRICK_OFFSET_LEFT
    top: float = BRICK_OFFSET_TOP

    def __post_init__(self):
        """Validate grid shape and brick size."""
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f'Brick grid must be non-empty, got {self.rows}x{self.cols}')
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f'Brick size must be positive, got {self.width}x{self.height}')

    def cell_rect(self, row: int, col: int) -> Tuple[float, float, float, float]:
        """Get screen rectangle (x, y, width, height) of a grid cell."""
        return (
            self.left + col * (self.width + self.padding),
            self.top + row * (self.height + self.padding),
            self.width,
            self.height,
        )


class Brick:
    """A single brick: fixed rectangle plus an alive flag."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        grid_position: Tuple[int, int] = (0, 0),
    ):
        """Initialize an alive brick.

        Args:
            x: Left edge X position
            y: Top edge Y position
            width: Brick width
            height: Brick height
            grid_position: (row, col) position in grid
        """
        self._x = x
        self._y = y
        self._width = width
        self._height = height
        self._grid_position = grid_position
        self._alive = True

    @property
    def x(self) -> float:
        """Get left edge X position."""
        return self._x

    @property
    def y(self) -> float:
        """Get top edge Y position."""
        return self._y

    @property
    def width(self) -> float:
        """Get brick width."""
        return self._width

    @property
    def height(self) -> float:
        """Get brick height."""
        return self._height

    @property
    def row(self) -> int:
        return self._grid_position[0]

    @property
    def col(self) -> int:
        return self._grid_position[1]

    @property
    def grid_position(self) -> Tuple[int, int]:
        """Get grid position (row, col)."""
        return self._grid_position

    @property
    def alive(self) -> bool:
        """Check if brick is still standing."""
        return self._alive

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get bounding rectangle (x, y, width, height)."""
        return (self._x, self._y, self._width, self._height)

    def destroy(self) -> None:
        """Mark the brick dead. There is no way back short of a grid reset."""
        self._alive = False

    def __repr__(self) -> str:
        state = "alive" if self._alive else "dead"
        return f"Brick(row={self.row}, col={self.col}, {state})"


class BrickGrid:
    """Dense rows x cols array of bricks, built once per game.

    Iteration is row-major, which is also the order collisions are
    resolved in.
    """

    def __init__(self, layout: BrickLayout):
        """Build a full grid of alive bricks.

        Args:
            layout: Grid shape and layout constants
        """
        self._layout = layout
        self._cells: List[List[Brick]] = []
        self.reset()

    @property
    def layout(self) -> BrickLayout:
        """Get the layout this grid was built from."""
        return self._layout

    @property
    def rows(self) -> int:
        return self._layout.rows

    @property
    def cols(self) -> int:
        return self._layout.cols

    def reset(self) -> None:
        """Reallocate every cell with a fresh alive brick."""
        self._cells = [
            [
                Brick(*self._layout.cell_rect(row, col), grid_position=(row, col))
                for col in range(self._layout.cols)
            ]
            for row in range(self._layout.rows)
        ]

    def cell(self, row: int, col: int) -> Brick:
        """Get the brick at (row, col)."""
        return self._cells[row][col]

    def __iter__(self) -> Iterator[Brick]:
        """Iterate all bricks, dead or alive, in row-major order."""
        for row in self._cells:
            yield from row

    def __len__(self) -> int:
        return self._layout.rows * self._layout.cols

    def alive_bricks(self) -> List[Brick]:
        """Get alive bricks in row-major order."""
        return [brick for brick in self if brick.alive]

    def remaining(self) -> int:
        """Count bricks still alive."""
        return sum(1 for brick in self if brick.alive)
