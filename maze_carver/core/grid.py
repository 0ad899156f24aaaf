from array import array
from typing import Iterator, Tuple

class Grid:
    # Direction indices (N, E, S, W)
    NORTH = 0
    EAST  = 1
    SOUTH = 2
    WEST  = 3
    DIRECTIONS = (NORTH, EAST, SOUTH, WEST)

    # Wall bit for each direction index
    WALL_BITS = (0b0001, 0b0010, 0b0100, 0b1000)

    # Flags
    VISITED = 0b00010000

    # All walls present by default (N|E|S|W) = 15
    ALL_WALLS = 0b1111

    # Direction Helpers
    DX = (0, 1, 0, -1)
    DY = (-1, 0, 1, 0)
    OPPOSITE = (SOUTH, WEST, NORTH, EAST)

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        # 'B' (unsigned char) -> 1 byte per cell
        self.cells = array('B', [self.ALL_WALLS] * (width * height))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def remove_wall(self, x1: int, y1: int, x2: int, y2: int):
        """
        Opens the passage between (x1,y1) and the adjacent cell (x2,y2).
        Both sides of the shared wall are cleared together.
        """
        dx = x1 - x2
        dy = y1 - y2

        if dx == 1 and dy == 0:
            # B is west of A
            side_a, side_b = self.WEST, self.EAST
        elif dx == -1 and dy == 0:
            side_a, side_b = self.EAST, self.WEST
        elif dy == 1 and dx == 0:
            # B is north of A
            side_a, side_b = self.NORTH, self.SOUTH
        elif dy == -1 and dx == 0:
            side_a, side_b = self.SOUTH, self.NORTH
        else:
            raise ValueError(f"Cells ({x1}, {y1}) and ({x2}, {y2}) are not adjacent")

        idx1 = self.get_index(x1, y1)
        idx2 = self.get_index(x2, y2)

        self.cells[idx1] &= ~self.WALL_BITS[side_a]
        self.cells[idx2] &= ~self.WALL_BITS[side_b]

    def has_wall(self, x: int, y: int, direction: int) -> bool:
        return (self.cells[self.get_index(x, y)] & self.WALL_BITS[direction]) != 0

    def walls(self, x: int, y: int) -> Tuple[bool, bool, bool, bool]:
        """Wall state of a cell as (north, east, south, west)."""
        val = self.cells[self.get_index(x, y)]
        return tuple((val & bit) != 0 for bit in self.WALL_BITS)

    def set_visited(self, x: int, y: int, visited: bool = True):
        idx = self.get_index(x, y)
        if visited:
            self.cells[idx] |= self.VISITED
        else:
            self.cells[idx] &= ~self.VISITED

    def is_visited(self, x: int, y: int) -> bool:
        return (self.cells[self.get_index(x, y)] & self.VISITED) != 0

    def visited_count(self) -> int:
        return sum(1 for val in self.cells if val & self.VISITED)

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all valid grid neighbors,
        in North, East, South, West order.
        Does NOT check walls (that's for pathfinding).
        """
        # North
        if y > 0:
            yield (x, y - 1, self.NORTH)
        # East
        if x < self.width - 1:
            yield (x + 1, y, self.EAST)
        # South
        if y < self.height - 1:
            yield (x, y + 1, self.SOUTH)
        # West
        if x > 0:
            yield (x - 1, y, self.WEST)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for neighbors that are NOT blocked by a wall.
        """
        val = self.cells[self.get_index(x, y)]
        for nx, ny, direction in self.get_neighbors(x, y):
            if not (val & self.WALL_BITS[direction]):
                yield (nx, ny)
