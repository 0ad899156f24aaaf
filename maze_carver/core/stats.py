from collections import deque
from maze_carver.core.grid import Grid

class MazeInspector:
    """Read-only checks over a carved grid. Nothing here mutates walls or flags."""

    @staticmethod
    def count_passages(grid: Grid) -> int:
        # Only count East and South so each internal passage is seen once
        passages = 0
        for y in range(grid.height):
            for x in range(grid.width):
                if x < grid.width - 1 and not grid.has_wall(x, y, Grid.EAST):
                    passages += 1
                if y < grid.height - 1 and not grid.has_wall(x, y, Grid.SOUTH):
                    passages += 1
        return passages

    @staticmethod
    def walls_consistent(grid: Grid) -> bool:
        for y in range(grid.height):
            for x in range(grid.width):
                for nx, ny, direction in grid.get_neighbors(x, y):
                    if grid.has_wall(x, y, direction) != grid.has_wall(nx, ny, Grid.OPPOSITE[direction]):
                        return False
        return True

    @staticmethod
    def is_connected(grid: Grid) -> bool:
        seen = {(0, 0)}
        queue = deque([(0, 0)])
        while queue:
            cx, cy = queue.popleft()
            for nxt in grid.get_open_neighbors(cx, cy):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return len(seen) == grid.width * grid.height

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """
        True when the open passages form a spanning tree:
        consistent walls, every cell reachable, and exactly W*H - 1 passages.
        """
        if not MazeInspector.walls_consistent(grid):
            return False
        if MazeInspector.count_passages(grid) != grid.width * grid.height - 1:
            return False
        return MazeInspector.is_connected(grid)

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        corridors = 0  # 2 exits
        junctions = 0  # 3+ exits

        for y in range(grid.height):
            for x in range(grid.width):
                exits = sum(1 for _ in grid.get_open_neighbors(x, y))
                if exits == 1: dead_ends += 1
                elif exits == 2: corridors += 1
                elif exits >= 3: junctions += 1

        total = grid.width * grid.height
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "passages": MazeInspector.count_passages(grid),
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
