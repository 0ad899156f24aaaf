from typing import Optional, Tuple
from maze_carver.core.grid import Grid

def render_text(grid: Grid, current: Optional[Tuple[int, int]] = None) -> str:
    """
    Returns an ASCII picture of the grid.

    Each cell is drawn 3 characters wide; '+' marks corners, '---' and '|'
    are intact walls. Visited cells are blank, unvisited cells show '.',
    and the current cell (if given) shows '*'.
    """
    lines = []

    top = ["+"]
    for x in range(grid.width):
        top.append("---+" if grid.has_wall(x, 0, Grid.NORTH) else "   +")
    lines.append("".join(top))

    for y in range(grid.height):
        row = ["|" if grid.has_wall(0, y, Grid.WEST) else " "]
        bottom = ["+"]
        for x in range(grid.width):
            if current == (x, y):
                body = " * "
            elif grid.is_visited(x, y):
                body = "   "
            else:
                body = " . "
            row.append(body)
            row.append("|" if grid.has_wall(x, y, Grid.EAST) else " ")
            bottom.append("---+" if grid.has_wall(x, y, Grid.SOUTH) else "   +")
        lines.append("".join(row))
        lines.append("".join(bottom))

    return "\n".join(lines)
