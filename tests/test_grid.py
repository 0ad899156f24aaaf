import unittest
import sys
import os

# Add project root to path so we can import maze_carver
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.grid import Grid

class TestGrid(unittest.TestCase):
    def test_initialization(self):
        w, h = 10, 7
        grid = Grid(w, h)
        self.assertEqual(len(grid.cells), w * h, f"Grid initialization size mismatch. Expected {w*h}, got {len(grid.cells)}")
        # All cells fully walled and unvisited
        for val in grid.cells:
            self.assertEqual(val, Grid.ALL_WALLS)
        self.assertEqual(grid.walls(3, 4), (True, True, True, True))
        self.assertEqual(grid.visited_count(), 0)

    def test_invalid_dimensions(self):
        with self.assertRaises(ValueError):
            Grid(0, 5)
        with self.assertRaises(ValueError):
            Grid(5, -1)

    def test_coordinates(self):
        grid = Grid(5, 5)
        idx = grid.get_index(2, 2)
        self.assertEqual(idx, 12) # 2 * 5 + 2

        with self.assertRaises(IndexError):
            grid.get_index(-1, 0)
        with self.assertRaises(IndexError):
            grid.get_index(0, 5)

        self.assertTrue(grid.in_bounds(4, 4))
        self.assertFalse(grid.in_bounds(5, 0))

    def test_accessors_bounds_checked(self):
        grid = Grid(3, 2)
        # Negative coordinates must not wrap onto another cell
        with self.assertRaises(IndexError):
            grid.is_visited(-1, 0)
        with self.assertRaises(IndexError):
            grid.set_visited(0, -1)
        with self.assertRaises(IndexError):
            grid.has_wall(3, 0, Grid.NORTH)
        with self.assertRaises(IndexError):
            list(grid.get_open_neighbors(0, 2))
        self.assertEqual(grid.visited_count(), 0)

    def test_remove_wall_east(self):
        grid = Grid(2, 2)
        # 0,0  1,0
        # 0,1  1,1

        # B=(1,0) is east of A=(0,0)
        grid.remove_wall(0, 0, 1, 0)

        self.assertFalse(grid.has_wall(0, 0, Grid.EAST))
        self.assertFalse(grid.has_wall(1, 0, Grid.WEST))

        # Others remain
        self.assertTrue(grid.has_wall(0, 0, Grid.NORTH))
        self.assertTrue(grid.has_wall(1, 0, Grid.EAST)) # (1,0) still has its own East wall

    def test_remove_wall_all_directions(self):
        cases = [
            # (a, b, side cleared on a, side cleared on b)
            ((1, 1), (0, 1), Grid.WEST, Grid.EAST),
            ((1, 1), (2, 1), Grid.EAST, Grid.WEST),
            ((1, 1), (1, 0), Grid.NORTH, Grid.SOUTH),
            ((1, 1), (1, 2), Grid.SOUTH, Grid.NORTH),
        ]
        for a, b, side_a, side_b in cases:
            with self.subTest(a=a, b=b):
                grid = Grid(3, 3)
                grid.remove_wall(a[0], a[1], b[0], b[1])
                self.assertFalse(grid.has_wall(a[0], a[1], side_a))
                self.assertFalse(grid.has_wall(b[0], b[1], side_b))
                # Exactly one wall removed from each cell
                self.assertEqual(sum(grid.walls(*a)), 3)
                self.assertEqual(sum(grid.walls(*b)), 3)

    def test_remove_wall_not_adjacent(self):
        grid = Grid(3, 3)
        with self.assertRaises(ValueError):
            grid.remove_wall(0, 0, 2, 0)
        with self.assertRaises(ValueError):
            grid.remove_wall(0, 0, 1, 1)
        with self.assertRaises(ValueError):
            grid.remove_wall(1, 1, 1, 1)
        # Nothing changed
        for val in grid.cells:
            self.assertEqual(val, Grid.ALL_WALLS)

    def test_visited_flags(self):
        grid = Grid(3, 3)
        self.assertFalse(grid.is_visited(1, 1))
        grid.set_visited(1, 1)
        self.assertTrue(grid.is_visited(1, 1))
        self.assertEqual(grid.visited_count(), 1)
        # Visiting does not touch walls
        self.assertEqual(grid.walls(1, 1), (True, True, True, True))
        grid.set_visited(1, 1, False)
        self.assertFalse(grid.is_visited(1, 1))

    def test_neighbors(self):
        grid = Grid(3, 3)
        # Center cell (1,1) should have 4 neighbors, in N, E, S, W order
        neighbors = list(grid.get_neighbors(1, 1))
        self.assertEqual(neighbors, [
            (1, 0, Grid.NORTH),
            (2, 1, Grid.EAST),
            (1, 2, Grid.SOUTH),
            (0, 1, Grid.WEST),
        ])

        # Corner cell (0,0) should have 2 neighbors (East, South)
        corner_neighbors = list(grid.get_neighbors(0, 0))
        self.assertEqual(corner_neighbors, [(1, 0, Grid.EAST), (0, 1, Grid.SOUTH)])

        # 1x1 grid has none
        self.assertEqual(list(Grid(1, 1).get_neighbors(0, 0)), [])

    def test_open_neighbors(self):
        grid = Grid(3, 3)
        self.assertEqual(list(grid.get_open_neighbors(1, 1)), [])
        grid.remove_wall(1, 1, 1, 2)
        grid.remove_wall(1, 1, 0, 1)
        self.assertEqual(list(grid.get_open_neighbors(1, 1)), [(1, 2), (0, 1)])
        self.assertEqual(list(grid.get_open_neighbors(0, 1)), [(1, 1)])

if __name__ == '__main__':
    unittest.main()
