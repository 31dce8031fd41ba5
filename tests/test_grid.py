import unittest
import sys
import os

# Add project root to path so we can import maze_scad
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_scad.core.grid import Cell, SquareGrid

class TestSquareGrid(unittest.TestCase):
    def test_initialization(self):
        w, h = 10, 7
        grid = SquareGrid(w, h)
        self.assertEqual(grid.cell_count(), w * h, f"Grid initialization size mismatch. Expected {w*h}, got {grid.cell_count()}")
        # All cells start fully walled
        for i in range(grid.cell_count()):
            cell = grid.cell(i)
            self.assertEqual(cell.index, i)
            self.assertEqual(cell.walls, [True, True, True, True])

    def test_coordinates(self):
        grid = SquareGrid(5, 4)
        idx = grid.get_index(2, 3)
        self.assertEqual(idx, 17) # 3 * 5 + 2
        self.assertEqual(grid.get_coords(17), (2, 3))

        with self.assertRaises(IndexError):
            grid.get_index(-1, 0)
        with self.assertRaises(IndexError):
            grid.get_index(0, 4)

    def test_cell_out_of_range(self):
        grid = SquareGrid(3, 3)
        with self.assertRaises(IndexError):
            grid.cell(9)
        # Negative indexes are not wrapped around
        with self.assertRaises(IndexError):
            grid.cell(-1)

    def test_invalid_side(self):
        grid = SquareGrid(3, 3)
        with self.assertRaises(IndexError):
            grid.navigate(4, 4)
        with self.assertRaises(IndexError):
            grid.navigate(4, -1)
        with self.assertRaises(IndexError):
            grid.navigate(9, SquareGrid.LEFT)

    def test_navigate_interior(self):
        grid = SquareGrid(3, 3)
        # Center cell 4 = (1,1)
        self.assertEqual(grid.navigate(4, SquareGrid.LEFT), (3, SquareGrid.RIGHT))
        self.assertEqual(grid.navigate(4, SquareGrid.UP), (1, SquareGrid.DOWN))
        self.assertEqual(grid.navigate(4, SquareGrid.RIGHT), (5, SquareGrid.LEFT))
        self.assertEqual(grid.navigate(4, SquareGrid.DOWN), (7, SquareGrid.UP))

    def test_navigate_boundaries(self):
        grid = SquareGrid(3, 3)
        # Top-left corner
        self.assertIsNone(grid.navigate(0, SquareGrid.LEFT))
        self.assertIsNone(grid.navigate(0, SquareGrid.UP))
        self.assertIsNotNone(grid.navigate(0, SquareGrid.RIGHT))
        self.assertIsNotNone(grid.navigate(0, SquareGrid.DOWN))

        # Bottom-right corner
        self.assertIsNone(grid.navigate(8, SquareGrid.RIGHT))
        self.assertIsNone(grid.navigate(8, SquareGrid.DOWN))

        # Single row: up and down are always boundaries
        row = SquareGrid(4, 1)
        for i in range(4):
            self.assertIsNone(row.navigate(i, SquareGrid.UP))
            self.assertIsNone(row.navigate(i, SquareGrid.DOWN))

    def test_navigate_symmetry(self):
        for w, h in [(1, 1), (1, 5), (5, 1), (3, 3), (4, 7)]:
            grid = SquareGrid(w, h)
            for i in range(grid.cell_count()):
                for side in range(SquareGrid.SIDES):
                    target = grid.navigate(i, side)
                    if target is None:
                        continue
                    other, other_side = target
                    self.assertEqual(other_side, (side + 2) % 4)
                    self.assertEqual(grid.navigate(other, other_side), (i, side), f"{w}x{h} cell {i} side {side}")

    def test_neighbors(self):
        grid = SquareGrid(3, 3)
        # Center cell should have 4 neighbors
        self.assertEqual(len(list(grid.neighbors(4))), 4)

        # Corner cell 0 should have 2 neighbors (right, down)
        corner_neighbors = list(grid.neighbors(0))
        self.assertEqual(len(corner_neighbors), 2)
        self.assertIn((1, SquareGrid.RIGHT, SquareGrid.LEFT), corner_neighbors)
        self.assertIn((3, SquareGrid.DOWN, SquareGrid.UP), corner_neighbors)

    def test_open_wall(self):
        grid = SquareGrid(2, 2)
        # 0  1
        # 2  3
        self.assertEqual(grid.open_wall(0, SquareGrid.RIGHT), (1, SquareGrid.LEFT))

        self.assertFalse(grid.cell(0).walls[SquareGrid.RIGHT])
        self.assertFalse(grid.cell(1).walls[SquareGrid.LEFT])

        # Others remain
        self.assertTrue(grid.cell(0).walls[SquareGrid.DOWN])
        self.assertTrue(grid.cell(1).walls[SquareGrid.RIGHT])

        self.assertEqual(list(grid.open_walls()), [(0, SquareGrid.RIGHT, 1, SquareGrid.LEFT)])
        self.assertEqual(list(grid.open_neighbors(1)), [0])

        with self.assertRaises(ValueError):
            grid.open_wall(0, SquareGrid.UP)

    def test_close_all_walls(self):
        grid = SquareGrid(2, 2)
        grid.open_wall(0, SquareGrid.DOWN)
        grid.open_wall(2, SquareGrid.RIGHT)
        grid.close_all_walls()
        self.assertEqual(list(grid.open_walls()), [])

    def test_degenerate_sizes(self):
        for w, h in [(0, 0), (0, 5), (5, 0), (-3, 2)]:
            with self.assertLogs("maze_scad.core.grid", level="WARNING"):
                grid = SquareGrid(w, h)
            self.assertEqual(grid.cell_count(), 0)
            self.assertEqual(list(grid.open_walls()), [])
            with self.assertRaises(IndexError):
                grid.cell(0)

    def test_cell_helpers(self):
        cell = Cell(3, 4)
        cell.walls[2] = False
        self.assertTrue(cell.is_open(2))
        cell.close_all()
        self.assertFalse(cell.is_open(2))

if __name__ == '__main__':
    unittest.main()
