import unittest

import torch

from cellsom import Cell, KeyNotFound, Map, Vector


class TestMap(unittest.TestCase):

    def setUp(self):
        self.cells = [Cell(Vector([float(i), 0.0]), (i, 0)) for i in range(4)]
        self.map = Map(self.cells)

    def test_for_each_cell_visits_in_construction_order(self):
        seen = []
        self.map.for_each_cell(seen.append)
        self.assertEqual(len(seen), 4)
        for expected, actual in zip(self.cells, seen):
            self.assertIs(actual, expected)

    def test_for_each_cell_with_none_action(self):
        self.map.for_each_cell(None)

    def test_collection_is_fixed(self):
        self.cells.append(Cell(Vector([9.0, 9.0]), (9, 0)))
        self.assertEqual(len(self.map), 4)

    def test_cell_at(self):
        self.assertIs(self.map.cell_at(2, 0), self.cells[2])
        with self.assertRaises(KeyNotFound):
            self.map.cell_at(0, 1)

    def test_rejects_non_cells(self):
        with self.assertRaises(TypeError):
            Map([Vector([1.0])])

    def test_weights(self):
        weights = self.map.weights()
        self.assertEqual(weights.shape, (4, 2))
        weights[0, 0] = 999.0
        self.assertNotEqual(self.cells[0].weight[0], 999.0, "Modifying copy changed original weights.")

    def test_copy_is_a_snapshot(self):
        snapshot = self.map.copy()
        self.cells[1].weight[0] = 42.0
        self.assertEqual(snapshot.cell_at(1, 0).weight[0], 1.0)
        self.assertEqual(len(snapshot), len(self.map))


class TestMapGrid(unittest.TestCase):

    def test_grid_layout(self):
        generator = torch.Generator().manual_seed(3)
        som_map = Map.grid(3, 2, dimension=4, generator=generator)
        self.assertEqual(len(som_map), 6)
        positions = [(cell.x, cell.y) for cell in som_map]
        self.assertEqual(positions, [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1)])
        for cell in som_map:
            self.assertEqual(cell.weight.dimension, 4)

    def test_grid_is_reproducible(self):
        a = Map.grid(2, 2, dimension=3, generator=torch.Generator().manual_seed(1))
        b = Map.grid(2, 2, dimension=3, generator=torch.Generator().manual_seed(1))
        self.assertTrue(torch.equal(a.weights(), b.weights()))

    def test_grid_rejects_empty_size(self):
        with self.assertRaises(ValueError):
            Map.grid(0, 3, dimension=2)


if __name__ == '__main__':
    unittest.main()
