import math
import unittest

import torch

from cellsom import DimensionMismatch, IndexOutOfRange, Vector


class TestVectorConstruction(unittest.TestCase):

    def test_values_are_copied(self):
        values = [1.0, 2.0, 3.0]
        v = Vector(values)
        values[0] = 99.0
        self.assertEqual(v.tolist(), [1.0, 2.0, 3.0])

    def test_tensor_values_are_copied(self):
        t = torch.tensor([1.0, 2.0])
        v = Vector(t)
        t[0] = 5.0
        self.assertEqual(v[0], 1.0)

    def test_generator_values(self):
        v = Vector(float(i) for i in range(4))
        self.assertEqual(v.dimension, 4)
        self.assertEqual(len(v), 4)

    def test_rejects_nested_values(self):
        with self.assertRaises(ValueError):
            Vector([[1.0, 2.0], [3.0, 4.0]])

    def test_rejects_empty_values(self):
        with self.assertRaises(ValueError):
            Vector([])
        with self.assertRaises(ValueError):
            Vector(torch.empty(0))

    def test_random_components_in_unit_interval(self):
        generator = torch.Generator().manual_seed(0)
        for dimension in (1, 3, 17, 100):
            v = Vector.random(dimension, generator=generator)
            self.assertEqual(v.dimension, dimension)
            for value in v:
                self.assertGreaterEqual(value, 0.0)
                self.assertLess(value, 1.0)

    def test_random_is_reproducible_with_seed(self):
        a = Vector.random(5, generator=torch.Generator().manual_seed(7))
        b = Vector.random(5, generator=torch.Generator().manual_seed(7))
        self.assertEqual(a, b)

    def test_random_rejects_non_positive_dimension(self):
        with self.assertRaises(ValueError):
            Vector.random(0)
        with self.assertRaises(ValueError):
            Vector.random(-3)

    def test_zeros(self):
        self.assertEqual(Vector.zeros(3).tolist(), [0.0, 0.0, 0.0])


class TestVectorIndexing(unittest.TestCase):

    def test_get_and_set(self):
        v = Vector([1.0, 2.0, 3.0])
        v[1] = 7.5
        self.assertEqual(v[1], 7.5)
        self.assertIsInstance(v[0], float)

    def test_out_of_range(self):
        v = Vector([1.0, 2.0])
        with self.assertRaises(IndexOutOfRange):
            v[2]
        with self.assertRaises(IndexOutOfRange):
            v[-1]
        with self.assertRaises(IndexOutOfRange):
            v[5] = 1.0
        # Also catchable as the builtin
        with self.assertRaises(IndexError):
            v[2]

    def test_non_integer_index(self):
        v = Vector([1.0, 2.0])
        with self.assertRaises(TypeError):
            v[0.5]

    def test_traversal(self):
        v = Vector([1.0, 2.0, 3.0])
        seen = []
        v.for_each(seen.append)
        self.assertEqual(seen, [1.0, 2.0, 3.0])
        self.assertEqual(list(v), [1.0, 2.0, 3.0])

    def test_traversal_with_none_action(self):
        Vector([1.0]).for_each(None)


class TestVectorArithmetic(unittest.TestCase):

    def setUp(self):
        self.x = Vector([1.0, 2.0, 3.0])
        self.y = Vector([0.5, -1.0, 4.0])

    def test_pure_add(self):
        result = self.x.add(self.y)
        for i in range(3):
            self.assertEqual(result[i], self.x[i] + self.y[i])
        self.assertEqual(self.x.tolist(), [1.0, 2.0, 3.0])
        self.assertEqual(self.y.tolist(), [0.5, -1.0, 4.0])
        self.assertIsNot(result, self.x)

    def test_in_place_add(self):
        expected = self.x.add(self.y)
        returned = self.x.add_(self.y)
        self.assertIs(returned, self.x)
        self.assertEqual(self.x, expected)

    def test_pure_and_in_place_sub(self):
        expected = [0.5, 3.0, -1.0]
        self.assertEqual(self.x.sub(self.y).tolist(), expected)
        self.assertIs(self.x.sub_(self.y), self.x)
        self.assertEqual(self.x.tolist(), expected)

    def test_scalar_mul_and_div(self):
        self.assertEqual(self.x.mul(2).tolist(), [2.0, 4.0, 6.0])
        self.assertEqual(self.x.div(2).tolist(), [0.5, 1.0, 1.5])
        self.assertEqual(self.x.tolist(), [1.0, 2.0, 3.0])
        self.assertIs(self.x.mul_(3), self.x)
        self.assertEqual(self.x.tolist(), [3.0, 6.0, 9.0])
        self.assertIs(self.x.div_(3), self.x)
        self.assertEqual(self.x.tolist(), [1.0, 2.0, 3.0])

    def test_operators(self):
        self.assertEqual((self.x + self.y).tolist(), [1.5, 1.0, 7.0])
        self.assertEqual((self.x - self.y).tolist(), [0.5, 3.0, -1.0])
        self.assertEqual((self.x * 2).tolist(), [2.0, 4.0, 6.0])
        self.assertEqual((2 * self.x).tolist(), [2.0, 4.0, 6.0])
        self.assertEqual((self.x / 2).tolist(), [0.5, 1.0, 1.5])
        self.assertEqual((-self.x).tolist(), [-1.0, -2.0, -3.0])

    def test_augmented_operators_mutate(self):
        original = self.x
        self.x += self.y
        self.assertIs(self.x, original)
        self.assertEqual(self.x.tolist(), [1.5, 1.0, 7.0])
        self.x *= 2
        self.assertIs(self.x, original)
        self.assertEqual(self.x.tolist(), [3.0, 2.0, 14.0])

    def test_divide_by_zero_is_not_an_error(self):
        result = Vector([1.0, -1.0, 0.0]).div(0)
        self.assertEqual(result[0], math.inf)
        self.assertEqual(result[1], -math.inf)
        self.assertTrue(math.isnan(result[2]))

    def test_dimension_mismatch_leaves_operands_unchanged(self):
        short = Vector([1.0, 2.0])
        operations = [
            lambda: self.x.add(short),
            lambda: self.x.sub(short),
            lambda: self.x.add_(short),
            lambda: self.x.sub_(short),
            lambda: short.add_(self.x),
            lambda: short.sub_(self.x),
        ]
        for operation in operations:
            with self.assertRaises(DimensionMismatch):
                operation()
            self.assertEqual(self.x.tolist(), [1.0, 2.0, 3.0])
            self.assertEqual(short.tolist(), [1.0, 2.0])

    def test_dimension_mismatch_is_a_value_error(self):
        with self.assertRaises(ValueError):
            self.x + Vector([1.0])

    def test_norm(self):
        self.assertAlmostEqual(Vector([3.0, 4.0]).norm(), 5.0)


class TestVectorEquality(unittest.TestCase):

    def test_structural_equality_and_hash(self):
        a = Vector([1.0, 2.0])
        b = Vector([1.0, 2.0])
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len({a, b}), 1)

    def test_inequality(self):
        self.assertNotEqual(Vector([1.0, 2.0]), Vector([2.0, 1.0]))
        self.assertNotEqual(Vector([1.0, 2.0]), Vector([1.0, 2.0, 0.0]))
        self.assertNotEqual(Vector([1.0]), [1.0])

    def test_copy_is_independent(self):
        a = Vector([1.0, 2.0])
        b = a.copy()
        b[0] = 10.0
        self.assertEqual(a[0], 1.0)

    def test_to_tensor_returns_copy(self):
        a = Vector([1.0, 2.0])
        t = a.to_tensor()
        t[0] = 999.0
        self.assertNotEqual(a[0], 999.0, "Modifying copy changed original vector.")


if __name__ == '__main__':
    unittest.main()
