from unittest import TestCase

import numpy as np

from vecmat.vectors import Vector3, Vector3F


class TestVector3(TestCase):

    def test_components(self):

        v = Vector3(1.5, -2, 3)

        self.assertEqual(v.x, 1.5)
        self.assertEqual(v.y, -2)
        self.assertEqual(v.z, 3)
        self.assertEqual(list(v), [1.5, -2, 3])
        self.assertEqual(v[2], 3)
        self.assertEqual(len(v), 3)

    def test_immutable(self):

        v = Vector3(1, 2, 3)

        with self.assertRaises(AttributeError):
            v.x = 4

        arr = v.as_array()
        arr[0] = 10

        self.assertEqual(v.x, 1)

    def test_from_array(self):

        self.assertEqual(Vector3.from_array([1, 2, 3]), Vector3(1, 2, 3))
        self.assertIsInstance(Vector3F.from_array([1, 2, 3]), Vector3F)

        with self.assertRaises(ValueError):
            Vector3.from_array([1, 2])

    def test_dot(self):

        self.assertEqual(Vector3(1, 2, 3).dot(Vector3(4, -5, 6)), 12)

    def test_equals(self):

        v = Vector3(1.2, 1.4, -2.1)

        self.assertTrue(v.equals(1.2, 1.4, -2.1))
        self.assertFalse(v.equals(1.2, 1.4, 2.1))
        self.assertEqual(v, Vector3(1.2, 1.4, -2.1))
        self.assertEqual(hash(v), hash(Vector3(1.2, 1.4, -2.1)))
        self.assertNotEqual(v, (1.2, 1.4, -2.1))

    def test_equals_approx(self):

        self.assertTrue(Vector3(1.20000001, 1.39999999, -2.1).equals_approx(Vector3(1.2, 1.4, -2.1)))
        self.assertFalse(Vector3(1.21, 1.4, -2.1).equals_approx(Vector3(1.2, 1.4, -2.1)))
        self.assertFalse(Vector3(np.nan, 0, 0).equals_approx(Vector3(np.nan, 0, 0)))

    def test_precision(self):

        self.assertEqual(Vector3F(1, 2, 3).x.dtype, np.float32)
        self.assertEqual(Vector3(1, 2, 3).x.dtype, np.float64)
