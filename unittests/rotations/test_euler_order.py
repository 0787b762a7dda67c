from unittest import TestCase

import numpy as np

from vecmat import (EulerOrder, Quaternion, QuaternionF, RotationMatrix3, RotationMatrix3F, Matrix3, Vector3,
                    Vector3F)


class TestEulerOrderMembers(TestCase):

    def test_members(self):

        self.assertEqual([order.name for order in EulerOrder], ['XYZ', 'XZY', 'YXZ', 'YZX', 'ZXY', 'ZYX'])

        self.assertEqual(EulerOrder.XYZ, 'xyz')
        self.assertEqual(str(EulerOrder.ZYX), 'ZYX')

    def test_parse(self):

        self.assertIs(EulerOrder.parse('zyx'), EulerOrder.ZYX)
        self.assertIs(EulerOrder.parse('YxZ'), EulerOrder.YXZ)
        self.assertIs(EulerOrder.parse(EulerOrder.XZY), EulerOrder.XZY)

        for bad in ['xyx', 'zxz', 'xy', '', 3]:

            with self.subTest(bad=bad):

                with self.assertRaises(ValueError):
                    EulerOrder.parse(bad)

    def test_axes_parity(self):

        expected = {EulerOrder.XYZ: ((0, 1, 2), 1),
                    EulerOrder.XZY: ((0, 2, 1), -1),
                    EulerOrder.YXZ: ((1, 0, 2), -1),
                    EulerOrder.YZX: ((1, 2, 0), 1),
                    EulerOrder.ZXY: ((2, 0, 1), 1),
                    EulerOrder.ZYX: ((2, 1, 0), -1)}

        for order, (axes, parity) in expected.items():

            with self.subTest(order=order):

                self.assertEqual(order.axes, axes)
                self.assertEqual(order.parity, parity)


class TestToQuaternion(TestCase):

    def test_zyx(self):

        q = EulerOrder.ZYX.to_quaternion(0.1, 0.2, 0.3)

        qx = Quaternion(np.cos(0.05), np.sin(0.05), 0, 0)
        qy = Quaternion(np.cos(0.1), 0, np.sin(0.1), 0)
        qz = Quaternion(np.cos(0.15), 0, 0, np.sin(0.15))

        self.assertTrue(q.equals_approx(qz * qy * qx))
        self.assertTrue(q.is_normalized())

    def test_products(self):

        angles = Vector3(-0.4, 1.1, 2.3)

        qx = Quaternion(np.cos(-0.2), np.sin(-0.2), 0, 0)
        qy = Quaternion(np.cos(0.55), 0, np.sin(0.55), 0)
        qz = Quaternion(np.cos(1.15), 0, 0, np.sin(1.15))

        expected = {EulerOrder.XYZ: qx * qy * qz,
                    EulerOrder.XZY: qx * qz * qy,
                    EulerOrder.YXZ: qy * qx * qz,
                    EulerOrder.YZX: qy * qz * qx,
                    EulerOrder.ZXY: qz * qx * qy,
                    EulerOrder.ZYX: qz * qy * qx}

        for order, solu in expected.items():

            with self.subTest(order=order):

                self.assertTrue(order.to_quaternion(angles).equals_approx(solu))
                self.assertTrue(order.to_quaternion(angles.x, angles.y, angles.z).equals_approx(solu))
                self.assertTrue(order.to_quaternion([-0.4, 1.1, 2.3]).equals_approx(solu))

    def test_single_axis(self):

        for order in EulerOrder:

            with self.subTest(order=order):

                self.assertTrue(order.to_quaternion(0, 0, 0).equals_approx(Quaternion.identity()))
                self.assertTrue(order.to_quaternion(0, np.pi, 0).equals_approx(Quaternion(0, 0, 1, 0)))

    def test_quaternion_type(self):

        q = EulerOrder.YZX.to_quaternion(0.1, 0.2, 0.3, quaternion_type=QuaternionF)

        self.assertIsInstance(q, QuaternionF)
        self.assertTrue(q.equals_approx(QuaternionF.from_array(EulerOrder.YZX.to_quaternion(0.1, 0.2, 0.3).as_array())))

    def test_bad_inputs(self):

        with self.assertRaises(ValueError):
            EulerOrder.XYZ.to_quaternion(0.1, 0.2)

        with self.assertRaises(ValueError):
            EulerOrder.XYZ.to_quaternion(0.1, z=0.2)

        with self.assertRaises(ValueError):
            EulerOrder.XYZ.to_quaternion([0.1, 0.2])


class TestToEulerAngles(TestCase):

    def test_explicit_formulas(self):

        formulas = {EulerOrder.XYZ: lambda m: (np.arctan2(-m[1, 2], m[2, 2]), np.arcsin(m[0, 2]),
                                               np.arctan2(-m[0, 1], m[0, 0])),
                    EulerOrder.XZY: lambda m: (np.arctan2(m[2, 1], m[1, 1]), np.arctan2(m[0, 2], m[0, 0]),
                                               np.arcsin(-m[0, 1])),
                    EulerOrder.YXZ: lambda m: (np.arcsin(-m[1, 2]), np.arctan2(m[0, 2], m[2, 2]),
                                               np.arctan2(m[1, 0], m[1, 1])),
                    EulerOrder.YZX: lambda m: (np.arctan2(-m[1, 2], m[1, 1]), np.arctan2(-m[2, 0], m[0, 0]),
                                               np.arcsin(m[1, 0])),
                    EulerOrder.ZXY: lambda m: (np.arcsin(m[2, 1]), np.arctan2(-m[2, 0], m[2, 2]),
                                               np.arctan2(-m[0, 1], m[1, 1])),
                    EulerOrder.ZYX: lambda m: (np.arctan2(m[2, 1], m[2, 2]), np.arcsin(-m[2, 0]),
                                               np.arctan2(m[1, 0], m[0, 0]))}

        rmat = RotationMatrix3.from_quaternion(Quaternion(0.3, -1.5, 1.1, 0.2).normalized())

        for order, formula in formulas.items():

            with self.subTest(order=order):

                self.assertTrue(order.to_euler_angles(rmat).equals_approx(Vector3(*formula(rmat.as_array()))))

    def test_round_trip(self):

        values = [-1.2, -0.5, 0, 0.4, 1.3]

        for order in EulerOrder:

            for x in values:
                for y in values:
                    for z in values:

                        with self.subTest(order=order, angles=(x, y, z)):

                            angles = order.to_euler_angles(order.to_quaternion(x, y, z))

                            np.testing.assert_allclose(angles.as_array(), [x, y, z], atol=1e-6)

    def test_matrix_and_quaternion_agree(self):

        q = Quaternion(1.2, 1.4, -2.1, 3.0).normalized()

        for order in EulerOrder:

            with self.subTest(order=order):

                self.assertTrue(order.to_euler_angles(q).equals_approx(
                    order.to_euler_angles(RotationMatrix3.from_quaternion(q))))

                # the sign of a rotation quaternion is irrelevant
                self.assertTrue(order.to_euler_angles(q).equals_approx(order.to_euler_angles(-q)))

    def test_plain_matrix(self):

        rmat = Matrix3.from_array(RotationMatrix3.from_euler([0.5, 0.25, -0.75], 'yxz').as_array())

        self.assertTrue(EulerOrder.YXZ.to_euler_angles(rmat).equals_approx(Vector3(0.5, 0.25, -0.75)))

    def test_gimbal_lock(self):

        # y of exactly pi/2 for the xyz order couples the x and z rotations
        rmat = RotationMatrix3.from_rows([0, 0, 1], [np.sin(0.5), np.cos(0.5), 0], [-np.cos(0.5), np.sin(0.5), 0])

        angles = EulerOrder.XYZ.to_euler_angles(rmat)

        # the x and z angles are not unique here, only the middle angle is determined
        self.assertAlmostEqual(angles.y, np.pi/2)
        self.assertTrue(np.isfinite(angles.as_array()).all())

    def test_gimbal_lock_composed(self):

        outer = [-3.0, -1.2, 0, 0.7, 2.5]

        for order in EulerOrder:

            i, j, k = order.axes

            for middle in [np.pi/2, -np.pi/2]:
                for first in outer:
                    for last in outer:

                        angles = np.zeros(3)
                        angles[[i, j, k]] = [first, middle, last]

                        with self.subTest(order=order, angles=angles.tolist()):

                            q = order.to_quaternion(angles)

                            # round off can push the arcsine argument just past 1
                            default = order.to_euler_angles(q).as_array()

                            self.assertTrue(np.isnan(default[j]) or abs(default[j] - middle) < 1e-6)
                            self.assertFalse(np.isnan(default[[i, k]]).any())

                            clamped = order.to_euler_angles(q, clamp=True).as_array()

                            self.assertFalse(np.isnan(clamped).any())
                            self.assertLess(abs(clamped[j] - middle), 1e-6)

    def test_out_of_domain(self):

        rmat = RotationMatrix3(0, 0, 1.0000001,
                               0, 1, 0,
                               -1, 0, 0)

        angles = EulerOrder.XYZ.to_euler_angles(rmat)

        self.assertTrue(np.isnan(angles.y))
        self.assertFalse(np.isnan(angles.x))
        self.assertFalse(np.isnan(angles.z))

        angles = EulerOrder.XYZ.to_euler_angles(rmat, clamp=True)

        self.assertAlmostEqual(angles.y, np.pi/2)

    def test_precision(self):

        q = QuaternionF.from_euler([0.1, 0.2, 0.3], 'zxy')

        angles = EulerOrder.ZXY.to_euler_angles(q)

        self.assertIsInstance(angles, Vector3F)
        self.assertTrue(angles.equals_approx(Vector3(0.1, 0.2, 0.3)))

        self.assertIsInstance(EulerOrder.ZXY.to_euler_angles(RotationMatrix3F.identity()), Vector3F)
        self.assertIsInstance(EulerOrder.ZXY.to_euler_angles(Quaternion.identity()), Vector3)

    def test_bad_rotation(self):

        with self.assertRaises(TypeError):
            EulerOrder.XYZ.to_euler_angles(np.eye(3))

        with self.assertRaises(TypeError):
            EulerOrder.XYZ.to_euler_angles(Vector3(1, 2, 3))
