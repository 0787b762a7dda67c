from unittest import TestCase

import numpy as np

from vecmat import EulerOrder, Quaternion, QuaternionF, RotationMatrix3, Vector3, Vector3F
from vecmat.rotations import EulerConverter, EulerConverterOptions


class TestEulerConverterOptions(TestCase):

    def test_defaults(self):

        options = EulerConverterOptions()

        self.assertIs(options.order, EulerOrder.XYZ)
        self.assertFalse(options.clamp_asin)
        self.assertIs(options.quaternion_type, Quaternion)

    def test_order_normalized(self):

        options = EulerConverterOptions(order='ZyX')

        self.assertIs(options.options_dict['order'], EulerOrder.ZYX)

        with self.assertRaises(ValueError):
            EulerConverterOptions(order='xyx').options_dict


class TestEulerConverter(TestCase):

    def test_default(self):

        converter = EulerConverter()

        self.assertIs(converter.order, EulerOrder.XYZ)
        self.assertFalse(converter.clamp_asin)
        self.assertIs(converter.quaternion_type, Quaternion)

    def test_options(self):

        converter = EulerConverter(EulerConverterOptions(order='zyx', quaternion_type=QuaternionF))

        self.assertIs(converter.order, EulerOrder.ZYX)

        q = converter.to_quaternion([0.1, 0.2, 0.3])

        self.assertIsInstance(q, QuaternionF)
        self.assertTrue(q.equals_approx(QuaternionF.from_array(EulerOrder.ZYX.to_quaternion(0.1, 0.2, 0.3).as_array())))

        angles = converter.to_euler_angles(q)

        self.assertIsInstance(angles, Vector3F)
        self.assertTrue(angles.equals_approx(Vector3(0.1, 0.2, 0.3)))

    def test_to_euler_angles(self):

        converter = EulerConverter(EulerConverterOptions(order=EulerOrder.YZX))

        rmat = RotationMatrix3.from_euler([-0.3, 0.6, 1.1], 'yzx')

        self.assertTrue(converter.to_euler_angles(rmat).equals_approx(Vector3(-0.3, 0.6, 1.1)))
        self.assertTrue(converter.to_euler_angles(Quaternion.from_euler([-0.3, 0.6, 1.1], 'yzx')).equals_approx(
            Vector3(-0.3, 0.6, 1.1)))

    def test_nan_warning(self):

        rmat = RotationMatrix3(0, 0, 1.0000001,
                               0, 1, 0,
                               -1, 0, 0)

        converter = EulerConverter()

        with self.assertLogs('vecmat.rotations.converter', level='WARNING'):
            angles = converter.to_euler_angles(rmat)

        self.assertTrue(np.isnan(angles.y))

        converter.clamp_asin = True

        with self.assertLogs('vecmat.rotations.core.conversions', level='DEBUG'):
            angles = converter.to_euler_angles(rmat)

        self.assertAlmostEqual(angles.y, np.pi/2)

    def test_round_trip(self):

        converter = EulerConverter(EulerConverterOptions(order='zxy'))

        with self.assertLogs('vecmat.rotations.converter', level='DEBUG'):
            angles = converter.round_trip(Vector3(0.2, -0.4, 0.9))

        self.assertTrue(angles.equals_approx(Vector3(0.2, -0.4, 0.9)))

    def test_reset_settings(self):

        options = EulerConverterOptions(order='yxz', clamp_asin=True)

        converter = EulerConverter(options)

        converter.order = EulerOrder.ZYX
        converter.clamp_asin = False
        converter.quaternion_type = QuaternionF

        # string orders set directly on the instance are accepted too
        converter.order = 'xzy'

        self.assertTrue(converter.to_quaternion([0.1, 0.2, 0.3]).equals_approx(
            QuaternionF.from_array(EulerOrder.XZY.to_quaternion(0.1, 0.2, 0.3).as_array())))

        converter.reset_settings()

        self.assertIs(converter.order, EulerOrder.YXZ)
        self.assertTrue(converter.clamp_asin)
        self.assertIs(converter.quaternion_type, Quaternion)
        self.assertIs(converter.original_options, options)
