"""
Welcome to vecmat

vecmat provides small immutable linear algebra value types (vectors, 3x3 matrices, and quaternions) in single and
double precision, along with the routines for converting rotations between rotation matrices, quaternions, and euler
angles in any of the six Tait-Bryan orders.

Numeric edge cases never raise.  Dividing by zero, asking for the arcsine of a value outside of [-1, 1], and similar
situations result in infinities or NaN following IEEE-754, and it is up to the caller to validate inputs (for
instance that a matrix really is a rotation) beforehand.
"""

from vecmat.scalar import EPSILON, EPSILON_F, equals_approx
from vecmat.vectors import Vector3, Vector3D, Vector3F
from vecmat.rotations import (Quaternion, QuaternionD, QuaternionF, Matrix3, Matrix3D, Matrix3F,
                              RotationMatrix3, RotationMatrix3D, RotationMatrix3F, EulerOrder,
                              EulerConverter, EulerConverterOptions)

__all__ = ['EPSILON', 'EPSILON_F', 'equals_approx',
           'Vector3', 'Vector3D', 'Vector3F',
           'Quaternion', 'QuaternionD', 'QuaternionF',
           'Matrix3', 'Matrix3D', 'Matrix3F', 'RotationMatrix3', 'RotationMatrix3D', 'RotationMatrix3F',
           'EulerOrder', 'EulerConverter', 'EulerConverterOptions']
