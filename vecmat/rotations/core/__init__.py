"""
This module contains fundamental mathematical operations and utilities for rotation
calculations. It has no dependencies on the rotation value types to avoid circular imports.
All functions here are pure, vectorized numpy operations that can be used as building blocks
for the higher-level rotation representations and conversions.
"""

import vecmat.rotations.core.conversions
import vecmat.rotations.core.elementals
import vecmat.rotations.core.quaternion_math

from vecmat.rotations.core.conversions import (quaternion_to_rotmat, quaternion_to_euler, rotmat_to_euler,
                                               euler_to_rotmat, euler_to_quaternion)

from vecmat.rotations.core.elementals import rot_x, rot_y, rot_z, rot_axis, skew, axis_quaternion

from vecmat.rotations.core.quaternion_math import (quaternion_normalize, quaternion_conjugate, quaternion_inverse,
                                                   quaternion_multiplication, quaternion_division)

__all__ = ['quaternion_to_rotmat', 'quaternion_to_euler', 'rotmat_to_euler', 'euler_to_rotmat', 'euler_to_quaternion',
           'rot_x', 'rot_y', 'rot_z', 'rot_axis', 'skew', 'axis_quaternion',
           'quaternion_normalize', 'quaternion_conjugate', 'quaternion_inverse', 'quaternion_multiplication',
           'quaternion_division']
