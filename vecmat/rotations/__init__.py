r"""
This package defines the rotation value types of :mod:`vecmat` and the routines for converting between the different
rotation representations.

There are a few different rotation representations that are used in this package and their format is described as
follows:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
quaternion         A 4 element, scalar first rotation quaternion of the form
                   :math:`\mathbf{q}=\left[\begin{array}{cccc} w & x & y & z\end{array}\right]^T=
                   \left[\begin{array}{cc}\text{cos}(\frac{\theta}{2}) &
                   \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}^T\end{array}\right]^T`
                   where :math:`\hat{\mathbf{x}}` is a 3 element unit vector representing the axis of rotation and
                   :math:`\theta` is the total angle to rotate about that vector.  The rotation represented by
                   :math:`\mathbf{q}` is the same rotation represented by :math:`-\mathbf{q}`.  The algebraic
                   operations are defined for quaternions of any length.
rotation matrix    A :math:`3\times 3` orthonormal matrix with a determinant of +1 that actively rotates column vectors.
                   Rotation matrices uniquely represent a single rotation.
euler angles       A 3 element vector :math:`(x, y, z)` of the angles, in radians, to rotate about each coordinate
                   axis.  The angles are labeled by axis and the order they are applied in is given separately by an
                   :class:`.EulerOrder`.  For the order :math:`IJK` the rotation matrix is
                   :math:`\mathbf{R}=\mathbf{R}_I(\theta_I)\mathbf{R}_J(\theta_J)\mathbf{R}_K(\theta_K)`.
=================  =====================================================================================================

The :class:`.Quaternion`, :class:`.RotationMatrix3`, and :class:`.EulerOrder` classes are the primary tools that will
be used by users.  The array level routines in :mod:`vecmat.rotations.core` work on (stacks of) numpy arrays directly.
"""

import vecmat.rotations.core
import vecmat.rotations.quaternion
import vecmat.rotations.matrix
import vecmat.rotations.euler_order
import vecmat.rotations.converter

from vecmat.rotations.core import *
from vecmat.rotations.quaternion import Quaternion, QuaternionD, QuaternionF
from vecmat.rotations.matrix import Matrix3, Matrix3D, Matrix3F, RotationMatrix3, RotationMatrix3D, RotationMatrix3F
from vecmat.rotations.euler_order import EulerOrder
from vecmat.rotations.converter import EulerConverter, EulerConverterOptions

__all__ = ['quaternion_to_rotmat', 'quaternion_to_euler', 'rotmat_to_euler', 'euler_to_rotmat', 'euler_to_quaternion',
           'rot_x', 'rot_y', 'rot_z', 'rot_axis', 'skew', 'axis_quaternion',
           'quaternion_normalize', 'quaternion_conjugate', 'quaternion_inverse', 'quaternion_multiplication',
           'quaternion_division',
           'Quaternion', 'QuaternionD', 'QuaternionF',
           'Matrix3', 'Matrix3D', 'Matrix3F', 'RotationMatrix3', 'RotationMatrix3D', 'RotationMatrix3F',
           'EulerOrder', 'EulerConverter', 'EulerConverterOptions']
