"""
Scalar helpers shared by the value types in :mod:`vecmat`.

Only the approximate equality test lives here.  It follows IEEE-754 semantics for the special values: two infinities
of the same sign compare equal, infinities of opposite sign do not, and NaN never compares equal to anything
(including itself).
"""

import numpy as np

from vecmat._typing import SCALAR_OR_ARRAY


__all__ = ['EPSILON', 'EPSILON_F', 'equals_approx']


EPSILON: float = 1e-6
"""
The default tolerance used for double precision comparisons
"""

EPSILON_F: float = 1e-5
"""
The default tolerance used for single precision comparisons
"""


def equals_approx(a: SCALAR_OR_ARRAY, b: SCALAR_OR_ARRAY, epsilon: float = EPSILON) -> bool:
    r"""
    Checks whether ``a`` and ``b`` are approximately equal.

    The check is performed element-wise and is true only if every element satisfies

    .. math::
        \left|a-b\right| \leq \epsilon + \epsilon\left|b\right|

    so that ``epsilon`` acts both as an absolute and a relative tolerance.

    :param a: the first value(s)
    :param b: the second value(s)
    :param epsilon: the tolerance to use
    :return: ``True`` if all of the elements are within tolerance
    """

    return bool(np.all(np.isclose(a, b, rtol=epsilon, atol=epsilon)))
