from typing import Union, Literal

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = npt.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike
SCALAR_OR_ARRAY = Union[float, npt.ArrayLike]

EULER_ORDERS = Literal['xyz', 'xzy', 'yxz', 'yzx', 'zxy', 'zyx']
