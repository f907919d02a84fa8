""""""

import numpy as np
import pytest

from cortex import Matrix


@pytest.fixture
def values():
    return [1, 2, 3, 4, 5]


@pytest.fixture
def grid():
    # 3 columns by 2 rows holding 0..5 in row-major order
    matrix = Matrix(3, 2, dtype=np.int64)
    for index in range(matrix.size()):
        matrix[index] = index

    return matrix
