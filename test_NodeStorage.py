from NodeStorage import (
    NODE_DTYPE,
    HEADER_DTYPE,
    NODE_BYTES,
    HEADER_BYTES,
    MAX_INT,
    MIN_INT,
    IsValidValue,
    BulkValue,
    EstimateListBytes,
)

import numpy as np


def test_Layout():
    pointerBytes = np.dtype(np.intp).itemsize

    assert NODE_BYTES == NODE_DTYPE.itemsize
    assert HEADER_BYTES == HEADER_DTYPE.itemsize
    assert NODE_BYTES >= 4 + pointerBytes
    assert HEADER_BYTES >= 4 + pointerBytes
    assert NODE_BYTES % pointerBytes == 0
    assert HEADER_BYTES % pointerBytes == 0


def test_IntegerRange():
    assert MAX_INT == 2**31 - 1
    assert MIN_INT == -(2**31)

    assert IsValidValue(0)
    assert IsValidValue(MAX_INT)
    assert IsValidValue(MIN_INT)
    assert IsValidValue(np.int64(12))
    assert not IsValidValue(MAX_INT + 1)
    assert not IsValidValue(MIN_INT - 1)
    assert not IsValidValue(False)
    assert not IsValidValue(2.0)


def test_BulkValue():
    assert BulkValue(0) == 0
    assert BulkValue(5) == 5
    assert BulkValue(MAX_INT - 2) == MAX_INT - 2
    assert BulkValue(MAX_INT - 1) == 0
    assert BulkValue(MAX_INT) == 1


def test_EstimateListBytes():
    assert EstimateListBytes(0) == HEADER_BYTES
    assert EstimateListBytes(8) - EstimateListBytes(3) == 5 * NODE_BYTES
