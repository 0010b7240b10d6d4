import numpy as np

#The storage layout of one node: a 32-bit signed value followed by a pointer-sized link.
NODE_DTYPE = np.dtype([("value", np.int32), ("next", np.intp)], align=True)

#The storage layout of the list header: a pointer-sized head link followed by a 32-bit count.
HEADER_DTYPE = np.dtype([("head", np.intp), ("size", np.int32)], align=True)

NODE_BYTES = NODE_DTYPE.itemsize
HEADER_BYTES = HEADER_DTYPE.itemsize

MAX_INT = int(np.iinfo(np.int32).max)
MIN_INT = int(np.iinfo(np.int32).min)


def IsValidValue(value):
    """
    Check whether a value can be stored in a node.

    Args:
        value: The candidate value.

    Returns:
        bool: True if the value is an integer (bools excluded) within the
              signed 32-bit range.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    if not isinstance(value, (int, np.integer)):
        return False
    return MIN_INT <= int(value) <= MAX_INT


def BulkValue(i):
    """
    The value given to the i-th node built during bulk list construction.

    Wraps around before MAX_INT so that very large counts never overflow.
    """
    return i % (MAX_INT - 1)


def EstimateListBytes(numNodes):
    """
    Estimate the storage a list with the given number of nodes occupies.

    Args:
        numNodes (int): Number of nodes in the list.

    Returns:
        int: HEADER_BYTES plus NODE_BYTES for every node.
    """
    return HEADER_BYTES + NODE_BYTES * numNodes
