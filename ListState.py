from enum import Enum

class ListState(Enum):
    """
    Enumeration of the lifecycle states a SinglyLinkedList can be in.

    A list starts out ACTIVE. Tearing it down releases every node it owns and
    moves it to TORN_DOWN, after which the only legal operation is
    Reinitialize, which brings it back to an empty ACTIVE list.

    Values:
        ACTIVE: The list owns a valid (possibly empty) chain of nodes.
        TORN_DOWN: The list's nodes have been released. Its head and size
            fields are stale and must not be trusted.
    """
    ACTIVE = 1
    TORN_DOWN = 2
