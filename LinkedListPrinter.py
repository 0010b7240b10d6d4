from SinglyLinkedList import SinglyLinkedList, InvalidArgument, Report, LOGGER_NAME

import logging
import sys

END_MARKER = "( END )"


def AssertList(llist, operation):
    """
    Raises:
        InvalidArgument: If no list is provided.
    """
    if llist is None:
        raise Report(logging.getLogger(LOGGER_NAME), InvalidArgument, "Unable to %s: no list was provided.", operation)


def FormatLinkedList(llist: SinglyLinkedList):
    """
    Render the values of a list from head to tail.

    Returns:
        str: e.g. "4 ~ 3 ~ 1 ~ ( END )", or "( END )" for an empty list.
    """
    AssertList(llist, "format list")
    return "".join(f"{value} ~ " for value in llist) + END_MARKER


def FormatLinkedListInfo(llist: SinglyLinkedList):
    """
    Summarize how many nodes a list holds and how much storage it takes up.

    Returns:
        str: Two lines reporting the node count and the estimated byte usage.
    """
    AssertList(llist, "format list info")
    return f"This list contains {llist.size} nodes.\nThis list takes up {llist.CalcListBytes()} Bytes of storage space."


def PrintLinkedList(llist: SinglyLinkedList, stream=None):
    """
    Print the values of a list from head to tail.

    Args:
        llist (SinglyLinkedList): The list to print.
        stream (file-like, optional): Where to print. Defaults to sys.stdout.
    """
    print(FormatLinkedList(llist), file=sys.stdout if stream is None else stream)


def PrintLinkedListInfo(llist: SinglyLinkedList, stream=None):
    """
    Print the node count and estimated byte usage of a list.

    Args:
        llist (SinglyLinkedList): The list to describe.
        stream (file-like, optional): Where to print. Defaults to sys.stdout.
    """
    print(FormatLinkedListInfo(llist), file=sys.stdout if stream is None else stream)
