from LinkedListPrinter import (
    FormatLinkedList,
    FormatLinkedListInfo,
    PrintLinkedList,
    PrintLinkedListInfo,
)
from SinglyLinkedList import SinglyLinkedList, CreateList, InvalidArgument, InvalidStateError
from NodeStorage import HEADER_BYTES, NODE_BYTES

import io
import pytest


def test_FormatLinkedList():
    assert FormatLinkedList(CreateList(3)) == "2 ~ 1 ~ 0 ~ ( END )"
    assert FormatLinkedList(SinglyLinkedList()) == "( END )"


def test_FormatLinkedListInfo():
    info = FormatLinkedListInfo(CreateList(4))
    lines = info.split("\n")

    assert len(lines) == 2
    assert lines[0] == "This list contains 4 nodes."
    assert lines[1] == f"This list takes up {HEADER_BYTES + 4 * NODE_BYTES} Bytes of storage space."


def test_PrintLinkedList(capsys):
    PrintLinkedList(CreateList(2))
    assert capsys.readouterr().out == "1 ~ 0 ~ ( END )\n"


def test_PrintToStream():
    stream = io.StringIO()
    llist = CreateList(1)
    PrintLinkedList(llist, stream)
    PrintLinkedListInfo(llist, stream)

    lines = stream.getvalue().splitlines()
    assert lines[0] == "0 ~ ( END )"
    assert lines[1] == "This list contains 1 nodes."


def test_RejectsMissingList(caplog):
    with pytest.raises(InvalidArgument):
        PrintLinkedList(None)
    with pytest.raises(InvalidArgument):
        PrintLinkedListInfo(None)
    assert sum(record.levelname == "ERROR" for record in caplog.records) == 2


def test_RejectsTornDownList():
    llist = CreateList(2)
    llist.Teardown()
    with pytest.raises(InvalidStateError):
        FormatLinkedList(llist)
    with pytest.raises(InvalidStateError):
        FormatLinkedListInfo(llist)
