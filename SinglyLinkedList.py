from ListState import ListState
from NodeStorage import IsValidValue, BulkValue, EstimateListBytes

import logging
import os
import numpy as np

LOGGER_NAME = "SINGLY_LINKED_LIST"


class LinkedListError(Exception):
    """Base class for every error raised by a SinglyLinkedList."""

    pass


class AllocationFailure(LinkedListError):
    """Exception raised when storage for a node or a list cannot be obtained."""

    pass


class InvalidArgument(LinkedListError):
    """Exception raised when an operation is handed an argument it cannot act on."""

    pass


class EmptyListError(InvalidArgument):
    """Exception raised when a deletion is requested on a list with no nodes."""

    pass


class InvalidStateError(InvalidArgument):
    """Exception raised when a torn-down list is used without being reinitialized."""

    pass


def ConfigureLogger(logFile=None, logLevel=logging.WARNING, logger: logging.Logger = None):
    """
    Build the logger a list reports through.

    Without an explicit logger, every list shares the "SINGLY_LINKED_LIST"
    logger, so its level is shared too: the most recently configured list
    sets the level for all of them.

    Args:
        logFile (str, optional): Path to log file. If None, no file logging. Defaults to None.
        logLevel (int, optional): Logging level (e.g., logging.INFO). Defaults to logging.WARNING.
        logger (logging.Logger, optional): Custom logger instance. If given, it is used as-is. Defaults to None.

    Returns:
        logging.Logger: The configured logger.
    """
    if logger is not None:
        return logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logLevel)

    if logFile is not None:
        logPath = os.path.abspath(logFile)
        for handler in logger.handlers:
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == logPath:
                return logger

        file_handler = logging.FileHandler(logFile)
        file_handler.setLevel(logLevel)

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        file_handler.setFormatter(formatter)

        logger.addHandler(file_handler)

    return logger


def Report(logger: logging.Logger, errorType, message, *args):
    """
    Log a rejected operation and build the exception that describes it.

    Returns:
        LinkedListError: An instance of errorType, ready to be raised.
    """
    logger.error(message, *args)
    if args:
        message = message % args
    return errorType(message)


def IsIntegerIndex(position):
    """
    Returns:
        bool: True if position is an int or numpy integer, and not a bool.
    """
    return isinstance(position, (int, np.integer)) and not isinstance(position, (bool, np.bool_))


class SinglyLinkedListNode:
    """
    A node in a singly-linked list structure.

    Attributes:
        value (int): The signed 32-bit integer stored in this node.
        nextNode (SinglyLinkedListNode): The following node, or None at the tail.
        owner (SinglyLinkedList): The list that currently owns this node, or None.
        freed (bool): Whether this node has been released by a deletion or teardown.
    """
    def __init__(self, value):
        self.value = int(value)

        self.nextNode = None
        self.owner = None
        self.freed = False

    def Release(self):
        """
        Mark this node as freed and detach it from its list.
        """
        self.nextNode = None
        self.owner = None
        self.freed = True

    def __repr__(self):
        return f"SinglyLinkedListNode({self.value})"


def CreateNode(value, logger: logging.Logger = None) -> SinglyLinkedListNode:
    """
    Allocate a new, unlinked node.

    Args:
        value (int): The value to store. Must be a signed 32-bit integer.
        logger (logging.Logger, optional): Logger to report failures on. Defaults to the library logger.

    Returns:
        SinglyLinkedListNode: A node with no successor and no owner.

    Raises:
        InvalidArgument: If the value is not a signed 32-bit integer.
        AllocationFailure: If the node cannot be allocated.
    """
    if logger is None:
        logger = logging.getLogger(LOGGER_NAME)

    if not IsValidValue(value):
        raise Report(logger, InvalidArgument, "Unable to create a node with value %r. Node values must be signed 32-bit integers.", value)

    try:
        return SinglyLinkedListNode(value)
    except MemoryError as e:
        raise Report(logger, AllocationFailure, "Unable to allocate a node for value %s.", value) from e


class SinglyLinkedList:
    """
    A singly-linked list of integers that owns the chain of nodes reachable from its head.

    Every mutating operation keeps "size" equal to the number of nodes reachable from
    "headNode", including operations that are rejected or find nothing to do.
    Rejected operations are logged and raised before anything is changed.

    Attributes:
        headNode (SinglyLinkedListNode): First node in the list, or None if empty.
        size (int): Number of nodes in the list.
        state (ListState): Whether the list is active or has been torn down.
        logger (logging.Logger): Logger for reporting rejected operations and structural changes.
    """
    def __init__(
        self,
        logFile=None,
        logLevel=logging.WARNING,
        logger: logging.Logger = None,
    ):
        """
        Initialize a new, empty linked list.

        Unless a logger is given, the level is applied to the shared
        "SINGLY_LINKED_LIST" logger and so affects every list using it.

        Args:
            logFile (str, optional): Path to log file. If None, no file logging. Defaults to None.
            logLevel (int, optional): Logging level. Defaults to logging.WARNING.
            logger (logging.Logger, optional): Custom logger. If None, creates new one. Defaults to None.
        """
        self.logger = ConfigureLogger(logFile, logLevel, logger)

        self.headNode = None
        self.size = 0
        self.state = ListState.ACTIVE

    def AssertActive(self, operation):
        """
        Raises:
            InvalidStateError: If the list has been torn down.
        """
        if self.state != ListState.ACTIVE:
            raise Report(self.logger, InvalidStateError, "Unable to %s: the list has been torn down. Call \"Reinitialize\" first.", operation)

    def AssertInsertable(self, node, operation):
        """
        Make sure a node can be handed over to this list.

        Raises:
            InvalidArgument: If the node is missing, not a node, already freed, or already owned by a list.
        """
        if node is None:
            raise Report(self.logger, InvalidArgument, "Unable to %s: no node was provided.", operation)
        if not isinstance(node, SinglyLinkedListNode):
            raise Report(self.logger, InvalidArgument, "Unable to %s: expected a SinglyLinkedListNode, not \"%s\".", operation, type(node).__name__)
        if node.freed:
            raise Report(self.logger, InvalidArgument, "Unable to %s: node %r has already been freed.", operation, node)
        if node.owner is not None:
            raise Report(self.logger, InvalidArgument, "Unable to %s: node %r already belongs to a list.", operation, node)

    def AssertPosition(self, position, operation):
        """
        Raises:
            InvalidArgument: If the position is not an integer or is negative.
        """
        if not IsIntegerIndex(position):
            raise Report(self.logger, InvalidArgument, "Unable to %s: position must be an integer, not \"%s\".", operation, type(position).__name__)
        if position < 0:
            raise Report(self.logger, InvalidArgument, "Unable to %s: position %s is negative.", operation, position)

    def InsertAtHead(self, node: SinglyLinkedListNode):
        """
        Make a node the new head of the list. O(1).

        Args:
            node (SinglyLinkedListNode): The node to insert. Ownership passes to this list.
        """
        self.AssertActive("insert at head")
        self.AssertInsertable(node, "insert at head")

        node.nextNode = self.headNode
        node.owner = self
        self.headNode = node
        self.size += 1

        self.logger.debug("Inserted %r at head. Size: %s", node, self.size)

    def InsertAtTail(self, node: SinglyLinkedListNode):
        """
        Append a node after the current tail. O(n).

        Args:
            node (SinglyLinkedListNode): The node to insert. Ownership passes to this list.
        """
        self.AssertActive("insert at tail")
        self.InsertAtPosition(self.size, node)

    def InsertAtPosition(self, position, node: SinglyLinkedListNode):
        """
        Splice a node in so that it ends up at the given zero-based position.

        Position 0 inserts at the head. Positions past the end of the list are
        clamped to the tail.

        Args:
            position (int): Zero-based index the new node should occupy.
            node (SinglyLinkedListNode): The node to insert. Ownership passes to this list.

        Raises:
            InvalidArgument: If the node is not insertable or the position is negative.
        """
        self.AssertActive("insert at position")
        self.AssertInsertable(node, "insert at position")
        self.AssertPosition(position, "insert at position")

        if position == 0:
            self.InsertAtHead(node)
            return

        if position > self.size:
            self.InsertAtTail(node)
            return

        previous = None
        current = self.headNode
        for _ in range(position):
            if current is None:
                break
            previous = current
            current = current.nextNode

        if previous is None:
            self.logger.debug("No predecessor found for position %s. Nothing inserted.", position)
            return

        previous.nextNode = node
        node.nextNode = current
        node.owner = self
        self.size += 1

        self.logger.debug("Inserted %r at position %s. Size: %s", node, position, self.size)

    def DeleteHead(self):
        """
        Unlink and free the head node.

        Raises:
            EmptyListError: If the list has no nodes.
        """
        self.AssertActive("delete head")
        if self.headNode is None:
            raise Report(self.logger, EmptyListError, "Unable to delete the head of an empty list.")

        removed = self.headNode
        self.headNode = removed.nextNode
        removed.Release()
        self.size -= 1

        self.logger.debug("Deleted head %r. Size: %s", removed, self.size)

    def DeleteNodeByData(self, value):
        """
        Unlink and free the first node holding the given value.

        A value that is not in the list is not an error; nothing happens.

        Args:
            value (int): The value to search for.

        Raises:
            EmptyListError: If the list has no nodes.
        """
        self.AssertActive("delete by value")
        if self.headNode is None:
            raise Report(self.logger, EmptyListError, "Unable to delete value %s from an empty list.", value)

        if self.headNode.value == value:
            self.DeleteHead()
            return

        previous = self.headNode
        while previous.nextNode is not None and previous.nextNode.value != value:
            previous = previous.nextNode

        if previous.nextNode is None:
            self.logger.debug("Value %s not found. Nothing deleted.", value)
            return

        removed = previous.nextNode
        previous.nextNode = removed.nextNode
        removed.Release()
        self.size -= 1

        self.logger.debug("Deleted %r. Size: %s", removed, self.size)

    def DeleteNodeAtPosition(self, position):
        """
        Unlink and free the node at the given zero-based position.

        A position past the end of the list is not an error; nothing happens.

        Args:
            position (int): Zero-based index of the node to delete.

        Raises:
            InvalidArgument: If the position is negative.
            EmptyListError: If the list has no nodes.
        """
        self.AssertActive("delete at position")
        self.AssertPosition(position, "delete at position")
        if self.headNode is None:
            raise Report(self.logger, EmptyListError, "Unable to delete position %s from an empty list.", position)

        if position == 0:
            self.DeleteHead()
            return

        previous = None
        current = self.headNode
        for _ in range(position):
            if current is None:
                break
            previous = current
            current = current.nextNode

        if previous is None or current is None:
            self.logger.debug("Position %s is out of range for size %s. Nothing deleted.", position, self.size)
            return

        previous.nextNode = current.nextNode
        current.Release()
        self.size -= 1

        self.logger.debug("Deleted %r at position %s. Size: %s", current, position, self.size)

    def DeleteTail(self):
        """
        Unlink and free the last node.

        Raises:
            EmptyListError: If the list has no nodes.
        """
        self.AssertActive("delete tail")
        if self.headNode is None:
            raise Report(self.logger, EmptyListError, "Unable to delete the tail of an empty list.")
        self.DeleteNodeAtPosition(self.size - 1)

    def FindNodeByData(self, value, allowZeroKey=False):
        """
        Find the first node holding the given value.

        Zero is historically not a valid search key: unless allowZeroKey is set,
        searching for 0 is reported and yields None even if a node holds 0.

        Args:
            value (int): The value to search for.
            allowZeroKey (bool, optional): Treat 0 as an ordinary search key. Defaults to False.

        Returns:
            SinglyLinkedListNode: The first matching node, or None if there is no match.
        """
        self.AssertActive("find by value")
        if value == 0 and not allowZeroKey:
            self.logger.error("Zero is not a valid search key. Pass allowZeroKey=True to search for it.")
            return None

        nodei = self.headNode
        while nodei is not None:
            if nodei.value == value:
                return nodei
            nodei = nodei.nextNode

        self.logger.debug("Value %s not found.", value)
        return None

    def IsEmpty(self):
        """
        Returns:
            bool: True if the list has no head node.
        """
        self.AssertActive("check emptiness")
        return self.headNode is None

    def CalcNodes(self):
        """
        Count the nodes by walking the chain, without trusting "size".

        Returns:
            int: The number of nodes reachable from the head.
        """
        self.AssertActive("count nodes")
        numNodes = 0
        nodei = self.headNode
        while nodei is not None:
            numNodes += 1
            nodei = nodei.nextNode
        return numNodes

    def CalcListBytes(self):
        """
        Estimate the storage this list occupies, based on "size".

        Returns:
            int: The header size plus the per-node size for every node.
        """
        self.AssertActive("calculate bytes")
        return EstimateListBytes(self.size)

    def ReverseList(self):
        """
        Reverse the list in place. O(n) time, O(1) extra space.
        """
        self.AssertActive("reverse")
        if self.headNode is None:
            return

        previous = None
        current = self.headNode
        while current is not None:
            following = current.nextNode
            current.nextNode = previous
            previous = current
            current = following

        self.headNode = previous

        self.logger.debug("Reversed list of size %s.", self.size)

    def Teardown(self):
        """
        Free every node this list owns and mark the list as torn down.

        "headNode" and "size" are left as they were and must not be trusted
        afterwards. Call "Reinitialize" to use the list again.
        """
        self.AssertActive("tear down")

        numReleased = 0
        current = self.headNode
        while current is not None:
            following = current.nextNode
            current.Release()
            numReleased += 1
            current = following

        self.state = ListState.TORN_DOWN

        self.logger.info("Tore down list. Released %s nodes.", numReleased)

    def Reinitialize(self):
        """
        Return the list to an empty, active state.

        An active list that still owns nodes is torn down first.
        """
        if self.state == ListState.ACTIVE and self.headNode is not None:
            self.Teardown()

        self.headNode = None
        self.size = 0
        self.state = ListState.ACTIVE

        self.logger.debug("Reinitialized list.")

    def ToArray(self):
        """
        Collect the values from head to tail.

        Returns:
            np.array: The values as an int32 array.
        """
        self.AssertActive("convert to array")
        return np.fromiter(iter(self), dtype=np.int32)

    def __iter__(self):
        """
        Iterate over the values from head to tail.

        The list must not be mutated during iteration. Deleting the node the
        iterator is on frees it and clears its link, which ends the iteration
        early.

        Returns:
            iterator: An iterator over the list values.

        Raises:
            InvalidStateError: If the list has been torn down, as soon as iter() is called.
        """
        self.AssertActive("iterate")

        def values(nodei):
            while nodei is not None:
                yield nodei.value
                nodei = nodei.nextNode

        return values(self.headNode)

    def __len__(self):
        """
        Return the number of elements in the list.

        Returns:
            int: The size of the linked list.
        """
        self.AssertActive("take length")
        return self.size

    def __repr__(self):
        return f"SinglyLinkedList(size={self.size}, state={self.state.name})"


def CreateList(count, logFile=None, logLevel=logging.WARNING, logger: logging.Logger = None) -> SinglyLinkedList:
    """
    Build a list holding "count" nodes.

    Nodes are inserted at the head with values 0, 1, ..., count-1 (wrapped
    before MAX_INT), so the finished list reads in descending order from head
    to tail. If any allocation fails, every node built so far is released and
    no list is returned.

    Args:
        count (int): Number of nodes to create. Must not be negative.
        logFile (str, optional): Path to log file. Defaults to None.
        logLevel (int, optional): Logging level. Defaults to logging.WARNING.
        logger (logging.Logger, optional): Custom logger. Defaults to None.

    Returns:
        SinglyLinkedList: The populated list.

    Raises:
        InvalidArgument: If count is not a non-negative integer.
        AllocationFailure: If the list or any of its nodes cannot be allocated.
    """
    reportLogger = ConfigureLogger(logFile, logLevel, logger)

    if not IsIntegerIndex(count) or count < 0:
        raise Report(reportLogger, InvalidArgument, "Unable to create a list of %r nodes. The count must be a non-negative integer.", count)

    try:
        llist = SinglyLinkedList(logger=reportLogger)
    except MemoryError as e:
        raise Report(reportLogger, AllocationFailure, "Unable to allocate a list.") from e

    try:
        for i in range(count):
            llist.InsertAtHead(CreateNode(BulkValue(i), reportLogger))
    except AllocationFailure:
        reportLogger.error("Rolling back partially built list of %s nodes.", llist.size)
        llist.Teardown()
        raise

    reportLogger.info("Created list of %s nodes.", llist.size)
    return llist


def IsEmpty(llist: SinglyLinkedList):
    """True if there is no list or the list has no head."""
    return llist is None or llist.IsEmpty()


def CalcNodes(llist: SinglyLinkedList):
    """
    Returns:
        int: The traversed node count, or 0 if there is no list.
    """
    if llist is None:
        return 0
    return llist.CalcNodes()


def CalcListBytes(llist: SinglyLinkedList):
    """
    Returns:
        int: The estimated storage of the list, or 0 if there is no list.
    """
    if llist is None:
        return 0
    return llist.CalcListBytes()


def FindNodeByData(llist: SinglyLinkedList, value, allowZeroKey=False):
    """
    Find the first node holding the given value in a list.

    Raises:
        InvalidArgument: If no list is provided.
    """
    if llist is None:
        raise Report(logging.getLogger(LOGGER_NAME), InvalidArgument, "Unable to search for value %s: no list was provided.", value)
    return llist.FindNodeByData(value, allowZeroKey=allowZeroKey)
