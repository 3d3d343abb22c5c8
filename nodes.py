# nodes.py

from enum import IntEnum


class UnknownNodeLabel(ValueError):
    """Raised when a label is not one of the maze's seven locations."""


class Node(IntEnum):
    """Locations in the maze. The integer value doubles as the node index."""
    EXIT = 0
    NEST = 1
    FOOD = 2
    A = 3        # junction, never a destination
    WHEEL = 4
    B = 5        # junction, never a destination
    MEDICINE = 6

    @property
    def label(self) -> str:
        return NODE_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "Node":
        try:
            return _NODES_BY_LABEL[label]
        except (KeyError, TypeError):
            raise UnknownNodeLabel(f"Unknown node label {label!r}") from None


# index -> label, in Node order
NODE_LABELS = ("E", "N", "F", "A", "W", "B", "M")

_NODES_BY_LABEL = {label: Node(i) for i, label in enumerate(NODE_LABELS)}

PLACE_NAMES = {
    Node.EXIT: "exit",
    Node.NEST: "rat's nest",
    Node.FOOD: "food bowl",
    Node.A: "junction A",
    Node.WHEEL: "exercise wheel",
    Node.B: "junction B",
    Node.MEDICINE: "medical pod",
}
