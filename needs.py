# needs.py

from collections import namedtuple
from dataclasses import dataclass, fields

from nodes import Node

FUN_MAX = 35
HEALTH_MAX = 60
HUNGER_MAX = 30
SLEEP_MAX = 40

NEED_MAX = {
    "fun": FUN_MAX,
    "health": HEALTH_MAX,
    "hunger": HUNGER_MAX,
    "sleep": SLEEP_MAX,
}

# Once every need is above this percentage the rat heads for the exit.
SATISFIED_THRESHOLD = 50

NEED_FOR_NODE = {
    Node.FOOD: "hunger",
    Node.MEDICINE: "health",
    Node.NEST: "sleep",
    Node.WHEEL: "fun",
}

# Arbitration scan order after health, the default pick.
_CANDIDATES = (
    ("hunger", Node.FOOD),
    ("sleep", Node.NEST),
    ("fun", Node.WHEEL),
)

NeedPercentage = namedtuple("NeedPercentage", ["fun", "health", "hunger", "sleep"])


@dataclass
class NeedState:
    """The rat's four drives. Each is an integer in [0, its maximum]."""
    fun: int
    health: int
    hunger: int
    sleep: int

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not 0 <= value <= NEED_MAX[f.name]:
                raise ValueError(f"{f.name}={value} is outside [0, {NEED_MAX[f.name]}]")

    def as_dict(self):
        return {name: getattr(self, name) for name in NEED_MAX}


def random_needs(rng):
    """Draw each need independently from [0, max) using the given random.Random."""
    return NeedState(
        fun=rng.randrange(FUN_MAX),
        health=rng.randrange(HEALTH_MAX),
        hunger=rng.randrange(HUNGER_MAX),
        sleep=rng.randrange(SLEEP_MAX),
    )


def percentages(needs):
    return NeedPercentage(
        fun=(100 * needs.fun) // FUN_MAX,
        health=(100 * needs.health) // HEALTH_MAX,
        hunger=(100 * needs.hunger) // HUNGER_MAX,
        sleep=(100 * needs.sleep) // SLEEP_MAX,
    )


def decay(needs, amount):
    """Lower every need by amount, flooring each at zero."""
    if amount < 0:
        raise ValueError(f"decay amount must be non-negative, got {amount}")
    for name in NEED_MAX:
        setattr(needs, name, max(0, getattr(needs, name) - amount))


def replenish(needs, node):
    """
    Fill the need tied to node back to its maximum.

    Returns the name of the refilled need, or None for locations that
    satisfy nothing (the exit and the two junctions).
    """
    name = NEED_FOR_NODE.get(node)
    if name is not None:
        setattr(needs, name, NEED_MAX[name])
    return name


def arbitrate(needs):
    """
    Pick where the rat goes next.

    Health is the default. Hunger, sleep and fun are checked in that order
    and only replace the pick when strictly lower, so ties favour health,
    then hunger, then sleep. If even the lowest need is above the threshold
    the rat goes to the exit.
    """
    percent = percentages(needs)
    target = Node.MEDICINE
    lowest = percent.health
    for name, node in _CANDIDATES:
        value = getattr(percent, name)
        if value < lowest:
            lowest = value
            target = node
    if lowest > SATISFIED_THRESHOLD:
        return Node.EXIT
    return target


def is_satisfied(needs):
    return arbitrate(needs) is Node.EXIT
