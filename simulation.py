# simulation.py

import logging
from collections import namedtuple
from dataclasses import dataclass
from typing import Optional

from graph_utils import copy_graph
from needs import NEED_FOR_NODE, arbitrate, decay, percentages, replenish
from nodes import Node
from route import find_route

logger = logging.getLogger(__name__)

CycleResult = namedtuple("CycleResult", ["location", "distance", "arrived"])


class SimulationDidNotTerminate(RuntimeError):
    """The rat was still in the maze after the allowed number of cycles."""


@dataclass
class CycleRecord:
    cycle: int
    start: Node
    percent: dict      # percentages before the cycle
    target: Node
    distance: int
    refilled: Optional[str]  # need refilled on arrival, None at the exit
    needs: dict        # raw need values after the cycle

    def to_json(self):
        return {
            "cycle": self.cycle,
            "start": self.start.label,
            "percent": self.percent,
            "target": self.target.label,
            "distance": self.distance,
            "refilled": self.refilled,
            "needs": self.needs,
        }


def run_cycle(G, location, needs):
    """
    One trip through the maze: choose a destination, walk the shortest route
    to it, decay the needs by the distance and refill the need found there.
    needs is updated in place.
    """
    target = arbitrate(needs)
    working = copy_graph(G)
    distance, arrived = find_route(working, location, target)
    decay(needs, distance)
    replenish(needs, arrived)
    logger.info("Traveled %s -> %s, %d distance units", location.label, arrived.label, distance)
    return CycleResult(arrived, distance, arrived.label)


def run_simulation(G, needs, start=Node.EXIT, on_cycle=None, max_cycles=None):
    """
    Run cycles until the rat is back at the exit.

    The first cycle always runs, even from the exit. on_cycle, if given, is
    called with each CycleRecord. Returns the list of records.
    """
    location = start
    records = []
    while True:
        if max_cycles is not None and len(records) >= max_cycles:
            raise SimulationDidNotTerminate(
                f"Rat still at {location.label} after {max_cycles} cycles"
            )
        before = percentages(needs)._asdict()
        result = run_cycle(G, location, needs)
        record = CycleRecord(
            cycle=len(records) + 1,
            start=location,
            percent=dict(before),
            target=result.location,
            distance=result.distance,
            refilled=NEED_FOR_NODE.get(result.location),
            needs=needs.as_dict(),
        )
        records.append(record)
        if on_cycle is not None:
            on_cycle(record)
        location = result.location
        if location is Node.EXIT:
            break

    logger.info("Rat reached the exit after %d cycles", len(records))
    return records
