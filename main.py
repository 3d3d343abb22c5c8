# main.py
import argparse
import logging
import random
import sys

from graph_utils import DEFAULT_GRAPH_FILE, GraphLoadError, MalformedGraphRecord, load_graph
from needs import random_needs
from nodes import Node
from route import UnreachableTarget
from simulation import run_simulation

DEFAULT_NAME = "Algernon"

DESTINATION_TEXT = {
    Node.EXIT: "{name} is feeling satisfied and is going to the exit for release.",
    Node.FOOD: "{name} is hungry and is going to the food bowl.",
    Node.MEDICINE: "{name} is feeling sick and is going to the medicine dispenser.",
    Node.NEST: "{name} is sleepy and is going to the nest for a nap.",
    Node.WHEEL: "{name} is bored and is going to the exercise wheel.",
}

ARRIVAL_TEXT = {
    Node.FOOD: "{name} has reached the food bowl.\n"
               "{name} finds a tasty kibble to chew on. Mmmm, lab diets.",
    Node.MEDICINE: "{name} has reached the medical pod.\n"
                   "YUCK! That medicine is disgusting, but {name} feels much better now.",
    Node.NEST: "{name} has reached the rat's nest.\n"
               "Off to dreamland!\n"
               "{name} is bright-eyed and ready to go after that refreshing nap!",
    Node.WHEEL: "{name} has reached the exercise wheel.\n"
                "The wheel goes squeak, squeak, squeak, squeak, squeak, squeak.",
}


def setup_logging(verbose=False):
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(name)s] %(levelname)s: %(message)s",
    )


def pause(enabled=True):
    if enabled:
        input("Press enter to continue.\n")


def describe_drives(name, percent):
    return (f"{name} is currently feeling: \n"
            f"\t{percent['fun']}% entertained\n"
            f"\t{percent['health']}% healthy\n"
            f"\t{percent['hunger']}% nourished\n"
            f"\t{percent['sleep']}% rested")


def narrate(record, name, pause_enabled=True):
    """Print one cycle the way the scientist sees it."""
    print(describe_drives(name, record.percent))
    pause(pause_enabled)
    print(DESTINATION_TEXT[record.target].format(name=name))
    print(f"\tTraveling to node {record.target.label}.")
    print(f"\tTraveled a total of {record.distance} distance units.")
    if record.target in ARRIVAL_TEXT:
        print(ARRIVAL_TEXT[record.target].format(name=name))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Flowers for Algorithm: a rat finds its way through a maze to satisfy its needs."
    )
    parser.add_argument("--name", help="The rat's name. Prompted for when omitted.")
    parser.add_argument("--graph", default=DEFAULT_GRAPH_FILE, metavar="FILE",
                        help="Graph definition file (default: graphWeights)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the rat's starting needs. Random when omitted.")
    parser.add_argument("--no-pause", action="store_true", help="Do not wait for enter between steps")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log route search steps to stderr")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.verbose)
    pause_enabled = not args.no_pause

    try:
        G = load_graph(args.graph)
    except GraphLoadError:
        print("Failed to load graph. Program unable to continue.\n"
              f"Check the location of {args.graph} and try again.")
        pause(pause_enabled)
        return 1
    except MalformedGraphRecord as e:
        print(f"Graph file {args.graph} is malformed. {e}")
        return 2

    print("~~ Flowers for Algorithm ~~\n")
    print("The scientist places the rat in the vestibule of a maze.\n"
          "The rat is a thinly veiled metaphor for the tenuous nature of human existence.")
    name = args.name
    if not name:
        # first word only
        name = (input("What is the rat's name? ").split() or [DEFAULT_NAME])[0]

    needs = random_needs(random.Random(args.seed))
    try:
        run_simulation(G, needs, on_cycle=lambda r: narrate(r, name, pause_enabled))
    except UnreachableTarget as e:
        print(f"{name} is lost in the maze. {e}")
        return 3

    print(f"The scientist removes {name} from the maze and jots in her notebook:\n"
          "\t'Science accomplished.'\nTHE END")
    pause(pause_enabled)
    return 0


if __name__ == "__main__":
    sys.exit(main())
