# simulation_wrapper.py

import argparse # Import argparse for command-line arguments
import datetime # Import datetime for timestamps
import json
import logging
import os     # Import os for path manipulation
import random
import sys    # Import sys for error output

import networkx as nx # type: ignore

from graph_utils import DEFAULT_GRAPH_FILE, GraphError, load_graph
from needs import random_needs
from simulation import run_simulation

logger = logging.getLogger(__name__)

DEFAULT_SEED = 42


def build_result(G, records, seed):
    """JSON-ready description of the maze and every cycle of one run."""
    pos = nx.spring_layout(G, scale=300, seed=seed)
    nodes_data = [
        {"data": {"id": n.label}, "position": {"x": float(pos[n][0]), "y": float(pos[n][1])}, "classes": "graph-node"}
        for n in G.nodes()
    ]
    edges_data = [
        {"data": {"id": f"{u.label}-{v.label}", "source": u.label, "target": v.label, "weight": w}}
        for u, v, w in G.edges(data="weight")
    ]
    return {
        "seed": seed,
        "nodes": nodes_data,
        "edges": edges_data,
        "cycles": [r.to_json() for r in records],
        "total_distance": sum(r.distance for r in records),
    }


def run(graph_path=DEFAULT_GRAPH_FILE, seed=DEFAULT_SEED):
    G = load_graph(graph_path)
    needs = random_needs(random.Random(seed))
    logger.info("Starting needs: %s", needs.as_dict())
    records = run_simulation(G, needs)
    return build_result(G, records, seed)


def save_result(result, output_dir):
    """Write result to a timestamped JSON file in output_dir and return its path."""
    os.makedirs(output_dir, exist_ok=True)
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    filepath = os.path.join(output_dir, f"simulation_data_{timestamp}.json")
    with open(filepath, 'w') as f:
        json.dump(result, f, indent=2)
    return filepath


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Run one rat through the maze and save the trace to a timestamped JSON file."
    )
    parser.add_argument(
        "--output-dir", "-o",
        help="Directory to save the simulation results as a timestamped JSON file. If not provided, prints JSON to stdout.",
        metavar="DIRECTORY"
    )
    parser.add_argument("--graph", default=DEFAULT_GRAPH_FILE, metavar="FILE", help="Graph definition file")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Seed for the starting needs")
    args = parser.parse_args(argv)

    logging.basicConfig(stream=sys.stderr, level=logging.INFO, format="[%(name)s] %(levelname)s: %(message)s")

    try:
        result = run(args.graph, args.seed)
    except GraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Simulation finished after {len(result['cycles'])} cycles.", file=sys.stderr)

    if args.output_dir:
        try:
            filepath = save_result(result, args.output_dir)
        except OSError as e:
            print(f"Error saving simulation results to {args.output_dir}: {e}", file=sys.stderr)
            return 1
        print(f"Simulation results saved to {filepath}", file=sys.stderr) # Print confirmation to stderr
    else:
        print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
