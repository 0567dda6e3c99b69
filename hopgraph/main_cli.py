"""
CLI entry point

Loads an undirected graph from an edge list file and reports, for each queried
node, its degree and its distance-2 neighbors as JSON
"""

import argparse
import json
import sys

from hopgraph.analysis.edge_list import EdgeListError, load_edge_list
from hopgraph.common.defaults import GraphConfig as cfg
from hopgraph.common.defaults import apply_config_overrides
from hopgraph.common.input_validation import InputValidator, ValidationError
from hopgraph.common.utils import Logger


def build_report(graph, query_nodes=None):
    """
    Build a JSON-serializable report of node-local statistics

    Args:
        graph (Graph): Graph to query
        query_nodes (list): Node ids to report on, or None for every node

    Returns:
        Dictionary with the node list, graph size and a per-node query section
    """
    all_nodes = sorted(graph.nodes())
    if query_nodes is None:
        query_nodes = all_nodes

    queries = {}
    for node in query_nodes:
        queries[str(node)] = {
            "degree": graph.degree(node),
            "neighbors_at_distance_2": sorted(graph.neighbors_at_distance_2(node)),
        }

    return {
        "nodes": all_nodes,
        "number_of_nodes": len(all_nodes),
        "number_of_edges": graph.number_of_edges(),
        "queries": queries,
    }


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="hopgraph", description="Local structure queries over an edge list")
    parser.add_argument("edge_list", help="Path to an edge list file (two integer node ids per line)")
    parser.add_argument(
        "-n",
        "--node",
        dest="nodes",
        action="append",
        help="Node id to query (repeatable). Defaults to every node in the graph",
    )
    parser.add_argument("-o", "--output", help="Write the JSON report to this file instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose debug logging")
    parser.add_argument("-c", "--config", help="JSON string with configuration overrides")
    return parser.parse_args(argv)


def main(argv=None):
    """
    Main entry point for the hopgraph CLI

    Returns:
        Process exit status: 0 on success, 1 on invalid input or unexpected errors
    """
    args = parse_args(argv)
    logger = Logger(verbose=args.verbose)

    if args.config:
        try:
            config_overrides = json.loads(args.config)
        except json.JSONDecodeError as e:
            logger.error(f"Error parsing configuration overrides: {e}")
            logger.error(
                "Configuration must be a valid JSON object, e.g., '{\"MAX_EDGES\": 1000}' . "
                "See hopgraph/common/defaults.py for overrideable parameter names"
            )
            return 1
        if not isinstance(config_overrides, dict):
            logger.error("Configuration overrides must be a JSON object")
            return 1
        logger.info(f"Applying {len(config_overrides)} configuration overrides")
        apply_config_overrides(config_overrides, logger=logger)

    try:
        query_nodes = None
        if args.nodes:
            query_nodes = [InputValidator.validate_node_id(_parse_node(n)) for n in args.nodes]

        graph = load_edge_list(args.edge_list, logger=logger)
        report = build_report(graph, query_nodes)
        payload = json.dumps(report, indent=cfg.JSON_INDENT, sort_keys=cfg.SERIALIZE_SORT_KEYS)

        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(payload + "\n")
            logger.info(f"Report saved to: {args.output}")
        else:
            print(payload)
    except (EdgeListError, ValidationError) as e:
        logger.error(str(e))
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exception=e)
        return 1
    return 0


def _parse_node(value):
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"Node id must be an integer: {value!r}")


if __name__ == "__main__":
    sys.exit(main())
