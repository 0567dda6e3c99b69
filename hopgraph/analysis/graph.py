"""
Undirected adjacency graph with degree and distance-2 neighbor queries
"""

import networkx as nx

from hopgraph.common.defaults import GraphConfig as cfg
from hopgraph.common.input_validation import InputValidator


class Graph:
    """
    Undirected graph over non-negative integer node ids, stored as an
    adjacency mapping from node id to the ordered list of its neighbors

    Each inserted edge is recorded twice, once in each endpoint's list.
    Repeated insertions are kept, so a parallel edge or a self-loop counts
    towards degree once per adjacency entry. Queries never add keys, so a
    node is present only after it has been an endpoint of `add_edge`
    """

    def __init__(self, logger=None):
        """
        Args:
            logger (Logger): Optional logger instance for debugging
        """
        self.logger = logger
        self.edges = {}
        self._edge_count = 0

    def add_edge(self, source, target):
        """
        Insert an undirected edge between two nodes

        Either endpoint may be new. A self-loop appends the node to its own
        list twice

        Args:
            source (int): First endpoint
            target (int): Second endpoint

        Raises:
            ValidationError: If node id validation is enabled and an id is invalid
        """
        if cfg.VALIDATE_NODE_IDS:
            # Validate both before mutating so a bad target leaves no half edge
            source = InputValidator.validate_node_id(source)
            target = InputValidator.validate_node_id(target)

        self.edges.setdefault(source, []).append(target)
        self.edges.setdefault(target, []).append(source)
        self._edge_count += 1

    def degree(self, node):
        """
        Number of adjacency entries for a node, counting duplicates

        Returns:
            0 for a node that has never been an edge endpoint
        """
        neighbors = self.edges.get(node)
        return len(neighbors) if neighbors is not None else 0

    def neighbors(self, node):
        """
        Copy of a node's ordered neighbor list (empty for unknown nodes)
        """
        return list(self.edges.get(node, ()))

    def neighbors_at_distance_2(self, node):
        """
        Nodes reachable from `node` in exactly two hops

        Every entry of each direct neighbor's list is collected except
        entries equal to `node`. A direct neighbor can still appear when it
        is reachable through some other two-hop path

        Args:
            node (int): Node to expand from

        Returns:
            Set of node ids, empty for an unknown node
        """
        result = set()
        adjacent_nodes = self.edges.get(node)
        if not adjacent_nodes:
            return result

        for adjacent in adjacent_nodes:
            second_order = self.edges.get(adjacent)
            if second_order:
                result.update(n for n in second_order if n != node)

        if self.logger:
            self.logger.debug(
                f"Node {node}: {len(result)} distance-2 neighbors via {len(adjacent_nodes)} adjacency entries"
            )
        return result

    def nodes(self):
        """
        Set of every node id that has been an endpoint of an inserted edge
        """
        return set(self.edges.keys())

    def number_of_edges(self):
        """
        Number of `add_edge` calls, counting repeated and self-loop insertions
        """
        return self._edge_count

    def to_networkx(self):
        """
        Convert to a networkx MultiGraph

        Every inserted edge becomes its own parallel edge, so `degree` of the
        result matches `degree` here, self-loops included

        Returns:
            networkx.MultiGraph
        """
        G = nx.MultiGraph()
        G.add_nodes_from(self.edges)
        # Each undirected edge sits in both lists; emit it from the endpoint
        # that was inserted first. Key order is used so ids are never compared
        position = {node: index for index, node in enumerate(self.edges)}
        for source, targets in self.edges.items():
            for target in targets:
                if position[source] < position[target]:
                    G.add_edge(source, target)
            # A self-loop sits twice in its own list
            loops = sum(1 for target in targets if target == source)
            for _ in range(loops // 2):
                G.add_edge(source, source)
        return G

    def __contains__(self, node):
        return node in self.edges

    def __len__(self):
        return len(self.edges)

    def __repr__(self):
        return f"{type(self).__name__}(nodes={len(self.edges)}, edges={self._edge_count})"
