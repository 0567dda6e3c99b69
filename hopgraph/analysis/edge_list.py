"""
Edge list ingestion

An edge list is a text file with one edge per line: two integer node ids
separated by whitespace (or GraphConfig.EDGE_DELIMITER). Blank lines and
lines starting with GraphConfig.COMMENT_PREFIX are skipped, and tokens after
the first two are ignored
"""

from hopgraph.analysis.graph import Graph
from hopgraph.common.defaults import GraphConfig as cfg
from hopgraph.common.defaults import ResourceLimits
from hopgraph.common.input_validation import ValidationError


class EdgeListError(Exception):
    """
    Raised when an edge list cannot be read or contains a malformed line
    """

    def __init__(self, message, line_number=None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


def parse_edge_line(line, line_number=None):
    """
    Parse a single edge list line

    Args:
        line (str): Raw line, with or without trailing newline
        line_number (int): Optional 1-based line number for error messages

    Returns:
        (source, target) tuple of ints, or None for blank and comment lines

    Raises:
        EdgeListError: If the line is too long, has fewer than two tokens, or a token is not a non-negative integer
    """
    if len(line) > ResourceLimits.MAX_LINE_LENGTH:
        raise EdgeListError(f"Line too long: {len(line)} > {ResourceLimits.MAX_LINE_LENGTH}", line_number)

    stripped = line.strip()
    if not stripped or (cfg.COMMENT_PREFIX and stripped.startswith(cfg.COMMENT_PREFIX)):
        return None

    tokens = stripped.split(cfg.EDGE_DELIMITER) if cfg.EDGE_DELIMITER else stripped.split()
    tokens = [t.strip() for t in tokens if t.strip()]
    if len(tokens) < 2:
        raise EdgeListError(f"Expected two node ids, got {stripped!r}", line_number)

    # Plain ASCII digits only; int() would also take signs, underscores and other scripts
    source, target = tokens[0], tokens[1]
    if not (_is_node_token(source) and _is_node_token(target)):
        raise EdgeListError(f"Node ids must be non-negative integers, got {source!r} and {target!r}", line_number)
    return int(source), int(target)


def _is_node_token(token):
    return token.isascii() and token.isdigit()


def build_graph(edges, logger=None):
    """
    Build a graph from an iterable of (source, target) pairs

    Args:
        edges (iterable): Pairs of node ids, inserted in order
        logger (Logger): Optional logger passed to the graph

    Returns:
        Graph

    Raises:
        ValidationError: If a node id is invalid
        EdgeListError: If the number of edges exceeds ResourceLimits.MAX_EDGES
    """
    graph = Graph(logger=logger)
    for source, target in edges:
        if graph.number_of_edges() >= ResourceLimits.MAX_EDGES:
            raise EdgeListError(f"Too many edges: limit is {ResourceLimits.MAX_EDGES}")
        graph.add_edge(source, target)
    return graph


def load_edge_list(path, logger=None, encoding="utf-8"):
    """
    Load an edge list file into a new graph

    Args:
        path (str or pathlib.Path): Edge list file
        logger (Logger): Optional logger for progress reporting
        encoding (str): File encoding (default: 'utf-8')

    Returns:
        Graph

    Raises:
        EdgeListError: If the file cannot be read, a line is malformed, a node id
            is invalid, or the edge limit is exceeded
    """
    if logger:
        logger.debug(f"Reading edge list from {path}")

    graph = Graph(logger=logger)
    skipped = 0
    try:
        with open(path, "r", encoding=encoding) as f:
            for line_number, line in enumerate(f, start=1):
                edge = parse_edge_line(line, line_number)
                if edge is None:
                    skipped += 1
                    continue
                if graph.number_of_edges() >= ResourceLimits.MAX_EDGES:
                    raise EdgeListError(f"Too many edges: limit is {ResourceLimits.MAX_EDGES}", line_number)
                try:
                    graph.add_edge(*edge)
                except ValidationError as e:
                    raise EdgeListError(str(e), line_number) from e
    except OSError as e:
        raise EdgeListError(f"Could not read edge list {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise EdgeListError(f"Edge list {path} is not valid {encoding}: {e}") from e

    if logger:
        if skipped:
            logger.debug(f"Skipped {skipped} blank or comment lines")
        logger.info(
            f"... Graph built with {len(graph)} nodes and {graph.number_of_edges()} edges from {path}"
        )
    return graph
