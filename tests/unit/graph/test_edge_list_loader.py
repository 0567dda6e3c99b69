"""
Unit tests for edge list parsing and loading
"""

import pytest

from hopgraph.analysis.edge_list import EdgeListError, build_graph, load_edge_list, parse_edge_line
from hopgraph.common.defaults import ConfigOverride
from hopgraph.common.input_validation import ValidationError


@pytest.mark.unit
@pytest.mark.parametrize(
    "line, expected",
    [
        ("0 1\n", (0, 1)),
        ("  12\t7  ", (12, 7)),
        ("3 4 0.5 extra", (3, 4)),
        ("", None),
        ("   \n", None),
        ("# header comment", None),
        ("  # indented comment", None),
    ],
)
def test_parse_edge_line(line, expected):
    assert parse_edge_line(line) == expected


@pytest.mark.unit
def test_parse_edge_line_single_token():
    with pytest.raises(EdgeListError) as excinfo:
        parse_edge_line("42", line_number=3)

    assert excinfo.value.line_number == 3
    assert str(excinfo.value).startswith("line 3:")


@pytest.mark.unit
def test_parse_edge_line_non_integer():
    with pytest.raises(EdgeListError):
        parse_edge_line("a b")


@pytest.mark.unit
def test_parse_edge_line_custom_delimiter_and_comment(logger):
    with ConfigOverride({"EDGE_DELIMITER": ",", "COMMENT_PREFIX": "%"}, logger=logger):
        assert parse_edge_line("5, 6") == (5, 6)
        assert parse_edge_line("% comment") is None
        with pytest.raises(EdgeListError):
            parse_edge_line("5 6")


@pytest.mark.unit
def test_parse_edge_line_too_long(logger):
    with ConfigOverride({"MAX_LINE_LENGTH": 8}, logger=logger):
        with pytest.raises(EdgeListError):
            parse_edge_line("1 2 # this comment is long")


@pytest.mark.unit
def test_build_graph_from_pairs(logger):
    graph = build_graph([(0, 1), (1, 2), (1, 3)], logger=logger)

    assert graph.nodes() == {0, 1, 2, 3}
    assert graph.number_of_edges() == 3
    assert graph.neighbors_at_distance_2(0) == {2, 3}


@pytest.mark.unit
def test_build_graph_invalid_id():
    with pytest.raises(ValidationError):
        build_graph([(0, 1), (-2, 1)])


@pytest.mark.unit
def test_build_graph_edge_limit(logger):
    with ConfigOverride({"MAX_EDGES": 2}, logger=logger):
        with pytest.raises(EdgeListError):
            build_graph([(0, 1), (1, 2), (2, 3)])


@pytest.mark.unit
def test_load_edge_list(edge_list_file, logger):
    path = edge_list_file("# path graph\n0 1\n\n1 2\n2 3\n")

    graph = load_edge_list(path, logger=logger)

    assert graph.nodes() == {0, 1, 2, 3}
    assert [graph.degree(n) for n in range(4)] == [1, 2, 2, 1]
    assert graph.neighbors(1) == [0, 2]


@pytest.mark.unit
def test_load_edge_list_reports_bad_line(edge_list_file):
    path = edge_list_file("0 1\n1 x\n")

    with pytest.raises(EdgeListError) as excinfo:
        load_edge_list(path)

    assert excinfo.value.line_number == 2


@pytest.mark.unit
def test_load_edge_list_wraps_validation_error(edge_list_file, logger):
    path = edge_list_file("0 1\n4 2\n")

    with ConfigOverride({"MAX_NODE_ID": 3}, logger=logger):
        with pytest.raises(EdgeListError) as excinfo:
            load_edge_list(path)

    assert excinfo.value.line_number == 2
    assert isinstance(excinfo.value.__cause__, ValidationError)


@pytest.mark.unit
def test_load_edge_list_edge_limit(edge_list_file, logger):
    path = edge_list_file("0 1\n1 2\n2 3\n")

    with ConfigOverride({"MAX_EDGES": 2}, logger=logger):
        with pytest.raises(EdgeListError) as excinfo:
            load_edge_list(path)

    assert excinfo.value.line_number == 3


@pytest.mark.unit
def test_load_edge_list_missing_file(tmp_path):
    with pytest.raises(EdgeListError):
        load_edge_list(tmp_path / "missing.txt")


@pytest.mark.unit
def test_load_edge_list_empty_file(edge_list_file):
    graph = load_edge_list(edge_list_file(""))

    assert graph.nodes() == set()
    assert graph.number_of_edges() == 0


@pytest.mark.unit
@pytest.mark.parametrize("line", ["1_000 2", "+3 4", "-1 2", "0 ٣", "1 0x1f"])
def test_parse_edge_line_rejects_non_digit_tokens(line):
    with pytest.raises(EdgeListError):
        parse_edge_line(line, line_number=1)


@pytest.mark.unit
def test_parse_edge_line_accepts_large_ids():
    assert parse_edge_line(f"{2**64 - 1} {2**63}") == (2**64 - 1, 2**63)
