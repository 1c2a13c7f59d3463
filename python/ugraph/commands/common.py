import argparse

from ..constants import Constants
from ..graph import Graph

def parse_edge(value: str) -> tuple:
    """
    Parse an edge given on the command line.

    Examples: A-B, A-B:2.5
    """
    value = value.strip()
    spec, has_weight, weight = value.partition(Constants.WEIGHT_SEPARATOR)
    begin, has_end, end = spec.partition(Constants.EDGE_SEPARATOR)

    if not has_end or not begin or not end:
        raise argparse.ArgumentTypeError(
            f"invalid edge {value!r}, expected BEGIN-END or BEGIN-END:WEIGHT")

    if not has_weight:
        return (begin, end, Constants.DEFAULT_WEIGHT)

    try:
        return (begin, end, float(weight))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid weight {weight!r} in edge {value!r}") from None

def add_graph_arguments(parser):
    parser.add_argument(
        "edges",
        nargs="*",
        type=parse_edge,
        metavar="EDGE",
        help="Edge as BEGIN-END or BEGIN-END:WEIGHT"
    )
    parser.add_argument(
        "--vertex",
        action="append",
        dest="vertices",
        default=[],
        metavar="LABEL",
        help="Declare an isolated vertex (repeatable)"
    )

def build_graph(vertices, edges) -> Graph:
    return Graph(vertices=vertices, edges=edges)
