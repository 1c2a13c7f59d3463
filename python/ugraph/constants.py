import os
import sys

class Constants:
    # Weight given to edges added without an explicit weight
    DEFAULT_WEIGHT = 0.0

    # Cost of every vertex after the per-query reset
    INITIAL_COST = 0.0

    # Hop count returned when the destination cannot be reached
    INFINITY = sys.maxsize

    LOG_LEVEL = os.environ.get("UGRAPH_LOG_LEVEL", "WARNING")

    # Command line edge syntax: A-B or A-B:2.5
    EDGE_SEPARATOR = "-"
    WEIGHT_SEPARATOR = ":"
