from ..constants import Constants
from .common import add_graph_arguments, build_graph

class ShortestPathCommand:
    def __init__(self):
        self.origin = None
        self.destination = None
        self.vertices = []
        self.edges = []

    @staticmethod
    def create_parser(subparsers):
        parser = subparsers.add_parser(
            "path",
            help="Print the fewest-hops path between two vertices"
        )
        parser.add_argument(
            "--origin",
            required=True,
            help="Label of the first vertex on the path"
        )
        parser.add_argument(
            "--destination",
            required=True,
            help="Label of the last vertex on the path"
        )
        add_graph_arguments(parser)

    def parse_args(self, args):
        self.origin = args.origin
        self.destination = args.destination
        self.vertices = list(args.vertices)
        self.edges = list(args.edges)

    def run(self):
        graph = build_graph(self.vertices, self.edges)

        path = []
        hops = graph.get_shortest_path(self.origin, self.destination, path)
        if hops == Constants.INFINITY:
            print("unreachable")
            return

        if not path:
            path.append(self.origin)

        labels = []
        while path:
            labels.append(str(path.pop()))

        print(hops)
        print(" ".join(labels))
