from .common import add_graph_arguments, build_graph

class TraverseCommand:
    def __init__(self):
        self.origin = None
        self.vertices = []
        self.edges = []

    @staticmethod
    def create_parser(subparsers):
        parser = subparsers.add_parser(
            "traverse",
            help="Print the breadth-first traversal order from a vertex"
        )
        parser.add_argument(
            "--origin",
            required=True,
            help="Label of the vertex to start from"
        )
        add_graph_arguments(parser)

    def parse_args(self, args):
        self.origin = args.origin
        self.vertices = list(args.vertices)
        self.edges = list(args.edges)

    def run(self):
        graph = build_graph(self.vertices, self.edges)
        traversal = graph.get_breadth_first_traversal(self.origin)
        print(" ".join(str(label) for label in traversal))
