import argparse
import logging

from .constants import Constants
from .commands import TraverseCommand, ShortestPathCommand
from .graph import VertexNotFoundError

class Script():

    commands = {
        "traverse": TraverseCommand,
        "path": ShortestPathCommand,
    }

    def create_parser(self):
        parser = argparse.ArgumentParser(description="Undirected graph traversal")
        parser.add_argument(
            "-v", "--verbose",
            action="store_true",
            help="Log graph operations at DEBUG level"
        )
        subparsers = parser.add_subparsers(dest="command", required=True)

        TraverseCommand.create_parser(subparsers)
        ShortestPathCommand.create_parser(subparsers)

        return parser

    def run(self, argv=None):
        parser = self.create_parser()
        args = parser.parse_args(argv)

        if args.verbose:
            level = logging.DEBUG
        else:
            # getLevelName maps known names to their number
            level = logging.getLevelName(Constants.LOG_LEVEL.upper())
            if not isinstance(level, int):
                parser.error(f"invalid UGRAPH_LOG_LEVEL {Constants.LOG_LEVEL!r}")
        logging.basicConfig(level=level)

        command = self.commands[args.command]()
        command.parse_args(args)

        try:
            command.run()
        except VertexNotFoundError as e:
            parser.error(str(e))

def main(argv=None):
    script = Script()
    script.run(argv)

if __name__ == "__main__":
    main()
