"""
Line oriented shell for poking at a tree by hand:

    $ python -m btreeset.shell --order 2
    [insert [N] | delete [N] | inspect | quit] > insert 5
"""
import argparse
import logging
import sys

from . import settings
from .node import KeyNotFound
from .tree import BTree

logger = logging.getLogger(__name__)

INSERT_COMMANDS = ("insert", "add")
DELETE_COMMANDS = ("delete", "del", "remove")
INSPECT_COMMANDS = ("inspect", "i")
QUIT_COMMANDS = ("quit", "q")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Interactive B-tree shell")
    parser.add_argument("--order", type=int, default=settings.DEFAULT_ORDER)
    parser.add_argument("--verbose", default=False, action="store_true")
    parser.add_argument("--check", default=False, action="store_true")
    return parser.parse_args(argv)


class Shell:
    def __init__(self, tree):
        self.tree = tree

    def execute(self, line):
        """
        Runs a single command. Returns False once the session should end.
        """
        tokens = line.split()
        command = tokens[0] if tokens else ""
        argument = tokens[1] if len(tokens) > 1 else ""

        if command in INSERT_COMMANDS:
            try:
                self.tree.insert(int(argument))
            except ValueError as e:
                print(e, file=sys.stderr)
            print(self.tree.render())
        elif command in DELETE_COMMANDS:
            try:
                self.tree.delete(int(argument))
            except ValueError as e:
                print(e, file=sys.stderr)
            except KeyNotFound as e:
                print(f"{e.args[0]} not found", file=sys.stderr)
            print(self.tree.render())
        elif command in INSPECT_COMMANDS:
            print(self.tree.render())
        elif command in QUIT_COMMANDS:
            return False
        else:
            print(f"Unknown command: {command}")

        return True

    def run(self):
        while True:
            try:
                line = input(settings.SHELL_PROMPT)
            except EOFError:
                print()
                return
            if not self.execute(line):
                return


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    settings.CHECK_INVARIANTS = args.check

    try:
        tree = BTree(order=args.order)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 2

    logger.debug("starting shell with %r", tree)
    Shell(tree).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
