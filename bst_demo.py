"""Command line front-end for the binary search tree toolkit.

Running the module starts a menu-driven session over a tree pre-populated with
sample data.  Every engine operation is reachable from the menu: insertion,
search, deletion, the three traversals, tree statistics, min/max lookup,
clearing the tree and an automated demonstration.  ``--demo`` runs the
demonstration non-interactively, which is what the tests and CI use.

The heavy lifting happens in ``bst_toolkit``; this script only parses input,
guards the calls that would raise on an empty tree and prints results.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, Sequence

from bst_toolkit import (
    BinarySearchTree,
    EmptyTreeError,
    describe_tree,
    format_traversals,
    render_tree,
)

logger = logging.getLogger(__name__)

SAMPLE_VALUES = (50, 30, 70, 20, 40, 60, 80)
DEMO_VALUES = (25, 15, 35, 10, 20, 30, 40, 5, 12, 18, 22)
DEMO_SEARCHES = (20, 50, 5, 100)
DEMO_DELETIONS = (5, 15, 25)

RULE = "=" * 50

MENU = (
    "1. Insert a value",
    "2. Search for a value",
    "3. Delete a value",
    "4. Display traversals",
    "5. Show tree information",
    "6. Find min/max values",
    "7. Clear the tree",
    "8. Run automated demo",
    "9. Exit",
)
EXIT_CHOICE = "9"


class BSTSession:
    """Interactive session holding the current tree.

    ``input_func`` and ``output`` default to :func:`input` and :func:`print`
    and can be swapped for scripted callables in tests.
    """

    def __init__(
        self,
        tree: Optional[BinarySearchTree] = None,
        *,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        self.tree = tree if tree is not None else BinarySearchTree()
        self._input = input_func
        self._output = output
        self._actions: Dict[str, Callable[[], None]] = {
            "1": self.insert_value,
            "2": self.search_value,
            "3": self.delete_value,
            "4": self.show_traversals,
            "5": self.show_tree_info,
            "6": self.show_min_max,
            "7": self.clear_tree,
            "8": self.run_demo,
        }

    # ------------------------------------------------------------------
    # Menu loop
    # ------------------------------------------------------------------
    def run(self) -> None:
        """Serve menu choices until the user exits or input is exhausted."""

        while True:
            self._emit_lines([RULE, "BINARY SEARCH TREE OPERATIONS MENU", RULE, *MENU, RULE])
            try:
                choice = self._input("Enter your choice (1-9): ").strip()
            except EOFError:
                logger.debug("Input exhausted, leaving menu loop")
                return
            if choice == EXIT_CHOICE:
                self._output("Thank you for using the BST demo. Goodbye!")
                return
            action = self._actions.get(choice)
            if action is None:
                self._output("Invalid choice. Please try again.")
                continue
            try:
                action()
            except EOFError:
                logger.debug("Input exhausted during action %s", choice)
                return

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def insert_value(self) -> None:
        value = self._read_int("Enter value to insert: ")
        if value is None:
            return
        existed = self.tree.search(value)
        self.tree.insert(value)
        if existed:
            self._output(f"Value {value} already exists (duplicates ignored)")
        else:
            self._output(f"Successfully inserted {value}")
            self._output(f"Updated tree size: {self.tree.get_size()}")

    def search_value(self) -> None:
        value = self._read_int("Enter value to search: ")
        if value is None:
            return
        if self.tree.search(value):
            self._output(f"Value {value} found in the tree!")
        else:
            self._output(f"Value {value} not found in the tree.")

    def delete_value(self) -> None:
        if self.tree.is_empty():
            self._output("Cannot delete from empty tree!")
            return
        value = self._read_int("Enter value to delete: ")
        if value is None:
            return
        existed = self.tree.search(value)
        self.tree.delete(value)
        if existed:
            self._output(f"Successfully deleted {value}")
            self._output(f"Updated tree size: {self.tree.get_size()}")
        else:
            self._output(f"Value {value} was not in the tree.")

    def show_traversals(self) -> None:
        if self.tree.is_empty():
            self._output("Tree is empty - no traversals to display!")
            return
        self._emit_lines(["TREE TRAVERSALS:", "-" * 40, *format_traversals(self.tree)])

    def show_tree_info(self) -> None:
        self._emit_lines(["TREE INFORMATION:", "-" * 30, *describe_tree(self.tree)])
        if not self.tree.is_empty():
            self._output(render_tree(self.tree))

    def show_min_max(self) -> None:
        try:
            minimum, maximum = self.tree.find_min(), self.tree.find_max()
        except EmptyTreeError:
            self._output("Tree is empty - no min/max values!")
            return
        self._emit_lines(
            [
                "MIN/MAX VALUES:",
                "-" * 25,
                f"Minimum value: {minimum}",
                f"Maximum value: {maximum}",
            ]
        )

    def clear_tree(self) -> None:
        if self.tree.is_empty():
            self._output("Tree is already empty!")
            return
        answer = self._input("Are you sure you want to clear the tree? (y/N): ")
        if answer.strip().lower() in {"y", "yes"}:
            self.tree = BinarySearchTree()
            logger.info("Tree cleared")
            self._output("Tree cleared successfully!")
        else:
            self._output("Clear operation cancelled.")

    def run_demo(self) -> None:
        """Replace the tree and walk through every operation on fixed data."""

        self._emit_lines(["AUTOMATED BST DEMONSTRATION", RULE])
        self.tree = BinarySearchTree()

        self._output("1. Insertion")
        for value in DEMO_VALUES:
            self.tree.insert(value)
        self._output("Inserting values: " + " ".join(str(value) for value in DEMO_VALUES))
        self._output("All values inserted!")

        self._output("2. Tree structure")
        self.show_tree_info()

        self._output("3. Traversals")
        self.show_traversals()

        self._output("4. Search")
        for value in DEMO_SEARCHES:
            status = "Found" if self.tree.search(value) else "Not found"
            self._output(f"Searching for {value}: {status}")

        self._output("5. Deletion")
        for value in DEMO_DELETIONS:
            self._output(f"Deleting {value}...")
            self.tree.delete(value)
            self._output(
                "Tree after deletion: " + " ".join(str(item) for item in self.tree.inorder())
            )

        self._output(f"Demo completed! Final tree size: {self.tree.get_size()}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _read_int(self, prompt: str) -> Optional[int]:
        raw = self._input(prompt).strip()
        try:
            return int(raw, 10)
        except ValueError:
            logger.debug("Rejected non-integer input %r", raw)
            self._output("Invalid input. Please enter a valid integer.")
            return None

    def _emit_lines(self, lines: Sequence[str]) -> None:
        for line in lines:
            self._output(line)


def _int_list(value: str) -> List[int]:
    try:
        return [int(item, 10) for item in value.split(",") if item.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Expected a comma separated list of integers, got {value!r}"
        ) from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Interactive demonstration of an integer binary search tree.",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Run the automated demonstration and exit instead of showing the menu.",
    )
    parser.add_argument(
        "--values",
        type=_int_list,
        default=None,
        help="Comma separated integers used to seed the tree instead of the sample data.",
    )
    parser.add_argument(
        "--no-sample",
        action="store_true",
        help="Start with an empty tree.",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Print a level-order picture of the seeded tree before starting.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )
    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    input_func: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> int:
    """CLI entry point returning the process exit status."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.no_sample:
        seed: Sequence[int] = ()
    elif args.values is not None:
        seed = args.values
    else:
        seed = SAMPLE_VALUES

    try:
        session = BSTSession(BinarySearchTree(seed), input_func=input_func, output=output)
        logger.info("Seeded tree with %d values", session.tree.get_size())
        if args.render:
            output(render_tree(session.tree))
        if args.demo:
            session.run_demo()
        else:
            output("Binary Search Tree Interactive Demo")
            session.show_tree_info()
            session.run()
    except KeyboardInterrupt:  # pragma: no cover - interactive guard
        logger.warning("Interrupted by user")
        return 130
    except Exception:
        logger.exception("Unexpected error in BST session")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
