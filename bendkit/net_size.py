"""Limits on the size of HVM definitions."""

from __future__ import annotations

from .hvm_ast import Book, Net, net_trees, tree_children

MAX_NET_SIZE = 64


class NetSizeError(Exception):
    """Raised when definitions exceed the maximum net size."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        text = "\n".join(f"In definition '{name}':\n  {msg}" for name, msg in errors.items())
        super().__init__(text)


def count_nodes(net: Net) -> int:
    """Count the nodes with children in a net."""
    count = 0
    visit = list(net_trees(net))
    while visit:
        children = tree_children(visit.pop())
        if children:
            count += 1
        visit.extend(children)
    return count


def check_net_sizes(book: Book) -> None:
    """Raise NetSizeError if any definition is larger than MAX_NET_SIZE."""
    errors: dict[str, str] = {}
    for name, net in book.defs.items():
        nodes = count_nodes(net)
        if nodes > MAX_NET_SIZE:
            errors[name] = (
                f"Definition is too large for hvm (size={nodes}, max size={MAX_NET_SIZE}). "
                "Please break it into smaller pieces."
            )
    if errors:
        raise NetSizeError(errors)