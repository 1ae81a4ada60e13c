"""Walks over the account forest for renderers.

Expand state belongs to the caller: it is passed in as a set of account
codes and toggled with pure helpers, never stored on the nodes.
"""

from collections.abc import Iterable, Iterator, Sequence

from ledger_tree.domain.models import AccountNode, VisibleRow


def iter_visible_rows(
    forest: Sequence[AccountNode],
    expanded_codes: Iterable[str] = (),
) -> Iterator[VisibleRow]:
    """Yield the rows a tree table shows for the given expand state.

    A node's children are emitted right after it, and only when its code
    is in ``expanded_codes``.

    Args:
        forest: Root nodes in display order.
        expanded_codes: Codes of the nodes the user expanded.

    Yields:
        VisibleRow: Nodes in display order with their expand state.
    """
    expanded = frozenset(expanded_codes)
    stack = list(reversed(forest))
    while stack:
        node = stack.pop()
        is_expanded = node.account_code in expanded
        yield VisibleRow(
            node=node,
            level=node.level,
            has_children=node.has_children,
            is_expanded=is_expanded,
        )
        if is_expanded:
            stack.extend(reversed(node.children))


def iter_nodes(forest: Sequence[AccountNode]) -> Iterator[AccountNode]:
    """Yield every node of the forest, depth first."""
    stack = list(reversed(forest))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def toggle_expanded(
    expanded_codes: Iterable[str],
    account_code: str,
) -> frozenset[str]:
    """Return the expand state with one account code flipped."""
    expanded = frozenset(expanded_codes)
    if account_code in expanded:
        return expanded - {account_code}
    return expanded | {account_code}


def expand_all(forest: Sequence[AccountNode]) -> frozenset[str]:
    """Return the codes of every node that has children."""
    return frozenset(
        node.account_code for node in iter_nodes(forest) if node.has_children
    )


__all__ = ["iter_visible_rows", "iter_nodes", "toggle_expanded", "expand_all"]
