# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree node class."""

from __future__ import annotations

from typing import Iterator, TYPE_CHECKING

if TYPE_CHECKING:
    from .label import Label


class BracketNode:
    """A node of a parsed bracket notation tree.

    Each node has:
    - label: The Label it exclusively owns
    - children: Ordered list of child nodes, in document order

    There is no parent reference; a node is reached only through its
    ancestors, starting from the root returned by the parser.

    Example:
        >>> from genro_brackettree import TextLabel
        >>> root = BracketNode(TextLabel('koren'))
        >>> root.is_leaf
        True
        >>> child = root.add_child(BracketNode(TextLabel('levy')))
        >>> len(root), root[0] is child
        (1, True)
    """

    __slots__ = ('label', 'children')

    def __init__(
        self,
        label: Label,
        children: list[BracketNode] | None = None,
    ) -> None:
        """Initialize a BracketNode.

        Args:
            label: The node's label.
            children: Optional initial children. Defaults to none (a leaf).
        """
        self.label = label
        self.children: list[BracketNode] = children if children is not None else []

    def __repr__(self) -> str:
        return f"BracketNode({self.label!r}, children={len(self.children)})"

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[BracketNode]:
        return iter(self.children)

    def __getitem__(self, index: int) -> BracketNode:
        """Return the child at position index (negative counts from the end)."""
        return self.children[index]

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return not self.children

    def iter_children(self) -> Iterator[BracketNode]:
        """Yield children in document order."""
        yield from self.children

    def add_child(self, node: BracketNode) -> BracketNode:
        """Append node as the last child and return it."""
        self.children.append(node)
        return node
