# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Parser for bracket notation trees.

Bracket notation writes a node as its label between an open and a close
token, with its children nested before the close token::

    {root{child1}{child2{grandchild}}}

A token directly preceded by the escape byte is literal text, so
``\\{`` never opens a node. Text outside the root, and escape bytes
themselves, are kept verbatim in whatever label range they fall into.

Parsing runs in two steps:

1. ``scan_tokens`` finds the offsets of every unescaped structural byte.
2. ``BracketNotationParser.parse`` walks those offsets once with a stack
   of open nodes, slicing each label from the bytes between a token and
   the next one.

Example:
    >>> from genro_brackettree import parse_bracket
    >>> root = parse_bracket('{koren{levy}{pravy}}')
    >>> str(root.label), [str(c.label) for c in root]
    ('koren', ['levy', 'pravy'])
"""

from __future__ import annotations

import logging
import re
from typing import Union

from .config import DEFAULT_CONFIG, ParserConfig
from .exceptions import (
    InvalidEncodingError,
    StructuralError,
    UnbalancedClosingTokenError,
    UnterminatedLabelError,
)
from .node import BracketNode

logger = logging.getLogger(__name__)

BracketSource = Union[str, bytes, bytearray, memoryview]


def _token_pattern(config: ParserConfig) -> re.Pattern[bytes]:
    return re.compile(b'[' + re.escape(config.start) + re.escape(config.end) + b']')


def _to_bytes(source: BracketSource) -> bytes:
    if isinstance(source, str):
        try:
            return source.encode('utf-8')
        except UnicodeEncodeError as e:
            raise InvalidEncodingError(
                f"Input text cannot be encoded as UTF-8: {e.reason}", e.start
            ) from e
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    raise TypeError(
        f"Expected str or bytes-like input, got {type(source).__name__}"
    )


def scan_tokens(data: bytes, config: ParserConfig = DEFAULT_CONFIG) -> list[int]:
    """Return offsets of the unescaped start/end bytes in data, in order.

    A token is escaped when the byte right before it is the escape byte.

    Example:
        >>> scan_tokens(b'\\\\{ {a}')
        [3, 5]
    """
    escape = config.escape[0]
    positions = []
    for match in _token_pattern(config).finditer(data):
        pos = match.start()
        if pos > 0 and data[pos - 1] == escape:
            continue
        positions.append(pos)
    return positions


class BracketNotationParser:
    """Builds a BracketNode tree from bracket notation.

    The parser holds only its configuration and can be reused for any
    number of inputs.

    Example:
        >>> parser = BracketNotationParser(ParserConfig(start='(', end=')'))
        >>> root = parser.parse('(a(b)(c))')
        >>> len(root)
        2
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config = config if config is not None else DEFAULT_CONFIG

    def __repr__(self) -> str:
        return f"BracketNotationParser({self.config!r})"

    def _make_node(self, data: bytes, start: int, end: int) -> BracketNode:
        """Create a node labelled with the bytes strictly between start and end."""
        try:
            label = self.config.label_class.from_bytes(data[start + 1:end])
        except InvalidEncodingError as e:
            offset = start + 1 + (e.position or 0)
            raise InvalidEncodingError(str(e), offset) from e
        return BracketNode(label)

    def parse(self, source: BracketSource) -> BracketNode:
        """Parse source and return the root node.

        Args:
            source: Bracket notation as text (encoded as UTF-8) or bytes.

        Returns:
            The root BracketNode. Nothing else references the tree.

        Raises:
            StructuralError: Fewer than two unescaped tokens, the first
                token is not an open token, or a second root is opened.
            UnterminatedLabelError: An open token is the last token.
            UnbalancedClosingTokenError: A close token has no open node to
                close, or (strict mode) nodes are still open at the end.
            InvalidEncodingError: A label is not valid text.
            TypeError: source is neither text nor bytes.
        """
        data = _to_bytes(source)
        config = self.config
        start_token = config.start[0]

        positions = scan_tokens(data, config)
        logger.debug("Found %d structural tokens in %d bytes", len(positions), len(data))
        if len(positions) < 2:
            raise StructuralError(
                f"Input has too few structural tokens to form a tree "
                f"(found {len(positions)})"
            )

        root_pos = positions[0]
        if data[root_pos] != start_token:
            raise StructuralError(
                f"Tree must begin with '{config.start.decode('ascii')}', "
                f"found '{config.end.decode('ascii')}'",
                root_pos,
            )

        # Arena of created nodes; the stack holds indices of open ones.
        nodes = [self._make_node(data, root_pos, positions[1])]
        stack = [0]
        last = len(positions) - 1

        for i in range(1, len(positions)):
            pos = positions[i]
            if data[pos] == start_token:
                if i == last:
                    raise UnterminatedLabelError(
                        f"No token ends the label opened at offset {pos}", pos
                    )
                if not stack:
                    raise StructuralError(
                        f"Node opened at offset {pos} after the root was closed",
                        pos,
                    )
                nodes.append(self._make_node(data, pos, positions[i + 1]))
                index = len(nodes) - 1
                nodes[stack[-1]].add_child(nodes[index])
                stack.append(index)
            else:
                if not stack:
                    raise UnbalancedClosingTokenError(
                        f"Closing token at offset {pos} has no open node", pos
                    )
                stack.pop()

        if stack and config.strict:
            raise UnbalancedClosingTokenError(
                f"Input ended with {len(stack)} unclosed node(s)", len(data)
            )

        logger.debug("Parsed tree with %d nodes", len(nodes))
        return nodes[0]


def parse_bracket(
    source: BracketSource, config: ParserConfig | None = None
) -> BracketNode:
    """Parse bracket notation with a one-off parser.

    Example:
        >>> root = parse_bracket('{a{b}}')
        >>> root[0].is_leaf
        True
    """
    return BracketNotationParser(config).parse(source)
