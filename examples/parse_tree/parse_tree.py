# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Parse-tree example - Reading annotated parse trees in bracket notation.

A didactic example showing the parser with default and custom tokens,
and how to report a malformed tree.
"""

from __future__ import annotations

from genro_brackettree import (
    BracketNode,
    BracketTreeError,
    ParserConfig,
    parse_bracket,
)


def outline(node: BracketNode, indent: int = 0) -> list[str]:
    """Return one indented line per node, in document order."""
    lines = ['  ' * indent + (str(node.label) or '<empty>')]
    for child in node:
        lines.extend(outline(child, indent + 1))
    return lines


if __name__ == '__main__':
    tree = parse_bracket(r'{S{NP{Jan}}{VP{vidí}{NP{\{ozn\}}}}}')
    print('\n'.join(outline(tree)))

    penn = ParserConfig(start='(', end=')', escape='\\')
    tree = parse_bracket('(S(NP(DT)(NN))(VP(VBZ)))', penn)
    print('\n'.join(outline(tree)))

    for bad in ['{a}}', '{a{b', '{a{b}', 'no tree']:
        try:
            parse_bracket(bad)
        except BracketTreeError as e:
            print(f'{bad!r}: {type(e).__name__}: {e}')
