# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-BracketTree - Labeled trees from bracket notation.

A small, zero-dependency library that turns strings such as
``{root{child1}{child2}}`` into a tree of labeled nodes.
"""

__version__ = "0.1.0"

from .config import DEFAULT_CONFIG, ParserConfig
from .exceptions import (
    BracketTreeError,
    InvalidEncodingError,
    StructuralError,
    UnbalancedClosingTokenError,
    UnterminatedLabelError,
)
from .label import Label, TextLabel
from .node import BracketNode
from .parser import BracketNotationParser, parse_bracket, scan_tokens

__all__ = [
    # Core classes
    "BracketNode",
    "Label",
    "TextLabel",
    # Parsing
    "BracketNotationParser",
    "ParserConfig",
    "DEFAULT_CONFIG",
    "parse_bracket",
    "scan_tokens",
    # Exceptions
    "BracketTreeError",
    "StructuralError",
    "UnterminatedLabelError",
    "UnbalancedClosingTokenError",
    "InvalidEncodingError",
]
