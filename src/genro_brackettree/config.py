# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .label import Label, TextLabel


def _as_token(name: str, token: bytes | str) -> bytes:
    """Normalise a token to a single byte."""
    if isinstance(token, str):
        if not token.isascii():
            raise ValueError(f"Token '{name}' must be ASCII, got {token!r}")
        token = token.encode('ascii')
    if not isinstance(token, bytes) or len(token) != 1:
        raise ValueError(f"Token '{name}' must be a single byte, got {token!r}")
    return token


@dataclass(frozen=True)
class ParserConfig:
    """Tokens and options for a BracketNotationParser.

    Attributes:
        start: Byte opening a node (default '{').
        end: Byte closing a node (default '}').
        escape: Byte that, directly before start or end, makes it literal
            text (default backslash). Only the single preceding byte is
            checked, so a doubled escape still escapes the token.
        strict: If True, every opened node (the root included) must be
            closed before the input ends. If False, unclosed trailing
            nodes are accepted and the root is returned as is.
        label_class: Label subclass used for every node of a parsed tree.
            Must implement from_bytes.

    Example:
        >>> ParserConfig(start='(', end=')')
        >>> ParserConfig(strict=False)
    """

    start: bytes = b'{'
    end: bytes = b'}'
    escape: bytes = b'\\'
    strict: bool = True
    label_class: type[Label] = TextLabel

    def __post_init__(self) -> None:
        # frozen: assign normalised tokens through object.__setattr__
        for name in ('start', 'end', 'escape'):
            object.__setattr__(self, name, _as_token(name, getattr(self, name)))
        if len({self.start, self.end, self.escape}) != 3:
            raise ValueError(
                f"Tokens must be distinct: start={self.start!r}, "
                f"end={self.end!r}, escape={self.escape!r}"
            )
        if not (isinstance(self.label_class, type) and issubclass(self.label_class, Label)):
            raise ValueError(f"label_class must be a Label subclass, got {self.label_class!r}")
        if self.label_class.from_bytes.__func__ is Label.from_bytes.__func__:
            raise ValueError(
                f"label_class {self.label_class.__name__} must implement from_bytes"
            )


DEFAULT_CONFIG = ParserConfig()
