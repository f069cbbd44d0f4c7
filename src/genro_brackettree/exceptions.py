# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Bracket notation parsing exceptions."""

from __future__ import annotations


class BracketTreeError(Exception):
    """Base exception for bracket notation errors.

    Attributes:
        position: Byte offset in the input where the problem was found,
            or None when it does not apply to a single offset.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class StructuralError(BracketTreeError):
    """Raised when the input does not describe a single rooted tree."""

    pass


class UnterminatedLabelError(BracketTreeError):
    """Raised when an open token has no following token to end its label."""

    pass


class UnbalancedClosingTokenError(BracketTreeError):
    """Raised when open and close tokens do not pair up."""

    pass


class InvalidEncodingError(BracketTreeError):
    """Raised when a label's bytes are not valid text."""

    pass
