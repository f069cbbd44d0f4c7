# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Node labels.

A label wraps one value of some semantic type. The value can be read
and replaced wholesale, never patched in place through the label.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from .exceptions import InvalidEncodingError

T = TypeVar('T')


class Label(ABC, Generic[T]):
    """Abstract label holding a value of type T.

    Subclasses implement get/set. Labels built by the parser must also
    implement from_bytes.
    """

    __slots__ = ()

    @classmethod
    def construct(cls, value: T) -> Label[T]:
        """Wrap value in a new label of this class."""
        return cls(value)  # type: ignore[call-arg]

    @classmethod
    def from_bytes(cls, data: bytes) -> Label[T]:
        """Build a label from a raw byte range.

        Raises:
            InvalidEncodingError: If data cannot be decoded.
        """
        raise NotImplementedError(f"{cls.__name__} cannot be built from bytes")

    @abstractmethod
    def get(self) -> T:
        """Return the held value."""

    @abstractmethod
    def set(self, value: T) -> None:
        """Replace the held value."""

    @property
    def value(self) -> T:
        return self.get()

    @value.setter
    def value(self, value: T) -> None:
        self.set(value)


class TextLabel(Label[str]):
    """Label holding a text value.

    Example:
        >>> lbl = TextLabel('koren')
        >>> str(lbl)
        'koren'
        >>> TextLabel.from_bytes(b'levy').get()
        'levy'
    """

    __slots__ = ('_text',)

    def __init__(self, text: str) -> None:
        self._text = text

    @classmethod
    def from_bytes(cls, data: bytes) -> TextLabel:
        """Decode data as UTF-8.

        Raises:
            InvalidEncodingError: If data is not valid UTF-8. The position
                is the offset of the first bad byte within data.
        """
        try:
            text = bytes(data).decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidEncodingError(
                f"Label is not valid UTF-8: {bytes(data)!r}", e.start
            ) from e
        return cls(text)

    def get(self) -> str:
        return self._text

    def set(self, value: str) -> None:
        self._text = value

    def __str__(self) -> str:
        return self._text

    def __format__(self, format_spec: str) -> str:
        return format(self._text, format_spec)

    def __repr__(self) -> str:
        return f"TextLabel({self._text!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, TextLabel):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)
