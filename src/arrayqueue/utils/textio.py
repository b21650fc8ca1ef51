#  This file is part of arrayqueue.
#
#  SPDX-FileCopyrightText: 2025 arrayqueue Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Whitespace-delimited text interchange for the containers.

Reading hands out tokens one after another, independent of how they are spread over
lines.  A read consumes the stream only up to the whitespace character ending its last
token, so successive reads from the same stream continue where the previous one
stopped.  Writing renders every element followed by a single space, the last one
included.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TextIO

from arrayqueue.utils.exceptions import TruncatedInputError


if TYPE_CHECKING:
    from collections.abc import Iterable


class TokenReader:
    """Reads whitespace-delimited tokens from a text stream.

    The stream is read character by character and nothing beyond the end of a token is
    buffered, thus several readers or containers can read one after the other from the
    same stream.
    """

    def __init__(self, stream: TextIO) -> None:
        """Initializes the reader.

        Args:
            stream: The text stream to read from
        """
        self._stream = stream

    def next_token(self) -> str | None:
        """Provides the next token.

        Returns:
            The next token, or None if the stream is exhausted.
        """
        char = self._stream.read(1)
        while char.isspace():
            char = self._stream.read(1)
        if not char:
            return None
        chars: list[str] = []
        while char and not char.isspace():
            chars.append(char)
            char = self._stream.read(1)
        return "".join(chars)

    def read(self, count: int) -> list[str]:
        """Reads exactly ``count`` tokens.

        Args:
            count: The number of tokens to read

        Returns:
            The tokens in stream order.

        Raises:
            TruncatedInputError: If the stream ends before enough tokens were read.
        """
        tokens: list[str] = []
        while len(tokens) < count:
            token = self.next_token()
            if token is None:
                raise TruncatedInputError(count, len(tokens))
            tokens.append(token)
        return tokens


def as_reader(source: TextIO | TokenReader) -> TokenReader:
    """Wraps a plain stream into a reader, readers are passed through.

    Args:
        source: A text stream or an existing reader

    Returns:
        A token reader for the source.
    """
    if isinstance(source, TokenReader):
        return source
    return TokenReader(source)


def read_tokens(source: TextIO | TokenReader, count: int) -> list[str]:
    """Reads ``count`` tokens from the given source.

    Args:
        source: A text stream or a token reader
        count: The number of tokens to read

    Returns:
        The tokens in stream order.
    """
    return as_reader(source).read(count)


def render(iterable: Iterable[Any]) -> str:
    """Renders the elements, each followed by a single space.

    Args:
        iterable: The elements to render

    Returns:
        The text form of the elements.
    """
    return "".join(f"{element} " for element in iterable)


def write_elements(stream: TextIO, iterable: Iterable[Any]) -> None:
    """Writes the rendered elements to the stream.

    Args:
        stream: The text stream to write to
        iterable: The elements to write
    """
    stream.write(render(iterable))
