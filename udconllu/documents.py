"""Incremental parsing of CoNLL-U documents.

A document is a stream of sentences separated by one or more blank lines.
Parsing is lazy and single-pass: each step consumes lines only until the
next sentence boundary, so it can be used with streaming inputs, and
dropping the iterator early simply stops reading.

A malformed line does not abort the document. Instead, the error is yielded
in place of the sentence it occurs in, the rest of that sentence is
skipped, and parsing resumes after the next blank line."""

from __future__ import annotations

import enum
import io
import logging
from typing import Iterable, Iterator, List, TextIO, Union

from . import errors, sentences

Item = Union[sentences.Sentence, errors.Error]


class State(enum.Enum):
    BETWEEN_SENTENCES = enum.auto()
    IN_SENTENCE = enum.auto()


class Doc:
    """Lazy CoNLL-U document.

    Iterating yields, for each sentence, either a Sentence or the
    errors.Error which prevented it from being parsed; the error's `lineno`
    is set. The underlying lines are consumed as iteration proceeds, so a
    Doc can only be iterated over once.

    Args:
        lines: any iterable of lines, e.g., an open file handle.
    """

    _lines: Iterator[str]
    _lineno: int

    def __init__(self, lines: Iterable[str]):
        self._lines = iter(lines)
        self._lineno = 0

    @classmethod
    def from_string(cls, buffer: str) -> Doc:
        return cls(io.StringIO(buffer))

    @classmethod
    def from_file(cls, handle: TextIO) -> Doc:
        return cls(handle)

    def __iter__(self) -> Iterator[Item]:
        state = State.BETWEEN_SENTENCES
        builder = sentences.SentenceBuilder()
        # Set once the current sentence fails; its remaining lines are
        # discarded until the next boundary.
        failed = False
        for line in self._lines:
            self._lineno += 1
            if not line.strip():
                if state is State.IN_SENTENCE and not failed:
                    yield builder.build()
                state = State.BETWEEN_SENTENCES
                builder = sentences.SentenceBuilder()
                failed = False
                continue
            state = State.IN_SENTENCE
            if failed:
                continue
            try:
                builder.push_line(line)
            except errors.Error as error:
                error.lineno = self._lineno
                logging.debug("Skipping malformed sentence: %s", error)
                failed = True
                yield error
        if state is State.IN_SENTENCE and not failed and builder:
            yield builder.build()

    def sentences(self) -> Iterator[sentences.Sentence]:
        """Yields sentences, raising the first error encountered.

        Raises:
            errors.Error.
        """
        for item in self:
            if isinstance(item, errors.Error):
                raise item
            yield item


def parse_file(handle: TextIO) -> List[Item]:
    """Parses an entire CoNLL-U file handle.

    Args:
        handle: file handle opened for reading.

    Returns:
        A list of Sentences or errors, one per sentence.
    """
    return list(Doc(handle))


def parse_from_string(buffer: str) -> Iterator[Item]:
    """Incrementally parses a CoNLL-U document from a string.

    Args:
        buffer: string containing zero or more serialized sentences.

    Yields:
        Sentences or errors.
    """
    yield from Doc.from_string(buffer)


def parse_from_path(path: str) -> Iterator[Item]:
    """Incrementally parses a CoNLL-U file from a file path.

    The file is closed once iteration finishes or the iterator is discarded.

    Args:
        path: path to input CoNLL-U file.

    Yields:
        Sentences or errors.
    """
    with open(path, "r", encoding="utf-8") as source:
        yield from Doc(source)
