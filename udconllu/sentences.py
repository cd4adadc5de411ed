"""Sentences and their assembly."""

from __future__ import annotations

import collections.abc
import dataclasses
import io
import re
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from . import errors, ids, special, tokens


class Sentence(collections.abc.Sequence):
    """Sentence object.

    This behaves like a read-only sequence of tokens in file order, with the
    raw comment lines kept alongside. An index from token ID to position is
    built once, at construction, for constant-time lookup.

    If two tokens share an ID, both are kept in the sequence but the later
    one shadows the earlier one in lookup; such input should be avoided.

    Args:
        tokens (Iterable[tokens.Token]): tokens in file order.
        meta (Iterable[str], optional): comment lines, each including `#`.
    """

    _tokens: List[tokens.Token]
    _meta: List[str]
    _id_to_index: Dict[ids.TokenID, int]

    def __init__(
        self,
        tokens_: Iterable[tokens.Token],
        meta: Optional[Iterable[str]] = None,
    ):
        self._tokens = list(tokens_)
        self._meta = list(meta) if meta is not None else []
        self._id_to_index = {
            token.id: index for index, token in enumerate(self._tokens)
        }

    @staticmethod
    def builder() -> SentenceBuilder:
        return SentenceBuilder()

    @classmethod
    def parse_from_string(cls, buffer: str) -> Sentence:
        return parse_sentence(buffer)

    # Sequence API.

    def __len__(self) -> int:
        return len(self._tokens)

    def __getitem__(
        self, index: Union[int, slice]
    ) -> Union[tokens.Token, List[tokens.Token]]:
        return self._tokens[index]

    def __iter__(self) -> Iterator[tokens.Token]:
        return iter(self._tokens)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Sentence):
            return NotImplemented
        return self._meta == other._meta and self._tokens == other._tokens

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self._tokens!r}, meta={self._meta!r})"
        )

    def __str__(self) -> str:
        lines = self._meta + [str(token) for token in self._tokens]
        return "\n".join(lines) + "\n"

    # Accessors.

    @property
    def tokens(self) -> Tuple[tokens.Token, ...]:
        return tuple(self._tokens)

    @property
    def meta(self) -> Tuple[str, ...]:
        return tuple(self._meta)

    @property
    def metadata(self) -> Dict[str, Optional[str]]:
        """Parses `# key = value` comments into an ordered dictionary.

        Comments without a value (e.g., `# newpar`) map to None; later keys
        overwrite earlier ones.
        """
        metadata = {}
        for line in self._meta:
            if match := _metadata.fullmatch(line):
                metadata[match.group(1)] = match.group(3)
        return metadata

    def get_token(self, id_: ids.TokenID) -> Optional[tokens.Token]:
        """Looks up a token by ID.

        Args:
            id_ (ids.TokenID).

        Returns:
            The token, or None if there is none with that ID.
        """
        index = self._id_to_index.get(id_)
        return None if index is None else self._tokens[index]

    def update_token(
        self, id_: ids.TokenID, **changes
    ) -> Optional[tokens.Token]:
        """Replaces fields of the token with the given ID, in place.

        The index is not rebuilt: if `id` is among the changes, lookup by
        either the old or the new ID is no longer reliable.

        Args:
            id_ (ids.TokenID).
            **changes: Token fields and their new values.

        Returns:
            The updated token, or None if there is none with that ID.
        """
        index = self._id_to_index.get(id_)
        if index is None:
            return None
        token = dataclasses.replace(self._tokens[index], **changes)
        self._tokens[index] = token
        return token

    def words(self) -> List[str]:
        """Forms of the syntactic words, skipping MWEs and empty nodes."""
        return [
            token.form
            for token in self._tokens
            if not token.is_mwe and not token.is_empty
        ]


# The first group is the key; the optional third group is the value.
_metadata = re.compile(r"#\s*(.+?)(\s*=\s*(.*))?")


class SentenceBuilder:
    """Staged construction of a Sentence.

    Tokens and comment lines are accumulated in order; `build` computes the
    ID index. Setters return the builder so calls can be chained.
    """

    _tokens: List[tokens.Token]
    _meta: List[str]

    def __init__(self):
        self._tokens = []
        self._meta = []

    def __bool__(self) -> bool:
        return bool(self._tokens or self._meta)

    def with_tokens(self, tokens_: Iterable[tokens.Token]) -> SentenceBuilder:
        self._tokens = list(tokens_)
        return self

    def with_meta(self, meta: Iterable[str]) -> SentenceBuilder:
        self._meta = list(meta)
        return self

    def push_token(self, token: tokens.Token) -> SentenceBuilder:
        self._tokens.append(token)
        return self

    def push_meta(self, line: str) -> SentenceBuilder:
        self._meta.append(line)
        return self

    def push_line(self, line: str) -> SentenceBuilder:
        """Adds a comment or data line.

        Raises:
            errors.Error: if a data line is malformed.
        """
        line = line.rstrip("\r\n")
        if line.startswith(special.COMMENT):
            return self.push_meta(line)
        return self.push_token(tokens.parse_token(line))

    def build(self) -> Sentence:
        return Sentence(self._tokens, self._meta)


def parse_sentence(buffer: str) -> Sentence:
    """Parses a CoNLL-U sentence from a string.

    Lines are split on newlines only, as in Doc. Leading and trailing blank
    lines are ignored, but a blank line followed by further content means
    the buffer holds more than one sentence, which is an error; use Doc for
    multi-sentence input.

    Args:
        buffer: string containing a serialized sentence.

    Returns:
        Sentence.

    Raises:
        errors.Error: on the first malformed line, or if a second sentence
            follows.
    """
    builder = SentenceBuilder()
    ended = False
    for lineno, line in enumerate(io.StringIO(buffer), 1):
        if not line.strip():
            ended = bool(builder)
            continue
        if ended:
            raise errors.Error("Expected a single sentence", lineno)
        try:
            builder.push_line(line)
        except errors.Error as error:
            error.lineno = lineno
            raise
    return builder.build()
