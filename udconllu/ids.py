"""Token IDs.

Most of the time a token ID is just a single integer, but multiword tokens
use a span of two integers and empty nodes use a decimal ID. These are
modeled as three subclasses of TokenID so that all of them can serve as
dictionary keys and as head references while remaining distinguishable:
`Single(8)`, `Range(8, 9)` and `Sub(8, 1)` never compare equal."""

from __future__ import annotations

import dataclasses
import re

from . import errors, special

_single = re.compile(r"[0-9]+", re.ASCII)
_range = re.compile(r"([0-9]+)-([0-9]+)", re.ASCII)
_sub = re.compile(r"([0-9]+)\.([0-9]+)", re.ASCII)


class TokenID:
    """Base class for the three ID shapes."""

    __slots__ = ()

    @classmethod
    def parse_from_string(cls, string: str) -> TokenID:
        return parse_id(string)

    @property
    def is_root(self) -> bool:
        return False


@dataclasses.dataclass(frozen=True)
class Single(TokenID):
    """An ordinary token.

    Zero is admitted here so that it can stand for the synthetic root in
    HEAD and DEPS; the ID column itself never parses to it.

    Args:
        n (int): 1-based position within the sentence.
    """

    n: int

    def __post_init__(self):
        if self.n < special.ROOT:
            raise errors.TokenIDError(f"Negative token ID: {self.n}")

    def __str__(self) -> str:
        return str(self.n)

    @property
    def is_root(self) -> bool:
        return self.n == special.ROOT


@dataclasses.dataclass(frozen=True)
class Range(TokenID):
    """A multiword token spanning the words `start` through `end`.

    Args:
        start (int).
        end (int): must be greater than start.
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 1:
            raise errors.TokenIDError(
                f"Range must start at 1 or later: {self.start}"
            )
        if self.start >= self.end:
            raise errors.TokenIDError(
                f"Range start must precede its end: {self.start}-{self.end}"
            )

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"

    def __len__(self) -> int:
        return self.end - self.start + 1

    def __contains__(self, other: TokenID) -> bool:
        return isinstance(other, Single) and self.start <= other.n <= self.end


@dataclasses.dataclass(frozen=True)
class Sub(TokenID):
    """An empty node, inserted after word `n`.

    Args:
        n (int).
        part (int): 1-based index among the empty nodes after word `n`.
    """

    n: int
    part: int

    def __post_init__(self):
        if self.n < 1 or self.part < 1:
            raise errors.TokenIDError(
                f"Empty node IDs must be positive: {self.n}.{self.part}"
            )

    def __str__(self) -> str:
        return f"{self.n}.{self.part}"


# Parsing.


def _parse(string: str, allow_root: bool) -> TokenID:
    if _single.fullmatch(string):
        n = int(string)
        if n == special.ROOT and not allow_root:
            raise errors.TokenIDError(f"Token ID must be positive: {string!r}")
        return Single(n)
    elif match := _range.fullmatch(string):
        return Range(int(match.group(1)), int(match.group(2)))
    elif match := _sub.fullmatch(string):
        return Sub(int(match.group(1)), int(match.group(2)))
    else:
        raise errors.TokenIDError(f"Unable to parse ID {string!r}")


def parse_id(string: str) -> TokenID:
    """Parses the ID column.

    Args:
        string: e.g., `8`, `8-9`, or `8.1`.

    Returns:
        TokenID.

    Raises:
        errors.TokenIDError: on any other shape, or non-positive numbers.
    """
    return _parse(string, allow_root=False)


def parse_head(string: str) -> Single:
    """Parses the HEAD column; `0` is the root.

    Raises:
        errors.TokenIDError.
    """
    head = _parse(string, allow_root=True)
    if not isinstance(head, Single):
        raise errors.TokenIDError(f"HEAD must be a single ID: {string!r}")
    return head


def parse_dep_head(string: str) -> TokenID:
    """Parses the head of a DEPS edge; it may be the root or an empty node.

    Raises:
        errors.TokenIDError.
    """
    head = _parse(string, allow_root=True)
    if isinstance(head, Range):
        raise errors.TokenIDError(
            f"DEPS head cannot be a multiword token: {string!r}"
        )
    return head
