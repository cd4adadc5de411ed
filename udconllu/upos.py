"""Universal part-of-speech tags."""

from __future__ import annotations

import enum

from . import errors


class UPOS(enum.Enum):
    """The closed set of UD v2 universal POS tags.

    See: https://universaldependencies.org/u/pos/index.html.
    """

    ADJ = "ADJ"
    ADP = "ADP"
    ADV = "ADV"
    AUX = "AUX"
    CCONJ = "CCONJ"
    DET = "DET"
    INTJ = "INTJ"
    NOUN = "NOUN"
    NUM = "NUM"
    PART = "PART"
    PRON = "PRON"
    PROPN = "PROPN"
    PUNCT = "PUNCT"
    SCONJ = "SCONJ"
    SYM = "SYM"
    VERB = "VERB"
    X = "X"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse_from_string(cls, string: str) -> UPOS:
        """Parses a tag; matching is case-sensitive.

        Raises:
            errors.UPOSError: if the tag is not one of the 17.
        """
        try:
            return cls(string)
        except ValueError:
            raise errors.UPOSError(f"Unknown UPOS tag {string!r}") from None
