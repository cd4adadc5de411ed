"""Special symbols of the CoNLL-U format."""

BLANK = "_"
COMMENT = "#"
SEPARATOR = "\t"

# The synthetic root; HEAD and DEPS may point at it but no token has it.
ROOT = 0

# From: https://universaldependencies.org/format.html.
FIELDNAMES = [
    "id",
    "form",
    "lemma",
    "upos",
    "xpos",
    "feats",
    "head",
    "deprel",
    "deps",
    "misc",
]


def isblank(value: str) -> bool:
    """Determines if a column holds the absent-value placeholder.

    Args:
        value (str):

    Returns:
        bool.
    """
    return value == BLANK
