"""Parsers for the structured sub-grammars of individual columns.

FEATS is a `|`-separated list of `key=value` pairs, DEPS a `|`-separated
list of `head:relation` edges. MISC is left as free text. For each parser
there is a formatter which is its inverse."""

import dataclasses
from typing import Dict, Iterable, List, Optional

from . import errors, ids, special


@dataclasses.dataclass(frozen=True)
class Dep:
    """A secondary (enhanced) dependency edge.

    Args:
        head (ids.TokenID): the governor; may be the root or an empty node.
        rel (str): the relation label, possibly with subtypes.
    """

    head: ids.TokenID
    rel: str

    def __str__(self) -> str:
        return f"{self.head}:{self.rel}"


def parse_nullable(value: str) -> Optional[str]:
    """Maps the blank placeholder to None; other values pass through."""
    return None if special.isblank(value) else value


def format_nullable(value) -> str:
    return special.BLANK if value is None else str(value)


def parse_features(value: str) -> Optional[Dict[str, str]]:
    """Parses the FEATS column.

    Pairs are split on the first `=`, so values may themselves contain `=`.
    If a key repeats, the later pair wins and the earlier one is dropped
    from the ordering too.

    Args:
        value: the raw column.

    Returns:
        An insertion-ordered dictionary, or None for `_`.

    Raises:
        errors.FeatureError: if a pair lacks `=`.
    """
    if special.isblank(value):
        return None
    features = {}
    for pair in value.split("|"):
        key, sep, val = pair.partition("=")
        if not sep:
            raise errors.FeatureError(f"Malformed feature {pair!r}")
        features.pop(key, None)
        features[key] = val
    return features


def format_features(features: Optional[Dict[str, str]]) -> str:
    if features is None:
        return special.BLANK
    return "|".join(f"{key}={value}" for key, value in features.items())


def parse_deps(value: str) -> Optional[List[Dep]]:
    """Parses the DEPS column.

    Each edge is split on the first `:`; the relation keeps any further
    colons (e.g., `4:obl:from`). Order is preserved and duplicates are kept.

    Args:
        value: the raw column.

    Returns:
        A list of Deps, or None for `_`.

    Raises:
        errors.DepsError: if an edge lacks `:`.
        errors.TokenIDError: if an edge's head is malformed.
    """
    if special.isblank(value):
        return None
    deps = []
    for edge in value.split("|"):
        head, sep, rel = edge.partition(":")
        if not sep:
            raise errors.DepsError(f"Malformed dependency {edge!r}")
        deps.append(Dep(ids.parse_dep_head(head), rel))
    return deps


def format_deps(deps: Optional[Iterable[Dep]]) -> str:
    if deps is None:
        return special.BLANK
    return "|".join(str(dep) for dep in deps)
