"""Tokens: one annotated word, multiword token, or empty node per line."""

from __future__ import annotations

import dataclasses
from typing import Dict, List, Optional

from . import errors, fields, ids, special
from .fields import Dep  # noqa: F401
from .upos import UPOS


@dataclasses.dataclass(frozen=True)
class Token:
    """Token object.

    Every column other than FORM is optional; the blank placeholder `_`
    is represented as None. FORM is stored verbatim, so a literal `_` form
    stays a string.

    Args:
        id (ids.TokenID).
        form (str).
        lemma (str, optional).
        upos (UPOS, optional).
        xpos (str, optional).
        features (Dict[str, str], optional): in declaration order.
        head (ids.TokenID, optional): `Single(0)` is the root.
        deprel (str, optional).
        deps (List[Dep], optional): in declaration order.
        misc (str, optional): free text.
    """

    # Features and deps are mutable containers, so tokens are unhashable.
    __hash__ = None

    id: ids.TokenID
    form: str
    lemma: Optional[str] = None
    upos: Optional[UPOS] = None
    xpos: Optional[str] = None
    features: Optional[Dict[str, str]] = None
    head: Optional[ids.TokenID] = None
    deprel: Optional[str] = None
    deps: Optional[List[Dep]] = None
    misc: Optional[str] = None

    @staticmethod
    def builder(id_: ids.TokenID, form: str) -> TokenBuilder:
        return TokenBuilder(id_, form)

    @classmethod
    def parse_from_string(cls, line: str) -> Token:
        return parse_token(line)

    @property
    def is_mwe(self) -> bool:
        return isinstance(self.id, ids.Range)

    @property
    def is_empty(self) -> bool:
        return isinstance(self.id, ids.Sub)

    def __str__(self) -> str:
        return special.SEPARATOR.join(
            [
                str(self.id),
                self.form,
                fields.format_nullable(self.lemma),
                fields.format_nullable(self.upos),
                fields.format_nullable(self.xpos),
                fields.format_features(self.features),
                fields.format_nullable(self.head),
                fields.format_nullable(self.deprel),
                fields.format_deps(self.deps),
                fields.format_nullable(self.misc),
            ]
        )


class TokenBuilder:
    """Staged construction of a Token.

    Each setter returns the builder so calls can be chained:

        Token.builder(Single(1), "They").lemma("they").upos(UPOS.PRON).build()

    Args:
        id_ (ids.TokenID).
        form (str).
    """

    _fields: Dict[str, object]

    def __init__(self, id_: ids.TokenID, form: str):
        self._fields = {"id": id_, "form": form}

    def _set(self, name: str, value) -> TokenBuilder:
        self._fields[name] = value
        return self

    def lemma(self, lemma: str) -> TokenBuilder:
        return self._set("lemma", lemma)

    def upos(self, upos: UPOS) -> TokenBuilder:
        return self._set("upos", upos)

    def xpos(self, xpos: str) -> TokenBuilder:
        return self._set("xpos", xpos)

    def features(self, features: Dict[str, str]) -> TokenBuilder:
        return self._set("features", dict(features))

    def head(self, head: ids.TokenID) -> TokenBuilder:
        return self._set("head", head)

    def deprel(self, deprel: str) -> TokenBuilder:
        return self._set("deprel", deprel)

    def deps(self, deps: List[Dep]) -> TokenBuilder:
        return self._set("deps", list(deps))

    def misc(self, misc: str) -> TokenBuilder:
        return self._set("misc", misc)

    def build(self) -> Token:
        return Token(**self._fields)


# Parsing.


def _parse_upos(value: str) -> Optional[UPOS]:
    if special.isblank(value):
        return None
    return UPOS.parse_from_string(value)


def _parse_head(value: str) -> Optional[ids.TokenID]:
    if special.isblank(value):
        return None
    return ids.parse_head(value)


def parse_token(line: str) -> Token:
    """Parses a data line as a token.

    Args:
        line: a non-blank, non-comment line; a trailing newline is ignored.

    Returns:
        Token.

    Raises:
        errors.FieldCountError: if the line does not have exactly ten
            tab-separated columns.
        errors.Error: subclasses for malformed individual columns.
    """
    cells = line.rstrip("\r\n").split(special.SEPARATOR)
    if len(cells) != len(special.FIELDNAMES):
        raise errors.FieldCountError(
            f"Expected {len(special.FIELDNAMES)} fields, found {len(cells)}"
        )
    id_, form, lemma, upos, xpos, feats, head, deprel, deps, misc = cells
    return Token(
        id=ids.parse_id(id_),
        form=form,
        lemma=fields.parse_nullable(lemma),
        upos=_parse_upos(upos),
        xpos=fields.parse_nullable(xpos),
        features=fields.parse_features(feats),
        head=_parse_head(head),
        deprel=fields.parse_nullable(deprel),
        deps=fields.parse_deps(deps),
        misc=fields.parse_nullable(misc),
    )
