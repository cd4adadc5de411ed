"""Interoperability with the third-party `conllu` package.

Token lines go through the serialized text format, so the two grammars only
have to agree at the wire. Comments are carried over as `conllu` metadata,
built from Sentence.metadata rather than left to `conllu`'s comment parser,
which drops comments that are not `# key = value` or `# newdoc`/`# newpar`.
As a result, every comment survives a round trip, but in the normalized
form `# key = value` or `# key` (so `#second` comes back as `# second`).
Comments with a repeated key keep only the last value, and a bare `#` line
is dropped."""

import conllu

from . import sentences


def to_conllu(sentence: sentences.Sentence) -> conllu.TokenList:
    """Converts a Sentence to a `conllu.TokenList`.

    A sentence without tokens yields an empty token list, which still
    carries the sentence's metadata.

    Args:
        sentence (sentences.Sentence).

    Returns:
        conllu.TokenList.
    """
    tokens = []
    if len(sentence):
        buffer = "".join(f"{token}\n" for token in sentence)
        (parsed,) = conllu.parse(buffer)
        tokens = list(parsed)
    return conllu.TokenList(tokens, metadata=sentence.metadata)


def from_conllu(tokenlist: conllu.TokenList) -> sentences.Sentence:
    """Converts a `conllu.TokenList` to a Sentence.

    Args:
        tokenlist (conllu.TokenList).

    Returns:
        sentences.Sentence.

    Raises:
        errors.Error: if the serialized token list does not parse.
    """
    return sentences.parse_sentence(tokenlist.serialize())
