from __future__ import annotations

from typing import Literal, NamedTuple

_TRAILING = "!? \n"
_LONG_VOWELS = str.maketrans("âêîô", "aeio")


class Token(NamedTuple):
    """One side of a digraph: a word boundary or a single character."""

    kind: Literal["start", "end", "char"]
    char: str = ""

    def __str__(self: Token) -> str:
        if self.kind == "start":
            return "^"
        if self.kind == "end":
            return "$"
        return self.char


START = Token("start")
END = Token("end")


class Digraph(NamedTuple):
    first: Token
    second: Token

    def __str__(self: Digraph) -> str:
        return f"{self.first}{self.second}"


def normalize_word(line: str) -> str:
    """Strip trailing punctuation and whitespace, lowercase, fold long vowels.

    Only â ê î ô lose their circumflex; other accented letters are kept.
    """
    return line.rstrip(_TRAILING).lower().translate(_LONG_VOWELS)


def digraphs_of(word: str) -> set[Digraph]:
    """Distinct digraphs of an already normalized word, boundaries included."""
    if not word:
        return set()
    out: set[Digraph] = set()
    last = START
    for ch in word:
        this = Token("char", ch)
        out.add(Digraph(last, this))
        last = this
    out.add(Digraph(last, END))
    return out
