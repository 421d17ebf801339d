from __future__ import annotations

from collections.abc import Iterable, Sequence


def fold(text: str) -> str:
    # Unicode case folding, independent of the process locale
    return text.casefold()


def sort_case_insensitive(lines: Iterable[str]) -> list[str]:
    """Sort by case-folded value.

    The sort is stable: lines that fold to the same value keep the relative
    order they arrived in.
    """
    return sorted(lines, key=fold)


def is_case_insensitively_sorted(lines: Sequence[str]) -> bool:
    for a, b in zip(lines, lines[1:]):
        if fold(a) > fold(b):
            return False
    return True
