# edits.py
from __future__ import annotations
import string

# Peter Norvig style edit distance candidate generation
LETTERS = string.ascii_lowercase


def _check_position(text: str, i: int, upper: int) -> None:
    if not 0 <= i <= upper:
        raise IndexError(f"position {i} out of range for {text!r}")


def split(word: str, i: int) -> tuple[str, str]:
    """Split word into (word[:i], word[i:]); 0 <= i <= len(word)."""
    _check_position(word, i, len(word))
    return word[:i], word[i:]


def delete_at(text: str, i: int) -> str:
    _check_position(text, i, len(text) - 1)
    return text[:i] + text[i + 1:]


def swap_chars(text: str, i: int, j: int) -> str:
    """Exchange the characters at positions i and j (i < j)."""
    if i >= j:
        raise ValueError(f"{i} is not less than {j}")
    _check_position(text, i, len(text) - 1)
    _check_position(text, j, len(text) - 1)
    return text[:i] + text[j] + text[i + 1:j] + text[i] + text[j + 1:]


def replace_at(text: str, i: int, ch: str) -> str:
    _check_position(text, i, len(text) - 1)
    return text[:i] + ch + text[i + 1:]


def insert_at(text: str, i: int, ch: str) -> str:
    """Insert ch before position i; i == len(text) appends."""
    _check_position(text, i, len(text))
    return text[:i] + ch + text[i:]


def edits1(word: str) -> set[str]:
    """All strings one delete, adjacent swap, replace or insert away from word."""
    candidates = set()
    for i in range(len(word) + 1):
        _, suffix = split(word, i)
        if suffix:
            candidates.add(delete_at(word, i))
            if len(suffix) > 1:
                candidates.add(swap_chars(word, i, i + 1))
            candidates.update(replace_at(word, i, c) for c in LETTERS)
        candidates.update(insert_at(word, i, c) for c in LETTERS)
    return candidates


def edits2(word: str) -> set[str]:
    return {e2 for e1 in edits1(word) for e2 in edits1(e1)}
