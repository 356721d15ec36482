# corpus.py
from __future__ import annotations
import re
from collections import Counter
from typing import Iterable, Iterator, List

START = "<s>"
END = "</s>"

# anything that is neither a letter, a digit nor whitespace
_NON_ALPHANUMERIC = re.compile(r"[^\w\s]|_", re.UNICODE)


def load_corpus(path: str) -> str:
    """Read the whole corpus file as text."""
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def read_lines(path: str) -> Iterator[str]:
    """Stream the non-empty lines of a file, stripped."""
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                yield line


def remove_non_alphanumeric(text: str) -> str:
    return _NON_ALPHANUMERIC.sub("", text)


def tokenize(text: str) -> List[str]:
    """Lowercase, drop punctuation, split on whitespace."""
    return remove_non_alphanumeric(text.lower()).split()


def count_words(tokens: Iterable[str]) -> Counter:
    return Counter(tokens)


def mark_sentence(tokens: List[str], n: int) -> str:
    """Prepend (n−1) <s> and append one </s>, joined into a training line."""
    return " ".join([START] * (n - 1) + list(tokens) + [END])


def load_sentences(path: str, n: int) -> List[str]:
    """Every line of the file tokenized and marked for an n-gram model."""
    sentences = []
    for line in read_lines(path):
        tokens = tokenize(line)
        if tokens:
            sentences.append(mark_sentence(tokens, n))
    return sentences
