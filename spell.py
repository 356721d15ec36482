# spell.py
from __future__ import annotations
import re
from typing import Iterable, List, Optional, Set

import editdistance   # pip install editdistance

from edits import edits1, edits2
from lm import UnigramFrequencyModel

DEFAULT_MAX_CORRECTIONS = 3


class SpellChecker:
    def __init__(
        self,
        corpus_path: Optional[str] = None,
        max_corrections: int = DEFAULT_MAX_CORRECTIONS,
        model: Optional[UnigramFrequencyModel] = None
    ) -> None:
        """
        corpus_path     : text file the unigram frequencies are counted from
        max_corrections : default cap on the number of suggestions
        model           : an already built frequency model, instead of corpus_path
        """
        if (corpus_path is None) == (model is None):
            raise ValueError("exactly one of corpus_path or model is required")
        if not isinstance(max_corrections, int) or max_corrections < 1:
            raise ValueError(f"max_corrections must be a positive integer, got {max_corrections!r}")

        self.model = model if model is not None else UnigramFrequencyModel.from_file(corpus_path)
        self.max_corrections = max_corrections

    def known(self, words: Iterable[str]) -> Set[str]:
        """The subset of words that appear in the vocabulary."""
        return {w for w in words if self.model.contains(w)}

    def candidates(self, word: str) -> Set[str]:
        """Known words within two edits of word, word itself included if known."""
        cands = self.known(edits1(word)) | self.known(edits2(word))
        if self.model.contains(word):
            cands.add(word)
        return cands

    def suggest(self, word: str, k: Optional[int] = None) -> List[str]:
        """
        Up to k known corrections, most probable first. Equal probabilities
        are ordered by edit distance to word, then alphabetically.
        """
        if k is None:
            k = self.max_corrections
        if not isinstance(k, int) or k < 1:
            raise ValueError(f"k must be a positive integer, got {k!r}")

        ranked = sorted(
            self.candidates(word),
            key=lambda c: (-self.model.probability_of(c), editdistance.eval(word, c), c)
        )
        return ranked[:k]

    def correction(self, word: str) -> str:
        """Most probable correction, or word itself when nothing is close."""
        suggestions = self.suggest(word, 1)
        return suggestions[0] if suggestions else word

    def correct(self, sentence: str) -> str:
        """Correct every alphabetic token of a sentence, leaving the rest alone."""
        def fix(match: re.Match) -> str:
            tok = match.group(0)
            best = self.correction(tok.lower())
            if best == tok.lower():
                return tok
            return best.capitalize() if tok[0].isupper() else best

        return re.sub(r"[^\W\d_]+", fix, sentence)
