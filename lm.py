# lm.py
from __future__ import annotations
from collections import Counter
from typing import Iterable, Optional, Sequence, TextIO, Tuple

from corpus import START, count_words, load_corpus, tokenize

# an n-gram is an ordered token tuple, oldest token first
NGram = Tuple[str, ...]


class UnigramFrequencyModel:
    def __init__(self, words: Iterable[str]) -> None:
        """
        words: tokenized, lowercased corpus; counted in a single pass
        """
        self.counts: Counter[str] = count_words(words)
        self.total_word_count = sum(self.counts.values())

    @classmethod
    def from_file(cls, path: str) -> UnigramFrequencyModel:
        return cls(tokenize(load_corpus(path)))

    def frequency_of(self, word: str) -> int:
        return self.counts.get(word, 0)

    def probability_of(self, word: str) -> float:
        if self.total_word_count == 0:
            return 0.0
        return self.frequency_of(word) / self.total_word_count

    def contains(self, word: str) -> bool:
        return self.frequency_of(word) > 0

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self.counts)


class NGramModel:
    def __init__(self, n: int) -> None:
        """
        n: order of the model (1 for unigram, 2 for bigram, 3 for trigram, ...)
        """
        if not isinstance(n, int) or n < 1:
            raise ValueError(f"n must be a positive integer, got {n!r}")
        self.n = n
        self.is_trained = False

        # to be populated in train()
        self.total_token_count = 0
        self.unigram_counts: Counter[str] = Counter()
        self.ngram_counts: Counter[NGram] = Counter()
        # (n−1)-gram contexts; only kept when n > 2, bigram contexts are unigrams
        self.prefix_counts: Counter[NGram] = Counter()

    def train(self, corpus: Iterable[str]) -> None:
        """
        corpus: lines of space separated tokens, each starting with <s> and
        ending with </s>
        """
        if self.is_trained:
            raise RuntimeError("model is already trained")

        for line in corpus:
            # the n−1 most recent tokens, seeded with start markers
            window: NGram = (START,) * (self.n - 1)

            for index, token in enumerate(line.split()):
                token = token.lower()
                self.total_token_count += 1
                self.unigram_counts[token] += 1

                # leading start markers are already in the seeded window
                if index == 0 or self.n == 1 or token == START:
                    continue

                ngram = window + (token,)
                self.ngram_counts[ngram] += 1
                if self.n > 2:
                    self.prefix_counts[window] += 1
                window = ngram[1:]

        self.is_trained = True

    def probability(self, token: str, context: Optional[Sequence[str]] = None) -> float:
        """
        Maximum-likelihood P(token | context). Without a context this is the
        unigram probability. Unseen n-grams and unseen contexts give 0.
        """
        if context is None:
            return self._unigram_probability(token)

        if isinstance(context, str):
            raise TypeError("context must be a sequence of tokens, not a string")
        history = tuple(context)
        if len(history) != self.n - 1:
            raise ValueError(f"Size of context must be {self.n - 1}, got {len(history)}")
        if self.n == 1:
            return self._unigram_probability(token)

        ngram_count = self.ngram_counts.get(history + (token,), 0)
        if ngram_count == 0:
            return 0.0

        if self.n == 2:
            context_count = self.unigram_counts.get(history[0], 0)
        else:
            context_count = self.prefix_counts.get(history, 0)
        if context_count == 0:
            return 0.0

        return ngram_count / context_count

    def _unigram_probability(self, token: str) -> float:
        if self.total_token_count == 0:
            return 0.0
        return self.unigram_counts.get(token, 0) / self.total_token_count

    @property
    def vocabulary(self) -> set[str]:
        return set(self.unigram_counts)

    def dump(self, file: Optional[TextIO] = None) -> None:
        """Print the count tables, sorted, to file (stdout by default)."""
        print("N-gram distribution", file=file)
        for ngram, count in sorted(self.ngram_counts.items()):
            print(f"{ngram}: {count}", file=file)

        print("\n(N-1)-gram distribution", file=file)
        for ngram, count in sorted(self.prefix_counts.items()):
            print(f"{ngram}: {count}", file=file)
