"""
Command line front end for the n-gram model and the spell checker.

Usage:
    ngram-spell prob --corpus big.txt -n 2 am i
    ngram-spell suggest --corpus big.txt -k 5 speling
    ngram-spell correct --corpus big.txt "speling is hrad"
    ngram-spell dump --corpus small.txt -n 3
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from corpus import load_sentences
from lm import NGramModel, UnigramFrequencyModel
from spell import DEFAULT_MAX_CORRECTIONS, SpellChecker


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ngram-spell",
        description="N-gram probabilities and spelling suggestions from a text corpus"
    )
    parser.add_argument("--verbose", action="store_true", help="print corpus statistics first")
    sub = parser.add_subparsers(dest="command", required=True)

    prob = sub.add_parser("prob", help="P(token | context) under an n-gram model")
    prob.add_argument("--corpus", required=True, help="training text, one sentence per line")
    prob.add_argument("-n", type=int, default=2, help="model order (default: 2)")
    prob.add_argument("token")
    prob.add_argument("context", nargs="*", help="the n-1 preceding tokens, oldest first")

    suggest = sub.add_parser("suggest", help="ranked corrections for a word")
    suggest.add_argument("--corpus", required=True, help="text to count word frequencies from")
    suggest.add_argument("-k", type=int, default=DEFAULT_MAX_CORRECTIONS,
                         help=f"number of suggestions (default: {DEFAULT_MAX_CORRECTIONS})")
    suggest.add_argument("word")

    correct = sub.add_parser("correct", help="correct every word of a sentence")
    correct.add_argument("--corpus", required=True, help="text to count word frequencies from")
    correct.add_argument("sentence")

    dump = sub.add_parser("dump", help="print the n-gram count tables")
    dump.add_argument("--corpus", required=True, help="training text, one sentence per line")
    dump.add_argument("-n", type=int, default=2, help="model order (default: 2)")

    return parser


def _train(path: str, n: int, verbose: bool) -> NGramModel:
    model = NGramModel(n)
    model.train(load_sentences(path, n))
    if verbose:
        print(f"Vocabulary: {len(model.vocabulary):,} words, total tokens: {model.total_token_count:,}")
    return model


def _checker(path: str, verbose: bool) -> SpellChecker:
    checker = SpellChecker(model=UnigramFrequencyModel.from_file(path))
    if verbose:
        print(f"Vocabulary: {len(checker.model):,} words, total tokens: {checker.model.total_word_count:,}")
    return checker


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.command == "prob":
            model = _train(args.corpus, args.n, args.verbose)
            context = [t.lower() for t in args.context] if args.context else None
            print(model.probability(args.token.lower(), context))
        elif args.command == "suggest":
            checker = _checker(args.corpus, args.verbose)
            for word in checker.suggest(args.word.lower(), args.k):
                print(f"{word}\t{checker.model.probability_of(word):.6g}")
        elif args.command == "correct":
            print(_checker(args.corpus, args.verbose).correct(args.sentence))
        elif args.command == "dump":
            _train(args.corpus, args.n, args.verbose).dump()
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
