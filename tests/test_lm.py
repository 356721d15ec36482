import io
import os
import unittest

from lm import NGramModel, UnigramFrequencyModel

DATA = os.path.join(os.path.dirname(__file__), "data")

DR_SEUSS = [
    "<s> I am Sam </s>",
    "<s> Sam I am </s>",
    "<s> I do not like green eggs and ham </s>",
]


class TestBigramModel(unittest.TestCase):
    def setUp(self):
        self.lm = NGramModel(2)
        self.lm.train(DR_SEUSS)

    def test_dr_seuss(self):
        self.assertEqual(self.lm.probability("i", ["<s>"]), 2 / 3)
        self.assertEqual(self.lm.probability("do", ["i"]), 1 / 3)
        self.assertEqual(self.lm.probability("sam", ["am"]), 1 / 2)
        self.assertEqual(self.lm.probability("sam", ["<s>"]), 1 / 3)

    def test_context_denominator_is_unigram_count(self):
        for (ctx, token), count in self.lm.ngram_counts.items():
            expected = count / self.lm.unigram_counts[ctx]
            self.assertEqual(self.lm.probability(token, [ctx]), expected)
        self.assertEqual(len(self.lm.prefix_counts), 0)

    def test_unigram_counts_sum_to_total(self):
        self.assertEqual(sum(self.lm.unigram_counts.values()), self.lm.total_token_count)
        self.assertEqual(self.lm.total_token_count, 20)

    def test_training_lowercases(self):
        self.assertIn("sam", self.lm.vocabulary)
        self.assertNotIn("Sam", self.lm.vocabulary)

    def test_unigram_probability_without_context(self):
        self.assertEqual(self.lm.probability("i"), 3 / 20)
        self.assertEqual(self.lm.probability("unicorn"), 0)

    def test_unseen_ngram_and_context(self):
        self.assertEqual(self.lm.probability("ham", ["i"]), 0)
        self.assertEqual(self.lm.probability("i", ["unicorn"]), 0)

    def test_wrong_context_length(self):
        with self.assertRaises(ValueError):
            self.lm.probability("am", ["sam", "i"])
        with self.assertRaises(ValueError):
            self.lm.probability("am", [])

    def test_repeated_queries_agree(self):
        first = [self.lm.probability("am", ["i"]) for _ in range(3)]
        self.assertEqual(first, [2 / 3] * 3)
        self.assertEqual(self.lm.probability("i"), self.lm.probability("i"))

    def test_cannot_retrain(self):
        with self.assertRaises(RuntimeError):
            self.lm.train(DR_SEUSS)


class TestTrigramModel(unittest.TestCase):
    def setUp(self):
        self.lm = NGramModel(3)
        self.lm.train(DR_SEUSS)

    def test_dr_seuss(self):
        self.assertEqual(self.lm.probability("am", ["sam", "i"]), 1)
        self.assertEqual(self.lm.probability("am", ["<s>", "i"]), 1 / 2)

    def test_start_of_sentence(self):
        self.assertEqual(self.lm.probability("i", ["<s>", "<s>"]), 2 / 3)

    def test_prefix_counts(self):
        self.assertEqual(self.lm.prefix_counts[("<s>", "<s>")], 3)
        self.assertEqual(self.lm.prefix_counts[("<s>", "i")], 2)
        self.assertEqual(sum(self.lm.prefix_counts.values()), sum(self.lm.ngram_counts.values()))

    def test_context_length(self):
        with self.assertRaises(ValueError):
            self.lm.probability("am", ["i"])

    def test_string_context_is_rejected(self):
        with self.assertRaises(TypeError):
            self.lm.probability("am", "si")

    def test_repeated_start_markers(self):
        lm = NGramModel(3)
        lm.train(["<s> " + line for line in DR_SEUSS])
        self.assertNotIn(("<s>", "<s>", "<s>"), lm.ngram_counts)
        self.assertEqual(lm.prefix_counts[("<s>", "<s>")], 3)
        self.assertEqual(lm.probability("i", ["<s>", "<s>"]), 2 / 3)
        self.assertEqual(lm.probability("am", ["<s>", "i"]), 1 / 2)

    def test_dump(self):
        out = io.StringIO()
        self.lm.dump(out)
        text = out.getvalue()
        self.assertIn("N-gram distribution", text)
        self.assertIn("(N-1)-gram distribution", text)
        self.assertIn("('sam', 'i', 'am'): 1", text)


class TestUnigramNGramModel(unittest.TestCase):
    def test_no_context_tables(self):
        lm = NGramModel(1)
        lm.train(DR_SEUSS)
        self.assertEqual(len(lm.ngram_counts), 0)
        self.assertEqual(lm.probability("am"), 2 / 20)
        self.assertEqual(lm.probability("am", []), 2 / 20)
        with self.assertRaises(ValueError):
            lm.probability("am", ["i"])


class TestUntrainedModel(unittest.TestCase):
    def test_queries_are_zero(self):
        lm = NGramModel(2)
        self.assertFalse(lm.is_trained)
        self.assertEqual(lm.probability("i"), 0)
        self.assertEqual(lm.probability("i", ["<s>"]), 0)

    def test_empty_corpus(self):
        lm = NGramModel(3)
        lm.train([])
        self.assertTrue(lm.is_trained)
        self.assertEqual(lm.probability("i"), 0)

    def test_invalid_order(self):
        for n in (0, -1, 2.0):
            with self.assertRaises(ValueError):
                NGramModel(n)


class TestUnigramFrequencyModel(unittest.TestCase):
    def setUp(self):
        self.model = UnigramFrequencyModel(["i", "like", "like", "do", "do"])

    def test_counts(self):
        self.assertEqual(self.model.frequency_of("like"), 2)
        self.assertEqual(self.model.frequency_of("i"), 1)
        self.assertEqual(self.model.frequency_of("cheese"), 0)
        self.assertEqual(self.model.total_word_count, 5)
        self.assertEqual(len(self.model), 3)

    def test_probability(self):
        self.assertEqual(self.model.probability_of("do"), 2 / 5)
        self.assertEqual(self.model.probability_of("cheese"), 0)

    def test_contains(self):
        self.assertTrue(self.model.contains("i"))
        self.assertFalse(self.model.contains("cheese"))
        self.assertIn("do", self.model)
        self.assertNotIn("cheese", self.model.counts)

    def test_empty_corpus(self):
        model = UnigramFrequencyModel([])
        self.assertEqual(model.probability_of("anything"), 0)
        self.assertFalse(model.contains("anything"))

    def test_from_file(self):
        model = UnigramFrequencyModel.from_file(os.path.join(DATA, "words.txt"))
        self.assertEqual(model.frequency_of("the"), 8)
        self.assertEqual(model.total_word_count, 23)
        self.assertTrue(model.contains("spelling"))


if __name__ == "__main__":
    unittest.main()
