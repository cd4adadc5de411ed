"""Unit tests for sentence assembly."""

import unittest

from parameterized import parameterized

from udconllu import documents, errors, ids, sentences, tokens
from udconllu.upos import UPOS


class SentenceTest(unittest.TestCase):

    SAMPLE = (
        "1\tThey\tthey\tPRON\tPRP\tCase=Nom|Number=Plur\t2\tnsubj\t"
        "2:nsubj|4:nsubj\t_\n"
        "2\tbuy\tbuy\tVERB\tVBP\t_\t0\troot\t0:root\t_\n"
    )

    MWE = """# sent_id = mwe
# text = Please don't.
1	Please	please	INTJ	UH	_	2	discourse	_	_
2-3	don't	_	_	_	_	_	_	_	_
2	do	do	AUX	VBP	_	0	root	_	_
3	n't	not	PART	RB	_	2	advmod	_	SpaceAfter=No
4	.	.	PUNCT	.	_	2	punct	_	_
"""

    @staticmethod
    def make_empty_sentence() -> sentences.Sentence:
        return sentences.Sentence.builder().build()

    @staticmethod
    def make_singleton_sentence() -> sentences.Sentence:
        return (
            sentences.Sentence.builder()
            .push_meta("# text = Hi")
            .push_token(
                tokens.Token(ids.Single(1), "Hi", "hi", UPOS.INTJ)
            )
            .build()
        )

    def test_empty_sentence(self):
        sentence = self.make_empty_sentence()
        self.assertEqual(len(sentence), 0)
        self.assertEqual(sentence.meta, ())

    def test_singleton_sentence(self):
        sentence = self.make_singleton_sentence()
        self.assertEqual(len(sentence), 1)
        self.assertEqual(sentence[0].form, "Hi")
        self.assertEqual(sentence.meta, ("# text = Hi",))
        self.assertEqual(sentence.metadata, {"text": "Hi"})

    def test_parse_sample(self):
        sentence = sentences.parse_sentence(self.SAMPLE)
        self.assertEqual(len(sentence), 2)
        they = sentence.get_token(ids.Single(1))
        self.assertEqual(they.form, "They")
        self.assertEqual(they.upos, UPOS.PRON)
        self.assertEqual(they.head, ids.Single(2))
        self.assertEqual(sentence.get_token(ids.Single(2)).form, "buy")

    def test_lookup_by_own_id(self):
        sentence = sentences.parse_sentence(self.MWE)
        self.assertEqual(len(sentence), 5)
        for token in sentence:
            self.assertIs(sentence.get_token(token.id), token)

    def test_missing_lookup(self):
        sentence = sentences.parse_sentence(self.SAMPLE)
        self.assertIsNone(sentence.get_token(ids.Single(3)))
        # The root is referenced by HEAD but has no token.
        self.assertIsNone(sentence.get_token(ids.Single(0)))
        self.assertIsNone(sentence.get_token(ids.Sub(1, 1)))

    def test_file_order(self):
        sentence = sentences.parse_sentence(self.MWE)
        self.assertEqual(
            [str(token.id) for token in sentence],
            ["1", "2-3", "2", "3", "4"],
        )
        self.assertEqual(sentence.get_token(ids.Range(2, 3)).form, "don't")

    def test_words(self):
        sentence = sentences.parse_sentence(self.MWE)
        self.assertEqual(sentence.words(), ["Please", "do", "n't", "."])

    def test_metadata(self):
        sentence = sentences.parse_sentence(self.MWE)
        self.assertEqual(sentence.meta[0], "# sent_id = mwe")
        self.assertEqual(sentence.metadata["text"], "Please don't.")

    def test_metadata_without_value(self):
        sentence = sentences.parse_sentence("# newpar\n" + self.SAMPLE)
        self.assertIsNone(sentence.metadata["newpar"])

    def test_interleaved_comments(self):
        lines = self.SAMPLE.splitlines()
        sentence = sentences.parse_sentence(
            "\n".join(["# first", lines[0], "#second", lines[1]])
        )
        self.assertEqual(sentence.meta, ("# first", "#second"))
        self.assertEqual(len(sentence), 2)

    def test_tokens_are_read_only(self):
        sentence = sentences.parse_sentence(self.SAMPLE)
        self.assertIsInstance(sentence.tokens, tuple)
        with self.assertRaises(TypeError):
            sentence[0] = sentence[1]

    def test_update_token(self):
        sentence = sentences.parse_sentence(self.SAMPLE)
        updated = sentence.update_token(
            ids.Single(2), form="sell", lemma="sell"
        )
        self.assertEqual(updated.form, "sell")
        self.assertIs(sentence.get_token(ids.Single(2)), updated)
        self.assertEqual(sentence[1].lemma, "sell")
        self.assertIsNone(sentence.update_token(ids.Single(9), form="x"))

    def test_update_id_leaves_index_stale(self):
        sentence = sentences.parse_sentence(self.SAMPLE)
        sentence.update_token(ids.Single(2), id=ids.Single(5))
        self.assertIsNone(sentence.get_token(ids.Single(5)))
        self.assertEqual(sentence.get_token(ids.Single(2)).id, ids.Single(5))

    def test_duplicate_ids(self):
        sentence = (
            sentences.Sentence.builder()
            .push_token(tokens.Token(ids.Single(1), "first"))
            .push_token(tokens.Token(ids.Single(1), "second"))
            .build()
        )
        self.assertEqual(len(sentence), 2)
        self.assertEqual(sentence.get_token(ids.Single(1)).form, "second")

    def test_dangling_head(self):
        sentence = sentences.parse_sentence(
            "1\tgo\tgo\tVERB\t_\t_\t7\tdep\t7:dep\t_\n"
        )
        self.assertEqual(sentence[0].head, ids.Single(7))

    def test_builder_with(self):
        parsed = sentences.parse_sentence(self.MWE)
        built = (
            sentences.Sentence.builder()
            .with_meta(parsed.meta)
            .with_tokens(parsed.tokens)
            .build()
        )
        self.assertEqual(built, parsed)

    def test_builder_truthiness(self):
        builder = sentences.SentenceBuilder()
        self.assertFalse(builder)
        builder.push_meta("# newpar")
        self.assertTrue(builder)

    def test_roundtrip(self):
        sentence = sentences.parse_sentence(self.MWE)
        self.assertEqual(str(sentence), self.MWE)
        self.assertEqual(
            sentences.Sentence.parse_from_string(str(sentence)), sentence
        )

    def test_blank_lines_ignored(self):
        sentence = sentences.parse_sentence("\n" + self.SAMPLE + "\n\n")
        self.assertEqual(len(sentence), 2)

    def test_error_propagates(self):
        with self.assertRaises(errors.FieldCountError):
            sentences.parse_sentence(self.SAMPLE + "3\tbroken\n")

    @parameterized.expand(
        [
            ("line_separator", "\u2028"),
            ("form_feed", "\x0c"),
            ("next_line", "\x85"),
        ]
    )
    def test_split_on_newline_only(self, _, char):
        buffer = f"1\tA{char}B\ta\t_\t_\t_\t0\troot\t_\t_\n"
        sentence = sentences.parse_sentence(buffer)
        self.assertEqual(len(sentence), 1)
        self.assertEqual(sentence[0].form, f"A{char}B")
        self.assertEqual(
            sentence, next(iter(documents.Doc.from_string(buffer)))
        )

    def test_second_sentence_rejected(self):
        with self.assertRaises(errors.Error) as context:
            sentences.parse_sentence(self.SAMPLE + "\n" + self.SAMPLE)
        self.assertEqual(context.exception.lineno, 4)

    def test_comment_after_blank_rejected(self):
        with self.assertRaises(errors.Error):
            sentences.parse_sentence(self.SAMPLE + "\n# sent_id = 2\n")


if __name__ == "__main__":
    unittest.main()
