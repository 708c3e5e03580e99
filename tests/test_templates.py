import unittest
from dataclasses import replace

from tenseflow.lexicon import NOUNS, PRONOUNS, TIMES, VERBS_BASE, PronounEntry
from tenseflow.reference import load_reference_tables
from tenseflow.templates import (
    TEMPLATE_SETS,
    SentenceTemplate,
    future_continuous_interrogative,
    future_simple_negative,
    future_simple_wh,
    get_template_set,
    past_continuous_positive,
    past_simple_interrogative,
    past_simple_negative,
    present_continuous_wh,
    present_perfect_continuous_positive,
    present_simple_negative,
    present_simple_positive,
)

SHE = PronounEntry("She", "third", "singular")
THEY = PronounEntry("They", "third", "plural")
ME = PronounEntry("I", "first", "singular")


def _words(example):
    return [t["word"] for t in example["tags"]]


def _tag_of(example, word):
    for t in example["tags"]:
        if t["word"] == word:
            return t["tag"]
    return None


class TemplateLibraryTests(unittest.TestCase):
    def test_present_simple_positive_third_singular(self):
        ex = present_simple_positive(SHE, "book", "morning", "read")
        self.assertEqual(ex["sentence"], "She reads the book every morning.")
        self.assertEqual(ex["tense"], "Present Simple")
        self.assertEqual(ex["polarity"], "positive")
        self.assertEqual(ex["questionType"], "none")
        self.assertEqual(ex["tags"][0]["word"], "She")
        self.assertEqual(ex["tags"][0]["tag"], "PRP")
        self.assertEqual(ex["tags"][1]["word"], "reads")
        self.assertEqual(ex["tags"][1]["tag"], "VBZ")
        self.assertEqual(ex["person"], "third")
        self.assertEqual(ex["number"], "singular")

    def test_present_simple_positive_plural_uses_bare_verb(self):
        ex = present_simple_positive(THEY, "song", "evening", "play")
        self.assertEqual(ex["sentence"], "They play the song every evening.")
        self.assertEqual(ex["tags"][1], {"word": "play", "tag": "VBP", "phonetic": "pleɪ"})

    def test_present_simple_negative_auxiliary(self):
        self.assertEqual(
            present_simple_negative(SHE, "game", "night", "watch")["sentence"],
            "She does not watch the game.",
        )
        ex = present_simple_negative(ME, "game", "night", "watch")
        self.assertEqual(ex["sentence"], "I do not watch the game.")
        self.assertEqual(ex["polarity"], "negative")
        self.assertEqual(_tag_of(ex, "not"), "PART")

    def test_present_continuous_wh(self):
        ex = present_continuous_wh(SHE, "book", "today", "cook", wh="Why")
        self.assertEqual(ex["sentence"], "Why is she cooking?")
        self.assertEqual(ex["questionType"], "WH")
        self.assertEqual(_words(ex), ["Why", "is", "she", "cooking"])
        self.assertEqual(_tag_of(ex, "cooking"), "VBG")
        self.assertEqual(present_continuous_wh(THEY, "book", "today", "cook", wh="What")["sentence"], "What are they cooking?")
        self.assertEqual(_tag_of(present_continuous_wh(THEY, "book", "today", "cook", wh="What"), "What"), "WP")

    def test_wh_defaults_to_first_choice(self):
        self.assertTrue(present_continuous_wh(SHE, "book", "today", "read")["sentence"].startswith("What "))
        self.assertTrue(future_simple_wh(SHE, "book", "today", "read")["sentence"].startswith("When "))

    def test_past_simple_interrogative_ignores_person(self):
        ex = past_simple_interrogative(SHE, "movie", "today", "watch")
        self.assertEqual(ex["sentence"], "Did she watch the movie yesterday?")
        self.assertEqual(ex["questionType"], "interrogative")
        self.assertEqual(past_simple_interrogative(ME, "movie", "today", "watch")["sentence"], "Did I watch the movie yesterday?")

    def test_present_perfect_continuous(self):
        ex = present_perfect_continuous_positive(SHE, "book", "morning", "read")
        self.assertEqual(ex["sentence"], "She has been reading since morning.")
        self.assertEqual(_tag_of(ex, "has"), "VBZ")
        self.assertEqual(_tag_of(ex, "been"), "VBN")
        ex = present_perfect_continuous_positive(THEY, "book", "morning", "read")
        self.assertEqual(ex["sentence"], "They have been reading since morning.")
        self.assertEqual(_tag_of(ex, "have"), "VBP")

    def test_future_simple_negative_is_person_independent(self):
        for pronoun in PRONOUNS:
            ex = future_simple_negative(pronoun, "story", "today", "write")
            self.assertEqual(ex["sentence"], f"{pronoun.word} will not write the story tomorrow.")
            self.assertEqual(ex["polarity"], "negative")

    def test_past_continuous_were_only_for_they_and_we(self):
        expected = {"I": "was", "You": "was", "He": "was", "She": "was", "They": "were", "We": "were"}
        for pronoun in PRONOUNS:
            ex = past_continuous_positive(pronoun, "book", "today", "draw")
            self.assertEqual(ex["tags"][1]["word"], expected[pronoun.word])
            self.assertEqual(ex["sentence"], f"{pronoun.word} {expected[pronoun.word]} drawing when I called.")

    def test_future_simple_wh(self):
        ex = future_simple_wh(THEY, "book", "today", "study", wh="Where")
        self.assertEqual(ex["sentence"], "Where will they study?")
        self.assertEqual(ex["tense"], "Future Simple")
        self.assertEqual(_tag_of(ex, "Where"), "WRB")

    def test_supplementary_templates(self):
        ex = past_simple_negative(SHE, "recipe", "today", "cook")
        self.assertEqual(ex["sentence"], "She did not cook the recipe yesterday.")
        self.assertEqual(ex["tense"], "Past Simple")
        ex = future_continuous_interrogative(ME, "recipe", "today", "play")
        self.assertEqual(ex["sentence"], "Will I be playing tomorrow?")
        self.assertEqual(ex["tense"], "Future Continuous")

    def test_naive_ing_formation_is_kept(self):
        ex = present_continuous_wh(SHE, "book", "today", "write", wh="How")
        self.assertEqual(ex["sentence"], "How is she writeing?")

    def test_extra_attributes_flag(self):
        plain = present_perfect_continuous_positive(SHE, "book", "morning", "read")
        self.assertNotIn("aspect", plain)
        rich = present_perfect_continuous_positive(SHE, "book", "morning", "read", extra_attributes=True)
        self.assertEqual(rich["aspect"], "perfect continuous")
        self.assertEqual(rich["voice"], "active")
        self.assertEqual(rich["timeReference"], "ongoing")

    def test_every_template_uses_known_tags_and_tenses(self):
        for version in ("basic", "extended"):
            tables = load_reference_tables(version)
            for template in TEMPLATE_SETS["v2"]:
                for pronoun in PRONOUNS:
                    for wh in template.wh_words or (None,):
                        ex = template(pronoun, NOUNS[0], TIMES[0], VERBS_BASE[0], wh=wh)
                        self.assertIn(ex["tense"], tables.tense_names)
                        for tag in ex["tags"]:
                            self.assertIn(tag["tag"], tables.tags, f"{template.name}: {tag}")
                            self.assertTrue(tag["phonetic"])

    def test_agreement_follows_selected_pronoun(self):
        singular_form = {
            "present_simple_positive": ("reads", "read"),
            "present_simple_negative": ("does", "do"),
            "present_continuous_wh": ("is", "are"),
            "present_perfect_continuous_positive": ("has", "have"),
        }
        for template in TEMPLATE_SETS["v2"]:
            for pronoun in PRONOUNS:
                ex = template(pronoun, "book", "morning", "read")
                self.assertEqual((ex["person"], ex["number"]), (pronoun.person, pronoun.number))
                if template.name in singular_form:
                    sing, other = singular_form[template.name]
                    words = _words(ex)
                    if pronoun.is_third_singular:
                        self.assertIn(sing, words)
                        self.assertNotIn(other, words)
                    else:
                        self.assertIn(other, words)
                        self.assertNotIn(sing, words)

    def test_template_sets(self):
        self.assertEqual(len(get_template_set("v1")), 8)
        self.assertEqual(len(get_template_set("V2")), 10)
        self.assertEqual(get_template_set("v2")[:8], get_template_set("v1"))
        with self.assertRaises(ValueError):
            get_template_set("v3")

    def test_template_fields_are_closed_vocabularies(self):
        for field, value in (
            ("polarity", "neutral"),
            ("question_type", "yes-no"),
            ("tense", "Past Perfect Continuous"),
            ("aspect", "progressive"),
            ("voice", "middle"),
            ("time_reference", "someday"),
        ):
            with self.subTest(field=field):
                with self.assertRaises(ValueError) as ctx:
                    replace(present_simple_positive, **{field: value})
                self.assertIn(field, str(ctx.exception))

    def test_wh_template_needs_wh_words(self):
        with self.assertRaises(ValueError):
            replace(future_simple_wh, wh_words=())
        again = replace(present_simple_positive, name="copy")
        self.assertIsInstance(again, SentenceTemplate)
        self.assertEqual(again.polarity, "positive")


if __name__ == "__main__":
    unittest.main()
