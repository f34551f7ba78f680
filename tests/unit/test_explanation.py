import re

import pytest

from mood_engine.core.config import EngineConfig
from mood_engine.domain.classifier import MoodClassifier
from mood_engine.domain.explanation import ExplanationGenerator
from mood_engine.domain.models import MoodCategory
from mood_engine.exceptions import InvalidArgument

QUOTED = re.compile(r'"([^"]+)"')

SAMPLE_TEXTS = [
    "I'm so excited and thrilled about my promotion!",
    "Feeling anxious about work presentation tomorrow. Keep overthinking what could go wrong.",
    "Had an argument with my partner about money. Feeling frustrated and misunderstood.",
    "Tried meditation today for 10 minutes. It was harder than I thought but I felt calmer.",
    "I am not happy today and I don't feel calm either",
    "The weather was cloudy all afternoon",
]


class TestExplanationGenerator:

    @pytest.fixture(autouse=True)
    def _explainer(self, lexicon):
        self.explainer = ExplanationGenerator(lexicon, EngineConfig())

    def test_cites_matched_cues(self):
        text = "I'm so excited and thrilled about my promotion!"

        explanation = self.explainer.explain(text, MoodCategory.EXCITED)

        assert QUOTED.findall(explanation) == ["thrilled", "excited"]
        assert "excited" in explanation
        assert "anticipation and enthusiasm" in explanation

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_never_quotes_what_is_not_in_the_text(self, text):
        for mood in MoodCategory:
            for quoted in QUOTED.findall(self.explainer.explain(text, mood)):
                assert quoted.lower() in text.lower()

    def test_quotes_original_casing(self):
        explanation = self.explainer.explain("I am SO HAPPY right now", MoodCategory.HAPPY)

        assert '"HAPPY"' in explanation

    def test_at_most_three_cues(self):
        text = "happy joyful delighted cheerful glad day"

        explanation = self.explainer.explain(text, "happy")

        assert QUOTED.findall(explanation) == ["happy", "joyful", "delighted"]

    def test_single_cue_wording(self):
        explanation = self.explainer.explain("Such a peaceful evening by the lake", MoodCategory.CALM)

        assert 'the cue "peaceful" points to' in explanation

    def test_repeated_phrase_cited_once(self):
        explanation = self.explainer.explain("sad, sad, sad and lonely", MoodCategory.SAD)

        assert QUOTED.findall(explanation) == ["sad", "lonely"]

    def test_negated_cue_is_not_evidence(self):
        explanation = self.explainer.explain("I am not happy today", MoodCategory.HAPPY)

        assert QUOTED.findall(explanation) == []
        assert explanation == "No specific happy cues were detected in this entry."

    def test_default_mood_fallback(self):
        explanation = self.explainer.explain("The weather was cloudy all afternoon", "content")

        assert '"' not in explanation
        assert "neutral default" in explanation

    def test_short_text(self):
        explanation = self.explainer.explain("ok", MoodCategory.HAPPY)

        assert explanation == "There is not enough text yet to explain a happy reading."

    def test_label_string_is_accepted(self):
        text = "I'm so excited and thrilled about my promotion!"

        assert self.explainer.explain(text, " Excited ") == self.explainer.explain(text, MoodCategory.EXCITED)

    @pytest.mark.parametrize("mood", ["hungry", "", None, 3])
    def test_unknown_mood_fails_fast(self, mood):
        with pytest.raises(InvalidArgument):
            self.explainer.explain("I'm so excited and thrilled", mood)

    def test_max_cues_setting(self, lexicon):
        explainer = ExplanationGenerator(lexicon, EngineConfig(explanation_max_cues=1))

        explanation = explainer.explain("I'm so excited and thrilled about my promotion!", "excited")

        assert QUOTED.findall(explanation) == ["thrilled"]

    # ========================================================================
    # NEGATED CUES
    # ========================================================================

    def test_negated_cue_explains_its_opposite(self):
        explanation = self.explainer.explain("I am not happy today", MoodCategory.SAD)

        assert explanation == (
            'This entry reads as sad: the negated cue "happy" points to low mood, loss or loneliness.'
        )

    def test_negated_sad_is_not_the_neutral_default(self):
        explanation = self.explainer.explain("I am not sad anymore, honestly", MoodCategory.CONTENT)

        assert "neutral default" not in explanation
        assert 'the negated cue "sad"' in explanation

    def test_direct_cue_outranks_negated_cue(self):
        explanation = self.explainer.explain("I feel lonely and not happy", MoodCategory.SAD)

        assert 'the cues "lonely" and negated "happy" point to' in explanation

    def test_other_cues_are_not_a_neutral_default(self):
        explanation = self.explainer.explain("I am so happy right now", MoodCategory.CONTENT)

        assert explanation == "No specific content cues were detected in this entry."

    def test_negated_cue_ignored_without_transfer(self, lexicon):
        explainer = ExplanationGenerator(lexicon, EngineConfig(negation_transfer=0.0))

        explanation = explainer.explain("I am not happy today", MoodCategory.SAD)

        assert explanation == "No specific sad cues were detected in this entry."

    @pytest.mark.parametrize("text", ["I am not happy today", "I am not sad anymore, honestly"])
    def test_explanation_agrees_with_classification(self, lexicon, text):
        result = MoodClassifier(lexicon, EngineConfig()).classify(text)

        explanation = self.explainer.explain(text, result.mood)

        assert explanation.startswith(f"This entry reads as {result.mood.value}:")

    # ========================================================================
    # ARGUMENT TYPES
    # ========================================================================

    @pytest.mark.parametrize("text", [12345678901, b"I am very happy today", ["happy"]])
    def test_non_string_text(self, text):
        with pytest.raises(InvalidArgument):
            self.explainer.explain(text, MoodCategory.HAPPY)

    def test_none_text_reads_as_empty(self):
        assert self.explainer.explain(None, "happy") == (
            "There is not enough text yet to explain a happy reading."
        )
