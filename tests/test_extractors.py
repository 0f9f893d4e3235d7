"""
Tests for sentence splitting and provision detection.
"""

import pytest

from provision_analyzer.extractors import (
    INSURANCE_KEYWORDS,
    ProvisionDetector,
    build_keyword_pattern,
    split_sentences,
)
from provision_analyzer.models import RunIdentity


@pytest.fixture
def detector():
    return ProvisionDetector()


class TestSplitSentences:

    def test_keeps_terminators_with_sentence(self):
        sentences = split_sentences("First one. Second one! Third one? Tail")
        assert sentences == ["First one.", " Second one!", " Third one?", " Tail"]

    def test_runs_of_terminators_stay_together(self):
        assert split_sentences("Wait... Really?!") == ["Wait...", " Really?!"]

    def test_empty_text(self):
        assert split_sentences("") == []

    def test_abbreviations_are_split(self):
        # Best effort only
        assert split_sentences("Acme Inc. shall pay.") == ["Acme Inc.", " shall pay."]


class TestKeywordPattern:

    def test_case_insensitive(self):
        pattern = build_keyword_pattern(['liability'])
        assert pattern.search("LIABILITY is limited")

    def test_whole_words_only(self):
        pattern = build_keyword_pattern(['claim'])
        assert not pattern.search("The reclaimed land")
        assert pattern.search("Any claim shall")

    def test_keywords_are_escaped(self):
        pattern = build_keyword_pattern(["workers' compensation"])
        assert pattern.search("Provide Workers' Compensation as required")

    def test_requires_keywords(self):
        with pytest.raises(ValueError):
            build_keyword_pattern([])


class TestProvisionDetector:

    def test_default_keywords(self, detector):
        assert detector.keywords == INSURANCE_KEYWORDS

    def test_liability_and_claims_scenario(self, detector, liability_text):
        provisions = detector.detect(liability_text)

        assert [p.text for p in provisions] == [
            "Policy requires liability coverage. The weather was nice.",
            "The weather was nice. Claims must be filed within 30 days.",
        ]
        assert all(p.summary == "" for p in provisions)

    def test_window_includes_both_neighbours(self, detector):
        text = "Preamble here. The insurer pays. Closing words. Unrelated end."
        provisions = detector.detect(text)

        assert len(provisions) == 1
        assert provisions[0].text == "Preamble here. The insurer pays. Closing words."

    def test_match_at_end_has_no_following_sentence(self, detector):
        provisions = detector.detect("Opening. Closing remarks. Indemnify the buyer.")
        assert provisions[0].text == "Closing remarks. Indemnify the buyer."

    def test_adjacent_matches_are_deduplicated(self, detector):
        text = "The insured shall maintain coverage. The insurer shall pay claims. Nothing else."
        provisions = detector.detect(text)

        assert len(provisions) == 1
        assert provisions[0].text == (
            "The insured shall maintain coverage. The insurer shall pay claims."
        )

    def test_separated_matches_may_share_a_neighbour(self, detector):
        text = "Premium is due monthly. Deliveries happen weekly. The deductible is low."
        provisions = detector.detect(text)

        assert [p.text for p in provisions] == [
            "Premium is due monthly. Deliveries happen weekly.",
            "Deliveries happen weekly. The deductible is low.",
        ]

    def test_repeated_sentence_is_deduplicated_against_earlier_window(self, detector):
        text = "Claims are paid. Filler one. Filler two. Filler three. Claims are paid."
        provisions = detector.detect(text)

        assert len(provisions) == 1

    def test_whitespace_is_normalized(self, detector):
        text = "Scope   of work.\n\n  The  supplier\tshall carry insurance.\n Payment terms."
        provisions = detector.detect(text)

        assert provisions[0].text == (
            "Scope of work. The supplier shall carry insurance. Payment terms."
        )
        for provision in provisions:
            assert provision.text
            assert "  " not in provision.text
            assert provision.text == provision.text.strip()

    def test_dedup_compares_normalized_sentence(self, detector):
        text = "Liability is capped.\nThe  insurer\nshall defend. Other matters."
        provisions = detector.detect(text)

        assert len(provisions) == 1

    def test_no_matches(self, detector):
        assert detector.detect("The weather was nice. Nothing to see.") == []

    def test_empty_text(self, detector):
        assert detector.detect("") == []

    def test_detection_is_deterministic(self, detector, liability_text):
        first = [p.text for p in detector.detect(liability_text)]
        second = [p.text for p in detector.detect(liability_text)]
        assert first == second

    def test_identities_are_unique_within_a_run(self, detector, liability_text):
        identity = RunIdentity()
        provisions = detector.detect(liability_text, identity) + detector.detect(liability_text, identity)

        ids = [p.id for p in provisions]
        assert ids == ["prov-1", "prov-2", "prov-3", "prov-4"]

    def test_custom_keywords(self):
        detector = ProvisionDetector(keywords=['weather'])
        provisions = detector.detect("Policy requires liability coverage. The weather was nice.")

        assert len(provisions) == 1
        assert provisions[0].text == "Policy requires liability coverage. The weather was nice."
