"""Tests for the contextual keyword passes."""

from kwx.context import add_acronyms, add_places, add_topics, augment
from kwx.models import MatchedKeyword


class TestAcronyms:
    """Test the acronym/topic vocabulary pass."""

    def test_adds_on_substring(self):
        found = {}
        add_acronyms(found, "funded by epsrc grant", [("epsrc", "EPSRC", "u2")])
        assert list(found) == [MatchedKeyword("EPSRC", "u2")]
        assert list(found)[0].topic == ""

    def test_no_hit(self):
        found = {}
        add_acronyms(found, "funded by nerc", [("epsrc", "EPSRC", "u2")])
        assert found == {}

    def test_skips_uri_already_matched(self):
        found = {MatchedKeyword("Engineering Research Council", "u2", ""): None}
        add_acronyms(found, "funded by epsrc grant", [("epsrc", "EPSRC", "u2")])
        assert [m.label for m in found] == ["Engineering Research Council"]

    def test_skips_uri_added_in_same_pass(self):
        found = {}
        atx = [("epsrc", "EPSRC", "u2"), ("grant", "EPSRC grant", "u2")]
        add_acronyms(found, "funded by epsrc grant", atx)
        assert [m.label for m in found] == ["EPSRC"]


class TestPlaces:
    """Test the geographic vocabulary pass."""

    def test_first_pattern_wins_per_uri(self):
        found = {}
        country = [("norge", "Norway", "geo1"), ("norway", "Norway (en)", "geo1")]
        add_places(found, "fieldwork in norway and norge", country)
        assert [m.label for m in found] == ["Norway"]
        assert list(found)[0].topic is None

    def test_ignores_uris_from_other_passes(self):
        found = {MatchedKeyword("EPSRC", "u2", ""): None}
        add_places(found, "epsrc headquarters", [("epsrc", "EPSRC HQ", "u2")])
        assert [m.label for m in found] == ["EPSRC", "EPSRC HQ"]


class TestTopics:
    """Test the topic cross-reference pass."""

    def test_topic_substring(self):
        found = {MatchedKeyword("groundwater", "k1", "Hydrogeology"): None}
        euroscivoc = [("", "geology", "esv1"), ("", "petrology", "esv2")]
        add_topics(found, euroscivoc)
        assert MatchedKeyword("geology", "esv1") in found
        assert MatchedKeyword("petrology", "esv2") not in found

    def test_no_uri_guard(self):
        found = {MatchedKeyword("groundwater", "k1", "hydrogeology"): None}
        euroscivoc = [("", "hydrogeology", "esv1"), ("", "geology", "esv1")]
        add_topics(found, euroscivoc)
        assert [m.label for m in found] == ["groundwater", "hydrogeology", "geology"]

    def test_keywords_without_topic(self):
        found = {MatchedKeyword("Norway", "geo1"): None}
        add_topics(found, [("", "norway", "esv1")])
        assert len(found) == 1


class TestAugment:
    """Test the pass ordering."""

    def test_skips_missing_vocabularies(self):
        found = {}
        augment(found, "epsrc in norway")
        assert found == {}

    def test_runs_all_passes(self):
        found = {MatchedKeyword("groundwater", "k1", "hydrogeology"): None}
        augment(
            found,
            "groundwater study in norway funded by epsrc",
            atx=[("epsrc", "EPSRC", "u2")],
            country=[("norway", "Norway", "geo1")],
            euroscivoc=[("", "hydrogeology", "esv1")],
        )
        assert [m.uri for m in found] == ["k1", "u2", "geo1", "esv1"]
