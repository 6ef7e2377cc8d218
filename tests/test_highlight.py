"""Hover correlation between a record and the facet buttons."""

from roadfacets_core.facets.builder import derive_facets
from roadfacets_core.facets.ordering import OrderingSpec
from roadfacets_core.highlight import correlate, highlighted


class TestCorrelate:
    def test_list_field(self):
        records = [{"document_label": "R", "tags": ["a", "b"]}, {"document_label": "S", "tags": "c"}]
        flags = correlate(records[0], derive_facets(records))
        assert flags[("tags", "a")] is True
        assert flags[("tags", "b")] is True
        assert flags[("tags", "c")] is False

    def test_case_insensitive_and_trimmed(self):
        spec = OrderingSpec.from_dict({
            "groups": [{"name": "", "keys": ["topic"]}],
            "buttonsOrder": {"topic": [" Vision ", "NLP", "robotics"]},
        })
        facets = derive_facets([], spec)
        flags = correlate({"topic": "vision,  nlp"}, facets)
        assert flags == {("topic", " Vision "): True, ("topic", "NLP"): True, ("topic", "robotics"): False}

    def test_absent_key_yields_no_matches(self, papers):
        facets = derive_facets(papers)
        flags = correlate({"document_label": "X"}, facets)
        assert not any(flags.values())

    def test_covers_every_button(self, papers):
        facets = derive_facets(papers)
        assert len(correlate(papers[0], facets)) == sum(len(f) for g in facets for f in g.facets)

    def test_highlighted_in_display_order(self, papers, ordering):
        facets = derive_facets(papers, ordering)
        assert highlighted(papers[2], facets) == [
            ("topic", "vision"),
            ("method", "experiment"),
            ("method", "survey"),
            ("venue", "Conference"),
        ]
