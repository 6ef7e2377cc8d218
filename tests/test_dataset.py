"""Record and Dataset containers."""

import pytest

from roadfacets_core.dataset import Dataset, Record


class TestRecord:
    def test_read_only_mapping(self):
        record = Record({"document_label": "A", "topic": "x"}, position=4)
        assert record["topic"] == "x"
        assert record.get("missing") is None
        assert record.position == 4
        with pytest.raises(TypeError):
            record["topic"] = "y"

    def test_copies_input(self):
        fields = {"document_label": "A"}
        record = Record(fields)
        fields["document_label"] = "B"
        assert record["document_label"] == "A"

    def test_equal_to_plain_dict(self):
        assert Record({"a": 1}) == {"a": 1}
        assert Record({"a": 1}).to_dict() == {"a": 1}

    def test_missing_fields(self):
        record = Record({"document_label": "A", "year": None})
        assert record.missing_fields() == ["year", "title", "institution"]


class TestDataset:
    def test_sequence_protocol(self, dataset):
        assert len(dataset) == 3
        assert dataset[0]["document_label"] == "Zhang2021"
        assert [r.position for r in dataset[1:]] == [1, 2]

    def test_find(self, dataset):
        assert dataset.find("document_label", "Baker2020") is dataset[2]
        assert dataset.find("document_label", "nobody") is None

    def test_from_list_skips_non_objects(self):
        dataset = Dataset.from_list([{"document_label": "A"}, None, [1]])
        assert len(dataset) == 1
