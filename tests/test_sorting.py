"""Stable case-insensitive sorting."""

from roadfacets_core.sorting import sort_records


class TestSortRecords:
    def test_stable_ascending(self):
        records = [{"L": "b", "id": 1}, {"L": "a", "id": 2}, {"L": "a", "id": 3}]
        assert sort_records(records, "L") == [
            {"L": "a", "id": 2},
            {"L": "a", "id": 3},
            {"L": "b", "id": 1},
        ]

    def test_stable_descending(self):
        records = [{"L": "a", "id": 1}, {"L": "b", "id": 2}, {"L": "a", "id": 3}]
        assert [r["id"] for r in sort_records(records, "L", ascending=False)] == [2, 1, 3]

    def test_case_insensitive(self, papers):
        labels = [r["document_label"] for r in sort_records(papers, "document_label")]
        assert labels == ["alvarez2019", "Baker2020", "Zhang2021"]

    def test_missing_and_null_sort_as_empty(self):
        records = [{"L": "a", "id": 1}, {"id": 2}, {"L": None, "id": 3}]
        assert [r["id"] for r in sort_records(records, "L")] == [2, 3, 1]

    def test_numbers_compare_as_text(self):
        records = [{"year": 2020}, {"year": "2019"}, {"year": 10}]
        assert [r["year"] for r in sort_records(records, "year")] == [10, "2019", 2020]

    def test_returns_new_list(self):
        records = [{"L": "b"}, {"L": "a"}]
        result = sort_records(records, "L")
        assert result is not records
        assert records == [{"L": "b"}, {"L": "a"}]

    def test_empty(self):
        assert sort_records([], "L") == []
