"""Data sources and dataset / ordering loading."""

import json
import logging
from unittest.mock import MagicMock

import pytest
import requests

from roadfacets_core.errors import DatasetUnavailable, SoftDataUnavailable, SourceReadError
from roadfacets_core.storage import (
    FileSource,
    HttpSource,
    MemorySource,
    SourceConfig,
    load_dataset,
    load_ordering,
    read_ordering,
    source_for,
)


def _response(status, body=b""):
    resp = MagicMock()
    resp.status_code = status
    resp.content = body
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status}")
    return resp


class TestLoadDataset:
    def test_loads_records_in_order(self, source):
        dataset = load_dataset(source)
        assert [r["document_label"] for r in dataset] == ["Zhang2021", "alvarez2019", "Baker2020"]
        assert dataset[1].position == 1

    def test_missing_document(self):
        with pytest.raises(DatasetUnavailable):
            load_dataset(MemorySource())

    def test_invalid_json(self):
        with pytest.raises(DatasetUnavailable, match="invalid JSON"):
            load_dataset(MemorySource({"data.json": b"[{"}))

    def test_not_an_array(self):
        src = MemorySource()
        src.write_json("data.json", {"records": []})
        with pytest.raises(DatasetUnavailable, match="JSON array"):
            load_dataset(src)

    def test_empty_array_is_fine(self):
        src = MemorySource()
        src.write_json("data.json", [])
        assert len(load_dataset(src)) == 0

    def test_non_object_rows_skipped(self, caplog):
        src = MemorySource()
        src.write_json("data.json", [{"document_label": "A", "year": 1, "title": "t", "institution": "i"}, 3, "x"])
        with caplog.at_level(logging.WARNING):
            dataset = load_dataset(src)
        assert len(dataset) == 1
        assert "malformed" in caplog.text

    def test_missing_fixed_fields_tolerated(self, caplog):
        src = MemorySource()
        src.write_json("data.json", [{"document_label": "A", "topic": "x"}])
        with caplog.at_level(logging.WARNING):
            dataset = load_dataset(src)
        assert len(dataset) == 1
        assert "year" in caplog.text

    def test_read_failure(self):
        src = MagicMock(spec=MemorySource)
        src.read.side_effect = SourceReadError("data.json", "disk on fire")
        src.describe.return_value = "data.json"
        with pytest.raises(DatasetUnavailable, match="disk on fire"):
            load_dataset(src)


class TestLoadOrdering:
    def test_loads_spec(self, source):
        ordering = load_ordering(source)
        assert [g.name for g in ordering.groups] == ["Content", "Approach"]

    def test_absent_is_none(self):
        assert load_ordering(MemorySource()) is None

    @pytest.mark.parametrize("raw", [b"{not json", b"[]", b'{"groups": 5}', b"\xff\xfe"])
    def test_broken_document_is_none(self, raw, caplog):
        with caplog.at_level(logging.WARNING):
            assert load_ordering(MemorySource({"ordering.json": raw})) is None
        assert "Falling back" in caplog.text

    def test_read_ordering_raises(self):
        with pytest.raises(SoftDataUnavailable):
            read_ordering(MemorySource({"ordering.json": b"{"}))


class TestFileSource:
    def test_reads_existing_file(self, data_dir):
        src = FileSource(SourceConfig(base=str(data_dir)))
        assert json.loads(src.read("data.json"))[0]["document_label"] == "Zhang2021"
        assert src.exists("data.json")

    def test_missing_file_is_none(self, data_dir):
        src = FileSource(SourceConfig(base=str(data_dir)))
        assert src.read("ordering.json") is None
        assert load_ordering(src) is None


class TestHttpSource:
    def test_reads_relative_to_base(self):
        session = MagicMock()
        session.get.return_value = _response(200, b"[]")
        src = HttpSource(SourceConfig(base="https://example.org/box/", timeout=5), session=session)
        assert src.read("data.json") == b"[]"
        session.get.assert_called_once_with("https://example.org/box/data.json", timeout=5)

    def test_not_found_is_none(self):
        session = MagicMock()
        session.get.return_value = _response(404)
        src = HttpSource(SourceConfig(base="https://example.org"), session=session)
        assert src.read("ordering.json") is None

    def test_server_error_raises(self):
        session = MagicMock()
        session.get.return_value = _response(500)
        src = HttpSource(SourceConfig(base="https://example.org"), session=session)
        with pytest.raises(SourceReadError, match="HTTP 500"):
            src.read("data.json")

    def test_transport_error_raises(self):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("refused")
        src = HttpSource(SourceConfig(base="https://example.org"), session=session)
        with pytest.raises(SourceReadError):
            src.read("data.json")

    def test_ordering_failure_falls_back(self):
        session = MagicMock()
        session.get.side_effect = requests.Timeout("slow")
        src = HttpSource(SourceConfig(base="https://example.org"), session=session)
        assert load_ordering(src) is None

    def test_dataset_failure_is_fatal(self):
        session = MagicMock()
        session.get.return_value = _response(503)
        src = HttpSource(SourceConfig(base="https://example.org"), session=session)
        with pytest.raises(DatasetUnavailable):
            load_dataset(src)

    def test_injected_session_not_closed(self):
        session = MagicMock()
        HttpSource(session=session).close()
        session.close.assert_not_called()


class TestSourceFor:
    def test_url_gives_http_source(self):
        assert isinstance(source_for("https://example.org"), HttpSource)

    def test_path_gives_file_source(self, tmp_path):
        assert isinstance(source_for(str(tmp_path)), FileSource)
