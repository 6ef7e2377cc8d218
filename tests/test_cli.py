"""Command line viewer."""

import pytest

from roadfacets_core.cli import build_parser, main


class TestParser:
    def test_filter_pairs(self):
        args = build_parser().parse_args(["table", "dir", "-f", "topic=vision", "-f", "venue = Journal"])
        assert args.filter == [("topic", "vision"), ("venue", "Journal")]

    def test_bad_filter_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["table", "dir", "-f", "novalue"])

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestCommands:
    def test_facets(self, data_dir, capsys):
        main(["facets", str(data_dir)])
        out = capsys.readouterr().out
        assert "topic" in out
        assert "robotics" in out

    def test_table_filtered(self, data_dir, capsys):
        main(["table", str(data_dir), "-f", "topic=vision"])
        out = capsys.readouterr().out
        assert "Baker2020" in out
        assert "alvarez2019" not in out.split("records")[0]
        assert "2 / 3 records" in out

    def test_table_no_match(self, data_dir, capsys):
        main(["table", str(data_dir), "-f", "topic=robotics", "-f", "venue=Journal"])
        out = capsys.readouterr().out
        assert "No records match" in out
        assert "0 / 3 records" in out

    def test_highlight_unknown_label(self, data_dir):
        with pytest.raises(SystemExit) as exc:
            main(["highlight", str(data_dir), "Nobody"])
        assert exc.value.code == 1

    def test_highlight(self, data_dir, capsys):
        main(["highlight", str(data_dir), "Baker2020"])
        assert "vision" in capsys.readouterr().out

    def test_missing_dataset_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["table", str(tmp_path)])
        assert exc.value.code == 1
        assert "Dataset unavailable" in capsys.readouterr().out
