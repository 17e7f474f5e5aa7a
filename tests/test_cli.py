"""
Tests for the meet-grid command line
"""

import io
import json

import pytest

from meet_grid.cli import main


class TestCli:
    """Tests for cli.main()."""

    def test_main_when_flags_only_then_prints_report(self, capsys):
        # Act
        status = main(["--width", "800", "--height", "600", "--count", "6"])

        # Assert
        assert status == 0
        report = json.loads(capsys.readouterr().out)
        assert report["layout"]["cols"] == 2
        assert report["layout"]["rows"] == 3
        assert len(report["layout"]["items"]) == 6
        assert report["options"]["dimensions"] == {"width": 800.0, "height": 600.0}

    def test_main_when_options_file_then_flags_override(self, tmp_path, capsys):
        # Arrange
        options_file = tmp_path / "options.json"
        options_file.write_text(json.dumps({
            "dimensions": {"width": 1280, "height": 720},
            "count": 4,
            "layoutMode": "gallery",
        }))

        # Act
        status = main([str(options_file), "--mode", "spotlight", "--pinned-index", "2"])

        # Assert
        assert status == 0
        report = json.loads(capsys.readouterr().out)
        assert report["layout"]["layout_mode"] == "spotlight"
        visible = [i for i, item in enumerate(report["layout"]["items"]) if item["visible"]]
        assert visible == [2]

    def test_main_when_stdin_then_reads_options(self, monkeypatch, capsys):
        payload = {"dimensions": {"width": 1280, "height": 720}, "count": 2}
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(payload)))
        assert main(["-"]) == 0
        report = json.loads(capsys.readouterr().out)
        assert report["layout"]["float_index"] == 1

    def test_main_when_bad_ratio_then_exit_one(self, capsys):
        status = main(["--width", "800", "--height", "600", "--count", "3", "--aspect-ratio", "wide"])
        assert status == 1
        assert capsys.readouterr().out == ""

    def test_main_when_unknown_option_key_then_exit_one(self, tmp_path):
        options_file = tmp_path / "options.json"
        options_file.write_text(json.dumps({"dimensions": {"width": 1, "height": 1}, "count": 1, "colour": "red"}))
        assert main([str(options_file)]) == 1

    def test_main_when_file_missing_then_exit_one(self, tmp_path):
        assert main([str(tmp_path / "missing.json")]) == 1

    def test_main_when_required_flags_missing_then_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            main(["--width", "800"])
        assert exc.value.code == 2

    def test_main_when_preview_requested_then_png_written(self, tmp_path, capsys):
        preview = tmp_path / "layout.png"
        status = main(["--width", "640", "--height", "360", "--count", "5", "--preview", str(preview)])
        assert status == 0
        assert preview.exists()
