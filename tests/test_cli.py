"""
Tests for the epub_to_html command-line interface.

Run with: pytest tests/test_cli.py -v
"""

import json

import pytest

import epub_to_html


@pytest.fixture
def epub_file(image_epub, tmp_path):
    path = tmp_path / "book.epub"
    path.write_bytes(image_epub.getvalue())
    return path


class TestMain:
    """Tests for epub_to_html.main()."""

    def test_converts(self, epub_file, tmp_path, capsys):
        output = tmp_path / "book.html"
        assert epub_to_html.main([str(epub_file), str(output)]) == 0
        assert "data:image/jpeg;base64," in output.read_text(encoding="utf-8")
        assert "Done!" in capsys.readouterr().out

    def test_missing_input(self, tmp_path, capsys):
        assert epub_to_html.main([str(tmp_path / "missing.epub")]) == 1
        assert "missing.epub" in capsys.readouterr().err

    def test_metadata(self, epub_file, capsys):
        assert epub_to_html.main([str(epub_file), "--metadata"]) == 0
        metadata = json.loads(capsys.readouterr().out)
        assert metadata["title"] == "Test Book"
        assert metadata["package_path"] == "OEBPS/content.opf"

    def test_config_file(self, epub_file, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"rewrite": {"separator": "<hr class=\"chapter\"/>"}}))
        output = tmp_path / "book.html"

        assert epub_to_html.main([str(epub_file), str(output), "--config", str(config_path)]) == 0
        assert '<hr class="chapter"/>' in output.read_text(encoding="utf-8")

    def test_bad_config(self, epub_file, tmp_path, capsys):
        config_path = tmp_path / "config.ini"
        config_path.write_text("[x]")
        assert epub_to_html.main([str(epub_file), "--config", str(config_path)]) == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_usage_error(self):
        with pytest.raises(SystemExit) as excinfo:
            epub_to_html.main([])
        assert excinfo.value.code == 2
