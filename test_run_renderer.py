"""Tests for the run_renderer command line script."""

import json
import sys

import run_renderer


def _write_document(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text(json.dumps({
        "type": "root",
        "children": [
            {"type": "element", "tag": "p", "attributes": {"style": "color: red"},
             "children": [{"type": "text", "text": "The quick brown fox"}]},
        ],
    }))
    return path


def test_renders_html_report(tmp_path, monkeypatch):
    document = _write_document(tmp_path)
    output = tmp_path / "out.json"
    monkeypatch.setattr(sys, "argv", ["run_renderer.py", str(document), "--strip-styles", "-o", str(output)])

    run_renderer.main()

    report = json.loads(output.read_text(encoding="utf-8"))
    assert report == [{"file": "doc.json", "status": "success", "html": "<p>The quick brown fox</p>"}]


def test_plain_text_report_with_max_length(tmp_path, monkeypatch):
    document = _write_document(tmp_path)
    output = tmp_path / "out.json"
    monkeypatch.setattr(sys, "argv", [
        "run_renderer.py", str(document), "--text", "--max-length", "10", "-o", str(output),
    ])

    run_renderer.main()

    report = json.loads(output.read_text(encoding="utf-8"))
    assert report == [{"file": "doc.json", "status": "success", "text": "The quick…"}]


def test_missing_file_is_reported_as_error(tmp_path, monkeypatch):
    output = tmp_path / "out.json"
    monkeypatch.setattr(sys, "argv", ["run_renderer.py", str(tmp_path / "missing.json"), "-o", str(output)])

    run_renderer.main()

    report = json.loads(output.read_text(encoding="utf-8"))
    assert len(report) == 1
    assert report[0]["file"] == "missing.json"
    assert report[0]["status"] == "error"
    assert report[0]["error"] == "DocumentLoadError"
