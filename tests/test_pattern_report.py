# CUI // SP-CTI
"""Tests for tools/jsx_migration/pattern_report.py - AST file in, report out."""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from tools.jsx_migration.code_synthesizer import synthesize
from tools.jsx_migration.pattern_detector import detect
from tools.jsx_migration.pattern_report import build_report, main


@pytest.fixture
def ast_file(tmp_path, babel):
    tree = babel.program(
        babel.const("Enhanced", babel.call("withAuth", "Profile")),
        babel.container(babel.method_call("items", "map", babel.arrow())),
    )
    path = tmp_path / "Profile.ast.json"
    path.write_text(json.dumps(tree), encoding="utf-8")
    return path


class TestBuildReport:
    def test_report_sections(self, babel):
        report = build_report(babel.program(babel.call("memo", "Card")))
        assert report["catalog"]["total"] == 1
        assert list(report["skeletons"]) == ["MemoizationMarker"]
        assert report["guide"].startswith("# JSX Pattern Conversion Guide")

    def test_report_is_json_serializable(self, babel):
        report = build_report(babel.program(babel.method_call(babel.arrow(), "map", babel.arrow())))
        data = json.loads(json.dumps(report))
        assert data["catalog"]["diagnostics"][0]["severity"] == "warning"


class TestMain:
    def test_prints_guide(self, ast_file, capsys):
        assert main(["--ast-file", str(ast_file)]) == 0
        out = capsys.readouterr().out
        assert "## Higher-Order Components (HOCs)" in out
        assert "## List Rendering" in out

    def test_prints_skeletons(self, ast_file, capsys):
        assert main(["--ast-file", str(ast_file), "--skeletons"]) == 0
        out = capsys.readouterr().out
        assert "mixin AuthMixin" in out
        assert "itemCount: items.length" in out

    def test_json_output(self, ast_file, capsys):
        assert main(["--ast-file", str(ast_file), "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["catalog"]["total"] == 2
        assert set(data["skeletons"]) == {"WrappedComponent", "IterationRendering"}
        assert data["ast_file"] == str(ast_file)

    def test_writes_guide_to_output(self, ast_file, tmp_path, capsys):
        out_path = tmp_path / "docs" / "Profile.migration.md"
        assert main(["--ast-file", str(ast_file), "--output", str(out_path)]) == 0
        assert out_path.read_text(encoding="utf-8").startswith("# JSX Pattern Conversion Guide")
        assert "guide written to" in capsys.readouterr().out

    def test_custom_config(self, ast_file, tmp_path, capsys):
        config = tmp_path / "jsx.yaml"
        config.write_text("jsx_patterns:\n  wrapper_suffix: Behavior\n", encoding="utf-8")
        assert main(["--ast-file", str(ast_file), "--config", str(config), "--skeletons"]) == 0
        assert "mixin AuthBehavior" in capsys.readouterr().out

    def test_empty_tree_skeletons(self, tmp_path, babel, capsys):
        path = tmp_path / "empty.json"
        path.write_text(json.dumps(babel.program()), encoding="utf-8")
        assert main(["--ast-file", str(path), "--skeletons"]) == 0
        assert "No JSX patterns detected" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main(["--ast-file", str(tmp_path / "nope.json")]) == 1
        assert "[ERROR]" in capsys.readouterr().err

    def test_malformed_json(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        assert main(["--ast-file", str(path)]) == 1
        assert "[ERROR]" in capsys.readouterr().err

    def test_invalid_utf8_file(self, tmp_path, capsys):
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"type": "File", "x": "\xff\xfe"}')
        assert main(["--ast-file", str(path)]) == 1
        assert "[ERROR]" in capsys.readouterr().err

    def test_invalid_utf8_config(self, ast_file, tmp_path, capsys):
        config = tmp_path / "bad.yaml"
        config.write_bytes(b"jsx_patterns:\n  wrapper_prefix: \xff\n")
        assert main(["--ast-file", str(ast_file), "--config", str(config)]) == 1
        assert "[ERROR]" in capsys.readouterr().err

    def test_skeletons_match_rendered_set(self, ast_file, capsys):
        tree = json.loads(ast_file.read_text(encoding="utf-8"))
        assert main(["--ast-file", str(ast_file), "--skeletons"]) == 0
        assert capsys.readouterr().out == synthesize(detect(tree)).render() + "\n"
