"""
Tests for the cxxtc command line.
"""

import json

import pytest

from cxxtarget.cxxtc import main


class TestLiteralCommands:

    def test_char(self, capsys):
        assert main(["char", r"'\n'"]) == 0
        assert capsys.readouterr().out == "'\\n'\n"

    def test_char_degraded_warns(self, capsys):
        assert main(["char", "'ab'"]) == 0
        captured = capsys.readouterr()
        assert captured.out == "0\n"
        assert "[WARN]" in captured.err

    def test_char_strict_fails(self, capsys):
        assert main(["char", "'ab'", "--strict"]) == 2
        assert "[ERROR] LiteralError" in capsys.readouterr().err

    def test_string_with_encoding(self, capsys):
        assert main(["string", "'abc'", "-e", "UTF8"]) == 0
        assert capsys.readouterr().out == 'u8"abc"\n'

    def test_string_error(self, capsys):
        assert main(["string", r"'\q'"]) == 2

    def test_debug_reports_encoding(self, capsys):
        main(["string", "'x'", "-e", "bogus", "-D"])
        assert "-> UTF16" in capsys.readouterr().err


class TestOtherCommands:

    def test_scope_exit_codes(self, capsys):
        assert main(["scope", "combined", "lexer"]) == 0
        assert main(["scope", "lexer", "parser"]) == 1
        assert capsys.readouterr().out == "valid\ninvalid\n"

    def test_namespace(self, capsys):
        assert main(["namespace", "  foo :: bar", "::baz  "]) == 0
        assert capsys.readouterr().out == "foo::bar::baz\n"

    def test_thresholds(self, capsys):
        assert main(["thresholds", "--min-switch-alts", "5"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "max_inline_dfa_states=65535",
            "max_switch_case_labels=3000",
            "min_switch_alts=5",
        ]

    def test_attrs(self, tmp_path, capsys):
        p = tmp_path / "expr.json"
        p.write_text(json.dumps({
            "name": "Expr",
            "kind": "lexer",
            "actions": {"lexer": {"namespace": ["calc"]}, "parser": {"members": "x"}},
            "tokens": [{"name": "EOF", "type": -1}, {"name": "PLUS", "type": 4}],
        }), encoding="utf-8")
        assert main(["attrs", str(p), "-e", "UTF32", "--header-ext", ".h"]) == 0
        captured = capsys.readouterr()
        assert captured.out.splitlines() == [
            "recognizer: Expr.cpp",
            "header: Expr.h",
            "namespace: calc",
            "encoding: UTF32 (U)",
            "tokens: PLUS=4",
        ]
        assert "@parser::members" in captured.err

    def test_attrs_missing_file(self, tmp_path, capsys):
        assert main(["attrs", str(tmp_path / "nope.json")]) == 2
        assert "[ERROR]" in capsys.readouterr().err

    @pytest.mark.parametrize("body", [5, [1, 2]])
    def test_attrs_bad_action_body(self, tmp_path, capsys, body):
        p = tmp_path / "g.json"
        p.write_text(json.dumps({
            "name": "G",
            "kind": "parser",
            "actions": {"parser": {"namespace": body}},
        }), encoding="utf-8")
        assert main(["attrs", str(p)]) == 2
        assert "[ERROR]" in capsys.readouterr().err

    def test_attrs_bad_tokens(self, tmp_path, capsys):
        p = tmp_path / "g.json"
        p.write_text(json.dumps({"name": "G", "kind": "parser", "tokens": 5}), encoding="utf-8")
        assert main(["attrs", str(p)]) == 2
        assert "LoaderError" in capsys.readouterr().err
