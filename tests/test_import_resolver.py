"""
Unit Tests for import path resolution
"""
import logging

from filfox_verifier.import_resolver import (
    filename_candidates,
    path_context_matches,
    resolve_import_path,
    resolve_relative_import,
    resolve_remapped_import,
)
from filfox_verifier.remappings import parse_remappings
from conftest import make_files


class TestResolveImportPath:

    def test_direct_hit(self):
        files = make_files({"src/Token.sol": "", "src/Main.sol": ""})

        resolved = resolve_import_path("src/Token.sol", "src/Main.sol", [], files)

        assert resolved.path == "src/Token.sol"
        assert resolved.source is files["src/Token.sol"]

    def test_relative_parent_import(self):
        files = make_files({"src/a/Main.sol": "", "src/b/Helper.sol": ""})

        resolved = resolve_import_path("../b/Helper.sol", "src/a/Main.sol", [], files)

        assert resolved.path == "src/b/Helper.sol"

    def test_relative_sibling_import_from_root_file(self):
        files = make_files({"A.sol": "", "B.sol": ""})

        assert resolve_import_path("./B.sol", "A.sol", [], files).path == "B.sol"

    def test_remapped_import_uses_longest_prefix(self):
        files = make_files({"lib/a/utils/Math.sol": "", "lib/b/Math.sol": ""})
        rules = parse_remappings(["@oz/=lib/a/", "@oz/utils/=lib/b/"])

        resolved = resolve_import_path("@oz/utils/Math.sol", "src/Main.sol", rules, files)

        assert resolved.path == "lib/b/Math.sol"

    def test_filename_fallback(self):
        files = make_files({"lib/forge-std/src/Test.sol": ""})

        resolved = resolve_import_path("forge-std/Test.sol", "test/Main.t.sol", [], files)

        assert resolved.path == "lib/forge-std/src/Test.sol"

    def test_unresolved_returns_none_and_warns(self, caplog):
        files = make_files({"src/Main.sol": ""})

        with caplog.at_level(logging.WARNING):
            resolved = resolve_import_path("nonexistent/Thing.sol", "src/Main.sol", [], files)

        assert resolved is None
        assert "nonexistent/Thing.sol" in caplog.text
        assert "src/Main.sol" in caplog.text


class TestHelpers:

    def test_relative_normalizes_dot_segments(self):
        assert resolve_relative_import("./../b/./C.sol", "src/a/Main.sol") == "src/b/C.sol"

    def test_remapped_without_rule_is_none(self):
        assert resolve_remapped_import("src/Main.sol", parse_remappings(["@oz/=lib/oz/"])) is None

    def test_context_allows_one_mismatched_segment(self):
        assert path_context_matches("token/ERC20/ERC20.sol", "lib/oz/token/ERC20.sol")
        assert not path_context_matches("governance/utils/ERC20.sol", "lib/oz/token/ERC20.sol")

    def test_candidates_keep_iteration_order(self):
        files = make_files({
            "lib/x/token/ERC20.sol": "",
            "lib/y/token/ERC20.sol": "",
            "lib/z/other/IERC20.sol": "",
        })

        assert filename_candidates("token/ERC20.sol", files) == [
            "lib/x/token/ERC20.sol",
            "lib/y/token/ERC20.sol",
        ]
