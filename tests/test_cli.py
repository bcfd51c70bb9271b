"""CLI argument and output behavior tests.

Verifies how ``symbolpicker.cli.main`` resolves resources, priority lists,
and output formats. Config access is redirected to a temporary file.
"""

from __future__ import annotations

import io
import plistlib
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

from symbolpicker import cli, config


def write_tables(root: Path) -> None:
    tables = {
        "name_availability": {"symbols": {"trash.fill": "2019", "folder.fill": "2019", "star": "2019"}},
        "symbol_order": ["trash.fill", "folder.fill"],
        "symbol_search": {"trash.fill": ["delete", "remove"], "folder.fill": ["directory"]},
    }
    for name, payload in tables.items():
        with (root / f"{name}.plist").open("wb") as handle:
            plistlib.dump(payload, handle)


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.resources = self.root / "glyphs"
        self.resources.mkdir()
        write_tables(self.resources)
        patcher = mock.patch("symbolpicker.config.CONFIG_PATH", self.root / "config.json")
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def run_cli(self, *argv: str) -> tuple[int, str, str]:
        stdout = io.StringIO()
        stderr = io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            code = cli.main(["--resources", str(self.resources), *argv])
        return code, stdout.getvalue(), stderr.getvalue()

    def test_default_view_lists_top_symbols_first(self) -> None:
        code, out, _ = self.run_cli("--top", "folder.fill")

        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["folder.fill", "trash.fill", "star"])

    def test_no_top_keeps_catalog_order(self) -> None:
        _, out, _ = self.run_cli("--no-top")

        self.assertEqual(out.splitlines(), ["trash.fill", "folder.fill", "star"])

    def test_configured_top_symbols_used_when_flag_absent(self) -> None:
        config.save_top_symbols(["star"])

        _, out, _ = self.run_cli()

        self.assertEqual(out.splitlines()[0], "star")

    def test_query_prints_ranked_matches_with_limit(self) -> None:
        _, out, _ = self.run_cli("fill", "--limit", "1")

        self.assertEqual(out.splitlines(), ["trash.fill"])

    def test_scores_flag_prints_scores(self) -> None:
        _, out, _ = self.run_cli("del", "--scores")

        self.assertEqual(out.splitlines(), ["   50  trash.fill"])

    def test_no_match_writes_message_to_stderr(self) -> None:
        code, out, err = self.run_cli("zebra")

        self.assertEqual(code, 0)
        self.assertEqual(out, "")
        self.assertEqual(err, "no matching symbols\n")

    def test_grid_output_respects_width(self) -> None:
        _, out, _ = self.run_cli("fill", "--grid", "--width", "48", "--no-color")

        self.assertEqual(out.splitlines(), ["trash.fill              folder.fill"])

    def test_check_reports_availability_exit_code(self) -> None:
        code, out, _ = self.run_cli("--check")
        self.assertEqual((code, out), (0, "available\n"))

        (self.resources / "symbol_search.plist").unlink()
        code, out, _ = self.run_cli("--check")
        self.assertEqual((code, out), (1, "unavailable\n"))

    def test_select_persists_last_selection(self) -> None:
        code, out, _ = self.run_cli("--select", "folder.fill")

        self.assertEqual((code, out), (0, "folder.fill\n"))
        self.assertEqual(config.load_last_selection(), "folder.fill")

    def test_select_unknown_symbol_exits_with_message(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli("--select", "nope")

        self.assertEqual(str(ctx.exception), "Unknown symbol: nope")
        self.assertIsNone(config.load_last_selection())

    def test_missing_resource_directory_exits(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.main(["--resources", str(self.root / "missing")])

        self.assertIn("Resource directory not found", str(ctx.exception))

    def test_invalid_limit_is_rejected_by_argparse(self) -> None:
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            cli.main(["--limit", "0"])

        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
