from __future__ import annotations

import unittest
from unittest import mock

from symbolpicker.catalog import CatalogLoader
from symbolpicker.picker import SymbolPicker
from symbolpicker.resources import InMemoryResourceProvider


def _loader() -> CatalogLoader:
    return CatalogLoader(
        InMemoryResourceProvider(
            availability=["trash.fill", "folder.fill", "star.fill"],
            order=["trash.fill", "folder.fill", "star.fill"],
            tokens={"trash.fill": ["delete", "remove"], "folder.fill": ["directory"]},
        )
    )


class SymbolPickerTests(unittest.TestCase):
    def test_default_view_surfaces_top_symbols_first(self) -> None:
        picker = SymbolPicker(_loader(), top_symbols=["folder.fill"])
        picker.load()

        self.assertEqual(picker.visible_names(), ["folder.fill", "trash.fill", "star.fill"])
        self.assertEqual(picker.message, "")

    def test_query_ranks_full_catalog_ignoring_priority(self) -> None:
        picker = SymbolPicker(_loader(), top_symbols=["star.fill"])
        picker.load()

        picker.set_query("fill")

        self.assertEqual(picker.visible_names(), ["trash.fill", "folder.fill", "star.fill"])

    def test_clearing_query_restores_prioritized_view(self) -> None:
        picker = SymbolPicker(_loader(), top_symbols=["star.fill"])
        picker.load()
        picker.set_query("del")
        self.assertEqual(picker.visible_names(), ["trash.fill"])

        picker.set_query("  ")

        self.assertEqual(picker.visible_names(), ["star.fill", "trash.fill", "folder.fill"])

    def test_no_match_sets_empty_state_message(self) -> None:
        picker = SymbolPicker(_loader())
        picker.load()

        picker.set_query("zebra")

        self.assertEqual(picker.visible_symbols, [])
        self.assertEqual(picker.message, " no matching symbols")

    def test_unavailable_catalog_reports_message(self) -> None:
        picker = SymbolPicker(CatalogLoader(InMemoryResourceProvider()))
        picker.load()

        self.assertTrue(picker.loaded)
        self.assertEqual(picker.visible_symbols, [])
        self.assertEqual(picker.message, " symbols unavailable")

    def test_select_updates_selection_dismisses_and_notifies(self) -> None:
        on_select = mock.Mock()
        picker = SymbolPicker(_loader(), selection="star.fill", on_select=on_select)
        picker.load()
        self.assertTrue(picker.is_selected("star.fill"))

        self.assertTrue(picker.select("folder.fill"))

        self.assertEqual(picker.selection, "folder.fill")
        self.assertTrue(picker.is_selected("folder.fill"))
        self.assertTrue(picker.dismissed)
        on_select.assert_called_once_with("folder.fill")

    def test_select_rejects_unknown_names(self) -> None:
        on_select = mock.Mock()
        picker = SymbolPicker(_loader(), on_select=on_select)
        picker.load()

        self.assertFalse(picker.select("not.a.symbol"))

        self.assertEqual(picker.selection, "")
        self.assertFalse(picker.dismissed)
        on_select.assert_not_called()


if __name__ == "__main__":
    unittest.main()
