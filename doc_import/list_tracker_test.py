# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================


import unittest

from doc_import.list_tracker import ListStateTracker, bullet_style_for
from shared.blog_doc import GlyphType, ListDefinition, ListLevel, ListType

LISTS = {
    "bullets": ListDefinition(
        {
            0: ListLevel(GlyphType.OTHER, "●"),
            1: ListLevel(GlyphType.OTHER, "○"),
        }
    ),
    "numbers": ListDefinition({0: ListLevel(GlyphType.DECIMAL)}),
    "letters": ListDefinition({0: ListLevel(GlyphType.ALPHA)}),
}

DISC_OPEN = '<ul style="list-style-type:disc; margin-left:0px">'
CIRCLE_OPEN = '<ul style="list-style-type:circle; margin-left:0px">'


class ListStateTrackerTest(unittest.TestCase):

    def setUp(self):
        self.tracker = ListStateTracker()

    def test_first_item_opens_list(self):
        opening = self.tracker.on_list_item("bullets", 0, LISTS)
        self.assertEqual(opening.tags, DISC_OPEN + "<li>")
        self.assertEqual(opening.list_type, ListType.UNORDERED)
        self.assertEqual(self.tracker.state.open_type, ListType.UNORDERED)
        self.assertEqual(self.tracker.state.open_nesting_level, 0)

    def test_same_list_continues(self):
        self.tracker.on_list_item("bullets", 0, LISTS)
        self.assertEqual(self.tracker.on_list_item("bullets", 0, LISTS).tags, "<li>")

    def test_nesting_level_change_closes_and_reopens(self):
        self.tracker.on_list_item("bullets", 0, LISTS)
        self.assertEqual(
            self.tracker.on_list_item("bullets", 1, LISTS).tags,
            "</ul>" + CIRCLE_OPEN + "<li>",
        )
        self.assertEqual(
            self.tracker.on_list_item("bullets", 0, LISTS).tags,
            "</ul>" + DISC_OPEN + "<li>",
        )

    def test_type_change_closes_and_reopens(self):
        self.tracker.on_list_item("bullets", 0, LISTS)
        opening = self.tracker.on_list_item("numbers", 0, LISTS, indent=36)
        self.assertEqual(
            opening.tags,
            '</ul><ol type="1" style="list-style-type:decimal; margin-left:36px"><li>',
        )
        self.assertEqual(opening.list_type, ListType.ORDERED)
        self.assertEqual(self.tracker.on_non_list_paragraph(), "</ol>")

    def test_alpha_list_is_unordered(self):
        opening = self.tracker.on_list_item("letters", 0, LISTS)
        self.assertEqual(
            opening.tags, '<ul style="list-style-type:lower-alpha; margin-left:0px"><li>'
        )

    def test_unknown_list_defaults_to_disc(self):
        opening = self.tracker.on_list_item("missing", 3, LISTS)
        self.assertEqual(opening.tags, DISC_OPEN + "<li>")

    def test_non_list_paragraph_closes_open_list_once(self):
        self.tracker.on_list_item("bullets", 0, LISTS)
        self.assertEqual(self.tracker.on_non_list_paragraph(), "</ul>")
        self.assertEqual(self.tracker.on_non_list_paragraph(), "")
        self.assertFalse(self.tracker.state.is_open)
        self.assertEqual(self.tracker.state.open_nesting_level, -1)

    def test_flush(self):
        self.tracker.on_list_item("numbers", 0, LISTS)
        self.assertEqual(self.tracker.flush(), "</ol>")

    def test_flush_without_open_list(self):
        self.assertEqual(self.tracker.flush(), "")

    def test_flush_twice_is_an_error(self):
        self.tracker.flush()
        with self.assertRaises(RuntimeError):
            self.tracker.flush()


class BulletStyleTest(unittest.TestCase):

    def test_glyph_types(self):
        self.assertEqual(bullet_style_for(ListLevel(GlyphType.DECIMAL)), "decimal")
        self.assertEqual(bullet_style_for(ListLevel(GlyphType.ALPHA)), "lower-alpha")
        self.assertEqual(bullet_style_for(ListLevel(GlyphType.ROMAN)), "lower-roman")
        self.assertEqual(bullet_style_for(ListLevel(GlyphType.UPPER_ROMAN)), "upper-roman")

    def test_symbols(self):
        self.assertEqual(bullet_style_for(ListLevel(GlyphType.OTHER, "■")), "square")
        self.assertEqual(bullet_style_for(ListLevel(GlyphType.OTHER, "➢")), "'➢'")
        self.assertEqual(bullet_style_for(ListLevel()), "disc")

    def test_custom_symbol_is_escaped_in_open_tag(self):
        lists = {"arrows": ListDefinition({0: ListLevel(GlyphType.OTHER, "➢")})}
        opening = ListStateTracker().on_list_item("arrows", 0, lists)
        self.assertEqual(
            opening.tags,
            '<ul style="list-style-type:&#x27;➢&#x27;; margin-left:0px"><li>',
        )


if __name__ == "__main__":
    unittest.main()
