#!/usr/bin/python3

# Copyright © 2025 Emoji Picker developers
#
# This file is part of Emoji Picker.
#
# Emoji Picker is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# Emoji Picker is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

import unittest

from EmojiPicker.EmojiData import get_fallback_emoji_data, make_record, \
     FREQUENTLY_USED
from EmojiPicker.UsageTracker import UsageTracker
from EmojiPicker.SkinTone import SkinToneSelector, SKIN_TONES
from EmojiPicker.EmojiRenderer import EmojiRenderer, group_by_category
from EmojiPicker.test.mockups import Timer_mockup, UsageStore_mockup, \
     GridView_mockup


class TestEmojiRenderer(unittest.TestCase):

    def setUp(self):
        self.records = get_fallback_emoji_data()
        self.tracker = UsageTracker(UsageStore_mockup(), Timer_mockup())
        self.view = GridView_mockup()
        self.selected = []
        self.selector = SkinToneSelector(self.view, self.selected.append)
        self.renderer = EmojiRenderer(self.view, self.selected.append,
                                      self.selector, emojis_per_row=2)

    def test_group_by_category(self):
        groups = group_by_category(self.records, self.tracker)
        self.assertEqual(["Smileys & Emotion",
                          "People & Body",
                          "Travel & Places",
                          "Symbols"],
                         [category for category, members in groups])
        self.assertEqual(["😀", "😂"], [r.glyph for r in groups[0][1]])

    def test_frequently_used_comes_first(self):
        self.tracker.track_selection("🔥")
        groups = group_by_category(self.records, self.tracker)

        self.assertEqual(FREQUENTLY_USED, groups[0][0])
        self.assertEqual(["🔥"], [r.glyph for r in groups[0][1]])
        self.assertEqual(5, len(groups))

    def test_unknown_category_gets_no_section(self):
        records = self.records + [make_record("🦄", "unicorn", "Made Up")]
        groups = group_by_category(records)
        self.assertNotIn("Made Up", [category for category, m in groups])
        self.assertNotIn("🦄", [r.glyph for c, m in groups for r in m])

    def test_render_grouped(self):
        sections = []
        self.renderer.render_grouped(self.records, self.tracker,
                                     lambda c, h: sections.append((c, h)))

        self.assertEqual(["Smileys & Emotion",
                          "People & Body",
                          "Travel & Places",
                          "Symbols"], self.view.get_headers())
        self.assertEqual(self.view.get_headers(), [c for c, h in sections])
        self.assertEqual([("header", "Smileys & Emotion"),
                          ("row", self.records[0:2])],
                         self.view.items[:2])

    def test_render_flat_chunks_rows(self):
        self.renderer.render_flat(self.records)

        self.assertEqual([], self.view.get_headers())
        self.assertEqual([2, 2, 1],
                         [len(row) for row in self.view.get_rows()])
        self.assertEqual([r.glyph for r in self.records],
                         self.view.get_glyphs())

    def test_render_replaces_previous_content(self):
        self.renderer.render_flat(self.records)
        self.renderer.render_flat(self.records[:1])
        self.assertEqual(["😀"], self.view.get_glyphs())
        self.assertEqual(2, self.view.clear_count)

    def test_emojis_per_row(self):
        self.renderer.set_emojis_per_row(0)
        self.renderer.render_flat(self.records)
        self.assertEqual(5, len(self.view.get_rows()))

    def test_activate_selects(self):
        self.renderer.render_flat(self.records)
        self.view.activate("🔥")
        self.assertEqual(["🔥"], [r.glyph for r in self.selected])

    def test_activate_with_tones_opens_selector(self):
        wave = make_record("👋", "waving hand", "People & Body",
                           [], [], True)
        self.renderer.render_flat([wave])
        self.view.activate("👋")

        self.assertEqual([], self.selected)
        self.assertTrue(self.selector.is_visible())

        self.view.tone_selector[2](SKIN_TONES[5])
        self.assertEqual(["👋\U0001F3FF"], [r.glyph for r in self.selected])

    def test_skin_tones_disabled(self):
        wave = make_record("👋", "waving hand", "People & Body",
                           [], [], True)
        self.renderer.skin_tones_enabled = False
        self.renderer.activate(wave)

        self.assertEqual([wave], self.selected)
        self.assertFalse(self.selector.is_visible())

    def test_on_select_override(self):
        other = []
        self.renderer.render_flat(self.records, on_select=other.append)
        self.view.activate("😀")
        self.assertEqual(["😀"], [r.glyph for r in other])
        self.assertEqual([], self.selected)


if __name__ == '__main__':
    unittest.main()
