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

from EmojiPicker.EmojiData import make_record
from EmojiPicker.SkinTone import apply_tone, strip_tones, make_variant, \
     SkinToneSelector, SKIN_TONES
from EmojiPicker.test.mockups import GridView_mockup


WAVING_HAND = "\U0001F44B"
MEDIUM = "\U0001F3FD"
LIGHT = "\U0001F3FB"


class TestApplyTone(unittest.TestCase):

    def test_second_tone_replaces_the_first(self):
        once = apply_tone(apply_tone(WAVING_HAND, MEDIUM), LIGHT)
        self.assertEqual(apply_tone(WAVING_HAND, LIGHT), once)
        self.assertEqual(WAVING_HAND + LIGHT, once)

    def test_tones_never_stack(self):
        bases = [WAVING_HAND, "\u270c\ufe0f", "\U0001F9D1\u200d\U0001F373"]
        for base in bases:
            for first in SKIN_TONES:
                for second in SKIN_TONES:
                    glyph = apply_tone(apply_tone(base, first.modifier),
                                       second.modifier)
                    self.assertEqual(apply_tone(base, second.modifier),
                                     glyph)

    def test_default_tone_gives_bare_glyph(self):
        self.assertEqual(WAVING_HAND,
                         apply_tone(WAVING_HAND + MEDIUM, ""))
        self.assertEqual(WAVING_HAND, strip_tones(WAVING_HAND))

    def test_modifier_precedes_presentation_selector(self):
        self.assertEqual("\u261d" + MEDIUM + "\ufe0f",
                         apply_tone("\u261d\ufe0f", MEDIUM))


class TestSkinToneSelector(unittest.TestCase):

    def setUp(self):
        self.view = GridView_mockup()
        self.selected = []
        self.selector = SkinToneSelector(self.view, self.selected.append)
        self.wave = make_record(WAVING_HAND, "waving hand", "People & Body",
                                ["wave"], [], True)
        self.fire = make_record("🔥", "fire", "Travel & Places")

    def test_make_variant(self):
        variant = make_variant(self.wave, SKIN_TONES[3])
        self.assertEqual(WAVING_HAND + MEDIUM, variant.glyph)
        self.assertEqual("waving hand (Medium)", variant.description)
        self.assertEqual("People & Body", variant.category)
        self.assertEqual(("wave",), variant.aliases)
        self.assertFalse(variant.supports_tone_variants)

        variant = make_variant(self.wave, SKIN_TONES[0])
        self.assertEqual(WAVING_HAND, variant.glyph)
        self.assertEqual("waving hand", variant.description)

    def test_show_and_select(self):
        self.assertTrue(self.selector.show(self.wave))
        self.assertTrue(self.selector.is_visible())
        self.assertIs(self.wave, self.selector.get_record())

        record, tones, on_tone_selected = self.view.tone_selector
        self.assertIs(self.wave, record)
        self.assertEqual(SKIN_TONES, tones)

        on_tone_selected(SKIN_TONES[1])
        self.assertEqual([WAVING_HAND + LIGHT],
                         [r.glyph for r in self.selected])
        self.assertFalse(self.selector.is_visible())
        self.assertIsNone(self.view.tone_selector)

    def test_emoji_without_tones(self):
        self.selector.show(self.wave)
        self.assertFalse(self.selector.show(self.fire))
        self.assertFalse(self.selector.is_visible())
        self.assertIsNone(self.view.tone_selector)

    def test_select_while_hidden(self):
        self.selector.select_tone(SKIN_TONES[2])
        self.assertEqual([], self.selected)

    def test_hide(self):
        self.selector.show(self.wave)
        self.selector.hide()
        self.assertFalse(self.selector.is_visible())
        self.assertIsNone(self.view.tone_selector)
        self.selector.hide()


if __name__ == '__main__':
    unittest.main()
