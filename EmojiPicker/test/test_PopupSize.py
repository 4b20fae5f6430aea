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

from EmojiPicker.PopupSize import get_dimensions, get_mode_names, \
     calc_emojis_per_row, SIZE_MODES, DEFAULT_MODE, CUSTOM_MODE, \
     MIN_WIDTH, MAX_HEIGHT, MIN_EMOJIS_PER_ROW


class TestPopupSize(unittest.TestCase):

    def test_mode_names(self):
        self.assertEqual(["compact", "default", "comfortable", "custom"],
                         get_mode_names())

    def test_preset_modes(self):
        for mode, dimensions in SIZE_MODES.items():
            self.assertEqual(dimensions, get_dimensions(mode, 700, 700))

    def test_custom(self):
        dimensions = get_dimensions(CUSTOM_MODE, 500, 640)
        self.assertEqual((500, 640), dimensions[:2])
        self.assertEqual(calc_emojis_per_row(500),
                         dimensions.emojis_per_row)

    def test_custom_is_clamped(self):
        dimensions = get_dimensions(CUSTOM_MODE, 10, 5000)
        self.assertEqual((MIN_WIDTH, MAX_HEIGHT), dimensions[:2])
        self.assertEqual(MIN_EMOJIS_PER_ROW, dimensions.emojis_per_row)

    def test_custom_without_size(self):
        self.assertEqual(SIZE_MODES[DEFAULT_MODE],
                         get_dimensions(CUSTOM_MODE, 0, 0))

    def test_unknown_mode(self):
        self.assertEqual(SIZE_MODES[DEFAULT_MODE],
                         get_dimensions("huge"))

    def test_emojis_per_row_grows_with_width(self):
        widths = range(200, 900, 50)
        counts = [calc_emojis_per_row(w) for w in widths]
        self.assertEqual(sorted(counts), counts)
        self.assertTrue(all(c >= MIN_EMOJIS_PER_ROW for c in counts))


if __name__ == '__main__':
    unittest.main()
