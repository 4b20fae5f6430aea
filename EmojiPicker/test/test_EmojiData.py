#!/usr/bin/python3

# Copyright Â© 2025 Emoji Picker developers
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

import os
import json
import tempfile
import unittest

from EmojiPicker.EmojiData import load_emoji_data, read_emoji_file, \
     parse_entry, collect_categories, find_emoji, find_emoji_data_file, \
     get_fallback_emoji_data, make_record, \
     CATEGORIES, FREQUENTLY_USED, DEFAULT_CATEGORY
from EmojiPicker.Exceptions import DataLoadError, EntryValidationError


class TestEmojiData(unittest.TestCase):

    def setUp(self):
        self._tmp_dir = tempfile.TemporaryDirectory(prefix="test_emoji_")
        self._dir = self._tmp_dir.name

    def tearDown(self):
        self._tmp_dir.cleanup()

    def _write_file(self, content, basename="emoji.json"):
        filename = os.path.join(self._dir, basename)
        with open(filename, "w", encoding="UTF-8") as f:
            if isinstance(content, str):
                f.write(content)
            else:
                json.dump(content, f)
        return filename

    def test_load_valid_entries(self):
        filename = self._write_file([
            {"emoji": "ð", "description": "grinning face",
             "category": "Smileys & Emotion",
             "aliases": ["grinning"], "tags": ["smile"]},
            {"emoji": "ð", "description": "waving hand",
             "category": "People & Body", "skin_tones": True},
        ])
        records = load_emoji_data(filename)

        self.assertEqual(["ð", "ð"], [r.glyph for r in records])
        self.assertEqual(("grinning",), records[0].aliases)
        self.assertEqual(("smile",), records[0].tags)
        self.assertFalse(records[0].supports_tone_variants)
        self.assertTrue(records[1].supports_tone_variants)

    def test_invalid_entries_are_dropped_not_the_whole_file(self):
        filename = self._write_file([
            {"emoji": "ð", "category": "Smileys & Emotion"},
            {"description": "no glyph"},
            {"emoji": ""},
            {"emoji": "\ufe0f"},
            {"emoji": "\u200d"},
            {"emoji": "a\ufffd"},
            "not an object",
            {"emoji": "ð¥", "category": "Travel & Places"},
        ])
        records = load_emoji_data(filename)
        self.assertEqual(["ð", "ð¥"], [r.glyph for r in records])

    def test_missing_fields_get_defaults(self):
        record = parse_entry({"emoji": "ð¦"})
        self.assertEqual("", record.description)
        self.assertEqual(DEFAULT_CATEGORY, record.category)
        self.assertEqual((), record.aliases)
        self.assertEqual((), record.tags)
        self.assertFalse(record.supports_tone_variants)

    def test_non_string_aliases_are_ignored(self):
        record = parse_entry({"emoji": "ð¦", "aliases": ["unicorn", 3, ""],
                              "tags": "not a list"})
        self.assertEqual(("unicorn",), record.aliases)
        self.assertEqual((), record.tags)

    def test_skin_tones_must_be_true(self):
        record = parse_entry({"emoji": "ð", "skin_tones": "yes"})
        self.assertFalse(record.supports_tone_variants)

    def test_parse_entry_raises_for_invisible_glyph(self):
        with self.assertRaises(EntryValidationError):
            parse_entry({"emoji": "\ufe0f"})

    def test_missing_file_falls_back(self):
        """
        An unreadable file yields exactly the built-in records, without
        "Frequently Used" while nothing has been selected.
        """
        records = load_emoji_data(os.path.join(self._dir, "missing.json"))

        self.assertEqual(get_fallback_emoji_data(), records)
        self.assertEqual(5, len(records))
        self.assertEqual({"Smileys & Emotion", "Symbols",
                          "People & Body", "Travel & Places"},
                         set(r.category for r in records))
        self.assertNotIn(FREQUENTLY_USED,
                         set(r.category for r in records))

    def test_malformed_json_falls_back(self):
        filename = self._write_file("[{\"emoji\": ")
        self.assertEqual(get_fallback_emoji_data(),
                         load_emoji_data(filename))

    def test_non_list_file_falls_back(self):
        filename = self._write_file({"emoji": "ð"})
        with self.assertRaises(DataLoadError):
            read_emoji_file(filename)
        self.assertEqual(get_fallback_emoji_data(),
                         load_emoji_data(filename))

    def test_collect_categories(self):
        records = get_fallback_emoji_data()
        records.append(make_record("ð¦", "unicorn", "Made Up"))
        categories = collect_categories(records)

        self.assertEqual([FREQUENTLY_USED,
                          "Smileys & Emotion",
                          "People & Body",
                          "Travel & Places",
                          "Symbols"], categories)
        self.assertNotIn("Made Up", categories)

    def test_collect_categories_of_empty_dataset(self):
        self.assertEqual([FREQUENTLY_USED], collect_categories([]))

    def test_find_emoji(self):
        records = get_fallback_emoji_data()
        records.append(make_record("🔥", "campfire", "Activities"))
        self.assertEqual("fire", find_emoji(records, "🔥").description)
        self.assertIsNone(find_emoji(records, "🦄"))

    def test_explicit_filename_wins(self):
        self.assertEqual("/some/file.json",
                         find_emoji_data_file("/some/file.json"))

    def test_shipped_dataset(self):
        filename = os.path.join(os.path.dirname(os.path.dirname(
                                os.path.dirname(os.path.abspath(__file__)))),
                                "data", "emoji.json")
        if not os.path.isfile(filename):
            self.skipTest("data/emoji.json not available")

        records = read_emoji_file(filename)
        loaded = load_emoji_data(filename)
        self.assertEqual(len(records), len(loaded))
        self.assertGreater(len(loaded), 1000)
        for record in loaded:
            self.assertIn(record.category, CATEGORIES)
        self.assertTrue(any(r.supports_tone_variants for r in loaded))


if __name__ == '__main__':
    unittest.main()
