# -*- coding: utf-8 -*-

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

"""
Emoji dataset: loading, validation and category ordering.
"""

import os
import json
import logging
from collections import namedtuple

from EmojiPicker.Exceptions import DataLoadError, EntryValidationError
from EmojiPicker.utils import XDGDirs

_logger = logging.getLogger("EmojiData")


EMOJI_DATA_FILENAME = "emoji.json"
DATA_SUBDIR = "emoji-picker"

FREQUENTLY_USED = "Frequently Used"
DEFAULT_CATEGORY = "Other"

# Fixed tab and section order, independent of the order in the data file.
CATEGORIES = [
    FREQUENTLY_USED,
    "Smileys & Emotion",
    "People & Body",
    "Animals & Nature",
    "Food & Drink",
    "Travel & Places",
    "Activities",
    "Objects",
    "Symbols",
    "Flags",
]

# Tab labels
CATEGORY_EMOJI = {
    FREQUENTLY_USED:     "🕘",
    "Smileys & Emotion": "😀",
    "People & Body":     "🧑",
    "Animals & Nature":  "🦊",
    "Food & Drink":      "🍜",
    "Travel & Places":   "🛫",
    "Activities":        "⚽",
    "Objects":           "💡",
    "Symbols":           "🔣",
    "Flags":             "🏳️",
}

# Symbolic icon names of the tabs, CATEGORY_EMOJI is the fallback.
CATEGORY_ICONS = {
    FREQUENTLY_USED:     "emoji-recent-symbolic",
    "Smileys & Emotion": "emoji-smileys-symbolic",
    "People & Body":     "emoji-people-symbolic",
    "Animals & Nature":  "emoji-nature-symbolic",
    "Food & Drink":      "emoji-food-symbolic",
    "Travel & Places":   "emoji-travel-symbolic",
    "Activities":        "emoji-activities-symbolic",
    "Objects":           "emoji-objects-symbolic",
    "Symbols":           "emoji-symbols-symbolic",
    "Flags":             "emoji-flags-symbolic",
}

# Characters that render as nothing when they stand alone.
VARIATION_SELECTORS = range(0xFE00, 0xFE10)
ZERO_WIDTH_JOINER = "\u200d"
REPLACEMENT_CHARACTER = "\ufffd"


EmojiRecord = namedtuple("EmojiRecord", ["glyph",
                                         "description",
                                         "category",
                                         "aliases",
                                         "tags",
                                         "supports_tone_variants"])


def make_record(glyph, description="", category=DEFAULT_CATEGORY,
                aliases=(), tags=(), supports_tone_variants=False):
    return EmojiRecord(glyph, description, category,
                       tuple(aliases), tuple(tags),
                       bool(supports_tone_variants))


def get_fallback_emoji_data():
    """ Minimal dataset, used when the data file can't be loaded. """
    return [
        make_record("😀", "grinning face", "Smileys & Emotion",
                    ["grinning"], ["smile", "happy"]),
        make_record("😂", "face with tears of joy", "Smileys & Emotion",
                    ["joy"], ["funny", "haha"]),
        make_record("❤️", "red heart", "Symbols",
                    ["heart"], ["love"]),
        make_record("👍", "thumbs up", "People & Body",
                    ["+1"], ["approve", "affirmative"]),
        make_record("🔥", "fire", "Travel & Places",
                    ["fire"], ["lit"]),
    ]


def find_emoji_data_file(filename=None):
    """
    Locate the dataset. An explicit filename wins, then the user's
    data directory, then the system data directories, and finally the
    data directory of a source checkout.
    """
    if filename:
        return filename

    path = XDGDirs.find_data_file(os.path.join(DATA_SUBDIR,
                                               EMOJI_DATA_FILENAME))
    if path:
        return path

    return os.path.join(os.path.dirname(os.path.dirname(
                        os.path.abspath(__file__))),
                        "data", EMOJI_DATA_FILENAME)


def load_emoji_data(filename):
    """
    Load the emoji dataset, dropping malformed entries.
    Falls back to a built-in list if the file is unusable.
    """
    try:
        entries = read_emoji_file(filename)
    except DataLoadError as ex:
        _logger.warning("{}; using built-in fallback emoji list"
                        .format(ex))
        return get_fallback_emoji_data()

    records = []
    num_dropped = 0
    for i, entry in enumerate(entries):
        try:
            records.append(parse_entry(entry))
        except EntryValidationError as ex:
            _logger.debug("skipping entry {}: {}".format(i, ex))
            num_dropped += 1

    if num_dropped:
        _logger.info("dropped {} invalid entries of '{}'"
                     .format(num_dropped, filename))

    _logger.debug("loaded {} emoji from '{}'"
                  .format(len(records), filename))
    return records


def read_emoji_file(filename):
    """ Read the raw list of entries. Raises DataLoadError. """
    try:
        with open(filename, mode="r", encoding="UTF-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as ex:
        raise DataLoadError("failed to load emoji data from '{}'"
                            .format(filename), ex)

    if not isinstance(data, list):
        raise DataLoadError("emoji data in '{}' is not a list"
                            .format(filename))
    return data


def parse_entry(entry):
    """ Turn one entry of the data file into an EmojiRecord. """
    if not isinstance(entry, dict):
        raise EntryValidationError("entry is not an object")

    glyph = entry.get("emoji")
    if not isinstance(glyph, str) or not glyph:
        raise EntryValidationError("missing emoji")

    if not is_visible_glyph(glyph):
        raise EntryValidationError("invisible emoji {!r}".format(glyph))

    description = entry.get("description")
    if not isinstance(description, str):
        description = ""

    category = entry.get("category")
    if not isinstance(category, str) or not category:
        category = DEFAULT_CATEGORY

    return make_record(glyph, description, category,
                       _string_list(entry.get("aliases")),
                       _string_list(entry.get("tags")),
                       entry.get("skin_tones") is True)


def is_visible_glyph(glyph):
    """
    Doctests:
    >>> is_visible_glyph("😀")
    True
    >>> is_visible_glyph("\\ufe0f")
    False
    >>> is_visible_glyph("\\u200d")
    False
    >>> is_visible_glyph("a\\ufffd")
    False
    """
    if len(glyph) == 1 and ord(glyph) in VARIATION_SELECTORS:
        return False
    if glyph == ZERO_WIDTH_JOINER:
        return False
    if REPLACEMENT_CHARACTER in glyph:
        return False
    return True


def _string_list(value):
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(v for v in value if isinstance(v, str) and v)


def collect_categories(records):
    """
    Categories to show as tabs, in their fixed order.
    "Frequently Used" is always included, callers drop it while empty.
    """
    present = set(record.category for record in records)
    return [category for category in CATEGORIES
            if category == FREQUENTLY_USED or category in present]


def find_emoji(records, glyph):
    """ First record with this glyph, None if there is none. """
    for record in records:
        if record.glyph == glyph:
            return record
    return None
