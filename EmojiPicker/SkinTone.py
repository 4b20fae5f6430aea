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

import logging
from collections import namedtuple

_logger = logging.getLogger("SkinTone")


SkinTone = namedtuple("SkinTone", ["name", "modifier", "color"])

SKIN_TONES = [
    SkinTone("Default",      "",           "#FFCC22"),
    SkinTone("Light",        "\U0001F3FB", "#FADCBC"),
    SkinTone("Medium-Light", "\U0001F3FC", "#E5BE93"),
    SkinTone("Medium",       "\U0001F3FD", "#C99667"),
    SkinTone("Medium-Dark",  "\U0001F3FE", "#A16D4A"),
    SkinTone("Dark",         "\U0001F3FF", "#61493F"),
]

TONE_MODIFIERS = frozenset(tone.modifier for tone in SKIN_TONES
                           if tone.modifier)

VARIATION_SELECTOR_16 = "\ufe0f"


def strip_tones(glyph):
    """
    Doctests:
    >>> strip_tones("\\U0001F44B\\U0001F3FD") == "\\U0001F44B"
    True
    """
    return "".join(c for c in glyph if c not in TONE_MODIFIERS)


def apply_tone(glyph, modifier):
    """
    Replace the skin tone of glyph with modifier. Tones never stack,
    applying a second tone gives the same result as applying it to
    the bare glyph.

    Doctests:
    >>> apply_tone("\\U0001F44D", "\\U0001F3FB") == "\\U0001F44D\\U0001F3FB"
    True
    >>> apply_tone("\\u270C\\uFE0F", "\\U0001F3FF") == \\
    ...     "\\u270C\\U0001F3FF\\uFE0F"
    True
    >>> apply_tone("\\U0001F44D\\U0001F3FB", "") == "\\U0001F44D"
    True
    """
    base = strip_tones(glyph)
    if not modifier:
        return base

    # Modifier goes before the emoji presentation selector.
    index = base.find(VARIATION_SELECTOR_16)
    if index >= 0:
        return base[:index] + modifier + base[index:]
    return base + modifier


def make_variant(record, tone):
    """
    Record for the tone variant of <record>. The description names the
    tone, the variant itself offers no further tones.
    """
    description = record.description
    if tone.modifier:
        description = "{} ({})".format(description, tone.name)
    return record._replace(glyph=apply_tone(record.glyph, tone.modifier),
                           description=description,
                           supports_tone_variants=False)


class SkinToneSelector(object):
    """
    State of the skin tone popover. The view draws the swatches and
    calls back into select_tone() when one is clicked.
    """

    def __init__(self, view, on_tone_selected):
        self._view = view
        self._on_tone_selected = on_tone_selected
        self._record = None

    def show(self, record):
        """
        Offer the tone variants of record. Returns False, and stays
        hidden, for emoji without skin tones.
        """
        if not record or not record.supports_tone_variants:
            self.hide()
            return False

        _logger.debug("showing skin tones for {}".format(record.description))
        self._record = record
        self._view.show_tone_selector(record, SKIN_TONES, self.select_tone)
        return True

    def hide(self):
        if self._record is not None:
            self._record = None
            self._view.hide_tone_selector()

    def is_visible(self):
        return self._record is not None

    def get_record(self):
        return self._record

    def select_tone(self, tone):
        record = self._record
        if record is None:
            return
        self.hide()
        self._on_tone_selected(make_variant(record, tone))
