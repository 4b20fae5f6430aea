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

from EmojiPicker.EmojiData import collect_categories, FREQUENTLY_USED
from EmojiPicker.UsageTracker import FREQUENTLY_USED_LIMIT

_logger = logging.getLogger("EmojiRenderer")


EMOJIS_PER_ROW = 10


class EmojiGridView(object):
    """
    Interface of the scrollable emoji grid, implemented by the GTK
    popup and by test mockups.
    """

    def clear(self):
        """ Destroy all headers and rows. """
        raise NotImplementedError()

    def add_header(self, category):
        """
        Append a section header. Returns a handle for
        get_header_offset().
        """
        raise NotImplementedError()

    def add_row(self, records, on_activate):
        """
        Append a row of emoji buttons. on_activate(record) is
        called when a button is clicked.
        """
        raise NotImplementedError()

    def get_header_offset(self, header):
        """
        Vertical position of header in the scrolled content,
        None while it hasn't been laid out yet.
        """
        raise NotImplementedError()

    def scroll_to(self, offset):
        raise NotImplementedError()

    def show_tone_selector(self, record, tones, on_tone_selected):
        raise NotImplementedError()

    def hide_tone_selector(self):
        raise NotImplementedError()


class EmojiRenderer(object):
    """ Fills an EmojiGridView with rows of emoji. """

    def __init__(self, view, on_select, tone_selector=None,
                 emojis_per_row=EMOJIS_PER_ROW):
        self._view = view
        self._on_select = on_select
        self._tone_selector = tone_selector
        self.emojis_per_row = max(1, emojis_per_row)
        self.skin_tones_enabled = True

    def set_emojis_per_row(self, emojis_per_row):
        self.emojis_per_row = max(1, emojis_per_row)

    def clear(self):
        if self._tone_selector:
            self._tone_selector.hide()
        self._view.clear()

    def render_flat(self, records, on_select=None):
        """ Search results, rows only, no headers. """
        self.clear()
        self._add_rows(records, self._get_activate_func(on_select))

    def render_grouped(self, records, usage_tracker,
                       on_section_rendered=None, on_select=None):
        """
        One section per category with a header each.
        on_section_rendered(category, header) is called for every
        section actually rendered.
        """
        self.clear()
        on_activate = self._get_activate_func(on_select)

        for category, members in group_by_category(records, usage_tracker):
            header = self._view.add_header(category)
            if on_section_rendered:
                on_section_rendered(category, header)
            self._add_rows(members, on_activate)

    def activate(self, record):
        """ Act as if the button of record was clicked. """
        self._get_activate_func(None)(record)

    def _add_rows(self, records, on_activate):
        n = self.emojis_per_row
        for i in range(0, len(records), n):
            self._view.add_row(records[i:i + n], on_activate)

    def _get_activate_func(self, on_select):
        if on_select is None:
            on_select = self._on_select

        def on_activate(record):
            # Emoji with skin tones pick their variant first.
            if record.supports_tone_variants and \
               self.skin_tones_enabled and self._tone_selector:
                self._tone_selector.show(record)
            else:
                on_select(record)

        return on_activate


def group_by_category(records, usage_tracker=None):
    """
    (category, records) pairs in tab order, "Frequently Used" first.
    Categories without records are left out.
    """
    groups = {}
    for record in records:
        groups.setdefault(record.category, []).append(record)

    if usage_tracker is not None:
        groups[FREQUENTLY_USED] = \
            usage_tracker.get_frequently_used(records, FREQUENTLY_USED_LIMIT)

    return [(category, groups[category])
            for category in collect_categories(records)
            if groups.get(category)]
