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
State of one picker: dataset, usage counts, search and category sync,
wired together without any module level globals.
"""

import logging

from EmojiPicker.utils import EventSource
from EmojiPicker.SearchFilter import SearchController, filter_emoji
from EmojiPicker.CategoryController import CategoryController
from EmojiPicker.EmojiRenderer import EmojiRenderer, EMOJIS_PER_ROW
from EmojiPicker.SkinTone import SkinToneSelector

_logger = logging.getLogger("PickerSession")


class PickerSession(EventSource):
    """
    Connects the views of the popup with the picker's logic.

    search_entry needs get_text() and set_text(), grid_view is an
    EmojiGridView, tab_strip a TabStrip and clipboard anything with
    copy(text) and paste().

    Events:
        "emoji-selected"(record)    after the glyph was copied
        "close-request"()           the popup should hide
        "category-changed"(category)
        "query-changed"(query)
    """

    def __init__(self, records, usage_tracker,
                 search_entry, grid_view, tab_strip, clipboard,
                 paste_on_select=False, emojis_per_row=EMOJIS_PER_ROW,
                 skin_tones_enabled=True,
                 search_debouncer=None, guard_timer=None):
        EventSource.__init__(self, ["emoji-selected",
                                    "close-request",
                                    "category-changed",
                                    "query-changed"])
        self.records = records
        self.usage_tracker = usage_tracker
        self.paste_on_select = paste_on_select

        self._search_entry = search_entry
        self._grid_view = grid_view
        self._clipboard = clipboard
        self._query = ""
        self._results = []
        self._opened = False

        self.tone_selector = SkinToneSelector(grid_view, self.select)
        self.renderer = EmojiRenderer(grid_view, self.select,
                                      self.tone_selector, emojis_per_row)
        self.renderer.skin_tones_enabled = skin_tones_enabled
        self.search = SearchController(search_entry.get_text,
                                       self.apply_query,
                                       search_debouncer)
        self.category_controller = CategoryController(tab_strip,
                                                      grid_view,
                                                      guard_timer)

        self.category_controller.connect("tab-clicked",
                                         self._on_tab_clicked)
        self.category_controller.connect("category-changed",
                                         self._on_category_changed)
        self.usage_tracker.connect("usage-changed", self._on_usage_changed)

    def cleanup(self):
        self.search.cancel()
        self.category_controller.disconnect("tab-clicked",
                                            self._on_tab_clicked)
        self.category_controller.disconnect("category-changed",
                                            self._on_category_changed)
        self.category_controller.cleanup()
        self.usage_tracker.disconnect("usage-changed", self._on_usage_changed)
        EventSource.cleanup(self)

    def get_query(self):
        return self._query

    def get_results(self):
        """ Records of the last search, empty in the grouped view. """
        return list(self._results)

    def is_opened(self):
        return self._opened

    def on_opened(self):
        """ The popup was shown, start over with the grouped view. """
        self._opened = True
        self._search_entry.set_text("")
        self.refresh(immediate=True)
        self._grid_view.scroll_to(0)
        self.category_controller.reset()

    def on_closed(self):
        """ The popup was hidden, nothing may run after this. """
        self._opened = False
        self.search.cancel()
        self.category_controller.cancel()
        self.tone_selector.hide()

    def on_search_changed(self):
        """ Text of the search entry changed. """
        self.search.queue_filter()

    def refresh(self, immediate=False):
        self.search.queue_filter(immediate)

    def apply_query(self, query):
        """
        Empty query: all emoji grouped by category.
        Otherwise: matching emoji without headers.
        """
        if query != self._query:
            self._query = query
            self.emit("query-changed", query)

        if query:
            self._results = filter_emoji(query, self.records)
            self.renderer.render_flat(self._results)
        else:
            self._results = []
            self._render_grouped()

    def _render_grouped(self):
        controller = self.category_controller
        controller.clear_sections()

        rendered = []

        def on_section_rendered(category, header):
            controller.register_section(category, header)
            rendered.append(category)

        self.renderer.render_grouped(self.records, self.usage_tracker,
                                     on_section_rendered)
        controller.set_categories(rendered)
        controller.on_layout_changed()

    def _on_tab_clicked(self, category):
        # Sections only exist in the grouped view.
        if self._query or self._search_entry.get_text():
            self._search_entry.set_text("")
            self.refresh(immediate=True)

    def _on_category_changed(self, category):
        self.emit("category-changed", category)

    def _on_usage_changed(self):
        if self._opened and not self._query:
            self.refresh()

    def set_emojis_per_row(self, emojis_per_row):
        self.renderer.set_emojis_per_row(emojis_per_row)
        if self._opened:
            self.refresh(immediate=True)

    def set_skin_tones_enabled(self, enabled):
        self.renderer.skin_tones_enabled = enabled
        if not enabled:
            self.tone_selector.hide()

    def activate_first(self):
        """ Enter in the search entry selects the first result. """
        if self._results:
            self.renderer.activate(self._results[0])

    def select(self, record):
        """ Copy record's glyph, count it and ask to close the popup. """
        _logger.debug("selected {} '{}'"
                      .format(record.glyph, record.description))

        self._clipboard.copy(record.glyph)
        if self.paste_on_select:
            self._clipboard.paste()

        self.usage_tracker.track_selection(record.glyph)

        self.emit("emoji-selected", record)
        self.emit("close-request")
