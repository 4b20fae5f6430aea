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
Keeps the category tabs and the scroll position of the emoji grid in sync.
"""

import logging

from EmojiPicker.utils import EventSource
from EmojiPicker.EmojiData import FREQUENTLY_USED

_logger = logging.getLogger("CategoryController")


# Sections starting this far below the top of the viewport
# are considered for activation.
CATEGORY_SCROLL_THRESHOLD = 30      # pixels

# Scroll events are ignored this long after a tab was clicked.
SCROLL_GUARD_DELAY = 0.15           # seconds


class TabStrip(object):
    """ Interface of the row of category tabs. """

    def set_tabs(self, categories, on_clicked):
        """ Replace all tabs. on_clicked(category) is called on click. """
        raise NotImplementedError()

    def set_tab_active(self, category, active):
        raise NotImplementedError()


class CategoryController(EventSource):
    """
    Tracks the active category.

    Clicking a tab activates its category and scrolls the grid to the
    section header. Scrolling the grid activates the section nearest
    at or above the top of the viewport, without scrolling further.
    Right after a tab click scroll events are ignored for a moment, so
    the programmatic scroll doesn't switch to a different category.
    """

    def __init__(self, tab_strip, scroll_view, guard_timer=None):
        EventSource.__init__(self, ["tab-clicked", "category-changed"])

        if guard_timer is None:
            from EmojiPicker.Timer import TimerOnce
            guard_timer = TimerOnce()

        self._tab_strip = tab_strip
        self._scroll_view = scroll_view
        self._guard_timer = guard_timer
        self._categories = []
        self._sections = {}             # category -> header
        self._active_category = None
        self._pending_scroll = None     # category waiting for layout

    def cleanup(self):
        self.cancel()
        EventSource.cleanup(self)

    def get_active_category(self):
        return self._active_category

    def get_categories(self):
        return list(self._categories)

    def set_categories(self, categories):
        """
        Rebuild the tabs. The active category is kept if it still
        exists, otherwise "Frequently Used" or the first category
        becomes active.
        """
        categories = list(categories)
        if categories != self._categories:
            self._categories = categories
            self._tab_strip.set_tabs(categories, self._on_tab_clicked)

        if self._active_category not in self._categories:
            self._active_category = self._get_initial_category()

        self.update_category_states()

    def reset(self):
        """
        Back to the category a freshly opened popup starts with,
        "Frequently Used" if present, else the first one.
        """
        category = self._get_initial_category()
        if category is None:
            self._active_category = None
            self.update_category_states()
        else:
            self._set_active_category(category)

    def _get_initial_category(self):
        if FREQUENTLY_USED in self._categories:
            return FREQUENTLY_USED
        if self._categories:
            return self._categories[0]
        return None

    def update_category_states(self):
        for category in self._categories:
            self._tab_strip.set_tab_active(
                category, category == self._active_category)

    def _on_tab_clicked(self, category):
        self.emit("tab-clicked", category)
        self.set_category(category)

    def set_category(self, category):
        """ Tab click: activate category and scroll to its section. """
        if category not in self._categories:
            _logger.warning("unknown category '{}'".format(category))
            return

        self._set_active_category(category)
        self.scroll_to_category(category)

    def _set_active_category(self, category):
        if self._active_category != category:
            self._active_category = category
            self.update_category_states()
            self.emit("category-changed", category)

    def scroll_to_category(self, category):
        """
        Scroll the section of category to the top. Without a known
        header offset the scroll waits for on_layout_changed().
        """
        offset = self.get_section_offset(category)
        if offset is None:
            self._pending_scroll = category
            return

        self._pending_scroll = None
        self._guard_timer.start(SCROLL_GUARD_DELAY)
        self._scroll_view.scroll_to(offset)

    def is_scroll_guarded(self):
        return self._guard_timer.is_running()

    def on_scroll(self, offset):
        """ The grid scrolled, offset is the top of the viewport. """
        if self.is_scroll_guarded():
            return

        category = self.find_category_at(offset)
        if category is not None:
            self._set_active_category(category)

    def find_category_at(self, offset):
        """ Nearest section at or above the top of the viewport. """
        best_category = None
        min_distance = None

        for category, header in self._sections.items():
            top = self._scroll_view.get_header_offset(header)
            if top is None:
                continue

            if top <= offset + CATEGORY_SCROLL_THRESHOLD:
                distance = offset - top
                if distance >= 0 and \
                   (min_distance is None or distance < min_distance):
                    min_distance = distance
                    best_category = category

        return best_category

    def on_layout_changed(self):
        """ Header offsets changed, retry a scroll that had to wait. """
        if self._pending_scroll is not None:
            self.scroll_to_category(self._pending_scroll)

    def register_section(self, category, header):
        self._sections[category] = header

    def clear_sections(self):
        self._sections = {}

    def get_section_offset(self, category):
        header = self._sections.get(category)
        if header is None:
            return None
        return self._scroll_view.get_header_offset(header)

    def cancel(self):
        """ Popup closed, drop the scroll guard and pending scrolls. """
        self._guard_timer.stop()
        self._pending_scroll = None
