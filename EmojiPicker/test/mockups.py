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
Stand-ins for the GLib timers, the gsettings backend and the GTK views,
so the picker's logic can be tested without a display or main loop.
"""

from EmojiPicker.EmojiRenderer import EmojiGridView
from EmojiPicker.CategoryController import TabStrip


class Timer_mockup:
    """ Same interface as Timer.TimerOnce, fired by hand. """

    def __init__(self):
        self.delay = None
        self.start_count = 0
        self._callback = None
        self._callback_args = ()
        self._running = False

    def start(self, delay, callback=None, *callback_args):
        if callback:
            self._callback = callback
            self._callback_args = callback_args
        self.delay = delay
        self.start_count += 1
        self._running = True

    def stop(self):
        self._running = False

    def is_running(self):
        return self._running

    def fire(self):
        """ Pretend the timeout expired. """
        assert self._running, "timer not running"
        self._running = False
        if self._callback:
            self._callback(*self._callback_args)


class UsageStore_mockup:
    """ Persistence backend for UsageTracker. """

    def __init__(self, value="{}", fail_read=False, fail_write=False):
        self.value = value
        self.fail_read = fail_read
        self.fail_write = fail_write
        self.writes = []

    def get_usage_counts(self):
        if self.fail_read:
            raise OSError("dconf unavailable")
        return self.value

    def set_usage_counts(self, value):
        if self.fail_write:
            raise OSError("dconf unavailable")
        self.value = value
        self.writes.append(value)


class GridView_mockup(EmojiGridView):
    """
    Records rendered headers and rows. Each header gets a vertical
    offset as if every header and row were 40 pixels high. Like the
    GTK grid, offsets are unknown until layout() ran after the last
    change.
    """
    ROW_HEIGHT = 40

    def __init__(self):
        self.items = []         # ("header", category) / ("row", records)
        self.clear_count = 0
        self.scroll_offsets = []
        self.tone_selector = None
        self._callbacks = []
        self.laid_out = False

    def clear(self):
        self.items = []
        self._callbacks = []
        self.clear_count += 1
        self.laid_out = False

    def add_header(self, category):
        offset = len(self.items) * self.ROW_HEIGHT
        self.items.append(("header", category))
        self.laid_out = False
        return offset

    def add_row(self, records, on_activate):
        self.items.append(("row", list(records)))
        self._callbacks.append(on_activate)
        self.laid_out = False

    def get_header_offset(self, header):
        if not self.laid_out:
            return None
        return header

    def scroll_to(self, offset):
        self.scroll_offsets.append(offset)

    def show_tone_selector(self, record, tones, on_tone_selected):
        self.tone_selector = (record, tones, on_tone_selected)

    def hide_tone_selector(self):
        self.tone_selector = None

    # test helpers
    def layout(self):
        """ Size allocation happened, header offsets are known now. """
        self.laid_out = True

    def get_headers(self):
        return [value for kind, value in self.items if kind == "header"]

    def get_rows(self):
        return [value for kind, value in self.items if kind == "row"]

    def get_glyphs(self):
        return [r.glyph for row in self.get_rows() for r in row]

    def activate(self, glyph):
        """ Simulate a click on the first button showing glyph. """
        for (kind, value), callback in zip(
                [item for item in self.items if item[0] == "row"],
                self._callbacks):
            for record in value:
                if record.glyph == glyph:
                    callback(record)
                    return
        raise ValueError("glyph '{}' not rendered".format(glyph))


class TabStrip_mockup(TabStrip):

    def __init__(self):
        self.categories = []
        self.active = {}

    def set_tabs(self, categories, on_clicked):
        self.categories = list(categories)
        self.active = dict((c, False) for c in categories)
        self.on_clicked = on_clicked

    def set_tab_active(self, category, active):
        self.active[category] = active

    def get_active_tabs(self):
        return [c for c in self.categories if self.active.get(c)]


class Clipboard_mockup:

    def __init__(self):
        self.copied = []
        self.pasted = 0

    def copy(self, text):
        self.copied.append(text)

    def paste(self):
        self.pasted += 1


class SearchEntry_mockup:

    def __init__(self, text=""):
        self.text = text

    def get_text(self):
        return self.text

    def set_text(self, text):
        self.text = text
