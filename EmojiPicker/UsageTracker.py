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
Selection counts behind the "Frequently Used" section.
"""

import json
from collections import OrderedDict
import logging

from EmojiPicker.EmojiData import find_emoji
from EmojiPicker.utils import EventSource
from EmojiPicker.Debouncer import Debouncer
from EmojiPicker.Exceptions import PersistenceReadError, \
                                   PersistenceWriteError

_logger = logging.getLogger("UsageTracker")


FREQUENTLY_USED_LIMIT = 30
SAVE_DELAY = 0.5    # seconds


class UsageTracker(EventSource):
    """
    Counts how often each glyph was selected.

    The store is anything with get_usage_counts() and set_usage_counts(),
    exchanging the counts as a JSON object string; in the application
    that's Config and its gsettings key.

    Saving is coalesced: a burst of selections results in a single write
    of the final counts, SAVE_DELAY seconds after the last one.
    Storage errors are logged and otherwise ignored, the counts keep
    working in memory for the rest of the session.
    """

    def __init__(self, store, timer=None):
        EventSource.__init__(self, ["usage-changed"])

        self._store = store
        self._save_debouncer = Debouncer(SAVE_DELAY, timer)
        self._counts = {}
        self._last_used = {}    # glyph -> serial of last selection
        self._serial = 0
        self._written_text = None

        self.load()

    def cleanup(self):
        self.flush()
        EventSource.cleanup(self)

    def load(self):
        try:
            self._counts = self._read_counts()
        except PersistenceReadError as ex:
            _logger.warning("{}; starting with empty usage counts"
                            .format(ex))
            self._counts = {}

        # Counts are stored least recently used first.
        self._serial = 0
        self._last_used = {}
        for glyph in self._counts:
            self._serial += 1
            self._last_used[glyph] = self._serial

        _logger.debug("loaded usage counts for {} emoji"
                      .format(len(self._counts)))

    def _read_text(self):
        try:
            return self._store.get_usage_counts()
        except Exception as ex:
            raise PersistenceReadError("failed to read usage counts", ex)

    def _read_counts(self):
        text = self._read_text()
        if not text:
            return {}

        try:
            data = json.loads(text)
        except ValueError as ex:
            raise PersistenceReadError("invalid usage counts", ex)

        if not isinstance(data, dict):
            raise PersistenceReadError("usage counts are not a mapping")

        counts = {}
        for glyph, count in data.items():
            # bool is an int too, don't let true count as 1
            if not isinstance(count, int) or isinstance(count, bool) or \
               count < 0:
                raise PersistenceReadError("invalid count {!r} for {!r}"
                                           .format(count, glyph))
            if count:
                counts[glyph] = count
        return counts

    def save(self):
        """ Write the counts now. """
        self._save_debouncer.cancel()
        self._write_counts()

    def flush(self):
        """ Write pending changes now, e.g. before exiting. """
        self._save_debouncer.flush()

    def _write_counts(self):
        try:
            self._store_counts()
        except PersistenceWriteError as ex:
            _logger.warning(str(ex))

    def _store_counts(self):
        glyphs = sorted(self._counts, key=lambda g: self._last_used.get(g, 0))
        text = json.dumps(OrderedDict((g, self._counts[g]) for g in glyphs))

        # The store may report this write back through reload().
        self._written_text = text
        try:
            self._store.set_usage_counts(text)
        except Exception as ex:
            self._written_text = None
            raise PersistenceWriteError("failed to save usage counts", ex)

    def track_selection(self, glyph):
        """ Count one selection of glyph and schedule a save. """
        self._counts[glyph] = self._counts.get(glyph, 0) + 1
        self._serial += 1
        self._last_used[glyph] = self._serial

        self._save_debouncer.queue(self._write_counts)
        self.emit("usage-changed")

    def get_count(self, glyph):
        return self._counts.get(glyph, 0)

    def get_counts(self):
        return dict(self._counts)

    def has_usage(self):
        return bool(self._counts)

    def clear(self):
        """ Forget all counts and save right away. """
        self._counts = {}
        self._last_used = {}
        self.save()
        self.emit("usage-changed")

    def reload(self):
        """
        The store was changed by someone else, e.g. cleared in the
        preferences. Unsaved selections are dropped.
        """
        try:
            if self._read_text() == self._written_text:
                return
        except PersistenceReadError:
            pass    # load() logs it

        self._save_debouncer.cancel()
        self.load()
        self.emit("usage-changed")

    def get_frequently_used(self, records, limit=FREQUENTLY_USED_LIMIT):
        """
        The most often selected emoji, most recently used first among
        equal counts. Glyphs that aren't in records any more are skipped.
        """
        if not self._counts:
            return []

        last_used = self._last_used
        glyphs = sorted(self._counts,
                        key=lambda g: (-self._counts[g],
                                       -last_used.get(g, 0)))

        result = []
        for glyph in glyphs[:limit]:
            record = find_emoji(records, glyph)
            if record is not None:
                result.append(record)
        return result
