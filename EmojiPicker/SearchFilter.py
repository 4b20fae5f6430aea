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

from EmojiPicker.Debouncer import Debouncer

_logger = logging.getLogger("SearchFilter")


MAX_VISIBLE_EMOJIS = 360
SEARCH_DEBOUNCE_DELAY = 0.12    # seconds


def normalize_query(text):
    """
    Doctests:
    >>> normalize_query("  Red HEART ")
    'red heart'
    >>> normalize_query(None)
    ''
    """
    if not text:
        return ""
    return text.strip().lower()


def build_haystack(record):
    """
    All searchable text of record in one lower case string.

    Doctests:
    >>> from EmojiPicker.EmojiData import make_record
    >>> build_haystack(make_record("X", "Red Heart", "Symbols",
    ...                            ["heart"], ["", "Love"]))
    'x red heart heart love'
    """
    fields = [record.glyph, record.description]
    fields.extend(record.aliases)
    fields.extend(record.tags)
    return " ".join(f for f in fields if f).lower()


def filter_emoji(query, records, max_results=MAX_VISIBLE_EMOJIS):
    """
    Records whose text contains query, in dataset order, at most
    max_results of them. An empty query returns records as they are.
    """
    if not query:
        return records

    results = []
    for record in records:
        if query in build_haystack(record):
            results.append(record)
            if len(results) >= max_results:
                break
    return results


class SearchController(object):
    """
    Debounces search requests coming from the search entry.

    get_text returns the entry's current text, on_search receives the
    normalized query once typing has settled.
    """

    def __init__(self, get_text, on_search, debouncer=None):
        if debouncer is None:
            debouncer = Debouncer(SEARCH_DEBOUNCE_DELAY)
        self._get_text = get_text
        self._on_search = on_search
        self._debouncer = debouncer

    def queue_filter(self, immediate=False):
        """
        Request a search. Each request supersedes the pending one.
        Immediate requests run right away, e.g. when the popup opens.
        """
        if immediate:
            self._debouncer.run_now(self._search)
        else:
            self._debouncer.queue(self._search)

    def cancel(self):
        self._debouncer.cancel()

    def is_pending(self):
        return self._debouncer.is_pending()

    def get_query(self):
        return normalize_query(self._get_text())

    def _search(self):
        query = self.get_query()
        _logger.debug("searching for '{}'".format(query))
        self._on_search(query)
