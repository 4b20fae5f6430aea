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


class Debouncer(object):
    """
    Single-slot delayed call.

    Every request cancels and replaces the pending one, so only the
    last request of a burst runs, <delay> seconds after it was queued.

    The timer is anything with the start/stop/is_running interface of
    Timer.TimerOnce. It defaults to a GLib timer; tests pass their own.
    """

    def __init__(self, delay, timer=None):
        if timer is None:
            from EmojiPicker.Timer import TimerOnce
            timer = TimerOnce()
        self.delay = delay
        self._timer = timer
        self._pending = None

    def queue(self, callback, *args):
        self._pending = (callback, args)
        self._timer.start(self.delay, self._on_timer)

    def run_now(self, callback, *args):
        """ Drop whatever is pending and call right away. """
        self.cancel()
        callback(*args)

    def cancel(self):
        self._pending = None
        self._timer.stop()

    def flush(self):
        """ Run the pending request immediately, if there is one. """
        if self.is_pending():
            self._timer.stop()
            self._on_timer()

    def is_pending(self):
        return self._pending is not None

    def _on_timer(self):
        pending = self._pending
        self._pending = None
        if pending:
            callback, args = pending
            callback(*args)
        return False
