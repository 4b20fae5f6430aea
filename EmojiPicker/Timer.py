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
GLib timeouts wrapped in small objects that can be stopped and restarted.
"""

import time
import logging
import subprocess

from EmojiPicker.Version import require_gi_versions
require_gi_versions()
from gi.repository import GLib

from EmojiPicker.utils import Fade

_logger = logging.getLogger("Timer")


class Timer(object):
    """
    Repeating GLib timeout. Subclasses override on_timer and stop
    the timer by returning False from it.
    """
    _source_id = None
    _callback = None
    _callback_args = ()

    def __init__(self, delay=None, callback=None, *callback_args):
        self._callback = callback
        self._callback_args = callback_args

        if delay is not None:
            self.start(delay)

    def start(self, delay, callback=None, *callback_args):
        """
        (Re)start the timer, delay in seconds. Whole seconds as int
        get the coarse, power friendly GLib timeout.
        """
        self.stop()

        if callback:
            self._callback = callback
            self._callback_args = callback_args

        if isinstance(delay, int):
            self._source_id = GLib.timeout_add_seconds(delay, self._on_source)
        else:
            self._source_id = GLib.timeout_add(int(delay * 1000),
                                               self._on_source)

    def stop(self):
        if self._source_id is not None:
            GLib.source_remove(self._source_id)
            self._source_id = None

    def is_running(self):
        return self._source_id is not None

    def _on_source(self):
        keep_going = bool(self.on_timer())
        if not keep_going:
            self._source_id = None  # GLib drops the source itself
        return keep_going

    def on_timer(self):
        if self._callback:
            return self._callback(*self._callback_args)
        return True


class TimerOnce(Timer):
    """ Fires a single time per start(). """

    def on_timer(self):
        if self._callback:
            self._callback(*self._callback_args)
        return False


class DelayedLauncher(Timer):
    """
    Runs a command line once the delay has passed, e.g. a fake
    Ctrl+V after the picker window went away.
    """
    args = None

    def launch_delayed(self, args, delay):
        self.args = args
        self.start(delay)

    def on_timer(self):
        command = " ".join(self.args)
        _logger.debug("running '{}'".format(command))
        try:
            subprocess.Popen(self.args)
        except OSError as ex:
            _logger.warning("can't run '{}': {}".format(command, ex))
        return False


class FadeTimer(Timer):
    """
    Eases a value from start to target, window opacity mostly.
    The callback receives (value, done, *args) on every step.
    """
    step_interval = 0.05

    value = None
    target_value = None

    def fade_to(self, start_value, target_value, duration,
                callback=None, *callback_args):
        """ A duration of 0 jumps to the target on the first step. """
        self._fade = (time.time(), duration, start_value, target_value)
        self.value = start_value
        self._callback = callback
        self._callback_args = callback_args
        self.start(self.step_interval)
        self.target_value = target_value

    def stop(self):
        Timer.stop(self)
        self.target_value = None

    def on_timer(self):
        self.value, done = Fade.sin_fade(*self._fade)
        if self._callback:
            self._callback(self.value, done, *self._callback_args)
        return not done


class CallOnce(object):
    """
    Collects callbacks for <delay> ms and runs each of them once,
    so a burst of settings changes turns into a single update.
    """

    def __init__(self, delay=20):
        self.delay = delay
        self._pending = {}
        self._source_id = None

    def enqueue(self, callback, *args):
        self._pending.setdefault(callback, args)
        if self._source_id is None:
            self._source_id = GLib.timeout_add(self.delay, self._flush)

    def stop(self):
        if self._source_id is not None:
            GLib.source_remove(self._source_id)
            self._source_id = None
        self._pending.clear()

    def _flush(self):
        pending = list(self._pending.items())
        self._pending.clear()
        self._source_id = None

        for callback, args in pending:
            try:
                callback(*args)
            except Exception:
                _logger.exception("deferred call to {} failed"
                                  .format(callback))
        return False
