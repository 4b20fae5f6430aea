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

import os
import time
from math import pi, cos
import logging

_logger = logging.getLogger("utils")


def exists_in_path(basename):
    """
    True if one of the $PATH directories holds a file named basename.
    """
    for path in os.environ.get("PATH", "").split(os.pathsep):
        filename = os.path.join(path, basename)
        if os.path.isfile(filename):
            return True
    return False


def hexcolor_to_rgba(color):
    """
    Doctests:
    >>> hexcolor_to_rgba("#FF0000")
    (1.0, 0.0, 0.0, 1.0)
    >>> hexcolor_to_rgba("#00ff0080")
    (0.0, 1.0, 0.0, 0.5019607843137255)
    """
    value = color.lstrip("#")
    rgba = [int(value[i:i + 2], 16) / 255.0
            for i in range(0, len(value), 2)]
    if len(rgba) == 3:
        rgba.append(1.0)
    return tuple(rgba)


class EventSource(object):
    """ Named events with plain python callbacks. """

    def __init__(self, event_names):
        self._callbacks = dict((e, []) for e in event_names)

    def cleanup(self):
        for callbacks in self._callbacks.values():
            del callbacks[:]

    def connect(self, event_name, callback):
        callbacks = self._callbacks[event_name]
        if callback not in callbacks:
            callbacks.append(callback)

    def disconnect(self, event_name, callback):
        callbacks = self._callbacks[event_name]
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event_name, *args, **kwargs):
        """
        Call the listeners of event_name in connection order.
        """
        for callback in list(self._callbacks[event_name]):
            callback(*args, **kwargs)


class XDGDirs:
    """
    Data file lookup after the XDG Base Directory rules.
    http://standards.freedesktop.org/basedir-spec/basedir-spec-latest.html

    Doctests:

    >>> old_env = os.environ.copy()
    >>> os.environ["HOME"] = "/home/test_user"

    # XDG_DATA_HOME unavailable
    >>> os.environ["XDG_DATA_HOME"] = ""
    >>> XDGDirs.get_data_home("emoji-picker/emoji.json")
    '/home/test_user/.local/share/emoji-picker/emoji.json'

    # XDG_DATA_DIRS available
    >>> os.environ["XDG_DATA_DIRS"] = "/usr/share/gnome:/usr/share/"
    >>> XDGDirs.get_all_data_dirs("emoji-picker/emoji.json")
    ['/home/test_user/.local/share/emoji-picker/emoji.json', \
'/usr/share/gnome/emoji-picker/emoji.json', \
'/usr/share/emoji-picker/emoji.json']

    >>> os.environ.clear()
    >>> os.environ.update(old_env)
    """

    @staticmethod
    def get_data_home(file=None):
        """ $XDG_DATA_HOME, ~/.local/share when unset or relative. """
        home = os.environ.get("XDG_DATA_HOME")
        if home and not os.path.isabs(home):
            _logger.warning("ignoring relative XDG_DATA_HOME '{}'"
                            .format(home))
            home = None
        if not home:
            home = os.path.expanduser(os.path.join("~", ".local", "share"))
        return os.path.join(home, file) if file else home

    @staticmethod
    def get_data_dirs():
        """ System data directories, most important first. """
        dirs = (os.environ.get("XDG_DATA_DIRS") or
                "/usr/local/share/:/usr/share/")
        return [d for d in dirs.split(os.pathsep) if os.path.isabs(d)]

    @staticmethod
    def get_all_data_dirs(file=None):
        dirs = [XDGDirs.get_data_home()] + XDGDirs.get_data_dirs()
        if file:
            dirs = [os.path.join(d, file) for d in dirs]
        return dirs

    @staticmethod
    def find_data_file(file):
        """
        Readable file of the user or the system, None if there is none.
        """
        for path in XDGDirs.get_all_data_dirs(file):
            if os.path.isfile(path) and os.access(path, os.R_OK):
                return path
        return None


class Fade:
    """
    Sine eased interpolation.

    Doctests:
    >>> Fade.sin_int(0.0, 2.0, 4.0)
    2.0
    >>> Fade.sin_int(1.0, 2.0, 4.0)
    4.0
    """
    @staticmethod
    def sin_fade(start_time, duration, start_value, target_value):
        """ Returns (value, done) for the current time. """
        progress = 1.0
        if duration:
            progress = min(1.0, (time.time() - start_time) / duration)
        value = Fade.sin_int(progress, start_value, target_value)
        return value, progress >= 1.0

    @staticmethod
    def sin_int(progress, start_value, target_value):
        eased = (1.0 - cos(progress * pi)) / 2.0
        return start_value + eased * (target_value - start_value)
