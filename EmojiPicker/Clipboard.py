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
import logging

from EmojiPicker.Version import require_gi_versions
require_gi_versions()
from gi.repository import Gdk, Gtk

from EmojiPicker.Timer import DelayedLauncher
from EmojiPicker.utils import exists_in_path

_logger = logging.getLogger("Clipboard")


# Give the popup time to hide and focus to return to the target window.
PASTE_DELAY = 0.1

XDOTOOL_PASTE_COMMAND = ["xdotool", "key", "--clearmodifiers", "ctrl+v"]
WTYPE_PASTE_COMMAND = ["wtype", "-M", "ctrl", "v", "-m", "ctrl"]


class Clipboard(object):
    """
    Copies text to the clipboard and the primary selection and
    optionally simulates Ctrl+V in the focused application.
    """

    def __init__(self):
        self._clipboards = [Gtk.Clipboard.get(Gdk.SELECTION_CLIPBOARD),
                            Gtk.Clipboard.get(Gdk.SELECTION_PRIMARY)]
        self._launcher = DelayedLauncher()

    def cleanup(self):
        self._launcher.stop()

    def copy(self, text):
        for clipboard in self._clipboards:
            clipboard.set_text(text, -1)
            # Keep the text available after we exit.
            clipboard.store()

    def paste(self):
        args = self.get_paste_command()
        if args is None:
            _logger.warning("can't paste, neither xdotool nor "
                            "wtype is installed")
            return
        self._launcher.launch_delayed(args, PASTE_DELAY)

    @staticmethod
    def get_paste_command():
        """ Key stroke simulator for the current session type. """
        if os.environ.get("WAYLAND_DISPLAY") and exists_in_path("wtype"):
            return WTYPE_PASTE_COMMAND
        if exists_in_path("xdotool"):
            return XDOTOOL_PASTE_COMMAND
        return None
