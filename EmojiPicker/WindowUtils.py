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

""" Window placement and dialog helpers """

import logging
from gettext import gettext as _

from EmojiPicker.Version import require_gi_versions
require_gi_versions()
from gi.repository import Gdk, Gtk

_logger = logging.getLogger("WindowUtils")


def get_primary_workarea():
    """
    (x, y, width, height) of the usable area of the primary monitor,
    falling back to the first monitor.
    """
    display = Gdk.Display.get_default()
    monitor = display.get_primary_monitor()
    if monitor is None and display.get_n_monitors():
        monitor = display.get_monitor(0)
    if monitor is None:
        return None
    r = monitor.get_workarea()
    return (r.x, r.y, r.width, r.height)


def center_in_rect(rect, width, height):
    """
    Position of a width x height window centered in rect, never
    leaving rect's top left corner.

    Doctests:
    >>> center_in_rect((0, 0, 1920, 1080), 420, 600)
    (750, 240)
    >>> center_in_rect((1920, 0, 300, 300), 420, 600)
    (1920, 0)
    """
    x, y, w, h = rect
    return (max(x, x + (w - width) // 2),
            max(y, y + (h - height) // 2))


def show_confirmation_dialog(question, parent=None, center=False, title=None):
    """
    Show this dialog to ask confirmation before executing a task.
    """
    if title is None:
        title = _("Emoji Picker")
    dlg = Gtk.MessageDialog(message_type=Gtk.MessageType.QUESTION,
                            text=question,
                            title=title,
                            buttons=Gtk.ButtonsType.YES_NO)
    if parent:
        dlg.set_transient_for(parent)

    if center:
        dlg.set_position(Gtk.WindowPosition.CENTER)

    response = dlg.run()
    dlg.destroy()
    return response == Gtk.ResponseType.YES
