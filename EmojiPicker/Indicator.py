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
Tray icon of the picker and its menu.
"""

import sys
import logging
import subprocess
from gettext import gettext as _

from EmojiPicker.Version import require_gi_versions
require_gi_versions()
from gi.repository import GObject, Gtk

_logger = logging.getLogger("Indicator")


ICON_NAME = "face-smile-symbolic"
APP_ID = "emoji-picker"


class TrayMenu(GObject.GObject):
    """
    Menu shared by all tray icon backends. Clicks are forwarded
    as signals, the application decides what to do with them.
    """

    __gsignals__ = {
        "toggle-picker": (GObject.SignalFlags.RUN_LAST,
                          GObject.TYPE_NONE, ()),
        "clear-usage":   (GObject.SignalFlags.RUN_LAST,
                          GObject.TYPE_NONE, ()),
        "quit-picker":   (GObject.SignalFlags.RUN_LAST,
                          GObject.TYPE_NONE, ()),
    }

    def __init__(self, picker, usage_tracker):
        GObject.GObject.__init__(self)

        self._picker = picker
        self._usage_tracker = usage_tracker

        self._menu = Gtk.Menu()
        self._toggle_item = self._add_item(_("_Show Emoji Picker"),
                                           self.emit_toggle)
        self._add_separator()
        self._clear_item = self._add_item(_("_Clear Frequently Used"),
                                          lambda: self.emit("clear-usage"))
        self._add_item(_("_Preferences"), self._launch_settings)
        self._add_separator()
        self._add_item(_("_Quit"), lambda: self.emit("quit-picker"))

        self._menu.connect("show", lambda menu: self.update_items())
        self._menu.show_all()

    def cleanup(self):
        self._picker = None
        self._usage_tracker = None

    def _add_item(self, label, callback):
        item = Gtk.MenuItem.new_with_mnemonic(label)
        item.connect("activate", lambda x: callback())
        self._menu.append(item)
        return item

    def _add_separator(self):
        self._menu.append(Gtk.SeparatorMenuItem.new())

    def get_gtk_menu(self):
        return self._menu

    def get_toggle_item(self):
        return self._toggle_item

    def popup_at_pointer(self):
        self._menu.popup_at_pointer(None)

    def set_accelerator(self, accel):
        """ Show the desktop's shortcut next to the show/hide item. """
        key, mods = (0, 0)
        if accel:
            key, mods = Gtk.accelerator_parse(accel)
        self._toggle_item.get_child().set_accel(key, mods)

    def update_items(self):
        if self._picker and self._picker.is_visible():
            label = _("_Hide Emoji Picker")
        else:
            label = _("_Show Emoji Picker")
        self._toggle_item.set_label(label)

        if self._usage_tracker:
            self._clear_item.set_sensitive(self._usage_tracker.has_usage())

    def emit_toggle(self):
        self.emit("toggle-picker")

    def _launch_settings(self):
        try:
            subprocess.Popen([sys.executable, "-m", "EmojiPicker.settings"])
        except OSError as ex:
            _logger.warning("failed to start preferences: {}".format(ex))


class TrayIcon(object):
    """
    The first backend that can be created wins, AppIndicator
    before Gtk.StatusIcon.
    """

    def __init__(self, menu, backends=None):
        if backends is None:
            backends = [AppIndicatorBackend, StatusIconBackend]

        self._backend = None
        for backend_class in backends:
            try:
                self._backend = backend_class(menu)
            except RuntimeError as ex:
                _logger.info("tray icon backend {} unavailable: {}"
                             .format(backend_class.__name__, ex))
                continue
            _logger.info("using tray icon backend {}"
                         .format(backend_class.__name__))
            break
        else:
            _logger.warning("no tray icon backend available")

        self.set_visible(False)

    def cleanup(self):
        if self._backend is not None:
            self.set_visible(False)
            self._backend = None

    def set_visible(self, visible):
        if self._backend is not None:
            self._backend.set_visible(visible)


class AppIndicatorBackend(object):
    """ StatusNotifierItem through libayatana/libappindicator. """

    def __init__(self, menu):
        try:
            from gi.repository import AppIndicator3
        except (ImportError, ValueError) as ex:
            raise RuntimeError(ex)

        self._status = AppIndicator3.IndicatorStatus
        self._indicator = AppIndicator3.Indicator.new(
            APP_ID, ICON_NAME,
            AppIndicator3.IndicatorCategory.APPLICATION_STATUS)
        self._indicator.set_title(_("Emoji Picker"))
        self._indicator.set_menu(menu.get_gtk_menu())

        # middle click toggles
        self._indicator.set_secondary_activate_target(menu.get_toggle_item())

    def set_visible(self, visible):
        self._indicator.set_status(self._status.ACTIVE if visible
                                   else self._status.PASSIVE)


class StatusIconBackend(object):
    """ Legacy system tray icon, left click toggles. """

    def __init__(self, menu):
        if not hasattr(Gtk, "StatusIcon"):
            raise RuntimeError("Gtk.StatusIcon not available")

        self._menu = menu
        self._icon = Gtk.StatusIcon(icon_name=ICON_NAME)
        self._icon.set_tooltip_text(_("Emoji Picker"))
        self._icon.connect("activate", lambda icon: menu.emit_toggle())
        self._icon.connect("popup-menu", self._on_popup_menu)

    def set_visible(self, visible):
        self._icon.set_visible(visible)

    def _on_popup_menu(self, icon, button, activate_time):
        self._menu.update_items()
        self._menu.popup_at_pointer()
