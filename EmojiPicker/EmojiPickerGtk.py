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

import sys
import signal
import logging
from gettext import gettext as _

import dbus
import dbus.service
import dbus.mainloop.glib

from EmojiPicker.Version import require_gi_versions
require_gi_versions()
from gi.repository import GLib, Gdk, Gtk

from EmojiPicker.EmojiData    import load_emoji_data
from EmojiPicker.UsageTracker import UsageTracker
from EmojiPicker.Clipboard    import Clipboard
from EmojiPicker.PickerWindow import PickerWindow
from EmojiPicker.Indicator    import TrayIcon, TrayMenu
from EmojiPicker.Exceptions   import chain_handler
from EmojiPicker.Timer        import CallOnce
from EmojiPicker.WindowUtils  import show_confirmation_dialog

### Config Singleton ###
from EmojiPicker.Config import Config
config = Config()
########################

_logger = logging.getLogger("EmojiPickerGtk")

app = "emoji-picker"


class EmojiPickerGtk(object):
    """
    Main controller class for the emoji picker using GTK+
    """

    def __init__(self):
        # Make sure windows get "emoji-picker", "Emoji-picker" as name
        # and class, whatever the launcher was.
        GLib.set_prgname(str(app))
        Gdk.set_program_class(app[0].upper() + app[1:])

        dbus.mainloop.glib.DBusGMainLoop(set_as_default=True)

        bus = None
        try:
            bus = dbus.SessionBus()
        except dbus.exceptions.DBusException as ex:
            _logger.warning("D-Bus session bus unavailable, single instance "
                            "check and D-Bus service are disabled: {}"
                            .format(ex))

        self._bus_name = None
        if bus:
            # Hand over to a running instance
            if bus.name_has_owner(ServiceEmojiPicker.NAME):
                remote = bus.get_object(ServiceEmojiPicker.NAME,
                                        ServiceEmojiPicker.PATH)
                if config.toggle:
                    remote.Toggle(dbus_interface=ServiceEmojiPicker.IFACE)
                else:
                    remote.Show(dbus_interface=ServiceEmojiPicker.IFACE)
                _logger.info("Exiting: Not the primary instance.")
                sys.exit(0)

            self._bus_name = dbus.service.BusName(ServiceEmojiPicker.NAME,
                                                  bus)

        self.init()

        _logger.info("Entering mainloop of emoji picker")
        Gtk.main()

    def init(self):
        self._connections = []
        self._config_updates = CallOnce(100)
        self.service = None

        records = load_emoji_data(config.get_emoji_filename())
        _logger.info("{} emoji available".format(len(records)))

        self.usage_tracker = UsageTracker(config)
        self.clipboard = Clipboard()

        self._window = PickerWindow(config, records,
                                    self.usage_tracker, self.clipboard)
        self._window.session.connect("emoji-selected",
                                     self._on_emoji_selected)

        self._menu = menu = TrayMenu(self._window, self.usage_tracker)
        self.do_connect(menu, "toggle-picker",
                        lambda x: self.toggle_picker())
        self.do_connect(menu, "clear-usage",
                        lambda x: self.clear_usage())
        self.do_connect(menu, "quit-picker",
                        lambda x: self.do_quit_picker())
        menu.set_accelerator(config.get_keybinding())
        self.status_icon = TrayIcon(menu)
        self.status_icon.set_visible(config.show_indicator)

        # config notifications
        config.show_indicator_notify_add(self._on_show_indicator_changed)
        config.use_keybind_notify_add(
            lambda x: menu.set_accelerator(config.get_keybinding()))
        config.emoji_keybinding_notify_add(
            lambda x: menu.set_accelerator(config.get_keybinding()))
        config.paste_on_select_notify_add(self._on_paste_on_select_changed)
        config.use_custom_theme_notify_add(self._window.set_custom_theme)
        config.skin_tones_disabled_notify_add(
            self._on_skin_tones_disabled_changed)
        config.search_disabled_notify_add(
            lambda x: self._window.set_search_visible(not x))
        config.search_placeholder_notify_add(
            self._window.set_search_placeholder)
        config.skin_tone_location_notify_add(self._window.set_tone_location)
        config.emoji_usage_counts_notify_add(
            lambda x: self.usage_tracker.reload())

        # Several keys change together, resize only once.
        for notify_add in (config.popup_size_mode_notify_add,
                           config.popup_width_notify_add,
                           config.popup_height_notify_add):
            notify_add(lambda x: self._config_updates.enqueue(
                       self._update_popup_size))

        if self._bus_name:
            self.service = ServiceEmojiPicker(self)

        GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, signal.SIGTERM,
                             self.on_sigterm)
        GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, signal.SIGINT,
                             self.on_sigint)

        if config.show or config.toggle:
            self.show_picker()

    def on_sigterm(self):
        """
        Exit on kill.
        """
        _logger.debug("SIGTERM received")
        self.do_quit_picker()
        return False

    def on_sigint(self):
        """
        Exit on Ctrl+C press.
        """
        _logger.debug("SIGINT received")
        self.do_quit_picker()
        return False

    def do_connect(self, instance, signal, handler):
        handler_id = instance.connect(signal, handler)
        self._connections.append((instance, handler_id))

    # Methods concerning the popup
    def is_visible(self):
        return self._window.is_visible()

    def show_picker(self):
        self._window.show_picker()

    def hide_picker(self):
        self._window.hide_picker()

    def toggle_picker(self):
        self._window.toggle_picker()

    def clear_usage(self):
        question = _("Clear the list of frequently used emoji?")
        if show_confirmation_dialog(question, center=True):
            self.usage_tracker.clear()

    def _on_emoji_selected(self, record):
        _logger.info("{} copied to clipboard".format(record.glyph))

    # Config notifications
    def _on_show_indicator_changed(self, show_indicator):
        self.status_icon.set_visible(show_indicator)

    def _on_paste_on_select_changed(self, paste_on_select):
        self._window.session.paste_on_select = paste_on_select

    def _on_skin_tones_disabled_changed(self, disabled):
        self._window.session.set_skin_tones_enabled(not disabled)

    def _update_popup_size(self):
        self._window.apply_popup_dimensions(config.get_popup_dimensions())

    # Methods concerning the application
    def do_quit_picker(self):
        _logger.debug("Entered do_quit_picker")
        self.cleanup()

    def cleanup(self):
        self._config_updates.stop()

        # Write pending usage counts before gsettings goes away.
        self.usage_tracker.cleanup()

        config.cleanup()

        for instance, handler_id in self._connections:
            instance.disconnect(handler_id)
        self._connections = []

        if self.service:
            self.service.remove_from_connection()
            self.service = None

        self.status_icon.cleanup()
        self.status_icon = None
        self._menu.cleanup()

        self.clipboard.cleanup()

        self._window.cleanup()
        self._window.destroy()
        self._window = None
        Gtk.main_quit()


class ServiceEmojiPicker(dbus.service.Object):
    """
    D-Bus service of the running picker, bind the desktop's
    keyboard shortcut to "emoji-picker --toggle" to reach it.
    """

    NAME = "org.emojipicker.EmojiPicker"
    PATH = "/org/emojipicker/EmojiPicker"
    IFACE = "org.emojipicker.EmojiPicker"

    def __init__(self, app):
        dbus.service.Object.__init__(self, dbus.SessionBus(), self.PATH)
        self._app = app

    @dbus.service.method(dbus_interface=IFACE)
    def Toggle(self):  # noqa: flake8
        self._app.toggle_picker()

    @dbus.service.method(dbus_interface=IFACE)
    def Show(self):  # noqa: flake8
        self._app.show_picker()

    @dbus.service.method(dbus_interface=IFACE)
    def Hide(self):  # noqa: flake8
        self._app.hide_picker()

    @dbus.service.method(dbus_interface=IFACE, out_signature="b")
    def IsVisible(self):  # noqa: flake8
        return self._app.is_visible()


def main():
    sys.excepthook = chain_handler
    EmojiPickerGtk()


if __name__ == "__main__":
    main()
