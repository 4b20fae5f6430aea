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

""" Preferences dialog """

import logging
from gettext import gettext as _

from EmojiPicker.Version import require_gi_versions
require_gi_versions()
from gi.repository import Gtk

from EmojiPicker.WindowUtils import show_confirmation_dialog
from EmojiPicker             import PopupSize

### Config Singleton ###
from EmojiPicker.Config import Config
config = Config()
########################

_logger = logging.getLogger("Settings")

app = "emoji-picker"


def LoadUI(filebase):
    builder = Gtk.Builder()
    builder.set_translation_domain(app)
    builder.add_from_file(config.get_data_filename(filebase + ".ui"))
    return builder


class DialogBuilder(object):
    """
    Utility class for simplified widget setup.
    Has helpers for connecting widgets to ConfigObject properties, i.e.
    indirectly to gsettings keys.
    """

    def __init__(self, builder):
        self.builder = builder

    def wid(self, name):
        return self.builder.get_object(name)

    def bind_spin(self, name, config_object, key):
        w = self.wid(name)
        w.set_value(getattr(config_object, key))
        w.connect("value-changed", self.bind_spin_callback, config_object, key)
        getattr(config_object, key + '_notify_add')(w.set_value)

    def bind_spin_callback(self, widget, config_object, key):
        setattr(config_object, key, widget.get_value_as_int())

    def bind_check(self, name, config_object, key, inverted=False):
        w = self.wid(name)
        w.set_active(getattr(config_object, key) != inverted)
        w.connect("toggled", self.bind_check_callback,
                  config_object, key, inverted)
        getattr(config_object, key + '_notify_add')(
            lambda value: w.set_active(value != inverted))

    def bind_check_callback(self, widget, config_object, key, inverted):
        setattr(config_object, key, widget.get_active() != inverted)

    def bind_combobox_id(self, name, config_object, key):
        w = self.wid(name)
        w.set_active_id(getattr(config_object, key))
        w.connect("changed", self.bind_combobox_id_callback,
                  config_object, key)
        getattr(config_object, key + '_notify_add')(w.set_active_id)

    def bind_combobox_id_callback(self, widget, config_object, key):
        value = widget.get_active_id()
        if value is not None:
            setattr(config_object, key, value)

    def bind_entry(self, name, config_object, key):
        w = self.wid(name)
        w.set_text(getattr(config_object, key))
        w.connect("changed", self.bind_entry_callback, config_object, key)
        getattr(config_object, key + '_notify_add')(
            lambda value: value != w.get_text() and w.set_text(value))

    def bind_entry_callback(self, widget, config_object, key):
        setattr(config_object, key, widget.get_text())


class Settings(DialogBuilder):
    def __init__(self):
        builder = LoadUI("settings")
        DialogBuilder.__init__(self, builder)

        self.window = builder.get_object("settings_window")
        Gtk.Window.set_default_icon_name("face-smile")
        self.window.set_title(_("Emoji Picker Preferences"))

        # General
        self.bind_check("show_indicator_toggle", config, "show_indicator")
        self.bind_check("paste_on_select_toggle", config, "paste_on_select")
        self.bind_check("use_custom_theme_toggle",
                        config, "use_custom_theme")

        # Keyboard shortcut
        self.wid("use_keybind_toggle") \
                .connect_after("toggled", lambda x: self.update_all_widgets())
        self.bind_check("use_keybind_toggle", config, "use_keybind")

        self.keybinding_entry = self.wid("keybinding_entry")
        self.keybinding_entry.set_text(", ".join(config.emoji_keybinding))
        self.keybinding_entry.connect("changed",
                                      self.on_keybinding_entry_changed)
        config.emoji_keybinding_notify_add(
            lambda x: self.keybinding_entry.set_text(", ".join(x)))

        # Search and skin tones
        self.wid("search_toggle") \
                .connect_after("toggled", lambda x: self.update_all_widgets())
        self.bind_check("search_toggle", config, "search_disabled",
                        inverted=True)
        self.bind_entry("search_placeholder_entry",
                        config, "search_placeholder")

        self.wid("skin_tones_toggle") \
                .connect_after("toggled", lambda x: self.update_all_widgets())
        self.bind_check("skin_tones_toggle", config, "skin_tones_disabled",
                        inverted=True)
        self.bind_combobox_id("skin_tone_location_combobox",
                              config, "skin_tone_location")

        # Popup size
        self.wid("popup_size_mode_combobox") \
                .connect_after("changed", lambda x: self.update_all_widgets())
        self.bind_combobox_id("popup_size_mode_combobox",
                              config, "popup_size_mode")

        self.popup_width_spinbutton = self.wid("popup_width_spinbutton")
        self.popup_height_spinbutton = self.wid("popup_height_spinbutton")
        self.popup_width_spinbutton.set_range(PopupSize.MIN_WIDTH,
                                              PopupSize.MAX_WIDTH)
        self.popup_height_spinbutton.set_range(PopupSize.MIN_HEIGHT,
                                               PopupSize.MAX_HEIGHT)
        self.bind_spin("popup_width_spinbutton", config, "popup_width")
        self.bind_spin("popup_height_spinbutton", config, "popup_height")

        self.update_all_widgets()

        self.window.connect("destroy", Gtk.main_quit)
        builder.connect_signals(self)

        self.window.show_all()

        _logger.info("Entering mainloop of emoji-picker-settings")
        Gtk.main()

    def update_all_widgets(self):
        self.keybinding_entry.set_sensitive(config.use_keybind)
        self.wid("search_placeholder_entry") \
            .set_sensitive(not config.search_disabled)
        self.wid("skin_tone_location_combobox") \
            .set_sensitive(not config.skin_tones_disabled)

        custom = config.popup_size_mode == PopupSize.CUSTOM_MODE
        self.popup_width_spinbutton.set_sensitive(custom)
        self.popup_height_spinbutton.set_sensitive(custom)

    def on_keybinding_entry_changed(self, entry):
        accels = [a.strip() for a in entry.get_text().split(",")
                  if a.strip()]
        valid = all(Gtk.accelerator_parse(a)[0] != 0 for a in accels)

        style = entry.get_style_context()
        if valid:
            style.remove_class("error")
            if accels != config.emoji_keybinding:
                config.emoji_keybinding = accels
        else:
            style.add_class("error")

    def on_clear_usage_button_clicked(self, widget):
        question = _("Clear the list of frequently used emoji?")
        if show_confirmation_dialog(question, self.window):
            config.emoji_usage_counts = "{}"

    def on_close_button_clicked(self, widget):
        self.window.destroy()


def main():
    Settings()


if __name__ == '__main__':
    main()
