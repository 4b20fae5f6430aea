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
File containing Config singleton.
"""

import os
import sys
import logging
from optparse import OptionParser
from gettext import gettext as _

from EmojiPicker.Version import require_gi_versions
require_gi_versions()
from gi.repository import Gio

from EmojiPicker.ConfigUtils import ConfigObject
from EmojiPicker.Exceptions  import SchemaError
from EmojiPicker.EmojiData   import find_emoji_data_file
from EmojiPicker             import PopupSize

_logger = logging.getLogger("Config")


SCHEMA_EMOJI_PICKER = "org.emojipicker"

DEFAULT_KEYBINDING = ["<Super>period"]
DEFAULT_SEARCH_PLACEHOLDER = "Search emoji"
DEFAULT_SKIN_TONE_LOCATION = "bottom"
SKIN_TONE_LOCATIONS = ["search", "top", "bottom"]

INSTALL_DIR = "/usr/share/emoji-picker"
LOCAL_INSTALL_DIR = "/usr/local/share/emoji-picker"

SYSTEM_DEFAULTS_FILENAME = "emoji-picker-defaults.conf"


class Config(ConfigObject):
    """
    Singleton Class to encapsulate the gsettings stuff and check values.
    """

    # command line only, not stored in gsettings
    toggle = False
    show = False
    emoji_file = None

    def __new__(cls, *args, **kwargs):
        """
        Singleton magic.
        """
        if not hasattr(cls, "self"):
            cls.self = object.__new__(cls)
            cls.self.init()
        return cls.self

    def __init__(self):
        """
        This constructor is still called multiple times.
        Do nothing here and use the singleton constructor "init()" instead.
        Don't call base class constructors.
        """
        pass

    def init(self):
        """
        Singleton constructor, should only run once.
        """
        parser = OptionParser()
        parser.add_option("-t", "--toggle", action="store_true",
                          dest="toggle",
                          help="Toggle the popup of a running instance")
        parser.add_option("-s", "--show", action="store_true", dest="show",
                          help="Open the popup right after start")
        parser.add_option("-e", "--emoji-file", dest="emoji_file",
                          help="Load emoji from this JSON file")
        parser.add_option("-d", "--debug", type="str", dest="debug",
                          help="DEBUG={notset|debug|info|warning|error|"
                               "critical}")
        options = parser.parse_args()[0]
        self.options = options

        log_params = {
            "format": '%(asctime)s:%(levelname)s:%(name)s: %(message)s'
        }
        if options.debug:
            log_params["level"] = getattr(logging, options.debug.upper())
        logging.basicConfig(**log_params)

        # call base class constructor once logging is available
        try:
            ConfigObject.__init__(self)
        except SchemaError as e:
            _logger.error(str(e))
            sys.exit()

        self.install_dir = self._get_install_dir()

        # Optional distribution defaults, see ConfigObject.
        paths = [os.path.join(self.install_dir, SYSTEM_DEFAULTS_FILENAME),
                 os.path.join("/etc/emoji-picker", SYSTEM_DEFAULTS_FILENAME)]
        self.load_system_defaults(paths)

        self.init_properties(options)

        self.toggle = bool(options.toggle)
        self.show = bool(options.show)
        self.emoji_file = options.emoji_file

        self.on_properties_initialized()

        _logger.debug("Leaving init")

    def cleanup(self):
        self.disconnect_notifications()
        Gio.Settings.sync()    # pending writes, e.g. usage counts

    def _init_keys(self):
        """ Create key descriptions """

        self.schema = SCHEMA_EMOJI_PICKER
        self.sysdef_section = "main"

        self.add_key("use-system-defaults", False)
        self.add_key("show-indicator", True)
        self.add_key("use-keybind", True)
        self.add_key("emoji-keybinding", DEFAULT_KEYBINDING)
        self.add_key("paste-on-select", False)
        self.add_key("use-custom-theme", True)
        self.add_key("skin-tones-disabled", False)
        self.add_key("search-disabled", False)
        self.add_key("search-placeholder", DEFAULT_SEARCH_PLACEHOLDER)
        self.add_key("skin-tone-location", DEFAULT_SKIN_TONE_LOCATION)
        self.add_key("popup-size-mode", PopupSize.DEFAULT_MODE)
        self.add_key("popup-width", 420)
        self.add_key("popup-height", 600)
        self.add_key("emoji-usage-counts", "{}")

    ##### property helpers #####

    def _can_set_popup_size_mode(self, value):
        return value in PopupSize.get_mode_names()

    def _can_set_skin_tone_location(self, value):
        return value in SKIN_TONE_LOCATIONS

    def _can_set_popup_width(self, value):
        return PopupSize.MIN_WIDTH <= value <= PopupSize.MAX_WIDTH

    def _can_set_popup_height(self, value):
        return PopupSize.MIN_HEIGHT <= value <= PopupSize.MAX_HEIGHT

    def _can_set_emoji_keybinding(self, value):
        return all(isinstance(accel, str) for accel in value)

    def get_popup_dimensions(self):
        return PopupSize.get_dimensions(self.popup_size_mode,
                                        self.popup_width,
                                        self.popup_height)

    def is_keybinding_enabled(self):
        return self.use_keybind and bool(self.emoji_keybinding)

    def get_keybinding(self):
        """ First configured accelerator, None if there is none. """
        if self.is_keybinding_enabled():
            return self.emoji_keybinding[0]
        return None

    # usage counts store for UsageTracker
    def get_usage_counts(self):
        return self.emoji_usage_counts

    def set_usage_counts(self, value):
        self.emoji_usage_counts = value

    def get_emoji_filename(self):
        return find_emoji_data_file(self.emoji_file)

    def get_data_filename(self, basename):
        return os.path.join(self.install_dir, "data", basename) \
               if self._is_source_tree(self.install_dir) else \
               os.path.join(self.install_dir, basename)

    @staticmethod
    def _is_source_tree(path):
        return os.path.isfile(os.path.join(path, "data",
                                           SCHEMA_EMOJI_PICKER +
                                           ".gschema.xml"))

    def _get_install_dir(self):
        result = None

        # when run from source
        src_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        if self._is_source_tree(src_path):
            result = src_path
        # when installed to /usr/local
        elif os.path.isdir(LOCAL_INSTALL_DIR):
            result = LOCAL_INSTALL_DIR
        # when installed to /usr
        elif os.path.isdir(INSTALL_DIR):
            result = INSTALL_DIR

        if result is None:
            _logger.warning(_("installation directory not found, "
                              "falling back to '{}'").format(INSTALL_DIR))
            result = INSTALL_DIR
        return result
