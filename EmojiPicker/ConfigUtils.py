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
ConfigObject, python properties backed by gsettings keys.
"""

import logging
import configparser
from ast import literal_eval
from gettext import gettext as _

from EmojiPicker.Version import require_gi_versions
require_gi_versions()
from gi.repository import Gio

from EmojiPicker.Exceptions import SchemaError

_logger = logging.getLogger("ConfigUtils")


_CAN_SET_HOOK       = "_can_set_"        # return True if value is valid
_GSETTINGS_GET_HOOK = "_gsettings_get_"  # read from gsettings
_GSETTINGS_SET_HOOK = "_gsettings_set_"  # write to gsettings
_POST_NOTIFY_HOOK   = "_post_notify_"    # runs after all listeners
_NOTIFY_CALLBACKS   = "_{}_notify_callbacks"


class ConfigObject(object):
    """
    A group of settings sharing one gsettings schema.

    Every key added in _init_keys() becomes a python property plus
    <prop>_notify_add()/<prop>_notify_remove() to listen for changes.
    Values come from gsettings, may be overridden by system defaults
    and finally by command line options of the same name.

    Optional hooks, looked up by property name:
        _can_set_<prop>(value)          validate before storing
        _gsettings_get_<prop>(gskey)    custom read, e.g. type conversion
        _gsettings_set_<prop>(gskey, value)  custom write
        _post_notify_<prop>()           after all listeners were called
    """

    def __init__(self, parent=None, schema=""):
        self.parent = parent
        self.children = []
        self.schema = schema
        self.gskeys = {}            # {property name: GSKey}
        self.sysdef_section = None  # section in the system defaults file
        self.system_defaults = {}   # {property name: value}

        self._init_keys()

        source = Gio.SettingsSchemaSource.get_default()
        if source is None or source.lookup(self.schema, True) is None:
            raise SchemaError(_("gsettings schema for '{}' is not installed")
                              .format(self.schema))

        self.settings = Gio.Settings.new(self.schema)
        for gskey in self.gskeys.values():
            gskey.settings = self.settings
            self._setup_property(gskey)

        self.check_hooks()

    def _init_keys(self):
        """ Overload this and call add_key() for each key. """
        pass

    def add_key(self, key, default, prop=None, sysdef=None, writable=True):
        gskey = GSKey(None, key, default, prop, sysdef, writable)
        self.gskeys[gskey.prop] = gskey
        return gskey

    def find_key(self, key):
        """ GSKey of the gsettings key name <key>. """
        for gskey in self.gskeys.values():
            if gskey.key == key:
                return gskey
        return None

    def check_hooks(self):
        """
        Catch misspelled hook functions early: the property part of
        their names has to be a known property.
        """
        prefixes = [_CAN_SET_HOOK,
                    _GSETTINGS_GET_HOOK,
                    _GSETTINGS_SET_HOOK,
                    _POST_NOTIFY_HOOK]

        for member in dir(self):
            for prefix in prefixes:
                if member.startswith(prefix):
                    prop = member[len(prefix):]
                    if prop not in self.gskeys:
                        raise NameError(
                            "'{}' looks like a ConfigObject hook function, "
                            "but '{}' is not a known property of '{}'"
                            .format(member, prop, str(self)))

    def disconnect_notifications(self):
        """ Drop all change listeners, recursively. """
        for prop in self.gskeys:
            setattr(type(self), _NOTIFY_CALLBACKS.format(prop), [])

        for child in self.children:
            child.disconnect_notifications()

    def _has_hook(self, hook, prop):
        return hasattr(self, hook + prop)

    def _call_hook(self, hook, prop, *args):
        return getattr(self, hook + prop)(*args)

    def _read_gskey(self, gskey):
        if self._has_hook(_GSETTINGS_GET_HOOK, gskey.prop):
            return self._call_hook(_GSETTINGS_GET_HOOK, gskey.prop, gskey)
        return gskey.gsettings_get()

    def _can_set(self, prop, value):
        return not self._has_hook(_CAN_SET_HOOK, prop) or \
               self._call_hook(_CAN_SET_HOOK, prop, value)

    def _setup_property(self, gskey):
        """ Create the property and its change notification. """
        prop = gskey.prop
        callbacks_name = _NOTIFY_CALLBACKS.format(prop)
        cls = type(self)

        setattr(cls, callbacks_name, [])

        def notify_add(self, callback):
            getattr(self, callbacks_name).append(callback)
        setattr(cls, prop + "_notify_add", notify_add)

        def notify_remove(self, callback):
            callbacks = getattr(self, callbacks_name)
            if callback in callbacks:
                callbacks.remove(callback)
        setattr(cls, prop + "_notify_remove", notify_remove)

        # Someone, maybe the preferences dialog, changed the key.
        def on_changed(self, settings, key):
            value = self._read_gskey(gskey)

            if self._can_set(prop, value) and gskey.value != value:
                gskey.value = value
                for callback in list(getattr(self, callbacks_name)):
                    callback(value)

            if self._has_hook(_POST_NOTIFY_HOOK, prop):
                self._call_hook(_POST_NOTIFY_HOOK, prop)

        setattr(cls, "_" + prop + "_changed_cb", on_changed)

        if gskey.settings:
            gskey.settings.connect("changed::" + gskey.key,
                                   getattr(self, "_" + prop + "_changed_cb"))

        def get_value(self):
            return gskey.value

        def set_value(self, value, save=True):
            if not self._can_set(prop, value):
                _logger.warning("refusing invalid value {!r} for '{}'"
                                .format(value, gskey.key))
                return

            if save:
                if self._has_hook(_GSETTINGS_SET_HOOK, prop):
                    self._call_hook(_GSETTINGS_SET_HOOK, prop, gskey, value)
                elif value != gskey.value:
                    gskey.gsettings_set(value)

            gskey.value = value

        # getters and setters may be overloaded
        if not hasattr(self, "get_" + prop):
            setattr(cls, "get_" + prop, get_value)
        if not hasattr(self, "set_" + prop):
            setattr(cls, "set_" + prop, set_value)
        setattr(cls, prop, property(getattr(cls, "get_" + prop),
                                    getattr(cls, "set_" + prop)))

    def init_properties(self, options):
        """ Initial values: gsettings, then system defaults, then options """
        self.init_from_gsettings()

        if self.use_system_defaults:
            self.init_from_system_defaults()
            self.use_system_defaults = False    # only once

        for gskey in self.gskeys.values():
            value = getattr(options, gskey.prop, None)
            if value is not None:
                gskey.value = value

    def init_from_gsettings(self):
        for gskey in self.gskeys.values():
            gskey.value = self._read_gskey(gskey)

        for child in self.children:
            child.init_from_gsettings()

    def init_from_system_defaults(self):
        for prop, value in self.system_defaults.items():
            setattr(self, prop, value)      # writes to gsettings

        for child in self.children:
            child.init_from_system_defaults()

    def on_properties_initialized(self):
        for child in self.children:
            child.on_properties_initialized()

    def load_system_defaults(self, paths):
        """
        Distributions may ship an ini-style file with their own
        defaults. Of several files the last one found wins.
        """
        _logger.info(_("Looking for system defaults in {paths}")
                     .format(paths=paths))

        parser = configparser.ConfigParser()
        filenames = None
        try:
            filenames = parser.read(paths, encoding="UTF-8")
        except configparser.Error as ex:
            _logger.error(_("Failed to read system defaults. ") + str(ex))

        if not filenames:
            _logger.info(_("No system defaults found."))
        else:
            _logger.info(_("Loading system defaults from {filename}")
                         .format(filename=filenames))
            self._read_sysdef_section(parser)

    def _read_sysdef_section(self, parser):
        for child in self.children:
            child._read_sysdef_section(parser)

        self.system_defaults = {}
        if not self.sysdef_section or \
           not parser.has_section(self.sysdef_section):
            return

        sysdef_gskeys = dict((k.sysdef, k) for k in self.gskeys.values())
        for sysdef, text in parser.items(self.sysdef_section):
            _logger.info(_("Found system default '{}={}'")
                         .format(sysdef, text))

            gskey = sysdef_gskeys.get(sysdef)
            value = self._convert_sysdef_key(gskey, sysdef, text)
            if value is not None:
                self.system_defaults[gskey.prop] = value

    def _convert_sysdef_key(self, gskey, sysdef, text):
        """
        Turn the string of the ini file into a value of the same type
        as the key's default.
        """
        if gskey is None:
            _logger.warning(_("System defaults: Unknown key '{}' "
                              "in section '{}'")
                            .format(sysdef, self.sysdef_section))
            return None

        if isinstance(gskey.default, str):
            if not text.startswith('"'):
                text = '"' + text + '"'
        try:
            return literal_eval(text)
        except (ValueError, SyntaxError) as ex:
            _logger.warning(_("System defaults: Invalid value "
                              "for key '{}' in section '{}'\n  {}")
                            .format(sysdef, self.sysdef_section, ex))
        return None


class GSKey:
    """
    One gsettings key, the python property it backs and its name in
    the system defaults file. The type of default determines how the
    key is read.
    """

    def __init__(self, settings, key, default, prop, sysdef, writable):
        if prop is None:
            prop = key.replace("-", "_")
        if sysdef is None:
            sysdef = key
        self.settings = settings
        self.key      = key
        self.sysdef   = sysdef
        self.prop     = prop
        self.default  = default
        self.value    = default
        self.writable = writable    # False: never write to gsettings

    def is_default(self):
        return self.value == self.default

    def gsettings_get(self):
        value = self.default
        try:
            if isinstance(self.default, bool):
                value = self.settings.get_boolean(self.key)
            elif isinstance(self.default, str):
                value = self.settings.get_string(self.key)
            elif isinstance(self.default, int):
                value = self.settings.get_int(self.key)
            elif isinstance(self.default, float):
                value = self.settings.get_double(self.key)
            elif isinstance(self.default, list):
                value = list(self.settings.get_strv(self.key))
            else:
                value = self.settings[self.key]
        except KeyError as ex:
            _logger.error(_("Failed to get gsettings value. ") + str(ex))

        return value

    def gsettings_set(self, value):
        if not self.writable:
            return
        if isinstance(self.default, list):
            self.settings.set_strv(self.key, value)
        else:
            self.settings[self.key] = value

    def gsettings_apply(self):
        """ Write the current value. """
        self.gsettings_set(self.value)
