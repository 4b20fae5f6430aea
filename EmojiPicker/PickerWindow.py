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
The popup window and the GTK widgets behind the picker's view interfaces.
"""

import os
import logging
from math import pi
from gettext import gettext as _

import cairo

from EmojiPicker.Version import require_gi_versions
require_gi_versions()
from gi.repository import Gdk, GLib, Gtk

from EmojiPicker.EmojiData     import CATEGORY_EMOJI, CATEGORY_ICONS
from EmojiPicker.EmojiRenderer import EmojiGridView
from EmojiPicker.CategoryController import TabStrip
from EmojiPicker.PickerSession import PickerSession
from EmojiPicker.Timer         import FadeTimer, CallOnce
from EmojiPicker.WindowUtils   import get_primary_workarea, center_in_rect
from EmojiPicker.utils         import hexcolor_to_rgba

_logger = logging.getLogger("PickerWindow")


FADE_IN_DURATION = 0.15
FADE_OUT_DURATION = 0.1

CSS_FILENAME = "emoji-picker.css"
CUSTOM_THEME_CLASS = "emoji-picker-custom"
ACTIVE_TAB_CLASS = "active"

TONE_SWATCH_SIZE = 24


class EmojiGrid(EmojiGridView, Gtk.ScrolledWindow):
    """
    Scrollable column of section headers and rows of emoji buttons.
    """

    def __init__(self, tone_bar):
        Gtk.ScrolledWindow.__init__(self)
        self.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
        self.set_vexpand(True)

        self._box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL,
                            spacing=0)
        self._box.get_style_context().add_class("emoji-grid")
        self.add(self._box)

        self._tone_bar = tone_bar
        self._on_scroll = None
        self._on_layout_changed = None
        self._layout_notify = CallOnce(20)

        self.get_vadjustment().connect("value-changed",
                                       self._on_value_changed)
        self._box.connect("size-allocate", self._on_size_allocate)

    def cleanup(self):
        self._layout_notify.stop()
        self._on_scroll = None
        self._on_layout_changed = None

    def set_scroll_callbacks(self, on_scroll, on_layout_changed):
        self._on_scroll = on_scroll
        self._on_layout_changed = on_layout_changed

    def _on_value_changed(self, adjustment):
        if self._on_scroll:
            self._on_scroll(adjustment.get_value())

    def _on_size_allocate(self, widget, allocation):
        # Not from within size-allocate, scrolling would queue another one.
        if self._on_layout_changed:
            self._layout_notify.enqueue(self._on_layout_changed)

    def clear(self):
        for child in self._box.get_children():
            child.destroy()

    def add_header(self, category):
        label = Gtk.Label(label=_(category), xalign=0.0)
        label.get_style_context().add_class("category-header")
        label.show()
        self._box.pack_start(label, False, False, 0)
        return label

    def add_row(self, records, on_activate):
        row = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=0)
        row.get_style_context().add_class("emoji-row")
        for record in records:
            row.pack_start(self._create_button(record, on_activate),
                           False, False, 0)
        row.show_all()
        self._box.pack_start(row, False, False, 0)

    @staticmethod
    def _create_button(record, on_activate):
        button = Gtk.Button(label=record.glyph)
        button.set_relief(Gtk.ReliefStyle.NONE)
        button.set_tooltip_text(record.description)
        button.get_accessible().set_name(record.description)
        button.get_style_context().add_class("emoji-button")
        button.connect("clicked", lambda b: on_activate(record))
        return button

    def get_header_offset(self, header):
        if header.get_allocated_height() <= 1:
            return None
        position = header.translate_coordinates(self._box, 0, 0)
        if position is None:
            return None
        return position[1]

    def scroll_to(self, offset):
        self.get_vadjustment().set_value(offset)

    def show_tone_selector(self, record, tones, on_tone_selected):
        self._tone_bar.show_tones(record, tones, on_tone_selected)

    def hide_tone_selector(self):
        self._tone_bar.hide_tones()


class CategoryTabs(TabStrip, Gtk.Box):
    """ One flat button per category, icon if the theme has one. """

    def __init__(self):
        Gtk.Box.__init__(self, orientation=Gtk.Orientation.HORIZONTAL,
                         spacing=0, homogeneous=True)
        self.get_style_context().add_class("category-tabs")
        self._buttons = {}

    def set_tabs(self, categories, on_clicked):
        for child in self.get_children():
            child.destroy()
        self._buttons = {}

        icon_theme = Gtk.IconTheme.get_default()
        for category in categories:
            button = Gtk.Button()
            button.set_relief(Gtk.ReliefStyle.NONE)
            button.set_can_focus(False)
            button.set_tooltip_text(_(category))
            button.get_style_context().add_class("category-tab")

            icon_name = CATEGORY_ICONS.get(category)
            if icon_name and icon_theme.has_icon(icon_name):
                button.set_image(Gtk.Image.new_from_icon_name(
                    icon_name, Gtk.IconSize.BUTTON))
            else:
                button.set_label(CATEGORY_EMOJI.get(category, "?"))

            button.connect("clicked", self._on_button_clicked,
                           category, on_clicked)
            self.pack_start(button, True, True, 0)
            self._buttons[category] = button

        self.show_all()

    def set_tab_active(self, category, active):
        button = self._buttons.get(category)
        if button is None:
            return
        style = button.get_style_context()
        if active:
            style.add_class(ACTIVE_TAB_CLASS)
        else:
            style.remove_class(ACTIVE_TAB_CLASS)

    @staticmethod
    def _on_button_clicked(button, category, on_clicked):
        on_clicked(category)


class ToneSwatch(Gtk.DrawingArea):
    """ Filled circle in the color of a skin tone. """

    def __init__(self, color):
        Gtk.DrawingArea.__init__(self)
        self._rgba = hexcolor_to_rgba(color)
        self.set_size_request(TONE_SWATCH_SIZE, TONE_SWATCH_SIZE)
        self.connect("draw", self.on_draw)

    def on_draw(self, widget, context):
        w = self.get_allocated_width()
        h = self.get_allocated_height()
        radius = min(w, h) / 2.0 - 1

        context.set_antialias(cairo.ANTIALIAS_BEST)
        context.arc(w / 2.0, h / 2.0, radius, 0, 2 * pi)
        context.set_source_rgba(*self._rgba)
        context.fill_preserve()
        context.set_source_rgba(0.0, 0.0, 0.0, 0.3)
        context.set_line_width(1.0)
        context.stroke()
        return True


class SkinToneBar(Gtk.Revealer):
    """ Row of skin tone swatches for the emoji last clicked. """

    def __init__(self):
        Gtk.Revealer.__init__(self)
        self.set_transition_type(Gtk.RevealerTransitionType.SLIDE_UP)

        self._box = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL,
                            spacing=4)
        self._box.get_style_context().add_class("skin-tone-selector")
        self.add(self._box)

        self._record = None

    def get_record(self):
        return self._record

    def show_tones(self, record, tones, on_tone_selected):
        self._record = record
        for child in self._box.get_children():
            child.destroy()

        preview = Gtk.Label(label=record.glyph)
        preview.get_style_context().add_class("skin-tone-preview")
        self._box.pack_start(preview, False, False, 0)

        for tone in tones:
            button = Gtk.Button()
            button.set_relief(Gtk.ReliefStyle.NONE)
            button.set_tooltip_text(_("{} skin tone").format(_(tone.name)))
            button.get_accessible().set_name(
                _("{} skin tone").format(_(tone.name)))
            button.get_style_context().add_class("skin-tone-circle")
            button.add(ToneSwatch(tone.color))
            button.connect("clicked",
                           lambda b, tone=tone: on_tone_selected(tone))
            self._box.pack_start(button, False, False, 0)

        self._box.show_all()
        self.set_reveal_child(True)

    def hide_tones(self):
        self._record = None
        self.set_reveal_child(False)


class PickerWindow(Gtk.Window):
    """
    Undecorated, always on top popup: search entry, category tabs,
    emoji grid and the skin tone bar.
    """

    def __init__(self, config, records, usage_tracker, clipboard):
        Gtk.Window.__init__(self,
                            title=_("Emoji Picker"),
                            skip_taskbar_hint=True,
                            skip_pager_hint=True,
                            urgency_hint=False,
                            decorated=False,
                            resizable=False,
                            type_hint=Gdk.WindowTypeHint.DIALOG)
        self.set_keep_above(True)

        # use transparency for fading if available
        visual = Gdk.Screen.get_default().get_rgba_visual()
        if visual:
            self.set_visual(visual)

        self._config = config
        self._visible = False
        self._fade_timer = FadeTimer()
        self._css_provider = None

        self._build_widgets()
        self._load_css()

        dimensions = config.get_popup_dimensions()
        self.session = PickerSession(
            records, usage_tracker,
            self.search_entry, self.grid, self.tabs, clipboard,
            paste_on_select=config.paste_on_select,
            emojis_per_row=dimensions.emojis_per_row,
            skin_tones_enabled=not config.skin_tones_disabled)
        self.grid.set_scroll_callbacks(
            self.session.category_controller.on_scroll,
            self.session.category_controller.on_layout_changed)
        self.session.connect("close-request", self.hide_picker)

        self.set_custom_theme(config.use_custom_theme)
        self.set_search_visible(not config.search_disabled)
        self.set_search_placeholder(config.search_placeholder)
        self.set_tone_location(config.skin_tone_location)
        self.apply_popup_dimensions(dimensions)

        self.connect("key-press-event", self._on_key_press)
        self.connect("focus-out-event", self._on_focus_out)
        self.connect("delete-event", self._on_delete)

    def cleanup(self):
        self._fade_timer.stop()
        self.grid.cleanup()
        self.session.cleanup()
        if self._css_provider:
            Gtk.StyleContext.remove_provider_for_screen(
                Gdk.Screen.get_default(), self._css_provider)
            self._css_provider = None

    def _build_widgets(self):
        self._vbox = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=6)
        self._vbox.get_style_context().add_class("emoji-picker")
        self.add(self._vbox)

        self._search_row = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL,
                                   spacing=6)
        self.search_entry = Gtk.SearchEntry()
        self.search_entry.set_hexpand(True)
        self.search_entry.connect("changed", self._on_search_changed)
        self.search_entry.connect("activate", self._on_search_activate)
        self._search_row.pack_start(self.search_entry, True, True, 0)
        self._search_row.set_no_show_all(True)
        self.search_entry.show()
        self._vbox.pack_start(self._search_row, False, False, 0)

        self.tabs = CategoryTabs()
        self._vbox.pack_start(self.tabs, False, False, 0)

        self.tone_bar = SkinToneBar()
        self.grid = EmojiGrid(self.tone_bar)
        self._vbox.pack_start(self.grid, True, True, 0)
        self._vbox.pack_start(self.tone_bar, False, False, 0)

        self._vbox.show_all()

    def _load_css(self):
        filename = self._config.get_data_filename(CSS_FILENAME)
        if not os.path.isfile(filename):
            _logger.warning("style sheet '{}' not found".format(filename))
            return

        provider = Gtk.CssProvider()
        try:
            provider.load_from_path(filename)
        except GLib.Error as ex:
            _logger.warning("failed to load style sheet '{}': {}"
                            .format(filename, ex))
            return

        Gtk.StyleContext.add_provider_for_screen(
            Gdk.Screen.get_default(), provider,
            Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION)
        self._css_provider = provider

    ##### settings #####

    def set_custom_theme(self, enable):
        style = self.get_style_context()
        if enable:
            style.add_class(CUSTOM_THEME_CLASS)
        else:
            style.remove_class(CUSTOM_THEME_CLASS)

    def set_search_visible(self, visible):
        self._search_row.set_visible(visible)
        if not visible:
            self.search_entry.set_text("")

    def set_search_placeholder(self, text):
        self.search_entry.set_placeholder_text(text)

    def set_tone_location(self, location):
        """ Skin tone bar next to the search entry, above or below the grid """
        parent = self.tone_bar.get_parent()
        if parent:
            parent.remove(self.tone_bar)

        if location == "search":
            self.tone_bar.set_transition_type(
                Gtk.RevealerTransitionType.SLIDE_LEFT)
            self._search_row.pack_end(self.tone_bar, False, False, 0)
        else:
            self._vbox.pack_start(self.tone_bar, False, False, 0)
            if location == "top":
                self.tone_bar.set_transition_type(
                    Gtk.RevealerTransitionType.SLIDE_DOWN)
                self._vbox.reorder_child(self.tone_bar, 2)
            else:
                self.tone_bar.set_transition_type(
                    Gtk.RevealerTransitionType.SLIDE_UP)
        self.tone_bar.show_all()

    def apply_popup_dimensions(self, dimensions):
        self.set_size_request(dimensions.width, dimensions.height)
        self.resize(dimensions.width, dimensions.height)
        self.session.set_emojis_per_row(dimensions.emojis_per_row)
        if self._visible:
            self._move_to_center(dimensions.width, dimensions.height)

    ##### showing and hiding #####

    def is_visible(self):
        return self._visible

    def toggle_picker(self):
        if self._visible:
            self.hide_picker()
        else:
            self.show_picker()

    def show_picker(self):
        if self._visible:
            self.present()
            return

        _logger.debug("show_picker")
        self._visible = True

        dimensions = self._config.get_popup_dimensions()
        self._move_to_center(dimensions.width, dimensions.height)

        self.set_opacity(0.0)
        self.show()
        self.present()

        self.session.on_opened()
        self.search_entry.grab_focus()

        self._fade_timer.fade_to(0.0, 1.0, FADE_IN_DURATION,
                                 self._on_fade_step)

    def hide_picker(self):
        if not self._visible:
            return

        _logger.debug("hide_picker")
        self._visible = False
        self.session.on_closed()

        self._fade_timer.fade_to(self.get_opacity(), 0.0, FADE_OUT_DURATION,
                                 self._on_fade_step)

    def _on_fade_step(self, opacity, done):
        self.set_opacity(opacity)
        if done and not self._visible:
            self.hide()
            self.set_opacity(1.0)

    def _move_to_center(self, width, height):
        workarea = get_primary_workarea()
        if workarea is not None:
            self.move(*center_in_rect(workarea, width, height))

    ##### signal handlers #####

    def _on_search_changed(self, entry):
        self.session.on_search_changed()

    def _on_search_activate(self, entry):
        self.session.activate_first()

    def _on_key_press(self, widget, event):
        if event.keyval != Gdk.KEY_Escape:
            return False

        if self.session.tone_selector.is_visible():
            self.session.tone_selector.hide()
        elif self.search_entry.get_text():
            self.search_entry.set_text("")
        else:
            self.hide_picker()
        return True

    def _on_focus_out(self, widget, event):
        self.hide_picker()
        return False

    def _on_delete(self, widget, event):
        self.hide_picker()
        return True
