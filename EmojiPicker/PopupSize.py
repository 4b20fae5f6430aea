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
Popup dimensions for the size modes of the preferences.
"""

import logging
from collections import namedtuple, OrderedDict

_logger = logging.getLogger("PopupSize")


PopupDimensions = namedtuple("PopupDimensions",
                             ["width", "height", "emojis_per_row"])

DEFAULT_MODE = "default"
CUSTOM_MODE = "custom"

SIZE_MODES = OrderedDict([
    ("compact",     PopupDimensions(360, 480, 8)),
    ("default",     PopupDimensions(420, 600, 10)),
    ("comfortable", PopupDimensions(520, 680, 12)),
])

MIN_WIDTH, MAX_WIDTH = 300, 800
MIN_HEIGHT, MAX_HEIGHT = 300, 900

EMOJI_BUTTON_WIDTH = 44     # button plus spacing
CONTAINER_PADDING = 16
MIN_EMOJIS_PER_ROW = 6


def get_mode_names():
    return list(SIZE_MODES.keys()) + [CUSTOM_MODE]


def calc_emojis_per_row(width):
    """
    Doctests:
    >>> calc_emojis_per_row(420)
    9
    >>> calc_emojis_per_row(200)
    6
    """
    available = width - CONTAINER_PADDING
    return max(MIN_EMOJIS_PER_ROW, available // EMOJI_BUTTON_WIDTH)


def clamp_custom_size(width, height):
    """
    Doctests:
    >>> clamp_custom_size(100, 1000)
    (300, 900)
    """
    return (max(MIN_WIDTH, min(MAX_WIDTH, width)),
            max(MIN_HEIGHT, min(MAX_HEIGHT, height)))


def get_dimensions(mode, custom_width=None, custom_height=None):
    """
    Dimensions of the popup for mode. Unknown modes fall back
    to the default size.
    """
    if mode == CUSTOM_MODE and custom_width and custom_height:
        width, height = clamp_custom_size(custom_width, custom_height)
        return PopupDimensions(width, height, calc_emojis_per_row(width))

    dimensions = SIZE_MODES.get(mode)
    if dimensions is None:
        if mode != CUSTOM_MODE:
            _logger.warning("unknown popup size mode '{}', "
                            "using '{}'".format(mode, DEFAULT_MODE))
        dimensions = SIZE_MODES[DEFAULT_MODE]
    return dimensions
