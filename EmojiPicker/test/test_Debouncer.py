#!/usr/bin/python3

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

import unittest

from EmojiPicker.Debouncer import Debouncer
from EmojiPicker.test.mockups import Timer_mockup


class TestDebouncer(unittest.TestCase):

    def setUp(self):
        self.timer = Timer_mockup()
        self.debouncer = Debouncer(0.5, self.timer)
        self.calls = []

    def test_only_the_last_request_runs(self):
        for i in range(3):
            self.debouncer.queue(self.calls.append, i)

        self.assertEqual([], self.calls)
        self.assertEqual(3, self.timer.start_count)
        self.assertEqual(0.5, self.timer.delay)

        self.timer.fire()
        self.assertEqual([2], self.calls)
        self.assertFalse(self.debouncer.is_pending())

    def test_cancel(self):
        self.debouncer.queue(self.calls.append, 1)
        self.debouncer.cancel()

        self.assertFalse(self.debouncer.is_pending())
        self.assertFalse(self.timer.is_running())
        self.assertEqual([], self.calls)

    def test_run_now_drops_pending(self):
        self.debouncer.queue(self.calls.append, 1)
        self.debouncer.run_now(self.calls.append, 2)

        self.assertEqual([2], self.calls)
        self.assertFalse(self.timer.is_running())

    def test_flush(self):
        self.debouncer.flush()
        self.assertEqual([], self.calls)

        self.debouncer.queue(self.calls.append, 1)
        self.debouncer.flush()
        self.assertEqual([1], self.calls)
        self.assertFalse(self.timer.is_running())

        self.debouncer.flush()
        self.assertEqual([1], self.calls)


if __name__ == '__main__':
    unittest.main()
