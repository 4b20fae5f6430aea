#!/usr/bin/python3
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
import sys
import glob
import site
import sysconfig
import subprocess
from pathlib import Path

from setuptools import setup
from setuptools.command.install import install


def glob_files(pathname):
    """ glob without directory names """
    return [fn for fn in glob.glob(pathname)
            if os.path.isfile(fn)]


def get_version():
    """ VERSION from EmojiPicker/Version.py without importing gi """
    filename = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                            "EmojiPicker", "Version.py")
    with open(filename, encoding="UTF-8") as f:
        for line in f:
            if line.startswith("VERSION"):
                return line.split("=")[1].strip().strip("\"'")
    raise RuntimeError("VERSION not found in " + filename)


class CustomInstallCommand(install):
    """ Compile GSettings schemas after direct installs """

    def run(self):
        install.run(self)

        # Packagers compile the schemas in their post-install scripts.
        if os.getenv("FAKEROOTKEY"):
            print("Skipping glib-compile-schemas in fakeroot environment.")
            return

        if "--user" in sys.argv:
            install_base = Path(site.getuserbase())
        else:
            install_base = Path(sysconfig.get_paths()["data"])

        schema_dir = install_base / "share" / "glib-2.0" / "schemas"
        schema_dir.mkdir(parents=True, exist_ok=True)

        print("Running glib-compile-schemas...")
        try:
            subprocess.check_call(["glib-compile-schemas", str(schema_dir)])
        except (OSError, subprocess.CalledProcessError) as e:
            print("Error running glib-compile-schemas: {}".format(e))
            sys.exit(1)


##### setup #####

setup(
    name = 'emoji-picker',
    version = get_version(),
    license = 'GPL-3+',
    description = 'Searchable emoji picker for the desktop panel',

    packages = ['EmojiPicker'],
    python_requires = '>=3.6',
    install_requires = [
        'PyGObject',
        'pycairo',
        'dbus-python',
    ],
    extras_require = {
        'test': ['pytest'],
    },

    data_files = [('share/glib-2.0/schemas',
                      glob.glob('data/*.gschema.xml')),
                  ('share/emoji-picker',
                      glob_files('data/emoji.json') +
                      glob_files('data/*.ui') +
                      glob_files('data/*.css')),
                  ('share/doc/emoji-picker',
                      glob_files('emoji-picker-defaults.conf.example')),
                 ],

    scripts = ['emoji-picker', 'emoji-picker-settings'],

    cmdclass = {
                'install': CustomInstallCommand,
                }
)
