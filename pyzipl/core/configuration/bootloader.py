#
# Copyright (C) 2026 Red Hat, Inc.
#
# This copyrighted material is made available to anyone wishing to use,
# modify, copy, or redistribute it subject to the terms and conditions of
# the GNU General Public License v.2, or (at your option) any later version.
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY expressed or implied, including the implied warranties of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General
# Public License for more details.  You should have received a copy of the
# GNU General Public License along with this program; if not, write to the
# Free Software Foundation, Inc., 31 Milk Street #960789 Boston, MA
# 02196 USA.  Any Red Hat trademarks that are incorporated in the
# source code or documentation are not subject to the GNU General Public
# License and may only be used or replicated with the express permission of
# Red Hat, Inc.
#
from enum import Enum

from pyzipl.core.configuration.base import Section


class BootloaderType(Enum):
    """Type of the bootloader."""
    DEFAULT = "DEFAULT"
    ZIPL = "ZIPL"


class BootloaderSection(Section):
    """The Bootloader section."""

    @property
    def type(self):
        """Type of the bootloader.

        Boot loader backends are never detected automatically.

        Supported values:

            DEFAULT   Don't manage any boot loader.
            ZIPL      Use zipl as the bootloader.

        :return: an instance of BootloaderType
        """
        return self._get_option("type", BootloaderType)

    @property
    def boot_dir(self):
        """A path to the boot directory.

        Paths of the boot loader entries are relative to it.
        """
        return self._get_option("boot_dir")

    @property
    def zipl(self):
        """The boot block installer."""
        return self._get_option("zipl")
