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
from pyzipl.core.configuration.base import Section


class SecureExecutionSection(Section):
    """The Secure Execution section.

    IBM Secure Execution is used only if there are host keys
    in the host key directory.
    """

    @property
    def hostkey_dir(self):
        """A directory with the host keys."""
        return self._get_option("hostkey_dir")

    @property
    def hostkey_prefix(self):
        """A prefix of file names of the host keys."""
        return self._get_option("hostkey_prefix")

    @property
    def boot_image(self):
        """A path to the generated protected boot image."""
        return self._get_option("boot_image")

    @property
    def initrd_image(self):
        """A path to the initrd with the injected LUKS key."""
        return self._get_option("initrd_image")

    @property
    def luks_root_key(self):
        """A path to the key that unlocks the root device."""
        return self._get_option("luks_root_key")

    @property
    def luks_config(self):
        """A path to the crypttab."""
        return self._get_option("luks_config")

    @property
    def ramdisk_tool(self):
        """A tool that adds the LUKS key to the initrd."""
        return self._get_option("ramdisk_tool")

    @property
    def genprotimg(self):
        """A tool that generates the protected boot image."""
        return self._get_option("genprotimg")

    @property
    def parmfile_dir(self):
        """A directory for the temporary kernel parameter files."""
        return self._get_option("parmfile_dir")

    @property
    def clear_update_stamp(self):
        """Remove the update stamp after the protected image is installed.

        The stamp is kept by default, so the protected image is
        generated again on every sync of the boot loader.
        """
        return self._get_option("clear_update_stamp", bool)
