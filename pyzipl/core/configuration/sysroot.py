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


class SysrootSection(Section):
    """The Sysroot section."""

    @property
    def path(self):
        """A path to the root of the deployments."""
        return self._get_option("path")

    @property
    def booted_stamp(self):
        """A file that exists only if we run from a booted deployment."""
        return self._get_option("booted_stamp")

    @property
    def update_stamp(self):
        """A stamp that marks a pending update of the boot loader.

        The path is relative to the sysroot.
        """
        return self._get_option("update_stamp")
