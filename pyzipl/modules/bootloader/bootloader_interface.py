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
from dasbus.server.interface import dbus_interface
from dasbus.server.property import emits_properties_changed
from dasbus.server.template import InterfaceTemplate
from dasbus.typing import *  # pylint: disable=wildcard-import

from pyzipl.modules.common.constants.services import BOOTLOADER


@dbus_interface(BOOTLOADER.interface_name)
class BootloaderInterface(InterfaceTemplate):
    """DBus interface for the bootloader module."""

    def connect_signals(self):
        """Connect the signals."""
        super().connect_signals()
        self.watch_property("IsPending", self.implementation.is_pending_changed)

    @property
    def Name(self) -> Str:
        """Name of the boot loader."""
        return self.implementation.name

    @property
    def IsActive(self) -> Bool:
        """Is the boot loader detected on the system?

        The zipl boot loader is never detected. It has
        to be chosen in the configuration.
        """
        return self.implementation.is_active

    @property
    def IsPending(self) -> Bool:
        """Is an update of the boot loader pending?"""
        return self.implementation.is_pending

    @emits_properties_changed
    def MarkPending(self):
        """Mark that the boot loader has to be updated.

        Call this method whenever new deployments are written.
        """
        self.implementation.mark_pending()

    @emits_properties_changed
    def ApplyPending(self, boot_version: Int):
        """Update the boot loader if it is marked as pending.

        Call this method once the boot loader entries of the
        given version are synced.

        :param boot_version: a version of the boot loader entries
        """
        self.implementation.apply_pending(boot_version)
