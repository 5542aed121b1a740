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
from dasbus.loop import EventLoop
from dasbus.signal import Signal

from pyzipl.modules.bootloader.bootloader_interface import BootloaderInterface
from pyzipl.modules.bootloader.factory import BootLoaderFactory
from pyzipl.modules.common.constants.services import BOOTLOADER
from pyzipl.zipl_loggers import get_module_logger

log = get_module_logger(__name__)

__all__ = ["BootloaderModule"]


class BootloaderModule:
    """The bootloader module.

    The module publishes the boot loader on the system bus, so
    the deployment manager can drive it.
    """

    def __init__(self, sysroot):
        """Create the module.

        :param sysroot: a handle of the sysroot
        """
        self._loop = EventLoop()
        self._boot_loader = BootLoaderFactory.create_boot_loader(sysroot)
        self.is_pending_changed = Signal()

    @property
    def loop(self):
        """Return the loop."""
        return self._loop

    @property
    def boot_loader(self):
        """The managed boot loader."""
        return self._boot_loader

    def publish(self):
        """Publish the module."""
        BOOTLOADER.message_bus.publish_object(
            BOOTLOADER.object_path,
            BootloaderInterface(self)
        )
        BOOTLOADER.message_bus.register_service(BOOTLOADER.service_name)

    def run(self):
        """Publish the module and run the loop."""
        log.debug("Publish the service.")
        self.publish()
        log.debug("Start the loop.")
        self._loop.run()

    def stop(self):
        """Stop the loop."""
        BOOTLOADER.message_bus.disconnect()
        self._loop.quit()

    @property
    def name(self):
        """Name of the boot loader."""
        return self._boot_loader.name

    @property
    def is_active(self):
        """Is the boot loader detected on the system?"""
        return self._boot_loader.is_applicable()

    @property
    def is_pending(self):
        """Is an update of the boot loader pending?"""
        return self._boot_loader.is_pending

    def mark_pending(self):
        """Mark that the boot loader has to be updated."""
        self._boot_loader.mark_pending()
        self.is_pending_changed.emit()

    def apply_pending(self, boot_version):
        """Update the boot loader if it is marked as pending.

        :param int boot_version: a version of the boot loader entries
        """
        try:
            self._boot_loader.apply_pending(boot_version)
        except Exception as e:
            log.error("Failed to update %s: %s", self.name, e)
            raise
        finally:
            self.is_pending_changed.emit()
