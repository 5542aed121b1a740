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
from pyzipl.modules.common.errors.bootloader import BootloaderError
from pyzipl.zipl_loggers import get_module_logger

log = get_module_logger(__name__)

__all__ = ["BootLoader", "BootloaderError"]


class BootLoader:
    """A base class for boot loaders.

    The deployment manager drives a boot loader in two phases:

        write_config   called whenever new deployments are written
        post_bls_sync  called once after the boot loader entries
                       of a boot version are synced

    The generic boot loader doesn't manage anything.
    """

    name = "none"

    def __init__(self, sysroot):
        """Create a new boot loader.

        :param sysroot: a handle of the sysroot
        :type sysroot: an instance of Sysroot
        """
        self._sysroot = sysroot

    @property
    def sysroot(self):
        """The handle of the sysroot."""
        return self._sysroot

    def query(self):
        """Is this boot loader active on the system?

        :return: True or False
        """
        return False

    def is_applicable(self):
        """Should this boot loader be used without being chosen?"""
        return self.query()

    @property
    def is_pending(self):
        """Is an update of the boot loader pending?"""
        return False

    def write_config(self, boot_version, new_deployments=None):
        """Write the configuration of the boot loader.

        :param int boot_version: a version of the boot loader entries
        :param new_deployments: a list of the new deployments or None
        """
        log.debug("Writing the configuration of %s for the version %s.",
                  self.name, boot_version)
        self.mark_pending()

    def post_bls_sync(self, boot_version):
        """Finish the boot loader setup after the entries are synced.

        :param int boot_version: a version of the boot loader entries
        """
        self.apply_pending(boot_version)

    def mark_pending(self):
        """Mark that the boot loader has to be updated."""
        pass

    def apply_pending(self, boot_version):
        """Update the boot loader if it is marked as pending.

        :param int boot_version: a version of the boot loader entries
        :raise: BootloaderError on failure
        """
        pass
