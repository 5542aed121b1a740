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
import os

from pyzipl.core.configuration.pyzipl import conf
from pyzipl.core.constants import SECURE_EXECUTION_PREFIX
from pyzipl.core.path import replace_file_contents
from pyzipl.modules.bootloader.base import BootLoader
from pyzipl.modules.bootloader.bls import resolve_boot_entry
from pyzipl.modules.bootloader.secure_execution import (
    find_host_keys,
    generate_sdboot,
    run_tool,
)
from pyzipl.zipl_loggers import get_module_logger

log = get_module_logger(__name__)

__all__ = ["ZIPL"]


class ZIPL(BootLoader):
    """ZIPL.

    Running zipl is expensive, so it is done only once after all
    deployments of a boot version are written. The write phase only
    creates the update stamp and the sync phase runs zipl if the
    stamp exists.
    """

    name = "zipl"

    def query(self):
        # Never detected, it has to be chosen explicitly.
        return False

    @property
    def update_stamp(self):
        """A path to the update stamp."""
        return self.sysroot.get_path(conf.sysroot.update_stamp)

    @property
    def is_pending(self):
        return os.path.exists(self.update_stamp)

    def mark_pending(self):
        """Create the update stamp.

        :raise: OSError if the stamp can't be written
        """
        replace_file_contents(self.update_stamp, b"")
        log.debug("The update of %s is pending.", self.name)

    def apply_pending(self, boot_version):
        """Run zipl if the update stamp exists.

        The Secure Execution is used if there are any host keys.
        Otherwise, zipl is run with the configuration of the system.

        :param int boot_version: a version of the boot loader entries
        :raise: BootloaderError on failure
        """
        # Unlike the grub2-mkconfig backends, we make no attempt to chroot.
        assert self.sysroot.booted_deployment, "there is no booted deployment"

        if not self.is_pending:
            log.debug("The update of %s is not pending.", self.name)
            return

        keys = find_host_keys()

        if keys:
            self._enable_secure_execution(boot_version, keys)
            return

        self.install()
        os.unlink(self.update_stamp)

    def _enable_secure_execution(self, boot_version, keys):
        """Install the protected boot image.

        The update stamp is kept unless it is configured otherwise,
        so the image is generated again on the next sync.
        """
        entry = resolve_boot_entry(self.sysroot, boot_version)
        boot_image = generate_sdboot(entry.kernel, entry.initrd, entry.options, keys)
        self.install(boot_image)

        if conf.secure_execution.clear_update_stamp:
            os.unlink(self.update_stamp)

    def install(self, image=None):
        """Install the boot block.

        :param image: a path to the protected boot image or None
        :raise: ProgramExecutionError
        """
        if not image:
            run_tool(conf.bootloader.zipl, [], prefix=None)
            log.info("The boot block of %s is installed.", self.name)
            return

        run_tool(conf.bootloader.zipl, ["-V", "-t", conf.bootloader.boot_dir, "-i", image])
        log.info("%s: `sd-boot` zipled", SECURE_EXECUTION_PREFIX)
