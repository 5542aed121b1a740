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
from pyzipl.core.path import join_paths
from pyzipl.modules.bootloader.bls import BootConfigParser, sort_boot_loader_configs
from pyzipl.zipl_loggers import get_module_logger

log = get_module_logger(__name__)

__all__ = ["Sysroot"]


class Sysroot:
    """A handle of the sysroot with the deployments.

    The handle is passed to the boot loaders explicitly. It gives
    them access to the boot loader entries and tells them if the
    system runs from a deployment.
    """

    @classmethod
    def from_system(cls):
        """Create a handle of the sysroot of the running system.

        :return: an instance of Sysroot
        """
        booted_deployment = None
        booted_stamp = conf.sysroot.booted_stamp

        if os.path.exists(booted_stamp):
            with open(booted_stamp, "r") as f:
                booted_deployment = f.readline().strip() or "booted"

        log.debug("The sysroot is %s, the booted deployment is %s.",
                  conf.sysroot.path, booted_deployment)

        return cls(conf.sysroot.path, booted_deployment)

    def __init__(self, path, booted_deployment=None):
        """Create a new handle.

        :param str path: a path to the sysroot
        :param booted_deployment: a name of the booted deployment or None
        """
        self._path = path
        self._booted_deployment = booted_deployment

    @property
    def path(self):
        """A path to the sysroot."""
        return self._path

    @property
    def booted_deployment(self):
        """The booted deployment or None."""
        return self._booted_deployment

    def get_path(self, *paths):
        """Get a path inside the sysroot."""
        return join_paths(self._path, *paths)

    def get_entries_dir(self, boot_version):
        """Get a directory with the boot loader entries.

        :param int boot_version: a version of the boot loader entries
        :return: a path to the directory
        """
        return self.get_path("boot", "loader.{}".format(boot_version), "entries")

    def read_boot_loader_configs(self, boot_version):
        """Read the boot loader entries of the given boot version.

        :param int boot_version: a version of the boot loader entries
        :return: a sorted list of instances of BootConfigParser
        :raise: OSError if the entries can't be read
        """
        entries_dir = self.get_entries_dir(boot_version)
        configs = []

        if not os.path.isdir(entries_dir):
            log.debug("There are no boot loader entries in %s.", entries_dir)
            return configs

        for name in os.listdir(entries_dir):
            if not name.endswith(".conf"):
                continue

            parser = BootConfigParser()
            parser.parse(os.path.join(entries_dir, name))
            configs.append(parser)

        return sort_boot_loader_configs(configs)
