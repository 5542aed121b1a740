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

from pyzipl.core.configuration.base import Configuration
from pyzipl.core.configuration.bootloader import BootloaderSection
from pyzipl.core.configuration.main import MainSection
from pyzipl.core.configuration.secure_execution import SecureExecutionSection
from pyzipl.core.configuration.sysroot import SysrootSection
from pyzipl.core.constants import ZIPL_CONFIG_DATA, ZIPL_CONFIG_DIR, ZIPL_CONFIG_ENV
from pyzipl.zipl_loggers import get_module_logger

log = get_module_logger(__name__)

__all__ = ["conf", "ZiplConfiguration"]


class ZiplConfiguration(Configuration):
    """Representation of the pyzipl configuration."""

    @classmethod
    def from_defaults(cls):
        """Get the default pyzipl configuration.

        :return: an instance of ZiplConfiguration
        """
        config = cls()
        config.set_from_defaults()
        return config

    def __init__(self):
        """Initialize the configuration."""
        super().__init__()
        self._main = MainSection(
            "Main", self.get_parser()
        )
        self._sysroot = SysrootSection(
            "Sysroot", self.get_parser()
        )
        self._bootloader = BootloaderSection(
            "Bootloader", self.get_parser()
        )
        self._secure_execution = SecureExecutionSection(
            "Secure Execution", self.get_parser()
        )

    @property
    def main(self):
        """The Main section."""
        return self._main

    @property
    def sysroot(self):
        """The Sysroot section."""
        return self._sysroot

    @property
    def bootloader(self):
        """The Bootloader section."""
        return self._bootloader

    @property
    def secure_execution(self):
        """The Secure Execution section."""
        return self._secure_execution

    def set_from_defaults(self):
        """Set the configuration from the default configuration files.

        The configuration is read from these sources:

            pyzipl/data/pyzipl.conf   the shipped defaults
            /etc/pyzipl/conf.d/*.conf  the system overrides
            $PYZIPL_CONFIG             an extra configuration file

        """
        self.read(os.path.join(ZIPL_CONFIG_DATA, "pyzipl.conf"))

        conf_dir = os.path.join(ZIPL_CONFIG_DIR, "conf.d")
        if os.path.isdir(conf_dir):
            self.read_from_directory(conf_dir)

        path = os.environ.get(ZIPL_CONFIG_ENV)
        if path:
            self.read(path)

        self.validate()
        log.debug("The configuration is loaded from: %s", self.get_sources())


conf = ZiplConfiguration.from_defaults()
