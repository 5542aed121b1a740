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
from pyzipl.core.configuration.bootloader import BootloaderType
from pyzipl.core.configuration.pyzipl import conf
from pyzipl.zipl_loggers import get_module_logger

log = get_module_logger(__name__)

__all__ = ["BootLoaderFactory"]


class BootLoaderFactory:
    """The boot loader factory.

    The boot loader is chosen once by the configuration. It is
    never detected on the running system.
    """

    # The default boot loader class.
    _default_class = None

    @classmethod
    def create_boot_loader(cls, sysroot):
        """Create a boot loader.

        :param sysroot: a handle of the sysroot
        :return: an instance of a boot loader class
        """
        boot_loader_class = cls.get_class()
        boot_loader_instance = boot_loader_class(sysroot)

        log.info("Created the boot loader %s.", boot_loader_class.__name__)
        return boot_loader_instance

    @classmethod
    def get_class(cls):
        """Get the boot loader class.

        :return: a boot loader class
        """
        return cls.get_default_class() \
            or cls.get_class_by_type() \
            or cls.get_generic_class()

    @classmethod
    def set_default_class(cls, default_class):
        """Set the default boot loader class.

        :param default_class: a boot loader class or None
        """
        cls._default_class = default_class

    @classmethod
    def get_default_class(cls):
        """Get the default boot loader class.

        :return: a boot loader class or None
        """
        return cls._default_class

    @classmethod
    def get_generic_class(cls):
        """Get the generic boot loader class.

        :return: a boot loader class
        """
        from pyzipl.modules.bootloader.base import BootLoader
        return BootLoader

    @classmethod
    def get_class_by_type(cls, bootloader_type=None):
        """Get the boot loader class for the configured type.

        :param bootloader_type: an instance of BootloaderType or None
        :return: a boot loader class or None
        """
        if not bootloader_type:
            bootloader_type = conf.bootloader.type

        return cls.get_class_by_name(bootloader_type.value)

    @classmethod
    def get_class_by_name(cls, name):
        """Get the boot loader class for the given name.

        Supported values:
            ZIPL

        :param name: a boot loader name or None
        :return: a boot loader class or None
        """
        if name == BootloaderType.ZIPL.value:
            from pyzipl.modules.bootloader.zipl import ZIPL
            return ZIPL

        return None
