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
from contextlib import ContextDecorator, ExitStack
from textwrap import dedent
from unittest.mock import Mock, patch

from pyzipl.core.configuration.base import set_option
from pyzipl.core.configuration.pyzipl import ZiplConfiguration
from pyzipl.core.path import make_directories

# Modules that read the global configuration.
CONFIGURED_MODULES = [
    "pyzipl.modules.bootloader.bls",
    "pyzipl.modules.bootloader.factory",
    "pyzipl.modules.bootloader.secure_execution",
    "pyzipl.modules.bootloader.sysroot",
    "pyzipl.modules.bootloader.zipl",
]


class PropertiesChangedCallback(Mock):
    """Mocked callback for the DBus signal PropertiesChanged.

    The arguments of the call are unpacked into native values.
    """
    def __call__(self, interface, changed, invalid):  # pylint: disable=arguments-differ
        return super().__call__(
            interface, {k: v.unpack() for k, v in changed.items()}, invalid
        )


class reset_boot_loader_factory(ContextDecorator):
    """Reset the boot loader factory.

    Use this decorator to reset the boot loader factory
    for the unit tests that could modify it.
    """
    def __init__(self, default_type=None):
        self._default_type = default_type

    def __enter__(self):
        from pyzipl.modules.bootloader import BootLoaderFactory
        BootLoaderFactory.set_default_class(self._default_type)
        return self

    def __exit__(self, *exc):
        from pyzipl.modules.bootloader import BootLoaderFactory
        BootLoaderFactory.set_default_class(None)
        return False


class patch_configuration(ContextDecorator):
    """Replace the global configuration in all boot loader modules.

    :param config: an instance of ZiplConfiguration
    """
    def __init__(self, config):
        self._config = config
        self._stack = None

    def __enter__(self):
        self._stack = ExitStack()

        for module_name in CONFIGURED_MODULES:
            self._stack.enter_context(patch(module_name + ".conf", self._config))

        return self._config

    def __exit__(self, *exc):
        self._stack.close()
        return False


def create_configuration(root):
    """Create a configuration with all paths inside the given root.

    The boot directory stays /boot, so the resolved paths of the
    kernel and the initrd don't depend on the root.

    :param root: a path to a temporary directory
    :return: an instance of ZiplConfiguration
    """
    config = ZiplConfiguration.from_defaults()
    parser = config.get_parser()

    options = {
        "hostkey_dir": "etc/se-hostkeys",
        "boot_image": "boot/sd-boot",
        "initrd_image": "tmp/sd-initrd.img",
        "luks_root_key": "etc/luks/root",
        "luks_config": "etc/crypttab",
        "parmfile_dir": "tmp",
    }

    for name, path in options.items():
        set_option(parser, "Secure Execution", name, os.path.join(root, path))

    set_option(parser, "Sysroot", "path", os.path.join(root, "sysroot"))
    set_option(parser, "Sysroot", "booted_stamp", os.path.join(root, "run/ostree-booted"))

    for path in ["etc/se-hostkeys", "tmp", "boot", "sysroot/boot"]:
        make_directories(os.path.join(root, path))

    return config


def write_file(path, content=""):
    """Write a file and create its parent directories."""
    make_directories(os.path.dirname(path))

    with open(path, "w") as f:
        f.write(dedent(content).lstrip())


def write_boot_entry(sysroot_path, boot_version, name, content):
    """Write a boot loader entry into the sysroot."""
    path = os.path.join(
        sysroot_path, "boot", "loader.{}".format(boot_version), "entries", name
    )
    write_file(path, content)
    return path


def mock_program(rc=0, stdout="", stderr="", side_effect=None):
    """Create a mock of execProgram.

    :param side_effect: a function called with the command and its arguments
    """
    def _exec(command, argv, **kwargs):
        if side_effect:
            side_effect(command, argv)

        return rc, stdout, stderr

    return Mock(side_effect=_exec)
