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
import re
from collections import namedtuple

from pyzipl.core.configuration.pyzipl import conf
from pyzipl.core.constants import SECURE_EXECUTION_PREFIX
from pyzipl.core.path import join_paths
from pyzipl.modules.common.errors.bootloader import BootloaderConfigurationError
from pyzipl.zipl_loggers import get_module_logger

log = get_module_logger(__name__)

__all__ = ["BootConfigParser", "BootEntry", "resolve_boot_entry", "sort_boot_loader_configs"]

# The boot entry of the current boot version.
BootEntry = namedtuple("BootEntry", ["kernel", "initrd", "options"])


class BootConfigParser:
    """A parser of a Boot Loader Specification entry.

    Every line of the entry is a key followed by a value:

        title Fedora CoreOS 39.20231101.3.0 (ostree:0)
        version 1
        linux /ostree/fedora-coreos-0d4f.../vmlinuz-6.5.9-300.fc39.s390x
        initrd /ostree/fedora-coreos-0d4f.../initramfs-6.5.9-300.fc39.s390x.img
        options root=UUID=... rw ostree=/ostree/boot.1/fedora-coreos/...

    Empty lines and comments are ignored.
    """

    def __init__(self):
        self._options = {}
        self._filename = None

    @property
    def filename(self):
        """A path to the parsed file or None."""
        return self._filename

    def parse(self, path):
        """Parse the entry from a file.

        :param str path: a path to the entry
        """
        with open(path, "r") as f:
            self.parse_string(f.read())

        self._filename = path

    def parse_string(self, data):
        """Parse the entry from a string.

        :param str data: a content of the entry
        """
        for line in data.splitlines():
            line = line.strip()

            if not line or line.startswith("#"):
                continue

            # The key and the value are separated by any whitespace.
            parts = line.split(None, 1)
            self._options[parts[0]] = parts[1] if len(parts) > 1 else ""

    def get(self, key, default=None):
        """Get a value of the given key.

        :param str key: a key
        :param default: a value returned if the key is not defined
        :return: a string or the default value
        """
        return self._options.get(key, default)

    def set(self, key, value):
        """Set a value of the given key."""
        self._options[key] = value

    def __repr__(self):
        return "{}({})".format(self.__class__.__name__, self._filename or "")


def _version_key(version):
    """Split a version string into a comparable list."""
    return [
        (0, int(part)) if part.isdigit() else (1, part)
        for part in re.findall(r"\d+|[a-zA-Z]+", version)
    ]


def sort_boot_loader_configs(configs):
    """Sort the boot loader entries.

    The entry with the highest version goes first, so the first
    entry is the default one. Entries without any version go last.

    :param configs: a list of instances of BootConfigParser
    :return: a sorted list
    """
    with_version = [c for c in configs if c.get("version") is not None]
    without_version = [c for c in configs if c.get("version") is None]

    with_version.sort(key=lambda c: (_version_key(c.get("version")), c.filename or ""),
                      reverse=True)
    without_version.sort(key=lambda c: c.filename or "")

    return with_version + without_version


def _get_required_value(parser, key):
    value = parser.get(key)

    if value is None:
        raise BootloaderConfigurationError(
            "{}: no \"{}\" key in bootloader config".format(SECURE_EXECUTION_PREFIX, key)
        )

    return value


def resolve_boot_entry(sysroot, boot_version):
    """Resolve the default boot entry of the given boot version.

    Only the first entry is used. Menus with more entries are not
    supported.

    :param sysroot: a handle of the sysroot
    :param int boot_version: a version of the boot loader entries
    :return: an instance of BootEntry
    :raise: BootloaderConfigurationError
    """
    try:
        configs = sysroot.read_boot_loader_configs(boot_version)
    except (OSError, UnicodeDecodeError) as e:
        raise BootloaderConfigurationError(
            "{}: loading bls configs: {}".format(SECURE_EXECUTION_PREFIX, e)
        ) from e

    if not configs:
        raise BootloaderConfigurationError(
            "{}: no bls config".format(SECURE_EXECUTION_PREFIX)
        )

    parser = configs[0]
    boot_dir = conf.bootloader.boot_dir

    kernel = join_paths(boot_dir, _get_required_value(parser, "linux"))
    initrd = join_paths(boot_dir, _get_required_value(parser, "initrd"))
    options = _get_required_value(parser, "options")

    return BootEntry(kernel, initrd, options)
