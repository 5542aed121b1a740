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
from pyzipl.core.dbus import dbus_error
from pyzipl.modules.common.constants.namespaces import BOOTLOADER_NAMESPACE
from pyzipl.modules.common.errors.general import ZiplError


@dbus_error("BootloaderError", namespace=BOOTLOADER_NAMESPACE)
class BootloaderError(ZiplError):
    """General exception for the boot loader errors."""
    pass


@dbus_error("BootloaderConfigurationError", namespace=BOOTLOADER_NAMESPACE)
class BootloaderConfigurationError(BootloaderError):
    """The boot loader entries are missing or malformed."""
    pass


@dbus_error("SecureExecutionError", namespace=BOOTLOADER_NAMESPACE)
class SecureExecutionError(BootloaderError):
    """The Secure Execution setup can't be examined."""
    pass


@dbus_error("ProgramExecutionError", namespace=BOOTLOADER_NAMESPACE)
class ProgramExecutionError(BootloaderError):
    """An external program couldn't be run or has failed.

    The captured output of the program is part of the message,
    so it is preserved when the error is sent over DBus.
    """

    def __init__(self, message, command=None, returncode=None, stdout="", stderr=""):
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

    def __str__(self):
        msg = super().__str__()

        if self.returncode is not None:
            msg += " (exit status {})".format(self.returncode)

        if self.stdout and self.stdout.strip():
            msg += "\nstdout: {}".format(self.stdout.strip())

        if self.stderr and self.stderr.strip():
            msg += "\nstderr: {}".format(self.stderr.strip())

        return msg
