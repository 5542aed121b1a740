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
"""Support for the IBM Secure Execution.

A guest of the Secure Execution boots from a single protected image
that contains the kernel, the initrd and the kernel parameters. The
image is encrypted for the host keys found on the system.
"""
import os
import tempfile

from pyzipl.core.configuration.pyzipl import conf
from pyzipl.core.constants import SECURE_EXECUTION_PREFIX
from pyzipl.core.util import execProgram
from pyzipl.modules.common.errors.bootloader import (
    ProgramExecutionError,
    SecureExecutionError,
)
from pyzipl.zipl_loggers import get_module_logger

log = get_module_logger(__name__)

__all__ = [
    "enable_luks",
    "find_host_keys",
    "generate_sdboot",
    "luks_key_exists",
    "run_tool",
    "select_ramdisk",
]


def run_tool(command, argv, prefix=SECURE_EXECUTION_PREFIX):
    """Run a tool of the boot loader setup.

    :param str command: the tool to run
    :param argv: a list of arguments
    :param prefix: a prefix of the error messages or None
    :return: a tuple of the output and the error output
    :raise: ProgramExecutionError if the tool can't be run or fails
    """
    prefix = prefix + ": " if prefix else ""

    try:
        rc, stdout, stderr = execProgram(command, argv)
    except OSError as e:
        raise ProgramExecutionError(
            "{}spawning {}: {}".format(prefix, command, e.strerror),
            command=command
        ) from e

    if rc != 0:
        raise ProgramExecutionError(
            "{}`{}` failed".format(prefix, command),
            command=command,
            returncode=rc,
            stdout=stdout,
            stderr=stderr
        )

    return stdout, stderr


def find_host_keys():
    """Find the host keys of the Secure Execution.

    The keys are returned in the order of the directory listing.

    :return: a list of paths to the host keys
    :raise: SecureExecutionError if the directory can't be listed
    """
    hostkey_dir = conf.secure_execution.hostkey_dir
    prefix = conf.secure_execution.hostkey_prefix

    try:
        names = os.listdir(hostkey_dir)
    except OSError as e:
        raise SecureExecutionError(
            "{}: looking for SE keys: {}".format(SECURE_EXECUTION_PREFIX, e)
        ) from e

    return [os.path.join(hostkey_dir, name) for name in names if name.startswith(prefix)]


def luks_key_exists():
    """Is there a LUKS key to add to the initrd?"""
    return os.path.exists(conf.secure_execution.luks_root_key) \
        and os.path.exists(conf.secure_execution.luks_config)


def enable_luks(initramfs):
    """Add the LUKS key to a copy of the initrd.

    :param str initramfs: a path to the original initrd
    :return: a path to the new initrd
    :raise: ProgramExecutionError
    """
    tool = conf.secure_execution.ramdisk_tool
    initrd_image = conf.secure_execution.initrd_image

    try:
        run_tool(tool, [initramfs, initrd_image])
    except ProgramExecutionError as e:
        log.error("%s: `%s` stdout: %s", SECURE_EXECUTION_PREFIX, tool, e.stdout)
        log.error("%s: `%s` stderr: %s", SECURE_EXECUTION_PREFIX, tool, e.stderr)
        raise

    log.info("%s: luks key added to initrd", SECURE_EXECUTION_PREFIX)
    return initrd_image


def select_ramdisk(initramfs):
    """Select the initrd for the protected image.

    The original initrd is used unless there is a LUKS key.

    :param str initramfs: a path to the original initrd
    :return: a path to the initrd to use
    """
    if not luks_key_exists():
        return initramfs

    return enable_luks(initramfs)


def _write_parmfile(options):
    """Write the kernel parameters to a new temporary file.

    :param str options: the kernel parameters
    :return: a path to the file
    """
    fd, path = tempfile.mkstemp(
        prefix="sd_boot.parmfile.",
        dir=conf.secure_execution.parmfile_dir
    )

    try:
        with os.fdopen(fd, "wb") as f:
            f.write(options.encode("utf-8"))
    except OSError as e:
        raise OSError(e.errno, "{}: creating {}: {}".format(
            SECURE_EXECUTION_PREFIX, path, e.strerror
        )) from e

    return path


def generate_sdboot(vmlinuz, initramfs, options, keys):
    """Generate the protected boot image.

    :param str vmlinuz: a path to the kernel
    :param str initramfs: a path to the initrd
    :param str options: the kernel parameters
    :param keys: a list of paths to the host keys
    :return: a path to the protected boot image
    :raise: ProgramExecutionError
    """
    assert vmlinuz and initramfs and options is not None and keys

    log.info("%s: kernel: %s", SECURE_EXECUTION_PREFIX, vmlinuz)
    log.info("%s: initrd: %s", SECURE_EXECUTION_PREFIX, initramfs)
    log.info("%s: kargs: %s", SECURE_EXECUTION_PREFIX, options)

    parmfile = _write_parmfile(options)
    ramdisk = select_ramdisk(initramfs)
    boot_image = conf.secure_execution.boot_image

    argv = ["-i", vmlinuz, "-r", ramdisk, "-p", parmfile]

    for i, key in enumerate(keys, start=1):
        argv.extend(["-k", key])
        log.info("%s: key[%d]: %s", SECURE_EXECUTION_PREFIX, i, key)

    # The keys are verified before they are installed.
    argv.extend(["--no-verify", "-o", boot_image])

    run_tool(conf.secure_execution.genprotimg, argv)
    log.info("%s: `%s` generated", SECURE_EXECUTION_PREFIX, boot_image)

    os.unlink(parmfile)
    return boot_image
