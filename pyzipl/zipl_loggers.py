#
# zipl_loggers.py : provides pyzipl specific loggers
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

# The loggers live in their own module, so the configuration and the
# logging setup can import them without an import cycle.

import logging

from pyzipl.core import constants


def get_module_logger(module_name):
    """Return a pyzipl sub-logger based on a module __name__ attribute.

    The "pyzipl." prefix is stripped (if any) and the rest is put
    behind "zipl.". For example, pyzipl.modules.bootloader.zipl
    logs to zipl.modules.bootloader.zipl.
    """
    if module_name.startswith("pyzipl."):
        module_name = module_name[7:]
    return logging.getLogger("%s.%s" % (constants.LOGGER_ZIPL_ROOT, module_name))


def get_zipl_root_logger():
    return logging.getLogger(constants.LOGGER_ZIPL_ROOT)


def get_main_logger():
    return logging.getLogger(constants.LOGGER_MAIN)


def get_program_logger():
    return logging.getLogger(constants.LOGGER_PROGRAM)
