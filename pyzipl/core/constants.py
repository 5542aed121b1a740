#
# constants.py: pyzipl constants
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

# Configuration.
ZIPL_CONFIG_DATA = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")
ZIPL_CONFIG_DIR = "/etc/pyzipl/"
ZIPL_CONFIG_ENV = "PYZIPL_CONFIG"

# Loggers.
LOGGER_ZIPL_ROOT = "zipl"
LOGGER_MAIN = "zipl.main"
LOGGER_PROGRAM = "program"

# Journal.
JOURNAL_IDENTIFIER = "pyzipl"

# Prefix of all messages related to the IBM Secure Execution.
SECURE_EXECUTION_PREFIX = "s390x SE"

# Environment of child processes.
DEFAULT_LANG = "C.UTF-8"
