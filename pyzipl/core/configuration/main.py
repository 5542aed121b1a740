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
from pyzipl.core.configuration.base import Section


class MainSection(Section):
    """The Main section."""

    @property
    def debug(self):
        """Log debugging messages."""
        return self._get_option("debug", bool)

    @property
    def log_file(self):
        """A path to the main log file.

        An empty value disables the file.
        """
        return self._get_option("log_file", str)

    @property
    def program_log_file(self):
        """A path to the log of external programs.

        An empty value disables the file.
        """
        return self._get_option("program_log_file", str)

    @property
    def write_to_journal(self):
        """Forward the log messages to the systemd journal."""
        return self._get_option("write_to_journal", bool)
