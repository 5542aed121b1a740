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
from dasbus.connection import SystemMessageBus
from dasbus.error import AbstractErrorRule, ErrorMapper, get_error_decorator

from pyzipl.modules.common.errors import register_errors
from pyzipl.zipl_loggers import get_module_logger

log = get_module_logger(__name__)

__all__ = ["SystemBus", "dbus_error", "error_mapper"]


class ZiplErrorMapper(ErrorMapper):
    """Map pyzipl exceptions to DBus errors."""

    def reset_rules(self):
        """Reset rules in the error mapper."""
        super().reset_rules()
        self.add_rule(DefaultNameErrorRule(
            "org.pyzipl.Error"
        ))


class DefaultNameErrorRule(AbstractErrorRule):
    """Default rule for mapping an unknown exception to a DBus error name."""

    def __init__(self, default_name):
        """Create a new rule.

        :param default_name: a default name of a DBus error
        """
        self._default_name = default_name

    def match_type(self, _exception_type):
        """Match every Python exception raised on the server side."""
        return True

    def get_name(self, _exception_type):
        """Return a default error name for every matched exception."""
        return self._default_name

    def match_name(self, _error_name):
        """Don't apply this rule on the client side."""
        return False

    def get_type(self, _error_name):
        """There is no default error type in this rule."""
        return None


# The mapper of DBus errors.
error_mapper = ZiplErrorMapper()

# The decorator for DBus errors.
dbus_error = get_error_decorator(error_mapper)

# Register all DBus errors.
register_errors()

# The boot loader service runs on the system bus.
SystemBus = SystemMessageBus(
    error_mapper=error_mapper
)
