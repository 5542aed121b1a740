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
import configparser
import os
from abc import ABC


class ConfigurationError(Exception):
    """A general configuration error."""


class ConfigurationFileError(ConfigurationError):
    """An error in the configuration file."""

    def __init__(self, msg, filename):
        super().__init__(msg)
        self._filename = filename

    def __str__(self):
        return "The following error has occurred while handling the configuration file '{}': " \
               "{}".format(self._filename, super().__str__())


class ConfigurationDataError(ConfigurationError):
    """An error in the configuration data."""

    def __init__(self, msg, section, option):
        super().__init__(msg)
        self._section = section
        self._option = option

    def __str__(self):
        return "The following error has occurred while handling the option '{}' in the section " \
               "'{}': {}".format(self._option, self._section, super().__str__())


def create_parser():
    """Create a new config parser.

    :return: an instance of ConfigParser
    """
    return configparser.ConfigParser()


def read_config(parser, path):
    """Read a configuration file.

    :param parser: an instance of ConfigParser
    :param path: a path to the file
    :raises: ConfigurationFileError
    """
    try:
        with open(path, "r") as f:
            parser.read_file(f, path)

    except (configparser.Error, OSError) as e:
        raise ConfigurationFileError(str(e), path) from e


def get_option(parser, section_name, option_name, converter=None):
    """Get a converted value of the option.

    The converter should accept a string and return a converted value.
    For example: int

    :param parser: an instance of ConfigParser
    :param section_name: a section name
    :param option_name: an option name
    :param converter: a function or None
    :return: a converted value
    :raises: ConfigurationDataError
    """
    try:
        if converter is None:
            return parser.get(section_name, option_name)

        if converter is bool:
            return parser.getboolean(section_name, option_name)

        return converter(parser.get(section_name, option_name))

    except (configparser.Error, ValueError) as e:
        raise ConfigurationDataError(str(e), section_name, option_name) from e


def set_option(parser, section_name, option_name, value):
    """Set the option.

    Only existing options can be set.

    :param parser: an instance of ConfigParser
    :param section_name: a section name
    :param option_name: an option name
    :param value: an option value
    :raises: ConfigurationDataError
    """
    try:
        parser.get(section_name, option_name)
        parser[section_name][option_name] = str(value)

    except (configparser.Error, ValueError) as e:
        raise ConfigurationDataError(str(e), section_name, option_name) from e


class Section(ABC):
    """A typed view of one section of the configuration.

    Subclasses define a property for every option of the section.
    """

    def __init__(self, section_name, parser):
        self._section_name = section_name
        self._parser = parser

    def _get_option(self, option_name, converter=None):
        """Get a value of an option of this section.

        :param option_name: an option name
        :param converter: a function or None
        :return: a converted value
        """
        return get_option(self._parser, self._section_name, option_name, converter)


class Configuration:
    """A base class for representation of a configuration handler."""

    def __init__(self):
        self._sources = []
        self._parser = create_parser()

    def get_parser(self):
        """Get the configuration parser."""
        return self._parser

    def get_sources(self):
        """Get the configuration sources.

        :return: a list of file names
        """
        return self._sources

    def read(self, path):
        """Read a configuration file.

        :param path: a path to the file
        """
        read_config(self._parser, path)
        self._sources.append(path)

    def read_from_directory(self, path):
        """Read all *.conf files in a directory sorted by their name.

        :param path: a path to the directory
        """
        for filename in sorted(os.listdir(path)):
            if not filename.endswith(".conf"):
                continue

            self.read(os.path.join(path, filename))

    def validate(self):
        """Validate the configuration.

        Every public member of the configuration and of its
        sections is accessed, so all options have to be defined
        and convertible.
        """
        self._validate_members(self)

    def _validate_members(self, obj):
        for member_name in dir(obj):

            if member_name.startswith("_"):
                continue

            value = getattr(obj, member_name)

            if isinstance(obj, Configuration) and isinstance(value, Section):
                self._validate_members(value)
