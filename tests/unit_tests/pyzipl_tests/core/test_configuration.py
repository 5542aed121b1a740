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
import tempfile
import unittest
import pytest
from textwrap import dedent
from unittest.mock import patch

from pyzipl.core.configuration.base import create_parser, read_config, get_option, \
    set_option, ConfigurationDataError, ConfigurationFileError, Configuration
from pyzipl.core.configuration.bootloader import BootloaderType
from pyzipl.core.configuration.pyzipl import ZiplConfiguration
from pyzipl.core.constants import ZIPL_CONFIG_ENV


class ConfigurationTestCase(unittest.TestCase):
    """Test the configuration support."""

    @property
    def _content(self):
        return dedent("""

        [Main]
        string = Hello
        integer = 1
        boolean = False

        """)

    def _read_content(self, parser):

        with tempfile.NamedTemporaryFile("w") as f:
            # Prepare the config file.
            f.write(self._content)
            f.flush()

            # Read the config file.
            read_config(parser, f.name)

        return parser

    def test_read(self):
        parser = create_parser()
        self._read_content(parser)

    def test_invalid_read(self):
        parser = create_parser()

        with pytest.raises(ConfigurationFileError) as cm:
            read_config(parser, "nonexistent/path/to/file")

        assert cm.value._filename == "nonexistent/path/to/file"
        assert str(cm.value).startswith(
            "The following error has occurred while handling the configuration file"
        )

    def test_get(self):
        parser = create_parser()
        self._read_content(parser)

        assert get_option(parser, "Main", "string") == "Hello"
        assert get_option(parser, "Main", "integer") == "1"
        assert get_option(parser, "Main", "boolean") == "False"

        assert get_option(parser, "Main", "integer", int) == 1
        assert get_option(parser, "Main", "boolean", bool) is False

    def test_invalid_get(self):
        parser = create_parser()
        self._read_content(parser)

        # Invalid value.
        with pytest.raises(ConfigurationDataError) as cm:
            get_option(parser, "Main", "string", bool)

        assert cm.value._section == "Main"
        assert cm.value._option == "string"

        # Invalid option.
        with pytest.raises(ConfigurationDataError) as cm:
            get_option(parser, "Main", "unknown")

        assert cm.value._option == "unknown"

        # Invalid section.
        with pytest.raises(ConfigurationDataError) as cm:
            get_option(parser, "Unknown", "unknown")

        assert cm.value._section == "Unknown"

    def test_set(self):
        parser = create_parser()
        self._read_content(parser)

        set_option(parser, "Main", "string", "Hi")
        set_option(parser, "Main", "boolean", True)

        assert get_option(parser, "Main", "string") == "Hi"
        assert get_option(parser, "Main", "boolean", bool) is True

    def test_invalid_set(self):
        parser = create_parser()
        self._read_content(parser)

        with pytest.raises(ConfigurationDataError) as cm:
            set_option(parser, "Main", "unknown", "value")

        assert cm.value._section == "Main"
        assert cm.value._option == "unknown"
        assert str(cm.value).startswith(
            "The following error has occurred while handling the option"
        )

    def test_configuration(self):
        config = Configuration()

        with tempfile.TemporaryDirectory() as directory:

            for filename in ["d.conf", "a.conf", "c", "b.conf"]:
                with open(os.path.join(directory, filename), mode="w") as f:
                    f.write("")

            config.read_from_directory(directory)

            assert [os.path.relpath(path, directory) for path in config.get_sources()] == \
                ["a.conf", "b.conf", "d.conf"]


class ZiplConfigurationTestCase(unittest.TestCase):
    """Test the pyzipl configuration."""

    def _write_config(self, directory, content):
        os.makedirs(directory, exist_ok=True)
        path = os.path.join(directory, "test.conf")

        with open(path, "w") as f:
            f.write(dedent(content))

        return path

    @patch.dict(os.environ, clear=False)
    def test_default_configuration(self):
        """Test the shipped defaults."""
        os.environ.pop(ZIPL_CONFIG_ENV, None)

        with patch("pyzipl.core.configuration.pyzipl.os.path.isdir", return_value=False):
            conf = ZiplConfiguration.from_defaults()

        assert len(conf.get_sources()) == 1

        assert conf.main.debug is False
        assert conf.main.write_to_journal is True

        assert conf.sysroot.path == "/"
        assert conf.sysroot.booted_stamp == "/run/ostree-booted"
        assert conf.sysroot.update_stamp == "boot/ostree-bootloader-update.stamp"

        assert conf.bootloader.type == BootloaderType.ZIPL
        assert conf.bootloader.boot_dir == "/boot"
        assert conf.bootloader.zipl == "zipl"

        assert conf.secure_execution.hostkey_dir == "/etc/se-hostkeys/"
        assert conf.secure_execution.hostkey_prefix == "ibm-z-hostkey"
        assert conf.secure_execution.boot_image == "/boot/sd-boot"
        assert conf.secure_execution.initrd_image == "/tmp/sd-initrd.img"
        assert conf.secure_execution.luks_root_key == "/etc/luks/root"
        assert conf.secure_execution.luks_config == "/etc/crypttab"
        assert conf.secure_execution.genprotimg == "genprotimg"
        assert conf.secure_execution.parmfile_dir == "/tmp"
        assert conf.secure_execution.clear_update_stamp is False

    @patch.dict(os.environ, clear=False)
    def test_configuration_directory(self):
        """Test the overrides of the defaults."""
        os.environ.pop(ZIPL_CONFIG_ENV, None)

        with tempfile.TemporaryDirectory() as d:
            path = self._write_config(os.path.join(d, "conf.d"), """
            [Bootloader]
            type = DEFAULT

            [Secure Execution]
            clear_update_stamp = True
            """)

            with patch("pyzipl.core.configuration.pyzipl.ZIPL_CONFIG_DIR", d):
                conf = ZiplConfiguration.from_defaults()

        assert conf.get_sources()[-1] == path
        assert conf.bootloader.type == BootloaderType.DEFAULT
        assert conf.bootloader.zipl == "zipl"
        assert conf.secure_execution.clear_update_stamp is True

    def test_invalid_value(self):
        """Test an invalid value of an option."""
        conf = ZiplConfiguration.from_defaults()

        with tempfile.TemporaryDirectory() as d:
            path = self._write_config(d, """
            [Bootloader]
            type = GRUB2
            """)
            conf.read(path)

        with pytest.raises(ConfigurationDataError) as cm:
            conf.validate()

        assert cm.value._section == "Bootloader"
        assert cm.value._option == "type"

    @patch.dict(os.environ, clear=False)
    def test_environment(self):
        """Test the configuration file from the environment."""
        with tempfile.TemporaryDirectory() as d:
            path = self._write_config(d, """
            [Main]
            debug = True
            """)

            os.environ[ZIPL_CONFIG_ENV] = path
            conf = ZiplConfiguration.from_defaults()

        assert conf.get_sources()[-1] == path
        assert conf.main.debug is True
