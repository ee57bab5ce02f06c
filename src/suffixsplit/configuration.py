#  suffixsplit - Public suffix splitting for domain names
#  Copyright (C) 2023 Dominick C. Pastore
#
#  This program is free software: you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation, either version 3 of the License, or
#  (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""suffixsplit configuration parsing"""

import configparser
import pathlib
from typing import Dict, Optional, TextIO, Union

from .exceptions import ConfigError

#: Value of the ``rules`` option selecting the bundled snapshot
SNAPSHOT = 'snapshot'

_SECTION = 'suffixsplit'
_OPTIONS = ('rules', 'private', 'logfile')
_BOOLEANS = configparser.ConfigParser.BOOLEAN_STATES


class Config:
    """suffixsplit configuration data

    :param main: Options from the ``[suffixsplit]`` section. Missing options
                 take their defaults.
    :raises ConfigError: if an option is unknown or has a bad value
    """

    def __init__(self, main: Optional[Dict[str, str]] = None):
        if main is None:
            main = dict()
        for key in main:
            if key not in _OPTIONS:
                raise ConfigError("Unknown config option %s" % key)

        #: Path to a rule file, or :data:`SNAPSHOT`
        self.rules: str = main.get('rules', SNAPSHOT)

        #: Whether to use the private domains section of the rule list
        self.include_private: bool = self._parse_bool(
            'private', main.get('private', 'true')
        )

        #: ``stderr``, ``syslog``, or a path to a log file
        self.logfile: str = main.get('logfile', 'stderr')

    @staticmethod
    def _parse_bool(option: str, value: str) -> bool:
        try:
            return _BOOLEANS[value.strip().lower()]
        except KeyError:
            raise ConfigError("Config option %s must be a boolean, not %r" %
                              (option, value)) from None


def _process_config(config: configparser.ConfigParser) -> Config:
    """Process the given :class:`~configparser.ConfigParser` into a
    :class:`Config`

    :param config: The configuration to process
    :raises ConfigError: if the configuration is invalid
    :returns: the processed and validated configuration
    """
    main: Dict[str, str] = dict()
    for section in config.sections():
        if section != _SECTION:
            raise ConfigError("Config section %s is not a %s section" %
                              (section, _SECTION))
        main.update(config[section])
    return Config(main)


def read_config_from_path(filename: Union[str, pathlib.Path]) -> Config:
    """Read configuration from the named file or :class:`~pathlib.Path`

    :param filename: Filename or path to read from
    :raises ConfigError: if the config file cannot be read or is invalid
    :return: The :class:`Config`
    """
    try:
        with open(filename, 'r') as f:
            return read_config(f)
    except OSError as e:
        raise ConfigError("Could not read config file %s: %s" %
                          (filename, e.strerror)) from e


def read_config(configfile: TextIO) -> Config:
    """Read configuration in from the given file

    :param configfile: Filelike object to read the config from
    :raises ConfigError: if the config file cannot be read or is invalid
    :return: The :class:`Config`
    """
    # Values are paths, so '%' is literal
    config = configparser.ConfigParser(interpolation=None)
    try:
        config.read_file(configfile)
    except configparser.Error as e:
        raise ConfigError("Error in config file: %s" % e) from e
    except OSError as e:
        raise ConfigError("Could not read config file: %s" % e) from e

    return _process_config(config)
