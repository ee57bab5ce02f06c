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

import argparse
import json
import logging
import logging.handlers
import sys
from typing import List

if sys.version_info < (3, 10):
    from importlib_metadata import version, PackageNotFoundError
else:
    from importlib.metadata import version, PackageNotFoundError

from . import configuration
from .exceptions import ConfigError, RuleSourceError
from .parser import Parser, ParseResult
from .rules import RuleTable
from .rulesource import dump_rules, load_rules_from_path, load_snapshot_rules


def _version() -> str:
    try:
        return version('suffixsplit')
    except PackageNotFoundError:
        return 'unknown'


def parse_args(argv):
    """Parse command line arguments

    :param argv: Either ``None`` or a list of arguments
    :returns: a :class:`argparse.Namespace` containing the parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Split domain names into subdomain, registrable domain, "
                    "and public suffix",
    )
    parser.add_argument("domains", nargs="*", metavar="DOMAIN",
                        help="Domain names to split")
    parser.add_argument("-c", "--configfile",
                        help="Path to the config file")
    parser.add_argument("-r", "--rules",
                        help="Rule file to use instead of the bundled public "
                             "suffix list snapshot (.json for a JSON list, "
                             "otherwise public suffix list format)")
    parser.add_argument("--no-private", action="store_true",
                        help="Ignore rules from the private domains section")
    parser.add_argument("-d", "--debug-logs", action="store_true",
                        help="Increase verbosity of logging significantly")
    parser.add_argument("--json", action="store_true",
                        help="Print results as JSON objects, one per line")
    parser.add_argument("--dump-rules", action="store_true",
                        help="Print the loaded rules as a JSON list and exit")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {_version()}")
    args = parser.parse_args(argv)
    if not args.domains and not args.dump_rules:
        parser.error("at least one domain is required")
    return args


def load_rules(conf: configuration.Config) -> List[str]:
    """Load the rule strings selected by the configuration

    :raises RuleSourceError: if the rules cannot be loaded
    """
    if conf.rules == configuration.SNAPSHOT:
        return load_snapshot_rules(conf.include_private)
    return load_rules_from_path(conf.rules, conf.include_private)


def format_result(result: ParseResult, as_json: bool = False) -> str:
    """Format a :class:`ParseResult` as one line of output"""
    if as_json:
        return json.dumps(result.as_dict(), ensure_ascii=False)
    if result.error is not None:
        return f"{result.input}\terror\t{result.error.message}"
    fields = [result.input,
              'listed' if result.listed else 'unlisted',
              result.subdomain or '-',
              result.domain or '-',
              result.tld or '-']
    return '\t'.join(fields)


def main(argv=None):
    """Main entry point when run as a standalone program

    :param argv: List of arguments. If ``None``, read :data:`sys.argv`.
    :return: Exit status: 1 if any domain was invalid, otherwise 0
    """
    args = parse_args(argv)
    if args.configfile is not None:
        try:
            conf = configuration.read_config_from_path(args.configfile)
        except ConfigError as e:
            print("Config error:", e, file=sys.stderr)
            sys.exit(2)
    else:
        conf = configuration.Config()

    if args.rules is not None:
        conf.rules = args.rules
    if args.no_private:
        conf.include_private = False

    if conf.logfile == 'syslog':
        log_handler = logging.handlers.SysLogHandler()
    elif conf.logfile == 'stderr':
        log_handler = logging.StreamHandler()
    else:
        try:
            log_handler = logging.FileHandler(conf.logfile)
        except OSError as e:
            print("Could not open log file %s: %s" %
                  (conf.logfile, e.strerror), file=sys.stderr)
            sys.exit(2)
    log = logging.getLogger('suffixsplit')
    log.addHandler(log_handler)

    if args.debug_logs:
        log.setLevel(logging.DEBUG)
    else:
        log.setLevel(logging.WARNING)

    try:
        rules = load_rules(conf)
    except RuleSourceError as e:
        log.critical("Could not load rules: %s", e)
        sys.exit(1)

    if args.dump_rules:
        print(dump_rules(rules))
        return 0

    parser = Parser(RuleTable.build(rules))
    status = 0
    for domain in args.domains:
        result = parser.parse(domain)
        if result.error is not None:
            status = 1
        print(format_result(result, args.json))
    return status


if __name__ == '__main__':
    sys.exit(main())
