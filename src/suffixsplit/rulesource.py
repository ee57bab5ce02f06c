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

"""Sources of public suffix rule strings

The rule table is built from a plain ordered list of rule strings. This module
produces such lists from the usual places: a copy of the `Public Suffix List`_
in its original text format, a JSON list of rules, or the snapshot of the list
that ships with :mod:`tldextract`. Nothing here touches the network.

.. _Public Suffix List: https://publicsuffix.org/
"""

import json
import logging
import os.path
import pathlib
import pkgutil
from typing import Iterable, List, Optional, Union

from .exceptions import RuleSourceError

log = logging.getLogger('suffixsplit')

#: Line in the Public Suffix List separating ICANN rules from private rules
PRIVATE_DOMAINS_MARKER = '// ===BEGIN PRIVATE DOMAINS==='

_SNAPSHOT_PACKAGE = 'tldextract'
_SNAPSHOT_RESOURCE = '.tld_set_snapshot'


def parse_rule_line(line: str) -> Optional[str]:
    """Extract the rule from one line of the Public Suffix List

    :param line: The line
    :return: The rule (the line up to its first whitespace), or ``None`` for
             blank lines and comments
    """
    trimmed = line.strip()
    if not trimmed or trimmed.startswith('//'):
        return None
    return trimmed.split(' ')[0]


def parse_rule_lines(text: str, include_private: bool = True) -> List[str]:
    """Extract all the rules from Public Suffix List text, in order

    :param text: Contents of the list
    :param include_private: Whether to include the rules from the private
                            domains section
    :return: A list of rule strings
    """
    rules = []
    for line in text.splitlines():
        if not include_private and line.strip() == PRIVATE_DOMAINS_MARKER:
            break
        rule = parse_rule_line(line)
        if rule is not None:
            rules.append(rule)
    return rules


def _rules_from_json(text: str, source: str) -> List[str]:
    try:
        rules = json.loads(text)
    except json.JSONDecodeError as e:
        raise RuleSourceError(f"Rule file {source} is not valid JSON: {e}") \
            from e
    if (not isinstance(rules, list) or
            not all(isinstance(rule, str) for rule in rules)):
        raise RuleSourceError(f"Rule file {source} must contain a JSON list "
                              "of strings")
    return rules


def load_rules_from_path(path: Union[str, pathlib.Path],
                         include_private: bool = True) -> List[str]:
    """Read rules from a file

    Files ending in ``.json`` must hold a JSON list of rule strings. Anything
    else is read as Public Suffix List text.

    :param path: Path to the file
    :param include_private: Whether to include private domain rules. Ignored
                            for JSON files, which have no private section.
    :raises RuleSourceError: if the file cannot be read or is malformed
    :return: A list of rule strings
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except OSError as e:
        raise RuleSourceError("Could not read rule file %s: %s" %
                              (path, e.strerror)) from e
    except UnicodeDecodeError as e:
        raise RuleSourceError("Rule file %s is not UTF-8: %s" % (path, e)) \
            from e

    if os.path.splitext(str(path))[1].lower() == '.json':
        rules = _rules_from_json(text, str(path))
    else:
        rules = parse_rule_lines(text, include_private)
    log.info("Loaded %d rules from %s", len(rules), path)
    return rules


def load_snapshot_rules(include_private: bool = True) -> List[str]:
    """Read rules from the Public Suffix List snapshot bundled with
    :mod:`tldextract`

    :param include_private: Whether to include private domain rules
    :raises RuleSourceError: if the snapshot cannot be found
    :return: A list of rule strings
    """
    try:
        data = pkgutil.get_data(_SNAPSHOT_PACKAGE, _SNAPSHOT_RESOURCE)
    except OSError as e:
        raise RuleSourceError("Could not read the bundled public suffix list "
                              "snapshot: %s" % e) from e
    if data is None:
        raise RuleSourceError("The bundled public suffix list snapshot is not "
                              "available")
    rules = parse_rule_lines(data.decode('utf-8'), include_private)
    log.debug("Loaded %d rules from the bundled snapshot", len(rules))
    return rules


def dump_rules(rules: Iterable[str]) -> str:
    """Serialize rule strings as a JSON list, the format
    :func:`load_rules_from_path` reads from ``.json`` files"""
    return json.dumps(list(rules), indent=2, ensure_ascii=False)
