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

"""Splitting domains into subdomain, registrable domain, and public suffix"""

import logging
import threading
from typing import Any, Dict, List, Optional

from .idn import IDN_PREFIX, to_ascii
from .rules import RuleTable
from .rulesource import load_snapshot_rules
from .validate import ErrorCode, validate

log = logging.getLogger('suffixsplit')

#: Pseudo-TLD for names that never go on the Internet. Domains ending in it
#: are never looked up in the rule table.
NON_INTERNET_TLD = 'local'


class ParseResult:
    """The result of parsing one domain. Fields that do not apply are
    ``None``.

    Results compare equal when all their fields are equal. They are mutable
    and therefore not hashable.

    :param input: The domain as passed to :meth:`Parser.parse`
    """

    def __init__(self, input: str):
        #: The domain exactly as given
        self.input: str = input

        #: The public suffix, e.g. ``co.uk``
        self.tld: Optional[str] = None

        #: The label just left of the public suffix
        self.sld: Optional[str] = None

        #: The registrable domain, i.e. :attr:`sld` + ``.`` + :attr:`tld`
        self.domain: Optional[str] = None

        #: Everything left of :attr:`domain`
        self.subdomain: Optional[str] = None

        #: Whether the public suffix came from a rule (as opposed to falling
        #: back to the last label)
        self.listed: bool = False

        #: Set if the domain failed validation, in which case all other fields
        #: keep their defaults
        self.error: Optional[ErrorCode] = None

    def as_dict(self) -> Dict[str, Any]:
        """Return the fields as a dict, with :attr:`error` as a plain
        string"""
        return {
            'input': self.input,
            'tld': self.tld,
            'sld': self.sld,
            'domain': self.domain,
            'subdomain': self.subdomain,
            'listed': self.listed,
            'error': None if self.error is None else self.error.value,
        }

    def __eq__(self, other):
        if not isinstance(other, ParseResult):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    # Fields are filled in after construction, so results are not hashable
    __hash__ = None

    def __repr__(self):
        fields = ', '.join(f"{k}={v!r}" for k, v in self.as_dict().items())
        return f"ParseResult({fields})"


class Parser:
    """Splits domains using the rules in a :class:`~suffixsplit.RuleTable`

    Parsers hold no state besides the (immutable) rule table, so one parser
    can be shared freely between threads.

    :param rule_table: The rules to split domains with
    """

    def __init__(self, rule_table: RuleTable):
        self.rule_table = rule_table

    def parse(self, input: str) -> ParseResult:
        """Parse a domain

        The domain is lowercased and a single trailing dot is removed before
        anything else. A domain that fails validation is not an exception: the
        result has :attr:`~ParseResult.error` set instead.

        :param input: The domain, in Unicode or ASCII-compatible form
        :raises TypeError: if ``input`` is not a string
        :return: A new :class:`ParseResult`
        """
        if not isinstance(input, str):
            raise TypeError("Domain name must be a string, not %s" %
                            type(input).__name__)

        domain = input.lower()
        if domain.endswith('.'):
            domain = domain[:-1]

        parsed = ParseResult(input)

        parsed.error = validate(domain)
        if parsed.error is not None:
            log.debug("Domain %r is invalid: %s", input, parsed.error.message)
            return parsed

        labels = domain.split('.')
        if labels[-1] == NON_INTERNET_TLD:
            return parsed

        rule = self.rule_table.find_best_rule(to_ascii(domain))
        if rule is None:
            self._split_unlisted(parsed, labels)
        else:
            parsed.listed = True
            self._split_listed(parsed, labels, rule.suffix.split('.'),
                               rule.wildcard, rule.exception)

        # Output stays in the input's script unless the input already had
        # punycode in it
        if IDN_PREFIX in domain:
            if parsed.domain:
                parsed.domain = to_ascii(parsed.domain)
            if parsed.subdomain:
                parsed.subdomain = to_ascii(parsed.subdomain)
        return parsed

    @staticmethod
    def _split_unlisted(parsed: ParseResult, labels: List[str]) -> None:
        """No rule matched: treat the last label as the public suffix"""
        if len(labels) < 2:
            return
        parsed.tld = labels.pop()
        parsed.sld = labels.pop()
        parsed.domain = parsed.sld + '.' + parsed.tld
        if labels:
            parsed.subdomain = '.'.join(labels)

    @staticmethod
    def _split_listed(parsed: ParseResult,
                      labels: List[str],
                      tld_parts: List[str],
                      wildcard: bool,
                      exception: bool) -> None:
        """Split using the matched rule's suffix labels"""
        private_parts = labels[:len(labels) - len(tld_parts)]

        # An exception rule names a registrable domain, so its first label
        # belongs to the private part
        if exception:
            private_parts.append(tld_parts.pop(0))

        parsed.tld = '.'.join(tld_parts)
        if not private_parts:
            return

        # A wildcard stands for one more label of public suffix
        if wildcard:
            tld_parts.insert(0, private_parts.pop())
            parsed.tld = '.'.join(tld_parts)

        if not private_parts:
            return
        parsed.sld = private_parts.pop()
        parsed.domain = parsed.sld + '.' + parsed.tld
        if private_parts:
            parsed.subdomain = '.'.join(private_parts)

    def get(self, domain: Optional[str]) -> Optional[str]:
        """Get the registrable domain for a domain

        :param domain: The domain. Empty strings and ``None`` are accepted.
        :return: The registrable domain, or ``None`` if there isn't one or the
                 domain is invalid
        """
        if not domain:
            return None
        return self.parse(domain).domain

    def is_valid(self, domain: str) -> bool:
        """Check whether a domain has a registrable domain under a listed
        public suffix

        :param domain: The domain
        :raises TypeError: if ``domain`` is not a string
        """
        parsed = self.parse(domain)
        return parsed.error is None and bool(parsed.domain) and parsed.listed


_default_parser: Optional[Parser] = None
_default_parser_lock = threading.Lock()


def default_parser() -> Parser:
    """Get the process-wide :class:`Parser`, built from the Public Suffix
    List snapshot bundled with :mod:`tldextract` (private domains included)
    the first time it is needed

    :raises RuleSourceError: if the snapshot cannot be loaded
    """
    global _default_parser
    with _default_parser_lock:
        if _default_parser is None:
            rule_table = RuleTable.build(load_snapshot_rules())
            log.info("Loaded default rule table with %d rules",
                     len(rule_table))
            _default_parser = Parser(rule_table)
        return _default_parser


def parse(input: str) -> ParseResult:
    """Parse a domain with the default rules. See :meth:`Parser.parse`."""
    return default_parser().parse(input)


def get(domain: Optional[str]) -> Optional[str]:
    """Get the registrable domain for a domain with the default rules. See
    :meth:`Parser.get`."""
    return default_parser().get(domain)


def is_valid(domain: str) -> bool:
    """Check a domain against the default rules. See
    :meth:`Parser.is_valid`."""
    return default_parser().is_valid(domain)
