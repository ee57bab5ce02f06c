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

"""Public suffix rules and the table used to look them up"""

import enum
import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .idn import to_ascii

log = logging.getLogger('suffixsplit')


class RuleKind(enum.Enum):
    PLAIN = 'plain'
    WILDCARD = 'wildcard'
    EXCEPTION = 'exception'


class Rule:
    """A single public suffix rule, e.g. ``co.uk``, ``*.ck``, or ``!www.ck``

    :param raw: The rule text as it appears in the rule list
    """

    def __init__(self, raw: str):
        #: The rule text as given
        self.raw: str = raw

        #: Whether this is a wildcard rule (starts with ``*``)
        self.wildcard: bool = raw.startswith('*')

        #: Whether this is an exception rule (starts with ``!``)
        self.exception: bool = raw.startswith('!')

        if raw.startswith('*.'):
            suffix = raw[2:]
        elif raw.startswith('!'):
            suffix = raw[1:]
        else:
            suffix = raw
        #: The rule text without its ``*.`` or ``!`` prefix
        self.suffix: str = suffix

        # Computed up front so the table is never written to once built
        #: ASCII-compatible form of :attr:`suffix`, used for matching
        self.ascii_suffix: str = to_ascii(suffix)

    @property
    def kind(self) -> RuleKind:
        if self.wildcard:
            return RuleKind.WILDCARD
        if self.exception:
            return RuleKind.EXCEPTION
        return RuleKind.PLAIN

    def matches(self, ascii_domain: str) -> bool:
        """Check whether this rule applies to the given domain

        :param ascii_domain: A domain in ASCII-compatible form
        """
        return (ascii_domain == self.ascii_suffix or
                ascii_domain.endswith('.' + self.ascii_suffix))

    def __eq__(self, other):
        if not isinstance(other, Rule):
            return NotImplemented
        return self.raw == other.raw

    def __hash__(self):
        return hash(self.raw)

    def __repr__(self):
        return f"Rule({self.raw!r})"


def _candidate_suffixes(ascii_domain: str) -> Iterator[str]:
    """Yield every string a rule's ASCII suffix could equal and still match
    the domain: the domain itself and whatever follows each of its dots"""
    yield ascii_domain
    pos = ascii_domain.find('.')
    while pos != -1:
        yield ascii_domain[pos + 1:]
        pos = ascii_domain.find('.', pos + 1)


class RuleTable:
    """An immutable, ordered collection of :class:`Rule` objects

    Usually constructed with :meth:`build`.

    :param rules: The rules, in rule list order
    """

    def __init__(self, rules: Iterable[Rule]):
        self._rules: Tuple[Rule, ...] = tuple(rules)

        # Maps each ASCII suffix to the position of the last rule having it.
        # When several rules match a domain, the last one in table order wins,
        # so only the last position per suffix is ever needed.
        self._positions: Dict[str, int] = dict()
        for position, rule in enumerate(self._rules):
            self._positions[rule.ascii_suffix] = position

    @classmethod
    def build(cls, rule_strings: Iterable[str]) -> 'RuleTable':
        """Build a rule table from rule strings. The rules are not checked for
        syntax errors; a malformed rule simply never matches anything.

        :param rule_strings: The rules, in rule list order, without comments
                             or blank lines
        :return: The new :class:`RuleTable`
        """
        table = cls(Rule(rule) for rule in rule_strings)
        log.debug("Built rule table with %d rules (%d distinct suffixes)",
                  len(table._rules), len(table._positions))
        return table

    def find_best_rule(self, ascii_domain: str) -> Optional[Rule]:
        """Find the rule that applies to a domain

        A rule matches if the domain equals its ASCII suffix or ends with a
        dot followed by it. If several rules match, the one appearing last in
        the table wins, regardless of how long its suffix is.

        :param ascii_domain: The domain to look up, in ASCII-compatible form
        :return: The matching :class:`Rule`, or ``None`` if no rule matches
        """
        best = -1
        for candidate in _candidate_suffixes(ascii_domain):
            position = self._positions.get(candidate, -1)
            if position > best:
                best = position
        if best < 0:
            return None
        return self._rules[best]

    @property
    def rules(self) -> List[Rule]:
        """A copy of the rules in table order"""
        return list(self._rules)

    def __len__(self):
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)

    def __getitem__(self, index):
        return self._rules[index]

    def __repr__(self):
        return f"<RuleTable with {len(self._rules)} rules>"
