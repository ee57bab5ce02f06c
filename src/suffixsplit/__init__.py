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

"""suffixsplit: find the public suffix of a domain name and split the domain
into subdomain, registrable domain, and public suffix

    >>> import suffixsplit
    >>> suffixsplit.get('www.example.co.uk')
    'example.co.uk'
    >>> suffixsplit.parse('gov.uk').tld
    'gov.uk'
"""

from .exceptions import SuffixSplitException, ConfigError, RuleSourceError
from .idn import to_ascii
from .parser import (Parser, ParseResult, default_parser, parse, get,
                     is_valid)
from .rules import Rule, RuleKind, RuleTable
from .rulesource import (parse_rule_lines, load_rules_from_path,
                         load_snapshot_rules, dump_rules)
from .validate import ErrorCode, ERROR_MESSAGES, validate
