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

"""ASCII-compatible encoding of domain names"""

import re

#: Prefix marking a label in ASCII-compatible (punycode) form
IDN_PREFIX = 'xn--'

# Full stops other than U+002E that also separate labels
_SEPARATORS_RE = re.compile('[。．｡]')


def _label_to_ascii(label: str) -> str:
    if label.isascii():
        return label
    return IDN_PREFIX + label.encode('punycode').decode('ascii')


def to_ascii(domain: str) -> str:
    """Convert a domain name to its ASCII-compatible form

    Only labels containing non-ASCII characters are converted. Nothing is
    checked here: a label full of characters that are not allowed in a
    hostname is returned as-is (or punycoded, if it also has non-ASCII
    characters), leaving it to :func:`~suffixsplit.validate.validate` to
    complain about it.

    :param domain: The domain name, in Unicode or ASCII form
    :return: The domain with every non-ASCII label punycoded and prefixed with
             ``xn--``
    """
    domain = _SEPARATORS_RE.sub('.', domain)
    return '.'.join(_label_to_ascii(label) for label in domain.split('.'))
