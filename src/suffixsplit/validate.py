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

"""Domain name validation

Hostnames are composed of labels separated by dots. Each label must be
between 1 and 63 characters long, may only contain ``a-z``, ``0-9``, and
``-``, and may not start or end with ``-``. The whole name, dots included,
may be at most 255 characters. IDNs are checked in their ASCII-compatible
form.
"""

import enum
import re
from typing import Optional

from .idn import to_ascii

MAX_DOMAIN_LENGTH = 255
MAX_LABEL_LENGTH = 63

_LABEL_CHARS_RE = re.compile(r'[a-z0-9\-]+')


class ErrorCode(str, enum.Enum):
    """Reasons a domain name can fail validation. Members compare equal to
    their names as strings."""

    DOMAIN_TOO_SHORT = 'DOMAIN_TOO_SHORT'
    DOMAIN_TOO_LONG = 'DOMAIN_TOO_LONG'
    LABEL_STARTS_WITH_DASH = 'LABEL_STARTS_WITH_DASH'
    LABEL_ENDS_WITH_DASH = 'LABEL_ENDS_WITH_DASH'
    LABEL_TOO_LONG = 'LABEL_TOO_LONG'
    LABEL_TOO_SHORT = 'LABEL_TOO_SHORT'
    LABEL_INVALID_CHARS = 'LABEL_INVALID_CHARS'

    @property
    def message(self) -> str:
        """Human-readable description of the error"""
        return ERROR_MESSAGES[self]

    def __str__(self):
        return self.value


ERROR_MESSAGES = {
    ErrorCode.DOMAIN_TOO_SHORT: "Domain name too short.",
    ErrorCode.DOMAIN_TOO_LONG: "Domain name too long. It should be no more "
                               "than 255 chars.",
    ErrorCode.LABEL_STARTS_WITH_DASH: "Domain name label can not start with "
                                      "a dash.",
    ErrorCode.LABEL_ENDS_WITH_DASH: "Domain name label can not end with a "
                                    "dash.",
    ErrorCode.LABEL_TOO_LONG: "Domain name label should be at most 63 chars "
                              "long.",
    ErrorCode.LABEL_TOO_SHORT: "Domain name label should be at least 1 "
                               "character long.",
    ErrorCode.LABEL_INVALID_CHARS: "Domain name label can only contain "
                                   "alphanumeric characters or dashes.",
}


def validate(domain: str) -> Optional[ErrorCode]:
    """Check a domain name for problems

    Checks stop at the first problem found. Labels are checked left to right.

    :param domain: The domain, already lowercased and without a trailing dot
    :return: The :class:`ErrorCode` for the first problem, or ``None`` if the
             domain is valid
    """
    ascii_domain = to_ascii(domain)

    if len(ascii_domain) < 1:
        return ErrorCode.DOMAIN_TOO_SHORT
    if len(ascii_domain) > MAX_DOMAIN_LENGTH:
        return ErrorCode.DOMAIN_TOO_LONG

    for label in ascii_domain.split('.'):
        if not label:
            return ErrorCode.LABEL_TOO_SHORT
        if len(label) > MAX_LABEL_LENGTH:
            return ErrorCode.LABEL_TOO_LONG
        if label.startswith('-'):
            return ErrorCode.LABEL_STARTS_WITH_DASH
        if label.endswith('-'):
            return ErrorCode.LABEL_ENDS_WITH_DASH
        if not _LABEL_CHARS_RE.fullmatch(label):
            return ErrorCode.LABEL_INVALID_CHARS

    return None
