###############################################################################
#  Copyright 2021 Amazon.com, Inc. or its affiliates. All Rights Reserved.    #
#                                                                             #
#  Licensed under the Apache License, Version 2.0 (the "License").            #
#  You may not use this file except in compliance with the License.
#  A copy of the License is located at                                        #
#                                                                             #
#      http://www.apache.org/licenses/LICENSE-2.0                             #
#                                                                             #
#  or in the "license" file accompanying this file. This file is distributed  #
#  on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, express #
#  or implied. See the License for the specific language governing permissions#
#  and limitations under the License.                                         #
###############################################################################

import re
from urllib.parse import quote, unquote_to_bytes

FORCED_SCHEME_SEPARATOR = "::"


def split_forced_scheme(src):
    """Splits a forced scheme tag off the front of a location.

    's3::https://s3.amazonaws.com/bucket/key' becomes
    ('s3', 'https://s3.amazonaws.com/bucket/key'). A location without a
    tag is returned unchanged with an empty tag.

    Args:
        src: location string

    Returns:
        tuple of (scheme tag, remaining url)
    """
    tag, separator, url = src.partition(FORCED_SCHEME_SEPARATOR)
    # '::' inside the url itself (e.g. an IPv6 host) is not a tag
    if not separator or "/" in tag or not tag:
        return "", src
    return tag, url


def trim_string_from_front(string, remove_starts_with_string):
    """Remove string provided in the search_string
    and returns remainder of the string.
    :param string:
    :param remove_starts_with_string:
    :return: trimmed string
    """
    if string.startswith(remove_starts_with_string):
        return string[len(remove_starts_with_string) :]
    else:
        raise ValueError("The beginning of the string does " "not match the string to be trimmed.")


# characters that never need escaping in a path, see RFC 3986 section 3.3
PATH_SAFE_CHARACTERS = "/$&+,:;=@"
# characters allowed to stay as written when a path is already escaped
PATH_ENCODED_CHARACTERS = PATH_SAFE_CHARACTERS + "!'()*[]%"
QUERY_SAFE_CHARACTERS = "/?:@!$&'()*+,;=%[]"
UNRESERVED_CHARACTERS = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~"
)

_INVALID_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def find_control_character(string):
    """Returns the first ASCII control character (C0 or DEL) in string,
    or None."""
    for character in string:
        if ord(character) < 0x20 or ord(character) == 0x7F:
            return character
    return None


def find_invalid_escape(string):
    """Returns the first '%' sequence that is not followed by two hex
    digits, or None."""
    match = _INVALID_ESCAPE.search(string)
    if match is None:
        return None
    return string[match.start() : match.start() + 3]


def escape_path(path):
    """Percent-encodes a URL path.

    A path made only of unreserved, sub-delimiter and '%' characters is
    taken as already escaped and returned as is. Otherwise it is decoded
    and every character outside PATH_SAFE_CHARACTERS is encoded, so
    'a b/c.txt' becomes 'a%20b/c.txt'.
    """
    if all(c in UNRESERVED_CHARACTERS or c in PATH_ENCODED_CHARACTERS for c in path):
        return path
    return quote(unquote_to_bytes(path), safe=PATH_SAFE_CHARACTERS)


def escape_query(query):
    """Percent-encodes the characters a query or fragment may not hold
    raw (spaces, non-ASCII, quotes). Existing escapes are kept."""
    return quote(query, safe=QUERY_SAFE_CHARACTERS)
