# Copyright (c) 2022-2023 SiumLhahah
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

"""
sysext.strings

String helpers.

The parsers are safe: malformed input gives a zero value
(0, 0.0, False, the zero-valued member) instead of an error.

Example

>>> try_split('a,b,,c', ',')
['a', 'b', 'c']
>>> to_int('12'), to_int('1.5'), to_int('99999999999')
(12, 0, 0)

"""

import re
from base64 import b64decode
from enum import Enum, Flag
from io import StringIO
from typing import Any, TypeVar
from .constants import ENCODING, INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN
from .lib.exceptions import InvalidArgument
from .numeric import to_enum as int_to_enum

E = TypeVar('E', bound=Enum)

_INTEGER = re.compile(r'\s*[+-]?[0-9]+\s*')
_BOOLEANS = {'true': True, 'false': False}


# Enum

def get_name(member: Enum) -> str | None:
    """Name of the member."""
    return member.name


def enum_to_int(member: Enum) -> int:
    """Integer value of the member."""
    return int(member.value)


def get_value(member: Enum, fmt='') -> str:
    """Integer value of the member, formatted with a format spec."""
    return format(enum_to_int(member), fmt)


def _flag_names(member: Flag) -> str:
    return ', '.join(flag.name for flag in member)


def format_enum(member: Enum, fmt: str) -> str:
    """Format the member.

    G: name, D: decimal value, X: 8 hexadecimal digits,
    F: names of the contained flags joined by ', '.
    G also lists the flags of a combination that has no name of its own.

    """
    match fmt.upper():
        case 'G':
            if member.name in type(member).__members__:
                return member.name
            if isinstance(member, Flag) and member.value:
                return _flag_names(member)
            return str(enum_to_int(member))
        case 'D':
            return str(enum_to_int(member))
        case 'X':
            return format(enum_to_int(member) & 0xFFFFFFFF, '08X')
        case 'F':
            if isinstance(member, Flag) and member.value:
                return _flag_names(member)
            return format_enum(member, 'G')
    raise InvalidArgument(f"Unknown enum format {fmt!r}.")


# Comparison

def compare(source: str | None, target: str | None, ignore_case=True
            ) -> bool:
    """Whether source and target are equal, ignoring case by default."""
    if source is None or target is None:
        return source is None and target is None
    if ignore_case:
        return source.casefold() == target.casefold()
    return source == target


# Concatenation and formatting

def concat(source: str | None, *args: Any) -> str:
    """Concatenate source and args, None is empty."""
    return ''.join('' if arg is None else str(arg) for arg in (source, *args))


def format_text(source: str, *args: Any) -> str:
    """Fill the {0}, {1}... placeholders of source."""
    return source.format(*args)


def join(separator: str, *args: Any) -> str:
    """Join args with separator, None is empty."""
    return separator.join('' if arg is None else str(arg) for arg in args)


# Conversion

def from_base64(text: str) -> bytes:
    """Decode Base64 text, whitespace is ignored.

    Raises ValueError (binascii.Error) on malformed input.

    """
    return b64decode(''.join(text.split()), validate=True)


def to_bool(text: str | None) -> bool:
    """'true' or 'false' in any case, anything else is False."""
    if text is None:
        return False
    return _BOOLEANS.get(text.strip().lower(), False)


def to_double(text: str | None) -> float:
    """Parse a float, 0.0 if malformed."""
    if not text or '_' in text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0


to_float = to_double


def _parse_integer(text: str | None, low: int, high: int) -> int:
    if text is None or not _INTEGER.fullmatch(text):
        return 0
    value = int(text)
    if low <= value <= high:
        return value
    return 0


def to_int(text: str | None) -> int:
    """Parse a 32-bit integer, 0 if malformed or out of range."""
    return _parse_integer(text, INT32_MIN, INT32_MAX)


def to_long(text: str | None) -> int:
    """Parse a 64-bit integer, 0 if malformed or out of range."""
    return _parse_integer(text, INT64_MIN, INT64_MAX)


def to_enum(text: str | None, enum_cls: type[E]) -> E | None:
    """Parse a member name (any case) or an integer value.

    Flag types accept names separated by ','.
    Malformed text gives the zero-valued member, or None
    when enum_cls has none.

    """
    default = int_to_enum(enum_cls, 0)
    if text is None or not text.strip():
        return default
    if _INTEGER.fullmatch(text):
        member = int_to_enum(enum_cls, int(text))
        return default if member is None else member
    members = {name.casefold(): member
               for name, member in enum_cls.__members__.items()}
    names = [name.strip().casefold() for name in text.split(',')]
    if len(names) > 1 and not issubclass(enum_cls, Flag):
        return default
    result = None
    for name in names:
        if (member := members.get(name)) is None:
            return default
        result = member if result is None else result | member
    return result


def to_utf8(text: str) -> bytes:
    """Encode text with UTF-8."""
    return text.encode(ENCODING)


# Manipulation

def remove(source: str | None, target: str) -> str:
    """Remove every occurrence of target."""
    if not source:
        return ''
    if not target:
        return source
    return source.replace(target, '')


def lower_at(source: str, index: int) -> str:
    """Lower the character at index, out of range is a no-op."""
    if index < 0 or index >= len(source):
        return source
    return source[:index] + source[index].lower() + source[index + 1:]


def upper_at(source: str, index: int) -> str:
    """Upper the character at index, out of range is a no-op."""
    if index < 0 or index >= len(source):
        return source
    return source[:index] + source[index].upper() + source[index + 1:]


def try_sub(source: str | None, index: int, length: int | None = None
            ) -> str:
    """Substring, '' when out of range."""
    if source is None or index < 0:
        return ''
    if length is None:
        return source[index:]
    if length < 0 or index + length > len(source):
        return ''
    return source[index:index + length]


# Splitting

def try_split(source: str | None, *separators: str) -> list[str]:
    """Split source on any of the separators, dropping empty entries.

    Separators may be of any length and are tried in the given order.
    Without separators source is split on whitespace.

    """
    if not source:
        return []
    separators = [separator for separator in separators if separator]
    if not separators:
        return source.split()
    pattern = '|'.join(map(re.escape, separators))
    return [item for item in re.split(pattern, source) if item]


# Validation

def is_defined(enum_cls: type[Enum], name: str) -> bool:
    """Whether name is a member name of enum_cls (case sensitive)."""
    return name in enum_cls.__members__


def is_null_or_empty(text: str | None) -> bool:
    return text is None or len(text) == 0


def is_null_or_white_space(text: str | None) -> bool:
    return not text or text.isspace()


def is_letter_or_digit(text: str | None) -> bool:
    """Whether every character is a letter or a decimal digit."""
    if text is None:
        return False
    return all(char.isalpha() or char.isdecimal() for char in text)


# Buffers

def remove_in(buffer: StringIO, target: str):
    """Remove every occurrence of target from buffer in place."""
    if not target:
        return
    value = buffer.getvalue().replace(target, '')
    buffer.seek(0)
    buffer.truncate()
    buffer.write(value)
