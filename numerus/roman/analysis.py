# Copyright 2025 The Numerus Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Quick analysis of numerals without following the full grammar."""

import string

from numerus.roman import dictionary as dict_lib
from numerus.roman import errors

ErrorCode = errors.ErrorCode


def trim_head(numeral: str) -> str:
  """Strips the leading ASCII whitespace of a numeral.

  Args:
    numeral: Numeral to prepare for analysis or parsing.

  Returns:
    Numeral without leading whitespace.

  Raises:
    NumeralError: If the numeral is None or has nothing but whitespace.
  """
  if numeral is None:
    raise errors.fail(ErrorCode.NULL_NUMERAL)
  trimmed = numeral.lstrip(string.whitespace)
  if not trimmed:
    raise errors.fail(ErrorCode.EMPTY_NUMERAL, numeral, len(numeral))
  return trimmed


def matches_zero(trimmed: str) -> bool:
  """Checks for `NULLA` in any case, with an optional leading minus."""
  if trimmed.startswith(dict_lib.MINUS):
    trimmed = trimmed[1:]
  return trimmed.upper() == dict_lib.ZERO


def is_zero(numeral: str) -> bool:
  """Checks whether the numeral is the zero numeral `NULLA`."""
  return matches_zero(trim_head(numeral))


def sign(numeral: str) -> int:
  """Returns the sign of the numeral as -1, 0 or +1.

  Only the leading minus and the zero numeral are inspected, the rest of the
  numeral is not validated.
  """
  trimmed = trim_head(numeral)
  if matches_zero(trimmed):
    return 0
  return -1 if trimmed.startswith(dict_lib.MINUS) else 1


def is_basic(numeral: str) -> bool:
  """Checks that the numeral has no vinculum and no twelfths characters."""
  trimmed = trim_head(numeral)
  return not any(c.upper() in dict_lib.EXTENDED_CHARS for c in trimmed)


def is_extended(numeral: str) -> bool:
  return not is_basic(numeral)


def count_roman_chars(numeral: str) -> int:
  """Counts the Roman characters of the numeral.

  Underscores and whitespace are not counted. The minus sign is, except in
  front of `NULLA`. The numeral is not validated beyond the set of its
  characters.

  Args:
    numeral: Numeral to inspect.

  Returns:
    Number of characters among `MDCLXVIS.-`, in any case.

  Raises:
    NumeralError: On a character outside the extended alphabet or when the
      count exceeds the maximum length of an extended numeral.
  """
  trimmed = trim_head(numeral)
  if matches_zero(trimmed):
    return len(dict_lib.ZERO)
  count = 0
  for position, char in enumerate(trimmed):
    if char.isascii() and char.upper() in dict_lib.ROMAN_CHARS:
      count += 1
    elif char != dict_lib.VINCULUM and char not in string.whitespace:
      raise errors.fail(
          ErrorCode.ILLEGAL_EXTENDED_CHARACTER, trimmed, position
      )
    if count > dict_lib.MAX_EXTENDED_LENGTH:
      raise errors.fail(ErrorCode.TOO_LONG_EXTENDED_NUMERAL, trimmed, position)
  return count
