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

"""Conversion of Roman numerals to values.

Numerals follow this grammar, case-insensitively:

  numeral     ::= "NULLA" | ["-"] body
  body        ::= [vinculum] post_vinc [twelfths] | int_section [twelfths]
  vinculum    ::= "_" int_section "_"
  int_section ::= M{0,3} (CM|CD|D?C{0,3}) (XC|XL|L?X{0,3}) (IX|IV|V?I{0,3})
  post_vinc   ::= int_section without M
  twelfths    ::= [S] .{0,5}

The parser is a left-to-right state machine walking the dictionary with a
monotonic index instead of a regular expression, so that every rejection
reports the specific violation and where it happened.
"""

from numerus.roman import analysis
from numerus.roman import dictionary as dict_lib
from numerus.roman import errors
from numerus.roman import fraction as fraction_lib

ErrorCode = errors.ErrorCode
Fraction = fraction_lib.Fraction

_DICTIONARY = dict_lib.DICTIONARY
_END = ""  # Current character past the end of the numeral.

_BASIC_ALPHABET = dict_lib.INTEGER_CHARS | {dict_lib.MINUS}


class _NumeralParser:
  """Single-use parser of one head-trimmed, non-zero numeral."""

  def __init__(self, numeral: str) -> None:
    self._numeral = numeral
    self._chars = numeral.upper()
    self._position = 0
    self._index = dict_lib.INDEX_M
    self._repetitions = 0
    self._int_part = 0
    self._twelfths = 0
    self._sign = 1
    self._is_extended = False

  def _current(self) -> str:
    if self._position >= len(self._chars):
      return _END
    return self._chars[self._position]

  def _error(self, code: ErrorCode) -> errors.NumeralError:
    return errors.fail(code, self._numeral, self._position)

  def _skip_exclusive_glyphs(self, matched: dict_lib.Glyph) -> None:
    """Moves past the glyphs that cannot follow the matched one.

    Non-repeatable glyphs of the same magnitude exclude each other, e.g. after
    `D` neither `CD` nor `CM` may appear, only `C`. After a two-character
    glyph such as `CM` the unit glyph (`C`) is excluded as well.
    """
    while (self._index < dict_lib.INDEX_END and
           _DICTIONARY[self._index].max_repetitions == 1):
      self._index += 1
      self._repetitions = 0
    if len(matched.chars) == 2:
      self._index += 1

  def _match_glyph(self) -> None:
    """Compares the current position with the current dictionary glyph.

    On a match the glyph is consumed, otherwise the next glyph of the
    dictionary becomes the current one.

    Raises:
      NumeralError: If a glyph is repeated too often or the dictionary is
        exhausted.
    """
    glyph = _DICTIONARY[self._index]
    if self._chars.startswith(glyph.chars, self._position):
      self._repetitions += 1
      if self._repetitions > glyph.max_repetitions:
        raise self._error(ErrorCode.TOO_MANY_REPEATED_CHARS)
      self._position += len(glyph.chars)
      if glyph.is_fractional:
        self._twelfths += glyph.value
      else:
        self._int_part += glyph.value
      self._skip_exclusive_glyphs(glyph)
    else:
      self._repetitions = 0
      self._index += 1
      if self._index >= dict_lib.INDEX_END:
        raise self._error(ErrorCode.ILLEGAL_CHAR_SEQUENCE)

  def _consume_until(self, stop_chars: frozenset[str]) -> str:
    """Matches glyphs up to a stop character, which is returned."""
    while self._current() not in stop_chars:
      self._match_glyph()
    return self._current()

  def _parse_vinculum(self) -> None:
    start = self._position
    stop = self._consume_until(
        frozenset((_END, dict_lib.VINCULUM, "S", ".", dict_lib.MINUS))
    )
    if stop == _END:
      raise self._error(ErrorCode.MISSING_SECOND_UNDERSCORE)
    if stop == dict_lib.MINUS:
      raise self._error(ErrorCode.ILLEGAL_MINUS_POSITION)
    if stop != dict_lib.VINCULUM:
      raise self._error(ErrorCode.FRACTIONAL_CHARS_BETWEEN_UNDERSCORES)
    if self._position == start:
      raise self._error(ErrorCode.ILLEGAL_CHAR_SEQUENCE)
    self._position += 1
    self._int_part *= dict_lib.VINCULUM_MULTIPLIER
    self._index = dict_lib.INDEX_CM
    self._repetitions = 0

  def _check_trailing_stop(self, stop: str) -> None:
    if stop == dict_lib.VINCULUM:
      if self._is_extended:
        raise self._error(ErrorCode.TOO_MANY_UNDERSCORES)
      raise self._error(ErrorCode.ILLEGAL_FIRST_UNDERSCORE_POSITION)
    if stop == dict_lib.MINUS:
      raise self._error(ErrorCode.ILLEGAL_MINUS_POSITION)

  def _parse_integer(self) -> None:
    stop_chars = {_END, dict_lib.VINCULUM, "S", ".", dict_lib.MINUS}
    if self._is_extended:
      stop_chars.add("M")
    stop = self._consume_until(frozenset(stop_chars))
    if stop == "M":
      raise self._error(ErrorCode.M_AFTER_UNDERSCORES)
    self._check_trailing_stop(stop)

  def _parse_twelfths(self) -> None:
    if self._index < dict_lib.INDEX_S:
      self._index = dict_lib.INDEX_S
      self._repetitions = 0
    # Integer glyphs run past the end of the dictionary here.
    stop = self._consume_until(
        frozenset((_END, dict_lib.VINCULUM, dict_lib.MINUS))
    )
    self._check_trailing_stop(stop)

  def parse(self) -> Fraction:
    if self._current() == dict_lib.MINUS:
      self._sign = -1
      self._position += 1
    if self._current() == _END:
      raise self._error(ErrorCode.EMPTY_NUMERAL)
    if self._current() == dict_lib.VINCULUM:
      self._position += 1
      self._is_extended = True
      self._parse_vinculum()
    self._parse_integer()
    self._parse_twelfths()
    return Fraction(self._sign * self._int_part, self._sign * self._twelfths)


def parse(numeral: str) -> Fraction:
  """Converts a numeral to its exact value.

  Leading whitespace is ignored and the numeral is case-insensitive.

  Args:
    numeral: Basic or extended numeral, or `NULLA`.

  Returns:
    Normalized fraction with the value of the numeral.

  Raises:
    NumeralError: With the most specific kind of the first violation found.
  """
  trimmed = analysis.trim_head(numeral)
  if analysis.matches_zero(trimmed):
    return fraction_lib.ZERO
  analysis.count_roman_chars(trimmed)
  return _NumeralParser(trimmed).parse()


def parse_basic_to_int(numeral: str) -> int:
  """Converts a basic numeral, rejecting any extended notation."""
  trimmed = analysis.trim_head(numeral)
  if analysis.matches_zero(trimmed):
    return 0
  if len(trimmed) >= dict_lib.MAX_BASIC_LENGTH:
    raise errors.fail(
        ErrorCode.TOO_LONG_BASIC_NUMERAL, trimmed, dict_lib.MAX_BASIC_LENGTH
    )
  for position, char in enumerate(trimmed):
    if not char.isascii() or char.upper() not in _BASIC_ALPHABET:
      raise errors.fail(ErrorCode.ILLEGAL_BASIC_CHARACTER, trimmed, position)
  return _NumeralParser(trimmed).parse().int_part


def parse_to_int(numeral: str) -> int:
  """Converts a numeral without twelfths to an integer."""
  value = parse(numeral)
  if value.twelfths:
    raise errors.fail(ErrorCode.UNEXPECTED_TWELFTHS, numeral)
  return value.int_part


def parse_to_double(numeral: str) -> float:
  """Converts a numeral to a real."""
  return fraction_lib.to_double(parse(numeral))


def compare_numerals(first: str, second: str) -> int:
  """Returns -1, 0 or +1 as the first numeral is smaller, equal or bigger."""
  return fraction_lib.compare(parse(first), parse(second))
