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

"""Conversion of values to Roman numerals.

Values are encoded greedily: the dictionary is walked from a starting entry
emitting each glyph while the remaining value allows it. The weights of the
dictionary guarantee that no glyph is emitted more often than allowed.
"""

import math

from numerus.roman import dictionary as dict_lib
from numerus.roman import errors
from numerus.roman import fraction as fraction_lib

ErrorCode = errors.ErrorCode
Fraction = fraction_lib.Fraction


def _encode_section(value: int, start_index: int, end_index: int) -> str:
  """Greedily encodes a non-negative value with the given dictionary slice."""
  glyphs = []
  for glyph in dict_lib.DICTIONARY[start_index:end_index]:
    if value <= 0:
      break
    while value >= glyph.value:
      glyphs.append(glyph.chars)
      value -= glyph.value
  return "".join(glyphs)


def _encode_integer(value: int, start_index: int = dict_lib.INDEX_M) -> str:
  return _encode_section(value, start_index, dict_lib.INDEX_S)


def _encode_twelfths(twelfths: int) -> str:
  return _encode_section(twelfths, dict_lib.INDEX_S, dict_lib.INDEX_END)


def _check_integer(value: int) -> None:
  if value is None:
    raise errors.fail(ErrorCode.NULL_INT)
  if isinstance(value, bool) or not isinstance(value, int):
    raise TypeError(f"Expected an integer, got {type(value).__name__}!")


def encode_basic(value: int) -> str:
  """Converts an integer to a basic numeral.

  Args:
    value: Integer within [-3999, 3999].

  Returns:
    The numeral, `NULLA` for zero.

  Raises:
    NumeralError: If the value is None or out of the basic range.
  """
  _check_integer(value)
  if not dict_lib.BASIC_MIN <= value <= dict_lib.BASIC_MAX:
    raise errors.fail(ErrorCode.BASIC_VALUE_OUT_OF_RANGE)
  if value == 0:
    return dict_lib.ZERO
  sign = dict_lib.MINUS if value < 0 else ""
  return sign + _encode_integer(abs(value))


def encode_extended(int_part: int, twelfths: int = 0) -> str:
  """Converts a value given as integer part and twelfths to a numeral.

  The parts are normalized first, so e.g. `(1, 13)` and `(2, 1)` produce the
  same numeral. Integer parts beyond the basic range are written with the
  thousands between underscores: 3888888 + 11/12 becomes
  `_MMMDCCCLXXXVIII_DCCCLXXXVIIIS.....`.

  Args:
    int_part: Integer part of the value.
    twelfths: Number of twelfths to add to the integer part.

  Returns:
    The numeral, `NULLA` for zero.

  Raises:
    NumeralError: If any part is None or the value is out of the extended
      range.
  """
  _check_integer(int_part)
  _check_integer(twelfths)
  value = fraction_lib.simplify(Fraction(int_part, twelfths))
  if value.is_zero:
    return dict_lib.ZERO
  int_part = value.int_part
  twelfths = value.twelfths
  sign = ""
  if int_part < 0 or twelfths < 0:
    sign = dict_lib.MINUS
    int_part = abs(int_part)
    twelfths = abs(twelfths)

  if int_part > dict_lib.BASIC_MAX:
    thousands, units = divmod(int_part, dict_lib.VINCULUM_MULTIPLIER)
    integer = (
        dict_lib.VINCULUM + _encode_integer(thousands) + dict_lib.VINCULUM +
        _encode_integer(units, start_index=dict_lib.INDEX_CM)
    )
  else:
    integer = _encode_integer(int_part)
  return sign + integer + _encode_twelfths(twelfths)


def encode_fraction(value: Fraction) -> str:
  """Converts a fraction to a numeral."""
  if value is None:
    raise errors.fail(ErrorCode.NULL_FRACTION)
  return encode_extended(value.int_part, value.twelfths)


def encode_double(value: float) -> str:
  """Converts a real to a numeral, rounding to the nearest twelfth.

  Args:
    value: Finite real within the extended range.

  Returns:
    The numeral, `NULLA` for anything rounding to zero.

  Raises:
    NumeralError: If the value is None, NaN, infinite or out of range.
  """
  if value is None:
    raise errors.fail(ErrorCode.NULL_DOUBLE)
  if math.isnan(value) or math.isinf(value):
    raise errors.fail(ErrorCode.NOT_FINITE)
  return encode_fraction(fraction_lib.from_double(value))
