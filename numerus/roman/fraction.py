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

"""Exact values as an integer part plus a number of twelfths.

A `Fraction` is normalized when `|twelfths| < 12` and both parts share the
sign. The integer part leads: `(-3, 2)`, i.e. -3 + 2/12, becomes `(-2, -10)`.
When the integer part is zero the twelfths carry the sign alone.
"""

import dataclasses
import math

from numerus.roman import dictionary as dict_lib
from numerus.roman import errors

ErrorCode = errors.ErrorCode

_TWELFTHS = dict_lib.TWELFTHS_PER_UNIT


@dataclasses.dataclass(frozen=True)
class Fraction:
  """Value `int_part + twelfths / 12`."""
  int_part: int = 0
  twelfths: int = 0

  @property
  def is_zero(self) -> bool:
    return self.int_part == 0 and self.twelfths == 0


ZERO = Fraction(0, 0)


def _truncating_divmod(value: int, divisor: int) -> tuple[int, int]:
  """Like `divmod` but rounding the quotient towards zero."""
  quotient = abs(value) // divisor
  if value < 0:
    quotient = -quotient
  return quotient, value - quotient * divisor


def simplify(fraction: Fraction) -> Fraction:
  """Normalizes the fraction.

  Carries whole units out of the twelfths and then makes the twelfths agree
  in sign with the integer part.

  Args:
    fraction: Fraction with arbitrary parts.

  Returns:
    The equivalent normalized fraction.

  Raises:
    NumeralError: If the fraction is None or the normalized integer part is
      outside the extended range.
  """
  if fraction is None:
    raise errors.fail(ErrorCode.NULL_FRACTION)
  carry, twelfths = _truncating_divmod(fraction.twelfths, _TWELFTHS)
  int_part = fraction.int_part + carry
  if int_part > 0 and twelfths < 0:
    int_part -= 1
    twelfths += _TWELFTHS
  elif int_part < 0 and twelfths > 0:
    int_part += 1
    twelfths -= _TWELFTHS
  if abs(int_part) > dict_lib.EXTENDED_INT_MAX:
    raise errors.fail(ErrorCode.EXTENDED_VALUE_OUT_OF_RANGE)
  return Fraction(int_part, twelfths)


def to_double(fraction: Fraction) -> float:
  """Converts the fraction to a real."""
  if fraction is None:
    raise errors.fail(ErrorCode.NULL_FRACTION)
  value = fraction.twelfths / _TWELFTHS + fraction.int_part
  if abs(value) > dict_lib.EXTENDED_ROUNDING_MAX:
    raise errors.fail(ErrorCode.EXTENDED_VALUE_OUT_OF_RANGE)
  return value


def _round_half_away_from_zero(value: float) -> int:
  return int(math.copysign(math.floor(abs(value) + 0.5), value))


def from_double(value: float) -> Fraction:
  """Splits a real into a normalized fraction.

  The fractional part is rounded to the nearest twelfth, halves away from
  zero.

  Args:
    value: Real within the extended range.

  Returns:
    Normalized fraction closest to the value.

  Raises:
    NumeralError: If the value is None, NaN, infinite or outside the extended
      range.
  """
  if value is None:
    raise errors.fail(ErrorCode.NULL_DOUBLE)
  if math.isnan(value) or math.isinf(value):
    raise errors.fail(ErrorCode.NOT_FINITE)
  if abs(value) > dict_lib.EXTENDED_ROUNDING_MAX:
    raise errors.fail(ErrorCode.EXTENDED_VALUE_OUT_OF_RANGE)
  int_part = math.trunc(value)
  twelfths = _round_half_away_from_zero((value - int_part) * _TWELFTHS)
  return simplify(Fraction(int_part, twelfths))


def compare(first: Fraction, second: Fraction) -> int:
  """Returns -1, 0 or +1 as `first` is smaller, equal or bigger."""
  first = simplify(first)
  second = simplify(second)
  first_twelfths = first.int_part * _TWELFTHS + first.twelfths
  second_twelfths = second.int_part * _TWELFTHS + second.twelfths
  return (first_twelfths > second_twelfths) - (first_twelfths < second_twelfths)
