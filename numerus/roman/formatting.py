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

"""Human-friendly rendering of numerals and fractions."""

import math

from numerus.roman import analysis
from numerus.roman import dictionary as dict_lib
from numerus.roman import errors
from numerus.roman import fraction as fraction_lib

ErrorCode = errors.ErrorCode


def overline(numeral: str, windows_eol: bool = False) -> str:
  """Renders the vinculum of a numeral as an overline.

  The characters between the underscores are marked by underscores on the
  line above, e.g. `-_MCM_LI` becomes

     ___
    -MCMLI

  A leading minus is padded with a space on the first line so that the
  overline stays aligned. Numerals without a vinculum are returned as they
  are, minus the leading whitespace.

  Args:
    numeral: Numeral, possibly with a vinculum.
    windows_eol: Whether to separate the two lines with `\\r\\n` instead of
      `\\n`.

  Returns:
    The overlined numeral.

  Raises:
    NumeralError: If the numeral is None or empty, if the underscores do not
      delimit a single vinculum at its start, or if the result would be too
      long.
  """
  trimmed = analysis.trim_head(numeral)
  underscores = trimmed.count(dict_lib.VINCULUM)
  if underscores == 0:
    return trimmed
  first = trimmed.index(dict_lib.VINCULUM)
  if underscores == 1:
    raise errors.fail(ErrorCode.NON_TERMINATED_VINCULUM, trimmed, first)
  if underscores > 2:
    second = trimmed.index(dict_lib.VINCULUM, first + 1)
    raise errors.fail(
        ErrorCode.TOO_MANY_UNDERSCORES,
        trimmed,
        trimmed.index(dict_lib.VINCULUM, second + 1),
    )
  is_negative = trimmed.startswith(dict_lib.MINUS)
  if first != int(is_negative):
    raise errors.fail(
        ErrorCode.ILLEGAL_FIRST_UNDERSCORE_POSITION, trimmed, first
    )
  second = trimmed.index(dict_lib.VINCULUM, first + 1)
  padding = " " if is_negative else ""
  top = padding + dict_lib.VINCULUM * (second - first - 1)
  eol = "\r\n" if windows_eol else "\n"
  result = top + eol + trimmed.replace(dict_lib.VINCULUM, "")
  if len(result) >= dict_lib.MAX_OVERLINED_LENGTH:
    raise errors.fail(ErrorCode.TOO_LONG_EXTENDED_NUMERAL, trimmed)
  return result


def format_fraction(fraction: fraction_lib.Fraction) -> str:
  """Writes the fraction with its twelfths in lowest terms.

  For example `(-2, -2)` is written as `-2, -1/6` and `(0, 2)` as `1/6`.

  Args:
    fraction: Fraction to format, normalized first.

  Returns:
    The formatted fraction.

  Raises:
    NumeralError: If the fraction is None or out of range.
  """
  fraction = fraction_lib.simplify(fraction)
  if not fraction.twelfths:
    return str(fraction.int_part)
  divisor = math.gcd(abs(fraction.twelfths), dict_lib.TWELFTHS_PER_UNIT)
  numerator = fraction.twelfths // divisor
  denominator = dict_lib.TWELFTHS_PER_UNIT // divisor
  if not fraction.int_part:
    return f"{numerator}/{denominator}"
  return f"{fraction.int_part}, {numerator}/{denominator}"


def format_double(value: float) -> str:
  """Writes a real as an integer plus its nearest twelfths in lowest terms."""
  return format_fraction(fraction_lib.from_double(value))
