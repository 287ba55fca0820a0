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

"""Round-trips between values and numerals over the whole ranges."""

from absl.testing import absltest
import numpy as np
from numerus.roman import dictionary as dict_lib
from numerus.roman import formatting
from numerus.roman import fraction as fraction_lib
from numerus.roman import numeral_to_value
from numerus.roman import value_to_numeral

Fraction = fraction_lib.Fraction

_RANDOM_SEED = 42
_NUM_SAMPLES = 5_000

# Largest magnitude of a value in twelfths.
_MAX_TWELFTHS = (
    dict_lib.EXTENDED_INT_MAX * dict_lib.TWELFTHS_PER_UNIT +
    dict_lib.TWELFTHS_PER_UNIT - 1
)


class RoundTripTest(absltest.TestCase):

  def setUp(self):
    super().setUp()
    self._rng = np.random.default_rng(seed=_RANDOM_SEED)

  def _random_fractions(self) -> list[Fraction]:
    twelfths = self._rng.integers(
        -_MAX_TWELFTHS, _MAX_TWELFTHS, size=_NUM_SAMPLES, endpoint=True
    )
    return [fraction_lib.simplify(Fraction(0, int(t))) for t in twelfths]

  def test_basic_range(self) -> None:
    for value in range(dict_lib.BASIC_MIN, dict_lib.BASIC_MAX + 1):
      numeral = value_to_numeral.encode_basic(value)
      self.assertLess(len(numeral), dict_lib.MAX_BASIC_LENGTH)
      self.assertEqual(numeral_to_value.parse_basic_to_int(numeral), value)
      self.assertEqual(numeral_to_value.parse_to_int(numeral.lower()), value)

  def test_extended_fractions(self) -> None:
    for value in self._random_fractions():
      numeral = value_to_numeral.encode_fraction(value)
      self.assertLess(len(numeral), dict_lib.MAX_EXTENDED_LENGTH)
      self.assertEqual(numeral_to_value.parse(numeral), value, msg=numeral)
      self.assertEqual(
          numeral_to_value.parse(numeral.lower()), value, msg=numeral
      )

  def test_extended_extremes(self) -> None:
    for value in (
        Fraction(dict_lib.EXTENDED_INT_MAX, 11),
        Fraction(dict_lib.EXTENDED_INT_MIN, -11),
        Fraction(dict_lib.BASIC_MAX + 1, 0),
        Fraction(-dict_lib.BASIC_MAX - 1, 0),
        Fraction(0, 1),
        Fraction(0, -1),
    ):
      numeral = value_to_numeral.encode_fraction(value)
      self.assertEqual(numeral_to_value.parse(numeral), value, msg=numeral)

  def test_doubles(self) -> None:
    values = self._rng.uniform(
        dict_lib.EXTENDED_MIN, dict_lib.EXTENDED_MAX, size=_NUM_SAMPLES
    )
    for value in values:
      value = float(value)
      numeral = value_to_numeral.encode_double(value)
      parsed = numeral_to_value.parse_to_double(numeral)
      # Rounded to the nearest twelfth, up to the precision of the real.
      self.assertLessEqual(abs(parsed - value), 0.5 / 12 + 1e-6, msg=numeral)

  def test_doubles_of_twelfths(self) -> None:
    for value in self._random_fractions()[:1_000]:
      self.assertEqual(
          value_to_numeral.encode_double(fraction_lib.to_double(value)),
          value_to_numeral.encode_fraction(value),
      )

  def test_overline_drops_only_underscores(self) -> None:
    for value in self._random_fractions()[:1_000]:
      numeral = value_to_numeral.encode_fraction(value)
      lines = formatting.overline(numeral).split("\n")
      self.assertEqual(lines[-1], numeral.replace(dict_lib.VINCULUM, ""))
      if dict_lib.VINCULUM in numeral:
        self.assertLen(lines, 2)
        self.assertEqual(set(lines[0]) - {" "}, {dict_lib.VINCULUM})
        self.assertLess(
            len(formatting.overline(numeral, windows_eol=True)),
            dict_lib.MAX_OVERLINED_LENGTH,
        )

  def test_formatted_fractions_fit_bound(self) -> None:
    for value in self._random_fractions()[:1_000]:
      self.assertLess(
          len(formatting.format_fraction(value)),
          dict_lib.MAX_FORMATTED_FRACTION_LENGTH,
      )


if __name__ == "__main__":
  absltest.main()
