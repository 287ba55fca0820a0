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

"""Dictionary of Roman glyphs and the numeric limits of the numerals.

The dictionary is ordered by descending value. Entries up to and including
`I` carry whole units, the last two (`S` and `.`) carry twelfths. Both the
encoder and the parser walk this table with a monotonic index, so the order
of the entries is significant.
"""

import dataclasses


@dataclasses.dataclass(frozen=True)
class Glyph:
  """A Roman glyph of one or two characters.

  Attributes:
    chars: Upper-case characters of the glyph, e.g. `M` or `CM`.
    value: Weight of the glyph. Whole units for the integer glyphs, twelfths
      for `S` and `.`.
    max_repetitions: Maximum number of consecutive occurrences.
  """
  chars: str
  value: int
  max_repetitions: int

  @property
  def is_fractional(self) -> bool:
    return self.chars in ("S", ".")


DICTIONARY = (
    Glyph("M", 1000, 3),
    Glyph("CM", 900, 1),
    Glyph("D", 500, 1),
    Glyph("CD", 400, 1),
    Glyph("C", 100, 3),
    Glyph("XC", 90, 1),
    Glyph("L", 50, 1),
    Glyph("XL", 40, 1),
    Glyph("X", 10, 3),
    Glyph("IX", 9, 1),
    Glyph("V", 5, 1),
    Glyph("IV", 4, 1),
    Glyph("I", 1, 3),
    Glyph("S", 6, 1),
    Glyph(".", 1, 5),
)

# Starting points of the greedy walks over the dictionary.
INDEX_M = 0
INDEX_CM = 1  # After the vinculum `M` is forbidden.
INDEX_S = 13
INDEX_END = len(DICTIONARY)

# Characters of the integer glyphs.
INTEGER_CHARS = frozenset("MDCLXVI")

# Characters that turn a basic numeral into an extended one.
EXTENDED_CHARS = frozenset("_S.")

# Characters counted as Roman characters (underscores are not).
ROMAN_CHARS = frozenset("MDCLXVIS.-")

VINCULUM = "_"
MINUS = "-"

# The only numeral with value zero.
ZERO = "NULLA"

# Multiplier of the section between the underscores.
VINCULUM_MULTIPLIER = 1000

TWELFTHS_PER_UNIT = 12

BASIC_MAX = 3999
BASIC_MIN = -BASIC_MAX

EXTENDED_INT_MAX = 3_999_999
EXTENDED_INT_MIN = -EXTENDED_INT_MAX

# Largest and smallest representable values, i.e. `3999999 + 11/12`.
EXTENDED_MAX = EXTENDED_INT_MAX + 11 / TWELFTHS_PER_UNIT
EXTENDED_MIN = -EXTENDED_MAX

# Reals are accepted up to half a twelfth beyond the representable extremes
# since they round to the nearest twelfth, see `fraction.from_double`.
EXTENDED_ROUNDING_MAX = EXTENDED_INT_MAX + 11.5 / TWELFTHS_PER_UNIT
EXTENDED_ROUNDING_MIN = -EXTENDED_ROUNDING_MAX

# Output size bounds including one terminator byte, so every produced string
# is strictly shorter than these. The longest outputs are `-MMMDCCCLXXXVIII`
# (basic), `-_MMMDCCCLXXXVIII_DCCCLXXXVIIIS.....` (extended) and
# `-3999999, -11/12` (formatted fraction).
MAX_BASIC_LENGTH = 17
MAX_EXTENDED_LENGTH = 37
MAX_OVERLINED_LENGTH = 53
MAX_FORMATTED_FRACTION_LENGTH = 17
