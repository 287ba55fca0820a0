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

"""Error kinds reported by the numeral conversions."""

import enum

from absl import logging


class ErrorCode(enum.Enum):
  """Kind of failure of a conversion, analysis or formatting call."""
  # Missing inputs.
  NULL_NUMERAL = "null_numeral"
  NULL_FRACTION = "null_fraction"
  NULL_INT = "null_int"
  NULL_DOUBLE = "null_double"

  # Values that have no numeral.
  BASIC_VALUE_OUT_OF_RANGE = "basic_value_out_of_range"
  EXTENDED_VALUE_OUT_OF_RANGE = "extended_value_out_of_range"
  NOT_FINITE = "not_finite"

  # Structural problems, detected without following the grammar.
  EMPTY_NUMERAL = "empty_numeral"
  TOO_LONG_BASIC_NUMERAL = "too_long_basic_numeral"
  TOO_LONG_EXTENDED_NUMERAL = "too_long_extended_numeral"
  ILLEGAL_BASIC_CHARACTER = "illegal_basic_character"
  ILLEGAL_EXTENDED_CHARACTER = "illegal_extended_character"

  # Syntax errors.
  ILLEGAL_CHAR_SEQUENCE = "illegal_char_sequence"
  TOO_MANY_REPEATED_CHARS = "too_many_repeated_chars"
  MISSING_SECOND_UNDERSCORE = "missing_second_underscore"
  TOO_MANY_UNDERSCORES = "too_many_underscores"
  ILLEGAL_FIRST_UNDERSCORE_POSITION = "illegal_first_underscore_position"
  NON_TERMINATED_VINCULUM = "non_terminated_vinculum"
  FRACTIONAL_CHARS_BETWEEN_UNDERSCORES = "fractional_chars_between_underscores"
  FRACTIONAL_CHARS_NOT_AT_END = "fractional_chars_not_at_end"
  ILLEGAL_MINUS_POSITION = "illegal_minus_position"
  M_AFTER_UNDERSCORES = "m_after_underscores"
  UNEXPECTED_TWELFTHS = "unexpected_twelfths"


_EXPLANATIONS = {
    ErrorCode.NULL_NUMERAL:
        "The numeral is missing (None).",
    ErrorCode.NULL_FRACTION:
        "The fraction is missing (None).",
    ErrorCode.NULL_INT:
        "The integer value is missing (None).",
    ErrorCode.NULL_DOUBLE:
        "The real value is missing (None).",
    ErrorCode.BASIC_VALUE_OUT_OF_RANGE:
        "The value is outside the range of basic numerals [-3999, 3999].",
    ErrorCode.EXTENDED_VALUE_OUT_OF_RANGE:
        "The value is outside the range of extended numerals "
        "[-3999999 - 11/12, 3999999 + 11/12].",
    ErrorCode.NOT_FINITE:
        "The value is NaN or infinite and has no numeral.",
    ErrorCode.EMPTY_NUMERAL:
        "The numeral is empty or filled with whitespace.",
    ErrorCode.TOO_LONG_BASIC_NUMERAL:
        "The numeral is too long to be a basic numeral.",
    ErrorCode.TOO_LONG_EXTENDED_NUMERAL:
        "The numeral is too long to be an extended numeral.",
    ErrorCode.ILLEGAL_BASIC_CHARACTER:
        "The numeral contains a character not allowed in basic numerals. "
        "Only \"MDCLXVI-\" are allowed.",
    ErrorCode.ILLEGAL_EXTENDED_CHARACTER:
        "The numeral contains a character not allowed in extended numerals. "
        "Only \"MDCLXVIS._-\" are allowed.",
    ErrorCode.ILLEGAL_CHAR_SEQUENCE:
        "The numeral contains mispositioned characters.",
    ErrorCode.TOO_MANY_REPEATED_CHARS:
        "The numeral contains too many consecutive repetitions of a "
        "repeatable character.",
    ErrorCode.MISSING_SECOND_UNDERSCORE:
        "The numeral contains one underscore but not the second one.",
    ErrorCode.TOO_MANY_UNDERSCORES:
        "The numeral contains an underscore after the second one.",
    ErrorCode.ILLEGAL_FIRST_UNDERSCORE_POSITION:
        "The first underscore is not at the start of the numeral "
        "(after the optional minus).",
    ErrorCode.NON_TERMINATED_VINCULUM:
        "The vinculum is opened but never closed.",
    ErrorCode.FRACTIONAL_CHARS_BETWEEN_UNDERSCORES:
        "The numeral contains twelfths characters \"S.\" between the "
        "underscores.",
    ErrorCode.FRACTIONAL_CHARS_NOT_AT_END:
        "The twelfths characters \"S.\" are followed by integer characters.",
    ErrorCode.ILLEGAL_MINUS_POSITION:
        "The numeral contains a misplaced minus or more than one.",
    ErrorCode.M_AFTER_UNDERSCORES:
        "The numeral contains an 'M' after the vinculum.",
    ErrorCode.UNEXPECTED_TWELFTHS:
        "The numeral has a fractional part where an integer was expected.",
}


def explain_error(code: ErrorCode) -> str:
  """Returns a human-readable description of the error kind."""
  return _EXPLANATIONS[code]


class NumeralError(ValueError):
  """Failure of a numeral conversion.

  Attributes:
    code: Kind of the failure.
    numeral: Offending numeral, if the failure concerns one.
    position: Index in the head-trimmed numeral where the failure was
      detected, if known.
  """

  def __init__(
      self,
      code: ErrorCode,
      numeral: str | None = None,
      position: int | None = None
  ) -> None:
    super().__init__(explain_error(code))
    self.code = code
    self.numeral = numeral
    self.position = position


def fail(
    code: ErrorCode, numeral: str | None = None, position: int | None = None
) -> NumeralError:
  """Builds the error and logs the rejection. Meant to be raised."""
  if numeral is None:
    logging.vlog(1, "Rejected: %s", code.value)
  else:
    logging.vlog(
        1, "Rejected `%s` at position %s: %s", numeral, position, code.value
    )
  return NumeralError(code, numeral=numeral, position=position)
