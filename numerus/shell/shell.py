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

"""Interactive shell converting values to numerals and back.

Every line is reduced to its first word, lower-cased. The word is either one
of the commands listed in `HELP_TEXT` or something to convert: reals become
numerals, numerals become reals.
"""

from collections.abc import Iterable
import re
import sys
from typing import TextIO

from absl import logging
from numerus.roman import errors
from numerus.roman import formatting
from numerus.roman import numeral_to_value
from numerus.roman import value_to_numeral

WELCOME_TEXT = (
    "+-----------------+\n"
    "|  N V M E R V S  |\n"
    "+-----------------+\n"
)

INFO_TEXT = (
    "Numerus, library for conversion and manipulation of roman numerals.\n"
    "Command Line Interface.\n"
    "This software is subject to the terms of the Apache License 2.0.\n"
)

HELP_TEXT = (
    "To convert an (arabic) real to a roman numeral or vice-versa,\n"
    "just type it in the shell and press enter.\n"
    "Other Numerus commands are:\n\n"
    "pretty        switches on/off the pretty printing of long roman numerals\n"
    "              (with overlined notation instead of underscore notation)\n"
    "              and the pretty printing of values as integer and fractional"
    " part\n"
    "?, help       shows this help text\n"
    "info, about   shows version, credits, licence of Numerus\n"
    "exit, quit    ends this shell\n\n"
    "We also have: moo, ping, ave.\n"
)

ASCII_TEXT = (
    " _   _  __     __  __  __  _____  ____   __     __  ____ \n"
    "| \\ | | \\ \\   / / |  \\/  || ____||  _ \\  \\ \\   / / / ___|\n"
    "|  \\| |  \\ \\ / /  | |\\/| ||  _|  | |_) |  \\ \\ / /  \\___ \\\n"
    "| |\\  |   \\ V /   | |  | || |___ |  _ <    \\ V /    ___) |\n"
    "|_| \\_|    \\_/    |_|  |_||_____||_| \\_\\    \\_/    |____/\n"
)

MOO_TEXT = "This is not an easter egg. Try `ascii`.\n"
PING_TEXT = "Pong.\n"
AVE_TEXT = "Ave tibi!\n"
QUIT_TEXT = "Vale!\n"
UNKNOWN_COMMAND_TEXT = "Unknown command or wrong roman numeral syntax:"
PRETTY_ON_TEXT = "Pretty printing is enabled.\n"
PRETTY_OFF_TEXT = "Pretty printing is disabled.\n"

# Any spelling of a zero real, e.g. `-000`, `0.00` or `0,0`.
_ZERO_REAL = re.compile(r"-?(0+([.,]0+)?|0*[.,]0+)")

_STATIC_REPLIES = {
    "?": HELP_TEXT,
    "help": HELP_TEXT,
    "info": INFO_TEXT,
    "about": INFO_TEXT,
    "ascii": ASCII_TEXT,
    "moo": MOO_TEXT,
    "ping": PING_TEXT,
    "ave": AVE_TEXT,
}


def first_word(line: str) -> str:
  """Returns the first whitespace-delimited word of the line, lower-cased."""
  words = line.split()
  return words[0].lower() if words else ""


class Shell:
  """Read-eval-print loop of the converter.

  Attributes:
    pretty: Whether numerals are overlined and values written as fractions.
    windows_eol: Whether overlined numerals use `\\r\\n` line breaks.
  """

  def __init__(
      self,
      output: TextIO | None = None,
      pretty: bool = True,
      windows_eol: bool = False,
  ) -> None:
    self._output = output if output is not None else sys.stdout
    self.pretty = pretty
    self.windows_eol = windows_eol

  def _write(self, text: str) -> None:
    self._output.write(text)

  def _write_numeral(self, value: float) -> None:
    numeral = value_to_numeral.encode_double(value)
    if self.pretty:
      numeral = formatting.overline(numeral, self.windows_eol)
    self._write(f"{numeral}\n")

  def _write_value(self, numeral: str) -> None:
    if self.pretty:
      value = formatting.format_fraction(numeral_to_value.parse(numeral))
    else:
      value = f"{numeral_to_value.parse_to_double(numeral):f}"
    self._write(f"{value}\n")

  def convert(self, word: str) -> None:
    """Converts a real to a numeral or a numeral to a real and writes it.

    Args:
      word: Real, e.g. `12.5`, or numeral, e.g. `xii`.
    """
    if _ZERO_REAL.fullmatch(word):
      self._write_numeral(0.0)
      return
    try:
      value = float(word)
    except ValueError:
      value = None
    if value is not None:
      try:
        self._write_numeral(value)
      except errors.NumeralError as e:
        self._write(f"{e}\n")
      return
    try:
      self._write_value(word)
    except errors.NumeralError as e:
      logging.debug("Cannot convert %r: %s", word, e.code)
      self._write(f"{UNKNOWN_COMMAND_TEXT} -> {e}\n")

  def execute(self, line: str) -> bool:
    """Runs the command on the line.

    Args:
      line: Raw input line.

    Returns:
      False if the shell should stop, True otherwise.
    """
    command = first_word(line)
    if command in _STATIC_REPLIES:
      self._write(_STATIC_REPLIES[command])
    elif command == "pretty":
      self.pretty = not self.pretty
      self._write(PRETTY_ON_TEXT if self.pretty else PRETTY_OFF_TEXT)
    elif command in ("exit", "quit"):
      self._write(QUIT_TEXT)
      return False
    elif command:
      self.convert(command)
    return True

  def run_commands(self, commands: Iterable[str]) -> None:
    """Runs one-shot commands, ignoring requests to quit."""
    for command in commands:
      self.execute(command)

  def repl(self, lines: Iterable[str], prompt: str) -> None:
    """Prompts for lines until the input ends or the user quits."""
    self._write(WELCOME_TEXT)
    self._write(prompt)
    self._output.flush()
    for line in lines:
      if not self.execute(line):
        return
      self._write(prompt)
      self._output.flush()
