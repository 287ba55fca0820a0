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

import io

from absl.testing import absltest
from absl.testing import parameterized
from numerus.roman import errors
from numerus.shell import shell as lib


class ShellTest(parameterized.TestCase):

  def _make_shell(self, pretty: bool) -> tuple[lib.Shell, io.StringIO]:
    output = io.StringIO()
    return lib.Shell(output=output, pretty=pretty), output

  @parameterized.parameters(
      ("", ""),
      ("   ", ""),
      ("ping", lib.PING_TEXT),
      ("  PING  extra words", lib.PING_TEXT),
      ("?", lib.HELP_TEXT),
      ("help", lib.HELP_TEXT),
      ("info", lib.INFO_TEXT),
      ("about", lib.INFO_TEXT),
      ("ascii", lib.ASCII_TEXT),
      ("moo", lib.MOO_TEXT),
      ("ave", lib.AVE_TEXT),
  )
  def test_static_commands(self, line: str, expected: str) -> None:
    shell, output = self._make_shell(pretty=True)
    self.assertTrue(shell.execute(line))
    self.assertEqual(output.getvalue(), expected)

  @parameterized.parameters("quit", "exit", "QUIT\n")
  def test_quit(self, line: str) -> None:
    shell, output = self._make_shell(pretty=True)
    self.assertFalse(shell.execute(line))
    self.assertEqual(output.getvalue(), lib.QUIT_TEXT)

  def test_pretty_toggle(self) -> None:
    shell, output = self._make_shell(pretty=True)
    shell.execute("pretty")
    self.assertFalse(shell.pretty)
    shell.execute("pretty")
    self.assertTrue(shell.pretty)
    self.assertEqual(
        output.getvalue(), lib.PRETTY_OFF_TEXT + lib.PRETTY_ON_TEXT
    )

  @parameterized.parameters(
      ("1951", False, "MCMLI\n"),
      ("-1.5", False, "-IS\n"),
      ("4000.5", False, "_IV_S\n"),
      ("4000.5", True, "__\nIVS\n"),
      ("MCMLI", False, "1951.000000\n"),
      ("-is", False, "-1.500000\n"),
      ("is", True, "1, 1/2\n"),
      ("s..", True, "2/3\n"),
      ("0", True, "NULLA\n"),
      ("-000", False, "NULLA\n"),
      ("0,00", False, "NULLA\n"),
      (".0", False, "NULLA\n"),
      ("nulla", False, "0.000000\n"),
  )
  def test_convert(self, line: str, pretty: bool, expected: str) -> None:
    shell, output = self._make_shell(pretty=pretty)
    self.assertTrue(shell.execute(line))
    self.assertEqual(output.getvalue(), expected)

  def test_convert_wrong_numeral(self) -> None:
    shell, output = self._make_shell(pretty=False)
    shell.execute("MMMM")
    explanation = errors.explain_error(errors.ErrorCode.TOO_MANY_REPEATED_CHARS)
    self.assertEqual(
        output.getvalue(),
        f"{lib.UNKNOWN_COMMAND_TEXT} -> {explanation}\n"
    )

  def test_convert_wrong_value(self) -> None:
    shell, output = self._make_shell(pretty=False)
    shell.execute("5000000")
    explanation = errors.explain_error(
        errors.ErrorCode.EXTENDED_VALUE_OUT_OF_RANGE
    )
    self.assertEqual(output.getvalue(), f"{explanation}\n")

  def test_run_commands(self) -> None:
    shell, output = self._make_shell(pretty=False)
    shell.run_commands(["MCMLI", "quit", "7"])
    self.assertEqual(
        output.getvalue(), "1951.000000\n" + lib.QUIT_TEXT + "VII\n"
    )

  def test_repl(self) -> None:
    shell, output = self._make_shell(pretty=True)
    shell.repl(["ping\n", "quit\n", "ave\n"], prompt="> ")
    self.assertEqual(
        output.getvalue(),
        lib.WELCOME_TEXT + "> " + lib.PING_TEXT + "> " + lib.QUIT_TEXT
    )

  def test_repl_end_of_input(self) -> None:
    shell, output = self._make_shell(pretty=False)
    shell.repl(["XII\n"], prompt="> ")
    self.assertEqual(
        output.getvalue(), lib.WELCOME_TEXT + "> 12.000000\n> "
    )

  def test_first_word(self) -> None:
    self.assertEqual(lib.first_word("  MCM  LI\n"), "mcm")
    self.assertEqual(lib.first_word("\t\n"), "")


if __name__ == "__main__":
  absltest.main()
