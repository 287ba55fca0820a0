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

r"""Converter shell between reals and Roman numerals.

Without arguments an interactive shell is started. Otherwise every argument
is run as a command, with pretty printing disabled.

Example:
--------
  python numerus/shell/shell_main.py -- MCMLI -_MCM_LI 12.5
  python numerus/shell/shell_main.py --windows_eol --logtostderr
"""

from collections.abc import Sequence
import sys

from absl import app
from absl import flags
from absl import logging
from numerus.shell import shell as shell_lib

_PRETTY = flags.DEFINE_bool(
    "pretty", True,
    "Start the interactive shell with pretty printing of numerals and values."
)

_WINDOWS_EOL = flags.DEFINE_bool(
    "windows_eol", False,
    "Separate the lines of overlined numerals with `\\r\\n`."
)

_PROMPT = flags.DEFINE_string(
    "prompt", "numerus> ",
    "Prompt of the interactive shell."
)


def main(argv: Sequence[str]) -> None:
  commands = argv[1:]
  if commands:
    logging.info("Running %d one-shot commands ...", len(commands))
    shell = shell_lib.Shell(pretty=False, windows_eol=_WINDOWS_EOL.value)
    shell.run_commands(commands)
    return

  logging.info(
      "Starting shell (pretty: %s, Windows EOL: %s) ...",
      _PRETTY.value, _WINDOWS_EOL.value
  )
  shell = shell_lib.Shell(
      pretty=_PRETTY.value, windows_eol=_WINDOWS_EOL.value
  )
  shell.repl(sys.stdin, _PROMPT.value)


def run() -> None:
  app.run(main)


if __name__ == "__main__":
  run()
