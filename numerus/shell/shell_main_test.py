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
from unittest import mock

from absl import flags
from absl.testing import absltest
from absl.testing import flagsaver
from numerus.shell import shell as shell_lib
from numerus.shell import shell_main as lib

FLAGS = flags.FLAGS


class ShellMainTest(absltest.TestCase):

  @flagsaver.flagsaver
  def test_one_shot_commands(self) -> None:
    FLAGS.pretty = True
    with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
      lib.main(["numerus", "4000", "IS"])
    # Pretty printing is off for one-shot commands.
    self.assertEqual(stdout.getvalue(), "_IV_\n1.500000\n")

  @flagsaver.flagsaver
  def test_interactive(self) -> None:
    FLAGS.pretty = True
    FLAGS.prompt = "$ "
    with mock.patch("sys.stdin", io.StringIO("IS\nquit\n")), mock.patch(
        "sys.stdout", new_callable=io.StringIO
    ) as stdout:
      lib.main(["numerus"])
    self.assertEqual(
        stdout.getvalue(),
        shell_lib.WELCOME_TEXT + "$ 1, 1/2\n$ " + shell_lib.QUIT_TEXT
    )


if __name__ == "__main__":
  absltest.main()
