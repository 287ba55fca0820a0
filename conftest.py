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

"""Pytest session setup for the absl-based tests."""

import sys

from absl import flags
from absl import logging
# Defines the absltest flags, e.g. `--test_tmpdir`.
from absl.testing import absltest  # pylint: disable=unused-import
import pytest


@pytest.fixture(scope='session', autouse=True)
def parse_flags() -> None:
  # The pytest arguments are not absl flags.
  flags.FLAGS(sys.argv[:1])
  # Rejected numerals are logged at debug level, keep that path exercised.
  logging.set_verbosity(logging.DEBUG)
