# Copyright 2026 PrivateStorage.io, LLC
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

"""
Tests for ``_mimeb64._base64``.
"""

from base64 import b64decode

from testtools import TestCase
from testtools.matchers import Equals, HasLength, IsInstance

from .._base64 import ALPHABET, DECODING_TABLE, INVALID, PAD, PADDING


class DecodingTableTests(TestCase):
    """
    Tests for ``DECODING_TABLE``.
    """

    def test_size(self):
        """
        There is one entry for every byte value.
        """
        self.assertThat(DECODING_TABLE, HasLength(256))

    def test_immutable(self):
        """
        The table is a tuple.
        """
        self.assertThat(DECODING_TABLE, IsInstance(tuple))

    def test_symbols(self):
        """
        Exactly the 64 alphabet symbols map to the values 0 through 63.
        """
        values = sorted(v for v in DECODING_TABLE if v >= 0)
        self.assertThat(values, Equals(list(range(64))))
        for value, symbol in enumerate(ALPHABET):
            self.assertThat(DECODING_TABLE[symbol], Equals(value))

    def test_standard_values(self):
        """
        Each symbol's value agrees with the standard library's decoder.
        """
        for symbol in ALPHABET:
            (decoded,) = b64decode(bytes([symbol]) + b"AA=")[:1]
            self.assertThat(DECODING_TABLE[symbol], Equals(decoded >> 2))

    def test_padding(self):
        """
        Only ``=`` maps to ``PAD``.
        """
        self.assertThat(
            [i for i, v in enumerate(DECODING_TABLE) if v == PAD],
            Equals([PADDING]),
        )
        self.assertThat(PADDING, Equals(ord("=")))

    def test_invalid(self):
        """
        Every other byte maps to ``INVALID``.
        """
        self.assertThat(
            [v for v in DECODING_TABLE if v == INVALID],
            HasLength(256 - 64 - 1),
        )

    def test_markers_out_of_range(self):
        """
        The markers cannot be confused with symbol values.
        """
        self.assertThat(
            {PAD, INVALID} & set(range(64)),
            Equals(set()),
        )
        self.assertThat(PAD == INVALID, Equals(False))
