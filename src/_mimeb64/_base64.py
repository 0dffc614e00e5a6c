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
This module implements the Base64 alphabet and the table used to decode it.
"""

__all__ = [
    "ALPHABET",
    "PADDING",
    "PAD",
    "INVALID",
    "BYTE_MASK",
    "DECODING_TABLE",
]

from ._types import DecodingTable

# The standard alphabet.  The index of each symbol is the 6-bit value it
# encodes.
ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

PADDING = ord("=")

# Markers stored in the decoding table.  Both must be outside 0-63.
INVALID = -1
PAD = -2

# Mask which turns a possibly signed byte into a table index.
BYTE_MASK = 0xFF


def _build_decoding_table() -> DecodingTable:
    """
    Construct the table mapping every byte value to the 6-bit value it
    encodes, ``PAD`` or ``INVALID``.
    """
    table = [INVALID] * (BYTE_MASK + 1)
    for value, symbol in enumerate(ALPHABET):
        table[symbol] = value
    table[PADDING] = PAD
    return tuple(table)


DECODING_TABLE = _build_decoding_table()
