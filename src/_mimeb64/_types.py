# Copyright 2022 PrivateStorage.io, LLC
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
Re-usable type definitions for mimeb64.
"""

from typing import TYPE_CHECKING, Generic, Sequence, TypedDict, TypeVar, Union

from attrs import Attribute as _Attribute

_T = TypeVar("_T")

if TYPE_CHECKING:
    Attribute = _Attribute
else:

    class Attribute(_Attribute, Generic[_T]):
        pass


# One entry per possible byte value.  Each entry is a 6-bit value or one of
# the negative markers from ``_base64``.
DecodingTable = tuple[int, ...]

# Anything ``decode`` will accept as input.  Plain integer sequences may hold
# signed byte values.
EncodedData = Union[bytes, bytearray, memoryview, Sequence[int]]

# The contents of the [mimeb64] section of a configuration file.
DecoderConfig = TypedDict(
    "DecoderConfig",
    {
        "strict-padding": str,
        "max-input-length": str,
    },
    total=False,
)
