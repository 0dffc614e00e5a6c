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

__all__ = [
    "__version__",
    "NAME",
    "Base64Decoder",
    "IncorrectPadding",
    "InputTooLong",
    "InvalidBase64",
    "TruncatedInput",
    "decode",
    "decode_to_bytes",
]

from ._version import __version__

# The identifier for this library.  This is also the name of the
# configuration section it reads options from.
NAME = "mimeb64"

from .decoder import (  # noqa: E402
    Base64Decoder,
    IncorrectPadding,
    InputTooLong,
    InvalidBase64,
    TruncatedInput,
    decode,
    decode_to_bytes,
)
