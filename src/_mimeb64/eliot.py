# Copyright 2020 PrivateStorage.io, LLC
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
Eliot field, message, and action definitions for mimeb64.
"""

from typing import Any, Callable, TypeVar, cast

from eliot import ActionType, Field
from eliot.testing import capture_logging as _capture_logging
from typing_extensions import ParamSpec

INPUT_LENGTH = Field(
    "input_length",
    int,
    "The number of bytes, including any ignored ones, given to the decoder.",
)

STRICT_PADDING = Field(
    "strict_padding",
    bool,
    "Whether padding in the first two positions of a chunk is rejected.",
)

BYTES_WRITTEN = Field(
    "bytes_written",
    int,
    "The number of decoded bytes written to the sink.",
)

SKIPPED = Field(
    "skipped",
    int,
    "The number of input bytes ignored for being outside the alphabet.",
)

DECODE = ActionType(
    "mimeb64:decode",
    [INPUT_LENGTH, STRICT_PADDING],
    [BYTES_WRITTEN, SKIPPED],
    "Some Base64 input is being decoded into a sink.",
)

T = TypeVar("T")
P = ParamSpec("P")


def capture_logging(
    assertion: Any,
    *assertionArgs: Any,
    **assertionKwargs: Any,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    A typed wrapper around ``eliot.testing.capture_logging``.
    """
    return cast(
        Callable[[Callable[P, T]], Callable[P, T]],
        _capture_logging(assertion, *assertionArgs, **assertionKwargs),
    )
