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
This module implements decoding of Base64 text into binary.

Decoding is tolerant of noise and strict about structure.  Bytes outside the
alphabet are skipped wherever they appear, which lets line-wrapped or
indented input through unchanged.  The symbols which remain must form whole
chunks of four with padding only at the end of a chunk.
"""

__all__ = [
    "Base64Decoder",
    "IncorrectPadding",
    "InputTooLong",
    "InvalidBase64",
    "TruncatedInput",
    "decode",
    "decode_to_bytes",
]

from binascii import Error
from typing import Optional

from attrs import define, field, frozen, validators
from eliot import register_exception_extractor

from ._base64 import BYTE_MASK, DECODING_TABLE, INVALID, PAD
from ._types import EncodedData
from .eliot import DECODE
from .sink import BufferSink, as_sink
from .validators import positive_integer

# Four 6-bit symbols make three 8-bit bytes.
SYMBOLS_PER_CHUNK = 4


class InvalidBase64(Error):
    """
    The input is not valid Base64.

    This is a ``binascii.Error`` so code prepared for the errors raised by the
    standard library's decoder is prepared for these as well.
    """


@define(auto_exc=False, eq=False)
class IncorrectPadding(InvalidBase64):
    """
    A chunk has padding followed by a non-padding symbol.

    :ivar chunk_index: The zero-based position of the offending chunk among
        all chunks of the input.
    """

    chunk_index: int

    def __str__(self) -> str:
        return f"Invalid Base64 input: incorrect padding in chunk {self.chunk_index}"


@define(auto_exc=False, eq=False)
class TruncatedInput(InvalidBase64):
    """
    The input ended part way through a chunk.

    :ivar leftover: The number of symbols (1, 2 or 3) in the final, incomplete
        chunk.
    """

    leftover: int

    def __str__(self) -> str:
        return f"Invalid Base64 input: truncated with {self.leftover} symbol(s) left over"


@define(auto_exc=False, eq=False)
class InputTooLong(InvalidBase64):
    """
    The input is longer than the decoder was configured to accept.
    """

    length: int
    maximum: int

    def __str__(self) -> str:
        return f"Invalid Base64 input: {self.length} bytes exceeds limit of {self.maximum}"


register_exception_extractor(
    IncorrectPadding, lambda e: {"chunk_index": e.chunk_index}
)
register_exception_extractor(TruncatedInput, lambda e: {"leftover": e.leftover})
register_exception_extractor(
    InputTooLong, lambda e: {"length": e.length, "maximum": e.maximum}
)


@frozen
class Base64Decoder(object):
    """
    Decode standard-alphabet Base64.

    :ivar strict_padding: If ``True``, padding in the first or second position
        of a chunk is rejected.  Otherwise the padding marker takes part in
        the arithmetic for the first output byte, as it always has.

    :ivar max_input_length: The greatest number of input bytes, counting
        ignored ones, to accept or ``None`` for no limit.
    """

    strict_padding: bool = field(
        default=False,
        validator=validators.instance_of(bool),
    )
    max_input_length: Optional[int] = field(
        default=None,
        validator=validators.optional(positive_integer),
    )

    def decode(self, data: EncodedData, sink: object) -> int:
        """
        Decode ``data`` and write the result to ``sink``.

        :param data: The encoded bytes.  Anything outside the alphabet is
            skipped.

        :param sink: Where to write decoded bytes.  See ``as_sink``.

        :raise IncorrectPadding: If a chunk is padded anywhere but its end.

        :raise TruncatedInput: If the symbols do not form whole chunks.

        :raise InputTooLong: If ``data`` is longer than ``max_input_length``.

        :return: The number of bytes written.  When an exception is raised
            instead, the bytes of every chunk before the bad one have already
            been written.
        """
        if isinstance(data, str):
            raise TypeError(
                f"Base64 input must be bytes-like, not {type(data).__name__}",
            )
        out = as_sink(sink)
        with DECODE(
            input_length=len(data),
            strict_padding=self.strict_padding,
        ) as action:
            if (
                self.max_input_length is not None
                and len(data) > self.max_input_length
            ):
                raise InputTooLong(len(data), self.max_input_length)

            written = 0
            skipped = 0
            chunk_index = 0
            cache: list[int] = []
            for octet in data:
                value = DECODING_TABLE[octet & BYTE_MASK]
                if value == INVALID:
                    skipped += 1
                    continue
                cache.append(value)
                if len(cache) == SYMBOLS_PER_CHUNK:
                    chunk = self._reassemble(cache, chunk_index)
                    out.write(chunk)
                    written += len(chunk)
                    chunk_index += 1
                    cache = []

            if cache:
                raise TruncatedInput(len(cache))

            action.add_success_fields(bytes_written=written, skipped=skipped)
        return written

    def decode_to_bytes(self, data: EncodedData) -> bytes:
        """
        Decode ``data`` in memory.

        :return: The decoded bytes.
        """
        sink = BufferSink()
        self.decode(data, sink)
        return sink.getvalue()

    def _reassemble(self, cache: list[int], chunk_index: int) -> bytes:
        """
        Turn four symbol values into between one and three bytes.
        """
        b0, b1, b2, b3 = cache
        if self.strict_padding and (b0 == PAD or b1 == PAD):
            raise IncorrectPadding(chunk_index)

        first = ((b0 << 2) | (b1 >> 4)) & BYTE_MASK
        if b2 == PAD:
            if b3 != PAD:
                raise IncorrectPadding(chunk_index)
            return bytes([first])

        second = ((b1 << 4) | (b2 >> 2)) & BYTE_MASK
        if b3 == PAD:
            return bytes([first, second])

        third = ((b2 << 6) | b3) & BYTE_MASK
        return bytes([first, second, third])


_default_decoder = Base64Decoder()


def decode(data: EncodedData, sink: object) -> int:
    """
    Decode ``data`` to ``sink`` with a lenient ``Base64Decoder``.

    See ``Base64Decoder.decode``.
    """
    return _default_decoder.decode(data, sink)


def decode_to_bytes(data: EncodedData) -> bytes:
    """
    Decode ``data`` in memory with a lenient ``Base64Decoder``.
    """
    return _default_decoder.decode_to_bytes(data)
