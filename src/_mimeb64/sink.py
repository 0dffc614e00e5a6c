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
Destinations for decoded bytes.

The decoder only ever calls ``write`` on its sink, in order, with the bytes
of one chunk at a time.  Buffering, flushing and closing belong to whoever
supplied the sink.
"""

__all__ = [
    "IByteSink",
    "BufferSink",
    "CallableSink",
    "WriterSink",
    "as_sink",
]

from typing import Any, Callable, Protocol

from attrs import Factory, define, field
from zope.interface import Interface, implementer


class IByteSink(Interface):
    """
    An ``IByteSink`` accepts decoded bytes.
    """

    def write(data: bytes) -> object:
        """
        Accept some more bytes.

        :param data: The bytes to accept.  Successive calls deliver bytes in
            the order they were decoded.

        :raise: Any exception to signal that the bytes could not be accepted.
            The decoder propagates it unchanged.
        """


class _Writer(Protocol):
    def write(self, data: bytes) -> Any:
        ...


@implementer(IByteSink)
@define
class BufferSink(object):
    """
    Collect everything written in memory.
    """

    _buffer: bytearray = field(default=Factory(bytearray))

    def write(self, data: bytes) -> None:
        self._buffer.extend(data)

    def getvalue(self) -> bytes:
        """
        :return: Everything written so far.
        """
        return bytes(self._buffer)


@implementer(IByteSink)
@define
class WriterSink(object):
    """
    Adapt an object with a ``write`` method, such as a file opened for binary
    writing or ``io.BytesIO``.
    """

    _writer: _Writer

    def write(self, data: bytes) -> None:
        self._writer.write(data)


@implementer(IByteSink)
@define
class CallableSink(object):
    """
    Adapt a function which accepts one ``bytes`` argument.
    """

    _f: Callable[[bytes], object]

    def write(self, data: bytes) -> None:
        self._f(data)


def as_sink(obj: object) -> IByteSink:
    """
    Get an ``IByteSink`` for ``obj``.

    :param obj: An ``IByteSink`` provider, an object with a ``write`` method,
        or a callable accepting ``bytes``.

    :raise TypeError: If ``obj`` is none of these.
    """
    if IByteSink.providedBy(obj):
        return obj
    if callable(getattr(obj, "write", None)):
        return WriterSink(obj)
    if callable(obj):
        return CallableSink(obj)
    raise TypeError(f"Cannot write decoded bytes to {obj!r}")
