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
Sinks and other helpers shared by the tests.
"""

from attrs import Factory, define, field
from zope.interface import implementer

from ..sink import IByteSink


class SinkWriteFailed(Exception):
    """
    A ``FailingSink`` refused a write.
    """


@implementer(IByteSink)
@define
class RecordingSink(object):
    """
    Remember every write, in order, without joining them.
    """

    writes: list[bytes] = field(default=Factory(list))

    def write(self, data: bytes) -> None:
        self.writes.append(bytes(data))

    def getvalue(self) -> bytes:
        return b"".join(self.writes)


@implementer(IByteSink)
@define
class FailingSink(object):
    """
    Accept a number of writes and then fail every one after that.

    :ivar accept: How many writes succeed before the first failure.
    """

    accept: int
    writes: list[bytes] = field(default=Factory(list))

    def write(self, data: bytes) -> None:
        if len(self.writes) >= self.accept:
            raise SinkWriteFailed(data)
        self.writes.append(bytes(data))

    def getvalue(self) -> bytes:
        return b"".join(self.writes)
