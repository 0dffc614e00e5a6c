# Copyright 2019 PrivateStorage.io, LLC
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
This module implements validators for ``attrs``-defined attributes.
"""

from typing import Callable, Optional, TypeVar

from ._types import Attribute

_T = TypeVar("_T")

ValidatorType = Callable[[object, Attribute[_T], _T], None]


def is_base64_encoded(
    b64decode: Optional[Callable[[bytes], bytes]] = None,
) -> ValidatorType[bytes]:
    """
    Return an attrs validator that verifies that the attribute is a base64
    encoded byte string.

    :param b64decode: The function to decode with.  By default, the lenient
        module-level ``decode_to_bytes``.
    """
    if b64decode is None:
        from .decoder import decode_to_bytes as b64decode

    def validate_is_base64_encoded(
        inst: object, attr: Attribute[bytes], value: bytes
    ) -> None:
        if not isinstance(value, bytes):
            raise TypeError(
                f"{attr.name!r} must be bytes, instead it was {type(value)}",
            )
        try:
            b64decode(value)
        except ValueError as e:
            raise ValueError(
                "{name!r} must be base64 encoded bytes, (got {value!r}): {reason}".format(
                    name=attr.name,
                    value=value,
                    reason=e,
                ),
            )

    return validate_is_base64_encoded


def bounded_integer(min_bound: int) -> ValidatorType[int]:
    def validator(inst: object, attr: Attribute[int], value: int) -> None:
        """
        An attrs validator which checks an integer value to make sure it
        greater than some minimum bound.
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(
                f"{attr.name} must be an integer, instead it was {type(value)}",
            )
        if not (value > min_bound):
            raise ValueError(
                f"{attr.name} must be greater than {min_bound}, instead it was {value}",
            )

        return None

    return validator


positive_integer = bounded_integer(0)
