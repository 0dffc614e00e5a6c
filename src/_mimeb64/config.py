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
Helpers for reading decoder options from an ini-style configuration.

Options live in a section named after the library::

    [mimeb64]
    strict-padding = true
    max-input-length = 65536
"""

__all__ = [
    "SECTION_NAME",
    "ConfigSource",
    "EmptyConfig",
    "IniConfig",
    "config_from_string",
    "config_string_from_section",
    "decoder_from_config",
    "empty_config",
]

from configparser import ConfigParser
from typing import Optional, Protocol

from attrs import define
from twisted.logger import Logger

from . import NAME
from ._types import DecoderConfig
from .decoder import Base64Decoder

SECTION_NAME = NAME

_log = Logger()

_MISSING = object()


class ConfigSource(Protocol):
    """
    A source of configuration values.
    """

    def get_config(
        self,
        section: str,
        option: str,
        default: object = _MISSING,
        boolean: bool = False,
    ) -> object:
        """
        Read an option from a section of the configuration.

        :param boolean: If ``True``, interpret the value as a boolean.

        :return: The value, or ``default`` if the option is not present.
        """


@define
class EmptyConfig:
    """
    A configuration with no options set.
    """

    def get_config(self, section, option, default=_MISSING, boolean=False):
        if default is _MISSING:
            raise KeyError((section, option))
        return default


empty_config = EmptyConfig()


@define
class IniConfig:
    """
    A configuration read from ini-style text.
    """

    _parser: ConfigParser

    def get_config(self, section, option, default=_MISSING, boolean=False):
        if not self._parser.has_option(section, option):
            if default is _MISSING:
                raise KeyError((section, option))
            return default
        if boolean:
            return self._parser.getboolean(section, option)
        return self._parser.get(section, option)


def config_from_string(text: str) -> IniConfig:
    """
    Parse ini-style text into a configuration.
    """
    parser = ConfigParser()
    parser.read_string(text)
    return IniConfig(parser)


def _config_quote(text: str) -> str:
    """
    Quote **%** so ``ConfigParser`` interpolation leaves it alone.
    """
    return text.replace("%", "%%")


def config_string_from_section(section: DecoderConfig) -> str:
    """
    Get the ini-syntax text which holds the given decoder options.
    """
    return "[{name}]\n{items}\n".format(
        name=SECTION_NAME,
        items="\n".join(
            "{key} = {value}".format(key=key, value=_config_quote(value))
            for (key, value) in section.items()
        ),
    )


def _read_length(cfg: ConfigSource, option: str) -> Optional[int]:
    value = cfg.get_config(SECTION_NAME, option, default=None)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{option} must be an integer, instead it was {value!r}")


def decoder_from_config(cfg: ConfigSource) -> Base64Decoder:
    """
    Build a decoder using the options found in ``cfg``.

    Missing options take their defaults: lenient padding and no input length
    limit.
    """
    strict_padding = cfg.get_config(
        SECTION_NAME,
        "strict-padding",
        default=False,
        boolean=True,
    )
    max_input_length = _read_length(cfg, "max-input-length")
    decoder = Base64Decoder(
        strict_padding=strict_padding,
        max_input_length=max_input_length,
    )
    _log.info(
        "Configured Base64 decoder (strict-padding={strict}, max-input-length={maximum})",
        strict=decoder.strict_padding,
        maximum=decoder.max_input_length,
    )
    return decoder
