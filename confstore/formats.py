"""Registry mapping file extensions to encode/decode function pairs."""

from __future__ import annotations

import json
import logging
import tomllib
from dataclasses import dataclass
from typing import Any, Callable, Dict

import tomli_w
import yaml

from .config import StoreConfig
from .errors import UnknownFormatError

Encoder = Callable[[Any], bytes]
Decoder = Callable[[bytes], Any]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Codec:
    """Turns plain Python data into file bytes and back."""

    encode: Encoder
    decode: Decoder


def json_codec(*, indent: int | None = 2, encoding: str = "utf-8") -> Codec:
    def encode(data: Any) -> bytes:
        return json.dumps(data, indent=indent, ensure_ascii=False).encode(encoding)

    def decode(raw: bytes) -> Any:
        return json.loads(raw.decode(encoding))

    return Codec(encode, decode)


def yaml_codec(*, sort_keys: bool = False, encoding: str = "utf-8") -> Codec:
    def encode(data: Any) -> bytes:
        text = yaml.safe_dump(data, sort_keys=sort_keys, allow_unicode=True)
        return text.encode(encoding)

    def decode(raw: bytes) -> Any:
        data = yaml.safe_load(raw.decode(encoding))
        return {} if data is None else data

    return Codec(encode, decode)


def toml_codec(*, encoding: str = "utf-8") -> Codec:
    def encode(data: Any) -> bytes:
        if not isinstance(data, dict):
            raise TypeError(f"TOML documents must be tables, got {type(data).__name__}")
        return tomli_w.dumps(_drop_none(data)).encode(encoding)

    def decode(raw: bytes) -> Any:
        return tomllib.loads(raw.decode(encoding))

    return Codec(encode, decode)


def _drop_none(value: Any) -> Any:
    # TOML has no null value.
    if isinstance(value, dict):
        return {key: _drop_none(item) for key, item in value.items() if item is not None}
    if isinstance(value, list):
        return [_drop_none(item) for item in value]
    return value


class FormatRegistry:
    """Tracks the codec to use for each file extension.

    Extensions are matched exactly and case-sensitively, without the leading
    dot. Registering an extension twice replaces the earlier codec.
    """

    def __init__(self, codecs: Dict[str, Codec] | None = None) -> None:
        self._codecs: Dict[str, Codec] = dict(codecs or {})

    @classmethod
    def with_defaults(cls, config: StoreConfig | None = None) -> FormatRegistry:
        """Return a registry seeded with the JSON, YAML and TOML codecs."""
        encoding = config.encoding if config else "utf-8"
        indent = config.json_indent if config else 2
        sort_keys = config.yaml_sort_keys if config else False
        yaml_format = yaml_codec(sort_keys=sort_keys, encoding=encoding)
        return cls(
            {
                "json": json_codec(indent=indent, encoding=encoding),
                "yaml": yaml_format,
                "yml": yaml_format,
                "toml": toml_codec(encoding=encoding),
            }
        )

    def register(self, extension: str, encode: Encoder, decode: Decoder) -> None:
        """Register an encode/decode pair for ``extension``."""
        self.register_codec(extension, Codec(encode, decode))

    def register_codec(self, extension: str, codec: Codec) -> None:
        if extension in self._codecs:
            logger.debug("Replacing codec for extension %r", extension)
        else:
            logger.debug("Registering codec for extension %r", extension)
        self._codecs[extension] = codec

    def unregister(self, extension: str) -> None:
        self._codecs.pop(extension, None)

    def lookup(self, extension: str) -> Codec | None:
        if not extension:
            return None
        return self._codecs.get(extension)

    def get(self, extension: str) -> Codec:
        codec = self.lookup(extension)
        if codec is None:
            raise UnknownFormatError(extension, self.extensions())
        return codec

    def extensions(self) -> list[str]:
        return sorted(self._codecs)

    def copy(self) -> FormatRegistry:
        return FormatRegistry(self._codecs)

    def __contains__(self, extension: object) -> bool:
        return isinstance(extension, str) and self.lookup(extension) is not None
