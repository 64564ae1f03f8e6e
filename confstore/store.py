"""Load and save settings values under an application's config directory."""

from __future__ import annotations

import logging
from pathlib import Path, PurePath
from typing import Any, Callable, TypeVar

from pydantic import TypeAdapter

from .config import StoreConfig
from .errors import CodecError, StoreError
from .formats import Codec, Decoder, Encoder, FormatRegistry
from .paths import extension_of, resolve_app_dir, resolve_path

T = TypeVar("T")
RelativePath = str | PurePath

logger = logging.getLogger(__name__)


class ConfigStore:
    """Handle bound to one application name and its format registry.

    Files live at ``<app dir>/<relative path>``. The codec is chosen from the
    extension of the relative path unless one is passed explicitly to
    :meth:`load_with` or :meth:`save_with`.
    """

    def __init__(
        self,
        config: StoreConfig | str,
        *,
        registry: FormatRegistry | None = None,
    ) -> None:
        if isinstance(config, str):
            config = StoreConfig.for_application(config)
        self._config = config
        self._registry = registry if registry is not None else FormatRegistry.with_defaults(config)

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def application_name(self) -> str:
        return self._config.application_name

    @property
    def registry(self) -> FormatRegistry:
        return self._registry

    def register(self, extension: str, encode: Encoder, decode: Decoder) -> None:
        """Register a custom format for this store only."""
        self._registry.register(extension, encode, decode)

    def app_dir(self) -> Path:
        return resolve_app_dir(self.application_name)

    def path(self, relative_path: RelativePath) -> Path:
        return resolve_path(self.application_name, relative_path)

    def exists(self, relative_path: RelativePath) -> bool:
        return self.path(relative_path).is_file()

    def load(
        self,
        relative_path: RelativePath,
        model_type: type[T],
        *,
        default: Callable[[], T] | None = None,
    ) -> T:
        """Read ``relative_path`` into an instance of ``model_type``.

        When the file does not exist yet, a default value is built with
        ``default()`` (or ``model_type()``), written to disk and returned.
        """
        codec = self._registry.get(extension_of(relative_path))
        return self._load(codec, relative_path, model_type, default)

    def load_with(
        self,
        codec: Codec,
        relative_path: RelativePath,
        model_type: type[T],
        *,
        default: Callable[[], T] | None = None,
    ) -> T:
        return self._load(codec, relative_path, model_type, default)

    def save(
        self,
        relative_path: RelativePath,
        value: Any,
        *,
        model_type: type | None = None,
    ) -> Path:
        """Write ``value`` to ``relative_path`` and return the absolute path."""
        codec = self._registry.get(extension_of(relative_path))
        return self._save(codec, relative_path, value, model_type)

    def save_with(
        self,
        codec: Codec,
        relative_path: RelativePath,
        value: Any,
        *,
        model_type: type | None = None,
    ) -> Path:
        return self._save(codec, relative_path, value, model_type)

    def _load(
        self,
        codec: Codec,
        relative_path: RelativePath,
        model_type: type[T],
        default: Callable[[], T] | None,
    ) -> T:
        target = self.path(relative_path)
        try:
            raw = target.read_bytes()
        except FileNotFoundError as missing:
            logger.debug("Creating default settings file %s", target)
            try:
                value = self._build_default(relative_path, model_type, default)
                self._save(codec, relative_path, value, model_type)
            except (StoreError, OSError) as exc:
                logger.warning("Could not create default settings file %s: %s", target, exc)
                raise missing from exc
            return value

        logger.debug("Loaded %d bytes from %s", len(raw), target)
        try:
            return TypeAdapter(model_type).validate_python(codec.decode(raw))
        except Exception as exc:
            raise CodecError(relative_path, f"cannot decode settings: {exc}") from exc

    @staticmethod
    def _build_default(
        relative_path: RelativePath,
        model_type: type[T],
        default: Callable[[], T] | None,
    ) -> T:
        try:
            return default() if default is not None else model_type()
        except Exception as exc:
            raise CodecError(relative_path, f"cannot build default settings: {exc}") from exc

    def _save(
        self,
        codec: Codec,
        relative_path: RelativePath,
        value: Any,
        model_type: type | None,
    ) -> Path:
        try:
            adapter = TypeAdapter(model_type if model_type is not None else type(value))
            payload = codec.encode(adapter.dump_python(value, mode="json"))
        except Exception as exc:
            raise CodecError(relative_path, f"cannot encode settings: {exc}") from exc

        target = self.path(relative_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(payload + b"\n")
        logger.debug("Saved settings to %s", target)
        return target
