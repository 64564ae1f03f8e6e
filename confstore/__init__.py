"""Load and save application settings as JSON, YAML or TOML files."""

from .config import StoreConfig
from .errors import ApplicationNameError, CodecError, StoreError, UnknownFormatError
from .formats import Codec, FormatRegistry
from .paths import extension_of, resolve_app_dir, resolve_path
from .store import ConfigStore

__all__ = [
    "ApplicationNameError",
    "Codec",
    "CodecError",
    "ConfigStore",
    "FormatRegistry",
    "StoreConfig",
    "StoreError",
    "UnknownFormatError",
    "extension_of",
    "resolve_app_dir",
    "resolve_path",
]
