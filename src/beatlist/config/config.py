"""Persistent defaults for the ``convert`` command.

The TOML file is rendered from ``_FIELD_COMMENTS`` so every key is written
with its guidance; keys whose value is ``None`` appear only as comments.
"""

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from beatlist.config.file_ops import write_text_file
from beatlist.config.paths import default_config_path
from beatlist.features.legacy.domain.models import ImageEncoding

logger = logging.getLogger(__name__)

LEGACY_IMAGE_ENCODING_DEFAULT: Final[str] = ImageEncoding.AUTO.value

_HEADER: Final[str] = "# beatlist Configuration File"

_FIELD_COMMENTS: Final[dict[str, tuple[str, ...]]] = {
    "log_file": (
        "Log file path (optional)",
        "Where to store the application logs",
        'Example: log_file = "/path/to/logs/beatlist.log"',
    ),
    "preserve_custom_data": ("Keep unknown playlist and song fields as custom data (default true)",),
    "legacy_image_encoding": ("Encoding of the legacy `image` field: auto, base64 or data-uri",),
    "workers": ("Number of parallel conversions (optional)", "Example: workers = 4"),
}


def _toml_literal(value: object) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (str, Path)):
        escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return str(value)


@dataclass
class Config:
    """Conversion defaults shared by the CLI; loaded once per process."""

    log_file: Path | None = None
    preserve_custom_data: bool = True
    legacy_image_encoding: str = LEGACY_IMAGE_ENCODING_DEFAULT
    workers: int | None = None

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file) if self.log_file.strip() else None

        workers = self.workers
        if workers is not None and (type(workers) is not int or workers <= 0):
            logger.warning("Ignoring invalid worker count in configuration: %r", workers)
            self.workers = None

        try:
            self.legacy_image_encoding = ImageEncoding.from_user_input(
                str(self.legacy_image_encoding)
            ).value
        except ValueError as e:
            logger.warning("%s; falling back to '%s'", e, LEGACY_IMAGE_ENCODING_DEFAULT)
            self.legacy_image_encoding = LEGACY_IMAGE_ENCODING_DEFAULT

    def to_toml(self) -> str:
        """Render the configuration file text."""

        lines = [_HEADER, ""]
        for f in fields(self):
            lines.extend(f"# {comment}" for comment in _FIELD_COMMENTS[f.name])
            value = getattr(self, f.name)
            if value is not None:
                lines.append(f"{f.name} = {_toml_literal(value)}")
            lines.append("")
        return "\n".join(lines)

    def save(self) -> None:
        target = default_config_path()
        try:
            write_text_file(target, self.to_toml())
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)

    @classmethod
    def _from_mapping(cls, raw: dict[str, Any]) -> "Config":
        known = {f.name for f in fields(cls)}
        for key in sorted(raw.keys() - known):
            logger.warning("Ignoring unknown configuration key: %s", key)
        return cls(**{key: value for key, value in raw.items() if key in known})

    @classmethod
    def load(cls) -> "Config":
        """Return the process-wide configuration.

        The first call reads the config file, writing the defaults there when
        it does not exist yet. Unreadable or malformed files raise.
        """
        if cls._instance is not None:
            return cls._instance

        source = default_config_path()
        try:
            if source.exists():
                with open(source, "rb") as f:
                    config = cls._from_mapping(tomllib.load(f))
                logger.debug("Configuration loaded from %s", source)
            else:
                config = cls()
                config.save()
                logger.info("Created default configuration at %s", source)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = config
        return config
