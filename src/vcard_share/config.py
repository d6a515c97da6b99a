from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_CONF_PATH = Path("local") / "vcard-share.conf"


@dataclass(frozen=True)
class Settings:
    fallback_first: str = "Contact"
    fallback_last: str = "VCard"
    extension: str = ".vcf"


DEFAULT_CONF = """# vcard-share local config (TOML)
fallback_first = "Contact"
fallback_last = "VCard"
extension = ".vcf"
"""


def load_settings(conf_file: Path | None = None) -> Settings:
    """Read settings from ``conf_file``, falling back to defaults.

    A missing file is not an error. A malformed one is logged and ignored.
    """
    path = Path(conf_file) if conf_file is not None else DEFAULT_CONF_PATH
    defaults = Settings()
    if not path.is_file():
        logger.debug("No config at %s, using defaults", path)
        return defaults

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        logger.warning("Ignoring malformed or unreadable config %s: %s", path, exc)
        return defaults

    extension = str(data.get("extension", defaults.extension))
    if extension and not extension.startswith("."):
        extension = "." + extension
    return Settings(
        fallback_first=str(data.get("fallback_first", defaults.fallback_first)),
        fallback_last=str(data.get("fallback_last", defaults.fallback_last)),
        extension=extension,
    )


def ensure_config(conf_file: Path | None = None) -> Path:
    """Create the config file with default values if it does not exist yet."""
    path = Path(conf_file) if conf_file is not None else DEFAULT_CONF_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    if not path.exists():
        path.write_text(DEFAULT_CONF, encoding="utf-8")
    return path
