# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load configuration from environment variables / .env file.
#   Provides typed config objects to the label and table modules.
#
# CLASSES:
# --------
# - LabelConfig (dataclass)
#     key: str            (default "label")
#     style: str          (default "note")
#
# - CodecConfig (dataclass)
#     default_style: str  (default "default")
#
# - TableMetaConfig (dataclass)
#     labels: LabelConfig
#     codec: CodecConfig
#
# FUNCTIONS:
# ----------
# - get_config() -> TableMetaConfig
#     Read .env values with python-dotenv (without exporting them to
#     os.environ), let real environment variables override them, and
#     construct TableMetaConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Forget the singleton so the next get_config() re-reads the environment.
#
# USAGE:
# ------
#   from tablemeta.config import get_config
#   config = get_config()
#   print(config.labels.key)
#
# ==============================================

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values, find_dotenv


@dataclass
class LabelConfig:
    """Which column metadata entry holds the label, and how it is tagged."""
    key: str = "label"
    style: str = "note"


@dataclass
class CodecConfig:
    """Defaults used when metadata is written without an explicit style."""
    default_style: str = "default"


@dataclass
class TableMetaConfig:
    """Main package configuration."""
    labels: LabelConfig = field(default_factory=LabelConfig)
    codec: CodecConfig = field(default_factory=CodecConfig)


# Singleton instance
_config_instance: Optional[TableMetaConfig] = None


def get_config() -> TableMetaConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        TableMetaConfig: Package configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    settings = _read_settings()

    label_config = LabelConfig(
        key=settings.get("TABLEMETA_LABEL_KEY", "label"),
        style=settings.get("TABLEMETA_LABEL_STYLE", "note"),
    )

    codec_config = CodecConfig(
        default_style=settings.get("TABLEMETA_DEFAULT_STYLE", "default"),
    )

    _config_instance = TableMetaConfig(labels=label_config, codec=codec_config)
    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration."""
    global _config_instance
    _config_instance = None


def _read_settings() -> Dict[str, str]:
    """
    Merge .env files and the process environment; the environment wins.

    .env in (or above) the working directory beats the one at the
    project root. Nothing is written to os.environ.
    """
    settings: Dict[str, str] = {}
    for path in (Path(__file__).parent.parent / ".env", find_dotenv(usecwd=True)):
        if path and Path(path).is_file():
            settings.update(
                (key, value) for key, value in dotenv_values(path).items() if value is not None
            )
    settings.update(os.environ)
    return settings
