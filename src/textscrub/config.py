"""Configuration loader for textscrub dictionary, markup and statistics settings."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_OPEN_TAG = '<mark style="background-color: yellow; border-radius: 3px; padding: 0 2px;">'
DEFAULT_CLOSE_TAG = "</mark>"


@dataclass
class DictionaryConfig:
    """Dictionary source configuration."""
    variant: str = "default"
    data_dir: Optional[str] = None  # None uses the packaged word lists


@dataclass
class MarkupConfig:
    """Markup substituted for replacement markers once a scan completes."""
    open_tag: str = DEFAULT_OPEN_TAG
    close_tag: str = DEFAULT_CLOSE_TAG


@dataclass
class StatisticsConfig:
    """Statistics configuration."""
    words_per_minute: float = 225.0
    segment_count: int = 10  # Approximate number of graph segments


@dataclass
class ScrubConfig:
    """Root configuration object."""
    dictionary: DictionaryConfig = field(default_factory=DictionaryConfig)
    markup: MarkupConfig = field(default_factory=MarkupConfig)
    statistics: StatisticsConfig = field(default_factory=StatisticsConfig)


def load_config(config_path: Optional[Path | str] = None) -> ScrubConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses default config/textscrub.yaml

    Returns:
        ScrubConfig object with all settings
    """
    if config_path is None:
        default_path = Path(__file__).parent.parent.parent / "config" / "textscrub.yaml"
        if default_path.exists():
            config_path = default_path
        else:
            return ScrubConfig()

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return _parse_config(data)


def _parse_config(data: dict) -> ScrubConfig:
    """Parse configuration from dict."""
    config = ScrubConfig()

    if "dictionary" in data:
        d = data["dictionary"] or {}
        config.dictionary.variant = d.get("variant", "default")
        config.dictionary.data_dir = d.get("data_dir")

    if "markup" in data:
        m = data["markup"] or {}
        config.markup.open_tag = m.get("open_tag", DEFAULT_OPEN_TAG)
        config.markup.close_tag = m.get("close_tag", DEFAULT_CLOSE_TAG)

    if "statistics" in data:
        s = data["statistics"] or {}
        config.statistics.words_per_minute = float(s.get("words_per_minute", 225.0))
        config.statistics.segment_count = int(s.get("segment_count", 10))

    if config.statistics.words_per_minute <= 0:
        raise ValueError("statistics.words_per_minute must be positive")
    if config.statistics.segment_count < 1:
        raise ValueError("statistics.segment_count must be at least 1")

    return config


# Global config instance (lazy loaded)
_config: Optional[ScrubConfig] = None


def get_config(config_path: Optional[Path | str] = None) -> ScrubConfig:
    """
    Get the global configuration instance.

    Args:
        config_path: If provided, reload config from this path

    Returns:
        ScrubConfig instance
    """
    global _config
    if _config is None or config_path is not None:
        _config = load_config(config_path)
    return _config
