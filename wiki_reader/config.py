"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- WikipediaConfig: Wikipedia endpoint and HTTP settings
- OutputConfig: Output format settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml


@dataclass
class WikipediaConfig:
    """Configuration for Wikipedia API access.

    Attributes:
        language: Wikipedia language subdomain (e.g., "en", "de")
        timeout_seconds: HTTP request timeout; requests are not retried
        trust_env: Whether to respect system proxy settings
        user_agent: HTTP User-Agent header string
    """

    language: str = "en"
    timeout_seconds: float = 15.0
    trust_env: bool = True
    user_agent: str = "wiki-reader/0.1 (https://github.com/wiki-reader/wiki-reader)"

    @property
    def base_url(self) -> str:
        return f"https://{self.language}.wikipedia.org"


@dataclass
class OutputConfig:
    """Configuration for output generation.

    Attributes:
        format: "markdown", "html" or "json"
    """

    format: str = "markdown"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
    """

    level: str = "WARNING"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "wiki-reader.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    wikipedia: WikipediaConfig = field(default_factory=WikipediaConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "wikipedia": {
            "language": cfg.wikipedia.language,
            "timeout_seconds": cfg.wikipedia.timeout_seconds,
            "trust_env": cfg.wikipedia.trust_env,
            "user_agent": cfg.wikipedia.user_agent,
        },
        "output": {
            "format": cfg.output.format,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        wikipedia=WikipediaConfig(**data["wikipedia"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )
