"""Configuration loader for kwx extraction settings."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from .models import ExtractOptions


@dataclass
class ExtractionConfig:
    """Matching and tokenization settings."""
    max_n: int = 4  # Max number of words in an n-gram
    max_length: int = 40  # Labels must be shorter than this
    language: str = "english"
    extract_exceptions: list[str] = field(default_factory=lambda: ["well", "causes"])
    yield_interval: float = 0.0


@dataclass
class VocabularyConfig:
    """Vocabulary file locations."""
    thesaurus: Optional[str] = None
    atx: Optional[str] = None
    country: Optional[str] = None
    euroscivoc: Optional[str] = None
    ignore: list[str] = field(default_factory=list)  # Non-significant keyword codes


@dataclass
class KwxConfig:
    """Root configuration object."""
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    vocabularies: VocabularyConfig = field(default_factory=VocabularyConfig)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "KwxConfig":
        """Load configuration from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls._parse(data)

    @classmethod
    def _parse(cls, data: dict) -> "KwxConfig":
        """Parse configuration from dict."""
        config = cls()

        if "kwx" in data:
            k = data["kwx"] or {}
            config.extraction.max_n = k.get("max_n", 4)
            config.extraction.max_length = k.get("max_length", 40)
            config.extraction.language = k.get("language", "english")
            config.extraction.extract_exceptions = k.get("extract_exceptions", ["well", "causes"])
            config.extraction.yield_interval = k.get("yield_interval", 0.0)

        if "vocabularies" in data:
            v = data["vocabularies"] or {}
            config.vocabularies.thesaurus = v.get("thesaurus")
            config.vocabularies.atx = v.get("atx")
            config.vocabularies.country = v.get("country")
            config.vocabularies.euroscivoc = v.get("euroscivoc")
            config.vocabularies.ignore = [str(c) for c in v.get("ignore") or []]

        if config.extraction.max_n < 1:
            raise ValueError(f"kwx.max_n must be at least 1, got {config.extraction.max_n}")

        return config

    def to_options(self, keywords, **overrides) -> ExtractOptions:
        """
        Build ExtractOptions from this configuration.

        Args:
            keywords: Thesaurus entries
            **overrides: Any other ExtractOptions field

        Returns:
            ExtractOptions for a single call
        """
        params = {
            "max_n": self.extraction.max_n,
            "language": self.extraction.language,
            "extract_exceptions": list(self.extraction.extract_exceptions),
            "yield_interval": self.extraction.yield_interval,
        }
        params.update(overrides)
        return ExtractOptions(keywords=keywords, **params)


def load_kwx_config(config_path: Optional[Path | str] = None) -> KwxConfig:
    """
    Load kwx configuration.

    Args:
        config_path: Path to config file. If None, uses config/kwx.yaml when present

    Returns:
        KwxConfig object
    """
    if config_path is None:
        default_path = Path(__file__).parent.parent.parent / "config" / "kwx.yaml"
        if default_path.exists():
            config_path = default_path
        else:
            return KwxConfig()

    return KwxConfig.from_yaml(config_path)
