"""
Annotation Settings Resolution

Loads tooltip settings from data/annotation_settings.yaml and applies named
presets on top. Presets are composable; later presets override earlier ones.

Examples:
    >>> load_annotation_settings()
    AnnotationSettings(max_annotations=8, url_prefix='/glossaire', ...)

    >>> load_annotation_settings(presets=["english", "sparse"])
    AnnotationSettings(max_annotations=3, url_prefix='/glossary', ...)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from omegaconf import OmegaConf

from gloss.contexts.annotation.defaults import get_default_settings
from gloss.contexts.glossary.term_dictionary import PROJECT_ROOT

load_dotenv()
ANNOTATION_SETTINGS_PATH = Path(
    os.getenv("ANNOTATION_SETTINGS_PATH", PROJECT_ROOT / "data" / "annotation_settings.yaml")
)


@dataclass(frozen=True)
class AnnotationSettings:
    """
    Resolved tooltip settings.

    Attributes:
        max_annotations: Hard cap on tooltips per document
        url_prefix: Path prefix of glossary term pages
        self_path_pattern: Regex extracting a term slug from a glossary page path
    """

    max_annotations: int
    url_prefix: str
    self_path_pattern: str

    def __post_init__(self):
        if self.max_annotations < 0:
            raise ValueError(f"max_annotations must be >= 0, got: {self.max_annotations}")

    @classmethod
    def defaults(cls) -> "AnnotationSettings":
        return cls(**get_default_settings())


def load_annotation_settings(
    config_path: Path = None,
    presets: List[str] = None,
) -> AnnotationSettings:
    """
    Load settings, fill defaults, then apply presets in order.

    Args:
        config_path: Settings file (defaults to ANNOTATION_SETTINGS_PATH env variable)
        presets: Preset names from the file's `presets` mapping

    Returns:
        Resolved AnnotationSettings

    Raises:
        FileNotFoundError: If the settings file doesn't exist
        ValueError: If a preset is not defined or a key is unknown
    """
    if config_path is None:
        config_path = ANNOTATION_SETTINGS_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Annotation settings not found at {config_path}")

    loaded: Dict[str, Any] = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    available_presets = loaded.pop("presets", None) or {}

    settings = get_default_settings()
    _merge_settings(settings, loaded, source=str(config_path))

    for preset_name in presets or []:
        if preset_name not in available_presets:
            available = list(available_presets.keys())
            raise ValueError(f"Preset '{preset_name}' not found. Available presets: {available}")
        _merge_settings(settings, available_presets[preset_name], source=f"preset '{preset_name}'")

    return AnnotationSettings(**settings)


def _merge_settings(settings: Dict[str, Any], overrides: Dict[str, Any], source: str) -> None:
    """Update settings in place, rejecting keys AnnotationSettings doesn't know."""
    unknown = set(overrides) - set(settings)
    if unknown:
        raise ValueError(f"Unknown annotation settings in {source}: {sorted(unknown)}")
    settings.update(overrides)
