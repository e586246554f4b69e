"""
Personality preset catalog, loaded from the bundled presets.json asset.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Tuple

from .strategy import FlowStrategy

PRESETS_PATH = Path(__file__).with_name("presets.json")


def load_presets(path: Optional[Path] = None) -> List[FlowStrategy]:
    """Read a preset catalog file. The default catalog is cached."""
    if path is None:
        return list(_default_presets())
    with open(path, encoding="utf-8") as f:
        return [FlowStrategy.from_dict(entry) for entry in json.load(f)]


@lru_cache(maxsize=1)
def _default_presets() -> Tuple[FlowStrategy, ...]:
    with open(PRESETS_PATH, encoding="utf-8") as f:
        return tuple(FlowStrategy.from_dict(entry) for entry in json.load(f))


def preset_types() -> List[str]:
    return [preset.personality_type for preset in _default_presets()]


def get_preset(personality_type: str) -> FlowStrategy:
    for preset in _default_presets():
        if preset.personality_type == personality_type:
            return preset
    raise KeyError(f"Unknown personality type: {personality_type}")
