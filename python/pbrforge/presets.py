# python/pbrforge/presets.py
# Named, owner-scoped material presets with JSON file persistence
# Exists as a local stand-in for the remote preset store (save/get/delete/list by name and owner)
# RELEVANT FILES: python/pbrforge/materials.py, python/pbrforge/params.py, tests/test_presets.py
from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from . import materials
from .errors import InvalidParameterError
from .materials import MaterialType
from .params import GenerationParameters

logger = logging.getLogger(__name__)

DEFAULT_OWNER = "anonymous"


@dataclass(frozen=True)
class TexturePreset:
    name: str
    material_type: MaterialType
    parameters: GenerationParameters
    owner: str = DEFAULT_OWNER
    timestamp: int = field(default_factory=time.time_ns)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "materialType": self.material_type.value,
            "parameters": self.parameters.to_dict(),
            "owner": self.owner,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TexturePreset":
        try:
            name = str(data["name"])
            material_type = materials.to_material_type(data.get("materialType", data.get("material_type")))
            parameters = GenerationParameters.from_mapping(data.get("parameters", {}))
        except KeyError as exc:
            raise InvalidParameterError(str(exc.args[0]), f"preset is missing {exc.args[0]!r}") from exc
        return cls(
            name=name,
            material_type=material_type,
            parameters=parameters,
            owner=str(data.get("owner", DEFAULT_OWNER)),
            timestamp=int(data.get("timestamp", 0)),
        )

    def to_parameters(self) -> GenerationParameters:
        """Expand into full generation parameters.

        Category defaults fill in bump, scale and variation; the stored
        roughness, metalness, style, palette and tiling win, and the base
        color is taken from the first palette entry.
        """
        stored = self.parameters
        return materials.material_parameters(
            self.material_type,
            roughness=stored.roughness,
            metalness=stored.metalness,
            pattern_style=stored.pattern_style,
            color_palette=list(stored.color_palette),
            tiling_scale=stored.tiling_scale,
            base_color=stored.color_palette[0],
        )


class PresetLibrary:
    """In-memory preset store keyed by (owner, name)."""

    def __init__(self, presets: Optional[List[TexturePreset]] = None):
        self._presets: Dict[Tuple[str, str], TexturePreset] = {}
        for preset in presets or []:
            self._presets[(preset.owner, preset.name)] = preset

    def __len__(self) -> int:
        return len(self._presets)

    def __contains__(self, name: str) -> bool:
        return any(n == name for _, n in self._presets)

    def save(
        self,
        name: str,
        material_type: Union[str, MaterialType],
        parameters: GenerationParameters,
        owner: str = DEFAULT_OWNER,
    ) -> TexturePreset:
        """Create or overwrite the owner's preset called ``name``."""
        name = str(name).strip()
        if not name:
            raise InvalidParameterError("name", "preset name must not be empty")
        preset = TexturePreset(
            name=name,
            material_type=materials.to_material_type(material_type),
            parameters=parameters,
            owner=owner,
        )
        self._presets[(owner, name)] = preset
        logger.info("Saved preset %r for %s", name, owner)
        return preset

    def get(self, name: str, owner: Optional[str] = None) -> Optional[TexturePreset]:
        if owner is not None:
            return self._presets.get((owner, name))
        for (_, n), preset in self._presets.items():
            if n == name:
                return preset
        return None

    def delete(self, name: str, owner: str = DEFAULT_OWNER) -> None:
        try:
            del self._presets[(owner, name)]
        except KeyError:
            raise KeyError(f"No preset named {name!r} for {owner}") from None
        logger.info("Deleted preset %r for %s", name, owner)

    def all(self) -> List[TexturePreset]:
        return list(self._presets.values())

    def all_by_name(self) -> List[TexturePreset]:
        return sorted(self._presets.values(), key=lambda p: (p.name, p.owner))

    def by_material_type(self, material_type: Union[str, MaterialType]) -> List[TexturePreset]:
        mt = materials.to_material_type(material_type)
        return [p for p in self.all_by_name() if p.material_type is mt]

    def by_owner(self, owner: str) -> List[TexturePreset]:
        return [p for p in self.all_by_name() if p.owner == owner]

    def to_json(self) -> str:
        return json.dumps([p.to_dict() for p in self.all_by_name()], indent=2)

    def save_json(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.write_text(self.to_json(), encoding="utf-8")
        logger.info("Wrote %d presets to %s", len(self), path)
        return path

    @classmethod
    def load_json(cls, path: Union[str, Path]) -> "PresetLibrary":
        path = Path(path)
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise TypeError(f"preset file must contain a JSON list: {path}")
        library = cls([TexturePreset.from_mapping(item) for item in data])
        logger.debug("Loaded %d presets from %s", len(library), path)
        return library
