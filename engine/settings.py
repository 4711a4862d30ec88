"""Per-run indexing settings."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Tuple

from engine.config import get as config_get
from world.levels import Rotation


def _to_limits(values: Sequence[Any]) -> Tuple[int, int, int, int]:
    if not isinstance(values, (list, tuple)) or len(values) != 4:
        raise ValueError("limits must be a sequence of four integers [x_min, x_max, z_min, z_max]")
    try:
        x_min, x_max, z_min, z_max = (int(v) for v in values)
    except (TypeError, ValueError) as exc:
        raise ValueError("limits must contain integers") from exc
    return x_min, x_max, z_min, z_max


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false", "no")
    return bool(value)


@dataclass
class Settings:
    use_limits: bool = False
    # [x_min, x_max, z_min, z_max], inclusive, native world coordinates.
    limits: Tuple[int, int, int, int] = (0, 0, 0, 0)
    rotation: Rotation = Rotation.NONE

    def __post_init__(self) -> None:
        self.use_limits = _to_bool(self.use_limits)
        self.limits = _to_limits(self.limits)
        self.rotation = Rotation.coerce(self.rotation)

    def within_limits(self, x: int, z: int) -> bool:
        x_min, x_max, z_min, z_max = self.limits
        return x_min <= x <= x_max and z_min <= z <= z_max


def settings_from_dict(data: Mapping[str, Any]) -> Settings:
    """Build settings from the ``world`` section of a config mapping."""
    return Settings(
        use_limits=data.get("use_limits", False),
        limits=data.get("limits", (0, 0, 0, 0)),
        rotation=data.get("rotation", 0),
    )


def settings_from_config() -> Settings:
    section = config_get("world", {})
    if not isinstance(section, dict):
        raise ValueError("config 'world' section must be an object")
    return settings_from_dict(section)
