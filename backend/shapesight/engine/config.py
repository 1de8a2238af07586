"""Detection configuration — an immutable value passed into every call."""

from __future__ import annotations

from dataclasses import dataclass, replace

from shapesight.engine.errors import InvalidConfigError


@dataclass(frozen=True)
class DetectionConfig:
    """Tunable parameters of the pixel → shape pipeline."""

    # Foreground cutoff: intensity < threshold is foreground (dark shapes)
    threshold: int = 128
    # Components with fewer pixels are treated as noise
    min_area: int = 28
    # Douglas-Peucker epsilon = max(4, ratio × perimeter)
    douglas_peucker_ratio: float = 0.02
    # Vertices within this many degrees of a straight angle are pruned
    colinear_tolerance_deg: float = 6.0

    def __post_init__(self) -> None:
        if not 0 <= self.threshold <= 255:
            raise InvalidConfigError(f"threshold must be in [0, 255], got {self.threshold}")
        if self.min_area < 1:
            raise InvalidConfigError(f"min_area must be >= 1, got {self.min_area}")
        if self.douglas_peucker_ratio < 0:
            raise InvalidConfigError(
                f"douglas_peucker_ratio must be >= 0, got {self.douglas_peucker_ratio}"
            )
        if not 0 <= self.colinear_tolerance_deg <= 180:
            raise InvalidConfigError(
                f"colinear_tolerance_deg must be in [0, 180], got {self.colinear_tolerance_deg}"
            )

    def with_overrides(self, **overrides) -> DetectionConfig:
        """Copy with the given fields replaced; ``None`` values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self
