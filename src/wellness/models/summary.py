from __future__ import annotations

from .activity import Activity

from dataclasses import dataclass, field
from typing import Dict, Tuple

@dataclass(frozen=True)
class Summary:
    """A read-only view over the activities in a store."""
    exercise: Tuple[Activity, ...] = ()
    total_duration: int = 0  # Minutes
    by_type: Dict[str, Tuple[Activity, ...]] = field(default_factory=dict)
