"""Server configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .inscription_id import InscriptionId


@dataclass(frozen=True)
class Config:
    """Settings such as which inscriptions are hidden."""

    hidden: frozenset[InscriptionId] = field(default_factory=frozenset)

    def is_hidden(self, inscription_id: InscriptionId) -> bool:
        return inscription_id in self.hidden

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Config:
        """Build a config from loaded data; ``hidden`` lists inscription ids."""
        if "hidden" not in data:
            raise ValueError("missing field `hidden`")
        hidden = data["hidden"]
        if isinstance(hidden, (str, bytes)) or not hasattr(hidden, "__iter__"):
            raise ValueError("`hidden` must be a sequence of inscription ids")
        ids = set()
        for entry in hidden:
            if not isinstance(entry, str):
                raise ValueError(f"invalid inscription id: {entry!r}")
            ids.add(InscriptionId.parse(entry))
        return cls(frozenset(ids))