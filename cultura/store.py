"""Static knowledge store of Northeast Indian cultural entities"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from . import config
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

ENTITY_TYPES = ("festival", "ritual", "tradition", "food", "art", "dance")

_REQUIRED_FIELDS = (
    "id", "name", "type", "region", "state", "season",
    "communities", "rituals", "symbols", "description",
    "historicalContext", "attribution", "language",
)


@dataclass(frozen=True)
class CulturalEntity:
    """Single documented festival, ritual, tradition, food, art form or dance"""

    id: str
    name: str
    type: str
    region: str
    state: str
    season: str
    communities: Tuple[str, ...]
    rituals: Tuple[str, ...]
    symbols: Tuple[str, ...]
    description: str
    historical_context: str
    attribution: str
    language: str

    @classmethod
    def from_dict(cls, data: Dict) -> "CulturalEntity":
        """Create from a raw dataset record (camelCase keys)"""
        missing = [f for f in _REQUIRED_FIELDS if f not in data]
        if missing:
            raise ConfigurationError(
                f"Cultural record {data.get('id', '?')!r} is missing fields: {', '.join(missing)}"
            )
        if data["type"] not in ENTITY_TYPES:
            raise ConfigurationError(
                f"Cultural record {data['id']!r} has unknown type {data['type']!r}"
            )
        return cls(
            id=data["id"],
            name=data["name"],
            type=data["type"],
            region=data["region"],
            state=data["state"],
            season=data["season"],
            communities=tuple(data["communities"]),
            rituals=tuple(data["rituals"]),
            symbols=tuple(data["symbols"]),
            description=data["description"],
            historical_context=data["historicalContext"],
            attribution=data["attribution"],
            language=data["language"],
        )

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "region": self.region,
            "state": self.state,
            "season": self.season,
            "communities": list(self.communities),
            "rituals": list(self.rituals),
            "symbols": list(self.symbols),
            "description": self.description,
            "historicalContext": self.historical_context,
            "attribution": self.attribution,
            "language": self.language,
        }


class KnowledgeStore:
    """
    Read-only collection of cultural entities.
    Loaded once from the bundled dataset (or an injected list of records).
    """

    def __init__(self, entities: Iterable[CulturalEntity] = None, path: Path = None):
        if entities is None:
            entities = self._load(path or config.CULTURAL_DATA_FILE)
        self._entities: Tuple[CulturalEntity, ...] = tuple(entities)
        self._by_id: Dict[str, CulturalEntity] = {}
        for entity in self._entities:
            if entity.id in self._by_id:
                raise ConfigurationError(f"Duplicate cultural entity id: {entity.id!r}")
            self._by_id[entity.id] = entity

    @staticmethod
    def _load(path: Path) -> List[CulturalEntity]:
        """Load entity records from a JSON file"""
        try:
            with open(path, "r", encoding="utf-8") as f:
                records = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Could not load cultural data from {path}: {e}") from e

        entities = [CulturalEntity.from_dict(r) for r in records]
        logger.info(f"Loaded {len(entities)} cultural entities from {path.name}")
        return entities

    @classmethod
    def from_records(cls, records: Iterable[Dict]) -> "KnowledgeStore":
        return cls(entities=[CulturalEntity.from_dict(r) for r in records])

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self):
        return iter(self._entities)

    def get_all(self) -> List[CulturalEntity]:
        return list(self._entities)

    def get_by_id(self, entity_id: str) -> Optional[CulturalEntity]:
        return self._by_id.get(entity_id)

    def search(self, query: str) -> List[CulturalEntity]:
        """Case-insensitive substring match over name, description, communities, rituals and symbols"""
        q = query.lower().strip()
        if not q:
            return []

        def haystacks(e: CulturalEntity):
            yield e.name
            yield e.description
            yield from e.communities
            yield from e.rituals
            yield from e.symbols

        return [e for e in self._entities if any(q in h.lower() for h in haystacks(e))]

    def get_related(self, entity_id: str) -> List[CulturalEntity]:
        """
        Entities sharing a state, type or community with the given one,
        strongest overlap first. Unknown ids give an empty list.
        """
        entity = self.get_by_id(entity_id)
        if entity is None:
            return []

        communities = {c.lower() for c in entity.communities}
        scored = []
        for other in self._entities:
            if other.id == entity.id:
                continue
            overlap = 0
            if other.state == entity.state:
                overlap += 2
            if other.type == entity.type:
                overlap += 1
            overlap += len(communities & {c.lower() for c in other.communities})
            if overlap:
                scored.append((overlap, other))

        # sorted() is stable, so ties keep dataset order
        scored = sorted(scored, key=lambda pair: pair[0], reverse=True)
        return [other for _, other in scored]

    def states(self) -> List[str]:
        """Distinct states in dataset order"""
        seen = []
        for entity in self._entities:
            if entity.state not in seen:
                seen.append(entity.state)
        return seen
