"""Chat knowledge base derived from the cultural entity store"""

import re
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .store import CulturalEntity, KnowledgeStore

logger = logging.getLogger(__name__)

_TYPE_EMOJI = {
    "festival": "🎉",
    "ritual": "🕯️",
    "tradition": "✨",
    "food": "🍽️",
    "art": "🎨",
    "dance": "💃",
}


@dataclass(frozen=True)
class KnowledgeRecord:
    """One answerable topic: keywords to match and a pre-rendered response"""

    key: str
    keywords: Tuple[str, ...]
    response: str
    sources: Tuple[str, ...]
    entity: Optional[CulturalEntity] = None

    @property
    def is_general(self) -> bool:
        return self.entity is None


def record_key(name: str) -> str:
    return re.sub(r"\s+", "-", name.lower())


def _render_entity(entity: CulturalEntity) -> str:
    emoji = _TYPE_EMOJI.get(entity.type, "⭐")
    rituals = "\n".join(f"- {ritual}" for ritual in entity.rituals)
    symbols = "\n".join(f"- {symbol}" for symbol in entity.symbols)
    season = entity.season[:1].upper() + entity.season[1:]
    return (
        f"{emoji} **{entity.name}** - {entity.region}, {entity.state}\n\n"
        f"{entity.description}\n\n"
        f"🎭 **Cultural Elements**:\n{rituals}\n\n"
        f"🔮 **Symbols & Traditions**:\n{symbols}\n\n"
        f"👥 **Communities**: {', '.join(entity.communities)}\n\n"
        f"📚 **Historical Context**: {entity.historical_context}\n\n"
        f"🌟 **Season**: {season}"
    )


def entity_record(entity: CulturalEntity) -> KnowledgeRecord:
    keywords = [
        entity.name,
        entity.type,
        entity.region,
        entity.state,
        entity.season,
        *entity.communities,
        *entity.rituals,
        *entity.symbols,
    ]
    return KnowledgeRecord(
        key=record_key(entity.name),
        keywords=tuple(k.lower() for k in keywords),
        response=_render_entity(entity),
        sources=(entity.attribution,),
        entity=entity,
    )


# ── General topics ───────────────────────────────────────────────────────────

_NORTHEAST_CULTURE = """🌈 **Northeast India Cultural Heritage**

Northeast India is a treasure trove of cultural diversity, home to over 200 tribes and numerous linguistic groups across 8 states.

🏔️ **The Eight States**:
- **Seven Sisters**: Assam, Arunachal Pradesh, Manipur, Meghalaya, Mizoram, Nagaland, Tripura
- **Brother State**: Sikkim

🎭 **Cultural Diversity**:
- **200+ Tribal Communities** with distinct traditions, languages, and customs
- **100+ Languages** and dialects spoken across the region
- **Multiple Religions**: Hinduism, Buddhism, Christianity, and indigenous faiths

🍽️ **Culinary Heritage**:
- Rice as the staple food across all states
- Fermented foods and beverages (rice beer, fish, vegetables)
- Minimal use of oil, emphasis on boiled and steamed foods
- Use of indigenous herbs, bamboo shoots, and local vegetables

🏛️ **Shared Values**:
- Deep respect for nature and environmental conservation
- Strong community bonds and collective decision-making
- Hospitality and warmth towards guests
- Preservation of traditional knowledge and practices

Each state and tribe maintains its unique identity while sharing common threads of harmony with nature, community living, and cultural preservation."""

_FESTIVALS = """🎉 **Major Festivals of Northeast India**

Northeast India is known as the "Land of Festivals" with vibrant celebrations throughout the year:

🌸 **Spring Festivals**:
- **Bihu (Assam)**: The most important Assamese festival celebrating New Year
- **Chapchar Kut (Mizoram)**: Vibrant spring festival with bamboo dance
- **Lai Haraoba (Manipur)**: Ancient ritual festival of the Meitei people

❄️ **Winter Festivals**:
- **Hornbill Festival (Nagaland)**: Premier cultural festival showcasing all 16 Naga tribes
- **Losar (Sikkim & Arunachal Pradesh)**: Tibetan New Year celebration
- **Sangai Festival (Manipur)**: Cultural extravaganza named after the state animal

🍂 **Autumn Festivals**:
- **Wangala (Meghalaya)**: Harvest festival of the Garo tribe with hundred drums
- **Nongkrem Dance (Meghalaya)**: Sacred festival of the Khasi tribe

Each festival reflects the unique cultural identity and traditions of the respective communities."""

_FOOD_CUISINE = """🍽️ **Traditional Cuisine of Northeast India**

Northeast Indian cuisine is characterized by fresh ingredients, minimal oil, and unique flavors:

🐟 **Signature Dishes**:
- **Masor Tenga (Assam)**: Tangy fish curry with tomatoes or elephant apple
- **Eromba (Manipur)**: Spicy dish with fermented fish and king chili
- **Axone (Nagaland)**: Fermented soybean curry with smoked meat
- **Jadoh (Meghalaya)**: Traditional Khasi rice dish with pork
- **Thukpa (Sikkim)**: Hearty noodle soup with Tibetan influence

🌿 **Common Ingredients**:
- **Bamboo Shoots**: Used across all states in various preparations
- **Fermented Fish**: Adds umami flavor to many dishes
- **Indigenous Herbs**: Local varieties not found elsewhere
- **Rice**: Staple grain prepared in numerous ways

🥘 **Cooking Methods**:
- Steaming and boiling preferred over frying
- Smoking for preservation and flavor
- Fermentation for enhanced taste and nutrition
- Minimal use of spices, emphasis on natural flavors

The cuisine reflects the region's connection with nature and sustainable living practices."""

GENERAL_RECORDS = (
    KnowledgeRecord(
        key="northeast-culture",
        keywords=("northeast", "culture", "heritage", "tribes", "diversity", "eight states", "seven sisters"),
        response=_NORTHEAST_CULTURE,
        sources=(
            "Northeast India Cultural Survey",
            "Tribal Heritage Documentation",
            "Ministry of Culture, Government of India",
        ),
    ),
    KnowledgeRecord(
        key="festivals",
        keywords=("festivals", "celebrations", "cultural events", "traditional festivals"),
        response=_FESTIVALS,
        sources=("Festival Documentation", "Cultural Heritage Records"),
    ),
    KnowledgeRecord(
        key="food-cuisine",
        keywords=("food", "cuisine", "dishes", "cooking", "traditional food"),
        response=_FOOD_CUISINE,
        sources=("Culinary Heritage Documentation", "Traditional Cooking Practices"),
    ),
)


def build_knowledge_base(store: KnowledgeStore) -> Mapping[str, KnowledgeRecord]:
    """
    One record per entity in store order, then the general topics.
    The returned mapping is read-only.
    """
    records = {}
    for entity in store:
        record = entity_record(entity)
        if record.key in records:
            # Two entities whose names differ only in case or spacing
            logger.warning(f"Knowledge key {record.key!r} already used, keeping the first entity")
            continue
        records[record.key] = record

    for record in GENERAL_RECORDS:
        records[record.key] = record

    logger.info(f"Built knowledge base with {len(records)} records")
    return MappingProxyType(records)
