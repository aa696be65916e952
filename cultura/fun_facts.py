"""Short fun facts about Northeast Indian culture and geography"""

import random
from typing import Dict, List

_FUN_FACTS: List[Dict] = [
    {"id": 1, "icon": "🌅", "category": "Geography", "source": "Bikat Adventures",
     "fact": "Arunachal Pradesh receives the first rays of sunlight in India every morning from the village of Dong."},
    {"id": 2, "icon": "🌿", "category": "Culture", "source": "Discover India Magazine",
     "fact": "Mawlynnong in Meghalaya is Asia's cleanest village with 95% literacy rate and a matrilineal society."},
    {"id": 3, "icon": "🌧️", "category": "Geography", "source": "Weather Records",
     "fact": "Mawsynram in Meghalaya is the wettest place on Earth, receiving 467 inches of rainfall annually."},
    {"id": 4, "icon": "👩‍💼", "category": "Culture", "source": "Cultural Heritage",
     "fact": "Manipur's Ima Market is the world's only market run exclusively by women, with over 3,000 vendors."},
    {"id": 5, "icon": "🦌", "category": "Wildlife", "source": "National Parks India",
     "fact": "Keibul Lamjao in Manipur is the world's only floating national park, home to the dancing Sangai deer."},
    {"id": 6, "icon": "🌱", "category": "Environment", "source": "Government of Sikkim",
     "fact": "Sikkim became the world's first fully organic state in 2016, banning all chemical fertilizers and pesticides."},
    {"id": 7, "icon": "🏝️", "category": "Geography", "source": "Assam Tourism",
     "fact": "Assam's Majuli Island is the world's largest inhabited river island, spanning over 880 square kilometers."},
    {"id": 8, "icon": "🎵", "category": "Culture", "source": "Cultural Documentation",
     "fact": "Kongthong village in Meghalaya is known as the 'Whistling Village' where people call each other by unique whistling tunes."},
    {"id": 9, "icon": "🗺️", "category": "Geography", "source": "Border Studies",
     "fact": "Northeast India shares 98% of its borders with foreign countries and only 2% with mainland India."},
    {"id": 10, "icon": "🧵", "category": "Crafts", "source": "Silk Board of India",
     "fact": "Assam produces Muga silk, the world's rarest golden silk that cannot be produced anywhere else on Earth."},
    {"id": 11, "icon": "🕳️", "category": "Geography", "source": "Cave Research Foundation",
     "fact": "Krem Liat Prah in Meghalaya is Asia's longest cave system, stretching over 30 kilometers underground."},
    {"id": 12, "icon": "🐎", "category": "Sports", "source": "Sports History",
     "fact": "Polo was invented in Manipur and is still played there as 'Sagol Kangjei' meaning 'horse hockey'."},
    {"id": 13, "icon": "🏪", "category": "Culture", "source": "Cultural Practices",
     "fact": "Mizoram has shops without shopkeepers where customers pay by dropping money in trust boxes."},
    {"id": 14, "icon": "🦅", "category": "Culture", "source": "Nagaland Tourism",
     "fact": "Nagaland's Hornbill Festival showcases traditions of all 16 Naga tribes in one spectacular celebration."},
    {"id": 15, "icon": "🤝", "category": "Culture", "source": "Traditional Practices",
     "fact": "Assam's Jonbeel Mela is a three-day festival where communities still practice the ancient barter system."},
    {"id": 16, "icon": "👥", "category": "Culture", "source": "Tribal Studies",
     "fact": "Tripura is home to 19 different tribal communities, each with distinct languages and customs."},
    {"id": 17, "icon": "🌊", "category": "Geography", "source": "Lake Studies",
     "fact": "Loktak Lake in Manipur is South Asia's largest freshwater lake with floating islands called 'phumdis'."},
    {"id": 18, "icon": "⛰️", "category": "Geography", "source": "Mountaineering Records",
     "fact": "Mount Khangchendzonga in Sikkim is the world's third-highest peak and is considered sacred by locals."},
    {"id": 19, "icon": "📚", "category": "Culture", "source": "Linguistic Heritage",
     "fact": "Sikkim has four official languages: Nepali, Bhutia, Lepcha, and English, reflecting its diverse heritage."},
    {"id": 20, "icon": "🏛️", "category": "Religion", "source": "Buddhist Heritage",
     "fact": "Sikkim's Rumtek Monastery is one of the most significant seats of Tibetan Buddhism outside Tibet."},
]


def get_random_fun_fact(rng: random.Random = None) -> Dict:
    """Pick one fact at random"""
    return dict((rng or random).choice(_FUN_FACTS))


def get_fun_facts_by_category(category: str) -> List[Dict]:
    return [dict(f) for f in _FUN_FACTS if f["category"] == category]


def get_fun_fact_categories() -> List[str]:
    """Distinct categories in first-seen order"""
    categories = []
    for fact in _FUN_FACTS:
        if fact["category"] not in categories:
            categories.append(fact["category"])
    return categories


def get_all_fun_facts() -> List[Dict]:
    return [dict(f) for f in _FUN_FACTS]
