"""Translation dictionaries: curated phrases, broad word list and sentence templates"""

# ═══════════════════════════════════════════════════════════════════════════════
# § 1  CURATED PHRASES
#      Human-curated translations of culturally significant terms, one per
#      supported language. Takes priority over every algorithmic method.
# ═══════════════════════════════════════════════════════════════════════════════

CURATED_PHRASES = {
    # App interface
    "cultural heritage of northeast india": {
        "en": "Cultural Heritage of Northeast India",
        "as": "উত্তৰ-পূৰ্ব ভাৰতৰ সাংস্কৃতিক ঐতিহ্য",
        "mni": "ꯅꯣꯡꯄꯣꯛ-ꯅꯨꯡꯁꯤꯠꯀꯤ ꯚꯥꯔꯇꯀꯤ ꯀꯂꯆꯔꯦꯜ ꯍꯦꯔꯤꯇꯦꯖ",
        "bn": "উত্তর-পূর্ব ভারতের সাংস্কৃতিক ঐতিহ্য",
        "hi": "उत्तर-पूर्व भारत की सांस्कृतिक विरासत",
    },
    "explore traditions, festivals, and rituals": {
        "en": "Explore traditions, festivals, and rituals",
        "as": "পৰম্পৰা, উৎসৱ আৰু ৰীতি-নীতি অন্বেষণ কৰক",
        "mni": "ꯇ꯭ꯔꯦꯗꯤꯁꯟ, ꯐꯦꯁ꯭ꯇꯤꯚꯦꯜ ꯑꯃꯁꯨꯡ ꯔꯤꯆꯨꯑꯦꯜ ꯊꯤꯖꯤꯅꯕ",
        "bn": "ঐতিহ্য, উৎসব এবং আচার-অনুষ্ঠান অন্বেষণ করুন",
        "hi": "परंपराओं, त्योहारों और रीति-रिवाजों का अन्वेषण करें",
    },

    # Cultural terms
    "festival": {"en": "Festival", "as": "উৎসৱ", "mni": "ꯆꯥꯡ", "bn": "উৎসব", "hi": "त्योहार"},
    "ritual": {"en": "Ritual", "as": "ৰীতি-নীতি", "mni": "ꯔꯤꯆꯨꯑꯦꯜ", "bn": "আচার", "hi": "रीति"},
    "community": {"en": "Community", "as": "সম্প্ৰদায়", "mni": "ꯀꯝꯌꯨꯅꯤꯇꯤ", "bn": "সম্প্রদায়", "hi": "समुदाय"},
    "tradition": {"en": "Tradition", "as": "পৰম্পৰা", "mni": "ꯇ꯭ꯔꯦꯗꯤꯁꯟ", "bn": "ঐতিহ্য", "hi": "परंपरा"},
    "culture": {"en": "Culture", "as": "সংস্কৃতি", "mni": "ꯀꯂꯆꯔ", "bn": "সংস্কৃতি", "hi": "संस्कृति"},
    "heritage": {"en": "Heritage", "as": "ঐতিহ্য", "mni": "ꯍꯦꯔꯤꯇꯦꯖ", "bn": "ঐতিহ্য", "hi": "विरासत"},

    # Specific cultural elements
    "bihu festival": {"en": "Bihu Festival", "as": "বিহু উৎসৱ", "mni": "ꯕꯤꯍꯨ ꯆꯥꯡ", "bn": "বিহু উৎসব", "hi": "बिहू त्योहार"},
    "hornbill festival": {"en": "Hornbill Festival", "as": "হৰ্নবিল উৎসৱ", "mni": "ꯍꯣꯔꯅꯕꯤꯜ ꯆꯥꯡ", "bn": "হর্নবিল উৎসব", "hi": "हॉर्नबिल त्योहार"},
    "lai haraoba": {"en": "Lai Haraoba", "as": "লাই হাৰাওবা", "mni": "ꯂꯥꯏ ꯍꯔꯥꯎꯕ", "bn": "লাই হারাওবা", "hi": "लाई हराओबा"},
}


# ═══════════════════════════════════════════════════════════════════════════════
# § 2  BROAD WORD LIST  (English → Assamese / Manipuri)
#      Favors coverage over curation; used for exact and word-by-word lookup.
# ═══════════════════════════════════════════════════════════════════════════════

OFFLINE_DICTIONARY = {
    # Basic Interface
    "hello": {"as": "নমস্কাৰ", "mni": "ꯈꯨꯔꯨꯝꯖꯔꯤ"},
    "welcome": {"as": "স্বাগতম", "mni": "ꯇꯔꯥꯝꯅ"},
    "thank you": {"as": "ধন্যবাদ", "mni": "ꯊꯥꯒꯠꯆꯔꯤ"},
    "please": {"as": "অনুগ্ৰহ কৰি", "mni": "ꯆꯥꯅꯕꯤꯗꯨꯅ"},
    "yes": {"as": "হয়", "mni": "ꯍꯣꯏ"},
    "no": {"as": "নহয়", "mni": "ꯅꯠꯇꯦ"},

    # Cultural Terms
    "festival": {"as": "উৎসৱ", "mni": "ꯆꯥꯡ"},
    "ritual": {"as": "ৰীতি-নীতি", "mni": "ꯔꯤꯆꯨꯑꯦꯜ"},
    "tradition": {"as": "পৰম্পৰা", "mni": "ꯇ꯭ꯔꯦꯗꯤꯁꯟ"},
    "culture": {"as": "সংস্কৃতি", "mni": "ꯀꯂꯆꯔ"},
    "heritage": {"as": "ঐতিহ্য", "mni": "ꯍꯦꯔꯤꯇꯦꯖ"},
    "community": {"as": "সম্প্ৰদায়", "mni": "ꯀꯝꯌꯨꯅꯤꯇꯤ"},
    "dance": {"as": "নৃত্য", "mni": "ꯖꯒꯣꯏ"},
    "music": {"as": "সংগীত", "mni": "ꯏꯁꯩ"},
    "food": {"as": "খাদ্য", "mni": "ꯆꯥꯛ"},
    "language": {"as": "ভাষা", "mni": "ꯂꯣꯟ"},

    # Specific Festivals
    "bihu": {"as": "বিহু", "mni": "ꯕꯤꯍꯨ"},
    "durga puja": {"as": "দুৰ্গা পূজা", "mni": "ꯗꯨꯔꯒ ꯄꯨꯖ"},
    "kali puja": {"as": "কালী পূজা", "mni": "ꯀꯥꯂꯤ ꯄꯨꯖ"},
    "poila boishakh": {"as": "পহিলা বৈশাখ", "mni": "ꯄꯣꯏꯂ ꯕꯣꯏꯁꯥꯈ"},
    "lai haraoba": {"as": "লাই হাৰাওবা", "mni": "ꯂꯥꯏ ꯍꯔꯥꯎꯕ"},
    "yaoshang": {"as": "যাওশাং", "mni": "ꯌꯥꯎꯁꯥꯡ"},
    "ningol chakouba": {"as": "নিংগোল চাকৌবা", "mni": "ꯅꯤꯡꯒꯣꯜ ꯆꯥꯀꯧꯕ"},

    # Common Phrases
    "good morning": {"as": "শুভ ৰাতিপুৱা", "mni": "ꯅꯨꯡꯁꯤꯠ ꯅꯨꯡꯥꯏꯕ"},
    "good evening": {"as": "শুভ সন্ধিয়া", "mni": "ꯅꯨꯃꯤꯗꯥꯡ ꯅꯨꯡꯥꯏꯕ"},
    "how are you": {"as": "আপুনি কেনে আছে", "mni": "ꯅꯍꯥꯛ ꯀꯔꯝꯅ ꯂꯩꯔꯤꯕꯒꯦ"},
    "what is your name": {"as": "আপোনাৰ নাম কি", "mni": "ꯅꯍꯥꯛꯀꯤ ꯃꯤꯡ ꯀꯔꯤꯅꯣ"},
    "where are you from": {"as": "আপুনি ক'ৰ পৰা আহিছে", "mni": "ꯅꯍꯥꯛ ꯀꯗꯥꯏꯗꯨꯗꯒꯤ ꯂꯥꯛꯂꯤꯕꯒꯦ"},

    # More Cultural Terms
    "temple": {"as": "মন্দিৰ", "mni": "ꯂꯥꯏꯁꯪ"},
    "prayer": {"as": "প্ৰাৰ্থনা", "mni": "ꯄ꯭ꯔꯥꯔ꯭ꯊꯅ"},
    "god": {"as": "ভগৱান", "mni": "ꯂꯥꯏ"},
    "goddess": {"as": "দেৱী", "mni": "ꯂꯥꯏꯅꯨꯡꯁꯤ"},
    "sacred": {"as": "পবিত্ৰ", "mni": "ꯁꯦꯡꯕ"},
    "blessing": {"as": "আশীৰ্বাদ", "mni": "ꯑꯁꯤꯔꯕꯥꯗ"},
    "ceremony": {"as": "অনুষ্ঠান", "mni": "ꯑꯅꯨꯁ꯭ꯊꯥꯟ"},
    "celebration": {"as": "উদযাপন", "mni": "ꯅꯨꯡꯥꯏꯕ"},

    # Nature and Geography
    "mountain": {"as": "পৰ্বত", "mni": "ꯆꯤꯡ"},
    "river": {"as": "নদী", "mni": "ꯇꯨꯔꯦꯜ"},
    "forest": {"as": "অৰণ্য", "mni": "ꯎꯃꯪ"},
    "village": {"as": "গাঁও", "mni": "ꯈꯨꯉ꯭ꯒꯪ"},
    "city": {"as": "চহৰ", "mni": "ꯁꯍꯔ"},
    "home": {"as": "ঘৰ", "mni": "ꯌꯨꯝ"},
    "family": {"as": "পৰিয়াল", "mni": "ꯏꯃꯨꯡ"},
    "friend": {"as": "বন্ধু", "mni": "ꯃꯔꯨꯞ"},

    # Time and Seasons
    "morning": {"as": "ৰাতিপুৱা", "mni": "ꯅꯨꯡꯁꯤꯠ"},
    "evening": {"as": "সন্ধিয়া", "mni": "ꯅꯨꯃꯤꯗꯥꯡ"},
    "night": {"as": "ৰাতি", "mni": "ꯅꯨꯃꯤꯗꯥꯡ"},
    "day": {"as": "দিন", "mni": "ꯅꯨꯃꯤꯠ"},
    "spring": {"as": "বসন্ত", "mni": "ꯕꯁꯟꯇ"},
    "summer": {"as": "গ্ৰীষ্ম", "mni": "ꯅꯨꯡꯍꯤꯠꯄ"},
    "winter": {"as": "শীত", "mni": "ꯁꯤꯠꯄ"},
    "rain": {"as": "বৰষুণ", "mni": "ꯅꯣꯡ"},

    # Practical User Inputs
    "i love you": {"as": "মই তোমাক ভাল পাওঁ", "mni": "ꯑꯩ ꯅꯍꯥꯀꯨ ꯅꯨꯡꯁꯤꯕ"},
    "beautiful": {"as": "সুন্দৰ", "mni": "ꯐꯖꯕ"},
    "delicious": {"as": "সুস্বাদু", "mni": "ꯃꯆꯤ ꯐꯕ"},
    "happy": {"as": "আনন্দিত", "mni": "ꯍꯔꯥꯎꯕ"},
    "sad": {"as": "দুখী", "mni": "ꯅꯨꯡꯉꯥꯏꯇꯕ"},
    "love": {"as": "প্ৰেম", "mni": "ꯅꯨꯡꯁꯤꯕ"},
    "peace": {"as": "শান্তি", "mni": "ꯁꯥꯟꯇꯤ"},
    "water": {"as": "পানী", "mni": "ꯏꯁꯤꯡ"},
    "fire": {"as": "জুই", "mni": "ꯃꯩ"},
    "earth": {"as": "পৃথিৱী", "mni": "ꯃꯥꯂꯦꯝ"},
    "sky": {"as": "আকাশ", "mni": "ꯑꯇꯤꯌ"},
    "sun": {"as": "সূৰ্য", "mni": "ꯅꯨꯃꯤꯠ"},
    "moon": {"as": "চন্দ্ৰ", "mni": "ꯊ"},
    "star": {"as": "তৰা", "mni": "ꯊꯥꯡꯖꯤꯡ"},
    "flower": {"as": "ফুল", "mni": "ꯂꯩ"},
    "tree": {"as": "গছ", "mni": "ꯎ"},
    "bird": {"as": "চৰাই", "mni": "ꯎꯆꯦꯛ"},
    "fish": {"as": "মাছ", "mni": "ꯉ"},
    "book": {"as": "কিতাপ", "mni": "ꯂꯥꯏꯔꯤꯛ"},
    "school": {"as": "বিদ্যালয়", "mni": "ꯁ꯭ꯀꯨꯜ"},
    "teacher": {"as": "শিক্ষক", "mni": "ꯑꯣꯖ"},
    "student": {"as": "ছাত্ৰ", "mni": "ꯃꯍꯩꯔꯣꯏ"},
    "mother": {"as": "মা", "mni": "ꯏꯃ"},
    "father": {"as": "দেউতা", "mni": "ꯄꯄ"},
    "brother": {"as": "ভাই", "mni": "ꯃꯅꯥꯎ"},
    "sister": {"as": "ভনী", "mni": "ꯏꯆꯤꯜ"},
    "child": {"as": "শিশু", "mni": "ꯑꯉꯥꯡ"},
    "man": {"as": "মানুহ", "mni": "ꯃꯤꯑꯣꯏ"},
    "woman": {"as": "মহিলা", "mni": "ꯅꯨꯄꯤ"},
    "old": {"as": "পুৰণি", "mni": "ꯑꯔꯤꯕ"},
    "new": {"as": "নতুন", "mni": "ꯑꯅꯧꯕ"},
    "big": {"as": "ডাঙৰ", "mni": "ꯆꯥꯎꯕ"},
    "small": {"as": "সৰু", "mni": "ꯄꯤꯀꯄ"},
    "good": {"as": "ভাল", "mni": "ꯐꯕ"},
    "bad": {"as": "বেয়া", "mni": "ꯐꯠꯇꯕ"},
}


# ═══════════════════════════════════════════════════════════════════════════════
# § 3  SENTENCE-OPENER TEMPLATES  (per target language)
# ═══════════════════════════════════════════════════════════════════════════════

PHRASE_PATTERNS = {
    "as": {
        "what is": "কি",
        "where is": "ক'ত আছে",
        "how to": "কেনেকৈ",
        "tell me about": "মোক কওক",
        "i want to": "মই বিচাৰো",
        "can you": "আপুনি পাৰিবনে",
        "this is": "এইটো",
        "that is": "সেইটো",
    },
    "mni": {
        "what is": "ꯀꯔꯤꯅꯣ",
        "where is": "ꯀꯗꯥ ꯂꯩꯔꯤꯕꯒꯦ",
        "how to": "ꯀꯔꯝꯅ",
        "tell me about": "ꯑꯩꯉꯣꯟꯗ ꯍꯥꯌꯕꯤꯌꯨ",
        "i want to": "ꯑꯩ ꯄꯥꯝꯃꯤ",
        "can you": "ꯅꯍꯥꯛꯅ ꯉꯝꯕ",
        "this is": "ꯃꯁꯤ",
        "that is": "ꯃꯗꯨ",
    },
}
