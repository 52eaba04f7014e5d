"""Built-in medicinal property vocabulary.

Canonical tags are grouped by physiological category. A tag listed under more
than one category is still a single vocabulary entry.
"""

VOCABULARY_VERSION = "2025.1"

CANONICAL_TAGS_BY_CATEGORY: dict[str, list[str]] = {
    "immune": [
        "immune-support",
        "antiviral",
        "antibacterial",
        "antifungal",
        "antimicrobial",
        "antiparasitic",
    ],
    "inflammation_pain": [
        "anti-inflammatory",
        "pain-relief",
        "muscle-relaxant",
        "joint-support",
        "fever-reducer",
    ],
    "digestive": [
        "digestive-aid",
        "stomach-soothing",
        "nausea-relief",
        "appetite-stimulant",
        "liver-support",
        "laxative",
        "antispasmodic",
        "purgative",
        "emetic",
        "carminative",
        "cholagogue",
        "stomachic",
        "antiemetic",
    ],
    "respiratory": [
        "respiratory-support",
        "cough-suppressant",
        "expectorant",
        "bronchodilator",
        "decongestant",
        "asthma-relief",
    ],
    "cardiovascular": [
        "heart-support",
        "circulation-improvement",
        "blood-pressure-support",
        "cholesterol-support",
        "blood-thinner",
    ],
    "nervous": [
        "stress-relief",
        "anxiety-relief",
        "sleep-aid",
        "mood-enhancer",
        "memory-support",
        "neuroprotective",
        "sedative",
        "stimulant",
    ],
    "consciousness": [
        "psychedelic",
        "hallucinogenic",
        "vision-enhancing",
        "consciousness-expanding",
        "spiritual-aid",
        "meditation-support",
        "dream-enhancing",
        "lucid-dreaming",
        "shamanic-aid",
        "entheogenic",
        "mystical-experience",
        "frequency-raising",
        "vibration-enhancing",
        "energy-clearing",
        "chakra-balancing",
        "third-eye-activation",
        "crown-chakra-stimulant",
    ],
    "skin_wound": [
        "skin-soothing",
        "wound-healing",
        "antiseptic",
        "moisturizing",
        "anti-aging",
        "anti-acne",
        "scar-reduction",
    ],
    "general_health": [
        "antioxidant",
        "detoxification",
        "energy-boost",
        "adaptogenic",
        "tonic",
        "immunomodulator",
    ],
    "womens_health": [
        "menstrual-support",
        "hormone-balance",
        "pregnancy-support",
        "lactation-support",
        "uterine-tonic",
    ],
    "urinary": [
        "diuretic",
        "kidney-support",
        "bladder-support",
        "urinary-tract-support",
        "kidney-stone-prevention",
    ],
    "metabolic": [
        "blood-sugar-support",
        "weight-management",
        "metabolism-boost",
        "thyroid-support",
        "diabetes-support",
    ],
    "antiparasitic": [
        "antiparasitic",
        "anthelmintic",
        "vermifuge",
        "anti-malarial",
        "anti-protozoal",
        "anti-helminthic",
        "taenifuge",
        "ascaricide",
        "nematicide",
        "anti-amebic",
        "anti-giardial",
    ],
    "bone_joint": [
        "bone-strengthening",
        "joint-lubrication",
        "cartilage-support",
        "osteoporosis-prevention",
    ],
    "eye": [
        "eye-health",
        "vision-support",
        "cataract-prevention",
        "macular-degeneration-support",
    ],
    "dental": [
        "dental-health",
        "gum-support",
        "tooth-strengthening",
        "mouth-ulcer-relief",
    ],
    "cellular": [
        "anti-cancer",
        "tumor-inhibiting",
        "cellular-protection",
        "dna-protection",
    ],
    "reproductive": [
        "fertility-support",
        "libido-enhancer",
        "prostate-support",
        "menopause-support",
    ],
    "allergy": [
        "anti-allergic",
        "histamine-reducer",
        "allergy-relief",
        "hay-fever-support",
    ],
    "traditional": [
        "galactagogue",
        "emmenagogue",
        "abortifacient",
        "contraceptive",
        "aphrodisiac",
        "astringent",
        "demulcent",
        "expectorant",
        "rubefacient",
        "vesicant",
        "caustic",
        "nervine",
        "alterative",
        "depurative",
        "sialagogue",
        "sudorific",
        "diaphoretic",
    ],
}

NORMALIZATION_RULES: dict[str, str] = {
    # Immune
    "immune booster": "immune-support",
    "immune boosting": "immune-support",
    "immune system support": "immune-support",
    "immunity": "immune-support",
    "immune enhancer": "immune-support",
    "immunostimulant": "immune-support",
    # Anti-inflammatory
    "anti inflammatory": "anti-inflammatory",
    "antiinflammatory": "anti-inflammatory",
    "inflammation reducer": "anti-inflammatory",
    "reduces inflammation": "anti-inflammatory",
    # Pain
    "pain killer": "pain-relief",
    "painkiller": "pain-relief",
    "analgesic": "pain-relief",
    "pain management": "pain-relief",
    "relieves pain": "pain-relief",
    # Digestive
    "digestion": "digestive-aid",
    "digestive support": "digestive-aid",
    "stomach aid": "stomach-soothing",
    "gastric support": "stomach-soothing",
    "belly soother": "stomach-soothing",
    # Stress and anxiety
    "stress reducer": "stress-relief",
    "calming": "stress-relief",
    "relaxing": "stress-relief",
    "anxiolytic": "anxiety-relief",
    "anti-anxiety": "anxiety-relief",
    "anxiety reducer": "anxiety-relief",
    # Sleep
    "sleep support": "sleep-aid",
    "insomnia relief": "sleep-aid",
    "sleep inducer": "sleep-aid",
    # Skin
    "skin care": "skin-soothing",
    "dermatological": "skin-soothing",
    "topical healing": "skin-soothing",
    "wound care": "wound-healing",
    "cuts and scrapes": "wound-healing",
    # Respiratory
    "lung support": "respiratory-support",
    "breathing aid": "respiratory-support",
    "respiratory aid": "respiratory-support",
    "cold relief": "respiratory-support",
    "flu relief": "respiratory-support",
    # Antioxidant
    "anti-oxidant": "antioxidant",
    "free radical scavenger": "antioxidant",
    "oxidative stress": "antioxidant",
    # Energy
    "energizing": "energy-boost",
    "vitality": "energy-boost",
    "stamina": "energy-boost",
    # Memory
    "cognitive support": "memory-support",
    "brain health": "memory-support",
    "mental clarity": "memory-support",
    "focus enhancement": "memory-support",
    # Antimicrobial spellings
    "antimicrobial": "antimicrobial",
    "anti-microbial": "antimicrobial",
    "antibacterial": "antibacterial",
    "anti-bacterial": "antibacterial",
    "antiviral": "antiviral",
    "anti-viral": "antiviral",
    "antifungal": "antifungal",
    "anti-fungal": "antifungal",
    # Anti-parasitic
    "anti parasitic": "antiparasitic",
    "antiparasitic": "antiparasitic",
    "parasite killer": "antiparasitic",
    "worm killer": "anthelmintic",
    "anthelmintic": "anthelmintic",
    "vermifuge": "vermifuge",
    "dewormer": "anthelmintic",
    "parasite treatment": "antiparasitic",
    "tapeworm killer": "taenifuge",
    "roundworm killer": "ascaricide",
    "threadworm killer": "nematicide",
    # Purgative and emetic
    "purgative": "purgative",
    "laxative": "laxative",
    "purging": "purgative",
    "emetic": "emetic",
    "vomiting": "emetic",
    "carminative": "carminative",
    "gas relief": "carminative",
    "cholagogue": "cholagogue",
    "bile stimulant": "cholagogue",
    "stomachic": "stomachic",
    "stomach tonic": "stomachic",
    "antiemetic": "antiemetic",
    "anti vomiting": "antiemetic",
    # Traditional properties
    "galactagogue": "galactagogue",
    "milk production": "galactagogue",
    "emmenagogue": "emmenagogue",
    "menstrual stimulant": "emmenagogue",
    "abortifacient": "abortifacient",
    "contraceptive": "contraceptive",
    "aphrodisiac": "aphrodisiac",
    "astringent": "astringent",
    "demulcent": "demulcent",
    "soothing": "demulcent",
    "expectorant": "expectorant",
    "mucus expelling": "expectorant",
    "rubefacient": "rubefacient",
    "skin reddening": "rubefacient",
    "vesicant": "vesicant",
    "blistering": "vesicant",
    "caustic": "caustic",
    "burning": "caustic",
    "nervine": "nervine",
    "nerve tonic": "nervine",
    "alterative": "alterative",
    "blood purifier": "alterative",
    "depurative": "depurative",
    "sialagogue": "sialagogue",
    "saliva stimulant": "sialagogue",
    "sudorific": "sudorific",
    "sweat inducing": "sudorific",
    "diaphoretic": "diaphoretic",
    "fever breaking": "diaphoretic",
}

# Order is the tie-break: the first keyword found as a substring wins.
KEYWORD_HEURISTICS: list[tuple[str, str]] = [
    ("immune", "immune-support"),
    ("inflammat", "anti-inflammatory"),
    ("pain", "pain-relief"),
    ("digest", "digestive-aid"),
    ("stomach", "stomach-soothing"),
    ("stress", "stress-relief"),
    ("anxiety", "anxiety-relief"),
    ("sleep", "sleep-aid"),
    ("skin", "skin-soothing"),
    ("wound", "wound-healing"),
    ("respiratory", "respiratory-support"),
    ("lung", "respiratory-support"),
    ("cough", "cough-suppressant"),
    ("heart", "heart-support"),
    ("circulation", "circulation-improvement"),
    ("memory", "memory-support"),
    ("brain", "memory-support"),
    ("energy", "energy-boost"),
    ("antioxidant", "antioxidant"),
    ("detox", "detoxification"),
    ("liver", "liver-support"),
    ("kidney", "kidney-support"),
    ("blood", "circulation-improvement"),
]

PREPARATION_METHODS: list[str] = [
    "tea",
    "tincture",
    "poultice",
    "salve",
    "smoke",
    "raw",
    "decoction",
    "infusion",
    "powder",
    "capsule",
    "essential-oil",
    "bath",
    "compress",
    "syrup",
    "juice",
    "extract",
    "ointment",
    "cream",
    "liniment",
    "fomentation",
    "steam-inhalation",
    "gargle",
    "enema",
    "suppository",
    "chew",
    "snuff",
]

PLANT_PARTS: list[str] = [
    "leaves",
    "roots",
    "bark",
    "flowers",
    "fruits",
    "seeds",
    "stems",
    "rhizome",
    "bulb",
    "whole-plant",
    "sap",
    "resin",
    "berries",
    "twigs",
    "buds",
    "shoots",
    "tubers",
    "corms",
    "needles",
    "cones",
    "pods",
    "husks",
    "shells",
    "kernels",
    "pulp",
    "juice",
    "latex",
    "gum",
]
