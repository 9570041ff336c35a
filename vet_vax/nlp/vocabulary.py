"""
VetVax — Словники та патерни

Статичні словники для екстракції вакцинацій з чеських ветеринарних записів:
- seed-терміни вакцинації (основи слів)
- фармацевтичні бренди та їх відображення
- бібліотеки регулярних виразів для типів та комбінацій вакцин
- таблиця нормалізації назв
- лексикон заперечень
- фільтри та правила очистки рядків рахунку
"""

import re
from typing import Callable, Dict, List, Tuple, Union


# =============================================================================
# SEED TERMS
# =============================================================================

# Основи слів, що запускають розгляд запису як вакцинаційного
VACCINATION_PATTERN_SEEDS = [
    "vakcinac",
    "očkován",
    "vakcinov",
    "imunizac",
    "inject",
    "aplikac",
]

# Ключові терміни для нечіткого пошуку (з опечатками)
FUZZY_VACCINATION_TERMS = ["vakcinace", "očkování", "imunizace", "injection"]

# Маркери заперечення у вікні навколо seed-терміну
NEGATION_TERMS = [
    "žádné",
    "žádná",
    "bez",
    "nebyla",
    "nebyl",
    "nebyly",
    "ne ",
    "not",
    "no ",
    "none",
    "without",
]


# =============================================================================
# BRANDS
# =============================================================================

# Відомі виробники та серії вакцин
PHARMA_COMPANIES = [
    "nobivac",
    "biocan",
    "canigen",
    "feligen",
    "biofel",
    "versican",
    "purevax",
    "pestorin",
    "eurican",
    "tetradog",
    "merial",
    "virbac",
    "pfizer",
    "msd",
    "bioveta",
    "biomune",
    "galaxy",
    "fel-o-vax",
    "duramune",
    "recombitek",
    "vanguard",
    "spectra",
]

# Бренди для розкладу складених назв: (токен, відображення)
BRAND_PATTERNS: List[Tuple[str, str]] = [
    ("nobivac", "Nobivac"),
    ("biocan", "Biocan"),
    ("canigen", "Canigen"),
    ("feligen", "Feligen"),
    ("merial", "Merial"),
    ("virbac", "Virbac"),
]


# =============================================================================
# REGEX LIBRARIES
# =============================================================================

VACCINE_TYPE_PATTERNS = [
    re.compile(r'\b(dhpp?i?[+/]?l?4?r?)\b', re.IGNORECASE),     # комбінації, R = сказ
    re.compile(r'\b(rabies|vzteklina|lyssa)\b', re.IGNORECASE),
    re.compile(r'\b(trio|tricat|tetracat)\b', re.IGNORECASE),
    re.compile(r'\b(puppy|štěňátka|junior)\b', re.IGNORECASE),
    re.compile(r'\b(parvo|distemper|parvovir)\b', re.IGNORECASE),
    re.compile(r'\b(hepatitis|adenovir|cav)\b', re.IGNORECASE),
    re.compile(r'\b(parainfluenza|pi)\b', re.IGNORECASE),
    re.compile(r'\b(leptospira|l4|lepto)\b', re.IGNORECASE),
    re.compile(r'\b(bordetella|kennel\s*cough|bb)\b', re.IGNORECASE),
    re.compile(r'\b(calici|fvr|fcv)\b', re.IGNORECASE),         # кішки
    re.compile(r'\b(panleuko|felv|fiv)\b', re.IGNORECASE),
    re.compile(r'\b(corona|cpv)\b', re.IGNORECASE),
    re.compile(r'\b(bivalent|multivalent)\b', re.IGNORECASE),
]

# Складені назви з фіксованою впевненістю
COMPOUND_VACCINE_PATTERNS: List[Tuple[re.Pattern, float]] = [
    (re.compile(r'nobivac[\s-]+(trio|dhpp?i?[+/]?l?4?)', re.IGNORECASE), 0.9),
    (re.compile(r'biocan[\s-]+(novel|dhpp?i?[+/]?l?4?)', re.IGNORECASE), 0.9),
    (re.compile(r'canigen[\s-]+(ddpp?i?[+/]?l?4?)', re.IGNORECASE), 0.9),
    (re.compile(r'feligen[\s-]+(crp?)', re.IGNORECASE), 0.85),
    (re.compile(r'(dhpp?i?[+/]?l?4?)', re.IGNORECASE), 0.8),
    (re.compile(r'(rabies|vzteklina)', re.IGNORECASE), 0.9),
]


# =============================================================================
# NORMALIZATION MAP
# =============================================================================

VACCINE_NORMALIZATION_MAP: Dict[str, str] = {
    # Базові типи
    "tricat": "Tricat",
    "trio": "Trio",
    "dhppi": "DHPPI",
    "dhpp": "DHPP",
    "dhppil4": "DHPPI+L4",
    "dhppi+l4": "DHPPI+L4",
    "dhppi/l4": "DHPPI+L4",
    "dhppi/l4r": "DHPPI+L4R",
    "rabies": "Rabies",
    "vzteklina": "Vzteklina (Rabies)",
    "puppy": "Puppy",
    "štěňátka": "Štěňátka (Puppy)",
    "l4": "Leptospira L4",
    "ddppi": "DDPPI",
    "crp": "CRP",
    "pch": "PCH",
    "mormyx": "Mormyx",

    # Nobivac
    "nobivac trio": "Nobivac Trio",
    "nobivac tricat trio": "Nobivac Tricat Trio",
    "nobivac dhppi": "Nobivac DHPPI",
    "nobivac dhpp": "Nobivac DHPP",
    "nobivac dhppi+l4": "Nobivac DHPPI+L4",
    "nobivac dhppil4": "Nobivac DHPPI+L4",
    "nobivac l4": "Nobivac L4",
    "nobivac rabies": "Nobivac Rabies",
    "nobivac rl": "Nobivac RL",
    "nobivac dp plus": "Nobivac DP Plus",

    # Biocan
    "biocan novel": "Biocan Novel",
    "biocan novel dhppi": "Biocan Novel DHPPI",
    "biocan novel dhppi/l4": "Biocan Novel DHPPI/L4",
    "biocan novel dhppi/l4r": "Biocan Novel DHPPI/L4R",
    "biocan novel pi/l4": "Biocan Novel Pi/L4",
    "biocan dhppi": "Biocan DHPPI",
    "biocan dhppi/l4": "Biocan DHPPI/L4",
    "biocan l": "Biocan L",
    "biocan t": "Biocan T",

    # Canigen
    "canigen ddppi": "Canigen DDPPI",
    "canigen ddppi/l": "Canigen DDPPI/L",
    "canigen dhppi": "Canigen DHPPI",
    "canigen dhppi/l": "Canigen DHPPI/L",

    # Feligen & Biofel
    "feligen crp": "Feligen CRP",
    "biofel pch": "Biofel PCH",

    # Інші бренди
    "versican plus dhppi": "Versican Plus DHPPI",
    "versican plus dhppi/l4": "Versican Plus DHPPI/L4",
    "versican plus dhppi/l4r": "Versican Plus DHPPI/L4R",
    "purevax rcpch felv": "Purevax RCPCh FeLV",
    "pestorin mormyx": "Pestorin Mormyx",

    # Додаткові типи
    "tetracat": "Tetracat",
    "lyssa": "Lyssa (Rabies)",
    "lepto": "Leptospira",
    "pi": "Parainfluenza",
    "cav": "Canine Adenovirus",
    "bb": "Bordetella",
    "fcv": "Feline Calicivirus",
    "fvr": "Feline Viral Rhinotracheitis",
    "felv": "Feline Leukemia",
    "fiv": "Feline Immunodeficiency",
    "panleuko": "Panleukopenia",
    "cpv": "Canine Parvovirus",

    "bioveta dhppi": "Bioveta DHPPI",
    "galaxy dhpp": "Galaxy DHPP",
    "duramune dhpp": "Duramune DHPP",
    "vanguard plus": "Vanguard Plus",
    "recombitek c4": "Recombitek C4",
}


# =============================================================================
# BILLING ITEMS
# =============================================================================

# Ознака вакцинаційного візиту у звіті чи рахунку
BILLING_VISIT_KEYWORD = "vakcinac"

# Токени, що вказують на вакцинний препарат у рядку рахунку
BILLING_VACCINE_TOKENS = [
    # бренди
    "biocan", "nobivac", "canigen", "eurican", "tetradog",
    "biofel", "feligen", "versican", "purevax", "pestorin",
    # типи
    "dhppi", "dhpp", "crp", "pch", "tricat", "trio", "rabies", "l4", "mormyx",
    # дозування
    "dávka", "inj",
]

# Категорії, що не є вакцинами (матеріал, обстеження, корм)
BILLING_EXCLUDED_TOKENS = [
    "spotřební",
    "materiál",
    "klinické",
    "vyšetření",
    "generické",
    "jídlo",
]

# Впорядковані правила очистки назви з рядка рахунку
BILLING_CLEANUP_RULES: List[Tuple[re.Pattern, str]] = [
    (re.compile(r'\s*\([^)]*\)\s*$'), ""),                          # код продукту в дужках
    (re.compile(r'\s*-\s*\d+\s*dávka.*$', re.IGNORECASE), ""),        # "- 1 dávka"
    (re.compile(r'\s*-\s*počet:.*$', re.IGNORECASE), ""),             # "- počet: 1.00"
    (re.compile(r'\s*\d+x?\d*\s*dávka.*$', re.IGNORECASE), ""),       # дозування
    (re.compile(r'\s*\d+x?\d*\s*ml.*$', re.IGNORECASE), ""),          # об'єм
    (re.compile(r'\s*\d+x?\d*\s*ds\b.*$', re.IGNORECASE), ""),        # упаковка доз
    (re.compile(r'\s*a\.u\.v\.\s*inj.*$', re.IGNORECASE), ""),        # "a.u.v. inj"
    (re.compile(r'\s*lyofilizát.*$', re.IGNORECASE), ""),             # "lyofilizát a rozpouštědlo"
    (re.compile(r'\s*inj\s*sic\s*$', re.IGNORECASE), ""),             # "inj sic"
    (re.compile(r'\s+inj\.?\s*$', re.IGNORECASE), ""),                # хвостовий "inj"
]

# Уніфікація написання поширених комбінацій після очистки
BILLING_NAME_REWRITES: List[Tuple[re.Pattern, Union[str, Callable[[re.Match], str]]]] = [
    (re.compile(r'dhppi/l4(r?)', re.IGNORECASE), lambda m: "DHPPI/L4" + m.group(1).upper()),
    (re.compile(r'dhppi/l(?!4)', re.IGNORECASE), "DHPPI/L"),
    (re.compile(r'dhppi\+l4', re.IGNORECASE), "DHPPI+L4"),
    (re.compile(r'novel\s+dhppi', re.IGNORECASE), "Novel DHPPI"),
    (re.compile(r'tricat\s+trio', re.IGNORECASE), "Tricat Trio"),
    (re.compile(r'plus\s+dhppi', re.IGNORECASE), "Plus DHPPI"),
]

# Мінімальна довжина очищеної назви
BILLING_MIN_NAME_LENGTH = 4


# =============================================================================
# LEGACY SECTIONS
# =============================================================================

ANAMNESIS_SECTION_KEYS = ("anamneza", "anamnéza", "anamnesis")
THERAPY_SECTION_KEYS = ("terapie", "therapy")

# Ознака вакцинації в анамнезі
ANAMNESIS_VACCINATION_KEYWORDS = ("očkov",)

# Ключові слова препаратів у розділі терапії
THERAPY_VACCINE_KEYWORDS = [
    "eurican",
    "nobivac",
    "biocan",
    "tetradog",
    "canigen",
    "dhppi",
    "cestal",
    "drontal",
]


# =============================================================================
# FREE TEXT
# =============================================================================

UNSPECIFIED_VACCINE_NAME = "unspecified vaccination"
