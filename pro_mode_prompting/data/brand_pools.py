# pro_mode_prompting/data/brand_pools.py
from types import MappingProxyType
from typing import Mapping

# Rules:
# - 1-2 accessible brands form the foundation of an outfit
# - at most 1 luxury brand is layered on as an accent
# - brands must feel worn, not advertised
BRAND_POOLS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "athletic_casual_base": ("Alo Yoga", "Nike", "Lululemon", "Outdoor Voices"),
    "sneakers_footwear": ("Adidas", "New Balance", "Common Projects", "UGG", "Golden Goose"),
    "denim_staples": ("Levi's", "Agolde", "Zara", "COS", "Everlane", "Madewell"),
    "luxury_accents": ("Bottega Veneta", "The Row", "Cartier", "Chanel", "Dior", "Hermès"),
    "accessories": ("Ray-Ban", "New Era", "Mejuri"),
    "feminine_dressy": ("Reformation", "Aritzia", "Free People", "& Other Stories"),
    "beauty_lifestyle": ("Glossier", "Rhode", "Goop", "Jenni Kayne", "The Ordinary"),
    "minimal_modern": ("COS", "Everlane", "Toteme", "Frankie Shop"),
    "scandi_seasonal": ("Ganni", "Arket", "Filippa K", "Acne Studios"),
})

BRAND_MIXING_RULES: Mapping[str, str] = MappingProxyType({
    "one_outfit_one_story": "Each outfit tells a single cohesive story",
    "one_luxury_hero_max": "Maximum one luxury piece per outfit",
    "brands_must_feel_worn": "Brands should feel worn, not advertised",
    "basics_make_luxury_believable": "Accessible basics make luxury details believable",
    "editorial_over_influencer": "Editorial restraint beats influencer excess",
})

# Equally valid foundation sets per category; one is picked at random per prompt
# so a batch does not repeat the same pairing.
ACCESSIBLE_CANDIDATES: Mapping[str, tuple[tuple[str, ...], ...]] = MappingProxyType({
    "WELLNESS": (("Alo Yoga",), ("Lululemon",), ("Alo Yoga", "Outdoor Voices")),
    "LUXURY": (("The Row", "Toteme"),),
    "LIFESTYLE": (
        ("Everlane", "COS"),
        ("Jenni Kayne", "Free People"),
        ("COS", "Toteme"),
        ("Madewell", "Everlane"),
    ),
    "FASHION": (("Reformation", "Aritzia"), ("Frankie Shop", "COS")),
    "TRAVEL": (("Zara", "COS"), ("Everlane", "Toteme")),
    "BEAUTY": (("Glossier", "Rhode"), ("Rhode", "The Ordinary"), ("Glossier",)),
    "SEASONAL_CHRISTMAS": (("Ganni", "& Other Stories"), ("COS", "Everlane"), ("Arket", "Toteme")),
    "DEFAULT": (("Everlane", "COS"),),
})

LUXURY_CANDIDATES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "WELLNESS": ("The Row",),
    "LUXURY": ("Bottega Veneta", "Chanel", "Hermès"),
    "LIFESTYLE": ("Bottega Veneta", "The Row"),
    "FASHION": ("Chanel", "Bottega Veneta", "The Row"),
    "TRAVEL": ("The Row", "Bottega Veneta"),
    "SEASONAL_CHRISTMAS": ("Cartier", "Bottega Veneta"),
    "DEFAULT": ("Bottega Veneta",),
})

LUXURY_SIGNAL_KEYWORDS: tuple[str, ...] = (
    "luxury",
    "luxurious",
    "sophisticated",
    "elevated",
    "chic",
    "elegant",
    "premium",
    "high-end",
    "refined",
)

# Labels recognised inside a captured outfit phrase, beyond the pools above.
_EXTRA_KNOWN_BRANDS: tuple[str, ...] = (
    "Gucci", "Prada", "Saint Laurent", "Celine", "Loewe", "Khaite", "Jacquemus",
    "Max Mara", "Miu Miu", "Sézane", "Skims", "Vince", "Mango", "Uniqlo", "H&M",
    "Veja", "Birkenstock", "Converse", "Levi's", "Tiffany",
)


def _collect_known_brands() -> tuple[str, ...]:
    seen: dict[str, str] = {}
    for pool in BRAND_POOLS.values():
        for brand in pool:
            seen.setdefault(brand.lower(), brand)
    for brand in _EXTRA_KNOWN_BRANDS:
        seen.setdefault(brand.lower(), brand)
    # Longest first, so "The Row" is tried before shorter names.
    return tuple(sorted(seen.values(), key=len, reverse=True))


KNOWN_BRANDS: tuple[str, ...] = _collect_known_brands()
