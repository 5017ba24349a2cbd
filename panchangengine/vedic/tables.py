"""Bilingual lookup tables for tithi, nakshatra, yoga and Shiv Vaas abodes."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from ..utils.i18n import Bilingual, bilingual_table

__all__ = [
    "NAKSHATRAS",
    "SHIV_VAAS_LOCATIONS",
    "ShivVaasLocation",
    "TITHIS",
    "YOGAS",
]


NAKSHATRAS: Final[Sequence[Bilingual]] = bilingual_table(
    (
        ("अश्विनी", "Ashwini"),
        ("भरणी", "Bharani"),
        ("कृत्तिका", "Krittika"),
        ("रोहिणी", "Rohini"),
        ("मृगशीर्षा", "Mrigashirsha"),
        ("आर्द्रा", "Ardra"),
        ("पुनर्वसु", "Punarvasu"),
        ("पुष्य", "Pushya"),
        ("आश्लेषा", "Ashlesha"),
        ("मघा", "Magha"),
        ("पूर्व फाल्गुनी", "Purva Phalguni"),
        ("उत्तर फाल्गुनी", "Uttara Phalguni"),
        ("हस्त", "Hasta"),
        ("चित्रा", "Chitra"),
        ("स्वाती", "Swati"),
        ("विशाखा", "Vishakha"),
        ("अनुराधा", "Anuradha"),
        ("ज्येष्ठा", "Jyeshtha"),
        ("मूल", "Mula"),
        ("पूर्वाषाढ़ा", "Purva Ashadha"),
        ("उत्तराषाढ़ा", "Uttara Ashadha"),
        ("श्रवण", "Shravana"),
        ("धनिष्ठा", "Dhanishta"),
        ("शतभिषा", "Shatabhisha"),
        ("पूर्वभाद्रपद", "Purva Bhadrapada"),
        ("उत्तरभाद्रपद", "Uttara Bhadrapada"),
        ("रेवती", "Revati"),
    )
)

# Index 14 covers both Purnima (bright half) and Amavasya (dark half).
TITHIS: Final[Sequence[Bilingual]] = bilingual_table(
    (
        ("प्रतिपदा", "Pratipada"),
        ("द्वितीया", "Dwitiya"),
        ("तृतीया", "Tritiya"),
        ("चतुर्थी", "Chaturthi"),
        ("पंचमी", "Panchami"),
        ("षष्ठी", "Shashthi"),
        ("सप्तमी", "Saptami"),
        ("अष्टमी", "Ashtami"),
        ("नवमी", "Navami"),
        ("दशमी", "Dashami"),
        ("एकादशी", "Ekadashi"),
        ("द्वादशी", "Dwadashi"),
        ("त्रयोदशी", "Trayodashi"),
        ("चतुर्दशी", "Chaturdashi"),
        ("पूर्णिमा/अमावस्या", "Purnima/Amavasya"),
    )
)

YOGAS: Final[Sequence[Bilingual]] = bilingual_table(
    (
        ("विष्कुम्भ", "Vishkumbha"),
        ("प्रीति", "Preeti"),
        ("आयुष्मान", "Ayushman"),
        ("सौभाग्य", "Saubhagya"),
        ("शोभन", "Shobhana"),
        ("अतिगण्ड", "Atiganda"),
        ("सुकर्मा", "Sukarma"),
        ("धृति", "Dhriti"),
        ("शूल", "Shoola"),
        ("गण्ड", "Ganda"),
        ("वृद्धि", "Vriddhi"),
        ("ध्रुव", "Dhruva"),
        ("व्याघात", "Vyaghata"),
        ("हर्षण", "Harshana"),
        ("वज्र", "Vajra"),
        ("सिद्धि", "Siddhi"),
        ("व्यतीपात", "Vyatipata"),
        ("वरीयान", "Variyan"),
        ("परिघ", "Parigha"),
        ("शिव", "Shiva"),
        ("सिद्ध", "Siddha"),
        ("साध्य", "Sadhya"),
        ("शुभ", "Shubha"),
        ("शुक्ल", "Shukla"),
        ("ब्रह्म", "Brahma"),
        ("इन्द्र", "Indra"),
        ("वैधृति", "Vaidhriti"),
    )
)


@dataclass(frozen=True)
class ShivVaasLocation:
    """One of the seven symbolic abodes of Shiva."""

    index: int
    name: Bilingual
    significance: Bilingual
    activities: tuple[Bilingual, ...]
    is_auspicious: bool = True

    def observances(self, language: str | None = None) -> tuple[str, ...]:
        return tuple(activity.get(language) for activity in self.activities)

    def to_payload(self) -> dict[str, object]:
        return {
            "index": self.index,
            "name": self.name.to_payload(),
            "significance": self.significance.to_payload(),
            "activities": [activity.to_payload() for activity in self.activities],
            "is_auspicious": self.is_auspicious,
        }


_SHIV_VAAS_DATA: Final[tuple[tuple[tuple[str, str], tuple[str, str], tuple[tuple[str, str], ...]], ...]] = (
    (
        ("कैलाश", "Kailash"),
        ("भगवान शिव कैलाश में—अत्यंत शुभ", "Lord Shiva at Mount Kailash—very auspicious"),
        (
            ("सभी शुभ कार्य", "All auspicious activities"),
            ("आध्यात्मिक साधना", "Spiritual practices"),
            ("नई शुरुआत", "New beginnings"),
        ),
    ),
    (
        ("गौरी सानिध्य", "Gauri Sannidhya"),
        ("शिव गौरी के साथ—विवाह और पारिवारिक कार्यों के लिए अच्छा", "Shiva with Gauri—good for marriage & family"),
        (
            ("विवाह समारोह", "Marriage ceremonies"),
            ("पारिवारिक कार्य", "Family functions"),
            ("रिश्तों के मामले", "Relationship matters"),
        ),
    ),
    (
        ("वृषभ", "Vrishabh"),
        ("शिव नंदी पर सवार—यात्रा और नए उपक्रमों के लिए अच्छा", "Shiva riding Nandi—good for travel & new ventures"),
        (
            ("यात्रा", "Travel"),
            ("नए उपक्रम", "New ventures"),
            ("वाहन खरीदारी", "Vehicle purchase"),
        ),
    ),
    (
        ("सभा", "Sabha"),
        ("शिव सभा में—बैठकों और कानूनी मामलों के लिए अच्छा", "Shiva in assembly—good for meetings & legal matters"),
        (
            ("व्यापारिक बैठकें", "Business meetings"),
            ("कानूनी मामले", "Legal matters"),
            ("न्यायालयी कार्य", "Court cases"),
        ),
    ),
    (
        ("भोजन", "Bhojan"),
        ("शिव भोजन कर रहे हैं—भोजन संस्कारों के लिए अच्छा", "Shiva having meal—good for food ceremonies"),
        (
            ("भोजन संस्कार", "Food ceremonies"),
            ("अन्नप्राशन", "Annaprashan"),
            ("भोज आयोजन", "Feast organizing"),
        ),
    ),
    (
        ("क्रीड़ा", "Krida"),
        ("शिव खेल में—मनोरंजन और रचनात्मकता के लिए अच्छा", "Shiva at play—good for recreation & creativity"),
        (
            ("रचनात्मक कार्य", "Creative work"),
            ("मनोरंजन", "Recreation"),
            ("कला और शिल्प", "Arts and crafts"),
        ),
    ),
    (
        ("श्मशान", "Shmashaan"),
        ("शिव श्मशान में—नए उपक्रमों से बचें", "Shiva at cremation ground—avoid new ventures"),
        (
            ("नई शुरुआत से बचें", "Avoid new beginnings"),
            ("आध्यात्मिक चिंतन", "Spiritual contemplation"),
            ("ध्यान", "Meditation"),
        ),
    ),
)

_CREMATION_GROUND_INDEX: Final[int] = 7

SHIV_VAAS_LOCATIONS: Final[Mapping[int, ShivVaasLocation]] = MappingProxyType(
    {
        idx: ShivVaasLocation(
            index=idx,
            name=Bilingual(*name),
            significance=Bilingual(*significance),
            activities=bilingual_table(activities),
            is_auspicious=idx != _CREMATION_GROUND_INDEX,
        )
        for idx, (name, significance, activities) in enumerate(_SHIV_VAAS_DATA, start=1)
    }
)
