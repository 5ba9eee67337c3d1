"""
Medical speciality synonyms.

Maps canonical clinical terms, as they tend to appear in portfolio
specialities, to the lay phrases people actually type into the search box.
Hand-curated; changes ship with a deployment.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from app.utils.text import normalize

DEFAULT_SYNONYMS: dict[str, list[str]] = {
    "pediatrics": ["child care", "children", "infants", "adolescent medicine", "paediatrics"],
    "paediatrics": ["child care", "children", "infants", "adolescent medicine", "pediatrics"],
    "geriatrics": ["elderly care", "senior care", "aging"],
    "cardiology": ["heart", "cardiac", "cardiovascular disease"],
    "orthopedics": [
        "bone",
        "joint",
        "musculoskeletal",
        "knee replacement",
        "hip replacement",
        "orthopaedics",
    ],
    "orthopaedics": [
        "bone",
        "joint",
        "musculoskeletal",
        "knee replacement",
        "hip replacement",
        "orthopedics",
    ],
    "psychiatry": ["mental health", "counseling", "psychological care"],
    "dermatology": ["skin care", "skin disease", "rashes"],
    "oncology": ["cancer care", "tumor", "malignancy"],
    "urology": ["urinary tract", "bladder", "kidney"],
    "endocrinology": ["hormone", "diabetes management", "metabolism"],
    "pulmonology": ["lung", "respiratory", "breathing"],
    "gastroenterology": ["stomach", "intestine", "digestive system"],
    "rheumatology": ["joint disease", "arthritis", "autoimmune"],
    "nephrology": ["kidney", "renal", "kidney disease"],
    "radiology": ["imaging", "x-ray", "ultrasound"],
    "surgery": ["operation", "surgical care", "minimally invasive surgery"],
    "trauma": ["fracture care", "injury", "emergency"],
    "sports": ["sports medicine", "athlete care", "injury prevention"],
    "diabetes": ["chronic disease management", "blood sugar", "insulin"],
    "hypertension": ["blood pressure", "heart health", "chronic disease"],
}


@dataclass(frozen=True)
class SynonymDictionary:
    entries: Mapping[str, tuple[str, ...]]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, list[str]]) -> "SynonymDictionary":
        entries = {
            normalize(term): tuple(normalize(phrase) for phrase in phrases)
            for term, phrases in mapping.items()
        }
        return cls(entries=MappingProxyType(entries))

    @classmethod
    def default(cls) -> "SynonymDictionary":
        return cls.from_mapping(DEFAULT_SYNONYMS)

    @property
    def canonical_terms(self) -> tuple[str, ...]:
        return tuple(self.entries)

    def synonyms_of(self, term: str) -> list[str]:
        """Synonyms for a canonical term; empty for unknown terms."""
        return list(self.entries.get(normalize(term), ()))

    def canonical_terms_for(self, phrase: str) -> list[str]:
        # Small dictionary: a scan is cheaper to maintain than a reverse index.
        wanted = normalize(phrase)
        return [term for term, phrases in self.entries.items() if wanted in phrases]

    def __len__(self) -> int:
        return len(self.entries)
