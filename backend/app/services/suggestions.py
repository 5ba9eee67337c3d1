"""Popular searches shown on an empty search page."""

SEARCH_SUGGESTIONS: dict[str, list[str]] = {
    "Specialties": ["Cardiology", "Dermatology", "Orthopedics", "Pediatrics"],
    "Common Ailments": ["Diabetes", "Hypertension", "Arthritis", "Asthma"],
    "Procedures": ["Joint Replacement", "Skin Treatment", "Heart Surgery", "Physical Therapy"],
}
