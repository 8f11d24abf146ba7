"""Sample maturity assessment: 16 criteria in 4 zones of 4."""
from radar.config import CategoryDatum

CHART_SIZE = 700

CATEGORIES = [
    CategoryDatum("Qualitätssicherung", 0, 5),
    CategoryDatum("Struktur", 0, 5),
    CategoryDatum("Best Practices", 0, 5),
    CategoryDatum("Vorhandene\nRE-Tools", 0, 5),
    CategoryDatum("Integration &\nDokumentation", 0, 5),
    CategoryDatum("Entscheidungen &\nArbeitsplanung", 0, 5),
    CategoryDatum("Buildout Erstellung &\nSupport", 0, 5),
    CategoryDatum("Systematisierung\n& Einführung", 0, 5),
    CategoryDatum("Wissensdokumentation &\nWissensweitergabe", 0, 5),
    CategoryDatum("Kompetenzaufbau", 0, 5),
    CategoryDatum("Management-\nEngagement", 0, 5),
    CategoryDatum("Rollen &\nVerantwortlichkeiten", 3, 5),
    CategoryDatum("Prozessstellung &\ndokumentation", 4, 5),
    CategoryDatum("Schnittstellendefinition &\nZusammenarbeit", 4, 5),
    CategoryDatum("Projektcontrolling &\nKommunikation", 3, 5),
    CategoryDatum("Vorlagen/Templates", 2, 5),
]

ZONE_LABELS = [
    "Standards",
    "Tool Unterstützung",
    "Unternehmenskultur",
    "Prozesse",
]
