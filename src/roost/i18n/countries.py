"""Fixed country tables used by locale negotiation."""

# Country code used when neither the request nor the edge tells us
UNKNOWN_COUNTRY = "zz"

# Spanish-speaking Latin American countries served es-419 content
ES_419_COUNTRIES = frozenset(
    {
        "ar",  # Argentina
        "bo",  # Bolivia
        "cl",  # Chile
        "co",  # Colombia
        "cr",  # Costa Rica
        "cu",  # Cuba
        "do",  # Dominican Republic
        "ec",  # Ecuador
        "sv",  # El Salvador
        "gt",  # Guatemala
        "hn",  # Honduras
        "mx",  # Mexico
        "ni",  # Nicaragua
        "pa",  # Panama
        "py",  # Paraguay
        "pe",  # Peru
        "pr",  # Puerto Rico
        "uy",  # Uruguay
        "ve",  # Venezuela
    }
)

# "en" readers here get en-{country}, then en-gb, before plain "en"
EN_GB_COUNTRIES = frozenset({"AU", "CA", "IN", "MY"})

# (hl, country) -> regional locale, checked before generic negotiation
REGIONAL_OVERRIDES: dict[tuple[str, str], str] = {
    ("fr", "CA"): "fr-ca",
    ("fr", "FR"): "fr-fr",
    ("pt", "BR"): "pt-br",
    ("pt", "PT"): "pt-pt",
}


def is_es_419_country(country: str | None) -> bool:
    """Return True for Latin American countries (case-insensitive)."""
    return bool(country) and country.lower() in ES_419_COUNTRIES
