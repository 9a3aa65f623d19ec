"""Party name parsing."""

from splitledger.domain.entities import Party

PARTY_ALIASES = {
    "a": Party.A,
    "b": Party.B,
    Party.A.value: Party.A,
    Party.B.value: Party.B,
}


def parse_party(value: str) -> Party:
    """Parse a party name or the letters a/b, case-insensitively.

    Raises:
        ValueError: If the value names neither party
    """
    key = (value or "").strip().lower()
    if key not in PARTY_ALIASES:
        raise ValueError(f"Unknown party '{value}'. Use {Party.A.value} (a) or {Party.B.value} (b)")
    return PARTY_ALIASES[key]
