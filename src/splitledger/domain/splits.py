"""Split resolution: turning a split type and payer into stored percentages.

Preset names are payer-relative. "60-40" means the payer carries 60% and the
other party 40%, so the stored ``(percent_a, percent_b)`` pair flips when
party B paid.
"""

from splitledger.domain.entities import Party, SplitType
from splitledger.domain.errors import (
    ValidationError,
    percentages_must_sum,
    unknown_party,
    unknown_split_type,
)

PRESET_SPLITS: dict[tuple[SplitType, Party], tuple[int, int]] = {
    (SplitType.EQUAL, Party.A): (50, 50),
    (SplitType.EQUAL, Party.B): (50, 50),
    (SplitType.SIXTY_FORTY, Party.A): (60, 40),
    (SplitType.SIXTY_FORTY, Party.B): (40, 60),
    (SplitType.FORTY_SIXTY, Party.A): (40, 60),
    (SplitType.FORTY_SIXTY, Party.B): (60, 40),
    (SplitType.SEVENTY_THIRTY, Party.A): (70, 30),
    (SplitType.SEVENTY_THIRTY, Party.B): (30, 70),
    (SplitType.THIRTY_SEVENTY, Party.A): (30, 70),
    (SplitType.THIRTY_SEVENTY, Party.B): (70, 30),
}


def coerce_party(value: Party | str) -> Party:
    """Return the Party for a Party or its stored value.

    Raises:
        ValidationError: If value is not a recognized party
    """
    if isinstance(value, Party):
        return value
    try:
        return Party(value)
    except ValueError:
        raise ValidationError(unknown_party(value)) from None


def coerce_split_type(value: SplitType | str) -> SplitType:
    """Return the SplitType for a SplitType or its stored value.

    Raises:
        ValidationError: If value is not a recognized split type
    """
    if isinstance(value, SplitType):
        return value
    try:
        return SplitType(value)
    except ValueError:
        raise ValidationError(unknown_split_type(value)) from None


def validate_percentages(percent_a: object, percent_b: object) -> tuple[int, int]:
    """Check a percentage pair and return it as ints.

    Both values must be integers in [0, 100] and sum to exactly 100.

    Raises:
        ValidationError: If either value is out of range or the sum is not 100
    """
    for value in (percent_a, percent_b):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"Percentage must be a whole number, got '{value}'")
        if value < 0 or value > 100:
            raise ValidationError(f"Percentage must be between 0 and 100, got {value}")
    if percent_a + percent_b != 100:
        raise ValidationError(percentages_must_sum(percent_a, percent_b))
    return percent_a, percent_b


def resolve_split(
    split_type: SplitType | str,
    paid_by: Party | str,
    custom: tuple[int, int] | None = None,
) -> tuple[int, int]:
    """Resolve the stored (percent_a, percent_b) pair for a new expense.

    Args:
        split_type: Split type tag
        paid_by: Paying party
        custom: (percent_a, percent_b) supplied by the caller; required for
            custom splits and ignored otherwise

    Returns:
        Tuple of (percent_a, percent_b)

    Raises:
        ValidationError: If the split type or payer is unknown, or a custom
            split is missing or does not sum to 100
    """
    split_type = coerce_split_type(split_type)
    paid_by = coerce_party(paid_by)

    if split_type is SplitType.CUSTOM:
        if custom is None:
            raise ValidationError("Custom split requires both percentages")
        return validate_percentages(*custom)

    return PRESET_SPLITS[(split_type, paid_by)]
