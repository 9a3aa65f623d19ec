"""Category inference from expense descriptions."""

from splitledger.domain.entities import Category

# First matching rule wins; a description like "food delivery by uber"
# is groceries, not transport.
CATEGORY_RULES: tuple[tuple[Category, tuple[str, ...]], ...] = (
    (Category.RENT, ("rent",)),
    (Category.ELECTRICITY, ("electric", "power")),
    (Category.WIFI, ("wifi", "internet")),
    (Category.WATER, ("water",)),
    (Category.COOK, ("cook", "maid")),
    (Category.GROCERIES, ("grocer", "food", "meal")),
    (Category.TRANSPORT, ("transport", "uber", "auto")),
    (Category.MEDICAL, ("medical", "doctor", "medicine")),
)

CATEGORY_ICONS: dict[Category, str] = {
    Category.RENT: "🏠",
    Category.ELECTRICITY: "⚡",
    Category.WIFI: "🌐",
    Category.WATER: "💧",
    Category.COOK: "🍳",
    Category.GROCERIES: "🛒",
    Category.TRANSPORT: "🚗",
    Category.MEDICAL: "🏥",
    Category.OTHER: "💰",
}


def categorize(description: str) -> Category:
    """Infer a category from a description.

    Args:
        description: Free-text expense description

    Returns:
        The category of the first keyword rule that matches, or OTHER
    """
    text = description.lower()
    for category, keywords in CATEGORY_RULES:
        if any(keyword in text for keyword in keywords):
            return category
    return Category.OTHER


def category_icon(category: Category | str) -> str:
    """Return the display icon for a category, falling back to OTHER's."""
    try:
        return CATEGORY_ICONS[Category(category)]
    except ValueError:
        return CATEGORY_ICONS[Category.OTHER]
