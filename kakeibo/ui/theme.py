"""Presentation lookups keyed by category id; the models carry no styling."""

INCOME_COLOR = "#4CAF50"
EXPENSE_COLOR = "#F44336"
BALANCE_COLOR = "#2196F3"
NEGATIVE_BALANCE_COLOR = "#FF9800"

CATEGORY_COLORS = {
    "food":         "#FF9800",
    "daily":        "#8BC34A",
    "transport":    "#2196F3",
    "fashion":      "#E91E63",
    "social":       "#9C27B0",
    "credit":       "#607D8B",
    "hobby":        "#FF5722",
    "cafe":         "#795548",
    "other":        "#888888",
    "salary":       "#4CAF50",
    "bonus":        "#009688",
    "other_income": "#888888",
}

CATEGORY_ICONS = {
    "food":         "🍴",
    "daily":        "🛍",
    "transport":    "🚆",
    "fashion":      "👕",
    "social":       "👥",
    "credit":       "💳",
    "hobby":        "🎮",
    "cafe":         "☕",
    "other":        "…",
    "salary":       "💴",
    "bonus":        "📈",
    "other_income": "…",
}


def category_color(category_id: str) -> str:
    return CATEGORY_COLORS.get(category_id, "#888888")


def category_icon(category_id: str) -> str:
    return CATEGORY_ICONS.get(category_id, "•")
