"""Weather condition classification and the decorative animations."""

from typing import Dict, Optional, Tuple

from .models import ConditionCategory

# Checked in order; the first keyword found in the category wins.
_KEYWORDS: Tuple[Tuple[str, ConditionCategory], ...] = (
    ("clear", ConditionCategory.CLEAR),
    ("cloud", ConditionCategory.CLOUDY),
    ("rain", ConditionCategory.RAIN),
)

ANIMATION_NAMES: Dict[ConditionCategory, str] = {
    ConditionCategory.CLEAR: "sunny",
    ConditionCategory.CLOUDY: "cloudy",
    ConditionCategory.RAIN: "rain",
}

# Frames for each bundled animation.
ANIMATIONS: Dict[str, Tuple[str, ...]] = {
    "sunny": (
        "   \\   |   /  \n"
        "     .---.    \n"
        "  -- (   ) -- \n"
        "     `---'    \n"
        "   /   |   \\  ",
        "    \\  |  /   \n"
        "     .---.    \n"
        "   -(     )-  \n"
        "     `---'    \n"
        "    /  |  \\   ",
    ),
    "cloudy": (
        "              \n"
        "     .--.     \n"
        "  .-(    ).   \n"
        " (___.__)__)  \n"
        "              ",
        "              \n"
        "      .--.    \n"
        "   .-(    ).  \n"
        "  (___.__)__) \n"
        "              ",
    ),
    "rain": (
        "     .-.      \n"
        "    (   ).    \n"
        "   (___(__)   \n"
        "    ' ' ' '   \n"
        "   ' ' ' '    ",
        "     .-.      \n"
        "    (   ).    \n"
        "   (___(__)   \n"
        "   ' ' ' '    \n"
        "    ' ' ' '   ",
    ),
}


def classify_condition(category: Optional[str]) -> ConditionCategory:
    """Map a provider condition such as 'Clouds' or 'light rain' to a coarse class."""
    text = (category or "").lower()
    for keyword, result in _KEYWORDS:
        if keyword in text:
            return result
    return ConditionCategory.CLOUDY


def animation_for(category: Optional[str]) -> str:
    """Name of the animation to play for a provider condition."""
    return ANIMATION_NAMES[classify_condition(category)]


def animation_frames(category: Optional[str]) -> Tuple[str, ...]:
    return ANIMATIONS[animation_for(category)]
