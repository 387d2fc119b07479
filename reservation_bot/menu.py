"""
Static menu catalog and keyword-based menu answers.
"""

from typing import Optional

from .models import MenuCategory


MENU_DATA = {
    "vegetarian": MenuCategory(
        dishes=("Vegetable Biryani", "Paneer Tikka Masala", "Dal Makhani", "Chikhalwali"),
        price_range="$8-$15"
    ),
    "non_vegetarian": MenuCategory(
        dishes=("Butter Chicken", "Tandoori Chicken", "Lamb Korma", "Fish Curry"),
        price_range="$12-$20"
    ),
    "specialties": MenuCategory(
        dishes=("Chef's Special Thali", "Biryani Platter", "Mixed Grill", "Naan Bread Platter"),
        price_range="$15-$25"
    ),
}

MENU_KEYWORDS = (
    "menu", "dish", "food", "vegetarian", "veg", "non-veg", "price", "specialty", "popular"
)

MENU_FOLLOW_UP = "Would you still like to proceed with a reservation?"


def is_menu_question(text: str) -> bool:
    """Does the message mention anything menu related?"""
    lowered = text.lower()
    return any(keyword in lowered for keyword in MENU_KEYWORDS)


def classify_menu_category(text: Optional[str]) -> Optional[str]:
    if not text:
        return None
    lowered = text.lower()
    if "non-veg" in lowered:
        return "non_vegetarian"
    if "veg" in lowered:
        return "vegetarian"
    if "special" in lowered:
        return "specialties"
    return None


def get_menu_info(category_text: Optional[str] = None) -> str:
    """Describe the category the text asks about, or summarise all of them."""
    category = classify_menu_category(category_text)

    if category == "vegetarian":
        item = MENU_DATA["vegetarian"]
        return f"Our vegetarian dishes include: {', '.join(item.dishes)}\nPrice range: {item.price_range}"
    if category == "non_vegetarian":
        item = MENU_DATA["non_vegetarian"]
        return f"Our non-vegetarian specialties: {', '.join(item.dishes)}\nPrice range: {item.price_range}"
    if category == "specialties":
        item = MENU_DATA["specialties"]
        return f"Our chef's specialties: {', '.join(item.dishes)}\nPrice range: {item.price_range}"

    return (
        f"We offer vegetarian ({MENU_DATA['vegetarian'].price_range}), "
        f"non-vegetarian ({MENU_DATA['non_vegetarian'].price_range}), "
        f"and specialty dishes ({MENU_DATA['specialties'].price_range})."
    )
