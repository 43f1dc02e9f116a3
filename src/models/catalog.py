"""Catalog type definitions and static reference data."""

from enum import Enum
from typing import TypedDict


class OrderSize(str, Enum):
    """Fulfillment units a product can be ordered in."""

    SEVEN_SHOTS = "7-Pack (2oz shots)"
    TWELVE_OUNCE = "12oz Bottle"


# Unit price in dollars for each size, shared by every product
PRODUCT_PRICES: dict[OrderSize, float] = {
    OrderSize.SEVEN_SHOTS: 50,
    OrderSize.TWELVE_OUNCE: 45,
}


class GroupName(str, Enum):
    """Volunteer groups that fulfill orders."""

    GROUP_A = "Group A (Pathfinders)"
    GROUP_B = "Group B (Adventurers)"
    GROUP_C = "Group C (Youth)"
    GROUP_D = "Group D (Young Adults)"


# Rotation order for the fulfillment schedule
GROUP_NAMES: list[GroupName] = list(GroupName)


class Product(TypedDict, total=False):
    """Catalog product.

    ``video_start``/``video_end`` mark the product's segment of the
    tutorial video, in seconds, and are omitted when there is none.
    ``youtube_id`` optionally points at a hosted copy of the video.
    """

    id: str
    name: str
    description: str
    ingredients: list[str]
    image_color: str
    youtube_id: str
    video_start: int
    video_end: int


PRODUCTS: list[Product] = [
    {
        "id": "ginger-shot",
        "name": "Ginger Zinger",
        "description": "A fiery cold-pressed ginger and lemon shot to wake up your immune system.",
        "ingredients": ["Ginger", "Lemon", "Honey", "Cayenne"],
        "image_color": "#F4B942",
        "video_start": 0,
        "video_end": 95,
    },
    {
        "id": "turmeric-shot",
        "name": "Golden Glow",
        "description": "Turmeric, orange and black pepper for an anti-inflammatory boost.",
        "ingredients": ["Turmeric", "Orange", "Black Pepper", "Ginger"],
        "image_color": "#E8871E",
        "video_start": 95,
        "video_end": 180,
    },
    {
        "id": "beet-shot",
        "name": "Beet Boost",
        "description": "Earthy beet and apple shot packed with nitrates and iron.",
        "ingredients": ["Beet", "Apple", "Lemon", "Ginger"],
        "image_color": "#A4243B",
        "video_start": 180,
        "video_end": 262,
    },
    {
        "id": "green-shot",
        "name": "Green Machine",
        "description": "Wheatgrass, spinach and green apple for a clean daily reset.",
        "ingredients": ["Wheatgrass", "Spinach", "Green Apple", "Lime"],
        "image_color": "#5B8C2A",
    },
]
