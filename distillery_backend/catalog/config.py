"""
Source table layout for the bourbon dataset.

The CSV has no usable header: columns are identified purely by position,
so the full column sequence is fixed here.
"""

from __future__ import annotations

from typing import List

FLAVOR_ATTRIBUTES: List[str] = [
    "Cereal",
    "Roasted",
    "Yeasty",
    "Feinty",
    "Peaty",
    "Charred Oak",
    "Nutty",
    "Woody",
    "Spicy",
    "Winey",
    "Citrus",
    "Tropical Fruits",
    "Pome Fruits",
    "Stone Fruits",
    "Red Berries",
    "Dried Fruits",
    "Floral",
    "Grassy",
]

AMENITY_COLUMNS: List[str] = [
    "Amenitie1",
    "Amenitie2",
    "Amenitie3",
    "Amenitie4",
    "Amenitie5",
]

SOURCE_COLUMNS: List[str] = [
    "Bourbon",
    *FLAVOR_ATTRIBUTES,
    "empty1",
    "empty2",
    "empty3",
    "BourbonName",
    "Distillerie",
    "empty4",
    "Distillery",
    "Adress",
    *AMENITY_COLUMNS,
    "ExtraInfo",
    "WebsiteLink",
    "LogoPNG",
    "LogoPNG2",
]

# Intensity at or above which a flavor attribute becomes a tag
TAG_THRESHOLD = 3.0

# The file's own header line is read as data and lands on this id
HEADER_ROW_ID = 1

MILITARY_DISCOUNT_MARKER = "military discount"
