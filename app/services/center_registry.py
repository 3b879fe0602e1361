# /app/services/center_registry.py

"""Static catalogue of tutoring centers and the lookups built on it."""

from typing import List, Optional

from ..models.center_model import Center, CityCode

CENTERS: List[Center] = [
    Center(id="mda-c1", name="MDA Center 1", cityCode=CityCode.MDA, shortCode="C1"),
    Center(id="mda-c2", name="MDA Center 2", cityCode=CityCode.MDA, shortCode="C2"),
    Center(id="ngp-c1", name="NGP Center 1", cityCode=CityCode.NGP, shortCode="C1"),
    Center(id="ngp-c2", name="NGP Center 2", cityCode=CityCode.NGP, shortCode="C2"),
]


def get_center(center_id: str) -> Optional[Center]:
    return next((c for c in CENTERS if c.id == center_id), None)


def get_centers_for_city(city_code: CityCode) -> List[Center]:
    return [c for c in CENTERS if c.cityCode == city_code]
