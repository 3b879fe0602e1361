# /app/models/center_model.py

from enum import Enum

from pydantic import BaseModel


class CityCode(str, Enum):
    MDA = "MDA"
    NGP = "NGP"


class Center(BaseModel):
    id: str
    name: str
    cityCode: CityCode
    shortCode: str
