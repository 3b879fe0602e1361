# /app/models/student_model.py

# --- Core Imports ---
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class StudentAdmission(BaseModel):
    """
    The admission form as submitted by a volunteer. `id` is only present when
    an existing admission is being corrected; new admissions get a generated ID.
    """
    id: Optional[str] = None
    name: str = Field(..., description="The full name of the student.")
    gender: Gender = Gender.MALE
    dob: Optional[str] = None
    age: Optional[int] = None
    classLevel: str = ""
    schoolName: Optional[str] = None
    parentName: str = ""
    parentOccupation: Optional[str] = None
    aadhaar: Optional[str] = None
    contact: str = ""
    registrationNumber: Optional[str] = None
    admissionDate: Optional[str] = None
    admissionFormFile: Optional[str] = None


class Student(BaseModel):
    """
    The full representation of a Student, as it is persisted and returned
    to the presentation layer.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Unique student ID, e.g. 25MDAKK123.")
    name: str
    gender: Gender = Gender.MALE
    dob: str = "-"
    age: int = 0
    classLevel: str = ""
    schoolName: str = "-"
    parentName: str = ""
    parentOccupation: str = "-"
    aadhaar: str = Field(default="-", description="National ID number.")
    contact: str = ""
    registrationNumber: str = "-"
    admissionDate: str = ""
    centerId: str = ""
    admissionFormFile: Optional[str] = None

    # --- Audit fields, set when an existing record is resubmitted ---
    updated: Optional[bool] = None
    lastUpdated: Optional[str] = None
