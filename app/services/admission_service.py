# /app/services/admission_service.py

"""
Business logic for student admissions: ID generation, form defaults, and
resubmission of an existing admission.
"""

import random
from datetime import datetime
from typing import Optional

from ..core import clock
from ..models.student_model import Student, StudentAdmission
from .database_service import DatabaseService
from .center_registry import get_center

UNKNOWN_CODE = "XX"
PLACEHOLDER = "-"


def generate_student_id(center_id: str, now: Optional[datetime] = None, rng: Optional[random.Random] = None) -> str:
    """
    Builds a new student ID: two-digit year, city code, center short code and
    a random three-digit number, e.g. "25MDAC1407".
    """
    now = now or clock.now()
    rng = rng or random
    center = get_center(center_id)
    city_code = center.cityCode.value if center else UNKNOWN_CODE
    short_code = center.shortCode if center else UNKNOWN_CODE
    return f"{now.strftime('%y')}{city_code}{short_code}{rng.randint(100, 999)}".upper()


def admit_student(db: DatabaseService, admission: StudentAdmission, center_id: str) -> Student:
    """
    Saves an admission for the given center.

    A supplied ID (correcting an earlier admission) is trimmed and
    upper-cased, and the stored record is merged and flagged as updated.
    Without one a fresh ID is generated. Blank optional fields are stored as
    "-", and the admission date defaults to today.
    """
    student_id = admission.id.strip().upper() if admission.id and admission.id.strip() else generate_student_id(center_id)

    student = Student(
        id=student_id,
        name=admission.name,
        gender=admission.gender,
        dob=admission.dob or PLACEHOLDER,
        age=admission.age or 0,
        classLevel=admission.classLevel,
        schoolName=admission.schoolName or PLACEHOLDER,
        parentName=admission.parentName,
        parentOccupation=admission.parentOccupation or PLACEHOLDER,
        aadhaar=admission.aadhaar or PLACEHOLDER,
        contact=admission.contact,
        registrationNumber=admission.registrationNumber or PLACEHOLDER,
        admissionDate=admission.admissionDate or clock.today_iso(),
        centerId=center_id,
        admissionFormFile=admission.admissionFormFile,
    )
    return db.add_student(student)
