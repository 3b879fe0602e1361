# /app/services/user_service.py

"""
Volunteer account flows: registration, the two-step login (credentials,
then center selection), profile updates and feedback.

Every expected failure is returned as an OperationResult whose message is
shown to the volunteer verbatim.
"""

import re
from typing import Optional

from ..models.center_model import CityCode
from ..models.user_model import FeedbackCreate, LoginResult, OperationResult, SessionUser, UserUpdate
from .database_service import DatabaseService
from .center_registry import get_center, get_centers_for_city

CITY_CODE_PATTERN = re.compile(r"(MDA|NGP)")


def extract_city_code(volunteer_id: str) -> Optional[CityCode]:
    """Volunteer IDs embed their city code, e.g. 25MDA177 -> MDA."""
    match = CITY_CODE_PATTERN.search(volunteer_id.upper())
    return CityCode(match.group(0)) if match else None


def register_volunteer(db: DatabaseService, volunteer_id: str, name: str, password: str) -> OperationResult:
    if not volunteer_id or not name or not password:
        return OperationResult(success=False, message="All fields are required.")
    if not extract_city_code(volunteer_id):
        return OperationResult(success=False, message="Volunteer ID must contain MDA or NGP.")
    return db.register_user(volunteer_id, name, password)


def login(db: DatabaseService, volunteer_id: str, password: str) -> LoginResult:
    """First login step: checks credentials and lists the centers the volunteer can pick."""
    auth = db.authenticate(volunteer_id, password)
    if not auth.success:
        return LoginResult(success=False, message=auth.message)
    city_code = extract_city_code(volunteer_id)
    if not city_code:
        return LoginResult(success=False, message="Invalid City Code.")
    return LoginResult(success=True, user=auth.user, centers=get_centers_for_city(city_code))


def select_center(login_result: LoginResult, center_id: str) -> SessionUser:
    """Second login step: binds the authenticated volunteer to a center."""
    if not login_result.success or login_result.user is None:
        raise ValueError("Cannot select a center before logging in.")
    center = get_center(center_id)
    if center is None or center not in login_result.centers:
        raise ValueError(f"Center {center_id} is not available for this volunteer.")
    return SessionUser(
        volunteerId=login_result.user.volunteerId,
        name=login_result.user.name or "Volunteer",
        centerId=center.id,
        centerName=center.name,
    )


def update_profile(db: DatabaseService, session_user: SessionUser, name: Optional[str] = None, password: Optional[str] = None) -> OperationResult:
    return db.update_user(session_user.volunteerId, UserUpdate(name=name, password=password))


def submit_feedback(db: DatabaseService, session_user: SessionUser, subject: str, message: str) -> OperationResult:
    if not subject or not subject.strip() or not message or not message.strip():
        return OperationResult(success=False, message="Please enter a subject and a message.")
    feedback = FeedbackCreate(
        volunteerId=session_user.volunteerId,
        volunteerName=session_user.name,
        centerId=session_user.centerId,
        subject=subject,
        message=message,
    )
    return db.save_feedback(feedback)
