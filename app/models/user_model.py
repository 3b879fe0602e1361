# /app/models/user_model.py

from typing import List, Optional

from pydantic import BaseModel, Field

from .center_model import Center


class UserAccount(BaseModel):
    """A registered volunteer. Passwords are stored and compared in plaintext."""
    volunteerId: str
    name: str
    password: str


class UserUpdate(BaseModel):
    """Partial update for a volunteer account. Unset fields are left alone."""
    name: Optional[str] = None
    password: Optional[str] = None


class SessionUser(BaseModel):
    """The logged-in volunteer, bound to the center they selected."""
    volunteerId: str
    name: str
    centerId: str
    centerName: str


class OperationResult(BaseModel):
    """In-band result for account operations; `message` is shown to the volunteer as-is."""
    success: bool
    message: Optional[str] = None
    user: Optional[UserAccount] = None


class Feedback(BaseModel):
    id: str
    volunteerId: str
    volunteerName: str
    centerId: str
    subject: str
    message: str
    date: str


class FeedbackCreate(BaseModel):
    volunteerId: str
    volunteerName: str
    centerId: str
    subject: str
    message: str


class LoginResult(OperationResult):
    """A successful login also lists the centers of the volunteer's city."""
    centers: List[Center] = Field(default_factory=list)
