# /tests/conftest.py

import pytest
from datetime import datetime, timezone
from unittest.mock import patch

from app.services.database_service import DatabaseService
from app.models.student_model import Student

FIXED_NOW = datetime(2025, 3, 14, 9, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def data_dir(tmp_path):
    test_data_dir = tmp_path / "data"
    test_data_dir.mkdir()
    return test_data_dir


@pytest.fixture
def db_service(data_dir):
    """
    Creates a NEW, CLEAN DatabaseService for EACH test, with the JSON file
    backend redirected to a temporary directory.
    """
    with patch('app.core.config.USE_SQL_STORAGE', False), \
         patch('app.core.config.DATA_DIR', str(data_dir)):
        yield DatabaseService()


@pytest.fixture
def fixed_now(mocker):
    """Freezes the application clock."""
    mocker.patch('app.core.clock.now', return_value=FIXED_NOW)
    return FIXED_NOW


@pytest.fixture
def make_student():
    """Factory for Student records with sensible defaults."""
    def _make(student_id="25MDAC1101", name="Asha", **overrides):
        fields = {
            "id": student_id,
            "name": name,
            "classLevel": "5",
            "centerId": "mda-c1",
            "admissionDate": "2025-01-10",
        }
        fields.update(overrides)
        return Student(**fields)
    return _make
