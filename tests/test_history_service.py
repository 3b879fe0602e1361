# /tests/test_history_service.py

from app.services import history_service
from app.models.attendance_model import AttendanceRecord, AttendanceMode
from app.models.diary_model import DiaryEntry, DiaryVolunteerEntry


def _seed(db_service, make_student, admission="2024-01-02", attendance="2024-01-03T10:00", diary="2024-01-01"):
    db_service.add_student(make_student("S1", "Asha", admissionDate=admission))
    db_service.save_attendance(AttendanceRecord(
        id="ATT-1", date=attendance, presentStudentIds=["S1"], mode=AttendanceMode.QR, totalStudents=1,
    ))
    db_service.save_diary(DiaryEntry(
        id="D1", date=diary, studentCount=8,
        volunteers=[DiaryVolunteerEntry(name="Ravi"), DiaryVolunteerEntry(name="Sita")],
    ))


def test_history_is_sorted_newest_first(db_service, make_student):
    _seed(db_service, make_student)
    history = history_service.get_all_history(db_service)
    assert [item.type for item in history] == ["Attendance", "Admission", "Diary"]


def test_history_item_details(db_service, make_student):
    _seed(db_service, make_student)
    items = {item.type: item for item in history_service.get_all_history(db_service)}

    assert items["Admission"].details == "Student: Asha"
    assert items["Attendance"].date == "2024-01-03"
    assert items["Attendance"].details == "1 Students Present (QR)"
    assert items["Diary"].details == "Students: 8, Volunteers: 2"
    assert items["Diary"].data["volunteers"][0]["name"] == "Ravi"


def test_same_date_keeps_concatenation_order(db_service, make_student):
    _seed(db_service, make_student, admission="2024-05-05", attendance="2024-05-05T08:00:00.000Z", diary="2024-05-05")
    history = history_service.get_all_history(db_service)
    assert [item.type for item in history] == ["Admission", "Attendance", "Diary"]


def test_unparsable_dates_sort_last(db_service, make_student):
    _seed(db_service, make_student, admission="-")
    history = history_service.get_all_history(db_service)
    assert history[-1].type == "Admission"


def test_updated_flag_is_carried(db_service, make_student):
    _seed(db_service, make_student)
    db_service.save_diary(DiaryEntry(id="D1", date="2024-01-01", studentCount=9))
    items = {item.type: item for item in history_service.get_all_history(db_service)}
    assert items["Diary"].updated is True
    assert items["Admission"].updated is None


def test_filter_history(db_service, make_student):
    _seed(db_service, make_student)
    history = history_service.get_all_history(db_service)
    assert len(history_service.filter_history(history, "ALL")) == 3
    assert [i.type for i in history_service.filter_history(history, "Diary")] == ["Diary"]


def test_delete_attendance_leaves_other_collections(db_service, make_student):
    _seed(db_service, make_student)
    db_service.save_attendance(AttendanceRecord(id="ATT-2", date="2024-01-04"))

    assert history_service.delete_history_item(db_service, "ATT-1", "Attendance") is True

    assert [a.id for a in db_service.get_attendance_history()] == ["ATT-2"]
    assert len(db_service.get_students()) == 1
    assert len(db_service.get_diaries()) == 1


def test_delete_with_unknown_type_is_a_no_op(db_service, make_student):
    _seed(db_service, make_student)
    assert history_service.delete_history_item(db_service, "S1", "Syllabus") is True
    assert len(history_service.get_all_history(db_service)) == 3


def test_delete_admission_and_diary(db_service, make_student):
    _seed(db_service, make_student)
    history_service.delete_history_item(db_service, "S1", "Admission")
    history_service.delete_history_item(db_service, "D1", "Diary")
    assert [i.type for i in history_service.get_all_history(db_service)] == ["Attendance"]
