from coursetrack.errors import CourseTrackError, NotFoundError, StorageError, ValidationError


def test_status_codes():
    assert ValidationError("bad").status_code == 400
    assert NotFoundError("Course", 3).status_code == 404
    assert StorageError("down").status_code == 500


def test_not_found_message_names_resource():
    err = NotFoundError("Assignment", 9)
    assert err.message == "Assignment not found"
    assert str(err) == "Assignment not found"
    assert err.identifier == 9


def test_all_errors_share_base():
    for cls in (ValidationError, StorageError):
        assert issubclass(cls, CourseTrackError)
    assert isinstance(NotFoundError("Course"), CourseTrackError)
