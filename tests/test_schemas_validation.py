import pytest
from pydantic import ValidationError

from placement_portal.models.enums import Role
from placement_portal.schemas.auth import UserProfileUpdate, UserRegister
from placement_portal.schemas.common import split_tags
from placement_portal.schemas.job import JobCreate, JobUpdate
from placement_portal.schemas.project import ProjectResponse, ProjectUpdate
from placement_portal.schemas.student import StudentProfileUpdate


def test_user_register_role_specific_fields():
    with pytest.raises(ValidationError):
        UserRegister(name="A", email="a@example.com", password="secret1", role="Student")
    with pytest.raises(ValidationError):
        UserRegister(name="B", email="b@example.com", password="secret1", role="Recruiter", company="  ")
    college = UserRegister(name="City College", email="c@example.com", password="secret1", role="College")
    assert college.role is Role.COLLEGE


def test_user_register_password_and_name():
    with pytest.raises(ValidationError):
        UserRegister(name="A", email="a@example.com", password="12345", role="College")
    with pytest.raises(ValidationError):
        UserRegister(name="   ", email="a@example.com", password="123456", role="College")
    ok = UserRegister(name="  Alice ", email="a@example.com", password="123456", role="Student", college="c1")
    assert ok.name == "Alice"


def test_user_register_rejects_unknown_role_and_bad_email():
    with pytest.raises(ValidationError):
        UserRegister(name="A", email="a@example.com", password="secret1", role="Admin")
    with pytest.raises(ValidationError):
        UserRegister(name="A", email="not-an-email", password="secret1", role="College")


def test_user_profile_update_password_change_validators():
    with pytest.raises(ValidationError):
        UserProfileUpdate(new_password="newpassword1", confirm_new_password="newpassword1")
    with pytest.raises(ValidationError):
        UserProfileUpdate(current_password="oldpassword", new_password="newpassword1", confirm_new_password="different1")
    with pytest.raises(ValidationError):
        UserProfileUpdate(current_password="oldpassword", new_password="new", confirm_new_password="new")
    assert UserProfileUpdate(name="Only name").new_password is None


def test_job_create_requires_title_description_and_college():
    with pytest.raises(ValidationError):
        JobCreate(title="", description="d", college="c1")
    with pytest.raises(ValidationError):
        JobCreate(title="t", description=" ", college="c1")
    with pytest.raises(ValidationError):
        JobCreate(title="t", description="d", college="")
    job = JobCreate(title=" Backend ", description="d", college="c1")
    assert job.title == "Backend"


def test_job_update_only_tracks_sent_fields():
    update = JobUpdate(salary="10 LPA")
    assert update.model_dump(exclude_unset=True) == {"salary": "10 LPA"}
    with pytest.raises(ValidationError):
        JobUpdate(description="")


def test_student_profile_update():
    with pytest.raises(ValidationError):
        StudentProfileUpdate(cgpa=-1)
    assert StudentProfileUpdate(cgpa=10).cgpa == 10
    assert StudentProfileUpdate(skills=["Go", " go", "Go"]).skills == ["Go", "go"]
    assert StudentProfileUpdate().skills is None


def test_split_tags():
    assert split_tags(None) == []
    assert split_tags("a, b,,a ,c") == ["a", "b", "c"]
    assert split_tags(["x", "", " y "]) == ["x", "y"]


def test_project_schemas():
    assert ProjectUpdate(tech="Python,SQL").tech == ["Python", "SQL"]
    assert ProjectUpdate().tech is None

    class _Row:
        id = "p1"
        name = "n"
        description = "d"
        tech = None
        link = None

    assert ProjectResponse.model_validate(_Row()).tech == []
