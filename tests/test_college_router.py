from datetime import datetime, timezone

import placement_portal.routers.colleges as colleges_mod
from placement_portal.models.enums import JobStatus, Role

from conftest import API, StubUser


class _College:
    def __init__(self, college_id, name):
        self.id = college_id
        self.name = name


class _Job:
    def __init__(self, job_id="job-1", *, status=JobStatus.PENDING, college_id="college-1"):
        self.id = job_id
        self.title = "Backend Engineer"
        self.description = "Build APIs"
        self.company = "Acme"
        self.location = "Pune"
        self.salary = "12 LPA"
        self.deadline = None
        self.status = status
        self.college_id = college_id
        self.recruiter_id = "recruiter-1"
        self.created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.recruiter = None
        self.college = _College(college_id, "City College")


def test_list_colleges_is_public(monkeypatch, anon_client):
    monkeypatch.setattr(
        colleges_mod, "get_all_colleges", lambda db: [_College("c1", "Alpha"), _College("c2", "Beta")]
    )
    resp = anon_client.get(f"{API}/college/all")
    assert resp.status_code == 200
    assert [c["name"] for c in resp.json()] == ["Alpha", "Beta"]

    resp = anon_client.get(f"{API}/college/")
    assert resp.status_code == 200
    assert len(resp.json()) == 2


def test_list_colleges_returns_500_on_failure(monkeypatch, anon_client):
    monkeypatch.setattr(colleges_mod, "get_all_colleges", lambda db: (_ for _ in ()).throw(RuntimeError("db")))
    resp = anon_client.get(f"{API}/college/all")
    assert resp.status_code == 500


def test_college_routes_refuse_students(client):
    resp = client.get(f"{API}/college/jobs/pending")
    assert resp.status_code == 403


def test_list_all_and_pending_jobs(monkeypatch, college_client):
    seen = []

    def _list(db, user, status=None):
        seen.append(status)
        return [_Job()]

    monkeypatch.setattr(colleges_mod, "list_visible_jobs", _list)
    assert college_client.get(f"{API}/college/jobs/all").status_code == 200
    resp = college_client.get(f"{API}/college/jobs/pending")
    assert resp.status_code == 200
    assert resp.json()[0]["college"]["name"] == "City College"
    assert seen == [None, JobStatus.PENDING]


def test_officer_without_college_gets_not_found(college_client, college_user):
    college_user.college_id = None
    resp = college_client.get(f"{API}/college/jobs/all")
    assert resp.status_code == 404


def test_college_posting_is_approved_immediately(monkeypatch, college_client):
    captured = {}

    def _create(db, **kwargs):
        captured.update(kwargs)
        job = _Job(status=kwargs["status"])
        job.company = kwargs["company"]
        return job

    monkeypatch.setattr(colleges_mod, "create_job", _create)
    resp = college_client.post(f"{API}/college/jobs", json={"title": "TA", "description": "Teaching assistant"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "Approved"
    assert captured["status"] is JobStatus.APPROVED
    assert captured["college_id"] == "college-1"
    assert captured["recruiter_id"] == "college-user-1"
    assert captured["company"] == "College Placement Cell"


def test_college_posting_requires_title(college_client):
    resp = college_client.post(f"{API}/college/jobs", json={"title": "  ", "description": "x"})
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "title"


def test_approve_pending_job(monkeypatch, college_client):
    job = _Job()
    monkeypatch.setattr(colleges_mod, "get_job", lambda db, job_id: job)
    monkeypatch.setattr(colleges_mod, "save_job_status", lambda db, j: j)
    resp = college_client.put(f"{API}/college/jobs/job-1/status", json={"status": "Approved"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "Approved"
    assert job.status is JobStatus.APPROVED


def test_reject_pending_job(monkeypatch, college_client):
    job = _Job()
    monkeypatch.setattr(colleges_mod, "get_job", lambda db, job_id: job)
    monkeypatch.setattr(colleges_mod, "save_job_status", lambda db, j: j)
    resp = college_client.put(f"{API}/college/jobs/job-1/status", json={"status": "Rejected"})
    assert resp.status_code == 200
    assert job.status is JobStatus.REJECTED


def test_invalid_status_value_is_rejected_before_lookup(monkeypatch, college_client):
    calls = []
    monkeypatch.setattr(colleges_mod, "get_job", lambda db, job_id: calls.append(job_id))
    resp = college_client.put(f"{API}/college/jobs/job-1/status", json={"status": "Pending"})
    assert resp.status_code == 400
    assert resp.json()["errors"] == [{"field": "status", "message": "Invalid status: must be Approved or Rejected"}]
    assert calls == []


def test_status_change_on_another_college_is_forbidden(monkeypatch, college_client):
    job = _Job(college_id="college-2")
    saved = []
    monkeypatch.setattr(colleges_mod, "get_job", lambda db, job_id: job)
    monkeypatch.setattr(colleges_mod, "save_job_status", lambda db, j: saved.append(j))
    resp = college_client.put(f"{API}/college/jobs/job-1/status", json={"status": "Approved"})
    assert resp.status_code == 403
    assert job.status is JobStatus.PENDING
    assert saved == []


def test_reviewing_an_already_decided_job_conflicts(monkeypatch, college_client):
    monkeypatch.setattr(colleges_mod, "get_job", lambda db, job_id: _Job(status=JobStatus.APPROVED))
    resp = college_client.put(f"{API}/college/jobs/job-1/status", json={"status": "Rejected"})
    assert resp.status_code == 409
    assert resp.json()["code"] == "invalid_transition"


def test_status_change_on_missing_job(monkeypatch, college_client):
    monkeypatch.setattr(colleges_mod, "get_job", lambda db, job_id: None)
    resp = college_client.put(f"{API}/college/jobs/nope/status", json={"status": "Approved"})
    assert resp.status_code == 404


def test_list_students_and_recruiters(monkeypatch, college_client):
    student = StubUser(skills=None)
    recruiter = StubUser(id="r1", name="Bob", email="bob@acme.com", role=Role.RECRUITER, company="Acme")
    monkeypatch.setattr(colleges_mod, "get_students_of_college", lambda db, cid: [student])
    monkeypatch.setattr(colleges_mod, "get_recruiters_for_college", lambda db, cid: [recruiter])

    resp = college_client.get(f"{API}/college/students")
    assert resp.status_code == 200
    assert resp.json()[0]["skills"] == []

    resp = college_client.get(f"{API}/college/recruiters")
    assert resp.status_code == 200
    assert resp.json() == [{"id": "r1", "name": "Bob", "email": "bob@acme.com", "company": "Acme"}]


def test_stats(monkeypatch, college_client):
    monkeypatch.setattr(
        colleges_mod,
        "get_college_stats",
        lambda db, cid: {"total_students": 3, "placed_students": 1, "pending_approvals": 2, "active_jobs": 4},
    )
    resp = college_client.get(f"{API}/college/stats")
    assert resp.status_code == 200
    assert resp.json()["active_jobs"] == 4
