import jobboard.routers.applications as apps_mod
from jobboard.repos import application_repo, job_repo, user_repo

from conftest import ENGINEER_JOB, auth_headers

RESUME = "Ten years of Python and SQL."
COVER = "I would love to join Acme."


def _apply(client, headers, job_id, **overrides):
    body = {"jobId": job_id, "resume": RESUME, "coverLetter": COVER, **overrides}
    return client.post("/api/applications", json=body, headers=headers)


def test_apply_creates_pending_application_with_populated_refs(client, seeker, active_job, seeker_headers):
    resp = _apply(client, seeker_headers, active_job.id)
    assert resp.status_code == 201
    body = resp.json()
    assert body["status"] == "pending"
    assert body["job"] == {"id": active_job.id, "title": "Engineer", "company": "Acme"}
    assert body["applicant"] == {"id": seeker.id, "name": "Alice Seeker", "email": "a@x.com"}
    assert body["coverLetter"] == COVER


def test_apply_ignores_client_supplied_status(client, active_job, seeker_headers):
    resp = _apply(client, seeker_headers, active_job.id, status="hired")
    assert resp.status_code == 201
    assert resp.json()["status"] == "pending"


def test_apply_requires_authentication(client, active_job):
    assert _apply(client, {}, active_job.id).status_code == 401


def test_apply_validation(client, active_job, seeker_headers):
    resp = _apply(client, seeker_headers, active_job.id, resume="  too short ")
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "resume"
    assert "at least 10" in resp.json()["errors"][0]["message"]


def test_apply_to_inactive_or_missing_job_is_404(client, db, closed_job, seeker, seeker_headers):
    assert _apply(client, seeker_headers, closed_job.id).status_code == 404
    assert _apply(client, seeker_headers, "missing-job").status_code == 404
    assert application_repo.get_for_applicant(db, seeker.id) == []


def test_duplicate_application_is_conflict(client, active_job, seeker_headers):
    assert _apply(client, seeker_headers, active_job.id).status_code == 201
    resp = _apply(client, seeker_headers, active_job.id)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "You have already applied for this job"


def test_duplicate_caught_by_constraint_when_precheck_loses_race(monkeypatch, client, active_job, seeker_headers):
    assert _apply(client, seeker_headers, active_job.id).status_code == 201
    # Simulate a concurrent request that passed the existence check first
    monkeypatch.setattr(application_repo, "get_existing", lambda db, job_id, applicant_id: None)
    resp = _apply(client, seeker_headers, active_job.id)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "You have already applied for this job"


def test_my_applications_newest_first_with_job_summary(client, db, admin, seeker, seeker_headers):
    first = job_repo.create(db, admin.id, {**ENGINEER_JOB, "title": "First Role"})
    second = job_repo.create(db, admin.id, {**ENGINEER_JOB, "title": "Second Role", "type": "contract"})
    _apply(client, seeker_headers, first.id)
    _apply(client, seeker_headers, second.id)

    body = client.get("/api/applications/my-applications", headers=seeker_headers).json()
    assert [a["job"]["title"] for a in body] == ["Second Role", "First Role"]
    assert body[0]["job"] == {
        "id": second.id,
        "title": "Second Role",
        "company": "Acme",
        "location": "Remote",
        "type": "contract",
    }
    assert body[0]["applicant"] == seeker.id


def test_my_applications_only_returns_own(client, db, active_job, seeker_headers):
    other = user_repo.create(db, "Bob", "b@x.com", "secret12")
    _apply(client, auth_headers(other), active_job.id)
    assert client.get("/api/applications/my-applications", headers=seeker_headers).json() == []


def test_admin_list_is_paginated_and_filterable(client, db, admin, active_job, admin_headers, seeker_headers):
    other_job = job_repo.create(db, admin.id, {**ENGINEER_JOB, "title": "Other Role"})
    _apply(client, seeker_headers, active_job.id)
    _apply(client, seeker_headers, other_job.id)
    for i in range(3):
        applicant = user_repo.create(db, f"Applicant {i}", f"p{i}@x.com", "secret12", phone=f"555-000{i}")
        _apply(client, auth_headers(applicant), active_job.id)

    assert client.get("/api/applications", headers=seeker_headers).status_code == 403

    body = client.get("/api/applications?limit=2", headers=admin_headers).json()
    assert body["pagination"] == {"current": 1, "pages": 3, "total": 5}
    assert len(body["applications"]) == 2
    assert set(body["applications"][0]["applicant"]) == {"id", "name", "email", "phone", "location", "skills", "experience"}

    by_job = client.get(f"/api/applications?jobId={other_job.id}", headers=admin_headers).json()
    assert by_job["pagination"]["total"] == 1
    assert by_job["applications"][0]["job"]["title"] == "Other Role"

    pending = client.get("/api/applications?status=pending", headers=admin_headers).json()
    assert pending["pagination"]["total"] == 5
    hired = client.get("/api/applications?status=hired", headers=admin_headers).json()
    assert hired["pagination"]["total"] == 0
    assert hired["applications"] == []


def test_admin_list_for_job(client, seeker, active_job, admin_headers, seeker_headers):
    _apply(client, seeker_headers, active_job.id)
    body = client.get(f"/api/applications/job/{active_job.id}", headers=admin_headers).json()
    assert len(body) == 1
    assert body[0]["job"] == active_job.id
    assert body[0]["applicant"]["name"] == "Alice Seeker"
    assert "skills" in body[0]["applicant"]


def test_update_status_and_notes(client, active_job, admin_headers, seeker_headers):
    app_id = _apply(client, seeker_headers, active_job.id).json()["id"]
    resp = client.put(
        f"/api/applications/{app_id}/status",
        json={"status": "shortlisted", "notes": "  strong SQL  "},
        headers=admin_headers,
    )
    assert resp.status_code == 200
    assert resp.json()["status"] == "shortlisted"
    assert resp.json()["notes"] == "strong SQL"

    # back to an earlier state is allowed, notes kept when omitted
    resp = client.put(f"/api/applications/{app_id}/status", json={"status": "pending"}, headers=admin_headers)
    assert resp.json()["status"] == "pending"
    assert resp.json()["notes"] == "strong SQL"


def test_update_status_rejects_unknown_status_and_leaves_application_unchanged(client, db, active_job, admin_headers, seeker_headers):
    app_id = _apply(client, seeker_headers, active_job.id).json()["id"]
    resp = client.put(f"/api/applications/{app_id}/status", json={"status": "accepted"}, headers=admin_headers)
    assert resp.status_code == 400
    assert application_repo.get_by_id(db, app_id).status == "pending"


def test_update_status_missing_application_and_role_gate(client, admin_headers, seeker_headers):
    assert client.put("/api/applications/missing/status", json={"status": "hired"}, headers=admin_headers).status_code == 404
    assert client.put("/api/applications/missing/status", json={"status": "hired"}, headers=seeker_headers).status_code == 403


def test_apply_storage_failure_is_generic_500(monkeypatch, client, seeker_headers):
    monkeypatch.setattr(apps_mod, "apply", lambda *args: (_ for _ in ()).throw(RuntimeError("db down")))
    resp = _apply(client, seeker_headers, "any-job")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Server error"}
