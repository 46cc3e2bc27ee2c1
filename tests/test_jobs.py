"""
Test suite for job endpoints.

Tests cover:
- Job creation
- Job retrieval and listing
- Partial updates
- Deletion
- Isolation between users
"""

import pytest

from jobtracker.models.job import Job, JobStatus


def create_job(client, headers, **fields):
    response = client.post("/api/v1/jobs", json=fields, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["job"]


class TestJobCreation:
    """Tests for job creation endpoint"""

    def test_create_job_success(self, client, auth_headers, sample_job_data):
        response = client.post("/api/v1/jobs", json=sample_job_data, headers=auth_headers)

        assert response.status_code == 201
        job = response.json()["job"]
        assert job["company"] == "Acme"
        assert job["position"] == "Backend Engineer"
        assert job["status"] == "pending"
        assert "id" in job
        assert "created_at" in job

    def test_create_job_sets_owner_from_token(self, client, register_user, db_session, token_service):
        data, headers = register_user()
        owner_id = token_service.verify(data["token"]).user_id

        job = create_job(client, headers, company="Acme", position="Eng")

        assert job["created_by"] == owner_id

    def test_created_by_in_body_is_ignored(self, client, register_user, token_service):
        data, headers = register_user()
        other, _ = register_user()
        other_id = token_service.verify(other["token"]).user_id

        job = create_job(client, headers, company="Acme", position="Eng", created_by=other_id)

        assert job["created_by"] == token_service.verify(data["token"]).user_id

    def test_create_job_with_status(self, client, auth_headers):
        job = create_job(client, auth_headers, company="Acme", position="Eng", status="interview")
        assert job["status"] == "interview"

    @pytest.mark.parametrize("payload", [
        {"position": "Eng"},
        {"company": "Acme"},
        {"company": "", "position": "Eng"},
        {"company": "Acme", "position": ""},
        {"company": "   ", "position": "Eng"},
        {"company": "Acme", "position": "Eng", "status": "hired"},
        {"company": "A" * 51, "position": "Eng"},
    ])
    def test_create_job_invalid(self, client, auth_headers, db_session, payload):
        response = client.post("/api/v1/jobs", json=payload, headers=auth_headers)

        assert response.status_code == 400
        assert db_session.query(Job).count() == 0


class TestJobRetrieval:
    """Tests for job retrieval endpoints"""

    def test_get_job_by_id(self, client, auth_headers):
        created = create_job(client, auth_headers, company="Acme", position="Eng")

        response = client.get(f"/api/v1/jobs/{created['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["job"] == created

    def test_get_nonexistent_job(self, client, auth_headers):
        response = client.get("/api/v1/jobs/99999", headers=auth_headers)

        assert response.status_code == 404
        assert "no job" in response.json()["detail"].lower()

    def test_list_jobs(self, client, auth_headers):
        for i in range(3):
            create_job(client, auth_headers, company=f"Company {i}", position="Eng")

        response = client.get("/api/v1/jobs", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 3
        assert [job["company"] for job in data["jobs"]] == ["Company 0", "Company 1", "Company 2"]

    def test_list_jobs_empty(self, client, auth_headers):
        response = client.get("/api/v1/jobs", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"jobs": [], "count": 0}

    def test_filter_jobs_by_status(self, client, auth_headers):
        create_job(client, auth_headers, company="A", position="Eng", status="pending")
        create_job(client, auth_headers, company="B", position="Eng", status="interview")
        create_job(client, auth_headers, company="C", position="Eng", status="declined")

        response = client.get("/api/v1/jobs?status=interview", headers=auth_headers)
        data = response.json()
        assert data["count"] == 1
        assert data["jobs"][0]["company"] == "B"

    def test_non_integer_id(self, client, auth_headers):
        response = client.get("/api/v1/jobs/abc", headers=auth_headers)
        assert response.status_code == 400

    @pytest.mark.parametrize("job_id", ["0", "-1", "2147483648", "18446744073709551616"])
    def test_out_of_range_id_is_not_found(self, client, auth_headers, job_id):
        for method in ("GET", "PATCH", "DELETE"):
            response = client.request(
                method, f"/api/v1/jobs/{job_id}", json={"company": "X"}, headers=auth_headers
            )
            assert response.status_code == 404, method


class TestJobUpdate:
    """Tests for partial job updates"""

    def test_update_single_field(self, client, auth_headers):
        created = create_job(client, auth_headers, company="Acme", position="Eng")

        response = client.patch(
            f"/api/v1/jobs/{created['id']}",
            json={"position": "Senior Eng"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        job = response.json()["job"]
        assert job["company"] == "Acme"
        assert job["position"] == "Senior Eng"

    def test_update_status(self, client, auth_headers):
        created = create_job(client, auth_headers, company="Acme", position="Eng")

        response = client.patch(
            f"/api/v1/jobs/{created['id']}",
            json={"status": "declined"},
            headers=auth_headers,
        )

        assert response.json()["job"]["status"] == "declined"

    def test_update_empty_company_rejected(self, client, auth_headers, db_session):
        """A rejected update leaves the stored job unchanged"""
        created = create_job(client, auth_headers, company="Acme", position="Eng")

        response = client.patch(
            f"/api/v1/jobs/{created['id']}",
            json={"company": ""},
            headers=auth_headers,
        )

        assert response.status_code == 400
        job = db_session.get(Job, created["id"])
        db_session.refresh(job)
        assert job.company == "Acme"
        assert job.position == "Eng"

    @pytest.mark.parametrize("payload", [
        {"position": ""},
        {"company": None},
        {"status": None},
        {"company": "Acme", "position": "  "},
    ])
    def test_update_invalid(self, client, auth_headers, payload):
        created = create_job(client, auth_headers, company="Acme", position="Eng")

        response = client.patch(f"/api/v1/jobs/{created['id']}", json=payload, headers=auth_headers)

        assert response.status_code == 400
        get = client.get(f"/api/v1/jobs/{created['id']}", headers=auth_headers)
        assert get.json()["job"]["company"] == "Acme"

    def test_update_nonexistent_job(self, client, auth_headers):
        response = client.patch("/api/v1/jobs/99999", json={"company": "X"}, headers=auth_headers)
        assert response.status_code == 404


class TestJobDeletion:
    """Tests for job deletion"""

    def test_delete_job(self, client, auth_headers, db_session):
        created = create_job(client, auth_headers, company="Acme", position="Eng")

        response = client.delete(f"/api/v1/jobs/{created['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert response.content == b""
        assert db_session.query(Job).count() == 0

    def test_delete_nonexistent_job(self, client, auth_headers):
        response = client.delete("/api/v1/jobs/99999", headers=auth_headers)
        assert response.status_code == 404


class TestJobIsolation:
    """Users cannot see or touch each other's jobs"""

    @pytest.fixture
    def two_users(self, register_user):
        _, alice = register_user(name="Alice")
        _, bob = register_user(name="Bob")
        return alice, bob

    def test_other_users_job_is_not_found(self, client, two_users):
        alice, bob = two_users
        job = create_job(client, alice, company="Acme", position="Eng")

        response = client.get(f"/api/v1/jobs/{job['id']}", headers=bob)

        assert response.status_code == 404

    def test_foreign_and_missing_look_the_same(self, client, two_users):
        alice, bob = two_users
        job = create_job(client, alice, company="Acme", position="Eng")

        foreign = client.get(f"/api/v1/jobs/{job['id']}", headers=bob)
        missing = client.get("/api/v1/jobs/99999", headers=bob)

        assert foreign.status_code == missing.status_code == 404
        assert foreign.json()["detail"].replace(str(job["id"]), "") == \
            missing.json()["detail"].replace("99999", "")

    def test_list_only_shows_own_jobs(self, client, two_users):
        alice, bob = two_users
        create_job(client, alice, company="Alice Co", position="Eng")
        create_job(client, bob, company="Bob Co", position="Eng")

        data = client.get("/api/v1/jobs", headers=bob).json()

        assert data["count"] == 1
        assert data["jobs"][0]["company"] == "Bob Co"

    def test_cannot_update_other_users_job(self, client, two_users, db_session):
        alice, bob = two_users
        job = create_job(client, alice, company="Acme", position="Eng")

        response = client.patch(f"/api/v1/jobs/{job['id']}", json={"company": "Hacked"}, headers=bob)

        assert response.status_code == 404
        stored = db_session.get(Job, job["id"])
        db_session.refresh(stored)
        assert stored.company == "Acme"

    def test_cannot_delete_other_users_job(self, client, two_users, db_session):
        alice, bob = two_users
        job = create_job(client, alice, company="Acme", position="Eng")

        response = client.delete(f"/api/v1/jobs/{job['id']}", headers=bob)

        assert response.status_code == 404
        assert db_session.query(Job).filter(Job.id == job["id"]).count() == 1
        assert db_session.get(Job, job["id"]).status == JobStatus.PENDING
