# backend/tests/api/test_projects.py
from datetime import datetime

from fastapi import status

from research_assistant.models import Project, ProjectStatus

def test_create_project(client, owner_headers):
    """Test project creation with defaults"""
    response = client.post(
        "/api/projects",
        json={"title": "Essay", "description": "World War II essay"},
        headers=owner_headers
    )

    assert response.status_code == status.HTTP_200_OK
    project = response.json()["project"]
    assert project["title"] == "Essay"
    assert project["description"] == "World War II essay"
    assert project["owner_id"] == owner_headers["X-User-Id"]
    assert project["status"] == "active"
    assert project["topic"] is None
    assert "id" in project
    assert "created_at" in project
    assert "updated_at" in project

def test_create_project_with_status(client, owner_headers):
    response = client.post(
        "/api/projects",
        json={"title": "Done", "status": "archived", "tags": "a b"},
        headers=owner_headers
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["project"]["status"] == "archived"
    assert response.json()["project"]["tags"] == "a b"

def test_create_project_requires_user(client):
    response = client.post("/api/projects", json={"title": "Essay"})

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["error"]["code"] == "UNAUTHORIZED"

def test_blank_user_header_is_anonymous(client):
    response = client.get("/api/projects", headers={"X-User-Id": "   "})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED

def test_invalid_project_data(client, owner_headers):
    """Missing or empty title is rejected before the handler runs"""
    missing = client.post("/api/projects", json={"description": "No title"}, headers=owner_headers)
    empty = client.post("/api/projects", json={"title": ""}, headers=owner_headers)
    bad_status = client.post("/api/projects", json={"title": "x", "status": "deleted"}, headers=owner_headers)

    for response in (missing, empty, bad_status):
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["code"] == "BAD_REQUEST"

def test_list_projects_excludes_archived(client, owner_headers, sample_project, archived_project, other_project):
    response = client.get("/api/projects", headers=owner_headers)

    assert response.status_code == status.HTTP_200_OK
    ids = {p["id"] for p in response.json()["projects"]}
    assert ids == {sample_project.id}

def test_list_projects_include_archived(client, owner_headers, sample_project, archived_project, other_project):
    response = client.get("/api/projects", params={"include_archived": True}, headers=owner_headers)

    assert response.status_code == status.HTTP_200_OK
    ids = {p["id"] for p in response.json()["projects"]}
    assert ids == {sample_project.id, archived_project.id}

def test_archive_flow(client, owner_headers):
    """Create, archive, then check both listings"""
    created = client.post("/api/projects", json={"title": "Essay"}, headers=owner_headers).json()["project"]
    assert created["status"] == "active"

    archived = client.post(f"/api/projects/{created['id']}/archive", headers=owner_headers)
    assert archived.status_code == status.HTTP_200_OK
    assert archived.json()["project"]["status"] == "archived"

    default_list = client.get("/api/projects", headers=owner_headers).json()["projects"]
    assert all(p["id"] != created["id"] for p in default_list)

    full_list = client.get("/api/projects", params={"include_archived": "true"}, headers=owner_headers).json()["projects"]
    assert any(p["id"] == created["id"] for p in full_list)

def test_archive_other_owners_project(client, owner_headers, other_project, db_session):
    response = client.post(f"/api/projects/{other_project.id}/archive", headers=owner_headers)

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["error"] == {"code": "NOT_FOUND", "message": "Project not found."}
    db_session.expire_all()
    assert db_session.get(Project, other_project.id).status == ProjectStatus.ACTIVE

def test_update_project_is_partial(client, owner_headers, sample_project):
    response = client.patch(
        f"/api/projects/{sample_project.id}",
        json={"title": "Updated Project"},
        headers=owner_headers
    )

    assert response.status_code == status.HTTP_200_OK
    project = response.json()["project"]
    assert project["title"] == "Updated Project"
    assert project["description"] == "Test Description"
    assert project["topic"] == "History"
    assert project["tags"] == "ww2, essay"
    assert project["status"] == "active"

def test_update_project_can_clear_optional_field(client, owner_headers, sample_project):
    response = client.patch(
        f"/api/projects/{sample_project.id}",
        json={"topic": None},
        headers=owner_headers
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["project"]["topic"] is None
    assert response.json()["project"]["title"] == "Test Project"

def test_update_project_rejects_null_title(client, owner_headers, sample_project):
    response = client.patch(
        f"/api/projects/{sample_project.id}",
        json={"title": None},
        headers=owner_headers
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST

def test_update_project_without_fields_is_noop(client, owner_headers, sample_project):
    before = client.get(f"/api/projects/{sample_project.id}", headers=owner_headers).json()["project"]

    response = client.patch(f"/api/projects/{sample_project.id}", json={}, headers=owner_headers)

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["project"] == before

def test_update_other_owners_project(client, owner_headers, other_project, db_session):
    response = client.patch(
        f"/api/projects/{other_project.id}",
        json={"title": "Hijacked"},
        headers=owner_headers
    )

    assert response.status_code == status.HTTP_404_NOT_FOUND
    db_session.expire_all()
    assert db_session.get(Project, other_project.id).title == "Someone Else's Project"

def test_update_nonexistent_project(client, owner_headers):
    response = client.patch("/api/projects/99999", json={"title": "x"}, headers=owner_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND

def test_get_project_with_details(client, owner_headers, sample_project, sample_source, sample_note):
    response = client.get(f"/api/projects/{sample_project.id}", headers=owner_headers)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["project"]["id"] == sample_project.id
    assert [s["id"] for s in data["sources"]] == [sample_source.id]
    assert [n["id"] for n in data["notes"]] == [sample_note.id]
    assert data["sources"][0]["metadata"] == {"pages": 880}

def test_get_other_owners_project(client, other_headers, sample_project, sample_source):
    response = client.get(f"/api/projects/{sample_project.id}", headers=other_headers)

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert "sources" not in response.json()

def test_get_nonexistent_project(client, owner_headers):
    response = client.get("/api/projects/99999", headers=owner_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND

def test_update_project_refreshes_updated_at(client, owner_headers, sample_project):
    before = client.get(f"/api/projects/{sample_project.id}", headers=owner_headers).json()["project"]

    after = client.patch(
        f"/api/projects/{sample_project.id}",
        json={"description": "Revised"},
        headers=owner_headers
    ).json()["project"]

    assert after["created_at"] == before["created_at"]
    assert datetime.fromisoformat(after["updated_at"]) > datetime.fromisoformat(before["updated_at"])

def test_archive_project_refreshes_updated_at(client, owner_headers, sample_project):
    before = client.get(f"/api/projects/{sample_project.id}", headers=owner_headers).json()["project"]

    after = client.post(f"/api/projects/{sample_project.id}/archive", headers=owner_headers).json()["project"]

    assert after["status"] == "archived"
    assert after["created_at"] == before["created_at"]
    assert datetime.fromisoformat(after["updated_at"]) > datetime.fromisoformat(before["updated_at"])

def test_create_project_timestamps_match_reads(client, owner_headers):
    created = client.post("/api/projects", json={"title": "Essay"}, headers=owner_headers).json()["project"]

    stored = client.get(f"/api/projects/{created['id']}", headers=owner_headers).json()["project"]
    assert stored == created
