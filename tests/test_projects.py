"""Project CRUD, resource catalog and effort estimate."""

from tests.conftest import resource_type_id


class TestProjects:
    def test_create_seeds_default_catalog(self, project):
        names = [rt["name"] for rt in project["resource_types"]]
        assert names == [
            "Business Analyst", "Developer", "Tech Lead", "QA Engineer",
            "Tech Governance", "Project Manager",
        ]
        assert project["status"] == "DRAFT"

    def test_list_only_own_projects(self, client, project, other_headers):
        resp = client.get("/projects/", headers=other_headers)
        assert resp.status_code == 200
        assert resp.json() == []

    def test_foreign_project_is_not_found(self, client, project, other_headers):
        resp = client.get(f"/projects/{project['id']}", headers=other_headers)
        assert resp.status_code == 404

    def test_partial_update_keeps_other_fields(self, client, project, auth_headers):
        resp = client.put(f"/projects/{project['id']}", json={"status": "ACTIVE"}, headers=auth_headers)
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "ACTIVE"
        assert body["name"] == "Portal"
        assert body["customer"] == "ACME"

    def test_null_name_rejected(self, client, project, auth_headers):
        resp = client.put(f"/projects/{project['id']}", json={"name": None}, headers=auth_headers)
        assert resp.status_code == 400

    def test_delete_archives(self, client, project, auth_headers):
        resp = client.delete(f"/projects/{project['id']}", headers=auth_headers)
        assert resp.status_code == 200
        assert resp.json() == {"message": "Project archived"}

        resp = client.get(f"/projects/{project['id']}", headers=auth_headers)
        assert resp.status_code == 200
        assert resp.json()["status"] == "ARCHIVED"


class TestResourceTypes:
    def test_list_is_sorted_by_name(self, client, project, auth_headers):
        resp = client.get(f"/projects/{project['id']}/resource-types", headers=auth_headers)
        names = [rt["name"] for rt in resp.json()]
        assert names == sorted(names)

    def test_create_update_delete(self, client, project, auth_headers):
        base = f"/projects/{project['id']}/resource-types"
        resp = client.post(base, json={"name": "Designer", "category": "ENGINEERING"}, headers=auth_headers)
        assert resp.status_code == 201
        rt = resp.json()

        resp = client.put(f"{base}/{rt['id']}", json={"category": "GOVERNANCE"}, headers=auth_headers)
        assert resp.json()["category"] == "GOVERNANCE"
        assert resp.json()["name"] == "Designer"

        resp = client.delete(f"{base}/{rt['id']}", headers=auth_headers)
        assert resp.status_code == 200

    def test_bad_category(self, client, project, auth_headers):
        resp = client.post(
            f"/projects/{project['id']}/resource-types",
            json={"name": "Designer", "category": "ART"},
            headers=auth_headers,
        )
        assert resp.status_code == 400

    def test_resource_type_of_other_project_not_found(self, client, project, auth_headers):
        other = client.post("/projects/", json={"name": "Other"}, headers=auth_headers).json()
        rt_id = resource_type_id(other, "Developer")
        resp = client.put(
            f"/projects/{project['id']}/resource-types/{rt_id}",
            json={"name": "Dev"},
            headers=auth_headers,
        )
        assert resp.status_code == 404

    def test_delete_in_use_conflicts(self, client, project, feature, auth_headers):
        dev = resource_type_id(project, "Developer")
        story = client.post(f"/features/{feature['id']}/stories", json={"name": "S"}, headers=auth_headers).json()
        client.post(
            f"/stories/{story['id']}/tasks",
            json={"name": "T", "resource_type_id": dev},
            headers=auth_headers,
        )
        resp = client.delete(f"/projects/{project['id']}/resource-types/{dev}", headers=auth_headers)
        assert resp.status_code == 409


class TestEstimate:
    def test_totals_by_resource_type(self, client, project, feature, auth_headers):
        dev = resource_type_id(project, "Developer")
        qa = resource_type_id(project, "QA Engineer")
        story = client.post(f"/features/{feature['id']}/stories", json={"name": "S"}, headers=auth_headers).json()
        for name, hours, rt in [("API", 12, dev), ("UI", 4, dev), ("Test", 8, qa)]:
            resp = client.post(
                f"/stories/{story['id']}/tasks",
                json={"name": name, "hours_effort": hours, "resource_type_id": rt},
                headers=auth_headers,
            )
            assert resp.status_code == 201

        resp = client.get(f"/projects/{project['id']}/estimate", headers=auth_headers)
        assert resp.status_code == 200
        body = resp.json()
        assert body["total_hours"] == 24
        assert body["total_days"] == 3
        assert [(r["resource_type_name"], r["hours"], r["task_count"]) for r in body["by_resource_type"]] == [
            ("Developer", 16, 2),
            ("QA Engineer", 8, 1),
        ]

    def test_empty_backlog(self, client, project, auth_headers):
        body = client.get(f"/projects/{project['id']}/estimate", headers=auth_headers).json()
        assert body["total_hours"] == 0
        assert body["by_resource_type"] == []
