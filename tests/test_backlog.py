"""Epic / feature / story / task CRUD with ownership and ordering."""

from tests.conftest import resource_type_id


def _create_epic(client, headers, project_id, name):
    resp = client.post(f"/projects/{project_id}/epics", json={"name": name}, headers=headers)
    assert resp.status_code == 201
    return resp.json()


class TestOrdering:
    def test_new_siblings_are_appended(self, client, project, auth_headers):
        orders = [_create_epic(client, auth_headers, project["id"], f"E{i}")["order"] for i in range(3)]
        assert orders == [0, 1, 2]

    def test_order_not_reused_after_delete(self, client, project, auth_headers):
        first = _create_epic(client, auth_headers, project["id"], "E0")
        _create_epic(client, auth_headers, project["id"], "E1")
        client.delete(f"/projects/{project['id']}/epics/{first['id']}", headers=auth_headers)

        third = _create_epic(client, auth_headers, project["id"], "E2")
        assert third["order"] == 2

    def test_orders_are_per_parent(self, client, project, auth_headers):
        a = _create_epic(client, auth_headers, project["id"], "A")
        b = _create_epic(client, auth_headers, project["id"], "B")
        fa = client.post(f"/epics/{a['id']}/features", json={"name": "F"}, headers=auth_headers).json()
        fb = client.post(f"/epics/{b['id']}/features", json={"name": "F"}, headers=auth_headers).json()
        assert fa["order"] == 0
        assert fb["order"] == 0


class TestOwnership:
    def test_other_user_gets_not_found_everywhere(self, client, project, feature, auth_headers, other_headers):
        story = client.post(f"/features/{feature['id']}/stories", json={"name": "S"}, headers=auth_headers).json()

        assert client.get(f"/projects/{project['id']}/epics", headers=other_headers).status_code == 404
        assert client.get(f"/epics/{feature['epic_id']}/features", headers=other_headers).status_code == 404
        assert client.post(
            f"/features/{feature['id']}/stories", json={"name": "X"}, headers=other_headers
        ).status_code == 404
        assert client.delete(
            f"/features/{feature['id']}/stories/{story['id']}", headers=other_headers
        ).status_code == 404
        assert client.get(f"/stories/{story['id']}/tasks", headers=other_headers).status_code == 404

    def test_child_must_belong_to_parent(self, client, project, feature, auth_headers):
        other_epic = _create_epic(client, auth_headers, project["id"], "Other")
        resp = client.put(
            f"/epics/{other_epic['id']}/features/{feature['id']}",
            json={"name": "Moved"},
            headers=auth_headers,
        )
        assert resp.status_code == 404

    def test_unknown_ids(self, client, auth_headers):
        assert client.get("/projects/999/epics", headers=auth_headers).status_code == 404
        assert client.get("/features/999/stories", headers=auth_headers).status_code == 404


class TestTree:
    def test_epics_return_nested_backlog(self, client, project, feature, auth_headers):
        dev = resource_type_id(project, "Developer")
        story = client.post(f"/features/{feature['id']}/stories", json={"name": "S"}, headers=auth_headers).json()
        client.post(
            f"/stories/{story['id']}/tasks",
            json={"name": "Build", "hours_effort": 5, "resource_type_id": dev},
            headers=auth_headers,
        )

        epics = client.get(f"/projects/{project['id']}/epics", headers=auth_headers).json()
        assert len(epics) == 1
        task = epics[0]["features"][0]["user_stories"][0]["tasks"][0]
        assert task["name"] == "Build"
        assert task["resource_type"]["name"] == "Developer"

    def test_delete_feature_removes_children(self, client, project, feature, auth_headers):
        client.post(f"/features/{feature['id']}/stories", json={"name": "S"}, headers=auth_headers)
        resp = client.delete(f"/epics/{feature['epic_id']}/features/{feature['id']}", headers=auth_headers)
        assert resp.status_code == 200
        assert client.get(f"/features/{feature['id']}/stories", headers=auth_headers).status_code == 404


class TestTasks:
    def _story(self, client, feature, headers):
        return client.post(f"/features/{feature['id']}/stories", json={"name": "S"}, headers=headers).json()

    def test_create_requires_resource_type(self, client, feature, auth_headers):
        story = self._story(client, feature, auth_headers)
        resp = client.post(f"/stories/{story['id']}/tasks", json={"name": "T"}, headers=auth_headers)
        assert resp.status_code == 400

    def test_resource_type_from_other_project_rejected(self, client, feature, auth_headers):
        other = client.post("/projects/", json={"name": "Other"}, headers=auth_headers).json()
        story = self._story(client, feature, auth_headers)
        resp = client.post(
            f"/stories/{story['id']}/tasks",
            json={"name": "T", "resource_type_id": resource_type_id(other, "Developer")},
            headers=auth_headers,
        )
        assert resp.status_code == 400

    def test_negative_hours_rejected(self, client, project, feature, auth_headers):
        story = self._story(client, feature, auth_headers)
        resp = client.post(
            f"/stories/{story['id']}/tasks",
            json={"name": "T", "hours_effort": -1, "resource_type_id": resource_type_id(project, "Developer")},
            headers=auth_headers,
        )
        assert resp.status_code == 400

    def test_partial_update(self, client, project, feature, auth_headers):
        story = self._story(client, feature, auth_headers)
        task = client.post(
            f"/stories/{story['id']}/tasks",
            json={
                "name": "T", "description": "keep me", "hours_effort": 3,
                "resource_type_id": resource_type_id(project, "Developer"),
            },
            headers=auth_headers,
        ).json()
        assert task["hours_effort"] == 3
        assert task["order"] == 0

        resp = client.put(
            f"/stories/{story['id']}/tasks/{task['id']}",
            json={"hours_effort": 6, "resource_type_id": resource_type_id(project, "Tech Lead")},
            headers=auth_headers,
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["hours_effort"] == 6
        assert body["description"] == "keep me"
        assert body["resource_type"]["name"] == "Tech Lead"
