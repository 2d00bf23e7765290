"""Task CRUD and enrichment."""

from datetime import date

from app.domain.models.task import Task


def test_create_applies_defaults_and_enriches(api, make_client, make_project, make_task, make_user):
    client = make_client(company_name="Acme")
    project = make_project(client_id=client["id"], title="Portal")
    user = make_user(name="Dana")

    task = make_task(project, assigned_to=user["id"])

    assert task["status"] == "pending"
    assert task["priority"] == "medium"
    assert task["type"] == "development"
    assert task["due_date"] == "2030-01-15"
    assert task["client_name"] == "Acme"
    assert task["assigned_to_name"] == "Dana"
    assert task["project_title"] == "Portal"


def test_create_requires_due_date(api, make_project):
    project = make_project()

    response = api.post(
        "/api/tasks",
        json={"title": "No date", "project_id": project["id"], "client_id": project["client_id"]},
    )

    assert response.status_code == 400
    assert response.json()["error"]["details"]["fields"] == ["due_date"]


def test_create_rejects_unknown_type_and_priority(api, make_project):
    project = make_project()
    base = {"title": "T", "project_id": project["id"], "client_id": project["client_id"], "due_date": "2030-01-01"}

    assert api.post("/api/tasks", json={**base, "type": "research"}).status_code == 400
    assert api.post("/api/tasks", json={**base, "priority": "urgent"}).status_code == 400


def test_create_with_unknown_references(api, make_project):
    project = make_project()
    base = {"title": "T", "project_id": project["id"], "client_id": project["client_id"], "due_date": "2030-01-01"}

    for override in ({"project_id": 999}, {"client_id": 999}, {"assigned_to": 999}):
        response = api.post("/api/tasks", json={**base, **override})
        assert response.status_code == 400
        assert response.json()["error"]["details"]["field"] == next(iter(override))

    assert api.get("/api/tasks").json()["data"] == []


def test_task_without_project_reads_no_project(api, db_session):
    task = Task(title="Loose end", due_date=date(2030, 1, 1))
    db_session.add(task)
    db_session.commit()

    fetched = api.get(f"/api/tasks/{task.id}").json()["data"]

    assert fetched["project_title"] == "No Project"


def test_update_and_filter_by_project(api, make_project, make_task):
    first = make_project()
    second = make_project()
    task = make_task(first)
    make_task(second)

    response = api.put(
        f"/api/tasks/{task['id']}",
        json={"status": "completed", "type": "round-r1", "budget": 75, "title": None},
    )

    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["status"] == "completed"
    assert updated["type"] == "round-r1"
    assert updated["budget"] == 75
    assert updated["title"] == task["title"]

    listed = api.get("/api/tasks", params={"project_id": first["id"]}).json()["data"]
    assert [t["id"] for t in listed] == [task["id"]]


def test_deleting_user_unassigns_tasks(api, make_project, make_task, make_user):
    user = make_user()
    task = make_task(make_project(), assigned_to=user["id"])

    assert api.delete(f"/api/users/{user['id']}").status_code == 200

    fetched = api.get(f"/api/tasks/{task['id']}").json()["data"]
    assert fetched["assigned_to"] is None
    assert fetched["assigned_to_name"] is None


def test_missing_task_is_404(api):
    assert api.get("/api/tasks/5").status_code == 404
    assert api.put("/api/tasks/5", json={"title": "x"}).status_code == 404
    assert api.delete("/api/tasks/5").status_code == 404
