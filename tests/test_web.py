"""Tests for the todostore HTTP API."""

import tempfile

import pytest
from fastapi.testclient import TestClient

from todostore.web.app import app, get_store
from todostore.store import MAX_TASK_ID, JsonTaskStore


@pytest.fixture
def temp_store_dir():
    """Create a temporary .todostore directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonTaskStore(tmpdir)
        store.initialize()
        yield tmpdir, store


@pytest.fixture
def client(temp_store_dir):
    """Test client with overridden store dependency."""
    tmpdir, store = temp_store_dir

    def override_get_store():
        return store

    app.dependency_overrides[get_store] = override_get_store

    with TestClient(app) as client:
        yield client, store

    app.dependency_overrides.clear()


class TestMainRoutes:
    """Test top-level routes."""

    def test_root_redirects_to_tasks(self, client):
        """Root path should redirect to /tasks."""
        test_client, _ = client
        response = test_client.get("/", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/tasks"

    def test_list_empty(self, client):
        """An empty store lists nothing."""
        test_client, _ = client
        response = test_client.get("/tasks")
        assert response.status_code == 200
        assert response.json() == []


class TestTaskCRUD:
    """Test task operations over HTTP."""

    def test_create_task(self, client):
        """Creating a task returns its id."""
        test_client, store = client
        response = test_client.post("/tasks", json={"description": "Buy milk"})

        assert response.status_code == 201
        assert response.json() == {"id": 0}

        tasks = store.list_tasks()
        assert len(tasks) == 1
        assert tasks[0].description == "Buy milk"

    def test_create_requires_description(self, client):
        """A body without description is rejected."""
        test_client, _ = client
        response = test_client.post("/tasks", json={})
        assert response.status_code == 422

    def test_get_task(self, client):
        """Task detail is returned as a dict."""
        test_client, store = client
        task_id = store.add_task("Buy milk")

        response = test_client.get(f"/tasks/{task_id}")
        assert response.status_code == 200
        assert response.json() == {
            "id": task_id,
            "description": "Buy milk",
            "completed": False,
        }

    def test_get_nonexistent_task(self, client):
        """Missing tasks give 404."""
        test_client, _ = client
        response = test_client.get("/tasks/999")
        assert response.status_code == 404

    def test_complete_task(self, client):
        """Completing reports the boolean result."""
        test_client, store = client
        task_id = store.add_task("Buy milk")

        response = test_client.post(f"/tasks/{task_id}/complete")
        assert response.status_code == 200
        assert response.json() == {"id": task_id, "completed": True}
        assert store.get_task(task_id).completed is True

    def test_complete_nonexistent_task(self, client):
        """Completing a missing task reports False."""
        test_client, _ = client
        response = test_client.post("/tasks/999/complete")
        assert response.status_code == 200
        assert response.json() == {"id": 999, "completed": False}

    def test_delete_task(self, client):
        """Deleting reports the boolean result once."""
        test_client, store = client
        task_id = store.add_task("Buy milk")

        response = test_client.delete(f"/tasks/{task_id}")
        assert response.json() == {"id": task_id, "removed": True}
        assert store.get_task(task_id) is None

        response = test_client.delete(f"/tasks/{task_id}")
        assert response.json() == {"id": task_id, "removed": False}

    def test_list_order(self, client):
        """Listing keeps insertion order."""
        test_client, store = client
        for description in ("a", "b", "c"):
            store.add_task(description)
        store.complete_task(2)

        response = test_client.get("/tasks")
        assert [t["description"] for t in response.json()] == ["a", "b", "c"]
        assert [t["completed"] for t in response.json()] == [False, False, True]


class TestValidation:
    """Test id validation and store errors."""

    @pytest.mark.parametrize("task_id", ["-1", str(MAX_TASK_ID + 1), "abc"])
    def test_invalid_ids_rejected(self, client, task_id):
        """Ids outside the unsigned 32-bit range are rejected."""
        test_client, _ = client
        assert test_client.get(f"/tasks/{task_id}").status_code == 422

    def test_uninitialized_store(self, tmp_path, monkeypatch):
        """A missing .todostore directory gives 503."""
        monkeypatch.setenv("TODOSTORE_ROOT", str(tmp_path))

        with TestClient(app) as test_client:
            response = test_client.get("/tasks")

        assert response.status_code == 503
        assert "todostore init" in response.json()["detail"]
