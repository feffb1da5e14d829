"""
Integration tests for todo endpoints.
"""

import pytest


async def _create_milestone(client):
    response = await client.post(
        "/api/milestones",
        json={"title": "Demo Day", "date": "2026-08-01", "eventType": "demo-day"},
    )
    assert response.status_code == 201, response.text
    return response.json()


async def _create_todo(client, **payload):
    response = await client.post("/api/todos", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_demo_day_scenario(client):
    """Create a milestone, attach a todo, then list root todos for it."""
    milestone = await _create_milestone(client)
    assert milestone["color"] == "#14b8a6"

    todo = await _create_todo(client, title="Prep slides", milestoneId=milestone["id"])
    assert todo["status"] == "TODO"
    assert todo["priority"] == "MEDIUM"
    assert todo["order"] == 0
    assert todo["milestone"]["id"] == milestone["id"]

    response = await client.get(
        "/api/todos",
        params={"milestoneId": milestone["id"], "rootOnly": "true"},
    )

    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [todo["id"]]


@pytest.mark.asyncio
async def test_create_todo_missing_title(client):
    response = await client.post("/api/todos", json={"description": "no title"})

    assert response.status_code == 400
    assert response.json()["detail"] == "title is required"


@pytest.mark.asyncio
async def test_create_todo_blank_title(client):
    response = await client.post("/api/todos", json={"title": "   "})

    assert response.status_code == 400
    assert "title is required" in response.json()["detail"]


@pytest.mark.asyncio
async def test_create_todo_invalid_status(client):
    response = await client.post("/api/todos", json={"title": "x", "status": "BLOCKED"})

    assert response.status_code == 400
    assert response.json()["detail"].startswith("status:")


@pytest.mark.asyncio
async def test_create_todo_unknown_milestone(client):
    response = await client.post("/api/todos", json={"title": "x", "milestoneId": "missing"})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_child_todo(client):
    parent = await _create_todo(client, title="Prep slides")

    child = await _create_todo(client, title="Team decks", parentId=parent["id"], deadline="2026-07-30")

    assert child["parentId"] == parent["id"]
    assert child["parent"]["id"] == parent["id"]
    assert child["deadline"] == "2026-07-30"
    fetched = (await client.get(f"/api/todos/{parent['id']}")).json()
    assert [c["id"] for c in fetched["children"]] == [child["id"]]


@pytest.mark.asyncio
async def test_list_todos_by_status_and_parent(client):
    parent = await _create_todo(client, title="Parent")
    done = await _create_todo(client, title="Done child", parentId=parent["id"], status="DONE")
    await _create_todo(client, title="Open child", parentId=parent["id"])

    by_status = await client.get("/api/todos", params={"status": "DONE"})
    by_parent = await client.get("/api/todos", params={"parentId": parent["id"]})

    assert [t["id"] for t in by_status.json()] == [done["id"]]
    assert len(by_parent.json()) == 2


@pytest.mark.asyncio
async def test_get_todo_not_found(client):
    response = await client.get("/api/todos/nonexistent")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_todo_status_sets_completed_at(client):
    """Test completedAt follows status transitions."""
    todo = await _create_todo(client, title="Prep slides")
    assert todo["completedAt"] is None

    done = await client.put(f"/api/todos/{todo['id']}", json={"status": "DONE"})
    assert done.status_code == 200
    assert done.json()["completedAt"] is not None

    renamed = await client.put(f"/api/todos/{todo['id']}", json={"title": "Prep final slides"})
    assert renamed.json()["completedAt"] == done.json()["completedAt"]

    reopened = await client.put(f"/api/todos/{todo['id']}", json={"status": "IN_PROGRESS"})
    assert reopened.json()["completedAt"] is None


@pytest.mark.asyncio
async def test_update_todo_clears_deadline(client):
    todo = await _create_todo(client, title="Prep slides", deadline="2026-07-30")

    response = await client.put(f"/api/todos/{todo['id']}", json={"deadline": None})

    assert response.status_code == 200
    assert response.json()["deadline"] is None


@pytest.mark.asyncio
async def test_update_todo_self_parent(client):
    todo = await _create_todo(client, title="Prep slides")

    response = await client.put(f"/api/todos/{todo['id']}", json={"parentId": todo["id"]})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_todo_not_found(client):
    response = await client.put("/api/todos/nonexistent", json={"title": "x"})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_todo_cascades(client):
    """Test deleting a todo removes its children."""
    parent = await _create_todo(client, title="Parent")
    child = await _create_todo(client, title="Child", parentId=parent["id"])

    response = await client.delete(f"/api/todos/{parent['id']}")

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert (await client.get(f"/api/todos/{child['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_delete_todo_not_found(client):
    response = await client.delete("/api/todos/nonexistent")

    assert response.status_code == 404
