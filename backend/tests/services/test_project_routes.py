"""Project routes — list/detail through the real app, both storage backends."""

from app.schemas.project import InsertProject


async def _create(storage, title: str, stack=("Python",)):
    return await storage.create_project(InsertProject(
        title=title, short_description="S", problem_statement="P",
        methodology="M", outcome="O", tech_stack=list(stack),
    ))


async def test_list_projects_empty(client):
    res = await client.get("/api/projects")
    assert res.status_code == 200
    assert res.json() == []


async def test_list_projects_wire_shape(client, storage):
    await _create(storage, "Older", ["Scala"])
    await _create(storage, "Newer", ["Python", "Ray"])

    res = await client.get("/api/projects")
    assert res.status_code == 200
    body = res.json()
    assert [p["title"] for p in body] == ["Newer", "Older"]
    assert body[0]["techStack"] == ["Python", "Ray"]
    assert set(body[0]) == {
        "id", "title", "shortDescription", "problemStatement", "methodology",
        "outcome", "techStack", "githubUrl", "demoUrl", "imageUrl", "createdAt",
    }
    assert isinstance(body[0]["createdAt"], str)


async def test_get_project_found(client, storage):
    created = await _create(storage, "Detail")
    res = await client.get(f"/api/projects/{created.id}")
    assert res.status_code == 200
    assert res.json()["id"] == created.id
    assert res.json()["title"] == "Detail"


async def test_get_project_unknown_id_is_404(client):
    res = await client.get("/api/projects/12345")
    assert res.status_code == 404
    assert res.json() == {"message": "Project not found"}


async def test_get_project_malformed_id_is_404(client):
    for bad in ("abc", "0", "-4", "1.5"):
        res = await client.get(f"/api/projects/{bad}")
        assert res.status_code == 404, bad
        assert res.json() == {"message": "Project not found"}


async def test_list_projects_rejects_unregistered_method(client):
    res = await client.post("/api/projects", json={})
    assert res.status_code == 405
