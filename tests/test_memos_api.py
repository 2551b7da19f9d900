from app.memos.samples import SAMPLE_MEMOS


def _create(c, **over):
    body = {"title": "Note", "content": "body", "category": "personal", "tags": []}
    body.update(over)
    r = c.post("/memos", json=body)
    assert r.status_code == 201, r.text
    return r.json()


def test_create_and_get(client):
    memo = _create(client, title="Plan", category="work", tags=["q3"])
    r = client.get(f"/memos/{memo['id']}")
    assert r.status_code == 200
    assert r.json() == memo
    assert memo["created_at"] == memo["updated_at"]


def test_create_rejects_unknown_category(client):
    r = client.post("/memos", json={"title": "x", "content": "", "category": "misc", "tags": []})
    assert r.status_code == 422


def test_create_rejects_empty_title(client):
    r = client.post("/memos", json={"title": "", "content": "", "category": "work", "tags": []})
    assert r.status_code == 422


def test_get_missing_404(client):
    assert client.get("/memos/nope").status_code == 404


def test_list_filters(client):
    _create(client, title="alpha", category="work")
    _create(client, title="beta", category="idea", content="Alpha inside")
    _create(client, title="gamma", category="work")

    r = client.get("/memos")
    assert [m["title"] for m in r.json()["items"]] == ["gamma", "beta", "alpha"]

    r = client.get("/memos", params={"category": "work"})
    assert r.json()["count"] == 2

    r = client.get("/memos", params={"q": "alpha"})
    assert [m["title"] for m in r.json()["items"]] == ["beta", "alpha"]

    r = client.get("/memos", params={"q": "alpha", "category": "idea"})
    assert [m["title"] for m in r.json()["items"]] == ["beta"]


def test_update(client):
    memo = _create(client)
    r = client.put(f"/memos/{memo['id']}", json={"title": "New", "content": "c", "category": "study", "tags": ["t"]})
    assert r.status_code == 200
    out = r.json()
    assert out["title"] == "New" and out["tags"] == ["t"]
    assert out["created_at"] == memo["created_at"]


def test_update_missing_404(client):
    r = client.put("/memos/missing-id", json={"title": "x", "content": "", "category": "work", "tags": []})
    assert r.status_code == 404


def test_delete_and_count(client):
    memo = _create(client)
    _create(client)
    assert client.get("/memos/count").json() == {"count": 2}
    assert client.delete(f"/memos/{memo['id']}").status_code == 204
    assert client.delete(f"/memos/{memo['id']}").status_code == 204
    assert client.get("/memos/count").json() == {"count": 1}


def test_seed_and_clear(client):
    assert client.post("/memos/seed").json() == {"seeded": True}
    assert client.post("/memos/seed").json() == {"seeded": False}
    assert client.get("/memos/count").json()["count"] == len(SAMPLE_MEMOS)
    assert client.delete("/memos").status_code == 204
    assert client.get("/memos").json() == {"items": [], "count": 0}


def test_storage_failure_envelope(client, drop_tables):
    drop_tables()
    r = client.get("/memos")
    assert r.status_code == 500
    assert r.json()["detail"]["error"]["code"] == "fetch_failed"
    r = client.get("/memos/count")
    assert r.json()["detail"]["error"]["code"] == "count_failed"


def test_update_storage_failure_envelope(client, drop_tables):
    memo = _create(client)
    drop_tables()
    r = client.put(f"/memos/{memo['id']}", json={"title": "x", "content": "", "category": "work", "tags": []})
    assert r.status_code == 500
    assert r.json()["detail"]["error"]["code"] == "update_failed"


def test_timestamps_carry_utc_offset(client):
    memo = _create(client)
    for ts in (memo["created_at"], memo["updated_at"]):
        assert ts.endswith(("Z", "+00:00"))
    fetched = client.get(f"/memos/{memo['id']}").json()
    assert fetched["created_at"] == memo["created_at"]
