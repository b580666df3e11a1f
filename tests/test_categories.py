from uuid import uuid4

import pytest

from taskflow.backend.core.errors import NotFound
from taskflow.backend.models.category import Category
from taskflow.backend.models.task import Task
from taskflow.backend.services import categories
from taskflow.backend.services.access import OwnerScope
from taskflow.backend.services.categories import count_tasks_in_category


def _category(client, headers, name):
    r = client.post("/categories/", json={"name": name}, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()


def test_categories_listed_by_name(client, signup):
    headers = signup()
    for name in ("Work", "Errands", "Home"):
        _category(client, headers, name)

    r = client.get("/categories/", headers=headers)
    assert [c["name"] for c in r.json()] == ["Errands", "Home", "Work"]
    assert set(r.json()[0]) == {"id", "owner", "name"}


def test_category_name_required(client, signup):
    headers = signup()
    r = client.post("/categories/", json={"name": "  "}, headers=headers)
    assert r.status_code == 422
    assert r.json()["detail"] == "Category name is required"


def test_rename_category(client, signup):
    headers = signup()
    cat = _category(client, headers, "Wrok")

    r = client.put(f"/categories/{cat['id']}", json={"name": "Work"}, headers=headers)
    assert r.status_code == 200
    assert r.json()["name"] == "Work"


def test_delete_guard_blocks_referenced_category(client, signup):
    headers = signup()
    cat = _category(client, headers, "Home")
    r = client.post("/tasks/", json={"title": "dishes", "category": cat["id"]}, headers=headers)
    assert r.status_code == 201

    r = client.delete(f"/categories/{cat['id']}", headers=headers)
    assert r.status_code == 409
    assert r.json()["detail"] == "Cannot delete category with existing tasks."
    assert [c["id"] for c in client.get("/categories/", headers=headers).json()] == [cat["id"]]


def test_delete_unreferenced_category(client, signup):
    headers = signup()
    cat = _category(client, headers, "Temp")
    task = client.post(
        "/tasks/", json={"title": "t", "category": cat["id"]}, headers=headers
    ).json()["task"]
    # detach, then delete succeeds
    r = client.patch(f"/tasks/{task['id']}", json={"category": None}, headers=headers)
    assert r.json()["category"] is None

    r = client.delete(f"/categories/{cat['id']}", headers=headers)
    assert r.status_code == 200
    assert r.json() == {"message": "Category deleted"}
    assert client.get("/categories/", headers=headers).json() == []


def test_category_ownership_isolation(client, signup):
    alice = signup(email="alice@example.com")
    bob = signup(email="bob@example.com")
    cat = _category(client, alice, "Private")
    url = f"/categories/{cat['id']}"

    assert client.get("/categories/", headers=bob).json() == []
    assert client.put(url, json={"name": "mine now"}, headers=bob).status_code == 404
    r = client.delete(url, headers=bob)
    assert r.status_code == 404
    assert r.json() == {"detail": "Category not found"}
    assert client.get("/categories/", headers=alice).json()[0]["name"] == "Private"


def test_delete_missing_category_is_not_found(client, signup):
    headers = signup()
    assert client.delete(f"/categories/{uuid4()}", headers=headers).status_code == 404


def test_count_is_owner_scoped(db):
    owner, other, category_id = uuid4(), uuid4(), uuid4()
    db.add(Task(user_id=owner, title="a", category_id=category_id))
    db.add(Task(user_id=other, title="b", category_id=category_id))
    db.commit()

    assert count_tasks_in_category(OwnerScope(db, owner), category_id) == 1


def test_category_removed_mid_delete_is_not_found(db, monkeypatch):
    owner = uuid4()
    category = Category(user_id=owner, name="Gone soon")
    db.add(category)
    db.commit()
    category_id = category.category_id

    original = categories.get_category
    calls = []

    def removed_after_lookup(scope, cid):
        found = original(scope, cid)
        if not calls:
            # another request deletes it between the lookup and our DELETE
            scope.db.delete(found)
            scope.db.commit()
        calls.append(cid)
        return found

    monkeypatch.setattr(categories, "get_category", removed_after_lookup)

    with pytest.raises(NotFound):
        categories.delete_category(OwnerScope(db, owner), category_id)
