"""
Тесты эндпоинтов /api/documents
"""
from datetime import datetime
import uuid

import pytest

from tests.helpers import bearer, register


@pytest.fixture
async def alice(client):
    return bearer(await register(client, "a@x.com"))


@pytest.fixture
async def bob(client):
    return bearer(await register(client, "b@x.com"))


async def create(client, headers, title="Notes", content="Body"):
    response = await client.post("/documents", json={"title": title, "content": content}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestDocumentCrud:
    """Основной сценарий работы с документами"""

    async def test_full_scenario(self, client):
        token = await register(client, "a@x.com", "secret1")
        headers = bearer(token)

        me = await client.get("/auth/me", headers=headers)
        user_id = me.json()["data"]["id"]

        created = await client.post("/documents", json={"title": "Note", "content": "hello"}, headers=headers)
        assert created.status_code == 201
        document = created.json()["data"]
        assert document["createdBy"] == user_id
        url = f"/documents/{document['id']}"

        listed = await client.get("/documents", headers=headers)
        assert listed.json() == {"success": True, "count": 1, "data": [document]}

        updated = await client.put(url, json={"title": "Note2"}, headers=headers)
        assert updated.status_code == 200

        fetched = await client.get(url, headers=headers)
        assert fetched.json()["data"]["title"] == "Note2"
        assert fetched.json()["data"]["content"] == "hello"

        deleted = await client.delete(url, headers=headers)
        assert deleted.status_code == 200
        assert deleted.json() == {"success": True, "data": {}}

        gone = await client.get(url, headers=headers)
        assert gone.status_code == 404
        assert gone.json() == {"success": False, "error": "Document not found"}

    async def test_response_fields_are_camel_case(self, client, alice):
        document = await create(client, alice)
        assert set(document) == {"id", "title", "content", "createdBy", "createdAt", "updatedAt"}

    async def test_list_newest_first(self, client, alice):
        await create(client, alice, title="First")
        await create(client, alice, title="Second")

        response = await client.get("/documents", headers=alice)
        assert [doc["title"] for doc in response.json()["data"]] == ["Second", "First"]

    async def test_owner_cannot_be_spoofed(self, client, alice):
        response = await client.post(
            "/documents",
            json={"title": "T", "content": "C", "createdBy": str(uuid.uuid4())},
            headers=alice,
        )
        me = await client.get("/auth/me", headers=alice)
        assert response.json()["data"]["createdBy"] == me.json()["data"]["id"]

    async def test_update_refreshes_updated_at(self, client, alice):
        document = await create(client, alice)

        response = await client.put(f"/documents/{document['id']}", json={"content": "New"}, headers=alice)
        updated = response.json()["data"]

        assert updated["createdAt"] == document["createdAt"]
        assert datetime.fromisoformat(updated["updatedAt"]) > datetime.fromisoformat(document["updatedAt"])

    async def test_get_single_document(self, client, alice):
        document = await create(client, alice)

        response = await client.get(f"/documents/{document['id']}", headers=alice)
        assert response.status_code == 200
        assert response.json() == {"success": True, "data": document}


class TestDocumentValidation:
    """Некорректные данные документа"""

    async def test_missing_title(self, client, alice):
        response = await client.post("/documents", json={"content": "C"}, headers=alice)
        assert response.status_code == 400
        assert response.json()["success"] is False

    async def test_blank_title(self, client, alice):
        response = await client.post("/documents", json={"title": "  ", "content": "C"}, headers=alice)
        assert response.status_code == 400
        assert "Please add a title" in response.json()["error"]


class TestDocumentAccess:
    """Авторизация и владелец"""

    async def test_requires_token(self, client):
        response = await client.get("/documents")
        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Not authorized to access this route"}

    @pytest.mark.parametrize("method", ["get", "put", "delete"])
    async def test_foreign_document_forbidden(self, client, alice, bob, method):
        document = await create(client, alice)
        url = f"/documents/{document['id']}"

        if method == "put":
            response = await client.put(url, json={"title": "Hacked"}, headers=bob)
        else:
            response = await getattr(client, method)(url, headers=bob)

        assert response.status_code == 403
        assert response.json()["success"] is False

        still_there = await client.get(url, headers=alice)
        assert still_there.json()["data"]["title"] == "Notes"

    async def test_foreign_documents_not_listed(self, client, alice, bob):
        await create(client, alice)

        response = await client.get("/documents", headers=bob)
        assert response.json()["count"] == 0

    async def test_missing_document(self, client, alice):
        response = await client.get(f"/documents/{uuid.uuid4()}", headers=alice)
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Document not found"}

    @pytest.mark.parametrize("method", ["put", "delete"])
    async def test_missing_document_on_write(self, client, alice, method):
        url = f"/documents/{uuid.uuid4()}"

        if method == "put":
            response = await client.put(url, json={"title": "New"}, headers=alice)
        else:
            response = await client.delete(url, headers=alice)

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Document not found"}

    async def test_malformed_id(self, client, alice):
        response = await client.get("/documents/not-a-uuid", headers=alice)
        assert response.status_code == 404

    async def test_delete_twice(self, client, alice):
        document = await create(client, alice)
        url = f"/documents/{document['id']}"

        assert (await client.delete(url, headers=alice)).status_code == 200
        assert (await client.delete(url, headers=alice)).status_code == 404
