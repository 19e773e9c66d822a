"""
Integration Tests for Blogs API.

Tests the full request/response cycle against a temporary blogs file.
"""

import json

import pytest
from httpx import AsyncClient

from blogapi.backend.core.exception_handlers import INVALID_BODY_MESSAGE
from blogapi.backend.main import create_app
from blogapi.backend.repositories.blog import BlogStore

NOT_FOUND = "The blog with the given ID not found!"


class TestCreateBlog:
    """Tests for POST /api/blogs."""

    @pytest.mark.asyncio
    async def test_first_blog_gets_id_one(self, client: AsyncClient):
        response = await client.post("/api/blogs", json={"content": "First post"})

        assert response.status_code == 200
        assert response.json() == {"id": 1, "content": "First post"}

    @pytest.mark.asyncio
    async def test_ids_increase(self, client: AsyncClient):
        await client.post("/api/blogs", json={"content": "First post"})
        response = await client.post("/api/blogs", json={"content": "Second post"})

        assert response.json()["id"] == 2

    @pytest.mark.asyncio
    async def test_short_content_rejected(self, client: AsyncClient):
        response = await client.post("/api/blogs", json={"content": "hi"})

        assert response.status_code == 400
        assert response.text == '"content" length must be at least 5 characters long'
        assert (await client.get("/api/blogs")).json() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("body", "message"),
        [
            ({}, '"content" is required'),
            ({"content": 12345}, '"content" must be a string'),
            ({"content": "Valid text", "title": "x"}, '"title" is not allowed'),
            ("just a string", '"value" must be of type object'),
        ],
    )
    async def test_invalid_payloads(self, client: AsyncClient, body, message):
        response = await client.post("/api/blogs", json=body)

        assert response.status_code == 400
        assert response.text == message

    @pytest.mark.asyncio
    async def test_empty_body_rejected(self, client: AsyncClient):
        response = await client.post("/api/blogs")

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_malformed_json_rejected(self, client: AsyncClient):
        response = await client.post(
            "/api/blogs",
            content=b'{"content": ',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.text == INVALID_BODY_MESSAGE

    @pytest.mark.asyncio
    async def test_rejected_post_does_not_consume_id(self, client: AsyncClient):
        await client.post("/api/blogs", json={"content": "no"})
        response = await client.post("/api/blogs", json={"content": "First post"})

        assert response.json()["id"] == 1


class TestReadBlogs:
    """Tests for GET /api/blogs and GET /api/blogs/{id}."""

    @pytest.mark.asyncio
    async def test_empty_list(self, client: AsyncClient):
        response = await client.get("/api/blogs")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_list_in_insertion_order(self, client: AsyncClient):
        for content in ("First post", "Second post", "Third post"):
            await client.post("/api/blogs", json={"content": content})

        response = await client.get("/api/blogs")

        assert [b["content"] for b in response.json()] == ["First post", "Second post", "Third post"]

    @pytest.mark.asyncio
    async def test_get_by_id(self, client: AsyncClient):
        await client.post("/api/blogs", json={"content": "First post"})

        response = await client.get("/api/blogs/1")

        assert response.status_code == 200
        assert response.json() == {"id": 1, "content": "First post"}

    @pytest.mark.asyncio
    async def test_get_unknown_id(self, client: AsyncClient):
        response = await client.get("/api/blogs/99")

        assert response.status_code == 404
        assert response.text == NOT_FOUND
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_non_numeric_id_is_not_found(self, client: AsyncClient):
        await client.post("/api/blogs", json={"content": "First post"})

        response = await client.get("/api/blogs/abc")

        assert response.status_code == 404
        assert response.text == NOT_FOUND

    @pytest.mark.asyncio
    async def test_id_with_trailing_text_uses_leading_number(self, client: AsyncClient):
        await client.post("/api/blogs", json={"content": "First post"})

        response = await client.get("/api/blogs/1abc")

        assert response.status_code == 200
        assert response.json()["id"] == 1


class TestUpdateBlog:
    """Tests for PUT /api/blogs/{id}."""

    @pytest.mark.asyncio
    async def test_replaces_content(self, client: AsyncClient):
        await client.post("/api/blogs", json={"content": "First post"})

        response = await client.put("/api/blogs/1", json={"content": "Edited post"})

        assert response.status_code == 200
        assert response.json() == {"id": 1, "content": "Edited post"}
        assert (await client.get("/api/blogs/1")).json()["content"] == "Edited post"

    @pytest.mark.asyncio
    async def test_unknown_id(self, client: AsyncClient):
        response = await client.put("/api/blogs/5", json={"content": "Edited post"})

        assert response.status_code == 404
        assert response.text == NOT_FOUND

    @pytest.mark.asyncio
    async def test_unknown_id_reported_before_invalid_body(self, client: AsyncClient):
        response = await client.put("/api/blogs/5", json={"content": "no"})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_invalid_body_leaves_blog_unchanged(self, client: AsyncClient):
        await client.post("/api/blogs", json={"content": "First post"})

        response = await client.put("/api/blogs/1", json={"content": "no"})

        assert response.status_code == 400
        assert (await client.get("/api/blogs/1")).json()["content"] == "First post"


class TestDeleteBlog:
    """Tests for DELETE /api/blogs/{id}."""

    @pytest.mark.asyncio
    async def test_returns_remaining_blogs(self, client: AsyncClient):
        await client.post("/api/blogs", json={"content": "First post"})
        await client.post("/api/blogs", json={"content": "Second post"})

        response = await client.delete("/api/blogs/1")

        assert response.status_code == 200
        assert response.json() == [{"id": 2, "content": "Second post"}]

    @pytest.mark.asyncio
    async def test_unknown_id(self, client: AsyncClient):
        response = await client.delete("/api/blogs/1")

        assert response.status_code == 404
        assert response.text == NOT_FOUND

    @pytest.mark.asyncio
    async def test_deleted_id_not_reused(self, client: AsyncClient):
        await client.post("/api/blogs", json={"content": "First post"})
        await client.post("/api/blogs", json={"content": "Second post"})
        await client.delete("/api/blogs/2")

        response = await client.post("/api/blogs", json={"content": "Third post"})

        assert response.json()["id"] == 3


class TestPersistence:
    """The blogs file mirrors the collection across restarts."""

    @pytest.mark.asyncio
    async def test_file_written_after_each_mutation(self, client: AsyncClient, blogs_file):
        await client.post("/api/blogs", json={"content": "First post"})
        await client.post("/api/blogs", json={"content": "Second post"})
        await client.delete("/api/blogs/1")

        assert json.loads(blogs_file.read_text(encoding="utf-8")) == [
            {"id": 2, "content": "Second post"},
        ]

    @pytest.mark.asyncio
    async def test_restart_continues_from_file(self, write_blogs, blogs_file):
        from httpx import ASGITransport

        write_blogs([{"id": 4, "content": "Older post"}, {"id": 7, "content": "Newer post"}])
        store = BlogStore(blogs_file)
        store.load()

        async with AsyncClient(
            transport=ASGITransport(app=create_app(store=store)),
            base_url="http://test",
        ) as client:
            listed = await client.get("/api/blogs")
            created = await client.post("/api/blogs", json={"content": "Fresh post"})

        assert [b["id"] for b in listed.json()] == [4, 7]
        assert created.json()["id"] == 8


class TestHomeAndHealth:
    """Tests for / and /health."""

    @pytest.mark.asyncio
    async def test_home_greeting(self, client: AsyncClient):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.text == "Hey! This is the home page"

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestRequestContext:
    """Tests for the request context headers."""

    @pytest.mark.asyncio
    async def test_generates_request_id(self, client: AsyncClient):
        response = await client.get("/api/blogs")

        # UUID format: 8-4-4-4-12 = 36 characters
        assert len(response.headers["X-Request-ID"]) == 36

    @pytest.mark.asyncio
    async def test_propagates_provided_request_id(self, client: AsyncClient):
        response = await client.get("/api/blogs/9", headers={"X-Request-ID": "my-request-id"})

        assert response.status_code == 404
        assert response.headers["X-Request-ID"] == "my-request-id"

    @pytest.mark.asyncio
    async def test_includes_response_time(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.headers["X-Response-Time"].endswith("ms")


class TestUnmatchedRequests:
    """Ids and paths that reach no blog are plain-text 404s."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    async def test_overlong_numeric_id_is_not_found(self, client: AsyncClient, method):
        response = await client.request(method, "/api/blogs/" + "9" * 5000, json={"content": "hello"})

        assert response.status_code == 404
        assert response.text == NOT_FOUND

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["PUT", "DELETE"])
    async def test_blank_id_is_not_found(self, client: AsyncClient, method):
        response = await client.request(method, "/api/blogs/", json={"content": "hello"})

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_unknown_route_is_plain_text(self, client: AsyncClient):
        response = await client.get("/api/nope")

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Not Found"

    @pytest.mark.asyncio
    async def test_wrong_method_is_plain_text(self, client: AsyncClient):
        response = await client.patch("/api/blogs/1", json={"content": "hello"})

        assert response.status_code == 405
        assert response.text == "Method Not Allowed"
        assert "allow" in response.headers
