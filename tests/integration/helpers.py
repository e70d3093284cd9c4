"""Helpers shared by the API integration tests."""

from typing import Any

from httpx import AsyncClient, Response


async def current_user_id(client: AsyncClient, headers: dict[str, str]) -> str:
    """Look up the account id behind a set of auth headers."""
    response = await client.get("/api/auth", headers=headers)
    assert response.status_code == 200, response.text
    return str(response.json()["data"]["id"])


async def create_profile(
    client: AsyncClient, headers: dict[str, str], **fields: Any
) -> dict[str, Any]:
    """Create (or update) the caller's profile and return it."""
    body = {"status": "Developer", "skills": "python, sql", **fields}
    response = await client.post("/api/profile", json=body, headers=headers)
    assert response.status_code == 200, response.text
    data: dict[str, Any] = response.json()["data"]
    return data


async def create_post(client: AsyncClient, headers: dict[str, str], text: str) -> dict[str, Any]:
    """Write a post and return it."""
    response = await client.post("/api/posts", json={"text": text}, headers=headers)
    assert response.status_code == 200, response.text
    data: dict[str, Any] = response.json()["data"]
    return data


def error_code(response: Response) -> str:
    """Error code of a failed response; every error body carries ``msg``."""
    body = response.json()
    assert "msg" in body
    return str(body["error_code"])
