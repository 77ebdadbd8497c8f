import httpx


async def register(client: httpx.AsyncClient, email: str = "a@x.com", password: str = "secret1") -> str:
    """Регистрация через API, возвращает токен"""
    response = await client.post("/auth/register", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    return response.json()["token"]


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
