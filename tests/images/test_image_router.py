import pytest

from src.config.database import Base


class TestIndexRouter:
    @pytest.mark.asyncio
    async def test_get_index_without_images(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert 'name="image"' in response.text
        assert "No images uploaded yet." in response.text

    @pytest.mark.asyncio
    async def test_post_index_saves_and_lists_images(self, client):
        await client.post("/", files={"image": ("a.png", b"", "image/png")})
        response = await client.post("/", files={"image": ("b.jpg", b"\xff\xd8\xff", "image/jpeg")})

        assert response.status_code == 200
        assert '<img src="data:image/png;base64,"' in response.text
        assert '<img src="data:image/jpeg;base64,/9j/"' in response.text

        response = await client.get("/")
        assert response.text.count("<img ") == 2

    @pytest.mark.asyncio
    async def test_post_index_without_image_part(self, client):
        response = await client.post("/", data={"other": "value"})

        assert response.status_code == 422


class TestImageApiRouter:
    @pytest.mark.asyncio
    async def test_upload_and_list_images(self, client):
        response = await client.get("/api/v1/images")
        assert response.status_code == 200
        assert response.json() == {"images": []}

        response = await client.post("/api/v1/images", files={"image": ("a.jpg", b"\xff\xd8\xff", "image/jpeg")})
        assert response.status_code == 201
        body = response.json()
        assert isinstance(body["id"], int)
        assert body["uri"] == "data:image/jpeg;base64,/9j/"

        response = await client.get("/api/v1/images")
        assert response.json() == {"images": ["data:image/jpeg;base64,/9j/"]}

    @pytest.mark.asyncio
    async def test_storage_failure_returns_500(self, engine, client):
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

        response = await client.get("/api/v1/images")

        assert response.status_code == 500
        assert response.json() == {"detail": "Database error"}
