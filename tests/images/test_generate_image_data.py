import pytest

from generate_data.image import generate_image_data, insert_images_async


class TestGenerateImageData:
    @pytest.mark.asyncio
    async def test_only_known_image_files_are_seeded(self, tmp_path, image_repository):
        seed_dir = tmp_path / "seed"
        seed_dir.mkdir()
        (seed_dir / "a.PNG").write_bytes(b"\x89PNG")
        (seed_dir / "b.jpg").write_bytes(b"\xff\xd8\xff")
        (seed_dir / "notes.txt").write_text("skip me")

        records = [record async for record in generate_image_data(seed_dir)]
        assert [record.mime for record in records] == ["image/png", "image/jpeg"]

        count = await insert_images_async(image_repository, seed_dir)
        images = await image_repository.load_all()

        assert count == 2
        assert [image.data for image in images] == [b"\x89PNG", b"\xff\xd8\xff"]
