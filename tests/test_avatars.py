"""Avatar upload, preview, download and pagination."""

import base64
import io
import os

from PIL import Image


def upload(client, student_id, content, filename="harry.png", content_type="image/png"):
    return client.post(
        f"/avatar/{student_id}/upload", files={"file": (filename, content, content_type)}
    )


async def test_upload_saves_original_and_preview(client, make_student, avatars_dir, png_200x100):
    student = await make_student(name="Harry Potter")

    resp = await upload(client, student["id"], png_200x100)

    assert resp.status_code == 200
    info = resp.json()
    assert info["studentId"] == student["id"]
    assert info["fileSize"] == len(png_200x100)
    assert info["mediaType"] == "image/png"

    expected = avatars_dir / f"{student['id']}_harry_potter_full.png"
    assert os.path.normpath(info["filePath"]) == os.path.normpath(str(expected))
    assert expected.read_bytes() == png_200x100

    preview = await client.get(f"/avatar/{student['id']}/preview-data")
    assert preview.status_code == 200
    assert preview.headers["content-type"] == "image/png"
    with Image.open(io.BytesIO(preview.content)) as image:
        assert image.size == (100, 50)


async def test_preview_height_is_truncated(client, make_student, make_image):
    student = await make_student()

    await upload(client, student["id"], make_image(300, 200))

    preview = await client.get(f"/avatar/{student['id']}/preview-data")
    with Image.open(io.BytesIO(preview.content)) as image:
        assert image.size == (100, 66)


async def test_jpeg_preview_stays_jpeg(client, make_student, make_image):
    student = await make_student()

    resp = await upload(
        client, student["id"], make_image(400, 400, fmt="JPEG"), "harry.jpg", "image/jpeg"
    )
    assert resp.status_code == 200

    preview = await client.get(f"/avatar/{student['id']}/preview-data")
    with Image.open(io.BytesIO(preview.content)) as image:
        assert image.format == "JPEG"
        assert image.size == (100, 100)


async def test_reupload_replaces_avatar(client, make_student, make_image):
    student = await make_student()

    first = await upload(client, student["id"], make_image(200, 100))
    second = await upload(client, student["id"], make_image(100, 100))

    assert first.json()["id"] == second.json()["id"]
    preview = await client.get(f"/avatar/{student['id']}/preview-data")
    with Image.open(io.BytesIO(preview.content)) as image:
        assert image.size == (100, 100)
    page = await client.get("/avatar/all")
    assert page.json()["totalElements"] == 1


async def test_preview_info(client, make_student, png_200x100):
    student = await make_student()
    uploaded = (await upload(client, student["id"], png_200x100)).json()

    resp = await client.get(f"/avatar/{student['id']}/preview-info")

    assert resp.status_code == 200
    assert resp.json() == uploaded


async def test_full_streams_original(client, make_student, png_200x100):
    student = await make_student()
    await upload(client, student["id"], png_200x100)

    resp = await client.get(f"/avatar/{student['id']}/full")

    assert resp.status_code == 200
    assert resp.headers["content-type"] == "image/png"
    assert resp.content == png_200x100


async def test_full_with_missing_file_on_disk(client, make_student, png_200x100):
    student = await make_student()
    info = (await upload(client, student["id"], png_200x100)).json()
    os.remove(info["filePath"])

    resp = await client.get(f"/avatar/{student['id']}/full")

    assert resp.status_code == 500
    assert resp.json()["details"] == ["FILE_PROCESSING_ERROR"]


async def test_upload_rejects_empty_file(client, make_student):
    student = await make_student()

    resp = await upload(client, student["id"], b"")

    assert resp.status_code == 400
    assert resp.json()["message"] == "Uploaded file is empty or invalid"
    assert resp.json()["details"] == ["INVALID_FILE"]


async def test_upload_rejects_missing_extension(client, make_student, png_200x100):
    student = await make_student()

    resp = await upload(client, student["id"], png_200x100, filename="harry")

    assert resp.status_code == 400
    assert resp.json()["message"] == "File extension is missing or invalid"


async def test_upload_rejects_unsafe_extension(client, make_student, png_200x100, avatars_dir):
    student = await make_student()

    resp = await upload(client, student["id"], png_200x100, filename="avatar.png?x")

    assert resp.status_code == 400
    assert resp.json()["message"] == "File extension is missing or invalid"
    assert not avatars_dir.exists()


async def test_upload_for_unknown_student(client, avatars_dir, png_200x100):
    resp = await upload(client, 77, png_200x100)

    assert resp.status_code == 404
    assert resp.json()["details"] == ["STUDENT_NOT_FOUND"]
    assert not avatars_dir.exists()


async def test_upload_rejects_non_image(client, make_student, avatars_dir):
    student = await make_student()

    resp = await upload(client, student["id"], b"definitely not a png")

    assert resp.status_code == 500
    assert resp.json()["details"] == ["IMAGE_PROCESSING_ERROR"]
    assert (await client.get(f"/avatar/{student['id']}/preview-info")).status_code == 404
    assert list(avatars_dir.iterdir()) == []


async def test_failed_reupload_keeps_previous_avatar(client, make_student, avatars_dir, png_200x100):
    student = await make_student()
    original = (await upload(client, student["id"], png_200x100)).json()

    resp = await upload(client, student["id"], b"definitely not an image", filename="face.png")

    assert resp.status_code == 500
    assert resp.json()["details"] == ["IMAGE_PROCESSING_ERROR"]

    info = await client.get(f"/avatar/{student['id']}/preview-info")
    assert info.json() == original
    full = await client.get(f"/avatar/{student['id']}/full")
    assert full.content == png_200x100
    assert sorted(p.name for p in avatars_dir.iterdir()) == [
        f"{student['id']}_harry_potter_full.png"
    ]


async def test_avatar_reads_without_upload(client, make_student):
    student = await make_student()

    for suffix in ("preview-info", "preview-data", "full"):
        resp = await client.get(f"/avatar/{student['id']}/{suffix}")
        assert resp.status_code == 404
        assert resp.json()["message"] == f"Avatar not found for Student with ID {student['id']}"


async def test_deleting_student_removes_avatar_row(client, make_student, png_200x100):
    student = await make_student()
    await upload(client, student["id"], png_200x100)

    await client.delete(f"/student/{student['id']}")

    page = await client.get("/avatar/all")
    assert page.json()["totalElements"] == 0


# --- pagination ------------------------------------------------------------

async def test_avatar_pages(client, make_student, make_image):
    for i in range(3):
        student = await make_student(name=f"Student {i}")
        await upload(client, student["id"], make_image(120, 60))

    first = await client.get("/avatar/all", params={"page": 1, "size": 2})
    second = await client.get("/avatar/all", params={"page": 2, "size": 2})

    assert first.status_code == 200
    body = first.json()
    assert body["page"] == 1
    assert body["size"] == 2
    assert body["totalElements"] == 3
    assert body["totalPages"] == 2
    assert len(body["content"]) == 2
    assert len(second.json()["content"]) == 1

    preview = base64.b64decode(body["content"][0]["previewData"])
    with Image.open(io.BytesIO(preview)) as image:
        assert image.size == (100, 50)


async def test_avatar_page_defaults(client):
    resp = await client.get("/avatar/all")

    assert resp.status_code == 200
    assert resp.json()["page"] == 1
    assert resp.json()["size"] == 10
    assert resp.json()["content"] == []
    assert resp.json()["totalPages"] == 0


async def test_avatar_page_rejects_bad_numbers(client):
    zero_page = await client.get("/avatar/all", params={"page": 0})
    zero_size = await client.get("/avatar/all", params={"size": 0})

    assert zero_page.status_code == 400
    assert zero_page.json()["message"] == "Page number must be greater than 0"
    assert zero_size.status_code == 400
    assert zero_size.json()["message"] == "Page size must be greater than 0"
    assert zero_size.json()["details"] == ["INVALID_PAGE_REQUEST"]


async def test_avatar_list_without_pages(client, make_student, make_image):
    assert (await client.get("/avatar/all-list")).json() == []

    ids = []
    for i in range(12):
        student = await make_student(name=f"Student {i}")
        await upload(client, student["id"], make_image(100, 100))
        ids.append(student["id"])

    resp = await client.get("/avatar/all-list")

    assert resp.status_code == 200
    assert [a["studentId"] for a in resp.json()] == ids
    assert all(a["previewData"] for a in resp.json())
