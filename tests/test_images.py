import io

import pytest
from PIL import Image

from school.core.exceptions import ImageProcessingError, InvalidPageRequestError
from school.utils.images import (
    avatar_file_name,
    generate_preview,
    get_extension,
    image_format_for,
    is_valid_extension,
    normalize_file_name,
    preview_height,
)
from school.utils.pagination import create_page_request, total_pages


def test_get_extension():
    assert get_extension("photo.png") == "png"
    assert get_extension("archive.tar.gz") == "gz"
    assert get_extension("photo") is None
    assert get_extension("") is None
    assert get_extension(None) is None


def test_is_valid_extension():
    assert is_valid_extension("png")
    assert is_valid_extension("JPEG")
    assert not is_valid_extension(None)
    assert not is_valid_extension("")
    assert not is_valid_extension(" ")
    assert not is_valid_extension(get_extension("x.png/../y"))
    assert not is_valid_extension("png?x")


def test_normalize_file_name():
    assert normalize_file_name("Harry Potter") == "harry_potter"
    assert normalize_file_name("  Ron  Weasley ") == "ron_weasley"
    assert normalize_file_name('a/b:c*d?"e') == "a_b_c_d_e"
    assert normalize_file_name("Gödel") == "gdel"


def test_normalize_falls_back_to_default():
    assert normalize_file_name(None).startswith("student_")
    assert normalize_file_name("ёжик").startswith("student_")


def test_avatar_file_name():
    assert avatar_file_name(3, "Hermione Granger", "jpg") == "3_hermione_granger_full.jpg"


def test_preview_height():
    assert preview_height(200, 100) == 50
    assert preview_height(300, 200) == 66
    assert preview_height(100, 300) == 300
    assert preview_height(5000, 10) == 1


def test_image_format_for():
    assert image_format_for("jpg") == "JPEG"
    assert image_format_for("JPEG") == "JPEG"
    assert image_format_for("png") == "PNG"
    with pytest.raises(ImageProcessingError):
        image_format_for("docx")


def test_generate_preview_from_rgba_jpeg_extension():
    buffer = io.BytesIO()
    Image.new("RGBA", (400, 200), (0, 0, 255, 128)).save(buffer, format="PNG")

    preview = generate_preview(buffer.getvalue(), "jpg")

    with Image.open(io.BytesIO(preview)) as image:
        assert image.format == "JPEG"
        assert image.size == (100, 50)


def test_generate_preview_unreadable():
    with pytest.raises(ImageProcessingError) as exc_info:
        generate_preview(b"\x00\x01garbage", "png")
    assert exc_info.value.message == "Could not read image file"


# --- pagination ------------------------------------------------------------

def test_page_request_offsets():
    assert create_page_request(1, 10).offset == 0
    assert create_page_request(3, 5).offset == 10


@pytest.mark.parametrize("page, size", [(0, 10), (-1, 10), (1, 0), (1, -5)])
def test_page_request_rejects(page, size):
    with pytest.raises(InvalidPageRequestError):
        create_page_request(page, size)


def test_total_pages():
    assert total_pages(0, 10) == 0
    assert total_pages(10, 10) == 1
    assert total_pages(11, 10) == 2
