import io

import pytest

from scratchpad.tga import TgaHeader, TgaImage, main, make_header, solid_image

HEADER_400 = bytes(
    [0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0x90, 0x01, 0x90, 0x01, 24, 0]
)


def test_header_bytes_for_400_square():
    assert make_header(400, 400).to_bytes() == HEADER_400


def test_header_is_eighteen_bytes():
    assert len(make_header(3, 7).to_bytes()) == 18


def test_header_dimension_out_of_range():
    with pytest.raises(ValueError):
        make_header(70000, 1)


def test_header_field_overflow_in_to_bytes():
    with pytest.raises(ValueError):
        TgaHeader(width=1, height=1, pixel_depth=300).to_bytes()


def test_pixels_are_written_as_bgr():
    image = solid_image(2, 1, (1, 2, 3))
    assert image.to_bytes()[18:] == b"\x03\x02\x01\x03\x02\x01"


def test_image_size_matches_dimensions():
    data = solid_image(5, 4).to_bytes()
    assert len(data) == 18 + 5 * 4 * 3


def test_write_matches_to_bytes():
    image = solid_image(3, 2)
    out = io.BytesIO()
    image.write(out)
    assert out.getvalue() == image.to_bytes()


def test_wrong_pixel_count_raises():
    image = TgaImage(make_header(2, 2), [(0, 0, 0)])
    with pytest.raises(ValueError):
        image.to_bytes()


def test_image_id_length_mismatch_raises():
    image = TgaImage(make_header(1, 1), [(0, 0, 0)], image_id=b"abc")
    with pytest.raises(ValueError):
        image.to_bytes()


def test_bad_color_raises():
    with pytest.raises(ValueError):
        solid_image(1, 1, (0, 256, 0))


def test_main_writes_file(tmp_path):
    path = tmp_path / "out.tga"
    assert main(["--output", str(path), "--width", "4", "--height", "2"]) == 0
    data = path.read_bytes()
    assert data[:18] == make_header(4, 2).to_bytes()
    assert data[18:] == bytes((0, 255, 0)) * 8