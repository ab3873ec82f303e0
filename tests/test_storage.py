import pytest

from pixelcanvas.geometry import BLUE, GREEN, RED, Color, Point
from pixelcanvas.storage import decode_drawings, encode_drawings, load_drawings, save_drawings

SHAPES = [
    [(Point(1, 2), RED), (Point(-3, 40000), BLUE)],
    [],
    [(Point(0, 0), Color(1, 2, 3, 4)), (Point(-70000, -1), GREEN), (Point(5, 5), RED)],
]


def test_empty_drawing_is_a_zero_count():
    assert encode_drawings([]) == bytes(8)


def test_single_pixel_layout():
    data = encode_drawings([[(Point(1, 2), Color(3, 4, 5, 6))]])
    expected = (
        (1).to_bytes(8, "little")
        + (1).to_bytes(8, "little")
        + (1).to_bytes(4, "little")
        + (2).to_bytes(4, "little")
        + bytes([3, 4, 5, 6])
    )
    assert data == expected


def test_encoded_length_matches_layout():
    data = encode_drawings(SHAPES)
    pixels = sum(len(shape) for shape in SHAPES)
    assert len(data) == 8 + 8 * len(SHAPES) + 12 * pixels


def test_round_trip_in_memory():
    assert decode_drawings(encode_drawings(SHAPES)) == SHAPES


def test_decode_empty_drawing():
    assert decode_drawings(bytes(8)) == []


@pytest.mark.parametrize("cut", [0, 4, 12, 20, 30])
def test_truncated_data_is_rejected(cut):
    data = encode_drawings(SHAPES)
    with pytest.raises(ValueError):
        decode_drawings(data[:cut])


def test_oversized_pixel_count_is_rejected():
    data = (1).to_bytes(8, "little") + (1000).to_bytes(8, "little") + bytes(12)
    with pytest.raises(ValueError):
        decode_drawings(data)


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "saved_drawings"
    save_drawings(SHAPES, path)
    assert load_drawings(path) == SHAPES
    assert path.read_bytes() == encode_drawings(SHAPES)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_drawings(tmp_path / "absent")


def test_relative_path_uses_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    save_drawings(SHAPES[:1], "saved_drawings")
    assert (tmp_path / "saved_drawings").exists()
    assert load_drawings("saved_drawings") == SHAPES[:1]