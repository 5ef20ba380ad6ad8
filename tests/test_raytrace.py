import io
import math

import pytest

from scratchpad.raytrace import Ray, Sphere, Vec3, lerp, main, render, write_ppm


def test_cross_of_axes():
    assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)


def test_cross_is_orthogonal():
    u, v = Vec3(1, 2, 3), Vec3(-4, 0.5, 2)
    w = u.cross(v)
    assert math.isclose(w.dot(u), 0, abs_tol=1e-9)
    assert math.isclose(w.dot(v), 0, abs_tol=1e-9)


def test_dot_and_length_agree():
    v = Vec3(2, -3, 6)
    assert math.isclose(v.length() ** 2, v.dot(v))


def test_unit_has_length_one():
    assert math.isclose(Vec3(3, -7, 2).unit().length(), 1.0)


def test_unit_of_zero_vector_raises():
    with pytest.raises(ValueError):
        Vec3(0, 0, 0).unit()


def test_ray_at():
    ray = Ray(Vec3(1, 1, 1), Vec3(0, 2, 0))
    assert ray.at(0) == Vec3(1, 1, 1)
    assert ray.at(0.5) == Vec3(1, 2, 1)


def test_lerp_endpoints():
    assert lerp(1, 0.5, 0) == 1
    assert lerp(1, 0.5, 1) == 0.5


def test_sphere_hit_and_miss():
    sphere = Sphere(Vec3(0, 0, -1), 0.3)
    assert sphere.hit_by(Ray(Vec3(0, 0, 0), Vec3(0, 0, -1))) is True
    assert sphere.hit_by(Ray(Vec3(0, 0, 0), Vec3(1, 0, 0))) is False


def test_render_size_and_center_is_sphere():
    pixels = render(3, 3)
    assert len(pixels) == 9
    assert pixels[4] == (0, 0, 255)


def test_render_blue_channel_is_full():
    assert all(b == 255 for _, _, b in render(8, 6))


def test_render_sky_gets_lighter_towards_bottom():
    width, height = 8, 6
    pixels = render(width, height)
    top_left = pixels[0]
    bottom_left = pixels[(height - 1) * width]
    assert top_left[0] <= bottom_left[0]


def test_render_rejects_empty_image():
    with pytest.raises(ValueError):
        render(0, 4)


def test_write_ppm_format():
    out = io.StringIO()
    write_ppm([(1, 2, 3), (4, 5, 6)], 2, 1, out)
    assert out.getvalue() == "P3\n2 1\n255\n1 2 3\n4 5 6\n"


def test_write_ppm_wrong_pixel_count():
    with pytest.raises(ValueError):
        write_ppm([(0, 0, 0)], 2, 2, io.StringIO())


def test_main_writes_ppm(capsys):
    assert main(["--width", "4", "--height", "3"]) == 0
    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert lines[:3] == ["P3", "4 3", "255"]
    assert len(lines) == 3 + 12
    assert "Progress" in captured.err