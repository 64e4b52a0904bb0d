import io
import math

import pytest

from softrender.raytrace.vector import (
    Vector2f,
    Vector3f,
    clamp,
    cross_product,
    dot_product,
    lerp,
    normalize,
    progress_bar,
    random_float,
    solve_quadratic,
    update_progress,
)

A = Vector3f(1.5, -2.0, 3.25)
B = Vector3f(0.25, 4.0, -1.5)


def test_add_sub_round_trip():
    assert (A + B) - B == A


def test_scalar_multiplication_both_sides():
    assert A * 2 == 2 * A == A + A


def test_elementwise_multiplication_by_ones():
    assert A * Vector3f(1, 1, 1) == A


def test_division_inverts_multiplication():
    assert (A * 4) / 4 == A


def test_negation():
    assert -A + A == Vector3f()


def test_splat():
    assert Vector3f.splat(0.5) == Vector3f(0.5, 0.5, 0.5)


def test_str_format():
    assert str(Vector3f(1, 2, 3)) == "1, 2, 3"


def test_vector2_operations():
    v = Vector2f(1.5, -2.0)
    assert v * 2 == v + v
    assert v + Vector2f() == v


def test_lerp_endpoints():
    assert tuple(lerp(A, B, 0.0)) == pytest.approx(tuple(A))
    assert tuple(lerp(A, B, 1.0)) == pytest.approx(tuple(B))


def test_normalize_unit_length_and_zero():
    n = normalize(A)
    assert math.sqrt(dot_product(n, n)) == pytest.approx(1.0)
    assert normalize(Vector3f()) == Vector3f()


def test_cross_product_basis_and_orthogonality():
    assert cross_product(Vector3f(1, 0, 0), Vector3f(0, 1, 0)) == Vector3f(0, 0, 1)
    c = cross_product(A, B)
    assert dot_product(c, A) == pytest.approx(0.0, abs=1e-9)
    assert dot_product(c, B) == pytest.approx(0.0, abs=1e-9)


def test_dot_product_symmetric():
    assert dot_product(A, B) == dot_product(B, A)


def test_clamp():
    assert clamp(0, 1, 2) == 1
    assert clamp(0, 1, -1) == 0
    assert clamp(0, 1, 0.5) == 0.5


@pytest.mark.parametrize("a,b,c", [(1, -3, 2), (2, 5, -3), (-1, 0, 4)])
def test_solve_quadratic_roots(a, b, c):
    x0, x1 = solve_quadratic(a, b, c)
    assert x0 <= x1
    for x in (x0, x1):
        assert a * x * x + b * x + c == pytest.approx(0.0, abs=1e-9)


def test_solve_quadratic_no_real_roots():
    assert solve_quadratic(1, 0, 1) is None


def test_solve_quadratic_double_root():
    x0, x1 = solve_quadratic(1, -2, 1)
    assert x0 == x1
    assert x0 * x0 - 2 * x0 + 1 == pytest.approx(0.0)


def test_solve_quadratic_rejects_linear():
    with pytest.raises(ValueError):
        solve_quadratic(0, 1, 1)


def test_random_float_range():
    values = [random_float() for _ in range(200)]
    assert all(0.0 <= v < 1.0 for v in values)


def test_progress_bar_complete():
    bar = progress_bar(1.0)
    assert bar.endswith("] 100 %")
    assert bar.count("=") == 70


def test_progress_bar_start_and_monotone():
    assert progress_bar(0.0).startswith("[>")
    counts = [progress_bar(p / 10).count("=") for p in range(11)]
    assert counts == sorted(counts)


def test_update_progress_writes_line():
    stream = io.StringIO()
    update_progress(0.3, stream)
    assert stream.getvalue() == progress_bar(0.3) + "\r"