import numpy as np
import pytest

from softrender.rasterizer import (
    Buffers,
    ColorBufferId,
    IndexBufferId,
    PositionBufferId,
    RasterizerBase,
)


def test_ids_are_shared_and_increasing():
    r = RasterizerBase(4, 4)
    pos = r.load_positions([(0, 0, 0), (1, 0, 0), (0, 1, 0)])
    ind = r.load_indices([(0, 1, 2)])
    col = r.load_colors([(1, 2, 3)] * 3)
    assert pos == PositionBufferId(0)
    assert ind == IndexBufferId(1)
    assert col == ColorBufferId(2)


def test_loaded_data_is_stored():
    r = RasterizerBase(4, 4)
    pos = r.load_positions([(2, 0, -2), (0, 2, -2), (-2, 0, -2)])
    ind = r.load_indices([(0, 1, 2)])
    assert np.array_equal(r.pos_buf[pos.pos_id][1], [0, 2, -2])
    assert np.array_equal(r.ind_buf[ind.ind_id], [[0, 1, 2]])


def test_load_normals_records_id():
    r = RasterizerBase(4, 4)
    r.load_positions([(0, 0, 0)])
    nid = r.load_normals([(0, 0, 1)])
    assert r.normal_id == nid.col_id == 1


def test_frame_buffer_shape():
    r = RasterizerBase(5, 3)
    assert r.frame_buffer().shape == (15, 3)


def test_clear_both():
    r = RasterizerBase(3, 3)
    r.frame_buf[:] = 7.0
    r.clear(Buffers.COLOR | Buffers.DEPTH)
    assert not r.frame_buffer().any()
    assert np.isinf(r.depth_buf).all()


def test_clear_depth_only_keeps_colour():
    r = RasterizerBase(3, 3)
    r.frame_buf[:] = 7.0
    r.clear(Buffers.DEPTH)
    assert (r.frame_buffer() == 7.0).all()
    assert np.isinf(r.depth_buf).all()


def test_clear_colour_only_keeps_depth():
    r = RasterizerBase(3, 3)
    r.frame_buf[:] = 7.0
    r.clear(Buffers.COLOR)
    assert not r.frame_buffer().any()
    assert not np.isinf(r.depth_buf).any()


@pytest.mark.parametrize("size", [(0, 5), (5, -1)])
def test_rejects_bad_dimensions(size):
    with pytest.raises(ValueError):
        RasterizerBase(*size)