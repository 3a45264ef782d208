import numpy as np
import OpenGL.GL as gl

import gridpath.gl_utils as gu


def test_cell_quads_layout():
    verts = gu.cell_quads([(1, 2)], 10)
    assert verts.shape == (4, 2)
    # x follows the column, y follows the row
    assert verts.tolist() == [[20, 10], [30, 10], [30, 20], [20, 20]]


def test_cell_quads_inset_and_empty():
    verts = gu.cell_quads([(0, 0), (3, 1)], 10, inset=2.0)
    assert verts.shape == (8, 2)
    assert verts[:4].tolist() == [[2, 2], [8, 2], [8, 8], [2, 8]]
    assert gu.cell_quads([], 10).shape == (0, 2)


def test_cell_centers():
    centers = gu.cell_centers([(0, 0), (2, 1)], 10)
    assert np.allclose(centers, [[5, 5], [15, 25]])
    assert gu.cell_centers([], 10).shape == (0, 2)


def test_setup_opengl_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(
        gl,
        "glViewport",
        lambda x, y, w, h: calls.append(("viewport", x, y, w, h)),
    )
    monkeypatch.setattr(gl, "glMatrixMode", lambda m: calls.append(("matrix", m)))
    monkeypatch.setattr(gl, "glLoadIdentity", lambda: None)
    monkeypatch.setattr(gl, "glOrtho", lambda *a: calls.append(("ortho",) + a))
    monkeypatch.setattr(
        gl, "glDisable", lambda flag: calls.append(("disable", flag))
    )
    monkeypatch.setattr(
        gl, "glEnable", lambda flag: calls.append(("enable", flag))
    )
    monkeypatch.setattr(
        gl, "glBlendFunc", lambda sf, df: calls.append(("blendfunc", sf, df))
    )

    gu.setup_opengl(10, 20)
    assert ("viewport", 0, 0, 10, 20) in calls
    assert ("ortho", 0, 10, 20, 0, -1, 1) in calls
    assert ("disable", gl.GL_DEPTH_TEST) in calls
    assert ("enable", gl.GL_BLEND) in calls
    assert ("blendfunc", gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA) in calls


def test_draw_vertices_issues_one_draw_call(monkeypatch):
    calls = []
    monkeypatch.setattr(gl, "glColor3ub", lambda *c: calls.append(("color",) + c))
    monkeypatch.setattr(gl, "glEnableClientState", lambda s: calls.append("enable"))
    monkeypatch.setattr(gl, "glDisableClientState", lambda s: calls.append("disable"))
    monkeypatch.setattr(gl, "glVertexPointer", lambda *a: calls.append("pointer"))
    monkeypatch.setattr(
        gl, "glDrawArrays", lambda mode, first, n: calls.append(("draw", mode, n))
    )

    gu.draw_vertices(gu.cell_quads([(0, 0), (1, 1)], 4), (1, 2, 3))
    assert calls == [
        ("color", 1, 2, 3),
        "enable",
        "pointer",
        ("draw", gl.GL_QUADS, 8),
        "disable",
    ]


def test_draw_vertices_skips_empty(monkeypatch):
    def fail(*args):
        raise AssertionError("no GL calls expected")

    monkeypatch.setattr(gl, "glColor3ub", fail)
    monkeypatch.setattr(gl, "glDrawArrays", fail)
    gu.draw_vertices(gu.cell_quads([], 4), (0, 0, 0))
