import logging

from planekit import Point, Polygon, build_quad, create_ngon
from planekit.core.visualization import plot_polygons


def test_plot_single_polygon(tmp_path):
    out = tmp_path / 'quad.png'
    result = plot_polygons(build_quad(2, 1), str(out))
    assert result == str(out)
    assert out.exists() and out.stat().st_size > 0


def test_plot_several_with_labels(tmp_path):
    out = tmp_path / 'several.png'
    shapes = [build_quad(2, 2), create_ngon(Point(3, 0), 1, 12)]
    plot_polygons(shapes, str(out), show_triangles=True, vertex_labels=True)
    assert out.exists()


def test_plot_skips_untriangulable(tmp_path, caplog, monkeypatch):
    from planekit import TriangulationError

    def fail(self, directionality=None):
        raise TriangulationError("no ear")

    monkeypatch.setattr(Polygon, 'triangle_indices', fail)
    out = tmp_path / 'bad.png'
    with caplog.at_level(logging.WARNING, logger='planekit'):
        plot_polygons(build_quad(1, 1), str(out))
    assert out.exists()
    assert any('skipping triangulation' in r.getMessage() for r in caplog.records)


def test_lazy_namespace():
    import planekit
    assert planekit.visualization.plot_polygons is plot_polygons
