"""Smoke test to ensure top-level package import works without triggering
circular import errors. This guards against regressions in the flat API
layer (`planekit/__init__.py`).
"""

def test_import_planekit_smoke():
    import planekit  # noqa: F401
    # A couple of light sanity checks on expected public symbols
    assert hasattr(planekit, 'Polygon')
    assert hasattr(planekit, 'offset_polygon')
    assert planekit.FINE_EPS == 1e-4
    assert planekit.COARSE_EPS == 5e-4
    assert int(planekit.CLOCKWISE_POLYGON) == 0
    assert int(planekit.COUNTERCLOCKWISE_POLYGON) == 1
    for name in planekit.__all__:
        assert hasattr(planekit, name), name
