"""Debug plots of polygons and their triangulation."""
from __future__ import annotations

import os as _os
import matplotlib as _mpl
# Ensure a non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import numpy as np
import matplotlib.pyplot as plt

from .errors import TriangulationError
from .logging_utils import get_logger

logger = get_logger('planekit.viz')

__all__ = ['plot_polygons']

_PALETTE = [(0.85, 0.2, 0.2), (0.2, 0.6, 0.8), (0.2, 0.8, 0.3), (0.75, 0.5, 0.2), (0.6, 0.2, 0.7)]


def plot_polygons(polygons, outname="polygons.png", show_triangles: bool = True, vertex_labels: bool = False):
    """Draw each polygon as a closed outline, optionally with its ear-clip triangles.

    Args:
        polygons: a Polygon or an iterable of Polygons
        outname: output image path
        show_triangles: if True, overlay ``triangle_indices()`` with triplot
        vertex_labels: if True, label vertices with their arena index
    """
    if hasattr(polygons, 'coordinates'):
        polygons = [polygons]
    plt.figure(figsize=(6, 6))
    for i, poly in enumerate(polygons):
        col = _PALETTE[i % len(_PALETTE)]
        pts = poly.coordinates()
        xs = list(pts[:, 0]) + [pts[0, 0]]
        ys = list(pts[:, 1]) + [pts[0, 1]]
        plt.plot(xs, ys, color=col, linewidth=1.6)
        # scale markers by vertex count
        s = max(0.6, min(12.0, 200.0 / float(max(1, pts.shape[0]))))
        plt.scatter(pts[:, 0], pts[:, 1], s=s, color='black')
        if show_triangles:
            try:
                tris = poly.triangle_indices()
            except TriangulationError as exc:
                logger.warning('Plotting %s: skipping triangulation overlay (%s)', outname, exc)
            else:
                plt.triplot(pts[:, 0], pts[:, 1], np.asarray(tris), lw=0.6, color=col, alpha=0.6)
        if vertex_labels:
            for j, (x, y) in enumerate(pts):
                plt.text(x, y, str(j), fontsize=7, color=col)
    plt.gca().set_aspect('equal')
    plt.title(outname)
    plt.savefig(outname, dpi=150)
    plt.close()
    logger.debug('Wrote %s', outname)
    return outname
