"""
Outline operations on closed polygons.

Outlines are shapely polygons in figure coordinates (x to the right, y down).
"""

import numpy as np
from shapely.geometry import LineString, Point, Polygon, box
from typing import Optional

# Mitre ratio used by shapely when no miter limit applies
DEFAULT_MITRE_RATIO = 5.0


def closed_outline(points) -> Polygon:
    """Builds a closed polygon from its vertices; the last edge back to the first point is implicit."""
    return Polygon(np.asarray(points, dtype=np.float64))


def grow_outline(outline: Polygon, offset: float, miter_limit: Optional[float] = None,
                 join: str = "mitre") -> Polygon:
    """
    Expands (offset > 0) or contracts (offset < 0) an outline perpendicular to its edges.

    Args:
        outline: Polygon to grow
        offset: Perpendicular distance in figure units
        miter_limit: Maximum absolute distance a mitred corner may reach out from
            the original vertex. Corners reaching further are bevelled.
        join: Shapely join style of the grown corners: "mitre", "round" or "bevel"

    Returns:
        The grown polygon. Contracting past the inradius returns an empty polygon.
    """
    if offset == 0:
        return outline

    mitre_ratio = DEFAULT_MITRE_RATIO
    if miter_limit is not None and miter_limit > 0:
        mitre_ratio = max(1.0, miter_limit / abs(offset))

    grown = outline.buffer(offset, join_style=join, mitre_limit=mitre_ratio)
    if grown.is_empty:
        return Polygon()
    if grown.geom_type == "MultiPolygon":
        # Contracting a convex outline never splits it, keep the largest piece anyway
        grown = max(grown.geoms, key=lambda g: g.area)
    return grown


def chop(outline: Polygon, point) -> np.ndarray:
    """
    Returns the point where the segment from the outline's bounds centre to
    ``point`` crosses the outline.

    When several crossings exist, the one closest to ``point`` wins. If there is
    no crossing (``point`` lies inside), the centre itself is returned.
    """
    if outline.is_empty:
        return np.array([point[0], point[1]], dtype=np.float64)

    min_x, min_y, max_x, max_y = outline.bounds
    center = np.array([(min_x + max_x) / 2.0, (min_y + max_y) / 2.0], dtype=np.float64)
    target = np.array([point[0], point[1]], dtype=np.float64)

    if np.allclose(center, target):
        return center

    crossing = LineString([center, target]).intersection(outline.exterior)
    if crossing.is_empty:
        return center

    candidates = []
    for geom in getattr(crossing, "geoms", [crossing]):
        # Collinear overlaps come back as segments, their end points are the crossings
        candidates.extend(geom.coords)

    ref = Point(target)
    best = min(candidates, key=lambda c: ref.distance(Point(c)))
    return np.array(best[:2], dtype=np.float64)


def clip_outline(outline: Polygon, rect) -> Polygon:
    """Part of the outline inside an axis-aligned rectangle."""
    if outline.is_empty:
        return outline
    clipped = outline.intersection(box(rect.x, rect.y, rect.x + rect.width, rect.y + rect.height))
    if clipped.is_empty or clipped.geom_type != "Polygon":
        return Polygon()
    return clipped
