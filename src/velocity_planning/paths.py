"""
Reference Path implementation: straight segments through a list of points.

Hosts normally supply their own geometry (splines, drawn routes). This one
is enough for tests, demos and callers that only have waypoints.
"""

import math
from bisect import bisect_right
from typing import Iterable, List, Sequence, Tuple, Union

from .types import PathSample, Vec2

PointLike = Union[Vec2, Tuple[float, float]]


def _to_vec(point: PointLike) -> Vec2:
    if isinstance(point, Vec2):
        return point
    x, y = point
    return Vec2(float(x), float(y))


class PolylinePath:
    """
    Arc-length parameterized polyline.

    Consecutive duplicate points are dropped. Curvature is reported as 0
    along every segment; the tangent is the segment's direction. A path with
    a single distinct point has zero length and no tangent.
    """

    def __init__(self, points: Iterable[PointLike]):
        pts: List[Vec2] = []
        for p in points:
            v = _to_vec(p)
            if not pts or (v.x, v.y) != (pts[-1].x, pts[-1].y):
                pts.append(v)
        if not pts:
            raise ValueError("PolylinePath needs at least one point")

        self._points: Tuple[Vec2, ...] = tuple(pts)
        cumulative = [0.0]
        for p0, p1 in zip(pts, pts[1:]):
            cumulative.append(cumulative[-1] + math.hypot(p1.x - p0.x, p1.y - p0.y))
        self._cumulative: Tuple[float, ...] = tuple(cumulative)
        self.length: float = cumulative[-1]

    @property
    def points(self) -> Sequence[Vec2]:
        return self._points

    def _segment_at(self, s: float) -> int:
        i = bisect_right(self._cumulative, s) - 1
        return min(max(i, 0), len(self._points) - 2)

    def sample(self, s: float) -> PathSample:
        if len(self._points) == 1:
            return PathSample(position=self._points[0])

        s = min(max(float(s), 0.0), self.length)
        i = self._segment_at(s)
        p0, p1 = self._points[i], self._points[i + 1]
        seg_len = self._cumulative[i + 1] - self._cumulative[i]
        u = (s - self._cumulative[i]) / seg_len

        position = Vec2(p0.x + u * (p1.x - p0.x), p0.y + u * (p1.y - p0.y))
        tangent = math.atan2(p1.y - p0.y, p1.x - p0.x)
        return PathSample(position=position, tangent=tangent, curvature=0.0)

    def project(self, point: Vec2) -> float:
        """Arc-length of the point on the path nearest to `point`."""
        point = _to_vec(point)
        if len(self._points) == 1:
            return 0.0

        best_s = 0.0
        best_d2 = math.inf
        for i, (p0, p1) in enumerate(zip(self._points, self._points[1:])):
            dx, dy = p1.x - p0.x, p1.y - p0.y
            seg_len2 = dx * dx + dy * dy
            u = ((point.x - p0.x) * dx + (point.y - p0.y) * dy) / seg_len2
            u = min(max(u, 0.0), 1.0)
            qx, qy = p0.x + u * dx, p0.y + u * dy
            d2 = (point.x - qx) ** 2 + (point.y - qy) ** 2
            if d2 < best_d2:
                best_d2 = d2
                best_s = self._cumulative[i] + u * (self._cumulative[i + 1] - self._cumulative[i])
        return best_s
