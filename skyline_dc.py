import logging

from geometry import Point, sort_by_x

logger = logging.getLogger(__name__)


class SkylineBuilder:
    def __init__(self, y_floor: int | None = None):
        # Smallest y any input point may have. Enables early exit of the threshold scan.
        self.y_floor: int | None = y_floor

    @staticmethod
    def sort(points) -> list[Point]:
        return sort_by_x(points)

    @staticmethod
    def collapse_equal_x(points: list[Point]) -> list[Point]:
        """
        Among neighbours sharing the same x, keep the one with the smaller y.
        Neighbours with equal x and equal y are both kept.

        Single forward compaction pass: after a removal the new pair of
        neighbours is examined again.
        """
        kept = []
        for p in points:
            while kept and kept[-1].x == p.x and kept[-1].y > p.y:
                kept.pop()
            if kept and kept[-1].x == p.x and kept[-1].y < p.y:
                continue
            kept.append(p)
        return kept

    def min_y(self, points: list[Point]) -> int:
        threshold = points[0].y
        for p in points:
            if p.y < threshold:
                threshold = p.y
            if self.y_floor is not None and threshold <= self.y_floor:
                break
        return threshold

    def merge(self, left: list[Point], right: list[Point]) -> list[Point]:
        """
        Merge two skylines into the skyline of their union.
        Assuming both are sorted by x and max x of `left` <= min x of `right`.

        Every right point with y >= min y of the left skyline is dominated
        by the left point holding that minimum. The surviving right points
        are below every left point, so left points sharing x with them are dominated.

        Time complexity: O(n + m), where n and m are the lengths of skylines.
        """
        left = self.collapse_equal_x(left)
        if not left:
            return list(right)

        threshold = self.min_y(left)
        right = [p for p in right if p.y < threshold]

        end = len(left)
        if right:
            while end > 0 and left[end - 1].x == right[0].x:
                end -= 1
        return left[:end] + right

    def solve(self, points: list[Point], lo: int = 0, hi: int | None = None) -> list[Point]:
        """
        Build skyline of points[lo:hi] recursively using divide and conquer strategy.
        Assuming points are already sorted by x.
        Halves are index ranges over `points`, no sublists are copied while dividing.
        """
        if hi is None:
            hi = len(points)
        size = hi - lo

        if size <= 0:
            return []
        if size == 1:
            return [points[lo]]
        if size == 2:
            first, second = points[lo], points[lo + 1]
            if first.dominates(second):
                return [first]
            if second.dominates(first):
                return [second]
            return [first, second]

        mid = lo + size // 2
        left_skyline = self.solve(points, lo, mid)
        right_skyline = self.solve(points, mid, hi)
        return self.merge(left_skyline, right_skyline)

    def compute_skyline(self, points) -> list[Point]:
        points = self.sort(points)
        if self.y_floor is not None:
            below = [p for p in points if p.y < self.y_floor]
            if below:
                raise ValueError(f"Point {below[0]} is below y_floor={self.y_floor}")

        skyline = self.solve(points)
        logger.debug(f"Skyline of {len(points)} points has {len(skyline)} points")
        return skyline
