from geometry import Point, sort_by_x


class NaiveSkylineBuilder:
    def compute_skyline(self, points) -> list[Point]:
        points = sort_by_x(points)
        return [
            p for p in points
            if not any(q.dominates(p) for q in points)
        ]
