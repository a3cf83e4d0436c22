import numpy as np

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Point:
    x: int
    y: int

    def dominates(self, other: "Point") -> bool:
        """
        Check whether this point dominates `other`:
        no worse in both coordinates and strictly better in at least one.
        Smaller values are better. Equal points dominate neither each other.
        """
        return (
            self.x < other.x and self.y <= other.y
            or self.x <= other.x and self.y < other.y
        )


def sort_by_x(points) -> list[Point]:
    """
    Stable sort by x coordinate only.
    Points sharing an x value stay adjacent in their input order.
    """
    return sorted(points, key=lambda p: p.x)


def points_from_array(array) -> list[Point]:
    """
    Convert an (n, 2) integer array into points.
    """
    array = np.asarray(array)
    if array.size == 0:
        return []
    if array.ndim != 2 or array.shape[1] != 2:
        raise ValueError(f"Expected an array of shape (n, 2), got {array.shape}")
    return [Point(int(x), int(y)) for x, y in array]
