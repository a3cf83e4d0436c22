import numpy as np

from geometry import Point


class ParseError(ValueError):
    pass


def parse_points(text: str) -> list[Point]:
    """
    Parse a point count followed by that many pairs of integers.
    Tokens are separated by any whitespace, one pair per line is customary.
    """
    tokens = text.split()
    if not tokens:
        raise ParseError("Missing point count")

    values = []
    for token in tokens:
        try:
            values.append(int(token))
        except ValueError:
            raise ParseError(f"Not an integer: {token!r}") from None

    n, coords = values[0], values[1:]
    if n < 0:
        raise ParseError(f"Negative point count: {n}")
    if len(coords) < 2 * n:
        raise ParseError(f"Expected {n} points, found {len(coords) // 2} complete pairs")
    if len(coords) > 2 * n:
        raise ParseError(f"Expected {n} points, found {len(coords) - 2 * n} extra values")

    return [Point(coords[i], coords[i + 1]) for i in range(0, 2 * n, 2)]


def read_points(filename) -> list[Point]:
    with open(filename, 'r', encoding='utf-8') as f:
        return parse_points(f.read())


def format_point(point: Point) -> str:
    return f"{point.x}   {point.y}"


def write_points(points: list[Point], stream):
    for point in points:
        stream.write(format_point(point) + "\n")


def generate_random_points(n: int, distribution: str = "uniform", low: int = 0, high: int = 1000,
                           seed: int | None = 42) -> list[Point]:
    """
    Generate `n` integer points in [low, high] for the given distribution:
    uniform, gaussian, clusters or anticorrelated.
    Anticorrelated points lie near the line x + y = low + high and produce large skylines.
    """
    if seed is not None:
        np.random.seed(seed)

    center = (low + high) / 2
    spread = (high - low) / 2

    if distribution == "uniform":
        xs = np.random.uniform(low, high, n)
        ys = np.random.uniform(low, high, n)
    elif distribution == "gaussian":
        xs = np.random.normal(center, spread / 3, n)
        ys = np.random.normal(center, spread / 3, n)
    elif distribution == "clusters":
        n_clusters = 5
        cluster = np.random.randint(0, n_clusters, n)
        cxs = np.random.uniform(low, high, n_clusters)
        cys = np.random.uniform(low, high, n_clusters)
        xs = np.random.normal(cxs[cluster], spread / 10)
        ys = np.random.normal(cys[cluster], spread / 10)
    elif distribution == "anticorrelated":
        xs = np.random.uniform(low, high, n)
        ys = low + high - xs + np.random.normal(0, spread / 20, n)
    else:
        raise ValueError(f"Unknown distribution: {distribution}")

    xs = np.clip(np.rint(xs), low, high).astype(int)
    ys = np.clip(np.rint(ys), low, high).astype(int)
    return [Point(int(x), int(y)) for x, y in zip(xs, ys)]
