from matplotlib.axes import Axes
from matplotlib.figure import Figure

from geometry import Point


def plot_points(points: list[Point], ax: Axes):
    x = [p.x for p in points]
    y = [p.y for p in points]
    ax.scatter(x, y, c='b', s=4)


def plot_skyline(skyline: list[Point], ax: Axes):
    """
    Skyline points joined as a staircase.
    Assumes skyline is sorted by x.
    """
    xs = [p.x for p in skyline]
    ys = [p.y for p in skyline]
    ax.step(xs, ys, where='post', c='r')
    ax.scatter(xs, ys, c='r', s=12)


def save_skyline_plot(points: list[Point], skyline: list[Point], filename):
    fig = Figure(figsize=(8, 8))
    ax = fig.add_subplot()
    plot_points(points, ax)
    plot_skyline(skyline, ax)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(f"Skyline: {len(skyline)} of {len(points)} points")
    ax.grid()
    fig.savefig(filename, dpi=150, bbox_inches='tight')
    return fig
