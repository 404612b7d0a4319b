import typing as t

import matplotlib.pyplot as plt
from shapely.geometry import LineString, Polygon

from dchull import constants, data, util


class Map:
    numbers = util.Numbers()
    title: t.Any

    def __init__(self, title=""):
        self.title = title
        self.fig = plt.figure(self.title or self.numbers.next())
        self.ax = self.fig.add_subplot(111)
        self.ax.set_aspect("equal")
        if self.title:
            self.ax.set_title(self.title)

    def draw_points(
        self,
        points: t.Sequence[data.Point],
        color: str = 'gray',
        markersize: float = 2.0,
        zorder: float = 1,
    ):
        if not points:
            return
        x, y = zip(*(p.coords for p in points))
        self.ax.plot(x, y, 'o', markersize=markersize, color=color,
                     zorder=zorder)

    def draw_hull(
        self,
        hull: data.Hull,
        color: str = 'blue',
        linewidth: float = 1.0,
        zorder: float = 2,
    ):
        coords = [p.coords for p in hull]
        if len(coords) >= constants.MIN_HULL_SIZE:
            ring = Polygon(coords).exterior
        elif len(coords) == 2:
            ring = LineString(coords)
        else:
            self.draw_points(hull, color=color, markersize=4.0, zorder=zorder)
            return
        x, y = ring.xy
        self.ax.plot(x, y, '-', color=color, linewidth=linewidth,
                     zorder=zorder)
        self.draw_points(hull, color=color, markersize=4.0, zorder=zorder)

    def save(self, file_name="hull.png", file_format=None):
        self.fig.savefig(file_name, format=file_format)

    def close(self):
        plt.close(self.fig)

    @classmethod
    def show(cls):
        plt.show()
