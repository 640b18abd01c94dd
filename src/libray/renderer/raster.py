# renderer/raster.py
from typing import Iterable, Tuple
from libray.core.vector import Vector3
from libray.renderer.canvas import Canvas

def to_pixel(canvas: Canvas, point: Vector3, origin: Tuple[float, float] = (0.0, 0.0),
             flip_y: bool = True) -> Tuple[int, int]:
    """
    Maps a world point to a (column, row) pixel. `origin` is the pixel
    position of the world origin; with flip_y, world +y points up the image.
    """
    px = int(round(point.x + origin[0]))
    py = int(round(point.y + origin[1]))
    if flip_y:
        py = canvas.height - 1 - py
    return px, py

def plot_points(canvas: Canvas, points: Iterable[Vector3], color: Vector3,
                origin: Tuple[float, float] = (0.0, 0.0), flip_y: bool = True) -> int:
    """
    Plots each point as a single pixel. Points that fall off the canvas are
    skipped; returns the number actually plotted.
    """
    plotted = 0
    for point in points:
        x, y = to_pixel(canvas, point, origin, flip_y)
        if canvas.write_pixel(x, y, color):
            plotted += 1
    return plotted
