"""
Canvas geometry value objects.

Immutable snapshots passed to the coordinate functions: image and surface
sizes, the aspect-fit placement of the image, and the zoom/pan transform.
"""

import attrs


@attrs.frozen
class Point:
    x: float
    y: float


@attrs.frozen
class Size:
    width: float
    height: float

    @property
    def is_positive(self) -> bool:
        return self.width > 0 and self.height > 0


@attrs.frozen
class ImageFit:
    """Where the background image lands on the surface after a ``contain`` fit."""

    draw_x: float
    draw_y: float
    draw_width: float
    draw_height: float
    scale: float
    image_size: Size
    surface_size: Size

    def contains(self, point: Point) -> bool:
        return (
            self.draw_x <= point.x <= self.draw_x + self.draw_width
            and self.draw_y <= point.y <= self.draw_y + self.draw_height
        )


@attrs.frozen
class CanvasTransform:
    zoom: float = 1.0
    pan: Point = Point(0.0, 0.0)


@attrs.frozen
class ClientRect:
    """Bounding box of the rendered surface in client (CSS) pixels."""

    left: float
    top: float
    width: float
    height: float


@attrs.frozen
class CoordinateValidation:
    errors: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors


# Returned instead of a clamped coordinate when a pointer misses the image
OUT_OF_BOUNDS = Point(-1.0, -1.0)
