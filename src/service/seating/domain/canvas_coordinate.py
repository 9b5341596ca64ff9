"""
Canvas Coordinate Engine

Maps seat positions stored as image percentages to pixels on a zoomable,
pannable surface and back. All functions are pure: the image fit and the
zoom/pan transform are passed in as snapshots.

Pipeline (forward):
    percentage -> render pixel (image fit) -> screen pixel (zoom, pan)
Pointer input runs the same pipeline in reverse.
"""

import math
from typing import Iterable, Optional, Protocol, Sequence, TypeVar

from src.platform.config.core_setting import settings
from src.service.seating.domain.seating_exception import InvalidDimensionError
from src.service.seating.domain.value_object.canvas_geometry import (
    OUT_OF_BOUNDS,
    CanvasTransform,
    ClientRect,
    CoordinateValidation,
    ImageFit,
    Point,
    Size,
)


class PositionedSeat(Protocol):
    id: str
    x: float
    y: float


_S = TypeVar('_S', bound=PositionedSeat)

IDENTITY_TRANSFORM = CanvasTransform()


def compute_fit(image_size: Size, surface_size: Size) -> ImageFit:
    """Aspect-preserving fit of the image inside the surface (CSS ``contain``)."""
    if not image_size.is_positive:
        raise InvalidDimensionError(
            f'Image size must be positive, got {image_size.width}x{image_size.height}'
        )
    if not surface_size.is_positive:
        raise InvalidDimensionError(
            f'Surface size must be positive, got {surface_size.width}x{surface_size.height}'
        )

    scale = min(surface_size.width / image_size.width, surface_size.height / image_size.height)
    draw_width = image_size.width * scale
    draw_height = image_size.height * scale

    return ImageFit(
        draw_x=(surface_size.width - draw_width) / 2,
        draw_y=(surface_size.height - draw_height) / 2,
        draw_width=draw_width,
        draw_height=draw_height,
        scale=scale,
        image_size=image_size,
        surface_size=surface_size,
    )


class ImageFitCache:
    """
    Holds the fit for one rendering surface.

    The surface reports size or image changes through ``get``; the fit is
    recomputed only when either size differs from the cached one.
    """

    def __init__(self) -> None:
        self._fit: Optional[ImageFit] = None

    @property
    def fit(self) -> Optional[ImageFit]:
        return self._fit

    def get(self, image_size: Size, surface_size: Size) -> ImageFit:
        fit = self._fit
        if fit is None or fit.image_size != image_size or fit.surface_size != surface_size:
            fit = compute_fit(image_size, surface_size)
            self._fit = fit
        return fit

    def invalidate(self) -> None:
        self._fit = None


def _inverse_zoom(transform: CanvasTransform) -> float:
    # Division guard only; the forward mapping uses the raw zoom
    return max(settings.MIN_CANVAS_ZOOM, transform.zoom)


def to_render_pixel(point: Point, fit: ImageFit) -> Point:
    return Point(
        fit.draw_x + (point.x / 100) * fit.draw_width,
        fit.draw_y + (point.y / 100) * fit.draw_height,
    )


def to_screen_pixel(render_point: Point, transform: CanvasTransform = IDENTITY_TRANSFORM) -> Point:
    return Point(
        transform.pan.x + transform.zoom * render_point.x,
        transform.pan.y + transform.zoom * render_point.y,
    )


def percentage_to_screen(
    point: Point, fit: ImageFit, transform: CanvasTransform = IDENTITY_TRANSFORM
) -> Point:
    return to_screen_pixel(to_render_pixel(point, fit), transform)


def batch_to_render_pixels(points: Iterable[Point], fit: ImageFit) -> list[Point]:
    return [to_render_pixel(point, fit) for point in points]


def screen_to_render(screen_point: Point, transform: CanvasTransform = IDENTITY_TRANSFORM) -> Point:
    zoom = _inverse_zoom(transform)
    return Point(
        (screen_point.x - transform.pan.x) / zoom,
        (screen_point.y - transform.pan.y) / zoom,
    )


def client_to_canvas(client_point: Point, bounds: ClientRect, canvas_size: Size) -> Point:
    """
    Client (CSS) pixels to canvas backing-store pixels.

    The canvas may be drawn at a different resolution than it is laid out,
    so the offset inside ``bounds`` is rescaled to ``canvas_size``.
    """
    if bounds.width <= 0 or bounds.height <= 0:
        raise InvalidDimensionError(
            f'Surface bounds must be positive, got {bounds.width}x{bounds.height}'
        )
    return Point(
        (client_point.x - bounds.left) * (canvas_size.width / bounds.width),
        (client_point.y - bounds.top) * (canvas_size.height / bounds.height),
    )


def is_point_in_image_bounds(
    screen_point: Point, fit: ImageFit, transform: CanvasTransform = IDENTITY_TRANSFORM
) -> bool:
    return fit.contains(screen_to_render(screen_point, transform))


def to_percentage_from_pointer(
    pointer: Point,
    fit: ImageFit,
    transform: CanvasTransform = IDENTITY_TRANSFORM,
    *,
    bounds: Optional[ClientRect] = None,
) -> Point:
    """
    Pointer position to percentage coordinates.

    ``pointer`` is in surface pixels, or in client pixels when ``bounds`` is
    given. Points in the letterbox margin return ``OUT_OF_BOUNDS``; callers
    must ignore them rather than place or remove seats.
    """
    if bounds is not None:
        pointer = client_to_canvas(pointer, bounds, fit.surface_size)

    render_point = screen_to_render(pointer, transform)
    if not fit.contains(render_point):
        return OUT_OF_BOUNDS

    percentage_x = (render_point.x - fit.draw_x) / fit.draw_width * 100
    percentage_y = (render_point.y - fit.draw_y) / fit.draw_height * 100

    # Only float noise can push an in-bounds point past the edges
    return Point(min(100.0, max(0.0, percentage_x)), min(100.0, max(0.0, percentage_y)))


def percentage_distance(point_a: Point, point_b: Point) -> float:
    return math.hypot(point_b.x - point_a.x, point_b.y - point_a.y)


def find_seat_at_position(
    point: Point, seats: Iterable[_S], tolerance: Optional[float] = None
) -> Optional[_S]:
    """Closest seat strictly within ``tolerance`` percentage points, if any."""
    if tolerance is None:
        tolerance = settings.SEAT_HIT_TOLERANCE

    closest_seat: Optional[_S] = None
    closest_distance = math.inf
    for seat in seats:
        distance = percentage_distance(point, Point(seat.x, seat.y))
        if distance < tolerance and distance < closest_distance:
            closest_seat = seat
            closest_distance = distance

    return closest_seat


def snap_to_grid(point: Point, grid_size: Optional[float] = None) -> Point:
    if grid_size is None:
        grid_size = settings.COORDINATE_GRID_SIZE
    if grid_size <= 0:
        raise InvalidDimensionError(f'Grid size must be positive, got {grid_size}')
    return Point(round(point.x / grid_size) * grid_size, round(point.y / grid_size) * grid_size)


def convert_legacy_coordinates(point: Point, legacy_surface: Size, image_size: Size) -> Point:
    """
    Pixel coordinates authored on a fixed-size legacy canvas to percentages.

    Legacy layouts stored raw canvas pixels; the image was fitted into that
    canvas the same way it is now, so the fit is replayed and inverted.
    Results are clamped to the image.
    """
    legacy_fit = compute_fit(image_size, legacy_surface)
    percentage_x = (point.x - legacy_fit.draw_x) / legacy_fit.draw_width * 100
    percentage_y = (point.y - legacy_fit.draw_y) / legacy_fit.draw_height * 100
    return Point(min(100.0, max(0.0, percentage_x)), min(100.0, max(0.0, percentage_y)))


def generate_seat_identifier(section_name: str, row_number: int, seat_number: int) -> str:
    """Position-derived identifier, e.g. ('orchestra', 3, 12) -> 'ORCHESTRA-R3-S12'."""
    return f'{section_name.upper()}-R{row_number}-S{seat_number}'


def validate_coordinate_data(points: Sequence[Point]) -> CoordinateValidation:
    errors: list[str] = []
    for index, point in enumerate(points):
        if math.isnan(point.x) or math.isnan(point.y):
            errors.append(f'Coordinate {index}: contains NaN values')
            continue
        if not 0 <= point.x <= 100:
            errors.append(f'Coordinate {index}: x value {point.x} is outside valid range (0-100)')
        if not 0 <= point.y <= 100:
            errors.append(f'Coordinate {index}: y value {point.y} is outside valid range (0-100)')
    return CoordinateValidation(errors=tuple(errors))
