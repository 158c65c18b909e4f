"""Geometry helpers for circle-vs-rectangle collision.

Pure functions, no state.
"""


def clamp(value: float, lo: float, hi: float) -> float:
    """Restrict value to the closed range [lo, hi].

    Args:
        value: Value to restrict
        lo: Lower bound
        hi: Upper bound (must be >= lo)

    Returns:
        lo if value < lo, hi if value > hi, else value

    Raises:
        ValueError: If lo > hi
    """
    if lo > hi:
        raise ValueError(f'clamp bounds out of order: lo={lo} > hi={hi}')
    return max(lo, min(hi, value))


def circle_intersects_rect(
    cx: float,
    cy: float,
    radius: float,
    rx: float,
    ry: float,
    rw: float,
    rh: float,
) -> bool:
    """Check if a circle overlaps an axis-aligned rectangle.

    Finds the point of the rectangle closest to the circle center and
    compares its distance to the radius. Touching counts as overlapping.

    Args:
        cx: Circle center X
        cy: Circle center Y
        radius: Circle radius
        rx: Rectangle left edge X
        ry: Rectangle top edge Y
        rw: Rectangle width
        rh: Rectangle height

    Returns:
        True if the circle and rectangle overlap
    """
    closest_x = clamp(cx, rx, rx + rw)
    closest_y = clamp(cy, ry, ry + rh)
    dx = cx - closest_x
    dy = cy - closest_y
    return dx * dx + dy * dy <= radius * radius
