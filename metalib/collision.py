"""Collision and click tests for rectangular assets."""

from dataclasses import dataclass


@dataclass
class Asset:
    """An asset's position and texture size."""

    x: float
    y: float
    width: int
    height: int


def detect_collision(first: Asset, second: Asset) -> bool:
    """Report a collision when either axis offset is within the summed sizes.

    Offsets are measured from ``first`` to ``second`` and are not made absolute.
    """
    x_diff = second.x - first.x
    y_diff = second.y - first.y
    return (
        x_diff <= first.width + second.width
        or y_diff <= first.height + second.height
    )


def detect_click_on_asset(
    asset: Asset, click_position: tuple[int, int] | None
) -> bool:
    """Return whether a click landed exactly on the asset's position.

    ``click_position`` is None when no click happened.
    """
    if click_position is None:
        return False
    mouse_x, mouse_y = click_position
    return mouse_x == asset.x and mouse_y == asset.y