"""
Screen layout for the game client.

Everything is laid out on a fixed 320x480 artboard that is scaled to fit the
viewport. Designer-authored positions for buttons, the timer face, the word
counter and the warning lights are read from a JSON coordinates file.
"""

import json
from pathlib import Path
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from ..core.models import GridCell


ARTBOARD_WIDTH = 320
ARTBOARD_HEIGHT = 480

TIMER_RADIUS = 26
COUNTER_RADIUS = 18
BUTTON_WIDTH = 60
BUTTON_HEIGHT = 24

DEFAULT_COUNTER_CENTER = (160.0, 40.0)
DEFAULT_TIMER_TOP_LEFT = (140.0, 392.0)


class Viewport(BaseModel):
    """Scale and offset that fit the artboard inside a window."""
    scale: float
    offset_x: float = 0.0
    offset_y: float = 0.0

    def to_artboard(self, x: float, y: float) -> Tuple[float, float]:
        """Map a window position to artboard coordinates."""
        return (x - self.offset_x) / self.scale, (y - self.offset_y) / self.scale


def fit_viewport(
    width: float,
    height: float,
    base_width: float = ARTBOARD_WIDTH,
    base_height: float = ARTBOARD_HEIGHT
) -> Viewport:
    """Scale the artboard to fit the window and centre it."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Viewport must have a positive size, got {width}x{height}")
    scale = min(width / base_width, height / base_height)
    return Viewport(
        scale=scale,
        offset_x=(width - base_width * scale) / 2,
        offset_y=(height - base_height * scale) / 2,
    )


class GridLayout(BaseModel):
    """Placement of the letter tiles on the artboard."""
    rows: int = 5
    cols: int = 5
    size: float = 38
    gutter: float = 5
    origin_x: float = 72.366  # centre of the top-left tile
    origin_y: float = 254.0

    @property
    def pitch(self) -> float:
        return self.size + self.gutter

    def tile_center(self, cell: Tuple[int, int]) -> Tuple[float, float]:
        """Centre of a tile in artboard coordinates."""
        row, col = cell
        return self.origin_x + col * self.pitch, self.origin_y + row * self.pitch

    def cell_at(self, x: float, y: float) -> Optional[GridCell]:
        """Find the tile under an artboard position, if any."""
        col = round((x - self.origin_x) / self.pitch)
        row = round((y - self.origin_y) / self.pitch)
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            return None

        cx, cy = self.tile_center((row, col))
        half = self.size / 2
        if abs(x - cx) > half or abs(y - cy) > half:
            return None  # gutter
        return GridCell(row, col)


class Point(BaseModel):
    """A bare artboard position, used for warning lights."""
    x: float
    y: float


class UIElement(BaseModel):
    """A named element placed at an artboard position."""
    id: Optional[str] = None
    x: float
    y: float


class TimerCoords(BaseModel):
    """Placement of the timer parts."""
    face: Optional[UIElement] = None


class UICoords(BaseModel):
    """
    Designer-authored UI coordinates.

    Button and light positions are centres; the timer face and counter
    positions are top-left corners.
    """
    lights: List[Point] = Field(default_factory=list)
    buttons: List[UIElement] = Field(default_factory=list)
    timer: TimerCoords = Field(default_factory=TimerCoords)
    counter: Optional[UIElement] = None

    @field_validator("lights", "buttons", "timer", mode="before")
    @classmethod
    def _null_means_default(cls, value, info):
        # A null section keeps the rest of the file usable
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value

    @classmethod
    def fallback(cls) -> "UICoords":
        """Coordinates used when no coordinates file is available."""
        return cls(
            buttons=[
                UIElement(id="btn_green", x=132, y=430),
                UIElement(id="btn_red", x=188, y=430),
            ],
            timer=TimerCoords(face=UIElement(id="timer_face", x=139.7366, y=392.0765)),
            counter=UIElement(id="counter", x=140.4563, y=32.6174),
        )

    def button(self, button_id: str) -> Optional[UIElement]:
        return next((b for b in self.buttons if b.id == button_id), None)

    def button_at(self, x: float, y: float) -> Optional[str]:
        """Id of the button whose hit box contains the position, if any."""
        for b in self.buttons:
            if abs(x - b.x) <= BUTTON_WIDTH / 2 and abs(y - b.y) <= BUTTON_HEIGHT / 2:
                return b.id
        return None

    def counter_center(self) -> Tuple[float, float]:
        if self.counter is None:
            return DEFAULT_COUNTER_CENTER
        return self.counter.x + COUNTER_RADIUS, self.counter.y + COUNTER_RADIUS

    def timer_center(self) -> Tuple[float, float]:
        face = self.timer.face
        x, y = (face.x, face.y) if face else DEFAULT_TIMER_TOP_LEFT
        return x + TIMER_RADIUS, y + TIMER_RADIUS


class CoordsSource(BaseModel):
    """UI coordinates and where they came from."""
    coords: UICoords
    source: str
    fallback_reason: Optional[str] = None


def load_coords(path: Optional[Union[str, Path]]) -> CoordsSource:
    """
    Load UI coordinates from a JSON file, falling back to built-in positions.

    Args:
        path: Path to the coordinates JSON, or None

    Returns:
        CoordsSource with the coordinates and, on fallback, the reason
    """
    if path is None:
        return CoordsSource(coords=UICoords.fallback(), source="fallback",
                            fallback_reason="no coordinates file configured")

    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        coords = UICoords.model_validate(data)
    except (OSError, ValueError) as e:
        return CoordsSource(coords=UICoords.fallback(), source="fallback",
                            fallback_reason=f"could not load {path}: {e}")

    return CoordsSource(coords=coords, source=str(path))
