from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple


#oi sintetagmes akolouthoun to screen convention: to y megalonei pros ta kato,
#ara "north" einai to miso me ta mikrotera y
Corners = Tuple[float, float, float, float]  # (xmin, ymin, xmax, ymax)


@dataclass(frozen=True)
class Point:
    "Αμετάβλητο σημείο (x, y) στο επίπεδο."

    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Rectangle:
    """Ορθογώνιο παράλληλο στους άξονες, με ελάχιστη γωνία (x, y) και πλάτος/ύψος.
Τα όρια θεωρούνται κλειστά: οι ακμές ανήκουν στο ορθογώνιο."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        #to "not >=" piani kai ta NaN
        if not self.width >= 0 or not self.height >= 0:
            raise ValueError(f"Rectangle size must be non-negative, got {self.width}x{self.height}")

    @classmethod
    def from_corners(cls, x1: float, y1: float, x2: float, y2: float) -> "Rectangle":
        "Φτιάχνει ορθογώνιο από δύο απέναντι γωνίες, με οποιαδήποτε σειρά."
        xmin, xmax = min(x1, x2), max(x1, x2)
        ymin, ymax = min(y1, y2), max(y1, y2)
        return cls(float(xmin), float(ymin), float(xmax - xmin), float(ymax - ymin))

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2.0, self.y + self.height / 2.0)

    def corners(self) -> Corners:
        return (self.x, self.y, self.max_x, self.max_y)

    def contains(self, point: Optional[Point]) -> bool:
        "Ελέγχει αν το σημείο βρίσκεται μέσα στο (κλειστό) ορθογώνιο."
        if point is None:
            return False
        return (self.x <= point.x <= self.max_x) and (self.y <= point.y <= self.max_y)

    def intersects(self, other: Optional["Rectangle"]) -> bool:
        "Ελέγχει αν δύο ορθογώνια τέμνονται (μετράει και η επαφή στις ακμές)."
        if other is None:
            return False
        return not (
            self.max_x < other.x
            or other.max_x < self.x
            or self.max_y < other.y
            or other.max_y < self.y
        )

    def quadrants(self) -> Tuple["Rectangle", "Rectangle", "Rectangle", "Rectangle"]:
        "Επιστρέφει τα 4 ίσα τεταρτημόρια με σειρά NE, NW, SW, SE."
        hw = self.width / 2.0
        hh = self.height / 2.0
        xmid = self.x + hw
        ymid = self.y + hh

        #ta anatolika/notia pairnoun to ipolipo os to max gia na kalipsoun akrivos ton parent
        east_w = self.max_x - xmid
        south_h = self.max_y - ymid

        ne = Rectangle(xmid, self.y, east_w, hh)
        nw = Rectangle(self.x, self.y, hw, hh)
        sw = Rectangle(self.x, ymid, hw, south_h)
        se = Rectangle(xmid, ymid, east_w, south_h)
        return ne, nw, sw, se


def as_point(value) -> Optional[Point]:
    "Μετατρέπει ζεύγος (x, y) σε Point. Το None περνάει αυτούσιο."
    if value is None or isinstance(value, Point):
        return value

    try:
        length = len(value)
    except TypeError:
        raise ValueError(f"Point must be a pair (x, y), got {value!r}") from None

    if length != 2:
        raise ValueError(f"Point must have exactly 2 coordinates, got {length}")

    return Point(float(value[0]), float(value[1]))


def as_rectangle(value) -> Optional[Rectangle]:
    "Μετατρέπει τετράδα (x, y, width, height) σε Rectangle. Το None περνάει αυτούσιο."
    if value is None or isinstance(value, Rectangle):
        return value

    try:
        length = len(value)
    except TypeError:
        raise ValueError(f"Rectangle must be (x, y, width, height), got {value!r}") from None

    if length != 4:
        raise ValueError(f"Rectangle must have exactly 4 values, got {length}")

    x, y, w, h = value
    return Rectangle(float(x), float(y), float(w), float(h))
