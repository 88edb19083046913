"""
Vector path built of move and line commands, with support of arrows.
"""

import math
from typing import Iterator, List, NamedTuple

from mini_stats.exceptions import InvalidArgumentError

MOVE = "move"
LINE = "line"


class Point(NamedTuple):
    """
    Point on a plane.
    """

    x: float
    y: float


class PathCommand(NamedTuple):
    """
    Single path command: move the pen or draw a line to the point.
    """

    kind: str
    point: Point


class Path:
    """
    Ordered sequence of path commands.
    """

    def __init__(self) -> None:
        self._commands: List[PathCommand] = []

    @property
    def commands(self) -> List[PathCommand]:
        return list(self._commands)

    def move_to(self, point: Point) -> None:
        self._commands.append(PathCommand(MOVE, Point(*point)))

    def line_to(self, point: Point) -> None:
        self._commands.append(PathCommand(LINE, Point(*point)))

    def add_arrow(
        self,
        start: Point,
        end: Point,
        pointer_line_length: float,
        arrow_angle: float,
    ) -> None:
        """
        Add a line from start to end with two pointer lines at the end.

        Args:
            start: Arrow tail.
            end: Arrow head.
            pointer_line_length: Length of each pointer line.
            arrow_angle: Angle between the shaft and each pointer line, in radians.
        """
        start, end = Point(*start), Point(*end)
        if start == end:
            raise InvalidArgumentError("Arrow start and end points must differ")

        direction = math.atan2(end.y - start.y, end.x - start.x)
        barbs = [
            Point(
                end.x + pointer_line_length * math.cos(math.pi - direction + angle),
                end.y - pointer_line_length * math.sin(math.pi - direction + angle),
            )
            for angle in (arrow_angle, -arrow_angle)
        ]

        self.move_to(start)
        self.line_to(end)
        self.line_to(barbs[0])
        self.move_to(end)
        self.line_to(barbs[1])

    def to_svg(self, precision: int = 2) -> str:
        """
        Render path data in SVG notation, e.g. "M 0 0 L 10 0".
        """
        parts = []
        for command in self._commands:
            letter = "M" if command.kind == MOVE else "L"
            x, y = (_format_coordinate(c, precision) for c in command.point)
            parts.append(f"{letter} {x} {y}")
        return " ".join(parts)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)


def _format_coordinate(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    # Avoid "-0" for tiny negative values.
    return "0" if text == "-0" else text
