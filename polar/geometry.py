"""Polar-to-Cartesian mapping, arc sampling, and path/polygon utilities."""
import math
from .types import Point, PathCmd

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for malformed path command sequences."""

# ============================================================
# Coordinate Mapping
# ============================================================
def to_point(cx: float, cy: float, angle_deg: float, r: float) -> Point:
    """Point at distance r from (cx, cy) along angle_deg.

    Angle 0 points along +x and grows clockwise in a y-down space, so -90 is up.
    """
    rad = math.radians(angle_deg)
    return (cx + r*math.cos(rad), cy + r*math.sin(rad))

def slot_angle(index: int, count: int) -> float:
    """Angle in degrees of slot *index* of *count*, starting at 12 o'clock."""
    return index * 360 / count - 90

def arc_poly(cx: float, cy: float, r: float, sa: float, ea: float, n: int = 60) -> list[Point]:
    """Generate n+1 points along a circular arc from angle sa to ea (degrees)."""
    return [to_point(cx, cy, sa + (ea-sa)*i/n, r) for i in range(n+1)]

# ============================================================
# Path Operations
# ============================================================
def path_from_points(points: list[Point]) -> list[PathCmd]:
    """Closed path commands: move to the first point, line to the rest, close."""
    if not points:
        raise GeometryError("Cannot build a path from zero points")
    cmds: list[PathCmd] = [("M", points[0][0], points[0][1])]
    cmds.extend(("L", x, y) for x, y in points[1:])
    cmds.append(("Z",))
    return cmds

def path_points(cmds: list[PathCmd]) -> list[Point]:
    """Resolve path commands to the points they visit.

    A close command resolves to the start of its subpath, so a closed path
    ends on the same point it began with.
    """
    out: list[Point] = []
    start = None
    for cmd in cmds:
        op = cmd[0]
        if op == "M":
            start = (cmd[1], cmd[2]); out.append(start)
        elif op == "L":
            if start is None:
                raise GeometryError("Line command before move")
            out.append((cmd[1], cmd[2]))
        elif op == "Z":
            if start is None:
                raise GeometryError("Close command before move")
            out.append(start)
        else:
            raise GeometryError(f"Unknown path command: {op!r}")
    return out

def poly_area(verts: list[Point]) -> float:
    """Polygon area via the shoelace formula. Works for either winding order."""
    n = len(verts); a = 0
    for i in range(n):
        j = (i+1)%n; a += verts[i][0]*verts[j][1]-verts[j][0]*verts[i][1]
    return abs(a)/2
