"""Annular-sector path builder and SVG path buffer.

ArcBuilder takes angles in radians with 0 at 12 o'clock running clockwise,
centered on the origin, and emits an SVG path string with optional rounded
corners and angular padding between neighbouring sectors. Arithmetic follows
IEEE semantics throughout: a zero divisor yields inf/nan and a degenerate
path, never an exception. Inverse trig arguments outside [-1, 1] clamp to
the nearest end of the range.
"""
import math
from typing import NamedTuple, Optional

PI = math.pi
HALF_PI = PI / 2
TAU = 2 * PI
_EPS = 1e-12        # sector/corner tolerance
_PATH_EPS = 1e-6    # path coincidence tolerance

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible path operations."""

# ============================================================
# IEEE-style numeric helpers
# ============================================================
def _div(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b

def _sqrt(v: float) -> float:
    return math.sqrt(v) if v >= 0 else math.nan

def _asin(v: float) -> float:
    """asin clamped to [-pi/2, pi/2] outside [-1, 1]; nan passes through."""
    if v >= 1:
        return HALF_PI
    if v <= -1:
        return -HALF_PI
    return math.asin(v)

def _acos(v: float) -> float:
    """acos clamped to [0, pi] outside [-1, 1]; nan passes through."""
    if v > 1:
        return 0.0
    if v < -1:
        return PI
    return math.acos(v)

def _cos(a: float) -> float:
    return math.cos(a) if math.isfinite(a) else math.nan

def _sin(a: float) -> float:
    return math.sin(a) if math.isfinite(a) else math.nan

def _min(a: float, b: float) -> float:
    """min() that propagates nan from either side."""
    if math.isnan(a) or math.isnan(b):
        return math.nan
    return min(a, b)

def fmt_num(v: float, digits: int = 3) -> str:
    """Round half up to *digits* places and drop trailing zeros: 12.0 -> '12'.

    Plain digits below 1e21, exponent form from there on.
    """
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "Infinity" if v > 0 else "-Infinity"
    k = 10 ** digits
    if abs(v) < 1e15:
        v = math.floor(v * k + 0.5) / k
    if abs(v) >= 1e21:
        return repr(v)
    if v == int(v):
        return str(int(v))
    return repr(v)

# ============================================================
# Path buffer
# ============================================================
class PathBuffer:
    """Accumulates M/L/A/Z commands, tracking subpath start and current point."""

    def __init__(self, digits: int = 3):
        self._digits = digits
        self._x0 = self._y0 = None   # subpath start
        self._x1 = self._y1 = None   # current point
        self._parts: list[str] = []

    def _xy(self, x: float, y: float) -> str:
        return f"{fmt_num(x, self._digits)},{fmt_num(y, self._digits)}"

    def move_to(self, x: float, y: float) -> None:
        self._x0 = self._x1 = x; self._y0 = self._y1 = y
        self._parts.append("M" + self._xy(x, y))

    def line_to(self, x: float, y: float) -> None:
        self._x1 = x; self._y1 = y
        self._parts.append("L" + self._xy(x, y))

    def close_path(self) -> None:
        if self._x1 is not None:
            self._x1, self._y1 = self._x0, self._y0
            self._parts.append("Z")

    def arc(self, x: float, y: float, r: float, a0: float, a1: float, ccw: bool = False) -> None:
        """Circular arc around (x, y) from angle a0 to a1 (radians).

        Draws a line to the arc start when it does not coincide with the
        current point. Raises GeometryError for a negative radius.
        """
        if r < 0:
            raise GeometryError(f"Negative arc radius: r={r}")
        dx = r * _cos(a0); dy = r * _sin(a0)
        x0 = x + dx; y0 = y + dy
        cw = 0 if ccw else 1
        da = a0 - a1 if ccw else a1 - a0

        if self._x1 is None:
            self._parts.append("M" + self._xy(x0, y0))
        elif abs(self._x1 - x0) > _PATH_EPS or abs(self._y1 - y0) > _PATH_EPS:
            self._parts.append("L" + self._xy(x0, y0))

        if r == 0 or math.isnan(r):
            return
        if da < 0:
            da = math.fmod(da, TAU) + TAU if math.isfinite(da) else math.nan
        rr = fmt_num(r, self._digits)
        if da > TAU - _PATH_EPS:
            # full circle: two half arcs
            self._parts.append(f"A{rr},{rr},0,1,{cw},{self._xy(x - dx, y - dy)}"
                               f"A{rr},{rr},0,1,{cw},{self._xy(x0, y0)}")
            self._x1 = x0; self._y1 = y0
        elif da > _PATH_EPS:
            self._x1 = x + r * _cos(a1); self._y1 = y + r * _sin(a1)
            large = 1 if da >= PI else 0
            self._parts.append(f"A{rr},{rr},0,{large},{cw},{self._xy(self._x1, self._y1)}")

    def __str__(self) -> str:
        return "".join(self._parts)

# ============================================================
# Corner geometry
# ============================================================
class _Corner(NamedTuple):
    cx: float; cy: float       # corner circle center
    x01: float; y01: float     # tangent on the radial edge, relative to center
    x11: float; y11: float     # tangent on the ring, relative to center

def _intersect(x0, y0, x1, y1, x2, y2, x3, y3) -> Optional[tuple[float, float]]:
    """Intersection of lines (p0, p1) and (p2, p3); None when parallel."""
    x10 = x1 - x0; y10 = y1 - y0; x32 = x3 - x2; y32 = y3 - y2
    t = y32 * x10 - x32 * y10
    if t * t < _EPS:
        return None
    t = _div(x32 * (y0 - y2) - y32 * (x0 - x2), t)
    return (x0 + t * x10, y0 + t * y10)

def _corner_tangents(x0, y0, x1, y1, r1, rc, cw) -> _Corner:
    """Circle of radius |rc| tangent to segment (p0, p1) and to the ring of radius r1."""
    x01 = x0 - x1; y01 = y0 - y1
    lo = _div(rc if cw else -rc, _sqrt(x01 * x01 + y01 * y01))
    ox = lo * y01; oy = -lo * x01
    x11 = x0 + ox; y11 = y0 + oy
    x10 = x1 + ox; y10 = y1 + oy
    x00 = (x11 + x10) / 2; y00 = (y11 + y10) / 2
    dx = x10 - x11; dy = y10 - y11
    d2 = dx * dx + dy * dy
    r = r1 - rc
    D = x11 * y10 - x10 * y11
    d = (-1 if dy < 0 else 1) * _sqrt(max(0.0, r * r * d2 - D * D))
    cx0 = _div(D * dy - dx * d, d2); cy0 = _div(-D * dx - dy * d, d2)
    cx1 = _div(D * dy + dx * d, d2); cy1 = _div(-D * dx + dy * d, d2)
    dx0 = cx0 - x00; dy0 = cy0 - y00
    dx1 = cx1 - x00; dy1 = cy1 - y00
    # pick the closer of the two candidate centers
    if dx0 * dx0 + dy0 * dy0 > dx1 * dx1 + dy1 * dy1:
        cx0, cy0 = cx1, cy1
    k = _div(r1, r) - 1
    return _Corner(cx0, cy0, -ox, -oy, cx0 * k, cy0 * k)

# ============================================================
# Arc builder
# ============================================================
class ArcBuilder:
    """Builds annular-sector paths sharing one corner/padding configuration.

    corner_radius is capped at half the ring thickness and, for sectors under
    180 degrees, by the sector opening. pad_angle (radians) is the angular gap
    between adjacent sectors, measured along pad_radius (default
    sqrt(r0^2 + r1^2)).
    """

    def __init__(self, corner_radius: float = 0, pad_angle: float = 0,
                 pad_radius: Optional[float] = None, digits: int = 3):
        self.corner_radius = corner_radius
        self.pad_angle = pad_angle
        self.pad_radius = pad_radius
        self.digits = digits

    def __call__(self, inner_radius: float, outer_radius: float,
                 start_angle: float, end_angle: float) -> str:
        r0 = inner_radius; r1 = outer_radius
        a0 = start_angle - HALF_PI; a1 = end_angle - HALF_PI
        da = abs(a1 - a0); cw = a1 > a0
        ctx = PathBuffer(self.digits)

        if r1 < r0:
            r0, r1 = r1, r0

        if not r1 > _EPS:
            ctx.move_to(0, 0)
        elif da > TAU - _EPS:
            # circle or annulus
            ctx.move_to(r1 * _cos(a0), r1 * _sin(a0))
            ctx.arc(0, 0, r1, a0, a1, not cw)
            if r0 > _EPS:
                ctx.move_to(r0 * _cos(a1), r0 * _sin(a1))
                ctx.arc(0, 0, r0, a1, a0, cw)
        else:
            self._sector(ctx, r0, r1, a0, a1, da, cw)

        ctx.close_path()
        return str(ctx)

    def _sector(self, ctx: PathBuffer, r0, r1, a0, a1, da, cw) -> None:
        a01 = a00 = a0; a11 = a10 = a1
        da0 = da1 = da
        ap = self.pad_angle / 2
        rp = 0.0
        if ap > _EPS:
            rp = self.pad_radius if self.pad_radius is not None else _sqrt(r0 * r0 + r1 * r1)
        rc = _min(abs(r1 - r0) / 2, self.corner_radius)
        rc0 = rc1 = rc

        # angular padding; since r1 >= r0, da1 >= da0
        if rp > _EPS:
            p0 = _asin(_div(rp, r0) * math.sin(ap))
            p1 = _asin(_div(rp, r1) * math.sin(ap))
            da0 -= p0 * 2
            if da0 > _EPS:
                p0 *= 1 if cw else -1
                a00 += p0; a10 -= p0
            else:
                da0 = 0; a00 = a10 = (a0 + a1) / 2
            da1 -= p1 * 2
            if da1 > _EPS:
                p1 *= 1 if cw else -1
                a01 += p1; a11 -= p1
            else:
                da1 = 0; a01 = a11 = (a0 + a1) / 2

        x01 = r1 * _cos(a01); y01 = r1 * _sin(a01)
        x10 = r0 * _cos(a10); y10 = r0 * _sin(a10)
        x11 = r1 * _cos(a11); y11 = r1 * _sin(a11)
        x00 = r0 * _cos(a00); y00 = r0 * _sin(a00)

        # limit the corner radius by the sector opening
        if rc > _EPS and da < PI:
            oc = _intersect(x01, y01, x00, y00, x11, y11, x10, y10)
            if oc is not None:
                ax = x01 - oc[0]; ay = y01 - oc[1]
                bx = x11 - oc[0]; by = y11 - oc[1]
                cos_ab = _div(ax * bx + ay * by, _sqrt(ax * ax + ay * ay) * _sqrt(bx * bx + by * by))
                kc = _div(1, _sin(_acos(cos_ab) / 2))
                lc = _sqrt(oc[0] * oc[0] + oc[1] * oc[1])
                rc0 = _min(rc, _div(r0 - lc, kc - 1))
                rc1 = _min(rc, _div(r1 - lc, kc + 1))
            else:
                rc0 = rc1 = 0

        # outer ring
        if not da1 > _EPS:
            ctx.move_to(x01, y01)
        elif rc1 > _EPS:
            t0 = _corner_tangents(x00, y00, x01, y01, r1, rc1, cw)
            t1 = _corner_tangents(x11, y11, x10, y10, r1, rc1, cw)
            ctx.move_to(t0.cx + t0.x01, t0.cy + t0.y01)
            if rc1 < rc:
                # corners merged
                ctx.arc(t0.cx, t0.cy, rc1, math.atan2(t0.y01, t0.x01), math.atan2(t1.y01, t1.x01), not cw)
            else:
                ctx.arc(t0.cx, t0.cy, rc1, math.atan2(t0.y01, t0.x01), math.atan2(t0.y11, t0.x11), not cw)
                ctx.arc(0, 0, r1, math.atan2(t0.cy + t0.y11, t0.cx + t0.x11),
                        math.atan2(t1.cy + t1.y11, t1.cx + t1.x11), not cw)
                ctx.arc(t1.cx, t1.cy, rc1, math.atan2(t1.y11, t1.x11), math.atan2(t1.y01, t1.x01), not cw)
        else:
            ctx.move_to(x01, y01)
            ctx.arc(0, 0, r1, a01, a11, not cw)

        # inner ring, or the apex of a pie slice
        if not r0 > _EPS or not da0 > _EPS:
            ctx.line_to(x10, y10)
        elif rc0 > _EPS:
            t0 = _corner_tangents(x10, y10, x11, y11, r0, -rc0, cw)
            t1 = _corner_tangents(x01, y01, x00, y00, r0, -rc0, cw)
            ctx.line_to(t0.cx + t0.x01, t0.cy + t0.y01)
            if rc0 < rc:
                ctx.arc(t0.cx, t0.cy, rc0, math.atan2(t0.y01, t0.x01), math.atan2(t1.y01, t1.x01), not cw)
            else:
                ctx.arc(t0.cx, t0.cy, rc0, math.atan2(t0.y01, t0.x01), math.atan2(t0.y11, t0.x11), not cw)
                ctx.arc(0, 0, r0, math.atan2(t0.cy + t0.y11, t0.cx + t0.x11),
                        math.atan2(t1.cy + t1.y11, t1.cx + t1.x11), cw)
                ctx.arc(t1.cx, t1.cy, rc0, math.atan2(t1.y11, t1.x11), math.atan2(t1.y01, t1.x01), not cw)
        else:
            ctx.arc(0, 0, r0, a10, a00, cw)
