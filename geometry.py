import math


class Vec2:
    __slots__ = ("x", "y")
    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)
    def __add__(self, o): return Vec2(self.x + o.x, self.y + o.y)
    def __sub__(self, o): return Vec2(self.x - o.x, self.y - o.y)
    def __mul__(self, k): return Vec2(self.x * k, self.y * k)
    __rmul__ = __mul__
    def __neg__(self): return Vec2(-self.x, -self.y)
    def __iter__(self):
        yield self.x
        yield self.y
    def __eq__(self, o):
        return isinstance(o, Vec2) and self.x == o.x and self.y == o.y
    def __repr__(self): return f"Vec2({self.x:.6g}, {self.y:.6g})"
    def length(self): return math.hypot(self.x, self.y)
    def normalized(self):
        l = self.length()
        if l <= 1e-12:
            return Vec2(0, 0)
        return Vec2(self.x / l, self.y / l)
    def dot(self, o): return self.x * o.x + self.y * o.y
    def rotated(self, theta): return rotate(self, theta)
    def angle_deg(self): return normalize_angle_deg(rad_to_deg(math.atan2(self.y, self.x)))

    @classmethod
    def from_angle(cls, theta, length=1.0):
        return cls(math.cos(theta) * length, math.sin(theta) * length)


def deg_to_rad(deg):
    return deg * math.pi / 180.0


def rad_to_deg(rad):
    return rad * 180.0 / math.pi


def clamp(v, a, b):
    return max(a, min(b, v))


def normalize_angle_deg(a: float) -> float:
    a = math.fmod(a, 360.0)
    if a < 0:
        a += 360.0
    # fmod of a tiny negative can round up to exactly 360
    if a >= 360.0:
        a = 0.0
    return a


def signed_delta(a: float, b: float) -> float:
    """Smallest signed difference a - b, folded into (-180, 180]."""
    d = normalize_angle_deg(a - b)
    if d > 180.0:
        d -= 360.0
    return d


def clamp_angle(angle: float, center: float, half_width: float) -> float:
    """Clamp an angle into center +/- half_width without caring about the 0/360 seam.

    A request that lands in the forbidden band goes to the nearer edge.
    """
    d = clamp(signed_delta(angle, center), -half_width, half_width)
    return normalize_angle_deg(center + d)


def reflect(v: Vec2, n: Vec2) -> Vec2:
    return v - n * (2.0 * v.dot(n))


def rotate(v: Vec2, theta: float) -> Vec2:
    c = math.cos(theta)
    s = math.sin(theta)
    return Vec2(v.x * c - v.y * s, v.x * s + v.y * c)
