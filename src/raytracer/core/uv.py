# core/uv.py
class UV:
    """
    Represents a 2D texture coordinate. Surfaces produce u and v in [0, 1];
    each texture decides how values outside that range are handled.
    """
    def __init__(self, u: float, v: float):
        self.u = u
        self.v = v

    def __add__(self, other: "UV") -> "UV":
        return UV(self.u + other.u, self.v + other.v)

    def __sub__(self, other: "UV") -> "UV":
        return UV(self.u - other.u, self.v - other.v)

    def __mul__(self, t: float) -> "UV":
        return UV(self.u * t, self.v * t)

    def __truediv__(self, t: float) -> "UV":
        return UV(self.u / t, self.v / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, UV):
            return NotImplemented
        return self.u == other.u and self.v == other.v

    def __hash__(self) -> int:
        return hash((self.u, self.v))

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"
