"""Real intervals with open or closed boundaries."""

import enum
from dataclasses import dataclass
from typing import Callable

from torch import Tensor


class Bound(enum.Enum):
    """Boundary type of an interval endpoint."""

    OPENED = "opened"
    CLOSED = "closed"


@dataclass(frozen=True)
class Interval:
    """Real interval ``lower .. upper`` with per-endpoint boundary flags.

    The default boundaries give the half-open interval ``(lower, upper]``
    used throughout root isolation, so that adjacent halves of a bisection
    never share a point.

    Attributes
    ----------
    lower, upper : float
        Endpoints.
    lower_bound, upper_bound : Bound
        Whether each endpoint belongs to the interval.
    epsilon : float
        Tolerance of the degeneracy and emptiness tests.

    Examples
    --------
    >>> I = Interval(-1.0, 1.0)
    >>> I.contains(-1.0), I.contains(1.0)
    (False, True)
    >>> left, right = I.bisect()
    >>> left
    Interval(lower=-1.0, upper=0.0, lower_bound=<Bound.OPENED: 'opened'>, upper_bound=<Bound.CLOSED: 'closed'>, epsilon=1e-09)
    """

    lower: float = 0.0
    upper: float = 1.0
    lower_bound: Bound = Bound.OPENED
    upper_bound: Bound = Bound.CLOSED
    epsilon: float = 1e-9

    @property
    def length(self) -> float:
        return self.upper - self.lower

    @property
    def midpoint(self) -> float:
        return (self.lower + self.upper) / 2.0

    def is_degenerate(self) -> bool:
        """True if both endpoints coincide within ``epsilon``."""
        return abs(self.upper - self.lower) < self.epsilon

    def is_empty(self) -> bool:
        """True if the interval contains no point.

        Either the endpoints are reversed, or the interval is degenerate
        and at least one endpoint is excluded.
        """
        return self.lower > self.upper + self.epsilon or (
            self.is_degenerate() and not self.is_closed()
        )

    def is_closed(self) -> bool:
        return (
            self.lower_bound is Bound.CLOSED and self.upper_bound is Bound.CLOSED
        )

    def is_opened(self) -> bool:
        return (
            self.lower_bound is Bound.OPENED and self.upper_bound is Bound.OPENED
        )

    def is_half_open(self) -> bool:
        return self.lower_bound is not self.upper_bound

    def is_lower_open(self) -> bool:
        return self.lower_bound is Bound.OPENED

    def is_lower_closed(self) -> bool:
        return self.lower_bound is Bound.CLOSED

    def is_upper_open(self) -> bool:
        return self.upper_bound is Bound.OPENED

    def is_upper_closed(self) -> bool:
        return self.upper_bound is Bound.CLOSED

    def contains(self, x: float | Tensor) -> bool:
        """Check membership of a scalar, honouring the boundary flags."""
        x = float(x)
        if self.is_lower_open():
            above = x > self.lower
        else:
            above = x >= self.lower
        if self.is_upper_open():
            below = x < self.upper
        else:
            below = x <= self.upper
        return above and below

    def bisect(
        self,
        lower_bound: Bound = Bound.OPENED,
        upper_bound: Bound = Bound.CLOSED,
        at: float | None = None,
    ) -> tuple["Interval", "Interval"]:
        """Split into two intervals at ``at`` (default: the midpoint).

        Both halves get the boundary flags ``lower_bound`` and
        ``upper_bound``.
        """
        c = self.midpoint if at is None else float(at)
        return (
            Interval(self.lower, c, lower_bound, upper_bound, self.epsilon),
            Interval(c, self.upper, lower_bound, upper_bound, self.epsilon),
        )

    def linear_transform(
        self, other: "Interval"
    ) -> Callable[[float | Tensor], float | Tensor]:
        """Return the affine map sending this interval onto ``other``.

        The map sends ``lower`` to ``other.lower`` and ``upper`` to
        ``other.upper``. It accepts floats or tensors.
        """
        a, b = self.lower, self.upper
        alpha, beta = other.lower, other.upper
        m = (beta - alpha) / (b - a)
        c = (alpha * b - beta * a) / (b - a)

        def transform(t):
            return m * t + c

        return transform
