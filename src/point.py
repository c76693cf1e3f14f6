from dataclasses import dataclass
from typing import Optional, Tuple

import utils
from utils import *

@dataclass(eq=False, repr=False)
class CoordinatePoint:
    """
    2D point with a rectangular (x, y) and a polar (theta, rho) view.
    Writing one view marks the other stale; a stale view is recomputed the next time it is read.
    """
    _x: float = 0.0
    _y: float = 0.0
    _theta: float = 0.0
    _rho: float = 0.0
    polar_valid: bool = True
    rectangular_valid: bool = True
    harden_rho: Optional[bool] = None # None follows utils.HARDEN_RHO at recompute time

    @classmethod
    def from_rectangular(cls, x, y, harden_rho=None):
        point = cls(harden_rho=harden_rho)
        point.set_rectangular(x, y)
        return point

    @classmethod
    def from_polar(cls, theta, rho, harden_rho=None):
        point = cls(harden_rho=harden_rho)
        point.set_polar(theta, rho)
        return point

    def hardened(self):
        if self.harden_rho is None:
            return utils.HARDEN_RHO
        return self.harden_rho

    def make_polar(self):
        if not self.polar_valid:
            self._theta, self._rho = rectangular_to_polar(self._x, self._y, harden=self.hardened())
            self.polar_valid = True

    def make_rectangular(self):
        if not self.rectangular_valid:
            self._x, self._y = polar_to_rectangular(self._theta, self._rho)
            self.rectangular_valid = True

    @property
    def x(self) -> float:
        self.make_rectangular()
        return self._x

    @property
    def y(self) -> float:
        self.make_rectangular()
        return self._y

    @property
    def theta(self) -> float:
        self.make_polar()
        return self._theta

    @property
    def rho(self) -> float:
        self.make_polar()
        return self._rho

    def set_rectangular(self, new_x, new_y):
        self._x = float(new_x)
        self._y = float(new_y)
        self.rectangular_valid = True
        self.polar_valid = False

    def set_polar(self, new_theta, new_rho):
        self._theta = float(new_theta)
        self._rho = float(new_rho)
        self.polar_valid = True
        self.rectangular_valid = False

    def rotate(self, angle):
        self.set_polar(self.theta + angle, self.rho)

    def offset(self, delta_x, delta_y):
        self.set_rectangular(self.x + delta_x, self.y + delta_y)

    @property
    def xy(self) -> Tuple[float, float]:
        return (self.x, self.y)
    @xy.setter
    def xy(self, new_xy: Tuple[Optional[float], Optional[float]]):
        if new_xy[0] != None and new_xy[1] != None:
            self.set_rectangular(new_xy[0], new_xy[1])
        else:
            print_error(f"Could not set xy in {self!r} with x={new_xy[0]} and y={new_xy[1]}.")

    @property
    def theta_rho(self) -> Tuple[float, float]:
        return (self.theta, self.rho)
    @theta_rho.setter
    def theta_rho(self, new_theta_rho: Tuple[Optional[float], Optional[float]]):
        if new_theta_rho[0] != None and new_theta_rho[1] != None:
            self.set_polar(new_theta_rho[0], new_theta_rho[1])
        else:
            print_error(f"Could not set theta_rho in {self!r} with theta={new_theta_rho[0]} and rho={new_theta_rho[1]}.")

    def __str__(self):
        # x and y are read first so the rectangular view is synced before the polar one
        return f"({self.x}, {self.y})[{self.theta} : {self.rho}]"

    def __repr__(self):
        # raw fields, no syncing
        return (
            f"CoordinatePoint(x={self._x}, y={self._y}, "
            f"theta={self._theta}, rho={self._rho}, "
            f"polar_valid={self.polar_valid}, rectangular_valid={self.rectangular_valid})"
        )
