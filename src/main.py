import copy
import math
from typing import List

from utils import *
from point import CoordinatePoint
from join_point_demo import run_join_point_demo
from plot import create_cartesian_plot, create_polar_plot

def point_demo() -> List[CoordinatePoint]:
    """Walk one point through every mutation, printing it after each step. Returns a snapshot per step."""
    snapshots = []

    def show(p1):
        pprint(f"p1 ={p1}")
        snapshots.append(copy.deepcopy(p1))

    p1 = CoordinatePoint()
    show(p1)
    p1.set_rectangular(5, 2)
    show(p1)
    p1.set_polar(math.pi / 4.0, 1.0)
    show(p1)
    p1.set_polar(0.3805, 5.385)
    show(p1)
    p1.rotate(math.pi / 2.0)
    show(p1)
    p1.offset(-1.0, 3.0)
    show(p1)
    return snapshots

def main():
    pprint(purple("--- point demo ---"))
    snapshots = point_demo()
    pprint(purple("--- join point demo ---"))
    run_join_point_demo(quiet=not TRACE_CALLS)

    if SHOW_PLOTS:
        create_cartesian_plot(snapshots)
        create_polar_plot(snapshots)

if __name__ == "__main__":
    main()
