"""
scripts/run_tensor_scenarios.py

Console driver (NOT a unit test) that walks through the basic ranktensor
scenarios and prints one line per case.

Each case constructs tensors, mutates them and checks a few values. A passing
case prints ``Case N OK``; the first failing case prints its error and the
script exits with status 1.

Usage
-----
python scripts/run_tensor_scenarios.py
python scripts/run_tensor_scenarios.py --only 3 6
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import Callable

# -------------------------
# Make repo_root/src importable
# -------------------------
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC_DIR = os.path.join(ROOT_DIR, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from ranktensor import Tensor, ShapeMismatchError


def _check(cond: bool, what: str) -> None:
    if not cond:
        raise AssertionError(what)


def case_1() -> None:
    t = Tensor[int, 2](2, 3)
    t.fill(7)
    _check(t[1, 2] == 7, "fill(7) then t[1, 2] == 7")


def case_2() -> None:
    t = Tensor[int, 2](2, 3)
    t[1, 2] = 42
    t.reshape((3, 2))
    _check(t[[2, 1]] == 42, "value written at (1, 2) is read back at (2, 1)")


def case_3() -> None:
    t = Tensor[int, 3](2, 2, 2)
    t.reshape((2, 4, 1))
    try:
        t.reshape((3, 3, 1))
    except ShapeMismatchError:
        return
    raise AssertionError("reshape 8 -> 9 elements did not fail")


def case_4() -> None:
    a = Tensor[float, 2](2, 2)
    b = Tensor[float, 2](2, 2)
    a[0, 1] = 5.5
    b.fill(2.0)
    total = a + b
    diff = total - b
    _check(total[0, 1] == 7.5, "(a + b)[0, 1] == 7.5")
    _check(diff[0, 1] == 5.5, "(a + b - b)[0, 1] == 5.5")


def case_5() -> None:
    v = Tensor[float, 1](3)
    v.fill(2.0)
    _check((v * 4.0)[2] == 8.0, "(v * 4.0)[2] == 8.0")

    cube = Tensor[int, 3](2, 2, 2)
    cube.fill(1)
    _check((cube * cube)[1, 1, 1] == 1, "(cube * cube)[1, 1, 1] == 1")


def case_6() -> None:
    m = Tensor[int, 2](2, 1)
    m[0, 0] = 3
    m[1, 0] = 4
    n = Tensor[int, 2](2, 3)
    n.fill(5)
    p = m * n
    _check(p.shape == (2, 3), "broadcast shape is (2, 3)")
    _check(p[0, 2] == 15, "p[0, 2] == 15")
    _check(p[1, 1] == 20, "p[1, 1] == 20")


def case_7() -> None:
    m = Tensor[int, 2](2, 3)
    m[1, 0] = 99
    mt = m.transpose()
    _check(mt.shape == (3, 2), "transposed shape is (3, 2)")
    _check(mt[0, 1] == 99, "mt[0, 1] == 99")


CASES: dict[int, Callable[[], None]] = {
    1: case_1,
    2: case_2,
    3: case_3,
    4: case_4,
    5: case_5,
    6: case_6,
    7: case_7,
}


def main() -> int:
    p = argparse.ArgumentParser(description="Run the ranktensor console scenarios.")
    p.add_argument(
        "--only",
        type=int,
        nargs="+",
        choices=sorted(CASES),
        help="Run only the given case numbers.",
    )
    args = p.parse_args()

    selected = args.only or sorted(CASES)
    for n in selected:
        try:
            CASES[n]()
        except Exception as e:
            print(f"Case {n} FAILED: {type(e).__name__}: {e}")
            return 1
        print(f"Case {n} OK")

    print("All cases passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
