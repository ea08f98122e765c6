"""
scripts/bench_matmul_vs_numpy.py

ranktensor matmul vs NumPy microbenchmark (NOT a unit test).

Benchmarks the batched matrix product for:
- ranktensor: `matrix_product` (slice-wise contraction over the inner axis)
- NumPy: `np.matmul` on the same data

Timing policy
-------------
- Input tensors are built once per case, outside the timed region.
- Each implementation gets `--warmup` untimed calls, then `--repeats` timed
  calls; the median is reported.

Usage
-----
python scripts/bench_matmul_vs_numpy.py --presets --dtype float32
python scripts/bench_matmul_vs_numpy.py --M 256 --K 256 --N 256 --dtype float64
python scripts/bench_matmul_vs_numpy.py --batch 8 --M 64 --K 64 --N 64 --repeats 20
"""

from __future__ import annotations

import argparse
import os
import statistics
import sys
import time
from dataclasses import dataclass
from typing import Callable

import numpy as np

# -------------------------
# Make repo_root/src importable
# -------------------------
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC_DIR = os.path.join(ROOT_DIR, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from ranktensor import Tensor, matrix_product


def _time_one(fn: Callable[[], None], *, warmup: int, repeats: int) -> list[float]:
    for _ in range(warmup):
        fn()
    ts: list[float] = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        ts.append(t1 - t0)
    return ts


def _fmt_seconds(x: float) -> str:
    if x < 1e-6:
        return f"{x*1e9:.2f} ns"
    if x < 1e-3:
        return f"{x*1e6:.2f} us"
    if x < 1:
        return f"{x*1e3:.2f} ms"
    return f"{x:.3f} s"


@dataclass(frozen=True)
class Case:
    name: str
    batch: int
    M: int
    K: int
    N: int

    def shapes(self) -> tuple[tuple[int, ...], tuple[int, ...]]:
        lead = (self.batch,) if self.batch > 0 else ()
        return lead + (self.M, self.K), lead + (self.K, self.N)


PRESETS = [
    Case("small", 0, 32, 32, 32),
    Case("medium", 0, 128, 128, 128),
    Case("tall", 0, 512, 16, 64),
    Case("batched", 16, 32, 32, 32),
]


def _bench_case(
    case: Case, *, dtype: np.dtype, warmup: int, repeats: int, sanity: bool, seed: int
) -> None:
    rng = np.random.default_rng(seed)
    a_shape, b_shape = case.shapes()

    a_np = rng.standard_normal(a_shape).astype(dtype, copy=False)
    b_np = rng.standard_normal(b_shape).astype(dtype, copy=False)
    a = Tensor.from_numpy(a_np)
    b = Tensor.from_numpy(b_np)

    def ours() -> None:
        matrix_product(a, b)

    def reference() -> None:
        np.matmul(a_np, b_np)

    t_ours = statistics.median(_time_one(ours, warmup=warmup, repeats=repeats))
    t_ref = statistics.median(_time_one(reference, warmup=warmup, repeats=repeats))
    ratio = (t_ours / t_ref) if t_ref > 0 else float("inf")

    print(
        f"[{case.name:>8}] {a_shape} @ {b_shape} {np.dtype(dtype).name}: "
        f"ranktensor {_fmt_seconds(t_ours)} | numpy {_fmt_seconds(t_ref)} "
        f"| x{ratio:.1f}"
    )

    if sanity:
        tol = 1e-3 if np.dtype(dtype) == np.float32 else 1e-9
        np.testing.assert_allclose(
            matrix_product(a, b).to_numpy(), np.matmul(a_np, b_np), rtol=tol, atol=tol
        )


def main() -> None:
    p = argparse.ArgumentParser(description="Benchmark ranktensor matmul vs NumPy.")
    p.add_argument("--presets", action="store_true", help="Run the preset cases.")
    p.add_argument("--batch", type=int, default=0, help="Leading batch size (0: none).")
    p.add_argument("--M", type=int, default=128)
    p.add_argument("--K", type=int, default=128)
    p.add_argument("--N", type=int, default=128)
    p.add_argument("--dtype", choices=["float32", "float64"], default="float32")
    p.add_argument("--warmup", type=int, default=2)
    p.add_argument("--repeats", type=int, default=10)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument(
        "--no-sanity", action="store_true", help="Skip the result comparison."
    )
    args = p.parse_args()

    dtype = np.dtype(args.dtype)
    cases = (
        PRESETS
        if args.presets
        else [Case("custom", args.batch, args.M, args.K, args.N)]
    )

    print(f"numpy {np.__version__}, warmup={args.warmup}, repeats={args.repeats}")
    for case in cases:
        _bench_case(
            case,
            dtype=dtype,
            warmup=args.warmup,
            repeats=args.repeats,
            sanity=not args.no_sanity,
            seed=args.seed,
        )


if __name__ == "__main__":
    main()
