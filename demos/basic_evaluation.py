#!/usr/bin/env python3
"""
Demo: Basic Evaluation

This demo evaluates three representative test functions:
- a custom function in single precision
- a literature polynomial in double precision
- a discontinuous step function in double precision
"""

import numpy as np
import sphcollection as sphc


def main():
    print("Demo: Basic Evaluation")
    print("=" * 50)

    val1 = sphc.cf_f1(np.float32(0.23), np.float32(0.42))
    print(f"cf_f1(0.23, 0.42)       [{val1.dtype}] = {val1:.6g}")

    val2 = sphc.fornberg_f1(np.float64(0.2), np.float64(0.1))
    print(f"fornberg_f1(0.2, 0.1)   [{val2.dtype}] = {val2:.6g}")

    val3 = sphc.beentjes_f4(np.float64(0.5), np.float64(1.0))
    print(f"beentjes_f4(0.5, 1.0)   [{val3.dtype}] = {val3:.6g}")

    print("\nAvailable families:")
    for family in sphc.list_families():
        names = ", ".join(sphc.list_functions(family=family))
        print(f"  {family:10s} {names}")


if __name__ == "__main__":
    main()
