"""
SMAT sparse matrix text format.

Layout:
    line 1:        <m> <n> <nz>
    lines 2..nz+1: <row> <col> <value>   (zero-based indices)

Usage:
    from sparsekit.smat import read_smat, write_smat

    write_smat(A, "A.smat")
    B = read_smat("A.smat")
"""

from sparsekit.smat._reader import read_smat
from sparsekit.smat._writer import (
    write_smat,
    DEFAULT_FLOAT_FORMAT,
    DEFAULT_INT_FORMAT,
)

__all__ = [
    "read_smat",
    "write_smat",
    "DEFAULT_FLOAT_FORMAT",
    "DEFAULT_INT_FORMAT",
]
