#!/usr/bin/env python
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np
import scipy.sparse as sp

from diagcsr.utils.logging_config import setup_logging, get_logger
from diagcsr.core.inout.diags_config import load_diags_config
from diagcsr.core.stamping.diags_builder import DiagonalMatrixBuilder
from diagcsr.core.exceptions import DiagsError

logger = get_logger(__name__)

def main(argv: Optional[List[str]] = None) -> int:
    """
    Build a CSR matrix from a YAML diagonal description.

    Command-line arguments:
      --config: Path to the YAML file with shape, offsets and bands.
      --dump: Optional path to save the matrix (scipy .npz).
      --dense: Print the matrix as a dense array.
      --summary: Print shape, dtype and stored-entry count.
      --parallel / --no-parallel: Compute diagonals in a process pool or serially (overrides the config).
      --workers: Maximum number of pool workers (overrides the config).
      --verbose: Enable DEBUG logging.
    """
    parser = argparse.ArgumentParser(description="Build a sparse matrix from diagonal bands.")
    parser.add_argument("--config", type=Path, required=True, help="Path to the YAML diagonal description.")
    parser.add_argument("--dump", type=Path, default=None, help="Path to save the CSR matrix (e.g., mat.npz)")
    parser.add_argument("--dense", action="store_true", help="Print the matrix densely.")
    parser.add_argument("--summary", action="store_true", help="Print a matrix summary.")
    parser.add_argument("--parallel", action=argparse.BooleanOptionalAction, default=None,
                        help="Compute diagonals in parallel (--no-parallel forces serial).")
    parser.add_argument("--workers", type=int, default=None, help="Maximum number of worker processes.")
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging.")
    args = parser.parse_args(argv)

    if args.verbose:
        setup_logging(level=logging.DEBUG)
        logger.debug("Verbose logging enabled.")
    else:
        setup_logging(level=logging.INFO)

    try:
        config = load_diags_config(args.config)
    except DiagsError as e:
        logger.error("Config load failed: %s", e)
        return 1

    options = config.builder_options()
    if args.parallel is not None:
        options["parallel"] = args.parallel
    if args.workers is not None:
        options["max_workers"] = args.workers

    try:
        builder = DiagonalMatrixBuilder(**options)
        mat = builder.build(config.bands, config.offsets, config.shape)
    except DiagsError as e:
        logger.error("Matrix construction failed: %s", e)
        return 1
    logger.info("Matrix built: shape=%s nnz=%d", mat.shape, mat.nnz)

    if args.summary:
        print(f"Matrix: {mat.shape[0]}x{mat.shape[1]} {mat.dtype}, {mat.nnz} stored entries")

    if args.dense:
        print(np.array2string(mat.toarray()))

    if args.dump:
        sp.save_npz(args.dump, mat)
        print(f"Matrix dumped to {args.dump}")

    return 0

if __name__ == "__main__":
    sys.exit(main())
