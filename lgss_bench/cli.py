"""Command-line entry point for the LGSS benchmark."""
import sys
import time
from argparse import ArgumentParser

from .benchmark import BenchmarkConfig, run_benchmark, summarize
from .utils.result_cache import ResultCache
from .utils.visualization import plot_errorbar_series


def create_parser() -> ArgumentParser:
    """Create argument parser for the LGSS benchmark."""
    parser = ArgumentParser(description="Compare SMC and kernel herding resampling on a linear Gaussian SSM")
    _ = parser.add_argument(
        "--trial",
        action="store_true",
        help="Run a quick version of benchmarks to check that all is working correctly.",
    )
    _ = parser.add_argument(
        "--cache-dir",
        default="cache/lgss/",
        help="Directory to store temporary data that may be reused across different runs.",
    )
    _ = parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Recompute every score and do not write the cache.",
    )
    _ = parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Root random seed",
    )
    _ = parser.add_argument(
        "--output",
        default="lgss.pdf",
        help="Path of the error-bar plot",
    )
    return parser


def main(argv=None):
    # make sure progress lines reach the console immediately
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(line_buffering=True)

    args = create_parser().parse_args(argv)
    if args.trial:
        print("Trial run")
        config = BenchmarkConfig.trial(seed=args.seed)
    else:
        config = BenchmarkConfig.full(seed=args.seed)

    cache = None if args.no_cache else ResultCache(args.cache_dir)

    print("running LGSS benchmark")
    t0 = time.perf_counter()
    points = run_benchmark(config, cache=cache)
    plot_errorbar_series(points, args.output, x_label="#samples", y_label="RMSE", title="LGSS")
    for name, rows in summarize(points).items():
        n, mean, se, rmse = rows[-1]
        print(f"  {name}: N={n} mean={mean:.4f} stderr={se:.4f} rmse={rmse:.4f}")
    print(f"Plot saved: {args.output} ({time.perf_counter() - t0:.1f}s)")
    return points


if __name__ == "__main__":
    main()
