#!/usr/bin/env python3
"""
main.py — command line front end.

    python main.py process photo.jpg -o out.png -r 5 --engine numpy --threads 8
    python main.py bench photo.jpg --iterations 3 --report results.json --chart results.png
"""

import argparse
import logging
import sys

import benchmark
import settings
from boundary import process_image
from pipeline import ENGINES
from raw_io import RawImage, load_rgba, save_rgba
from striping import process_striped

logger = logging.getLogger("main")


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=settings.LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Grayscale + box blur for RGBA images")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("process", help="Convert one image")
    p.add_argument("input")
    p.add_argument("-o", "--output", default="output.png")
    p.add_argument("-r", "--radius", type=int, default=settings.DEFAULT_BLUR_RADIUS)
    p.add_argument("--engine", choices=sorted(ENGINES), default=settings.DEFAULT_ENGINE)
    p.add_argument("--threads", type=int, default=None,
                   help="Split rows across N threads (default: single pass)")

    b = sub.add_parser("bench", help="Compare engines on one image")
    b.add_argument("input")
    b.add_argument("--iterations", type=int, default=settings.bench_iterations())
    b.add_argument("-r", "--radius", type=int, default=settings.bench_radius())
    b.add_argument("--threads", type=int, default=None)
    b.add_argument("--report", default=None, help="Write JSON results here")
    b.add_argument("--chart", default=None, help="Write a PNG bar chart here")
    return parser


def cmd_process(args) -> None:
    raw = load_rgba(args.input)
    logger.info("Loaded %s: %dx%d", args.input, raw.width, raw.height)
    if args.threads is not None:
        result = process_striped(raw.data, raw.width, raw.height, args.radius,
                                 threads=args.threads, engine=args.engine)
    else:
        result = process_image(raw.data, raw.width, raw.height, args.radius, engine=args.engine)
    save_rgba(RawImage(bytes(result.data), raw.width, raw.height), args.output)
    logger.info("Saved to: %s (%d ms)", args.output, result.duration_ms)


def cmd_bench(args) -> None:
    raw = load_rgba(args.input)
    results = benchmark.compare(raw, args.iterations, args.radius,
                                runners=benchmark.default_runners(args.threads))
    print(benchmark.format_table(results))
    if args.report:
        benchmark.save_report(results, args.report, args.input, args.radius, args.iterations)
    if args.chart:
        benchmark.plot_results(results, args.chart)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        if args.command == "process":
            cmd_process(args)
        else:
            cmd_bench(args)
    except (OSError, ValueError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
