#!/usr/bin/env python3
"""
benchmark.py

Times the pipeline engines against one image:
- reference: pure-Python loops, single pass
- numpy: summed-area-table blur, single pass
- striped: numpy engine over a thread pool of row stripes

Prints a comparison table, and can save a JSON report and a bar chart.
"""

import gc
import json
import logging
import os
import platform
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from boundary import ProcessResult, process_image
from raw_io import RawImage
from striping import process_striped

logger = logging.getLogger(__name__)

Runner = Callable[[RawImage, int], ProcessResult]


@dataclass
class BenchResult:
    name: str
    iterations: int
    durations: List[float] = field(default_factory=list)

    @property
    def average(self) -> float:
        return sum(self.durations) / len(self.durations)

    @property
    def min(self) -> float:
        return min(self.durations)

    @property
    def max(self) -> float:
        return max(self.durations)

    def to_dict(self) -> Dict:
        d = asdict(self)
        d.update(average=self.average, min=self.min, max=self.max)
        return d


def default_runners(threads: Optional[int] = None) -> Dict[str, Runner]:
    return {
        "Python Reference": lambda raw, r: process_image(raw.data, raw.width, raw.height, r, engine="reference"),
        "NumPy Single-Pass": lambda raw, r: process_image(raw.data, raw.width, raw.height, r, engine="numpy"),
        "NumPy Striped": lambda raw, r: process_striped(raw.data, raw.width, raw.height, r,
                                                        threads=threads, engine="numpy"),
    }


def run_one(name: str, runner: Runner, raw: RawImage, iterations: int = 3, radius: int = 5) -> BenchResult:
    """Wall-clock each call in ms, including validation and allocation."""
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1 (got {iterations})")
    result = BenchResult(name, iterations)
    logger.info("Running: %s", name)
    for i in range(iterations):
        gc.collect()
        start = time.perf_counter()
        runner(raw, radius)
        elapsed = (time.perf_counter() - start) * 1000
        logger.info("  iteration %d/%d: %.2f ms", i + 1, iterations, elapsed)
        result.durations.append(elapsed)
    return result


def compare(raw: RawImage, iterations: int = 3, radius: int = 5,
            runners: Optional[Dict[str, Runner]] = None) -> List[BenchResult]:
    """Run every runner and return results, fastest first."""
    if runners is None:
        runners = default_runners()
    results = [run_one(name, fn, raw, iterations, radius) for name, fn in runners.items()]
    return sorted(results, key=lambda r: r.average)


def format_table(results: List[BenchResult]) -> str:
    fastest = results[0].average
    lines = []
    for r in results:
        speedup = r.average / fastest if fastest else 1.0
        lines.append(f"{r.name:<30} {r.average:>8.0f} ms  min {r.min:>6.0f} ms  "
                     f"max {r.max:>6.0f} ms   {speedup:.2f}x")
    return "\n".join(lines)


def save_report(results: List[BenchResult], path, image: str, radius: int, iterations: int) -> Path:
    path = Path(path)
    report = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "python": platform.python_version(),
        "cpus": os.cpu_count(),
        "image": image,
        "radius": radius,
        "iterations": iterations,
        "results": [r.to_dict() for r in results],
    }
    path.write_text(json.dumps(report, indent=2))
    logger.info("Results saved to: %s", path)
    return path


def plot_results(results: List[BenchResult], path, width=640, height=360) -> Path:
    path = Path(path)
    names = [r.name for r in results]
    fig, ax = plt.subplots(figsize=(width/100, height/100), dpi=100)
    ax.bar(names, [r.average for r in results], color="gray",
           yerr=[[r.average - r.min for r in results], [r.max - r.average for r in results]])
    ax.set_ylabel("ms (average, min/max)")
    ax.set_title("Grayscale + box blur")
    fig.tight_layout()
    fig.savefig(path, format="png")
    plt.close(fig)
    logger.info("Chart saved to: %s", path)
    return path
