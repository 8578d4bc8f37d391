"""Benchmark helper for character-index substring latency."""
from __future__ import annotations

import argparse
import json
import statistics
from dataclasses import dataclass
from time import perf_counter
from typing import Sequence

from textslice import char_count, substring
from textslice.core.ranges import CharRange
from textslice.substring import TextValue


@dataclass(slots=True)
class BenchmarkResult:
    label: str
    kind: str
    chars: int
    size_bytes: int
    span: CharRange
    iterations: int
    samples_us: tuple[float, ...]

    @property
    def mean_us(self) -> float:
        return statistics.fmean(self.samples_us)

    @property
    def median_us(self) -> float:
        return statistics.median(self.samples_us)


def _default_cases(scale: int) -> Sequence[tuple[str, str]]:
    return (
        ("hello", "Hello, world!"),
        ("ascii", "lorem ipsum dolor sit amet " * scale),
        ("latin", "fõøbα® çàé ñü " * scale),
        ("cjk", "日本語のテキストを切り出す。" * scale),
        ("astral", "emoji 🎉 clef 𝄞 " * scale),
    )


def _payloads(text: str) -> Sequence[tuple[str, TextValue]]:
    encoded = text.encode("utf-8")
    return (("str", text), ("bytes", encoded), ("memoryview", memoryview(encoded)))


def _measure(value: TextValue, span: CharRange, *, iterations: int, repeats: int) -> tuple[float, ...]:
    samples: list[float] = []
    for _ in range(repeats):
        start = perf_counter()
        for _ in range(iterations):
            substring(value, span.start, span.end)
        samples.append((perf_counter() - start) * 1_000_000 / iterations)
    return tuple(samples)


def run_benchmarks(*, scale: int, iterations: int, repeats: int) -> list[BenchmarkResult]:
    results: list[BenchmarkResult] = []
    for label, text in _default_cases(scale):
        chars = len(text)
        # Middle half of the text, so the scan covers three quarters of it.
        span = CharRange(chars // 4, chars - chars // 4)
        for kind, value in _payloads(text):
            assert char_count(value) == chars
            samples = _measure(value, span, iterations=iterations, repeats=repeats)
            results.append(
                BenchmarkResult(
                    label=label,
                    kind=kind,
                    chars=chars,
                    size_bytes=len(text.encode("utf-8")),
                    span=span,
                    iterations=iterations,
                    samples_us=samples,
                )
            )
    return results


def main() -> None:
    parser = argparse.ArgumentParser(description="Measure substring() latency across text kinds.")
    parser.add_argument("--scale", type=int, default=200, help="Repetitions of each sample phrase.")
    parser.add_argument("--iterations", type=int, default=200, help="Calls per timed sample.")
    parser.add_argument("--repeats", type=int, default=5, help="Timed samples per case.")
    parser.add_argument("--json", action="store_true", help="Emit machine-readable JSON results.")
    args = parser.parse_args()

    results = run_benchmarks(
        scale=max(1, args.scale),
        iterations=max(1, args.iterations),
        repeats=max(1, args.repeats),
    )

    if args.json:
        payload = [
            {
                "label": result.label,
                "kind": result.kind,
                "chars": result.chars,
                "size_bytes": result.size_bytes,
                "span": result.span.to_dict(),
                "iterations": result.iterations,
                "mean_us": result.mean_us,
                "median_us": result.median_us,
            }
            for result in results
        ]
        print(json.dumps(payload, indent=2))
        return

    max_label = max(len(result.label) for result in results)
    header = f"{'Text':<{max_label}}  {'Kind':<10}  {'Chars':>8}  {'Bytes':>8}  {'Mean (us)':>10}  {'Median (us)':>11}"
    print(header)
    print("-" * len(header))
    for result in results:
        print(
            f"{result.label:<{max_label}}  "
            f"{result.kind:<10}  "
            f"{result.chars:>8,}  "
            f"{result.size_bytes:>8,}  "
            f"{result.mean_us:>10.2f}  "
            f"{result.median_us:>11.2f}"
        )

    print()
    for kind in ("str", "bytes", "memoryview"):
        medians = [result.median_us for result in results if result.kind == kind]
        print(
            f"{kind} → min: {min(medians):.2f} us · median: {statistics.median(medians):.2f} us · "
            f"max: {max(medians):.2f} us"
        )


if __name__ == "__main__":
    main()
