"""
Performance Benchmark
=====================

Measures headless frame throughput, with and without rendering.

Usage:
    python -m tools.benchmark_speed [--frames N] [--seed S] [--render]
"""

from __future__ import annotations

import argparse
import sys
import time

import numpy as np

from rockfall.core.config_loader import load_config
from rockfall.core.render_solid import SolidRenderer
from rockfall.core.simulation import Simulation
from rockfall.core.state_snapshot import stack_snapshots


def benchmark_physics(num_frames: int = 10000, seed: int = 42) -> dict:
    """
    Benchmark the frame driver alone.

    Args:
        num_frames: Number of frames to step.
        seed: Random seed.

    Returns:
        Dict with timing results.
    """
    sim = Simulation(config=load_config(), seed=seed)

    # Warmup
    sim.run(100)
    sim.reset(seed=seed)

    snapshots = []
    start = time.perf_counter()
    for _ in range(num_frames):
        sim.step()
        snapshots.append(sim.snapshot())
    elapsed = time.perf_counter() - start

    trajectory = stack_snapshots(snapshots)

    return {
        "mode": "physics",
        "num_frames": num_frames,
        "elapsed_seconds": elapsed,
        "frames_per_second": num_frames / elapsed,
        "ms_per_frame": (elapsed * 1000) / num_frames,
        "max_depth": float(np.max(trajectory[:, 7])),
        "wall_hits": sum(1 for s in snapshots if s.flash_active and s.flash_timer == 0),
    }


def benchmark_render(num_frames: int = 1000, seed: int = 42) -> dict:
    """
    Benchmark stepping plus the numpy renderer.

    Args:
        num_frames: Number of frames to step and render.
        seed: Random seed.

    Returns:
        Dict with timing results.
    """
    config = load_config()
    sim = Simulation(config=config, seed=seed)
    renderer = SolidRenderer(config)

    start = time.perf_counter()
    for _ in range(num_frames):
        sim.step()
        renderer.render(sim.get_render_data(fps=config.canvas.target_fps))
    elapsed = time.perf_counter() - start

    return {
        "mode": "render",
        "num_frames": num_frames,
        "elapsed_seconds": elapsed,
        "frames_per_second": num_frames / elapsed,
        "ms_per_frame": (elapsed * 1000) / num_frames,
    }


def print_results(results: dict) -> None:
    """Pretty print benchmark results."""
    print(f"\n{'=' * 50}")
    print(f"Mode: {results['mode']}")
    print(f"Frames: {results['num_frames']}")
    print(f"Elapsed: {results['elapsed_seconds']:.3f}s")
    print(f"Throughput: {results['frames_per_second']:.1f} frames/s")
    print(f"Per frame: {results['ms_per_frame']:.4f}ms")
    if "max_depth" in results:
        print(f"Max depth reached: {results['max_depth']:.1f}")
        print(f"Flashes started: {results['wall_hits']}")
    print(f"{'=' * 50}")


def main():
    parser = argparse.ArgumentParser(description="Benchmark Rockfall frame throughput")
    parser.add_argument("--frames", type=int, default=10000, help="Frames to step")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--render", action="store_true", help="Also benchmark the numpy renderer")

    args = parser.parse_args()

    print("Benchmarking frame driver...")
    print_results(benchmark_physics(args.frames, args.seed))

    if args.render:
        print("\nBenchmarking frame driver + renderer...")
        print_results(benchmark_render(min(args.frames, 1000), args.seed))

    return 0


if __name__ == "__main__":
    sys.exit(main())
