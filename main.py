#!/usr/bin/env python3
"""CLI entry point for the Breakout simulation.

Usage:
    python main.py play [preset]          Launch Pygame window (mouse or autopilot)
    python main.py run [preset] [style]   Run a headless autopilot session and print stats
    python main.py analyze                Generate comparison charts
    python main.py test                   Run all tests
    python main.py demo                   Headless run of every preset, then charts
"""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


def _arg(index, choices, default):
    return sys.argv[index] if len(sys.argv) > index and sys.argv[index] in choices else default


def cmd_play():
    """Launch the Pygame window."""
    from breakout.config import list_configs
    from sim.visualizer import run_visualizer

    preset = _arg(2, list_configs(), "classic")
    print("Launching Breakout...")
    print("Controls: mouse=paddle  A=autopilot  S=style  P=preset  +/-=speed  SPACE=pause  R=restart  Q=quit")
    print("-" * 60)
    run_visualizer(preset=preset)


def _print_session(preset, style, max_ticks=200_000):
    import random
    from breakout.config import get_config, LAYOUT_PRESETS
    from breakout.autopilot import Autopilot
    from breakout.session import simulate_session

    random.seed(42)
    cfg = get_config(preset)
    pilot = Autopilot(style)
    result = simulate_session(cfg, pilot, max_ticks=max_ticks)
    s = result.stats

    print(f"  Layout: {LAYOUT_PRESETS[preset]['label']}  |  Pilot: {pilot.label}")
    print(f"  Result: {result.reason} after {result.ticks} ticks")
    print(f"  Bricks: {s['bricks_destroyed']}/{s['bricks_initial']} destroyed ({s['cleared_pct']}%)")
    print(f"  Paddle hits: {s['paddle_hits']}  |  Wall bounces: {s['wall_bounces']}")
    print(f"  Speed: {s['initial_speed']} -> {s['final_speed']} (cap {cfg.max_speed})")
    return result


def cmd_run():
    """Run a headless autopilot session and print stats."""
    from breakout.config import list_configs
    from breakout.autopilot import PILOT_STYLES

    presets = list_configs()
    styles = list(PILOT_STYLES.keys())
    preset = _arg(2, presets, "compact")
    style = _arg(3, styles, "steady")

    print("=" * 60)
    print("  BREAKOUT — HEADLESS SESSION")
    print("=" * 60)
    _print_session(preset, style)
    print()
    print("  Available presets: " + ", ".join(presets))
    print("  Available styles:  " + ", ".join(styles))
    print("  Usage: python main.py run [preset] [style]")
    print("=" * 60)


def cmd_analyze():
    """Generate all analysis charts."""
    print("Generating analysis charts...")
    print("-" * 60)
    from sim.analysis import generate_all_charts
    output_dir = os.path.join(os.path.dirname(__file__), "output")
    paths = generate_all_charts(output_dir=output_dir)
    print(f"\nDone! {len(paths)} charts saved to {output_dir}/")


def cmd_test():
    """Run all tests."""
    import subprocess
    print("Running tests...")
    print("-" * 60)
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "tests/", "-v"],
        cwd=os.path.dirname(os.path.abspath(__file__)),
    )
    sys.exit(result.returncode)


def cmd_demo():
    """Headless run of every preset, then charts."""
    from breakout.config import list_configs

    print("=" * 60)
    print("  BREAKOUT — AUTOPILOT DEMO")
    print("=" * 60)
    print()

    for preset in list_configs():
        _print_session(preset, "steady", max_ticks=50_000)
        print()

    print("-" * 60)
    cmd_analyze()

    print()
    print("=" * 60)
    print("  Demo complete! Check the 'output' folder for charts.")
    print("=" * 60)


COMMANDS = {
    "play": cmd_play,
    "run": cmd_run,
    "analyze": cmd_analyze,
    "test": cmd_test,
    "demo": cmd_demo,
}


def main():
    if len(sys.argv) < 2 or sys.argv[1] not in COMMANDS:
        print(__doc__)
        print("Available commands:")
        for name, func in COMMANDS.items():
            print(f"  {name:12s} {func.__doc__}")
        sys.exit(1)

    COMMANDS[sys.argv[1]]()


if __name__ == "__main__":
    main()
