"""Matplotlib analysis charts — speed ramp, brick attrition, session length, pilot comparison."""

import random

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend
import matplotlib.pyplot as plt
import numpy as np

from breakout.types import BallLost, BrickHit, PaddleHit, WallBounce
from breakout.config import get_config, LAYOUT_PRESETS
from breakout.autopilot import Autopilot, PILOT_STYLES
from breakout.session import simulate_session

STYLE_COLORS = {
    "perfect": "#28a745",
    "steady": "#4ecdc4",
    "sloppy": "#ffc107",
    "sluggish": "#e94560",
    "wanderer": "#a855f7",
}


def _style_chart(ax, title):
    """Apply dark theme styling to chart."""
    ax.set_facecolor("#0f0f1a")
    ax.set_title(title, color="#e0e0e0", fontsize=13, fontweight="bold", pad=12)
    ax.tick_params(colors="#888888", labelsize=9)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.spines["bottom"].set_color("#333333")
    ax.spines["left"].set_color("#333333")
    ax.xaxis.label.set_color("#aaaaaa")
    ax.yaxis.label.set_color("#aaaaaa")


def _run(preset, style, seed, max_ticks):
    random.seed(seed)
    return simulate_session(get_config(preset), Autopilot(style), max_ticks=max_ticks)


def chart_speed_ramp(preset="compact", max_ticks=20_000, save_path=None):
    """Chart 1: Ball speed over a session, one line per pilot style."""
    fig, ax = plt.subplots(figsize=(8, 5))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, f"Ball Speed Ramp ({LAYOUT_PRESETS[preset]['label']})")

    cfg = get_config(preset)
    for style in PILOT_STYLES:
        result = _run(preset, style, 7, max_ticks)
        trace = result.stats["speed_trace"]
        ax.plot(np.arange(len(trace)), trace, color=STYLE_COLORS.get(style, "#888"),
                linewidth=1.8, label=PILOT_STYLES[style]["label"])

    ax.axhline(y=cfg.max_speed, color="#e94560", linestyle="--", linewidth=1.2, alpha=0.7)
    ax.text(0, cfg.max_speed * 1.01, "Speed cap", color="#e94560", fontsize=9, va="bottom")

    ax.set_xlabel("Tick")
    ax.set_ylabel("Speed (units/tick)")
    ax.legend(facecolor="#1a1a2e", edgecolor="#333", labelcolor="#e0e0e0", fontsize=9)
    ax.grid(True, alpha=0.15)

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig


def chart_bricks_remaining(preset="compact", max_ticks=20_000, save_path=None):
    """Chart 2: Bricks remaining over time, one line per pilot style."""
    fig, ax = plt.subplots(figsize=(8, 5))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, "Brick Attrition by Pilot Style")

    for style in PILOT_STYLES:
        result = _run(preset, style, 7, max_ticks)
        trace = result.stats["bricks_trace"]
        ax.step(np.arange(len(trace)), trace, where="post", color=STYLE_COLORS.get(style, "#888"),
                linewidth=1.8, label=f"{PILOT_STYLES[style]['label']} ({result.reason})")

    ax.set_xlabel("Tick")
    ax.set_ylabel("Bricks remaining")
    ax.set_ylim(bottom=0)
    ax.legend(facecolor="#1a1a2e", edgecolor="#333", labelcolor="#e0e0e0", fontsize=9)
    ax.grid(True, alpha=0.15)

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig


def chart_session_length(preset="compact", n_sessions=10, max_ticks=20_000, save_path=None):
    """Chart 3: Session length distribution per pilot style."""
    styles = list(PILOT_STYLES.keys())
    lengths = []
    for i, style in enumerate(styles):
        lengths.append([_run(preset, style, seed * 31 + i, max_ticks).ticks for seed in range(n_sessions)])

    fig, ax = plt.subplots(figsize=(8, 5))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, "Session Length by Pilot Style")

    bp = ax.boxplot(lengths, patch_artist=True, widths=0.6)
    for patch, style in zip(bp["boxes"], styles):
        patch.set_facecolor(STYLE_COLORS.get(style, "#888"))
        patch.set_alpha(0.8)
    for median in bp["medians"]:
        median.set_color("#e0e0e0")

    ax.set_xticks(range(1, len(styles) + 1))
    ax.set_xticklabels([PILOT_STYLES[s]["label"] for s in styles])
    ax.set_ylabel("Ticks until end")
    ax.grid(True, alpha=0.15, axis="y")

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig


def chart_event_breakdown(preset="compact", style="steady", n_sessions=5, max_ticks=20_000, save_path=None):
    """Chart 4: What the ball ran into."""
    counts = {}
    for seed in range(n_sessions):
        result = _run(preset, style, seed * 77, max_ticks)
        for e in result.events:
            if isinstance(e, WallBounce):
                key = f"wall:{e.wall}"
            elif isinstance(e, PaddleHit):
                key = "paddle"
            elif isinstance(e, BrickHit):
                key = "brick"
            elif isinstance(e, BallLost):
                key = "lost"
            else:
                continue
            counts[key] = counts.get(key, 0) + 1

    fig, ax = plt.subplots(figsize=(7, 5))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, f"Contacts per Session ({PILOT_STYLES[style]['label']} pilot)")

    items = sorted(counts.items(), key=lambda x: -x[1])
    labels = [k for k, _ in items]
    values = [v / n_sessions for _, v in items]
    colors = ["#e94560", "#28a745", "#ffc107", "#4ecdc4", "#a855f7", "#64748b", "#fb923c"]

    bars = ax.barh(labels, values, color=colors[:len(labels)], edgecolor="#333", alpha=0.85)
    for bar, v in zip(bars, values):
        ax.text(bar.get_width() + 0.3, bar.get_y() + bar.get_height() / 2,
                f"{v:.1f}", va="center", fontsize=10, color="#e0e0e0")

    ax.set_xlabel("Average count")
    ax.invert_yaxis()
    ax.grid(True, alpha=0.15, axis="x")

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig


def chart_pilot_heatmap(presets=("compact", "rapid", "wide_paddle"), n_sessions=2, max_ticks=10_000, save_path=None):
    """Chart 5: Share of bricks cleared for each pilot style on each layout."""
    styles = list(PILOT_STYLES.keys())
    grid = np.zeros((len(styles), len(presets)))

    for i, style in enumerate(styles):
        for j, preset in enumerate(presets):
            pct = [
                _run(preset, style, seed * 100 + i * 10 + j, max_ticks).stats["cleared_pct"]
                for seed in range(n_sessions)
            ]
            grid[i][j] = float(np.mean(pct))

    fig, ax = plt.subplots(figsize=(8, 6))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, "Bricks Cleared (%) by Pilot and Layout")

    im = ax.imshow(grid, cmap="RdYlGn", vmin=0, vmax=100, aspect="auto")
    ax.set_xticks(range(len(presets)))
    ax.set_yticks(range(len(styles)))
    ax.set_xticklabels([LAYOUT_PRESETS[p]["label"] for p in presets], rotation=20, ha="right", fontsize=9)
    ax.set_yticklabels([PILOT_STYLES[s]["label"] for s in styles], fontsize=9)

    for i in range(len(styles)):
        for j in range(len(presets)):
            val = grid[i][j]
            color = "white" if val < 30 or val > 70 else "black"
            ax.text(j, i, f"{val:.0f}%", ha="center", va="center",
                    fontsize=10, fontweight="bold", color=color)

    cbar = fig.colorbar(im, ax=ax, shrink=0.8)
    cbar.set_label("Cleared %", color="#aaa")
    cbar.ax.tick_params(colors="#888")

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig


def generate_all_charts(output_dir="."):
    """Generate all analysis charts and save to output directory."""
    import os
    os.makedirs(output_dir, exist_ok=True)

    charts = [
        ("chart_speed_ramp.png", chart_speed_ramp, {}),
        ("chart_bricks_remaining.png", chart_bricks_remaining, {}),
        ("chart_session_length.png", chart_session_length, {"n_sessions": 6}),
        ("chart_event_breakdown.png", chart_event_breakdown, {"n_sessions": 3}),
        ("chart_pilot_heatmap.png", chart_pilot_heatmap, {}),
    ]

    paths = []
    for filename, func, kwargs in charts:
        path = os.path.join(output_dir, filename)
        print(f"  Generating {filename} ...")
        func(save_path=path, **kwargs)
        plt.close("all")
        paths.append(path)
        print(f"  Saved: {path}")

    return paths
