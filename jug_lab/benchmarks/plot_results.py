# jug_lab/benchmarks/plot_results.py
from __future__ import annotations
import io
import json
import math
from pathlib import Path
from typing import Any, Dict, List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"
OUT_DIR = HERE

def _load_rows(path: Path = RESULTS_JSON) -> List[Dict[str, Any]]:
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m jug_lab.benchmarks.run_all")
    data = json.loads(path.read_text())
    rows = data.get("results", [])
    # Keep only successful runs
    rows = [r for r in rows if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows

def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        if v is None:
            return math.inf
        return v
    return sorted(rows, key=key_fn)

def _label(r):
    return f"{r['algo']} {r.get('puzzle', '')}".strip()

def _bar(ax, rows, metric, title, ylabel):
    labels = [_label(r) for r in rows]
    vals = [r.get(metric) for r in rows]
    top = max((v for v in vals if v is not None), default=0) or 1

    x = list(range(len(labels)))
    ax.bar(x, [v or 0 for v in vals])
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(labels, rotation=30, ha="right", fontsize=7)

    # value labels on top of bars
    for xi, v in zip(x, vals):
        if v is None:
            label, y = "n/a", 0
        elif isinstance(v, float) and v < 0.01:
            label, y = f"{v:.4f}", v
        elif isinstance(v, float):
            label, y = f"{v:.3f}", v
        else:
            label, y = f"{v}", v
        ax.text(xi, y + 0.01 * top, label, ha="center", va="bottom", fontsize=7)

def bar_compare(rows, title="BFS vs DFS"):
    """2x2 grid: moves, nodes expanded, time, peak memory."""
    fig, axs = plt.subplots(2, 2, figsize=(11, 8))
    axs = axs.ravel()
    _bar(axs[0], rows, "moves", "Moves", "moves")
    _bar(axs[1], rows, "nodes_expanded", "Nodes Expanded", "nodes")
    _bar(axs[2], rows, "time_s", "Time (s)", "seconds")
    _bar(axs[3], rows, "peak_kb", "Peak Memory (KB)", "KB")
    fig.suptitle(title)
    fig.tight_layout(rect=[0, 0, 1, 0.95])
    return fig

def _fmt_table(rows):
    # Markdown table
    lines = [
        "| Puzzle | Algorithm | Moves | Nodes Expanded | Time (s) | Peak KB |",
        "|---|---|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, bool) or not isinstance(x, (int, float)):
            return "n/a"
        return f"{x:.6f}" if isinstance(x, float) else f"{x}"
    for r in rows:
        lines.append(
            f"| {r.get('puzzle', '')} | {r['algo']} | {fnum(r.get('moves'))} | "
            f"{fnum(r.get('nodes_expanded'))} | {fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)

def fig_to_png_bytes(fig):
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()

def main(results_json: Path = RESULTS_JSON, out_dir: Path = OUT_DIR):
    rows = _load_rows(results_json)

    md_path = out_dir / "results.md"
    md_path.write_text(_fmt_table(rows))
    print(f"Wrote {md_path}")

    for metric, title, ylabel, fname in [
        ("moves", "Moves (lower is better)", "moves", "moves.png"),
        ("nodes_expanded", "Nodes Expanded (lower is better)", "nodes", "nodes_expanded.png"),
        ("time_s", "Wall Time (lower is better)", "seconds", "time.png"),
    ]:
        fig, ax = plt.subplots(figsize=(7, 4))
        _bar(ax, _sorted(rows, metric), metric, title, ylabel)
        fig.tight_layout()
        (out_dir / fname).write_bytes(fig_to_png_bytes(fig))
        plt.close(fig)
        print(f"Wrote {out_dir / fname}")

    fig = bar_compare(rows)
    (out_dir / "summary.png").write_bytes(fig_to_png_bytes(fig))
    plt.close(fig)
    print(f"Wrote {out_dir / 'summary.png'}")

if __name__ == "__main__":
    main()
