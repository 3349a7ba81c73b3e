"""
Text tables and matplotlib charts comparing algorithm runs.
"""

from matplotlib.figure import Figure

FAILED_TIME = -1.0

# Colors
BAR_COLORS = ['#2196F3', '#4CAF50', '#FF9800', '#9C27B0']


def format_time(ms):
    if ms == FAILED_TIME:
        return "FAILED"
    if ms < 1:
        return f"{ms * 1000:.0f} μs"
    return f"{ms:.3f} ms"


def format_metrics(name, result):
    m = result.metrics
    lines = [
        f"\n===== {name} =====",
        f"Path Length: {m.path_length}",
        f"Nodes Explored: {m.nodes_explored}",
        f"Time: {format_time(m.elapsed_ms)}",
        f"Success: {'Yes' if result.success else 'No'}",
    ]
    if result.timed_out:
        lines.append("Timed out: Yes")
    if result.error:
        lines.append(f"Error: {result.error}")
    return '\n'.join(lines)


def format_comparison_table(results):
    """results: mapping of key -> AlgorithmResult (keys unused, names come from results)"""
    lines = [
        "\n📊 PERFORMANCE COMPARISON",
        "=========================",
        f"{'Algorithm':<20}{'Path Length':<12}{'Nodes Explored':<15}{'Time':<12}{'Success':<8}",
        '-' * 67,
    ]
    for result in results.values():
        m = result.metrics
        lines.append(
            f"{result.algorithm:<20}{m.path_length:<12}{m.nodes_explored:<15}"
            f"{format_time(m.elapsed_ms):<12}{'Yes' if result.success else 'No':<8}"
        )
    return '\n'.join(lines)


def format_robust_metrics(name, metrics):
    lines = [
        f"\n===== {name} (Robust Analysis) =====",
        f"Successful Runs: {metrics.successful_runs}/{metrics.total_runs}",
    ]
    if metrics.successful_runs > 0:
        lines += [
            f"Best Time: {format_time(metrics.best_ms)}",
            f"Worst Time: {format_time(metrics.worst_ms)}",
            f"Average Time: {format_time(metrics.average_ms)}",
            f"Median Time: {format_time(metrics.median_ms)}",
            f"Std Deviation: {metrics.std_dev_ms:.4f} ms",
        ]
    else:
        lines.append("No successful runs!")
    return '\n'.join(lines)


def plot_comparison(results, output_path, title="Algorithm Comparison"):
    """Bar charts of elapsed time, nodes explored and path length; returns output_path"""
    results = list(results.values())
    names = [r.algorithm for r in results]
    colors = [BAR_COLORS[i % len(BAR_COLORS)] for i in range(len(results))]
    panels = [
        ("Time (ms)", [max(r.metrics.elapsed_ms, 0.0) for r in results]),
        ("Nodes Explored", [r.metrics.nodes_explored for r in results]),
        ("Path Length", [r.metrics.path_length for r in results]),
    ]

    fig = Figure(figsize=(14, 4.5), facecolor='white')
    axes = fig.subplots(1, len(panels))
    for ax, (label, values) in zip(axes, panels):
        bars = ax.bar(names, values, color=colors, edgecolor='black')
        ax.set_title(label, fontsize=11, weight='bold')
        ax.tick_params(axis='x', labelrotation=20, labelsize=8)
        for bar, value, result in zip(bars, values, results):
            text = f"{value:.2f}" if isinstance(value, float) else str(value)
            if not result.success:
                text += " (failed)"
            ax.annotate(text, (bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        ha='center', va='bottom', fontsize=8)
    fig.suptitle(title, fontsize=14, weight='bold')
    fig.tight_layout()
    fig.savefig(output_path, dpi=100)
    return output_path
