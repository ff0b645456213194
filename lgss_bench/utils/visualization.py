"""
Visualization utilities for the particle-count benchmark.

Functions for plotting:
- Error-bar comparison of resampling strategies against particle count
"""
from typing import Dict, List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt

from .metrics import summarize_points


DEFAULT_COLORS = {
    'SMC': '#2ca02c', 'Herding': '#1f77b4', 'NewHerding': '#d62728',
}

DEFAULT_MARKERS = {
    'SMC': 'o', 'Herding': 's', 'NewHerding': '^',
}

DEFAULT_LINESTYLES = {
    'SMC': ':', 'Herding': '--', 'NewHerding': '-',
}


def plot_errorbar_series(
    series: Dict[str, List[Tuple[float, Sequence[float]]]],
    save_path: str,
    x_label: str = '#samples',
    y_label: str = 'RMSE',
    title: str = 'LGSS',
    log_x: bool = True,
    colors: Optional[Dict[str, str]] = None,
    figsize: tuple = (6, 4)
) -> None:
    """
    Plot mean +- standard error of per-trial scores for each strategy.

    Parameters
    ----------
    series : dict
        Strategy name -> ordered list of (particle count, scores across trials)
    save_path : str
        Output path; the format follows the extension (e.g. lgss.pdf)
    x_label, y_label, title : str
        Axis labels and title
    log_x : bool
        Logarithmic particle-count axis
    colors : dict, optional
        Color mapping for strategies. Uses defaults if None.
    figsize : tuple
        Figure size (width, height)

    Raises
    ------
    OSError
        If the figure cannot be written to save_path.
    """
    if colors is None:
        colors = DEFAULT_COLORS

    fig, ax = plt.subplots(figsize=figsize)
    try:
        for name, points in series.items():
            xs, means, stderrs = summarize_points(points)
            ax.errorbar(xs, means, yerr=stderrs,
                        marker=DEFAULT_MARKERS.get(name, 'o'),
                        linestyle=DEFAULT_LINESTYLES.get(name, '-'),
                        color=colors.get(name, 'gray'),
                        label=name, lw=1.5, ms=6, capsize=3)

        if log_x:
            ax.set_xscale('log')
        ax.set_xlabel(x_label)
        ax.set_ylabel(y_label)
        ax.set_title(title)
        ax.legend()
        ax.grid(alpha=0.3)

        fig.tight_layout()
        fig.savefig(save_path, dpi=150)
    finally:
        plt.close(fig)
