import numpy as np
import matplotlib.pyplot as plt


def plot_cl(
    cl: np.ndarray,
    ax=None,
    *,
    label: str | None = None,
    dl: bool = False,
) -> tuple[plt.Figure, plt.Axes]:
    """
    Line plot of an angular power spectrum against multipole l.

    - `dl=True` plots D_l = l(l+1) C_l / 2π instead of C_l.
    - Uses a log y-axis when every plotted value is positive.
    - Returns (Figure, Axes); caller decides to show/save.
    """
    fig: plt.Figure
    axes: plt.Axes
    if ax is None:
        fig, axes = plt.subplots(figsize=(7, 4))
    else:
        axes = ax
        fig = axes.figure

    cl = np.asarray(cl, dtype=np.float64)
    ell = np.arange(cl.size)
    values = ell * (ell + 1) * cl / (2.0 * np.pi) if dl else cl

    axes.plot(ell, values, marker=".", label=label)
    # D_0 is always zero, so the monopole does not decide the scale
    if values.size > 1 and np.all(values[1:] > 0):
        axes.set_yscale("log")

    axes.set_xlabel("Multipole l")
    axes.set_ylabel("l(l+1) C_l / 2π" if dl else "C_l")
    axes.set_title("Angular power spectrum")
    if label is not None:
        axes.legend()
    axes.grid(True, alpha=0.2)

    return fig, axes
