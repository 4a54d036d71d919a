# gpguide/plot/plotutils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import sys
import numpy as np
import scipy.stats as stats
import matplotlib.pyplot as plt
from matplotlib import interactive


class Figure:
    """Figures manager class.

    Thin wrapper around a matplotlib figure with a current axis, used by
    the examples to draw measurements, predictions and sample paths.
    """

    def __init__(self, nrows=1, ncols=1, isinteractive=True, boxoff=True, **kargs):
        # Check if we run in interpreter mode
        self.interpreter = False
        try:
            if sys.ps1:
                self.interpreter = True
        except AttributeError:
            self.interpreter = bool(sys.flags.interactive)

        if isinteractive and self.interpreter:
            interactive(True)

        self.boxoff = boxoff
        self.fig = plt.figure(**kargs)
        self.axes = [
            self.fig.add_subplot(nrows, ncols, i + 1) for i in range(nrows * ncols)
        ]
        self.ax = self.axes[0]
        if self.boxoff:
            self.set_boxoff()

    def set_boxoff(self):
        self.ax.spines["right"].set_visible(False)
        self.ax.spines["top"].set_visible(False)
        self.ax.tick_params(direction="in")

    def subplot(self, i):
        self.ax = self.axes[i - 1]
        if self.boxoff:
            self.set_boxoff()

    def show(self, grid=None, legend=None, xlim=None):
        if grid:
            self.grid()
        if legend:
            self.legend()
        if xlim is not None:
            self.xlim(xlim)
        plt.show()

    def close(self):
        plt.close(self.fig)

    def plot(self, x, z, *args, **kargs):
        self.ax.plot(x, z, *args, **kargs)

    def plotdata(self, x, z, label="measurements"):
        self.ax.plot(x, z, "rs", markerfacecolor="none", markersize=6, label=label)

    def xylabels(self, sx="", sy=""):
        self.ax.set_xlabel(sx)
        self.ax.set_ylabel(sy)

    def title(self, s):
        self.ax.set_title(s)

    def legend(self, **kwargs):
        self.ax.legend(**kwargs)

    def grid(self, visible=True, which="major", linestyle=(0, (1, 5)), linewidth=0.5):
        self.ax.grid(visible, which, linestyle=linestyle, linewidth=linewidth)

    def xlim(self, new_limits=None):
        if new_limits is None:
            return self.ax.get_xlim()
        self.ax.set_xlim(new_limits)
        return new_limits

    def plotgp(
        self,
        x,
        mean,
        variance,
        colorscheme="default",
        mean_label="predicted drift",
        ci=(0.95, 0.99),
        ci_labels=("CI 95%", "CI 99%"),
    ):
        """Posterior mean with coverage intervals.

        norminv (1 - 0.05/2)  = 1.959964
        norminv (1 - 0.01/2)  = 2.575829
        """
        x = np.asarray(x).flatten()
        mean = np.asarray(mean).flatten()
        sd = np.sqrt(np.maximum(np.asarray(variance).flatten(), 0.0))
        delta0 = [stats.norm.ppf((1 + level) / 2) for level in ci]

        if colorscheme == "default":
            mcol, fillcol, alpha = "#F2404C", ["#D8D8D8", "#BFBFBF"], 0.8
        elif colorscheme == "bw":
            mcol, fillcol, alpha = "#000000", ["#F2F2F2", "#D8D8D8"], 0.6
        else:
            raise ValueError("colorscheme must be 'default' or 'bw'")

        # widest band first so narrower ones stay visible
        for i in reversed(range(len(delta0))):
            self.ax.fill(
                np.hstack((x, x[::-1])),
                np.hstack((mean + delta0[i] * sd, (mean - delta0[i] * sd)[::-1])),
                color=fillcol[i % len(fillcol)],
                label=ci_labels[i],
                alpha=alpha,
                linewidth=0.5,
            )
        self.ax.plot(x, mean, mcol, linewidth=2.0, label=mean_label)


def plot_prediction(gp, xt, xi=None, zi=None, fig=None, title=None):
    """Plot the prediction of a GP on xt, with its training data.

    Parameters
    ----------
    gp : gpguide.core.GaussianProcess
    xt : array_like, shape (m,)
    xi, zi : array_like, optional
        Data to draw as markers. Defaults to the training set of ``gp``.
    fig : Figure, optional

    Returns
    -------
    Figure
    """
    if fig is None:
        fig = Figure(isinteractive=True)
    if xi is None and gp.fit is not None:
        xi, zi = gp.fit.xi, gp.fit.zi
    zt_mean, zt_var = gp.predict(xt)
    fig.plotgp(xt, zt_mean, zt_var)
    if xi is not None:
        fig.plotdata(np.asarray(xi).flatten(), np.asarray(zi).flatten())
    fig.xylabels("t", "drift")
    if title is not None:
        fig.title(title)
    return fig
