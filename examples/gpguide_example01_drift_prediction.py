"""Drift prediction with maximum-likelihood hyperparameters

This script simulates the tracking error of a telescope mount (a
periodic error plus a slow drift, observed with noise), selects the
hyperparameters of a periodic GP by maximum likelihood and predicts the
drift over the next two minutes.

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)

"""

import math
import numpy as np
import gpguide as gg
import gpguide.plot as plot


def generate_data(rng):
    """Periodic error (period 120 s) with a linear drift, sampled every 4 s."""
    ti = np.arange(0.0, 600.0, 4.0)
    zi = (
        3.0 * np.sin(2 * math.pi * ti / 120.0)
        + 0.002 * ti
        + 0.3 * rng.standard_normal(ti.shape[0])
    )
    tt = np.linspace(0.0, 720.0, 400)
    return ti, zi, tt


def main():
    rng = np.random.default_rng(1234)
    ti, zi, tt = generate_data(rng)

    cf = gg.kernel.CovarianceFunction("square_exponential_periodic")
    gp = gg.GaussianProcess(cf)

    period0 = gg.math_tools.estimate_period(ti, zi)
    sd = float(np.std(zi))
    p0 = [math.log(0.1 * sd), 0.0, math.log(period0), math.log(sd), math.log(200.0), math.log(sd)]
    bounds = gg.kernel.empirical_bounds(cf, ti, zi)

    gp, info = gg.kernel.select_hyperparameters(
        gp, ti, zi, p0=p0, bounds=bounds, info=True, verbosity=1
    )
    for name, value in zip(["log_noise_sd"] + cf.parameter_names, gp.get_hyper_parameters()):
        print(f"{name:>26s} = {value: .4f}")
    print(f"negative log-likelihood: {gp.neg_log_likelihood():.4f}")

    fig = plot.plot_prediction(gp, tt, title="Drift prediction")
    fig.plot(tt[tt > ti[-1]], np.zeros(np.sum(tt > ti[-1])), "k:", linewidth=0.5)
    fig.show(grid=True, legend=True)
    fig.close()


if __name__ == "__main__":
    main()
