"""Period estimation and fixed-period GP

Estimates the dominant period of an irregularly sampled signal from its
windowed spectrum, and uses it as the fixed period of a
periodic_square_exponential2 covariance function.

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)

"""

import math
import numpy as np
import gpguide as gg
import gpguide.plot as plot


def generate_data(rng, true_period=80.0):
    ti = np.sort(rng.uniform(0.0, 800.0, 300))
    zi = (
        2.0 * np.sin(2 * math.pi * ti / true_period)
        + 0.5 * np.sin(2 * math.pi * ti / 400.0)
        + 0.2 * rng.standard_normal(ti.shape[0])
    )
    return ti, zi


def main():
    rng = np.random.default_rng(7)
    ti, zi = generate_data(rng)

    period = gg.math_tools.estimate_period(ti, zi)
    print(f"estimated period: {period:.2f}")

    # [log l_se0, log sd_se0, log l_p, log sd_p, log l_se1, log sd_se1]
    parameters = [math.log(5.0), math.log(0.1), 0.0, math.log(2.0), math.log(300.0), math.log(0.5)]
    cf = gg.kernel.CovarianceFunction(
        "periodic_square_exponential2", parameters, extra_parameters=[math.log(period)]
    )
    gp = gg.GaussianProcess(cf, log_noise_sd=math.log(0.2))
    gp.infer(ti, zi)

    tt = np.linspace(0.0, 960.0, 500)
    zpm, zpv = gp.predict(tt)

    step = (ti[-1] - ti[0]) / (ti.shape[0] - 1)
    grid = np.linspace(ti[0], ti[-1], ti.shape[0])
    amplitudes, frequencies = gg.math_tools.compute_spectrum(
        np.interp(grid, ti, zi) * gg.math_tools.hamming_window(ti.shape[0]), 4096
    )

    fig = plot.Figure(nrows=2, ncols=1, isinteractive=True)
    fig.subplot(1)
    fig.plot(step / frequencies[1:], amplitudes[1:], "C0", linewidth=1)
    fig.ax.set_xscale("log")
    fig.ax.axvline(period, color="C3", linestyle="--")
    fig.xylabels("period", "power")
    fig.subplot(2)
    fig.plotgp(tt, zpm, zpv)
    fig.plotdata(ti, zi)
    fig.title(f"Prediction with fixed period {period:.1f}")
    fig.show()
    fig.close()


if __name__ == "__main__":
    main()
