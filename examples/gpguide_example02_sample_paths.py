"""Prior and posterior sample paths of a periodic GP

Draws sample paths from the prior of a periodic square-exponential GP,
then conditions the GP on a few measurements and draws from the
posterior.

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)

"""

import math
import numpy as np
import gpguide as gg
import gpguide.plot as plot


def visualization(tt, prior_paths, posterior_paths, ti, zi, zpm, zpv):
    fig = plot.Figure(nrows=2, ncols=1, isinteractive=True)
    fig.subplot(1)
    for k, z in enumerate(prior_paths):
        fig.plot(tt, z, "C0", linewidth=1, label="prior sample paths" if k == 0 else None)
    fig.title("Prior sample paths")
    fig.subplot(2)
    fig.plotgp(tt, zpm, zpv)
    for k, z in enumerate(posterior_paths):
        fig.plot(tt, z, "C0", linewidth=1, label="posterior sample paths" if k == 0 else None)
    fig.plotdata(ti, zi)
    fig.title("Posterior sample paths")
    fig.show(legend=True)
    fig.close()


def main():
    rng = np.random.default_rng(2024)
    # [log lengthscale periodic, log period, log signal sd, log lengthscale se]
    parameters = [0.0, math.log(50.0), 0.0, math.log(300.0)]
    cf = gg.kernel.CovarianceFunction("periodic_square_exponential", parameters)
    gp = gg.GaussianProcess(cf, log_noise_sd=math.log(0.05))

    tt = np.linspace(0.0, 200.0, 201)
    n_samplepaths = 4
    prior_paths = [gp.draw_sample(tt, rng=rng) for _ in range(n_samplepaths)]

    ti = np.array([10.0, 35.0, 60.0, 90.0, 130.0])
    zi = gp.draw_sample(ti, rng=rng)
    gp.infer(ti, zi)
    zpm, zpv = gp.predict(tt)
    posterior_paths = [gp.draw_sample(tt, rng=rng) for _ in range(n_samplepaths)]

    visualization(tt, prior_paths, posterior_paths, ti, zi, zpm, zpv)


if __name__ == "__main__":
    main()
