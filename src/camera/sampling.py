# camera/sampling.py
import numpy as np

def multi_jitter(n: int, rng: np.random.Generator) -> np.ndarray:
    """
    n*n multi-jittered sample offsets inside a unit pixel.

    Returns an (n, n, 2) array of (row, col) offsets in [0, 1). Every cell
    of the coarse n x n grid holds exactly one sample, and so does each of
    the n*n fine strata along either axis.
    """
    rr, cc = np.meshgrid(np.arange(n), np.arange(n), indexing="ij")
    samples = np.empty((n, n, 2), dtype=np.float64)
    # Canonical arrangement: sub-strata assigned diagonally.
    samples[..., 0] = rr / n + cc / (n * n) + 0.5 / (n * n)
    samples[..., 1] = cc / n + rr / (n * n) + 0.5 / (n * n)

    # Shuffle row offsets within each grid row, column offsets within each grid column.
    for r in range(n):
        samples[r, :, 0] = rng.permutation(samples[r, :, 0])
    for c in range(n):
        samples[:, c, 1] = rng.permutation(samples[:, c, 1])
    return samples
