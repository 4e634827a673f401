import numpy as np
from ecdfPy import build_sorted_reference, build_permutation, rank_by_binary_search, rank_by_merge_scan, ecdf

# Generate example data
rng = np.random.default_rng(42)
reference = rng.normal(size=1_000_000)
observations = rng.normal(loc=0.5, size=200_000)

# Sort the reference once and share it between both strategies
ref = build_sorted_reference(reference, verb=1)

rank_bs = rank_by_binary_search(observations, ref, workers=4, verb=1)

perm = build_permutation(observations)
rank_ms = rank_by_merge_scan(observations, ref, perm, verb=1)

print("Strategies agree:", np.array_equal(rank_bs, rank_ms))
print("First ranks:", rank_ms[:5])

# Fraction of the reference below each observation
result = ecdf(ref, observations[:5], method="binary")
print("ECDF:", result['ecdf'])
