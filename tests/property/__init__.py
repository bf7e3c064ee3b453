"""
Property-based and statistical testing suite for propgen-kit.

Uses Hypothesis to check sampler ranges and reachability, source
determinism, and the sized-generator contracts, plus fixed-seed statistical
checks of bias and split independence.
"""
