"""Propositional formulas with simplification, normalization and a fuzzer."""

__version__ = "0.1.0"
__all__ = ["builder", "demo", "fuzzer", "nodes", "rng"]