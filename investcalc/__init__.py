"""Compound growth, debt-vs-invest and scenario projections."""
