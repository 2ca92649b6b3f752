"""Reveal engine — coverage estimation, scale calibration and pattern placement."""
