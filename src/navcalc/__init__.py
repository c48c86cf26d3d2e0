"""Dead-reckoning navigation formulas: angles, bearings, wind drift and current."""
