"""
Infrastructure layer: the NumPy-backed Tensor, CPU kernels, and utilities.
"""
