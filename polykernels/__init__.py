"""NumPy benchmark kernels for linear algebra and data mining, with a timing command."""

__version__ = "0.1.0"

__all__ = ["bench", "blas2", "blas3", "common", "datamining", "matmul", "matvec"]