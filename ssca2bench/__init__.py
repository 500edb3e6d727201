"""Graph analysis benchmark kernels, graph generators and a 48-bit LCG random stream."""

__version__ = "2.2.0"