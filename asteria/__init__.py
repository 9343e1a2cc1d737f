"""Tensors, tensor arithmetic, activations, losses, initializers, interpolation and OU noise for CPU neural networks."""

__version__ = "1.0.0"