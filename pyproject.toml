[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asteria"
version = "1.0.0"
description = "Tensor engine, activations, losses, initializers and exploration helpers for small neural networks on the CPU"
requires-python = ">=3.10"
keywords = ["neural-networks", "reinforcement-learning", "tensor", "machine-learning"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["asteria"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
