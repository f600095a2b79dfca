"""Sort integers with two stacks and a restricted instruction set."""

__version__ = "0.1.0"