"""Don't Eat the Yellow Snow! A small arcade game built on pygame."""

__version__ = "1.0.0"