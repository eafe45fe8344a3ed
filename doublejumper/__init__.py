"""A vertical platform-jumping arcade game drawn with pygame."""

__version__ = "0.1.0"