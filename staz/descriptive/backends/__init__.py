"""Compute backends for descriptive statistics."""

from staz.descriptive.backends.cpu import CPUDescriptiveBackend

__all__ = ["CPUDescriptiveBackend"]
