"""Reconcile git submodule dependencies and generate derived skill trees."""

__version__ = "0.1.0"
