"""Automated opponents."""

from .random_agent import RandomAgent

__all__ = ['RandomAgent']
