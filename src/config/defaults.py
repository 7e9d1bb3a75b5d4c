"""Anchor configuration — single source of truth for default run parameters."""

from src.config.run import RunConfig

# n=10 nodes, a 3-node ring, searching for trace == 3 (found at A^3).
ANCHOR_CONFIG = RunConfig()
