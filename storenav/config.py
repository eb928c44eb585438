"""Configuration classes for storenav components."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GraphBuildConfig:
    """Configuration for turning venue connections into a route graph."""

    # Raise on the first connection naming an unknown section instead of
    # recording a diagnostic and skipping it
    strict_connections: bool = False

    # Drop connections whose endpoints resolve to the same section
    drop_self_loops: bool = True


# Global configuration instance
BUILD_CONFIG = GraphBuildConfig()
