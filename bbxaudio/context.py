"""Settings under which a DSP graph is evaluated."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Context:
    """Sample rate, channel count, buffer size and node limit for a graph."""

    sample_rate: int = 44100
    """Samples generated per second."""

    num_channels: int = 2
    """Number of channels, each holding one buffer of samples."""

    buffer_size: int = 128
    """Number of samples in each buffer."""

    max_num_graph_nodes: int = 1024
    """Largest number of nodes a graph is expected to hold."""


DEFAULT_CONTEXT = Context()
"""The context used when none is given."""