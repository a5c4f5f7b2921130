"""Audio DSP graphs, oscillators, effects, WAV reading and MIDI message parsing."""

__version__ = "0.1.0"