"""Exceptions raised by the audio packages."""

from __future__ import annotations

from typing import Hashable


class BbxAudioError(Exception):
    """Base class of every error raised by this package."""

    default_message = "unknown error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)


class DspError(BbxAudioError):
    """An error raised while building or evaluating a DSP graph."""


class CannotAddNodeError(DspError):
    default_message = "cannot add node to graph"


class CannotAddEffectorNodeError(CannotAddNodeError):
    default_message = "cannot add effector node to graph"


class CannotAddGeneratorNodeError(CannotAddNodeError):
    default_message = "cannot add generator node to graph"


class _NodeError(DspError):
    """An error that refers to a particular node."""

    template = "node (`{}`)"

    def __init__(self, node_id: Hashable) -> None:
        self.node_id = node_id
        super().__init__(self.template.format(node_id))


class CannotRetrieveCurrentNodeError(_NodeError):
    template = "cannot retrieve the current node (`{}`)"


class CannotRetrieveDestinationNodeError(_NodeError):
    template = "cannot retrieve the destination node (`{}`)"


class CannotRetrieveSourceNodeError(_NodeError):
    template = "cannot retrieve the source node (`{}`)"


class CannotUpdateGraphProcessingOrderError(DspError):
    default_message = "cannot update the graph's processing order"


class ConnectionAlreadyCreatedError(DspError):
    default_message = "connection has already been created"


class ConnectionHasNoNodeError(DspError):
    default_message = "connection has no corresponding node"


class GraphContainsCycleError(_NodeError):
    template = "graph contains a cycle (detected on node `{}`)"


class GraphContainsNonConvergingPathsError(DspError):
    default_message = "graph has non-converging paths"


class NodeHasNoInputsError(_NodeError):
    template = "node (`{}`) has no inputs"


class NodeHasNoOutputsError(_NodeError):
    template = "node (`{}`) has no outputs"


class FileError(BbxAudioError):
    """An error raised while reading audio files."""


class InvalidWavFileError(FileError):
    default_message = "invalid WAV file"


class MidiError(BbxAudioError):
    """An error raised while handling MIDI input."""


class MissingMidiInputPortError(MidiError):
    default_message = "missing MIDI input port"