"""Descriptions of graph nodes and the nodes that hold their operations."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from bbxaudio.context import Context
from bbxaudio.effectors import (
    AmplifierEffector,
    FilterEffector,
    FlangerEffector,
    MixerEffector,
    OverdriveEffector,
)
from bbxaudio.generators import FileReaderGenerator, WaveTableGenerator, Waveform
from bbxaudio.process import Operation, OperationType

NodeId = int
"""The identifier of a node in a graph."""

_NODE_ID_BITS = 64


class Effector(ABC):
    """A node kind that produces its output by modifying incoming signals."""

    @abstractmethod
    def to_operation(self, context: Context) -> Operation:
        """Build the processing object this effector describes."""


@dataclass(frozen=True)
class Amplifier(Effector):
    """A utility amplifier with a gain kept within [0, 1]."""

    gain: float

    def to_operation(self, context: Context) -> Operation:
        return AmplifierEffector(self.gain)


@dataclass(frozen=True)
class Filter(Effector):
    """A resonant low-pass filter, evaluated under its own context."""

    context: Context
    cutoff: float
    resonance: float

    def to_operation(self, context: Context) -> Operation:
        return FilterEffector(self.context, self.cutoff, self.resonance)


@dataclass(frozen=True)
class Flanger(Effector):
    """A flanger, evaluated under its own context."""

    context: Context
    depth: float
    feedback: float
    rate: float
    delay_time: float

    def to_operation(self, context: Context) -> Operation:
        return FlangerEffector(
            self.context, self.depth, self.feedback, self.rate, self.delay_time
        )


@dataclass(frozen=True)
class Mixer(Effector):
    """Averages all of its inputs."""

    def to_operation(self, context: Context) -> Operation:
        return MixerEffector()


@dataclass(frozen=True)
class Overdrive(Effector):
    """Soft-clips its input to add harmonics."""

    def to_operation(self, context: Context) -> Operation:
        return OverdriveEffector()


class Generator(ABC):
    """A node kind that produces its own output signal."""

    @abstractmethod
    def to_operation(self, context: Context) -> Operation:
        """Build the processing object this generator describes."""


@dataclass(frozen=True)
class FileReader(Generator):
    """Plays back the contents of a WAV file."""

    file_path: str | Path

    def to_operation(self, context: Context) -> Operation:
        return FileReaderGenerator(context, self.file_path)


@dataclass(frozen=True)
class WaveTable(Generator):
    """A wave table oscillator."""

    frequency: float
    waveform: Waveform

    def to_operation(self, context: Context) -> Operation:
        return WaveTableGenerator(context, self.frequency, self.waveform)


class Node:
    """An operation in a graph, with the ids of the nodes wired to it."""

    def __init__(
        self, context: Context, operation: Operation, operation_type: OperationType
    ) -> None:
        self.id: NodeId = random.getrandbits(_NODE_ID_BITS)
        self.context = context
        self.inputs: list[NodeId] = []
        self.outputs: list[NodeId] = []
        self.operation = operation
        self.operation_type = operation_type

    @classmethod
    def from_effector(cls, context: Context, effector: Effector) -> Node:
        """Create an effector node."""
        return cls(context, effector.to_operation(context), OperationType.EFFECTOR)

    @classmethod
    def from_generator(cls, context: Context, generator: Generator) -> Node:
        """Create a generator node."""
        return cls(context, generator.to_operation(context), OperationType.GENERATOR)

    def add_output(self, output: NodeId) -> None:
        """Record a node that this node feeds."""
        self.outputs.append(output)

    def add_input(self, input_id: NodeId) -> None:
        """Record a node that feeds this node."""
        self.inputs.append(input_id)

    def __repr__(self) -> str:
        return (
            f"Node(id={self.id}, type={self.operation_type.value}, "
            f"inputs={self.inputs}, outputs={self.outputs})"
        )