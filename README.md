# bbxaudio

A small audio DSP toolkit for building and evaluating signal graphs in pure Python. It has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is in the package

- `bbxaudio.buffer.AudioBuffer`: a fixed-length list of float samples. It starts silent and supports `apply`, `clear`, `copy_from`, `as_list`, indexing and iteration.
- `bbxaudio.sample`: sample helpers `average`, `log`, `gain` (in decibels) and `fast_sqrt` (the fast inverse square root approximation).
- `bbxaudio.context.Context`: a frozen dataclass with sample rate, channel count, buffer size and node limit. `DEFAULT_CONTEXT` is 44100 Hz, 2 channels, 128 samples and 1024 nodes.
- `bbxaudio.node`: node descriptions. The generators are `WaveTable(frequency, waveform)` and `FileReader(file_path)`. The effectors are `Amplifier(gain)`, `Filter(context, cutoff, resonance)`, `Flanger(context, depth, feedback, rate, delay_time)`, `Mixer()` and `Overdrive()`. This module also holds `Node`.
- `bbxaudio.generators` and `bbxaudio.effectors`: the processing objects behind those descriptions, such as `WaveTableGenerator` and `FilterEffector`. `Waveform` has the members `SINE`, `SQUARE`, `TRIANGLE` and `SAWTOOTH`.
- `bbxaudio.process`: the `Process` base class, `OperationType`, `clear_output` and `sum_audio_inputs`. `sum_audio_inputs` averages its inputs and clamps the result to [-1, 1].
- `bbxaudio.graph.Graph`: connects nodes, checks the graph and evaluates it one block at a time.
- `bbxaudio.playback.Signal`: an endless iterator of interleaved samples drawn from a graph.
- `bbxaudio.audiofile`: `WavFileReader` loads a WAV file into float channels in [-1, 1]. It reads 8/16/24/32-bit PCM and 32/64-bit float, including the extensible format. `FileType.from_extension` recognises `"wav"`.
- `bbxaudio.midi`: `MidiMessage` and `MidiMessageStatus` decode raw MIDI channel messages.
- `bbxaudio.display`: `DisplayContext`, `scale_number` and `map_sample_to_point` turn sample data into chart coordinates.
- `bbxaudio.errors`: `BbxAudioError` and its subclasses.

## Building a graph

```python
from bbxaudio.context import Context
from bbxaudio.graph import Graph
from bbxaudio.node import WaveTable, Overdrive, Amplifier
from bbxaudio.generators import Waveform

graph = Graph(Context())
osc = graph.add_generator(WaveTable(frequency=110.0, waveform=Waveform.SINE))
drive = graph.add_effector(Overdrive())
amp = graph.add_effector(Amplifier(0.8))
graph.create_connection(osc, drive)
graph.create_connection(drive, amp)
graph.prepare_for_playback()

channels = graph.evaluate()   # one AudioBuffer per channel, from the last node
```

`create_connection` raises the following errors:

- `ConnectionAlreadyCreatedError` for a repeated connection;
- `CannotRetrieveSourceNodeError` when the source id is unknown;
- `CannotRetrieveDestinationNodeError` when the destination id is unknown.

`prepare_for_playback` orders the nodes and checks the graph. It raises a subclass of `DspError` in these cases:

- the graph contains a cycle (`GraphContainsCycleError`);
- an effector has no inputs (`NodeHasNoInputsError`);
- a generator has no outputs while the graph holds more than one node (`NodeHasNoOutputsError`);
- not every node feeds the final node (`GraphContainsNonConvergingPathsError`).

Calling `evaluate` before the graph has been prepared raises `DspError`.

## Streaming samples

```python
from bbxaudio.playback import Signal

signal = Signal(graph)
first_frame = [next(signal) for _ in range(signal.channels())]
```

`Signal` yields samples in channel order within each frame: L1, R1, L2, R2, and so on. Once a whole block has been yielded, it evaluates the graph again. `signal.sample_rate()` gives the graph's sample rate.

## MIDI messages

```python
from bbxaudio.midi import MidiMessage

msg = MidiMessage.from_bytes(bytes([0x90, 60, 100]))
msg.status           # MidiMessageStatus.NOTE_ON
msg.channel          # 1
msg.note_name        # "C4"
msg.note_frequency   # about 261.63
msg.velocity         # 100
```

`note_number`, `note_name`, `note_frequency`, `velocity`, `pressure`, `control_change_data` and `pitch_wheel_data` are properties. Each returns `None` when the message's status does not carry that value. `str(msg)` gives a one-line, time-stamped description of the message.

## What the package does not do

The package computes samples but does not play them. It has no audio output device. `Signal` only yields floats, and you pass them to whatever player you choose.

It does not open MIDI ports or listen for live MIDI input. It only decodes message bytes that you supply.

It does not draw charts. `bbxaudio.display` computes coordinates only.

There is no command-line program.