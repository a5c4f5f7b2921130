"""Decoding of short MIDI channel messages."""

from __future__ import annotations

import enum
import struct
import time
from collections.abc import Iterable, Sequence

NOTE_NAMES = ("C", "C#", "D", "Eb", "E", "F", "F#", "G", "Ab", "A", "Bb", "B")

_NOTE_STATUSES = frozenset({"NoteOn", "NoteOff"})


class MidiMessageStatus(enum.Enum):
    """The kind of a MIDI channel message, taken from its status byte."""

    UNKNOWN = "Unknown"
    NOTE_OFF = "NoteOff"
    NOTE_ON = "NoteOn"
    POLYPHONIC_AFTERTOUCH = "PolyphonicAftertouch"
    CONTROL_CHANGE = "ControlChange"
    PROGRAM_CHANGE = "ProgramChange"
    CHANNEL_AFTERTOUCH = "ChannelAftertouch"
    PITCH_WHEEL = "PitchWheel"

    @classmethod
    def from_byte(cls, byte: int) -> MidiMessageStatus:
        """Return the status encoded in the high nibble of ``byte``."""
        _check_byte(byte)
        if byte < 0x80:
            return cls.UNKNOWN
        if byte >= 0xE0:
            return cls.PITCH_WHEEL
        return _STATUS_BY_NIBBLE[byte >> 4]


_STATUS_BY_NIBBLE = {
    0x8: MidiMessageStatus.NOTE_OFF,
    0x9: MidiMessageStatus.NOTE_ON,
    0xA: MidiMessageStatus.POLYPHONIC_AFTERTOUCH,
    0xB: MidiMessageStatus.CONTROL_CHANGE,
    0xC: MidiMessageStatus.PROGRAM_CHANGE,
    0xD: MidiMessageStatus.CHANNEL_AFTERTOUCH,
}


def _check_byte(value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"MIDI byte out of range: {value}")


def _to_f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _format_f32(value: float) -> str:
    """Format a single-precision value with the fewest digits that round-trip."""
    single = _to_f32(value)
    if single.is_integer():
        return str(int(single))
    for precision in range(1, 10):
        text = f"{single:.{precision}g}"
        if _to_f32(float(text)) == single:
            return text
    return repr(single)


class MidiMessage:
    """A MIDI message: status, channel (1-16) and up to two data bytes."""

    __slots__ = ("channel", "status", "data_1", "data_2")

    def __init__(self, status_byte: int, data_1: int = 0, data_2: int = 0) -> None:
        for byte in (status_byte, data_1, data_2):
            _check_byte(byte)
        self.channel = (status_byte & 0x0F) + 1
        self.status = MidiMessageStatus.from_byte(status_byte)
        self.data_1 = data_1
        self.data_2 = data_2

    @classmethod
    def from_bytes(cls, data: bytes | Sequence[int] | Iterable[int]) -> MidiMessage:
        """Decode a raw message of one to three bytes.

        Longer messages keep only their channel and are marked unknown.
        """
        raw = bytes(data)
        if not raw:
            raise ValueError("MIDI message has no bytes")
        if len(raw) <= 3:
            return cls(*raw)
        message = cls(raw[0])
        message.status = MidiMessageStatus.UNKNOWN
        return message

    def _data(self, field: int, *statuses: MidiMessageStatus) -> int | None:
        if self.status not in statuses:
            return None
        return self.data_1 if field == 1 else self.data_2

    @property
    def note_number(self) -> int | None:
        """The note number of a note on/off message."""
        return self._data(1, MidiMessageStatus.NOTE_ON, MidiMessageStatus.NOTE_OFF)

    @property
    def note_name(self) -> str | None:
        """The note's name and octave, where note 60 is middle C (C4)."""
        number = self.note_number
        if number is None:
            return None
        return f"{NOTE_NAMES[number % 12]}{number // 12 - 1}"

    @property
    def note_frequency(self) -> float | None:
        """The note's frequency in hertz, tuned to A4 = 440 Hz."""
        number = self.note_number
        if number is None:
            return None
        return 440.0 * 2.0 ** ((number - 69.0) / 12.0)

    @property
    def velocity(self) -> int | None:
        """The velocity of a note on/off message."""
        return self._data(2, MidiMessageStatus.NOTE_ON, MidiMessageStatus.NOTE_OFF)

    @property
    def pressure(self) -> int | None:
        """The pressure of a polyphonic aftertouch message."""
        return self._data(2, MidiMessageStatus.POLYPHONIC_AFTERTOUCH)

    @property
    def control_change_data(self) -> int | None:
        """The value of a control change message."""
        return self._data(2, MidiMessageStatus.CONTROL_CHANGE)

    @property
    def pitch_wheel_data(self) -> tuple[int, int] | None:
        """The (least, most) significant bytes of a pitch wheel message."""
        if self.status is not MidiMessageStatus.PITCH_WHEEL:
            return None
        return (self.data_1, self.data_2)

    def __str__(self) -> str:
        now = int(time.time())
        prefix = f"[{now}] Ch {self.channel} {self.status.value}"
        if self.status.value in _NOTE_STATUSES:
            frequency = _format_f32(self.note_frequency)
            return (
                f"{prefix}\t Note = {self.note_name} ({frequency}Hz)"
                f"\t Velocity = {self.velocity}"
            )
        return f"{prefix}\t Data 1 = {self.data_1}\t Data 2 = {self.data_2}"

    def __repr__(self) -> str:
        return (
            f"MidiMessage(channel={self.channel}, status={self.status.value}, "
            f"data_1={self.data_1}, data_2={self.data_2})"
        )