"""Reading audio files into per-channel sample data."""

from __future__ import annotations

import enum
import struct
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from pathlib import Path

from bbxaudio.errors import InvalidWavFileError

_FORMAT_PCM = 0x0001
_FORMAT_IEEE_FLOAT = 0x0003
_FORMAT_EXTENSIBLE = 0xFFFE

_PCM_CODES = {16: ("<h", 32768.0), 32: ("<i", 2147483648.0)}
_FLOAT_CODES = {32: "<f", 64: "<d"}


class FileType(enum.Enum):
    """Audio file formats that can be read."""

    WAV = "wav"

    @classmethod
    def from_extension(cls, ext: str) -> FileType | None:
        """Return the type for a file extension, or None if unsupported."""
        try:
            return cls(ext.lower())
        except ValueError:
            return None


class Reader(ABC):
    """Gives access to the decoded samples of an audio file."""

    @abstractmethod
    def read_channel(
        self, channel_index: int, sample_index: int, length: int
    ) -> Sequence[float]:
        """Return ``length`` samples of a channel, starting at ``sample_index``."""


def _chunks(data: bytes) -> Iterator[tuple[bytes, bytes]]:
    offset = 12
    while offset + 8 <= len(data):
        chunk_id, size = struct.unpack_from("<4sI", data, offset)
        start = offset + 8
        yield chunk_id, data[start : start + size]
        offset = start + size + (size & 1)


def _decode(raw: bytes, audio_format: int, bits: int) -> list[float]:
    if audio_format == _FORMAT_PCM:
        if bits == 8:
            return [(byte - 128) / 128.0 for byte in raw]
        if bits == 24:
            return [
                int.from_bytes(raw[i : i + 3], "little", signed=True) / 8388608.0
                for i in range(0, len(raw), 3)
            ]
        if bits in _PCM_CODES:
            code, scale = _PCM_CODES[bits]
            return [value / scale for (value,) in struct.iter_unpack(code, raw)]
    elif audio_format == _FORMAT_IEEE_FLOAT and bits in _FLOAT_CODES:
        code = _FLOAT_CODES[bits]
        return [float(value) for (value,) in struct.iter_unpack(code, raw)]
    raise InvalidWavFileError(
        f"unsupported sample format {audio_format} with {bits} bits"
    )


def _parse_wav(data: bytes) -> tuple[int, list[list[float]]]:
    if len(data) < 12 or data[:4] != b"RIFF" or data[8:12] != b"WAVE":
        raise InvalidWavFileError("missing RIFF/WAVE header")

    chunks: dict[bytes, bytes] = {}
    for chunk_id, body in _chunks(data):
        chunks.setdefault(chunk_id, body)
    fmt = chunks.get(b"fmt ")
    raw = chunks.get(b"data")
    if fmt is None or len(fmt) < 16:
        raise InvalidWavFileError("missing or short fmt chunk")
    if raw is None:
        raise InvalidWavFileError("missing data chunk")

    audio_format, num_channels, sample_rate, _byte_rate, _align, bits = (
        struct.unpack_from("<HHIIHH", fmt)
    )
    if audio_format == _FORMAT_EXTENSIBLE:
        if len(fmt) < 26:
            raise InvalidWavFileError("short extensible fmt chunk")
        (audio_format,) = struct.unpack_from("<H", fmt, 24)
    if num_channels == 0 or bits == 0 or bits % 8:
        raise InvalidWavFileError(
            f"invalid layout: {num_channels} channels of {bits} bits"
        )

    frame_size = bits // 8 * num_channels
    frame_count = len(raw) // frame_size
    samples = _decode(raw[: frame_count * frame_size], audio_format, bits)
    channels = [samples[channel::num_channels] for channel in range(num_channels)]
    return sample_rate, channels


class WavFileReader(Reader):
    """Loads a whole WAV file into memory as float samples in [-1, 1]."""

    def __init__(self, file_path: str | Path) -> None:
        self.file_path = Path(file_path)
        self.sample_rate, self._channels = _parse_wav(self.file_path.read_bytes())

    @property
    def num_channels(self) -> int:
        return len(self._channels)

    @property
    def num_samples(self) -> int:
        """Number of samples in each channel."""
        return len(self._channels[0]) if self._channels else 0

    def read_channel(
        self, channel_index: int, sample_index: int, length: int
    ) -> list[float]:
        channel = self._channels[channel_index]
        end = sample_index + length
        if sample_index < 0 or length < 0 or end > len(channel):
            raise IndexError(
                f"samples {sample_index}..{end} outside channel of {len(channel)}"
            )
        return channel[sample_index:end]