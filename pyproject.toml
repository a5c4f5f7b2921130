[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bbxaudio"
version = "0.1.0"
description = "Audio DSP graphs, wave table oscillators, effects, WAV reading and MIDI message parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "dsp", "synthesis", "midi", "oscillator", "effects", "wav"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bbxaudio"]

[tool.pytest.ini_options]
addopts = "-ra"
