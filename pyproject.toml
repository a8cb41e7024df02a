[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orchestrion"
version = "1.0.0"
description = "Gesture controllers that turn keyboard, MIDI and touchpad input into note-on and note-off events"
requires-python = ">=3.10"
keywords = ["midi", "gesture", "touchpad", "keyboard", "music", "controller"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["orchestrion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
