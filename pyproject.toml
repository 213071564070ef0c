[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filerelay"
version = "1.0.0"
description = "HTTP service for uploading, downloading, streaming and converting audio files (MP3 to OGG)"
requires-python = ">=3.10"
keywords = ["upload", "download", "file-transfer", "audio", "mp3", "ogg", "ffmpeg", "flask"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Multimedia :: Sound/Audio :: Conversion",
]
dependencies = [
    "flask>=2.2",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
filerelay = "filerelay.server:main"

[tool.hatch.build.targets.wheel]
packages = ["filerelay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
