[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netlab"
version = "0.1.0"
description = "Small networking exercises: distance-vector routing, leaky bucket, stop-and-wait ARQ, and TCP/UDP socket tools"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "networking",
    "routing",
    "distance-vector",
    "leaky-bucket",
    "stop-and-wait",
    "sockets",
    "tcp",
    "udp",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netlab-routing = "netlab.routing:main"
netlab-leaky-bucket = "netlab.leaky_bucket:main"
netlab-stop-and-wait = "netlab.stop_and_wait:main"
netlab-ftp = "netlab.filetransfer:main"
netlab-chat = "netlab.chat:main"
netlab-datagram = "netlab.datagram:main"

[tool.hatch.build.targets.wheel]
packages = ["netlab"]

[tool.pytest.ini_options]
addopts = "-ra"
