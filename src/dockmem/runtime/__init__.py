"""
Container runtime and host collaborators.

This package defines the interfaces the report driver consumes and their
Docker and psutil implementations.
"""

from .base import ContainerRuntime, SystemMemorySource
from .docker_runtime import DockerRuntime
from .system_memory import NoSystemMemory, PsutilSystemMemory

__all__ = [
    "ContainerRuntime",
    "SystemMemorySource",
    "DockerRuntime",
    "NoSystemMemory",
    "PsutilSystemMemory",
]
