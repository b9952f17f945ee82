"""Resource method sets exposed on :class:`DockerClient`."""

from .base import DockerResource
from .containers import Containers
from .execs import Execs
from .system import System

__all__ = ["Containers", "DockerResource", "Execs", "System"]
