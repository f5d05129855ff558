"""
WiNoC types and enumerations.

This module defines common types, enumerations, and data structures used across
the wired/wireless mesh topology layer.
"""

from enum import Enum
from typing import List, Tuple, Dict, Any, Optional, Mapping
from dataclasses import dataclass


class TopologyType(Enum):
    """NoC topology type enumeration."""

    MESH = "mesh"
    WIRELESS_MESH = "wireless_mesh"


class FlitType(Enum):
    """Flit type enumeration (position of the flit inside its packet)."""

    HEAD = "head"
    BODY = "body"
    TAIL = "tail"


class VerboseMode(Enum):
    """Trace verbosity level."""

    OFF = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3


class LinkType(Enum):
    """Link type enumeration."""

    WIRED = "wired"
    WIRELESS = "wireless"


@dataclass(frozen=True)
class Coordinate:
    """2D mesh coordinate: x is the column, y is the row."""

    x: int
    y: int

    def __iter__(self):
        return iter((self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


# Type aliases for better code readability
NodeId = int
HubId = int
ClusterIndex = Tuple[int, int]  # (x // cluster_width, y // cluster_height)
HubTable = Mapping[NodeId, HubId]  # node id -> hub id, partial
Path = List[NodeId]
AdjacencyMatrix = List[List[int]]

# Configuration type aliases
ConfigDict = Dict[str, Any]
MetricsDict = Dict[str, float]

# Utility type definitions
ValidationResult = Tuple[bool, Optional[str]]

# Constants
DEFAULT_MESH_DIM = 8
DEFAULT_CLUSTER_DIM = 4
DEFAULT_VIRTUAL_CHANNELS = 4
DIRECTIONS = 4  # north, east, south, west
WIRELESS_HOP_COST = 1  # one radio hop between two attachment routers

# Maximum values for validation
MAX_NODES = 10000
