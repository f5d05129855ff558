"""
WiNoC实用工具模块。

本模块提供拓扑实现中常用的类型、异常和矩阵工具函数。
"""

from .adjacency import (
    create_mesh_adjacency_matrix,
    validate_adjacency_matrix,
    check_connectivity,
    create_wired_distance_matrix,
    create_wireless_distance_matrix,
)
from .errors import InvalidTopologyError, NodeOutOfRangeError, HubNotAssignedError

__all__ = [
    "create_mesh_adjacency_matrix",
    "validate_adjacency_matrix",
    "check_connectivity",
    "create_wired_distance_matrix",
    "create_wireless_distance_matrix",
    "InvalidTopologyError",
    "NodeOutOfRangeError",
    "HubNotAssignedError",
]
