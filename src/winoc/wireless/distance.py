"""
有线与有线+无线距离计算。
"""

from src.winoc.utils.types import Coordinate, NodeId, WIRELESS_HOP_COST
from .coordinates import id_to_coord
from .attachment import closest_attachment_point


def wired_distance(node1: Coordinate, node2: Coordinate) -> int:
    """两坐标间的曼哈顿距离。"""
    return abs(node1.x - node2.x) + abs(node1.y - node2.y)


def wired_distance_between(node1_id: NodeId, node2_id: NodeId, mesh_dim_x: int, mesh_dim_y: int) -> int:
    """两节点间的曼哈顿距离（节点ID形式）。"""
    return wired_distance(id_to_coord(node1_id, mesh_dim_x, mesh_dim_y), id_to_coord(node2_id, mesh_dim_x, mesh_dim_y))


def wireless_distance(node1_id: NodeId, node2_id: NodeId, mesh_dim_x: int, mesh_dim_y: int, cluster_width: int, cluster_height: int) -> int:
    """
    经无线Hub的距离。

    两端各自走有线到本簇最近的挂接路由器，中间计一次无线跳。
    不检查两节点是否同簇或同Hub，由调用方决定何时使用该度量。

    Args:
        node1_id: 节点1 ID
        node2_id: 节点2 ID
        mesh_dim_x: Mesh列数
        mesh_dim_y: Mesh行数
        cluster_width: 簇宽度
        cluster_height: 簇高度

    Returns:
        有线段距离之和 + WIRELESS_HOP_COST
    """
    node1 = id_to_coord(node1_id, mesh_dim_x, mesh_dim_y)
    node2 = id_to_coord(node2_id, mesh_dim_x, mesh_dim_y)

    attach1 = closest_attachment_point(node1, cluster_width, cluster_height)
    attach2 = closest_attachment_point(node2, cluster_width, cluster_height)

    return wired_distance(node1, attach1) + wired_distance(node2, attach2) + WIRELESS_HOP_COST
