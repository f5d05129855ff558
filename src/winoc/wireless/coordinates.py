"""
节点ID与Mesh坐标的相互转换。

节点按行优先编号：id = y * mesh_dim_x + x。
"""

import logging

from src.winoc.utils.types import Coordinate, NodeId
from src.winoc.utils.errors import NodeOutOfRangeError

logger = logging.getLogger(__name__)


def id_to_coord(node_id: NodeId, mesh_dim_x: int, mesh_dim_y: int) -> Coordinate:
    """
    节点ID转坐标。

    Args:
        node_id: 节点ID
        mesh_dim_x: Mesh列数
        mesh_dim_y: Mesh行数

    Returns:
        Coordinate(x, y)

    Raises:
        NodeOutOfRangeError: 节点ID不在 [0, mesh_dim_x * mesh_dim_y) 内
    """
    if not 0 <= node_id < mesh_dim_x * mesh_dim_y:
        msg = f"节点ID {node_id} 超出Mesh范围 {mesh_dim_x}x{mesh_dim_y}"
        logger.error(msg)
        raise NodeOutOfRangeError(msg)

    return Coordinate(node_id % mesh_dim_x, node_id // mesh_dim_x)


def coord_to_id(coord: Coordinate, mesh_dim_x: int, mesh_dim_y: int) -> NodeId:
    """
    坐标转节点ID。

    Args:
        coord: 坐标
        mesh_dim_x: Mesh列数
        mesh_dim_y: Mesh行数

    Returns:
        节点ID

    Raises:
        NodeOutOfRangeError: 坐标不在Mesh内
    """
    if not (0 <= coord.x < mesh_dim_x and 0 <= coord.y < mesh_dim_y):
        msg = f"坐标 {coord} 超出Mesh范围 {mesh_dim_x}x{mesh_dim_y}"
        logger.error(msg)
        raise NodeOutOfRangeError(msg)

    return coord.y * mesh_dim_x + coord.x
