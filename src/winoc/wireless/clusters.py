"""
簇与无线Hub归属判断。

簇是纯几何划分（cluster_width × cluster_height 的矩形块），任何合法节点都有簇；
Hub归属来自外部配置的 hub_for_tile 表，可以是稀疏的，也不必与簇对齐。
"""

import logging
from typing import Dict, List

from src.winoc.utils.types import ClusterIndex, Coordinate, HubId, HubTable, NodeId
from src.winoc.utils.errors import HubNotAssignedError
from .coordinates import id_to_coord

logger = logging.getLogger(__name__)


def has_hub(node_id: NodeId, hub_for_tile: HubTable) -> bool:
    """节点是否挂接了无线Hub。"""
    return node_id in hub_for_tile


def hub_of(node_id: NodeId, hub_for_tile: HubTable) -> HubId:
    """
    查询节点所属Hub。

    Args:
        node_id: 节点ID
        hub_for_tile: 节点到Hub的映射

    Returns:
        Hub ID

    Raises:
        HubNotAssignedError: 节点没有挂接任何Hub
    """
    try:
        return hub_for_tile[node_id]
    except KeyError:
        msg = f"节点 {node_id} 没有连接任何Hub"
        logger.error(msg)
        raise HubNotAssignedError(msg) from None


def share_hub(node1_id: NodeId, node2_id: NodeId, hub_for_tile: HubTable) -> bool:
    """
    两个节点是否挂接在同一个Hub上。

    Raises:
        HubNotAssignedError: 任一节点没有挂接Hub
    """
    return hub_of(node1_id, hub_for_tile) == hub_of(node2_id, hub_for_tile)


def cluster_of(coord: Coordinate, cluster_width: int, cluster_height: int) -> ClusterIndex:
    """坐标所在簇的索引 (x // cluster_width, y // cluster_height)。"""
    return coord.x // cluster_width, coord.y // cluster_height


def same_cluster(node1_id: NodeId, node2_id: NodeId, mesh_dim_x: int, mesh_dim_y: int, cluster_width: int, cluster_height: int) -> bool:
    """
    两个节点是否位于同一几何簇，不查询Hub表。

    Args:
        node1_id: 节点1 ID
        node2_id: 节点2 ID
        mesh_dim_x: Mesh列数
        mesh_dim_y: Mesh行数
        cluster_width: 簇宽度
        cluster_height: 簇高度

    Returns:
        是否同簇
    """
    node1 = id_to_coord(node1_id, mesh_dim_x, mesh_dim_y)
    node2 = id_to_coord(node2_id, mesh_dim_x, mesh_dim_y)
    return cluster_of(node1, cluster_width, cluster_height) == cluster_of(node2, cluster_width, cluster_height)


def nodes_of_hub(hub_id: HubId, hub_for_tile: HubTable) -> List[NodeId]:
    """Hub上挂接的所有节点（升序）。"""
    return sorted(node for node, hub in hub_for_tile.items() if hub == hub_id)


def group_by_hub(hub_for_tile: HubTable) -> Dict[HubId, List[NodeId]]:
    """按Hub分组的节点表，即配置文件中 attached_nodes 的视图。"""
    groups: Dict[HubId, List[NodeId]] = {}
    for node, hub in sorted(hub_for_tile.items()):
        groups.setdefault(hub, []).append(node)
    return groups
