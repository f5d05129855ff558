"""
有线/无线混合Mesh拓扑实现。

本模块把坐标映射、簇/Hub归属、挂接路由器选择和距离计算
绑定到一份只读的配置快照上，供路由和trace模块调用。
"""

import logging
from types import MappingProxyType
from typing import Dict, Any, Tuple

import numpy as np

from src.winoc.utils.types import Coordinate, ClusterIndex, HubId, NodeId
from src.winoc.utils.errors import InvalidTopologyError
from src.winoc.utils.adjacency import create_wired_distance_matrix, create_wireless_distance_matrix
from .config import WirelessMeshConfig
from . import coordinates, clusters, attachment, distance

logger = logging.getLogger(__name__)


class WirelessMeshTopology:
    """
    混合有线/无线Mesh拓扑。

    构建时校验配置并复制Mesh尺寸、簇尺寸和Hub表，
    之后实例不再修改，可被任意线程并发调用。
    """

    def __init__(self, config: WirelessMeshConfig):
        """
        初始化拓扑。

        Args:
            config: 混合Mesh配置对象

        Raises:
            InvalidTopologyError: 配置无效
        """
        valid, error = config.validate_config()
        if not valid:
            logger.error(f"拓扑配置无效: {error}")
            raise InvalidTopologyError(error)

        self.config_name = config.config_name
        self.mesh_dim_x = config.mesh_dim_x
        self.mesh_dim_y = config.mesh_dim_y
        self.cluster_width = config.cluster_width
        self.cluster_height = config.cluster_height
        self.num_nodes = self.mesh_dim_x * self.mesh_dim_y
        self.hub_for_tile = MappingProxyType(dict(config.hub_for_tile))

        if self.mesh_dim_x % self.cluster_width or self.mesh_dim_y % self.cluster_height:
            logger.warning(f"簇尺寸 {self.cluster_width}x{self.cluster_height} 不能整除Mesh尺寸 {self.mesh_dim_x}x{self.mesh_dim_y}，边缘簇不完整")

        logger.info(f"构建混合Mesh拓扑 {self.config_name}: {self.mesh_dim_x}x{self.mesh_dim_y}, 簇 {self.cluster_width}x{self.cluster_height}, Hub数 {len(set(self.hub_for_tile.values()))}")

    # ========== 坐标映射 ==========

    def id_to_coord(self, node_id: NodeId) -> Coordinate:
        return coordinates.id_to_coord(node_id, self.mesh_dim_x, self.mesh_dim_y)

    def coord_to_id(self, coord: Coordinate) -> NodeId:
        return coordinates.coord_to_id(coord, self.mesh_dim_x, self.mesh_dim_y)

    # ========== 簇与Hub ==========

    def has_hub(self, node_id: NodeId) -> bool:
        return clusters.has_hub(node_id, self.hub_for_tile)

    def hub_of(self, node_id: NodeId) -> HubId:
        return clusters.hub_of(node_id, self.hub_for_tile)

    def share_hub(self, node1_id: NodeId, node2_id: NodeId) -> bool:
        return clusters.share_hub(node1_id, node2_id, self.hub_for_tile)

    def cluster_of(self, node_id: NodeId) -> ClusterIndex:
        return clusters.cluster_of(self.id_to_coord(node_id), self.cluster_width, self.cluster_height)

    def same_cluster(self, node1_id: NodeId, node2_id: NodeId) -> bool:
        return clusters.same_cluster(node1_id, node2_id, self.mesh_dim_x, self.mesh_dim_y, self.cluster_width, self.cluster_height)

    # ========== 挂接路由器 ==========

    def attachment_routers(self, coord: Coordinate) -> Tuple[Coordinate, Coordinate, Coordinate, Coordinate]:
        return attachment.attachment_routers(coord, self.cluster_width, self.cluster_height)

    def closest_attachment_point(self, coord: Coordinate) -> Coordinate:
        return attachment.closest_attachment_point(coord, self.cluster_width, self.cluster_height)

    def closest_attachment_node(self, node_id: NodeId) -> NodeId:
        return attachment.closest_attachment_node(node_id, self.mesh_dim_x, self.mesh_dim_y, self.cluster_width, self.cluster_height)

    # ========== 距离 ==========

    def wired_distance(self, node1: Coordinate, node2: Coordinate) -> int:
        return distance.wired_distance(node1, node2)

    def wired_distance_between(self, node1_id: NodeId, node2_id: NodeId) -> int:
        return distance.wired_distance_between(node1_id, node2_id, self.mesh_dim_x, self.mesh_dim_y)

    def wireless_distance(self, node1_id: NodeId, node2_id: NodeId) -> int:
        return distance.wireless_distance(node1_id, node2_id, self.mesh_dim_x, self.mesh_dim_y, self.cluster_width, self.cluster_height)

    def preferred_distance(self, node1_id: NodeId, node2_id: NodeId) -> int:
        """
        路由代价：同簇或任一端未挂接Hub时只能走有线，
        否则取有线与无线距离中较小者。

        Args:
            node1_id: 源节点ID
            node2_id: 目标节点ID

        Returns:
            距离（跳数）
        """
        wired = self.wired_distance_between(node1_id, node2_id)
        if self.same_cluster(node1_id, node2_id):
            return wired
        if not (self.has_hub(node1_id) and self.has_hub(node2_id)):
            return wired
        return min(wired, self.wireless_distance(node1_id, node2_id))

    def wired_distance_matrix(self) -> np.ndarray:
        """全节点对有线距离矩阵。"""
        return create_wired_distance_matrix(self.mesh_dim_y, self.mesh_dim_x)

    def wireless_distance_matrix(self) -> np.ndarray:
        """全节点对无线距离矩阵。"""
        return create_wireless_distance_matrix(self.mesh_dim_y, self.mesh_dim_x, self.cluster_width, self.cluster_height)

    def get_topology_info(self) -> Dict[str, Any]:
        """
        获取拓扑信息。

        Returns:
            拓扑信息字典
        """
        return {
            "topology_type": "WirelessMesh",
            "config_name": self.config_name,
            "dimensions": f"{self.mesh_dim_x}x{self.mesh_dim_y}",
            "cluster_dimensions": f"{self.cluster_width}x{self.cluster_height}",
            "num_nodes": self.num_nodes,
            "num_hubs": len(set(self.hub_for_tile.values())),
            "hubs": clusters.group_by_hub(self.hub_for_tile),
        }

    def __repr__(self) -> str:
        return f"WirelessMeshTopology({self.config_name}, {self.mesh_dim_x}x{self.mesh_dim_y}, cluster {self.cluster_width}x{self.cluster_height})"
