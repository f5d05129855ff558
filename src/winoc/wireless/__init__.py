"""
有线/无线混合Mesh拓扑。

- 节点ID与坐标映射
- 几何簇与无线Hub归属
- 最近Hub挂接路由器选择
- 有线距离与有线+无线距离
"""

from .config import WirelessMeshConfig, hub_table_from_hubs
from .topology import WirelessMeshTopology
from .coordinates import id_to_coord, coord_to_id
from .clusters import has_hub, hub_of, share_hub, cluster_of, same_cluster, nodes_of_hub, group_by_hub
from .attachment import attachment_routers, closest_attachment_point, closest_attachment_node
from .distance import wired_distance, wired_distance_between, wireless_distance

__all__ = [
    "WirelessMeshConfig",
    "WirelessMeshTopology",
    "hub_table_from_hubs",
    "id_to_coord",
    "coord_to_id",
    "has_hub",
    "hub_of",
    "share_hub",
    "cluster_of",
    "same_cluster",
    "nodes_of_hub",
    "group_by_hub",
    "attachment_routers",
    "closest_attachment_point",
    "closest_attachment_node",
    "wired_distance",
    "wired_distance_between",
    "wireless_distance",
]
