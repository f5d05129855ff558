"""
无线Hub挂接路由器选择。

每个簇的无线Hub通过簇中心周围的四个有线路由器接入网络：

    R1 (cx-1, cy-1)   R3 (cx, cy-1)
    R2 (cx-1, cy)     R4 (cx, cy)

其中 (cx, cy) 为簇左上角偏移 (cluster_width // 2, cluster_height // 2)。
节点选择曼哈顿距离最近的挂接路由器；距离相同时按 R1、R2、R3、R4 的顺序取第一个。
"""

from typing import Tuple

from src.winoc.utils.types import Coordinate, NodeId
from .coordinates import id_to_coord, coord_to_id
from .clusters import cluster_of


def _wired(a: Coordinate, b: Coordinate) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def attachment_routers(coord: Coordinate, cluster_width: int, cluster_height: int) -> Tuple[Coordinate, Coordinate, Coordinate, Coordinate]:
    """
    坐标所在簇的四个挂接路由器，按优先级顺序 (R1, R2, R3, R4) 返回。

    Args:
        coord: 簇内任一坐标
        cluster_width: 簇宽度
        cluster_height: 簇高度

    Returns:
        (R1, R2, R3, R4)
    """
    cluster_x, cluster_y = cluster_of(coord, cluster_width, cluster_height)

    router4 = Coordinate(cluster_x * cluster_width + cluster_width // 2, cluster_y * cluster_height + cluster_height // 2)
    router3 = Coordinate(router4.x, router4.y - 1)
    router2 = Coordinate(router4.x - 1, router4.y)
    router1 = Coordinate(router4.x - 1, router4.y - 1)

    return router1, router2, router3, router4


def closest_attachment_point(coord: Coordinate, cluster_width: int, cluster_height: int) -> Coordinate:
    """
    距离坐标最近的Hub挂接路由器。

    Args:
        coord: 节点坐标
        cluster_width: 簇宽度
        cluster_height: 簇高度

    Returns:
        挂接路由器坐标
    """
    candidates = attachment_routers(coord, cluster_width, cluster_height)
    dis1, dis2, dis3, dis4 = (_wired(coord, router) for router in candidates)

    win = min(min(dis1, dis2), min(dis3, dis4))

    # 平局时按 R1 -> R4 顺序取第一个
    for router, dis in zip(candidates, (dis1, dis2, dis3, dis4)):
        if dis == win:
            return router

    # 不可达：win 必等于某个候选距离
    raise AssertionError("no attachment router matched the minimum distance")


def closest_attachment_node(node_id: NodeId, mesh_dim_x: int, mesh_dim_y: int, cluster_width: int, cluster_height: int) -> NodeId:
    """closest_attachment_point 的节点ID形式。"""
    node = id_to_coord(node_id, mesh_dim_x, mesh_dim_y)
    return coord_to_id(closest_attachment_point(node, cluster_width, cluster_height), mesh_dim_x, mesh_dim_y)
