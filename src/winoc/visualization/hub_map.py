"""
Hub分布可视化器

在Mesh网格上显示：
1. 几何簇边界
2. 节点的Hub归属（按Hub着色，未挂接Hub的节点为灰色）
3. 每个簇的四个挂接路由器
4. 可选：从某个源节点出发的距离热力图
"""

import logging
from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from src.winoc.utils.types import Coordinate, NodeId
from src.winoc.wireless.topology import WirelessMeshTopology

DISTANCE_METRICS = ("wired", "wireless", "preferred")


class HubMapVisualizer:
    """
    Hub分布可视化器

    y轴向下，与节点行号一致，节点 (0,0) 位于左上角。
    """

    def __init__(self, topology: WirelessMeshTopology, ax=None):
        """
        初始化可视化器

        Args:
            topology: 混合Mesh拓扑
            ax: matplotlib轴对象
        """
        self.topology = topology
        self.logger = logging.getLogger("HubMapVis")

        if ax is None:
            self.fig, self.ax = plt.subplots(figsize=(8, 8))
        else:
            self.ax = ax
            self.fig = ax.figure

        hubs = sorted(set(topology.hub_for_tile.values()))
        cmap = plt.get_cmap("tab10")
        self.hub_colors = {hub: cmap(i % 10) for i, hub in enumerate(hubs)}

    def distance_grid(self, source: NodeId, metric: str = "wired") -> np.ndarray:
        """
        源节点到各节点的距离，按 (行, 列) 排列。

        Args:
            source: 源节点ID
            metric: "wired" / "wireless" / "preferred"

        Returns:
            (mesh_dim_y, mesh_dim_x) 距离矩阵
        """
        if metric not in DISTANCE_METRICS:
            raise ValueError(f"未知的距离度量: {metric}，可选 {DISTANCE_METRICS}")

        topo = self.topology
        if metric == "wired":
            row = topo.wired_distance_matrix()[source]
        elif metric == "wireless":
            row = topo.wireless_distance_matrix()[source]
        else:
            row = np.array([topo.preferred_distance(source, dst) for dst in range(topo.num_nodes)])

        return np.asarray(row).reshape(topo.mesh_dim_y, topo.mesh_dim_x)

    def draw(self, source: Optional[NodeId] = None, metric: str = "wired"):
        """
        绘制Hub分布图

        Args:
            source: 给出时叠加从该节点出发的距离热力图
            metric: 距离度量

        Returns:
            matplotlib Figure
        """
        topo = self.topology
        self.ax.clear()

        if source is not None:
            grid = self.distance_grid(source, metric)
            self.ax.imshow(grid, cmap="Blues", alpha=0.5, extent=(-0.5, topo.mesh_dim_x - 0.5, topo.mesh_dim_y - 0.5, -0.5))
            for node in range(topo.num_nodes):
                coord = topo.id_to_coord(node)
                self.ax.text(coord.x + 0.25, coord.y + 0.35, str(grid[coord.y, coord.x]), fontsize=7, color="navy")

        self._draw_clusters()
        self._draw_nodes()
        self._draw_attachment_routers()

        self.ax.set_xlim(-0.5, topo.mesh_dim_x - 0.5)
        self.ax.set_ylim(topo.mesh_dim_y - 0.5, -0.5)
        self.ax.set_aspect("equal")
        title = f"{topo.config_name}: {topo.mesh_dim_x}x{topo.mesh_dim_y}, cluster {topo.cluster_width}x{topo.cluster_height}"
        if source is not None:
            title += f", {metric} distance from {source}"
        self.ax.set_title(title)

        self.logger.debug(f"绘制Hub分布图: {title}")
        return self.fig

    def _draw_clusters(self):
        topo = self.topology
        for top in range(0, topo.mesh_dim_y, topo.cluster_height):
            for left in range(0, topo.mesh_dim_x, topo.cluster_width):
                rect = Rectangle((left - 0.5, top - 0.5), topo.cluster_width, topo.cluster_height, fill=False, linestyle="--", edgecolor="black")
                self.ax.add_patch(rect)

    def _draw_nodes(self):
        topo = self.topology
        for node in range(topo.num_nodes):
            coord = topo.id_to_coord(node)
            color = self.hub_colors[topo.hub_of(node)] if topo.has_hub(node) else "lightgray"
            self.ax.scatter(coord.x, coord.y, s=160, color=color, edgecolors="black", zorder=3)
            self.ax.text(coord.x, coord.y, str(node), ha="center", va="center", fontsize=7, zorder=4)

    def _draw_attachment_routers(self):
        topo = self.topology
        for top in range(0, topo.mesh_dim_y, topo.cluster_height):
            for left in range(0, topo.mesh_dim_x, topo.cluster_width):
                for router in topo.attachment_routers(Coordinate(left, top)):
                    if 0 <= router.x < topo.mesh_dim_x and 0 <= router.y < topo.mesh_dim_y:
                        self.ax.scatter(router.x, router.y, s=420, facecolors="none", edgecolors="red", linewidths=1.5, zorder=2)

    def save(self, filepath: str, source: Optional[NodeId] = None, metric: str = "wired") -> None:
        """绘制并保存到文件"""
        self.draw(source, metric).savefig(filepath, dpi=150, bbox_inches="tight")
        self.logger.info(f"Hub分布图已保存到 {filepath}")
