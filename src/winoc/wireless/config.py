"""
有线/无线混合Mesh配置类。

本模块提供专门针对带无线Hub的Mesh拓扑的配置实现，
继承BaseNoCConfig并添加Mesh尺寸、簇尺寸和节点到Hub映射表。
"""

import logging
from pathlib import Path
from typing import Dict, Any, Optional, Mapping, Union

from ..base.config import BaseNoCConfig
from ..configs.loader import ConfigLoader
from src.winoc.utils.types import TopologyType, ValidationResult, HubId, NodeId, DEFAULT_MESH_DIM, DEFAULT_CLUSTER_DIM, MAX_NODES
from src.winoc.utils.errors import InvalidTopologyError

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent.parent / "configs"


def hub_table_from_hubs(hubs: Mapping[Any, Any]) -> Dict[NodeId, HubId]:
    """
    将按Hub组织的配置转换为节点到Hub的映射。

    支持的格式::

        hubs:
          0:
            attached_nodes: [0, 1, 2]

    Args:
        hubs: Hub ID到Hub描述（含attached_nodes）的映射

    Returns:
        节点ID到Hub ID的映射

    Raises:
        InvalidTopologyError: 同一节点挂接到多个Hub
    """
    hub_for_tile: Dict[NodeId, HubId] = {}
    for hub_id, hub_cfg in hubs.items():
        if hub_id == "defaults":
            continue
        for node in (hub_cfg or {}).get("attached_nodes", []):
            node = int(node)
            if node in hub_for_tile and hub_for_tile[node] != int(hub_id):
                msg = f"节点 {node} 同时挂接到Hub {hub_for_tile[node]} 和 {hub_id}"
                logger.error(msg)
                raise InvalidTopologyError(msg)
            hub_for_tile[node] = int(hub_id)
    return hub_for_tile


class WirelessMeshConfig(BaseNoCConfig):
    """
    混合有线/无线Mesh配置类。

    配置在构建拓扑前可以修改；WirelessMeshTopology构建时会复制一份只读快照，
    之后对配置对象的修改不会影响已构建的拓扑。
    """

    def __init__(
        self,
        mesh_dim_x: int = DEFAULT_MESH_DIM,
        mesh_dim_y: int = DEFAULT_MESH_DIM,
        cluster_width: int = DEFAULT_CLUSTER_DIM,
        cluster_height: int = DEFAULT_CLUSTER_DIM,
        hub_for_tile: Optional[Mapping[NodeId, HubId]] = None,
        config_name: str = "default",
    ):
        """
        初始化混合Mesh配置。

        Args:
            mesh_dim_x: Mesh列数
            mesh_dim_y: Mesh行数
            cluster_width: 簇宽度
            cluster_height: 簇高度
            hub_for_tile: 节点到Hub的映射，可为部分节点
            config_name: 配置名称
        """
        super().__init__(TopologyType.WIRELESS_MESH)

        self.config_name = config_name
        self.mesh_dim_x = mesh_dim_x
        self.mesh_dim_y = mesh_dim_y
        self.cluster_width = cluster_width
        self.cluster_height = cluster_height
        self.hub_for_tile: Dict[NodeId, HubId] = dict(hub_for_tile or {})
        self.num_nodes = mesh_dim_x * mesh_dim_y

    def validate_config(self) -> ValidationResult:
        """
        验证混合Mesh配置参数。

        Returns:
            ValidationResult: (是否有效, 错误信息)
        """
        basic_valid, basic_error = self.validate_basic_params()
        if not basic_valid:
            return basic_valid, basic_error

        errors = []

        if self.mesh_dim_x <= 0 or self.mesh_dim_y <= 0:
            errors.append(f"Mesh尺寸必须为正数 (mesh_dim_x={self.mesh_dim_x}, mesh_dim_y={self.mesh_dim_y})")

        if self.num_nodes != self.mesh_dim_x * self.mesh_dim_y:
            errors.append(f"节点数必须等于mesh_dim_x×mesh_dim_y (num_nodes={self.num_nodes})")

        if self.num_nodes > MAX_NODES:
            errors.append(f"节点数超过上限 {MAX_NODES} (num_nodes={self.num_nodes})")

        if self.cluster_width <= 0 or self.cluster_height <= 0:
            errors.append(f"簇尺寸必须为正数 (cluster_width={self.cluster_width}, cluster_height={self.cluster_height})")

        for node, hub in self.hub_for_tile.items():
            if not 0 <= node < self.num_nodes:
                errors.append(f"Hub表中的节点 {node} 超出Mesh范围")
            if hub < 0:
                errors.append(f"节点 {node} 的Hub ID必须为非负数 (hub={hub})")

        if errors:
            return False, "; ".join(errors)

        return True, None

    def get_topology_params(self) -> Dict[str, Any]:
        """
        获取拓扑参数。

        Returns:
            包含拓扑特定参数的字典
        """
        return {
            "mesh_dim_x": self.mesh_dim_x,
            "mesh_dim_y": self.mesh_dim_y,
            "cluster_width": self.cluster_width,
            "cluster_height": self.cluster_height,
            "num_nodes": self.num_nodes,
            "num_hubs": len(set(self.hub_for_tile.values())),
            "hub_for_tile": dict(self.hub_for_tile),
        }

    def set_hub(self, node_id: NodeId, hub_id: HubId) -> None:
        """将节点挂接到Hub。"""
        self.hub_for_tile[node_id] = hub_id

    def assign_hub_per_cluster(self) -> None:
        """
        按几何簇分配Hub：每个簇一个Hub，Hub ID按簇行优先编号。
        """
        clusters_x = -(-self.mesh_dim_x // self.cluster_width)
        self.hub_for_tile = {}
        for node in range(self.num_nodes):
            x, y = node % self.mesh_dim_x, node // self.mesh_dim_x
            self.hub_for_tile[node] = (y // self.cluster_height) * clusters_x + x // self.cluster_width

    def from_dict(self, config_dict: Dict[str, Any]) -> None:
        """
        从字典加载配置。

        Args:
            config_dict: 配置字典
        """
        config_dict = dict(config_dict)
        hub_for_tile = config_dict.pop("hub_for_tile", None)
        hubs = config_dict.pop("hubs", None)
        config_dict.pop("num_hubs", None)

        super().from_dict(config_dict)

        if hubs is not None:
            self.hub_for_tile = hub_table_from_hubs(hubs)
        if hub_for_tile is not None:
            # JSON会把整数键变成字符串
            self.hub_for_tile = {int(k): int(v) for k, v in hub_for_tile.items()}

        self.num_nodes = self.mesh_dim_x * self.mesh_dim_y

    @classmethod
    def from_yaml(cls, config_name: Union[str, Path] = "default") -> "WirelessMeshConfig":
        """
        从YAML文件加载配置。

        先加载configs/default.yaml，再用指定文件覆盖。指定文件给出Hub表时，
        默认文件中的Hub表整体被替换。

        Args:
            config_name: 预置配置名（不含.yaml扩展名），或YAML文件路径

        Returns:
            配置实例

        Raises:
            FileNotFoundError: 配置文件不存在
        """
        loader = ConfigLoader()
        data = loader.load_config(CONFIG_DIR / "default.yaml")

        if config_name != "default":
            path = Path(config_name)
            if not path.suffix:
                path = CONFIG_DIR / f"{config_name}.yaml"
            override = loader.load_config(path)
            if "hubs" in override or "hub_for_tile" in override:
                data.pop("hubs", None)
                data.pop("hub_for_tile", None)
            data.update(override)
            data["config_name"] = override.get("config_name", path.stem)

        config = cls()
        config.from_dict(data)
        logger.info(f"已加载配置 {config.config_name}: {config.mesh_dim_x}x{config.mesh_dim_y} Mesh, {len(config.hub_for_tile)} 个节点挂接Hub")
        return config

    def __str__(self) -> str:
        """字符串表示。"""
        return f"WirelessMeshConfig({self.config_name}, {self.mesh_dim_x}×{self.mesh_dim_y}, cluster {self.cluster_width}×{self.cluster_height})"
