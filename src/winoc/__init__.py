"""
WiNoC（Wireless Network-on-Chip）拓扑层。

本模块计算带无线Hub扩展的2D Mesh片上网络中的空间关系：
节点坐标、几何簇、Hub归属、最近Hub挂接路由器，
以及纯有线距离和有线+无线距离，供路由代价计算和trace输出使用。

使用示例：
    from src.winoc import WirelessMeshConfig, WirelessMeshTopology

    config = WirelessMeshConfig.from_yaml("default")
    topology = WirelessMeshTopology(config)

    topology.wired_distance_between(0, 9)   # 2
    topology.wireless_distance(0, 63)       # 5
"""

from .utils.types import (
    # 枚举类型
    TopologyType,
    FlitType,
    VerboseMode,
    LinkType,
    # 值类型
    Coordinate,
    # 类型别名
    NodeId,
    HubId,
    ClusterIndex,
    HubTable,
    ConfigDict,
    ValidationResult,
    # 常量
    DIRECTIONS,
    WIRELESS_HOP_COST,
)

from .utils.errors import InvalidTopologyError, NodeOutOfRangeError, HubNotAssignedError

from .base.config import BaseNoCConfig
from .base.flit import Flit, ChannelStatus, NoPData, BufferFullStatus

from .wireless.config import WirelessMeshConfig
from .wireless.topology import WirelessMeshTopology

from .debug.formatting import TraceFormatter

# 版本信息
__version__ = "1.0.0"
__author__ = "WiNoC Development Team"
__description__ = "WiNoC拓扑层 - 有线/无线混合Mesh空间关系计算"


def create_topology(config_name="default", **kwargs):
    """
    从预置配置创建拓扑的便捷函数。

    Args:
        config_name: 预置配置名或YAML路径
        **kwargs: 覆盖的配置参数

    Returns:
        WirelessMeshTopology: 拓扑实例
    """
    config = WirelessMeshConfig.from_yaml(config_name)
    if kwargs:
        config.from_dict(kwargs)
    return WirelessMeshTopology(config)


__all__ = [
    "TopologyType",
    "FlitType",
    "VerboseMode",
    "LinkType",
    "Coordinate",
    "NodeId",
    "HubId",
    "ClusterIndex",
    "HubTable",
    "ConfigDict",
    "ValidationResult",
    "DIRECTIONS",
    "WIRELESS_HOP_COST",
    "InvalidTopologyError",
    "NodeOutOfRangeError",
    "HubNotAssignedError",
    "BaseNoCConfig",
    "Flit",
    "ChannelStatus",
    "NoPData",
    "BufferFullStatus",
    "WirelessMeshConfig",
    "WirelessMeshTopology",
    "TraceFormatter",
    "create_topology",
]


# 设置日志
import logging

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

# 如果没有处理器，添加控制台处理器
if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

logger.debug(f"WiNoC拓扑层已加载 - 版本 {__version__}")
