"""
WiNoC通用基础模块。

提供所有拓扑共用的基础类，包括：
- BaseNoCConfig: 配置基类，支持字典/JSON转换
- Flit、ChannelStatus、NoPData、BufferFullStatus: trace输出读取的数据结构
"""

from .config import BaseNoCConfig
from .flit import Flit, ChannelStatus, NoPData, BufferFullStatus

__all__ = [
    "BaseNoCConfig",
    "Flit",
    "ChannelStatus",
    "NoPData",
    "BufferFullStatus",
]
