"""
Flit及链路状态数据结构。

这些记录由路由/交换模块产生，拓扑层只在trace输出时读取。
"""

from __future__ import annotations
from typing import List
from dataclasses import dataclass, field

from src.winoc.utils.types import NodeId, FlitType, DIRECTIONS


@dataclass
class Flit:
    """
    NoC Flit。

    只保留trace输出用到的字段。
    """

    src_id: NodeId = 0
    dst_id: NodeId = 0
    vc_id: int = 0
    flit_type: FlitType = FlitType.HEAD
    sequence_no: int = 0
    timestamp: float = 0.0  # 包生成时间
    hop_no: int = 0  # 从源到目的的总跳数

    @property
    def type_letter(self) -> str:
        """H / B / T"""
        return self.flit_type.value[0].upper()


@dataclass
class ChannelStatus:
    """相邻节点某方向输入通道的状态"""

    free_slots: int = 0
    available: bool = False


@dataclass
class NoPData:
    """邻居节点广播的通道状态（Neighbors-on-Path）"""

    sender_id: NodeId = 0
    channel_status_neighbor: List[ChannelStatus] = field(default_factory=lambda: [ChannelStatus() for _ in range(DIRECTIONS)])


@dataclass
class BufferFullStatus:
    """每个虚拟通道的缓冲区满标志"""

    mask: List[bool] = field(default_factory=list)
