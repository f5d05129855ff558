"""
Trace/调试输出格式。

输出格式（用于回归比对，保持稳定）：

- Flit简洁格式:  ``(H3, 1->5 VC 0)``，类型字母为 H/B/T
- Flit详细格式（VerboseMode.HIGH）::

      ### FLIT ###
      Source Tile[1]
      Destination Tile[5]
      Flit Type is HEAD
      Sequence no. 3
      Payload printing not implemented (yet).
      Unix timestamp at packet generation 12.0
      Total number of hops from source to destination is 4

- 通道状态:      ``A(2)`` 可用 / ``N(0)`` 不可用，括号内为空闲槽数
- 邻居状态:      ``      NoP data from [7] [ A(2) N(0) A(1) A(4) ]``
- 缓冲区满标志:  ``[0 1 0 0 ]``
- 坐标:          ``(x,y)``

trace信号名为 ``<name>.<field>``，缓冲区满标志为 ``<name>.vc_<j>``。
"""

from typing import Any, List, Mapping, Tuple

from src.winoc.base.flit import Flit, ChannelStatus, NoPData, BufferFullStatus
from src.winoc.utils.types import Coordinate, VerboseMode, DIRECTIONS, DEFAULT_VIRTUAL_CHANNELS


def format_flit(flit: Flit, verbose_mode: VerboseMode = VerboseMode.OFF) -> str:
    if verbose_mode == VerboseMode.HIGH:
        lines = [
            "### FLIT ###",
            f"Source Tile[{flit.src_id}]",
            f"Destination Tile[{flit.dst_id}]",
            f"Flit Type is {flit.flit_type.name}",
            f"Sequence no. {flit.sequence_no}",
            "Payload printing not implemented (yet).",
            f"Unix timestamp at packet generation {flit.timestamp}",
            f"Total number of hops from source to destination is {flit.hop_no}",
        ]
        return "\n".join(lines) + "\n"

    return f"({flit.type_letter}{flit.sequence_no}, {flit.src_id}->{flit.dst_id} VC {flit.vc_id})"


def format_channel_status(status: ChannelStatus) -> str:
    flag = "A" if status.available else "N"
    return f"{flag}({status.free_slots})"


def format_nop_data(nop_data: NoPData) -> str:
    statuses = "".join(format_channel_status(s) + " " for s in nop_data.channel_status_neighbor[:DIRECTIONS])
    return f"      NoP data from [{nop_data.sender_id}] [ {statuses}]\n"


def format_buffer_full_status(bfs: BufferFullStatus, n_virtual_channels: int = DEFAULT_VIRTUAL_CHANNELS) -> str:
    mask = "".join(f"{int(bool(m))} " for m in bfs.mask[:n_virtual_channels])
    return f"[{mask}]\n"


def format_coord(coord: Coordinate) -> str:
    return f"({coord.x},{coord.y})"


def format_metric_map(label: str, metrics: Mapping[str, float]) -> str:
    """
    以MATLAB向量形式输出统计量，按键名排序::

        label = [
        	1.000000e+00	 % key
        ];
    """
    lines = [f"{label} = ["]
    for key in sorted(metrics):
        lines.append(f"\t{metrics[key]:.6e}\t % {key}")
    lines.append("];")
    return "\n".join(lines) + "\n"


def trace_signals(obj: Any, name: str, n_virtual_channels: int = DEFAULT_VIRTUAL_CHANNELS) -> List[Tuple[str, Any]]:
    """
    展开为波形trace用的 (信号名, 值) 列表。

    Args:
        obj: Flit / NoPData / BufferFullStatus / ChannelStatus
        name: 信号名前缀
        n_virtual_channels: 虚拟通道数

    Returns:
        (信号名, 值) 列表，顺序固定

    Raises:
        TypeError: 不支持的对象类型
    """
    if isinstance(obj, Flit):
        return [
            (f"{name}.src_id", obj.src_id),
            (f"{name}.dst_id", obj.dst_id),
            (f"{name}.sequence_no", obj.sequence_no),
            (f"{name}.timestamp", obj.timestamp),
            (f"{name}.hop_no", obj.hop_no),
        ]
    if isinstance(obj, NoPData):
        return [(f"{name}.sender_id", obj.sender_id)]
    if isinstance(obj, BufferFullStatus):
        return [(f"{name}.vc_{j}", bool(obj.mask[j])) for j in range(min(n_virtual_channels, len(obj.mask)))]
    if isinstance(obj, ChannelStatus):
        return [(f"{name}.free_slots", obj.free_slots), (f"{name}.available", obj.available)]
    raise TypeError(f"不支持trace的类型: {type(obj).__name__}")


class TraceFormatter:
    """
    绑定配置中verbose_mode和n_virtual_channels的格式化器。
    """

    def __init__(self, verbose_mode: VerboseMode = VerboseMode.OFF, n_virtual_channels: int = DEFAULT_VIRTUAL_CHANNELS):
        self.verbose_mode = verbose_mode
        self.n_virtual_channels = n_virtual_channels

    @classmethod
    def from_config(cls, config) -> "TraceFormatter":
        return cls(config.verbose_mode, config.n_virtual_channels)

    def format(self, obj: Any) -> str:
        if isinstance(obj, Flit):
            return format_flit(obj, self.verbose_mode)
        if isinstance(obj, ChannelStatus):
            return format_channel_status(obj)
        if isinstance(obj, NoPData):
            return format_nop_data(obj)
        if isinstance(obj, BufferFullStatus):
            return format_buffer_full_status(obj, self.n_virtual_channels)
        if isinstance(obj, Coordinate):
            return format_coord(obj)
        raise TypeError(f"不支持格式化的类型: {type(obj).__name__}")

    def signals(self, obj: Any, name: str) -> List[Tuple[str, Any]]:
        return trace_signals(obj, name, self.n_virtual_channels)
