"""
调试与trace输出模块
"""

from .formatting import (
    TraceFormatter,
    format_flit,
    format_channel_status,
    format_nop_data,
    format_buffer_full_status,
    format_coord,
    format_metric_map,
    trace_signals,
)

__all__ = [
    "TraceFormatter",
    "format_flit",
    "format_channel_status",
    "format_nop_data",
    "format_buffer_full_status",
    "format_coord",
    "format_metric_map",
    "trace_signals",
]
