"""
WiNoC可视化模块
"""

from .hub_map import HubMapVisualizer

__all__ = ["HubMapVisualizer"]
