"""
WiNoC 示例模块
"""

__version__ = "1.0.0"
__description__ = "WiNoC Topology Examples"

# 示例文件列表
__examples__ = [
    "winoc_distance_demo.py - 有线/无线距离与Hub分布演示",
]

__all__ = [
    "__version__",
    "__description__",
    "__examples__",
]
