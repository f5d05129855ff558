"""
预置配置文件及YAML加载器。
"""

from .loader import ConfigLoader

__all__ = ["ConfigLoader"]
