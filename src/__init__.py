"""
WiNoC - 有线/无线混合Mesh片上网络拓扑建模
"""

__version__ = "1.0.0"
