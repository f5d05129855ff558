"""
拓扑异常定义。

几何输入错误（节点越界、查询未挂接Hub的节点）属于编程错误，
调用方不应捕获后继续路由。
"""


class InvalidTopologyError(Exception):
    """拓扑输入或配置无效。"""

    pass


class NodeOutOfRangeError(InvalidTopologyError):
    """节点ID或坐标超出Mesh范围。"""

    pass


class HubNotAssignedError(InvalidTopologyError):
    """节点没有挂接任何无线Hub。"""

    pass
