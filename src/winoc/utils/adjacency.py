"""
邻接矩阵与距离矩阵工具。

本模块提供Mesh拓扑的邻接矩阵生成、验证，以及基于numpy的
全节点对有线/无线距离矩阵计算。节点编号按行优先：id = y * cols + x。
"""

import numpy as np
from typing import List
from collections import deque

from src.winoc.utils.types import AdjacencyMatrix, ValidationResult, WIRELESS_HOP_COST


def create_mesh_adjacency_matrix(num_rows: int, num_cols: int) -> AdjacencyMatrix:
    """
    创建2D Mesh拓扑的邻接矩阵。

    - 节点按二维网格排列（num_rows × num_cols）
    - 节点与其上下左右的邻居连接（如果存在）
    - 边缘节点没有环形回绕连接

    Args:
        num_rows: 行数（mesh_dim_y）
        num_cols: 列数（mesh_dim_x）

    Returns:
        邻接矩阵

    Raises:
        ValueError: 如果拓扑参数无效
    """
    if num_rows < 1 or num_cols < 1:
        raise ValueError(f"拓扑至少需要1×1节点，给定: {num_rows}×{num_cols}")

    num_nodes = num_rows * num_cols
    adj_matrix = np.zeros((num_nodes, num_nodes), dtype=int)

    for i in range(num_nodes):
        row, col = divmod(i, num_cols)

        # 水平连接（左右邻居）
        if col > 0:
            adj_matrix[i, i - 1] = 1
        if col < num_cols - 1:
            adj_matrix[i, i + 1] = 1

        # 垂直连接（上下邻居）
        if row > 0:
            adj_matrix[i, i - num_cols] = 1
        if row < num_rows - 1:
            adj_matrix[i, i + num_cols] = 1

    return adj_matrix.tolist()


def validate_adjacency_matrix(adj_matrix: AdjacencyMatrix) -> ValidationResult:
    """
    验证邻接矩阵的有效性。

    Args:
        adj_matrix: 邻接矩阵

    Returns:
        ValidationResult: (是否有效, 错误消息)
    """
    if not adj_matrix:
        return False, "邻接矩阵不能为空"

    n = len(adj_matrix)

    for i, row in enumerate(adj_matrix):
        if len(row) != n:
            return False, f"邻接矩阵第{i}行长度不匹配，期望{n}，实际{len(row)}"

    matrix = np.asarray(adj_matrix)
    if not np.isin(matrix, (0, 1)).all():
        return False, "邻接矩阵元素必须为0或1"

    # 不允许自环
    if np.any(np.diag(matrix) != 0):
        return False, "邻接矩阵对角线元素必须为0，不允许自环"

    # 无向图
    if not np.array_equal(matrix, matrix.T):
        return False, "邻接矩阵不对称"

    return True, None


def check_connectivity(adj_matrix: AdjacencyMatrix) -> bool:
    """
    检查图的连通性。

    Args:
        adj_matrix: 邻接矩阵

    Returns:
        是否连通
    """
    if not adj_matrix:
        return False

    return all(d >= 0 for d in calculate_hop_distances(adj_matrix, 0))


def calculate_hop_distances(adj_matrix: AdjacencyMatrix, source: int) -> List[int]:
    """
    BFS计算从source出发到各节点的跳数，不可达为-1。

    Args:
        adj_matrix: 邻接矩阵
        source: 源节点ID

    Returns:
        跳数列表
    """
    n = len(adj_matrix)
    if source < 0 or source >= n:
        raise ValueError(f"节点ID {source} 超出范围 [0, {n-1}]")

    hops = [-1] * n
    hops[source] = 0
    queue = deque([source])

    while queue:
        node = queue.popleft()
        for neighbor in range(n):
            if adj_matrix[node][neighbor] == 1 and hops[neighbor] < 0:
                hops[neighbor] = hops[node] + 1
                queue.append(neighbor)

    return hops


def _node_grid(num_rows: int, num_cols: int):
    ids = np.arange(num_rows * num_cols)
    return ids % num_cols, ids // num_cols


def create_wired_distance_matrix(num_rows: int, num_cols: int) -> np.ndarray:
    """
    计算全节点对的有线（曼哈顿）距离矩阵。

    Args:
        num_rows: 行数
        num_cols: 列数

    Returns:
        (N, N) 整数矩阵，N = num_rows * num_cols
    """
    if num_rows < 1 or num_cols < 1:
        raise ValueError(f"拓扑至少需要1×1节点，给定: {num_rows}×{num_cols}")

    xs, ys = _node_grid(num_rows, num_cols)
    return np.abs(xs[:, None] - xs[None, :]) + np.abs(ys[:, None] - ys[None, :])


def create_wireless_distance_matrix(num_rows: int, num_cols: int, cluster_width: int, cluster_height: int) -> np.ndarray:
    """
    计算全节点对的无线距离矩阵。

    每个节点先走有线到本簇最近的Hub挂接路由器，再加一次无线跳。
    矩阵不区分是否同簇或同Hub，与wireless_distance一致。

    Args:
        num_rows: 行数
        num_cols: 列数
        cluster_width: 簇宽度
        cluster_height: 簇高度

    Returns:
        (N, N) 整数矩阵
    """
    from src.winoc.wireless.attachment import closest_attachment_point
    from src.winoc.utils.types import Coordinate

    xs, ys = _node_grid(num_rows, num_cols)
    to_hub = np.zeros(len(xs), dtype=int)
    for node_id, (x, y) in enumerate(zip(xs.tolist(), ys.tolist())):
        attach = closest_attachment_point(Coordinate(x, y), cluster_width, cluster_height)
        to_hub[node_id] = abs(x - attach.x) + abs(y - attach.y)

    return to_hub[:, None] + to_hub[None, :] + WIRELESS_HOP_COST
