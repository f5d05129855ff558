"""
测试Hub挂接路由器选择。
"""

import unittest
from unittest import mock

from src.winoc.utils.types import Coordinate
from src.winoc.utils.errors import NodeOutOfRangeError
from src.winoc.wireless import attachment
from src.winoc.wireless.attachment import attachment_routers, closest_attachment_point, closest_attachment_node
from src.winoc.wireless.clusters import cluster_of
from src.winoc.wireless.coordinates import id_to_coord
from src.winoc.wireless.distance import wired_distance


class TestAttachmentRouters(unittest.TestCase):
    """测试四个候选挂接路由器的位置。"""

    def test_first_cluster(self):
        """左上角簇中心为 (2,2)。"""
        r1, r2, r3, r4 = attachment_routers(Coordinate(0, 0), 4, 4)
        self.assertEqual(r4, Coordinate(2, 2))
        self.assertEqual(r3, Coordinate(2, 1))
        self.assertEqual(r2, Coordinate(1, 2))
        self.assertEqual(r1, Coordinate(1, 1))

    def test_candidates_shared_by_cluster(self):
        """同一簇内所有坐标得到相同的候选。"""
        expected = attachment_routers(Coordinate(4, 0), 4, 4)
        self.assertEqual(expected[3], Coordinate(6, 2))
        for x in range(4, 8):
            for y in range(0, 4):
                self.assertEqual(attachment_routers(Coordinate(x, y), 4, 4), expected)

    def test_odd_cluster_size(self):
        """3x3簇的中心偏移为 (1,1)。"""
        self.assertEqual(
            attachment_routers(Coordinate(4, 5), 3, 3),
            (Coordinate(3, 3), Coordinate(3, 4), Coordinate(4, 3), Coordinate(4, 4)),
        )


class TestClosestAttachmentPoint(unittest.TestCase):
    """测试最近挂接路由器选择。"""

    def test_corner_node(self):
        """(0,0) 选R1 (1,1)，距离2，小于到R4的距离4。"""
        winner = closest_attachment_point(Coordinate(0, 0), 4, 4)
        self.assertEqual(winner, Coordinate(1, 1))
        self.assertEqual(wired_distance(Coordinate(0, 0), winner), 2)
        self.assertEqual(wired_distance(Coordinate(0, 0), Coordinate(2, 2)), 4)

    def test_each_quadrant(self):
        """4x4簇的四个角分别选到各自最近的候选。"""
        self.assertEqual(closest_attachment_point(Coordinate(3, 0), 4, 4), Coordinate(2, 1))
        self.assertEqual(closest_attachment_point(Coordinate(0, 3), 4, 4), Coordinate(1, 2))
        self.assertEqual(closest_attachment_point(Coordinate(3, 3), 4, 4), Coordinate(2, 2))
        self.assertEqual(closest_attachment_point(Coordinate(7, 7), 4, 4), Coordinate(6, 6))

    def test_router_selects_itself(self):
        for router in attachment_routers(Coordinate(5, 5), 4, 4):
            self.assertEqual(closest_attachment_point(router, 4, 4), router)

    def test_winner_is_minimal_and_in_cluster(self):
        """所有节点选中的路由器距离最小，且位于本簇内。"""
        for node_id in range(64):
            coord = id_to_coord(node_id, 8, 8)
            winner = closest_attachment_point(coord, 4, 4)
            candidates = attachment_routers(coord, 4, 4)
            self.assertIn(winner, candidates)
            self.assertEqual(wired_distance(coord, winner), min(wired_distance(coord, r) for r in candidates))
            self.assertEqual(cluster_of(winner, 4, 4), cluster_of(coord, 4, 4))

    def test_deterministic(self):
        coord = Coordinate(6, 1)
        first = closest_attachment_point(coord, 4, 4)
        for _ in range(10):
            self.assertEqual(closest_attachment_point(coord, 4, 4), first)

    def test_tie_prefers_r1(self):
        """所有候选距离相同时返回R1。"""
        with mock.patch.object(attachment, "_wired", return_value=3):
            self.assertEqual(closest_attachment_point(Coordinate(0, 0), 4, 4), Coordinate(1, 1))

    def test_tie_order_r2_before_r3_before_r4(self):
        """按 R1、R2、R3、R4 的顺序取第一个达到最小值的候选。"""
        r1, r2, r3, r4 = attachment_routers(Coordinate(0, 0), 4, 4)

        with mock.patch.object(attachment, "_wired", side_effect=[5, 2, 2, 2]):
            self.assertEqual(closest_attachment_point(Coordinate(0, 0), 4, 4), r2)
        with mock.patch.object(attachment, "_wired", side_effect=[5, 4, 1, 1]):
            self.assertEqual(closest_attachment_point(Coordinate(0, 0), 4, 4), r3)
        with mock.patch.object(attachment, "_wired", side_effect=[5, 4, 3, 1]):
            self.assertEqual(closest_attachment_point(Coordinate(0, 0), 4, 4), r4)


class TestClosestAttachmentNode(unittest.TestCase):
    """测试节点ID形式。"""

    def test_node_form(self):
        self.assertEqual(closest_attachment_node(0, 8, 8, 4, 4), 9)
        self.assertEqual(closest_attachment_node(3, 8, 8, 4, 4), 10)
        self.assertEqual(closest_attachment_node(24, 8, 8, 4, 4), 17)
        self.assertEqual(closest_attachment_node(27, 8, 8, 4, 4), 18)
        self.assertEqual(closest_attachment_node(63, 8, 8, 4, 4), 54)

    def test_invalid_node(self):
        with self.assertRaises(NodeOutOfRangeError):
            closest_attachment_node(64, 8, 8, 4, 4)


if __name__ == "__main__":
    unittest.main()
