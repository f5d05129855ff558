"""
测试节点ID与坐标映射。
"""

import unittest

from src.winoc.utils.types import Coordinate
from src.winoc.utils.errors import InvalidTopologyError, NodeOutOfRangeError
from src.winoc.wireless.coordinates import id_to_coord, coord_to_id


class TestIdToCoord(unittest.TestCase):
    """测试节点ID转坐标。"""

    def test_row_major_mapping(self):
        """测试8x8 Mesh中的行优先编号。"""
        self.assertEqual(id_to_coord(0, 8, 8), Coordinate(0, 0))
        self.assertEqual(id_to_coord(9, 8, 8), Coordinate(1, 1))
        self.assertEqual(id_to_coord(7, 8, 8), Coordinate(7, 0))
        self.assertEqual(id_to_coord(8, 8, 8), Coordinate(0, 1))
        self.assertEqual(id_to_coord(63, 8, 8), Coordinate(7, 7))

    def test_rectangular_mesh(self):
        """测试非方形Mesh。"""
        self.assertEqual(id_to_coord(5, 4, 2), Coordinate(1, 1))
        self.assertEqual(id_to_coord(3, 2, 4), Coordinate(1, 1))

    def test_out_of_range(self):
        """测试越界节点ID。"""
        with self.assertRaises(NodeOutOfRangeError):
            id_to_coord(64, 8, 8)
        with self.assertRaises(NodeOutOfRangeError):
            id_to_coord(-1, 8, 8)

    def test_out_of_range_is_topology_error(self):
        """越界错误属于拓扑错误，且在抛出前记录日志。"""
        with self.assertLogs("src.winoc.wireless.coordinates", level="ERROR"):
            with self.assertRaises(InvalidTopologyError):
                id_to_coord(100, 8, 8)


class TestCoordToId(unittest.TestCase):
    """测试坐标转节点ID。"""

    def test_inverse_mapping(self):
        """测试基本转换。"""
        self.assertEqual(coord_to_id(Coordinate(0, 0), 8, 8), 0)
        self.assertEqual(coord_to_id(Coordinate(1, 1), 8, 8), 9)
        self.assertEqual(coord_to_id(Coordinate(7, 7), 8, 8), 63)

    def test_out_of_range(self):
        """测试越界坐标。"""
        for coord in [Coordinate(8, 0), Coordinate(0, 8), Coordinate(-1, 0), Coordinate(0, -1)]:
            with self.assertRaises(NodeOutOfRangeError):
                coord_to_id(coord, 8, 8)

    def test_round_trip(self):
        """测试所有合法ID和坐标的往返转换。"""
        for dims in [(8, 8), (4, 2), (1, 5), (5, 1)]:
            for node_id in range(dims[0] * dims[1]):
                self.assertEqual(coord_to_id(id_to_coord(node_id, *dims), *dims), node_id)
            for y in range(dims[1]):
                for x in range(dims[0]):
                    coord = Coordinate(x, y)
                    self.assertEqual(id_to_coord(coord_to_id(coord, *dims), *dims), coord)


class TestCoordinate(unittest.TestCase):
    """测试坐标值类型。"""

    def test_value_semantics(self):
        self.assertEqual(Coordinate(1, 2), Coordinate(1, 2))
        self.assertEqual(len({Coordinate(1, 2), Coordinate(1, 2)}), 1)

    def test_unpack_and_str(self):
        x, y = Coordinate(3, 4)
        self.assertEqual((x, y), (3, 4))
        self.assertEqual(str(Coordinate(3, 4)), "(3,4)")

    def test_immutable(self):
        coord = Coordinate(1, 1)
        with self.assertRaises(AttributeError):
            coord.x = 2


if __name__ == "__main__":
    unittest.main()
