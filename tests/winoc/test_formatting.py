"""
测试trace/调试输出格式。
"""

import unittest

from src.winoc.base.flit import Flit, ChannelStatus, NoPData, BufferFullStatus
from src.winoc.debug.formatting import (
    TraceFormatter,
    format_flit,
    format_channel_status,
    format_nop_data,
    format_buffer_full_status,
    format_coord,
    format_metric_map,
    trace_signals,
)
from src.winoc.utils.types import Coordinate, FlitType, VerboseMode
from src.winoc.wireless.config import WirelessMeshConfig


class TestFlitFormatting(unittest.TestCase):
    """测试Flit输出。"""

    def setUp(self):
        self.flit = Flit(src_id=1, dst_id=5, vc_id=0, flit_type=FlitType.HEAD, sequence_no=3, timestamp=12.0, hop_no=4)

    def test_compact(self):
        self.assertEqual(format_flit(self.flit), "(H3, 1->5 VC 0)")
        self.assertEqual(format_flit(self.flit, VerboseMode.MEDIUM), "(H3, 1->5 VC 0)")

    def test_type_letters(self):
        body = Flit(src_id=2, dst_id=9, vc_id=1, flit_type=FlitType.BODY, sequence_no=7)
        tail = Flit(src_id=2, dst_id=9, vc_id=3, flit_type=FlitType.TAIL, sequence_no=8)
        self.assertEqual(format_flit(body), "(B7, 2->9 VC 1)")
        self.assertEqual(format_flit(tail), "(T8, 2->9 VC 3)")

    def test_verbose(self):
        expected = (
            "### FLIT ###\n"
            "Source Tile[1]\n"
            "Destination Tile[5]\n"
            "Flit Type is HEAD\n"
            "Sequence no. 3\n"
            "Payload printing not implemented (yet).\n"
            "Unix timestamp at packet generation 12.0\n"
            "Total number of hops from source to destination is 4\n"
        )
        self.assertEqual(format_flit(self.flit, VerboseMode.HIGH), expected)


class TestStatusFormatting(unittest.TestCase):
    """测试通道与缓冲区状态输出。"""

    def test_channel_status(self):
        self.assertEqual(format_channel_status(ChannelStatus(free_slots=2, available=True)), "A(2)")
        self.assertEqual(format_channel_status(ChannelStatus(free_slots=0, available=False)), "N(0)")

    def test_nop_data(self):
        nop = NoPData(
            sender_id=7,
            channel_status_neighbor=[ChannelStatus(2, True), ChannelStatus(0, False), ChannelStatus(1, True), ChannelStatus(4, True)],
        )
        self.assertEqual(format_nop_data(nop), "      NoP data from [7] [ A(2) N(0) A(1) A(4) ]\n")

    def test_nop_data_default(self):
        self.assertEqual(format_nop_data(NoPData(sender_id=0)), "      NoP data from [0] [ N(0) N(0) N(0) N(0) ]\n")

    def test_buffer_full_status(self):
        bfs = BufferFullStatus(mask=[False, True, False, False])
        self.assertEqual(format_buffer_full_status(bfs), "[0 1 0 0 ]\n")
        self.assertEqual(format_buffer_full_status(bfs, 2), "[0 1 ]\n")

    def test_coord(self):
        self.assertEqual(format_coord(Coordinate(3, 4)), "(3,4)")

    def test_metric_map(self):
        expected = "latency = [\n\t5.000000e-01\t % a\n\t2.000000e+00\t % b\n];\n"
        self.assertEqual(format_metric_map("latency", {"b": 2.0, "a": 0.5}), expected)


class TestTraceSignals(unittest.TestCase):
    """测试trace信号展开。"""

    def test_flit_signals(self):
        flit = Flit(src_id=1, dst_id=5, sequence_no=3, timestamp=12.0, hop_no=4)
        self.assertEqual(
            trace_signals(flit, "r0.flit"),
            [("r0.flit.src_id", 1), ("r0.flit.dst_id", 5), ("r0.flit.sequence_no", 3), ("r0.flit.timestamp", 12.0), ("r0.flit.hop_no", 4)],
        )

    def test_status_signals(self):
        self.assertEqual(trace_signals(NoPData(sender_id=3), "nop"), [("nop.sender_id", 3)])
        self.assertEqual(trace_signals(ChannelStatus(5, True), "ch"), [("ch.free_slots", 5), ("ch.available", True)])
        self.assertEqual(
            trace_signals(BufferFullStatus(mask=[True, False, True]), "bfs", n_virtual_channels=2),
            [("bfs.vc_0", True), ("bfs.vc_1", False)],
        )

    def test_unsupported(self):
        with self.assertRaises(TypeError):
            trace_signals("flit", "x")


class TestTraceFormatter(unittest.TestCase):
    """测试绑定配置的格式化器。"""

    def test_from_config(self):
        config = WirelessMeshConfig()
        config.set_parameter("verbose_mode", VerboseMode.HIGH)
        config.set_parameter("n_virtual_channels", 2)
        formatter = TraceFormatter.from_config(config)

        self.assertTrue(formatter.format(Flit()).startswith("### FLIT ###"))
        self.assertEqual(formatter.format(BufferFullStatus(mask=[True, True, True, True])), "[1 1 ]\n")
        self.assertEqual(formatter.format(Coordinate(0, 7)), "(0,7)")
        self.assertEqual(formatter.format(ChannelStatus(1, True)), "A(1)")
        self.assertEqual(len(formatter.signals(BufferFullStatus(mask=[True] * 4), "b")), 2)

    def test_unsupported(self):
        with self.assertRaises(TypeError):
            TraceFormatter().format(42)


if __name__ == "__main__":
    unittest.main()
