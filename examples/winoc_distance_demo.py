"""
WiNoC距离计算演示

加载预置配置，打印若干节点对的坐标、簇、Hub归属、
有线距离和无线距离，可选输出Hub分布图。
"""

from src.winoc import WirelessMeshConfig, WirelessMeshTopology, TraceFormatter, Flit, FlitType
from src.winoc.debug.formatting import format_metric_map


def demo_distances(config_name: str = "default", pairs=None):
    """打印节点对的距离对比"""
    config = WirelessMeshConfig.from_yaml(config_name)
    topology = WirelessMeshTopology(config)
    formatter = TraceFormatter.from_config(config)

    print(f"\n--- {topology} ---")

    if pairs is None:
        pairs = [(0, 9), (0, topology.num_nodes - 1), (9, topology.num_nodes - 10)]

    stats = {}
    for src, dst in pairs:
        src_coord = topology.id_to_coord(src)
        dst_coord = topology.id_to_coord(dst)
        wired = topology.wired_distance_between(src, dst)
        wireless = topology.wireless_distance(src, dst)
        preferred = topology.preferred_distance(src, dst)

        print(f"{src}{formatter.format(src_coord)} -> {dst}{formatter.format(dst_coord)}")
        print(f"  簇: {topology.cluster_of(src)} / {topology.cluster_of(dst)}, 同簇: {topology.same_cluster(src, dst)}")
        if topology.has_hub(src) and topology.has_hub(dst):
            print(f"  Hub: {topology.hub_of(src)} / {topology.hub_of(dst)}, 同Hub: {topology.share_hub(src, dst)}")
        print(f"  挂接路由器: {topology.closest_attachment_node(src)} / {topology.closest_attachment_node(dst)}")
        print(f"  有线: {wired}, 无线: {wireless}, 路由代价: {preferred}")

        print("  " + formatter.format(Flit(src_id=src, dst_id=dst, flit_type=FlitType.HEAD, hop_no=preferred)))
        stats[f"{src}->{dst}"] = preferred

    print(format_metric_map("preferred_distance", stats))
    return topology


def main():
    import argparse

    parser = argparse.ArgumentParser(description="WiNoC有线/无线距离演示")
    parser.add_argument("--config", default="default", help="预置配置名或YAML路径 (默认: default)")
    parser.add_argument("--pair", type=int, nargs=2, action="append", metavar=("SRC", "DST"), help="要计算的节点对，可重复")
    parser.add_argument("--plot", help="保存Hub分布图的文件路径")
    parser.add_argument("--source", type=int, help="热力图源节点")
    parser.add_argument("--metric", default="preferred", choices=["wired", "wireless", "preferred"], help="热力图距离度量")

    args = parser.parse_args()

    topology = demo_distances(args.config, args.pair)

    if args.plot:
        from src.winoc.visualization import HubMapVisualizer

        HubMapVisualizer(topology).save(args.plot, args.source, args.metric)
        print(f"Hub分布图已保存到 {args.plot}")


if __name__ == "__main__":
    main()
