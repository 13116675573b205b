from typing import Dict, Iterable, List, Optional

from seg_viewer.config import settings
from seg_viewer.models import GraphData, LinkDatum, NodeDatum, PacketInfo

SCANNER_ROLE = "scanner"
LISTENER_ROLE = "listener"


def _node(ip: str, tag: str, role: str, shape: str, color: str) -> NodeDatum:
    return NodeDatum(
        id=f"{ip}:{role}",
        label=f"{tag}:{ip}:{role}",
        shape=shape,
        color=color,
    )


def build_graph(
    packets: Iterable[PacketInfo],
    node_color: Optional[str] = None,
    link_color: Optional[str] = None,
) -> GraphData:
    """Scanner and listener nodes with one link per observed packet.

    Nodes are deduplicated on their full value and kept in first-seen order.
    """
    node_color = node_color or settings.node_color
    link_color = link_color or settings.link_color

    nodes: Dict[NodeDatum, None] = {}
    links: List[LinkDatum] = []

    for packet in packets:
        scanner = _node(packet.source_ip, packet.network_tag, SCANNER_ROLE, "hexagon", node_color)
        listener = _node(packet.listener_ip, packet.network_tag, LISTENER_ROLE, "square", node_color)
        nodes.setdefault(scanner)
        nodes.setdefault(listener)

        links.append(LinkDatum(
            id=f"{packet.source_ip}:{packet.listener_ip}:{packet.target_port}",
            label=f"{packet.source_port} -> {packet.target_port}",
            source=scanner.id,
            target=listener.id,
            active=True,
            color=link_color,
        ))

    return GraphData(nodes=list(nodes), links=links)
