from typing import List, Tuple

# Bit order matches the TCP header layout, lowest bit first
TCP_FLAGS: Tuple[Tuple[int, str], ...] = (
    (0x01, "FIN"),
    (0x02, "SYN"),
    (0x04, "RST"),
    (0x08, "PSH"),
    (0x10, "ACK"),
    (0x20, "URG"),
    (0x40, "ECE"),
    (0x80, "CWR"),
)


def tcp_flag_names(bits: int) -> List[str]:
    if bits < 0:
        raise ValueError(f"TCP flag bits must be non-negative, got {bits}")
    return [name for mask, name in TCP_FLAGS if bits & mask]
