import ipaddress
from enum import Enum
from typing import Annotated, Any, List

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, StrictStr
from pydantic_core import PydanticCustomError

PORT_MIN = 0
PORT_MAX = 65535


class Protocol(str, Enum):
    TCP = "tcp"
    UDP = "udp"


def _check_ipv4(value: str) -> str:
    try:
        ipaddress.IPv4Address(value)
    except ipaddress.AddressValueError:
        raise PydanticCustomError("ipv4_address", "not a valid IPv4 address")
    return value


def _check_port(value: Any) -> Any:
    # JSON numbers like 443.0 are whole ports
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    # bool is an int subclass, but True is not a port
    if isinstance(value, bool) or not isinstance(value, int) or not PORT_MIN <= value <= PORT_MAX:
        raise PydanticCustomError(
            "port_range",
            "expected integer between {min} and {max}",
            {"min": PORT_MIN, "max": PORT_MAX},
        )
    return value


def _check_protocol(value: Any) -> Any:
    if isinstance(value, Protocol):
        return value
    if not isinstance(value, str) or value not in {p.value for p in Protocol}:
        raise PydanticCustomError("protocol", "not one of tcp/udp")
    return value


IPv4Str = Annotated[StrictStr, AfterValidator(_check_ipv4)]
Port = Annotated[int, BeforeValidator(_check_port)]


class PacketInfo(BaseModel):
    """One packet observed by a segmentation listener."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    listener_ip: IPv4Str
    network_tag: StrictStr
    source_ip: IPv4Str
    source_port: Port
    target_port: Port
    protocol: Annotated[Protocol, BeforeValidator(_check_protocol)]
    flags: List[StrictStr]
    timestamp: StrictStr


class NodeDatum(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    shape: str
    color: str


class LinkDatum(BaseModel):
    id: str
    label: str
    source: str
    target: str
    active: bool
    color: str


class GraphData(BaseModel):
    nodes: List[NodeDatum]
    links: List[LinkDatum]
