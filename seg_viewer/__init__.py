from seg_viewer.flags import tcp_flag_names
from seg_viewer.models import PacketInfo, Protocol
from seg_viewer.validator import Failure, Success, Violation, validate, validate_json

__all__ = ["PacketInfo", "Protocol", "Failure", "Success", "Violation", "validate", "validate_json", "tcp_flag_names"]
