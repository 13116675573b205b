import os

# Keep test runs from writing log files into the working tree
os.environ.setdefault("SEG_VIEWER_LOG_TO_FILE", "false")

import pytest


@pytest.fixture
def packet_data() -> dict:
    return {
        "listener_ip": "10.0.0.1",
        "network_tag": "seg-a",
        "source_ip": "192.168.1.5",
        "source_port": 443,
        "target_port": 51000,
        "protocol": "tcp",
        "flags": ["SYN"],
        "timestamp": "2024-01-01T00:00:00Z",
    }
