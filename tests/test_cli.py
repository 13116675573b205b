"""Tests for the seg-viewer command line."""

import json

from click.testing import CliRunner

from seg_viewer.main import cli


def _scan(tmp_path, packet_data, *extra) -> str:
    scan = tmp_path / "scan.jsonl"
    lines = [json.dumps(packet_data)] + [json.dumps(e) for e in extra]
    scan.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(scan)


def test_validate_clean_file(tmp_path, packet_data) -> None:
    result = CliRunner().invoke(cli, ["validate", _scan(tmp_path, packet_data)])

    assert result.exit_code == 0
    assert "1 valid, 0 rejected" in result.output


def test_validate_reports_violations(tmp_path, packet_data) -> None:
    scan = _scan(tmp_path, packet_data, {**packet_data, "target_port": 70000})
    result = CliRunner().invoke(cli, ["validate", scan])

    assert result.exit_code == 1
    assert f"{scan}:2: target_port: expected integer between 0 and 65535" in result.output
    assert "1 valid, 1 rejected" in result.output


def test_strict_validate_fails(tmp_path, packet_data) -> None:
    scan = _scan(tmp_path, packet_data, {**packet_data, "protocol": "TCP"})
    result = CliRunner().invoke(cli, ["--strict", "validate", scan])

    assert result.exit_code == 1
    assert "invalid packet record" in result.output


def test_graph_to_stdout(tmp_path, packet_data) -> None:
    result = CliRunner().invoke(cli, ["graph", _scan(tmp_path, packet_data)])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert len(data["nodes"]) == 2
    assert data["links"][0]["label"] == "443 -> 51000"


def test_graph_to_file(tmp_path, packet_data) -> None:
    out = tmp_path / "graph.json"
    result = CliRunner().invoke(cli, ["graph", _scan(tmp_path, packet_data), "-o", str(out)])

    assert result.exit_code == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["links"][0]["source"] == "192.168.1.5:scanner"
