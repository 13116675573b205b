from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel

from seg_viewer.config import settings
from seg_viewer.logger import logger
from seg_viewer.models import PacketInfo
from seg_viewer.validator import Failure, Violation, validate_json


class PacketFileError(Exception):
    def __init__(self, message: str, path: Optional[Path] = None, line_number: Optional[int] = None,
                 violations: Optional[List[Violation]] = None):
        super().__init__(message)
        self.path = path
        self.line_number = line_number
        self.violations = violations or []


class RejectedLine(BaseModel):
    path: Path
    line_number: int
    violations: List[Violation]


class LoadReport(BaseModel):
    packets: List[PacketInfo] = []
    rejected: List[RejectedLine] = []

    @property
    def ok(self) -> bool:
        return not self.rejected

    def extend(self, other: "LoadReport") -> None:
        self.packets.extend(other.packets)
        self.rejected.extend(other.rejected)


def load_packets(path: Union[str, Path], strict: Optional[bool] = None) -> LoadReport:
    """Read a JSONL scan file, one packet record per line."""
    path = Path(path)
    strict = settings.strict if strict is None else strict
    report = LoadReport()

    logger.debug(f"Opening scan file {path} (strict={strict})")
    try:
        with path.open("r", encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                if not line.strip():
                    continue

                result = validate_json(line)
                if isinstance(result, Failure):
                    details = "; ".join(str(v) for v in result.violations)
                    if strict:
                        raise PacketFileError(
                            f"{path}:{line_number}: invalid packet record: {details}",
                            path=path,
                            line_number=line_number,
                            violations=result.violations,
                        )
                    logger.warning(f"Data validation failed for {path}:{line_number}: {details}. Skipping malformed record.")
                    report.rejected.append(RejectedLine(path=path, line_number=line_number, violations=result.violations))
                    continue

                logger.debug(f"Accepted record {path}:{line_number}")
                report.packets.append(result.packet)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read scan file {path}: {e}")
        raise PacketFileError(f"Could not read {path}: {e}", path=path) from e

    logger.info(f"Loaded {len(report.packets)} packets from {path} ({len(report.rejected)} rejected)")
    return report


def load_directory(path: Union[str, Path], pattern: Optional[str] = None, strict: Optional[bool] = None) -> LoadReport:
    path = Path(path)
    pattern = pattern or settings.jsonl_pattern
    if not path.is_dir():
        raise PacketFileError(f"Not a directory: {path}", path=path)

    report = LoadReport()
    files = sorted(p for p in path.glob(pattern) if p.is_file())
    if not files:
        logger.warning(f"No files matching {pattern} in {path}")

    for file_path in files:
        report.extend(load_packets(file_path, strict=strict))
    return report
