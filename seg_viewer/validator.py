"""Validation of untyped packet payloads into PacketInfo records."""
from typing import Any, List, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from seg_viewer.models import PacketInfo

ROOT_FIELD = "<root>"


class Violation(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: Tuple[Union[str, int], ...]
    reason: str

    @property
    def field(self) -> str:
        if not self.path:
            return ROOT_FIELD
        return ".".join(str(part) for part in self.path)

    def __str__(self) -> str:
        return f"{self.field}: {self.reason}"


class Success(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    packet: PacketInfo


class Failure(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    violations: List[Violation]


ValidationResult = Union[Success, Failure]


def _to_failure(exc: ValidationError) -> Failure:
    violations = [
        Violation(path=tuple(error["loc"]), reason=error["msg"])
        for error in exc.errors(include_url=False)
    ]
    return Failure(violations=violations)


def validate(data: Any) -> ValidationResult:
    """Check ``data`` against the packet contract, collecting every violation."""
    try:
        packet = PacketInfo.model_validate(data)
    except ValidationError as exc:
        return _to_failure(exc)
    return Success(packet=packet)


def validate_json(raw: Union[str, bytes]) -> ValidationResult:
    """Same as :func:`validate` for a single raw JSON document."""
    try:
        packet = PacketInfo.model_validate_json(raw)
    except ValidationError as exc:
        return _to_failure(exc)
    return Success(packet=packet)
