from dataclasses import dataclass
from typing import Optional

from egyptid.models.national_id import ExtractedInfo


@dataclass(frozen=True)
class DecodeResult:
    """
    Tagged outcome of a decode: exactly one of `info` or
    (`error_kind`, `error_message`) is set.
    """
    info: Optional[ExtractedInfo] = None
    error_kind: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.info is not None

    @classmethod
    def success(cls, info: ExtractedInfo) -> "DecodeResult":
        return cls(info=info)

    @classmethod
    def failure(cls, kind: str, message: str) -> "DecodeResult":
        return cls(error_kind=kind, error_message=message)

    def to_dict(self) -> dict:
        if self.ok:
            return {"ok": True, "info": self.info.to_dict()}
        return {
            "ok": False,
            "error": {"kind": self.error_kind, "message": self.error_message},
        }
