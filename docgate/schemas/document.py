"""Gateway response bodies."""

from pydantic import BaseModel


class StatusMessage(BaseModel):
    """{"msg": ...} envelope used by every non-document response."""
    msg: str

    @classmethod
    def for_count(cls, count: int) -> "StatusMessage":
        """success iff exactly one document was matched or deleted."""
        return cls(msg="success" if count == 1 else "error")
