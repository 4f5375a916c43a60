# ABOUTME: Base entry model for contributed query fragments
# ABOUTME: Entries are frozen pydantic models tagged by a string kind

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class Entry(BaseModel):
    """
    One contributed, tagged unit of settings/query information.

    Entries are immutable once created. The ``kind`` field is the discriminant
    runners dispatch on; every concrete entry fixes it with a ``Literal`` default.
    Downstream code can add its own kinds by subclassing:

        class TenantFilter(Entry):
            kind: Literal["tenant"] = "tenant"
            tenant_id: str
    """

    kind: str = Field(..., min_length=1, description="Discriminant tag identifying the concrete entry kind")

    model_config = ConfigDict(frozen=True, extra="forbid")

    def payload(self) -> Dict[str, Any]:
        """
        Get the kind-specific fields of this entry.

        Returns:
            Dictionary of every field except ``kind``.
        """
        return self.model_dump(exclude={"kind"})

    def __str__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.payload().items())
        return f"{self.kind}({fields})"
