"""ListPatch DTOs for PATCH /lists/{list_id} on the directory."""

from pydantic import BaseModel, Field

# Field on ListPatch -> path of the route serving it
ROUTE_PATHS = {
    "claim_bot_api": "/claim",
    "unclaim_bot_api": "/unclaim",
    "approve_bot_api": "/approve",
    "deny_bot_api": "/deny",
    "data_request_api": "/data-request",
    "data_deletion_api": "/data-delete",
}


class ListPatch(BaseModel):
    """
    Partial update of a list on the directory.

    Unset fields are left out of the payload (see ``to_payload``), so the
    directory only touches what is sent.
    """

    name: str | None = None
    description: str | None = None
    domain: str | None = None
    claim_bot_api: str | None = None
    unclaim_bot_api: str | None = None
    approve_bot_api: str | None = None
    deny_bot_api: str | None = None
    data_request_api: str | None = None
    data_deletion_api: str | None = None
    reset_secret_key: bool | None = None
    icon: str | None = None

    @classmethod
    def for_domain(cls, domain: str) -> "ListPatch":
        """Patch announcing every webhook route served under ``domain``."""
        base = domain.rstrip("/")
        return cls(**{field: base + path for field, path in ROUTE_PATHS.items()})

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)


class ListPatchResponse(BaseModel):
    has_updated: list[str] = Field(default_factory=list)
    # Only present when reset_secret_key was requested
    secret_key: str | None = None
