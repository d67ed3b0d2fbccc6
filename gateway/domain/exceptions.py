"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class TenantNotFoundError(Exception):
    """Raised when a tenant ref is missing, disabled, or not configured.

    Rendered exactly like an unknown route so callers cannot probe for
    the multi-tenant feature.
    """

    def __init__(self, ref: str | None = None):
        self.ref = ref
        super().__init__("Not Found")


class InvalidRequestError(Exception):
    """Raised when input passes schema validation but is still unusable."""


class UpstreamAuthError(Exception):
    """Raised when the identity provider refuses to issue an access token."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Token request failed: {status_code} - {body}")


class UpstreamRequestError(Exception):
    """Raised when an upstream API (identity provider, calendar) returns an error.

    Provider-agnostic — ``provider`` names the upstream for log lines.
    """

    def __init__(self, provider: str, status_code: int, body: str):
        self.provider = provider
        self.status_code = status_code
        self.body = body
        super().__init__(f"[{provider}] request failed: {status_code} - {body}")


class SlotUnavailableError(Exception):
    """Raised when a calendar slot already has overlapping events."""

    def __init__(self, calendar_id: str, conflicting_events: list[dict]):
        self.calendar_id = calendar_id
        self.conflicting_events = conflicting_events
        super().__init__("Slot busy")
