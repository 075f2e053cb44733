"""Custom exception types for domain and API layers."""


class GatewayError(Exception):
    """Base app exception."""


class ClientError(GatewayError):
    """Caller fault: malformed or missing input. Rendered as HTTP 400."""

    status_code = 400

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class UnknownPlanError(ClientError):
    """Plan identifier outside the supported set."""

    def __init__(self, plan_id: str):
        super().__init__(f"Unknown plan_id: {plan_id}")
        self.plan_id = plan_id


class StoreError(GatewayError):
    """Database insert or select failure."""
