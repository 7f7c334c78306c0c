"""Errors surfaced to callers of PuterHandler.create_message()."""


class ClientNotInitialized(Exception):
    """The gateway client was not ready within the readiness budget."""
    pass


class ClientAcquisitionFailed(ClientNotInitialized):
    """The gateway client could not be loaded or initialized."""
    pass


class GatewayError(Exception):
    """The gateway's streaming call failed before or during iteration."""
    pass
