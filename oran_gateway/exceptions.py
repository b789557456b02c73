class GatewayError(Exception):
    """Base class for errors raised inside the gateway."""


class InferenceNotConfiguredError(GatewayError):
    def __init__(self, detail: str = "CLOUDFLARE_ACCOUNT_ID and CLOUDFLARE_API_TOKEN must be set"):
        super().__init__(detail)


class PromptNotFoundError(GatewayError):
    pass
