"""Infrastructure adapters - Implementations of application ports."""

from .vision import GatewayConfig, GatewayLabelReader

__all__ = [
    "GatewayConfig",
    "GatewayLabelReader",
]
