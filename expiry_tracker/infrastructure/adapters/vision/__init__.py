"""Vision adapter for reading product labels."""

from .gateway import GatewayConfig, GatewayLabelReader

__all__ = [
    "GatewayConfig",
    "GatewayLabelReader",
]
