"""
Domain Interfaces (Ports)
"""

from .clients import ACHGatewayClient

__all__ = [
    "ACHGatewayClient",
]
