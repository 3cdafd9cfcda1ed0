"""REST client for the Alpaca trading and market data APIs."""

from .client import Client, StopLossParams, TakeProfitParams
from .transport import RestTransport, encode_params

__all__ = [
    "Client",
    "RestTransport",
    "StopLossParams",
    "TakeProfitParams",
    "encode_params",
]
