"""Small interactive console exercises and the functions behind them."""

__version__ = "0.1.0"