"""dateserial Encoder."""

from .serial_encoder import BudgetHook, PaddingMode, SerialEncoder, encode

__all__ = ['BudgetHook', 'PaddingMode', 'SerialEncoder', 'encode']
