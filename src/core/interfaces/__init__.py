"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from core.interfaces.network import NetworkProtocol
from core.interfaces.transformer import RequestTransformer

__all__ = ["NetworkProtocol", "RequestTransformer"]
