"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones y los tests
  sustituyen el transporte por un doble.
"""

from core.interfaces.log_sink import LogSink
from core.interfaces.transport import Transport

__all__ = ["LogSink", "Transport"]
