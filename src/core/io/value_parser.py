import math
import numbers
import re
from typing import Any, Optional, Union

import numpy as np

Number = Union[int, float]

# Apenas literais decimais ASCII: "1_000", "0x10" e dígitos Unicode ficam de fora
DECIMAL_LITERAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

def parse_value(raw: Any) -> Optional[Number]:
    """
    Converte a entrada do usuário (texto ou número) para um valor numérico finito.
    Retorna None quando a entrada é vazia, não numérica, NaN ou infinita.
    Nunca lança exceção: a rejeição é silenciosa.
    """
    if raw is None or isinstance(raw, (bool, np.bool_)):
        return None

    if isinstance(raw, numbers.Real):
        return _finite_or_none(raw)

    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(raw, str):
        return _parse_text(raw)

    return None

def _parse_text(text: str) -> Optional[Number]:
    text = text.strip()
    if not DECIMAL_LITERAL.fullmatch(text):
        return None

    # Inteiros permanecem inteiros ("42" -> 42, não 42.0)
    try:
        return int(text)
    except ValueError:
        pass

    try:
        return _finite_or_none(float(text))
    except ValueError:
        return None

def _finite_or_none(value: numbers.Real) -> Optional[Number]:
    # Escalares numpy viram tipos nativos do Python
    if isinstance(value, np.generic):
        value = value.item()

    if isinstance(value, numbers.Integral):
        return int(value)

    try:
        value = float(value)
    except (TypeError, ValueError, OverflowError):
        return None

    if not math.isfinite(value):
        return None
    return value
