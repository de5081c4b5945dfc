"""Oracle price-feed wrappers.

Public API:
  - dia: DiaOracle
  - pyth: PythHermes, PythPrice
"""

from currency_core.datasources.oracles.dia import DiaOracle
from currency_core.datasources.oracles.pyth import PythHermes, PythPrice

__all__ = [
    "DiaOracle",
    "PythHermes",
    "PythPrice",
]
