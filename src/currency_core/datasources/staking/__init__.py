"""Staking protocol wrappers.

Public API:
  - lido: LidoAPI
"""

from currency_core.datasources.staking.lido import LidoAPI

__all__ = ["LidoAPI"]
