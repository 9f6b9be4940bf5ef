"""
Module Accounts — фиксированные адреса модульных аккаунтов

Адрес модуля = первые 20 байт SHA-256 от имени модуля (hex, нижний регистр).
Вычисляются один раз при импорте и далее не изменяются.
"""

import hashlib
from typing import Final

# =============================================================================
# ИМЕНА МОДУЛЕЙ
# =============================================================================

FEE_COLLECTOR_NAME: Final[str] = "fee_collector"
DISTRIBUTION_MODULE_NAME: Final[str] = "distribution"
STAKING_MODULE_NAME: Final[str] = "staking"
BONDED_POOL_NAME: Final[str] = "bonded_tokens_pool"
NOT_BONDED_POOL_NAME: Final[str] = "not_bonded_tokens_pool"

# Длина адреса в байтах
ADDRESS_LENGTH: Final[int] = 20


def module_address(name: str) -> str:
    """
    Детерминированный адрес модульного аккаунта.

    Args:
        name: Имя модуля (непустое)

    Returns:
        Hex-строка из ADDRESS_LENGTH байт

    Examples:
        >>> len(module_address("staking"))
        40
    """
    if not name:
        raise ValueError("module name cannot be empty")
    return hashlib.sha256(name.encode("utf-8")).digest()[:ADDRESS_LENGTH].hex()


# =============================================================================
# АДРЕСА (вычисляются при импорте)
# =============================================================================

FEE_COLLECTOR: Final[str] = module_address(FEE_COLLECTOR_NAME)
DISTRIBUTOR: Final[str] = module_address(DISTRIBUTION_MODULE_NAME)
STAKING_ACCOUNT: Final[str] = module_address(STAKING_MODULE_NAME)
BONDED_POOL: Final[str] = module_address(BONDED_POOL_NAME)
NOT_BONDED_POOL: Final[str] = module_address(NOT_BONDED_POOL_NAME)
