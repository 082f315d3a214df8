"""
Filfox Network Configuration
"""
import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from .exceptions import ConfigError


@dataclass(frozen=True)
class NetworkConfig:
    """Endpoints for one Filecoin network"""
    chain_id: int
    name: str
    verify_url: str
    explorer_url: str


FILECOIN_MAINNET = NetworkConfig(
    chain_id=314,
    name="Filecoin Mainnet",
    verify_url="https://filfox.info/api/v1/tools/verifyContract",
    explorer_url="https://filfox.info/en/address/",
)

FILECOIN_CALIBRATION = NetworkConfig(
    chain_id=314159,
    name="Filecoin Calibration Testnet",
    verify_url="https://calibration.filfox.info/api/v1/tools/verifyContract",
    explorer_url="https://calibration.filfox.info/en/address/",
)

FILFOX_NETWORKS: Mapping[int, NetworkConfig] = MappingProxyType({
    FILECOIN_MAINNET.chain_id: FILECOIN_MAINNET,
    FILECOIN_CALIBRATION.chain_id: FILECOIN_CALIBRATION,
})

# Unset means the transport default (no timeout)
_timeout = os.getenv('FILFOX_TIMEOUT')
FILFOX_TIMEOUT: Optional[float] = float(_timeout) if _timeout else None

DEFAULT_CHAIN_ID = os.getenv('FILFOX_CHAIN_ID', '')


def get_network_config(chain_id, networks: Mapping[int, NetworkConfig] = FILFOX_NETWORKS) -> NetworkConfig:
    """Look up the network for a chain id, accepting ints or numeric strings"""
    try:
        key = int(chain_id)
    except (TypeError, ValueError):
        raise ConfigError(f"Unsupported chain ID: {chain_id}")

    network = networks.get(key)
    if network is None:
        raise ConfigError(f"Unsupported chain ID: {chain_id}")
    return network
