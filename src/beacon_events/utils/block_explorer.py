"""Block-explorer link resolution for success toasts."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from beacon_events.types import Network, NetworkType

if TYPE_CHECKING:
    from beacon_events.config.settings import BlockExplorerSettings


class BlockExplorer(abc.ABC):
    """Resolves a transaction hash to a browsable URL."""

    @abc.abstractmethod
    async def get_transaction_link(self, transaction_id: str, network: Network) -> str:
        """Return the explorer URL for *transaction_id* on *network*."""


class TemplateBlockExplorer(BlockExplorer):
    """Explorer at ``{base_url}/{transaction_id}``, one base URL per network type.

    Custom networks have no explorer of their own and fall back to mainnet.
    """

    def __init__(self, urls: dict[NetworkType, str]) -> None:
        if NetworkType.MAINNET not in urls:
            msg = "A mainnet explorer URL is required"
            raise ValueError(msg)
        self._urls = {k: v.rstrip("/") for k, v in urls.items()}

    @classmethod
    def from_settings(cls, settings: BlockExplorerSettings) -> TemplateBlockExplorer:
        return cls({NetworkType.MAINNET: settings.mainnet, NetworkType.TESTNET: settings.testnet})

    async def get_transaction_link(self, transaction_id: str, network: Network) -> str:
        base = self._urls.get(network.type, self._urls[NetworkType.MAINNET])
        return f"{base}/{transaction_id}"
