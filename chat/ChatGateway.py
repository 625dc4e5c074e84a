# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: ChatGateway
# -----------------------------------------------------------------------------

from typing import Dict, List, Protocol, runtime_checkable

from utility.gateway_result import GatewayResult

Message = Dict[str, str]  # {"role": "system"|"user"|"assistant", "content": "..."}


@runtime_checkable
class ChatGateway(Protocol):
    """Message sequence -> first generated text segment."""

    async def complete(self, messages: List[Message]) -> GatewayResult[str]:
        ...
