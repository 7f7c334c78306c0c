"""
ApiHandler Protocol - defines the contract a host expects from a provider.

This is the WHAT (interface), not the HOW (implementation).
See puter.py for the concrete implementation.
"""

from typing import AsyncGenerator, Protocol, Sequence, Union

from puter_provider.adapters.schema import ResolvedModel, StreamEvent
from puter_provider.config import Message


class ApiHandler(Protocol):
    """
    Contract for chat providers plugged into the host.

    Implementations must provide:
    - Streaming chat (create_message)
    - Model resolution for display (get_model)
    """

    def create_message(
        self,
        system_prompt: str,
        messages: Sequence[Union[Message, dict]],
    ) -> AsyncGenerator[StreamEvent, None]:
        """
        Stream a reply to the conversation.

        Args:
            system_prompt: System instructions for the model
            messages: Conversation history, oldest first

        Yields:
            TextEvent fragments in delivery order, then at most one UsageEvent

        Raises:
            Exception on provider error (fail loudly, never retract events)
        """
        ...

    def get_model(self) -> ResolvedModel:
        """Return the model id this handler will use and its metadata."""
        ...
