"""First-launch walkthrough state."""

import logging

from .base_config import ONBOARDING_KEY
from .exceptions import BackendError
from .storage.backends import KeyValueBackend

logger = logging.getLogger(__name__)

# Bump to show the walkthrough again after a major update
ONBOARDING_VERSION = "1"

class OnboardingState:
    def __init__(self, backend: KeyValueBackend, storage_key: str = ONBOARDING_KEY):
        self.backend = backend
        self.storage_key = storage_key

    async def has_completed(self) -> bool:
        try:
            return await self.backend.get(self.storage_key) == ONBOARDING_VERSION
        except BackendError as e:
            logger.error(f"Failed to read onboarding state: {str(e)}", exc_info=True)
            return False

    async def complete(self) -> None:
        await self.backend.set(self.storage_key, ONBOARDING_VERSION)

    async def reset(self) -> None:
        await self.backend.remove(self.storage_key)
