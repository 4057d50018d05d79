"""
Ledger key service — key generation and lifecycle.

A key is 32 bytes from the secrets module, stored base64 encoded.
Rotation replaces the key material and nothing else;
deactivation is one-way.

"Active" and "expired" are not complements: an inactive key that
has not expired yet is neither.
"""

import base64
import logging
import secrets

from ledgerx.clock import Clock, as_naive_utc, utcnow
from ledgerx.exceptions import ValidationError
from ledgerx.models.base import new_id
from ledgerx.models.ledger_key import LedgerKey
from ledgerx.repositories.base import LedgerStore
from ledgerx.schemas.ledger_key import LedgerKeyCreate

logger = logging.getLogger(__name__)

KEY_SIZE_BYTES = 32


def generate_encryption_key() -> str:
    """Fresh random key material, base64 encoded."""
    return base64.b64encode(secrets.token_bytes(KEY_SIZE_BYTES)).decode("ascii")


class LedgerKeyService:

    def __init__(self, store: LedgerStore, clock: Clock = utcnow):
        self.store = store
        self.keys = store.ledger_keys
        self.clock = clock

    def get_all_keys(self) -> list[LedgerKey]:
        logger.info("Retrieving all ledger keys")
        return self.keys.get_all()

    def get_key(self, key_id: str) -> LedgerKey | None:
        if not key_id or not key_id.strip():
            logger.warning("get_key called with empty id")
            return None

        key = self.keys.get_by_id(key_id)
        if key is None:
            logger.warning("Ledger key with id %s not found", key_id)
        return key

    def get_active_keys(self) -> list[LedgerKey]:
        logger.info("Retrieving active ledger keys")
        return self.keys.get_active(self.clock())

    def get_expired_keys(self) -> list[LedgerKey]:
        logger.info("Retrieving expired ledger keys")
        return self.keys.get_expired(self.clock())

    def create_key(self, request: LedgerKeyCreate) -> LedgerKey:
        """
        Generate and store a new active key.

        Raises ValidationError if the name is blank or the expiry
        is not strictly in the future.
        """
        if not request.key_name.strip():
            raise ValidationError("Key name is required")

        now = self.clock()
        expires_at = as_naive_utc(request.expires_at)
        if expires_at is not None and expires_at <= now:
            raise ValidationError("Expiration date must be in the future")

        key = LedgerKey(
            id=new_id(),
            key_name=request.key_name,
            encryption_key=generate_encryption_key(),
            created_at=now,
            expires_at=expires_at,
            is_active=True,
        )
        key = self.keys.add(key)
        logger.info("Ledger key created with id %s", key.id)
        return key

    def rotate_key(self, key_id: str) -> LedgerKey | None:
        key = self.keys.get_by_id(key_id)
        if key is None:
            logger.warning("Cannot rotate: ledger key %s not found", key_id)
            return None

        key.encryption_key = generate_encryption_key()
        key = self.keys.update(key)
        logger.info("Ledger key %s rotated", key_id)
        return key

    def deactivate_key(self, key_id: str) -> LedgerKey | None:
        key = self.keys.get_by_id(key_id)
        if key is None:
            logger.warning("Cannot deactivate: ledger key %s not found", key_id)
            return None

        key.is_active = False
        key = self.keys.update(key)
        logger.info("Ledger key %s deactivated", key_id)
        return key

    def delete_key(self, key_id: str) -> bool:
        if not self.keys.exists(key_id):
            logger.warning("Cannot delete: ledger key %s not found", key_id)
            return False

        deleted = self.keys.delete(key_id)
        if deleted:
            logger.info("Ledger key %s deleted", key_id)
        return deleted
