import os
from typing import ClassVar


class Account:
    '''API credentials, falling back to OKEX_API_KEY, OKEX_API_SECRET and OKEX_API_PASSPHRASE env vars'''
    ENV_PREFIX: ClassVar[str] = 'OKEX'
    _num: ClassVar[int] = 0

    @classmethod
    def _next_account_id(cls):
        cls._num += 1
        return str(cls._num)

    def __init__(self, key: str='', secret: str='', passphrase: str='', name: str=''):
        self.name = name or f'{self.__class__.__name__}-{self._next_account_id()}'
        self._key = key or os.getenv(f'{self.ENV_PREFIX}_API_KEY', '')
        self._secret = secret or os.getenv(f'{self.ENV_PREFIX}_API_SECRET', '')
        self._passphrase = passphrase or os.getenv(f'{self.ENV_PREFIX}_API_PASSPHRASE', '')

    @property
    def key(self) -> str:
        return self._key

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def passphrase(self) -> str:
        return self._passphrase

    @property
    def has_credentials(self) -> bool:
        return bool(self._key and self._secret and self._passphrase)

    def __repr__(self):
        masked_key = f'{self._key[:4]}***' if self._key else ''
        return f'{self.__class__.__name__}(name={self.name}, key={masked_key})'

    def __eq__(self, other):
        if not isinstance(other, Account):
            return NotImplemented
        return (self.name, self._key) == (other.name, other._key)

    def __hash__(self):
        return hash((self.name, self._key))
