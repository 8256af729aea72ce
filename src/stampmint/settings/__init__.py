from ._settings import DEFAULT_BCRYPT_ROUNDS, DEFAULT_DELAY, Settings

__all__ = ["DEFAULT_BCRYPT_ROUNDS", "DEFAULT_DELAY", "Settings"]
