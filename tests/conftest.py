from pathlib import Path

from dotenv import load_dotenv
from pytest import fixture

from stampmint.services import StampMint
from stampmint.settings import Settings

# Load test env variables.
load_dotenv(Path(__file__).with_name(".env.test"))

PRIVATE_KEY = "aaaaaaaaaabbbbbbbbbbccccccccccdddddddddd"
NOW = 1_700_000_000


class FixedClock:
    """Clock that stays at `now` until moved."""

    def __init__(self, now: int = NOW) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


@fixture
def clock() -> FixedClock:
    return FixedClock()


@fixture
def mint(clock: FixedClock) -> StampMint:
    """Create a token mint with the default 30 second delay."""
    return StampMint(
        settings=Settings(private_key=PRIVATE_KEY, bcrypt_rounds=4),
        clock=clock,
    )


@fixture
def unbounded_mint(clock: FixedClock) -> StampMint:
    """Create a token mint without a freshness check."""
    return StampMint(
        settings=Settings(private_key=PRIVATE_KEY, delay=None, bcrypt_rounds=4),
        clock=clock,
    )


@fixture
def environ_mint(clock: FixedClock) -> StampMint:
    """Create a token mint from the loaded environment."""
    return StampMint.from_environ(clock=clock)
