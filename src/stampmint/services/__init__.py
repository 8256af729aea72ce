from ._stamp_mint import StampMint

__all__ = ["StampMint"]
