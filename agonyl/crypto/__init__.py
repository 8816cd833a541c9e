from .cipher562 import BLOCK_SIZE, OFFSET, Crypto562

__all__ = ["BLOCK_SIZE", "OFFSET", "Crypto562"]
