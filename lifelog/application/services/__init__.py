from .password_hashing import WerkzeugPasswordHasher
from .quotes import QuoteBook
from .session_tokens import JwtSessionTokenCodec

__all__ = ["JwtSessionTokenCodec", "QuoteBook", "WerkzeugPasswordHasher"]
