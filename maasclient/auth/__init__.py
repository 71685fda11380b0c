from .oauth1 import Credential, OAuth1Auth, OAuth1Signer, build_auth_header
from .refresher import HeaderRefresher, RefreshingAuth

__all__ = [
    "Credential",
    "OAuth1Auth",
    "OAuth1Signer",
    "build_auth_header",
    "HeaderRefresher",
    "RefreshingAuth",
]
