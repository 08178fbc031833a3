from slowapi import Limiter
from slowapi.util import get_remote_address

# Per-IP; multi-instance deployments need a shared storage backend
limiter = Limiter(key_func=get_remote_address)
