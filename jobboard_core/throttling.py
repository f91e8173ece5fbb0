import math

from rest_framework.exceptions import Throttled
from rest_framework.throttling import SimpleRateThrottle

_PERIODS = {'s': 1, 'm': 60, 'h': 3600, 'd': 86400}


class AuthRateThrottle(SimpleRateThrottle):
    """
    Per-IP limit shared by the login and register endpoints.
    Accepts rates such as "10/15m" as well as DRF's "10/min".
    """
    scope = 'auth'

    def get_cache_key(self, request, view):
        return self.cache_format % {
            'scope': self.scope,
            'ident': self.get_ident(request),
        }

    def parse_rate(self, rate):
        if rate is None:
            return (None, None)
        num, period = rate.split('/')
        multiplier = ''.join(ch for ch in period if ch.isdigit()) or '1'
        unit = period.lstrip('0123456789')[:1]
        return (int(num), int(multiplier) * _PERIODS[unit])


class AuthThrottled(Throttled):
    """
    429 for the auth endpoints. The wait goes into Retry-After only, so the
    message stays fixed.
    """
    default_detail = "Too many authentication attempts, please try again later."

    def __init__(self, wait=None, detail=None, code=None):
        super().__init__(detail=detail, code=code)
        self.wait = math.ceil(wait) if wait is not None else None
