from __future__ import annotations

from fastapi import HTTPException, Request, status

from careguide.knowledge.base import KnowledgeBase
from careguide.utils.rate_limit import InMemorySlidingWindowLimiter


def get_kb(request: Request) -> KnowledgeBase:
    return request.app.state.knowledge_base


def _client_key(request: Request) -> str:
    """
    The peer address, or the nearest untrusted hop in X-Forwarded-For when the
    peer is one of the configured trusted proxies.
    """
    peer = request.client.host if request.client else "anonymous"
    trusted = request.app.state.settings.trusted_proxies
    if peer not in trusted:
        return peer

    hops = [hop.strip() for hop in request.headers.get("x-forwarded-for", "").split(",") if hop.strip()]
    for hop in reversed(hops):
        if hop not in trusted:
            return hop
    return peer


def enforce_rate_limit(request: Request) -> None:
    limiter: InMemorySlidingWindowLimiter = request.app.state.limiter
    allowed, retry_after = limiter.check(_client_key(request))
    if not allowed:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=f"Rate limit exceeded. Try again in {retry_after}s.",
            headers={"Retry-After": str(retry_after)},
        )
