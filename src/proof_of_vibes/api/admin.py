"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

if TYPE_CHECKING:
    from proof_of_vibes.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/summary", dependencies=[Depends(require_admin)])
async def summary(request: Request) -> dict[str, object]:
    """Return store counters."""
    container: AppContainer = request.app.state.container
    return container.admin_service.summary()


@router.post("/reset", dependencies=[Depends(require_admin)])
async def reset(request: Request) -> dict[str, object]:
    """Remove user-generated collectibles and session photos."""
    container: AppContainer = request.app.state.container
    return {"success": True, **container.admin_service.reset()}
