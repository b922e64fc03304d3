from fastapi import APIRouter, Depends

from ai_gateway.core.settings import Settings, get_settings

router = APIRouter()


@router.get("/")
def root_health_check(settings: Settings = Depends(get_settings)) -> dict[str, str]:
    return {"status": "running", "service": settings.app_name}


@router.get("/health")
def health_check() -> dict[str, str]:
    return {"status": "ok"}
