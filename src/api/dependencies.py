from fastapi import Depends
from src.core.config import get_settings, Settings
from src.solver.forwarder import RequestForwarder


def get_settings_dependency() -> Settings:
    return get_settings()


def get_forwarder(
    settings: Settings = Depends(get_settings_dependency),
) -> RequestForwarder:
    return RequestForwarder(settings=settings)
