from .fixtures import run_service

__all__ = ["run_service"]
