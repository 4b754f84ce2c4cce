from econsim.presentation.api.routers.banks import router as banks_router

__all__ = [
    "banks_router",
]
