from fastapi import APIRouter

from filegate.interfaces.api.schemas import ApiResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=ApiResponse)
def health() -> ApiResponse:
    return ApiResponse(message="Server is running")
