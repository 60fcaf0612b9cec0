from fastapi import APIRouter, HTTPException, Depends, status, Path
from typing import Dict, Any

from ..models.user import User
from ..models.enums import TestStatus
from ..dependencies import get_current_user
from ..services.admin_service import AdminService
from ..services.test_service import TestService
from ..services.test_transformer import normalize_test, to_client_format

router = APIRouter(prefix="/api/v1/tests", tags=["Tests"])


def client_view(test) -> Dict[str, Any]:
    """Flat-only test with every question and task defaulted"""
    return to_client_format(normalize_test(TestService.serialize_test(test)))


@router.get("/")
async def list_tests(current_user: User = Depends(get_current_user)):
    """
    List published public tests in client (flat) format.
    """
    try:
        tests = await TestService.list_tests(
            status=TestStatus.PUBLISHED, public_only=True
        )
        return AdminService.format_response(
            "Tests retrieved successfully",
            data={"tests": [client_view(test) for test in tests]},
        )

    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to retrieve tests: {str(e)}",
        )


@router.get("/{test_id}")
async def get_test(
    test_id: str = Path(..., description="Test ID"),
    current_user: User = Depends(get_current_user),
):
    """
    Get a published test in client (flat) format.
    """
    try:
        test = await TestService.get_test(test_id)
        if not test or test.status != TestStatus.PUBLISHED or not test.is_public:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Test not found"
            )

        return AdminService.format_response(
            "Test retrieved successfully", data={"test": client_view(test)}
        )

    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except HTTPException as e:
        raise e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to retrieve test: {str(e)}",
        )
