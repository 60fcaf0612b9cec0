"""
Test management endpoints for the admin panel
"""

from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import Optional, Dict, Any

from ...models.user import User
from ...models.enums import TestStatus
from ...models.admin_action import ActionType
from ...dependencies import admin_required
from ...services.admin_service import AdminService
from ...services.test_service import TestService
from ...services.test_transformer import to_admin_format
from .schemas import TestCreateRequest, TestUpdateRequest, TestStatusUpdateRequest

router = APIRouter(prefix="/tests", tags=["Admin - Tests"])


def _admin_view(test) -> Dict[str, Any]:
    return to_admin_format(TestService.serialize_test(test))


@router.get(
    "/",
    response_model=Dict[str, Any],
    summary="List tests",
    description="Admin endpoint to list every test, optionally filtered by status",
)
async def list_tests(
    test_status: Optional[TestStatus] = Query(
        None, alias="status", description="Filter by status"
    ),
    current_user: User = Depends(admin_required),
):
    """List tests in admin format (Admin only)"""
    try:
        tests = await TestService.list_tests(status=test_status)
        return AdminService.format_response(
            "Tests retrieved successfully",
            data={"tests": [_admin_view(test) for test in tests]},
        )
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch tests: {str(e)}",
        )


@router.get(
    "/stats",
    response_model=Dict[str, Any],
    summary="Test statistics",
    description="Counts of tests per status and per skill",
)
async def get_test_stats(current_user: User = Depends(admin_required)):
    try:
        stats = await TestService.get_test_stats()
        return AdminService.format_response(
            "Test statistics retrieved successfully", data=stats
        )
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch test statistics: {str(e)}",
        )


@router.get(
    "/{test_id}",
    response_model=Dict[str, Any],
    summary="Get test details",
)
async def get_test(
    test_id: str,
    current_user: User = Depends(admin_required),
):
    """Get a test in admin (nested) format (Admin only)"""
    try:
        test = await TestService.get_test(test_id)
        if not test:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Test not found",
            )

        return AdminService.format_response(
            "Test retrieved successfully", data={"test": _admin_view(test)}
        )

    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except HTTPException as e:
        raise e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch test: {str(e)}",
        )


@router.post(
    "/",
    response_model=Dict[str, Any],
    status_code=status.HTTP_201_CREATED,
    summary="Create test",
)
async def create_test(
    test_data: TestCreateRequest,
    current_user: User = Depends(admin_required),
):
    """Create a test (Admin only)"""
    try:
        payload = test_data.model_dump(mode="json", exclude_unset=True)
        test = await TestService.create_test(payload, current_user)

        await AdminService.log_admin_action(
            str(current_user.id),
            ActionType.CREATE,
            "tests",
            str(test.id),
            {},
            target_title=test.title,
            changed_fields=list(payload),
        )

        return AdminService.format_response(
            "Test created successfully", data={"test": _admin_view(test)}
        )

    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create test: {str(e)}",
        )


@router.put(
    "/{test_id}",
    response_model=Dict[str, Any],
    summary="Update test",
)
async def update_test(
    test_id: str,
    test_data: TestUpdateRequest,
    current_user: User = Depends(admin_required),
):
    """Update a test (Admin only)"""
    try:
        changes = test_data.model_dump(mode="json", exclude_unset=True)
        test = await TestService.update_test(test_id, changes, current_user)
        if not test:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Test not found",
            )

        await AdminService.log_admin_action(
            str(current_user.id),
            ActionType.UPDATE,
            "tests",
            test_id,
            {},
            target_title=test.title,
            changed_fields=list(changes),
        )

        return AdminService.format_response(
            "Test updated successfully", data={"test": _admin_view(test)}
        )

    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except HTTPException as e:
        raise e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update test: {str(e)}",
        )


@router.delete(
    "/{test_id}",
    response_model=Dict[str, Any],
    summary="Delete test",
)
async def delete_test(
    test_id: str,
    current_user: User = Depends(admin_required),
):
    """Delete a test permanently (Admin only)"""
    try:
        deleted = await TestService.delete_test(test_id)
        if not deleted:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Test not found",
            )

        await AdminService.log_admin_action(
            str(current_user.id), ActionType.DELETE, "tests", test_id, {}
        )

        return AdminService.format_response(
            "Test deleted successfully", test_id=test_id
        )

    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except HTTPException as e:
        raise e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete test: {str(e)}",
        )


@router.post(
    "/{test_id}/duplicate",
    response_model=Dict[str, Any],
    status_code=status.HTTP_201_CREATED,
    summary="Duplicate test",
)
async def duplicate_test(
    test_id: str,
    current_user: User = Depends(admin_required),
):
    try:
        test = await TestService.duplicate_test(test_id, current_user)
        if not test:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Test not found",
            )

        await AdminService.log_admin_action(
            str(current_user.id),
            ActionType.DUPLICATE,
            "tests",
            str(test.id),
            {"duplicated_from": test_id},
            target_title=test.title,
        )

        return AdminService.format_response(
            "Test duplicated successfully", data={"test": _admin_view(test)}
        )

    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except HTTPException as e:
        raise e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to duplicate test: {str(e)}",
        )


@router.patch(
    "/{test_id}/status",
    response_model=Dict[str, Any],
    summary="Change test status",
)
async def change_test_status(
    test_id: str,
    status_data: TestStatusUpdateRequest,
    current_user: User = Depends(admin_required),
):
    try:
        new_status = status_data.status.value
        test = await TestService.change_status(test_id, new_status, current_user)
        if not test:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Test not found",
            )

        await AdminService.log_admin_action(
            str(current_user.id),
            ActionType.STATUS_CHANGE,
            "tests",
            test_id,
            {"status": new_status},
            target_title=test.title,
            changed_fields=["status"],
        )

        return AdminService.format_response(
            f"Test {new_status} successfully", data={"test": _admin_view(test)}
        )

    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except HTTPException as e:
        raise e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to change test status: {str(e)}",
        )
