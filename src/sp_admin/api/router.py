"""Admin REST API. Every route requires the X-Admin-Key header."""
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from src.sp_admin.application.service import AdminService
from src.sp_common.response import ApiResponse, success_response
from src.sp_gateway.auth.dependencies import require_admin
from src.sp_staking.application.service import StakingApplicationService, get_staking_service

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


def get_admin_service(
    staking: Annotated[StakingApplicationService, Depends(get_staking_service)],
) -> AdminService:
    return AdminService(staking)


Admin = Annotated[AdminService, Depends(get_admin_service)]


class PauseRequest(BaseModel):
    paused: bool


class RewardTopUpRequest(BaseModel):
    amount: float = Field(..., gt=0)


@router.post("/pause")
async def pause(body: PauseRequest, admin: Admin, request: Request) -> ApiResponse:
    return success_response(admin.set_paused(body.paused), request)


@router.post("/reward-tokens")
async def add_reward_tokens(
    body: RewardTopUpRequest, admin: Admin, request: Request
) -> ApiResponse:
    return success_response(admin.add_reward_tokens(body.amount), request)


@router.get("/invariants")
async def check_invariants(admin: Admin, request: Request) -> ApiResponse:
    return success_response(admin.check_invariants(), request)
