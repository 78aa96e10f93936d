"""sp_staking REST API: deposit, withdraw and read-only pool views."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request

from src.sp_common.response import ApiResponse, success_response
from src.sp_staking.application.schemas import DepositRequest, WithdrawRequest
from src.sp_staking.application.service import StakingApplicationService, get_staking_service

router = APIRouter(prefix="/pool", tags=["pool"])

Service = Annotated[StakingApplicationService, Depends(get_staking_service)]


@router.post("/deposit")
async def deposit(body: DepositRequest, service: Service, request: Request) -> ApiResponse:
    data = service.deposit(body.staker, body.amount, body.deposit_id)
    return success_response(data.model_dump(), request)


@router.post("/withdraw")
async def withdraw(body: WithdrawRequest, service: Service, request: Request) -> ApiResponse:
    data = service.withdraw(body.staker, body.amount, body.deposit_id)
    return success_response(data.model_dump(), request)


@router.get("/state")
async def get_state(service: Service, request: Request) -> ApiResponse:
    return success_response(service.get_state().model_dump(), request)


@router.get("/users/{staker}")
async def get_user(staker: str, service: Service, request: Request) -> ApiResponse:
    return success_response(service.get_user(staker).model_dump(), request)


@router.get("/users/{staker}/deposits/{deposit_id}/pending-reward")
async def pending_reward(
    staker: str,
    deposit_id: Annotated[int, Path(ge=0)],
    service: Service,
    request: Request,
) -> ApiResponse:
    data = service.pending_reward(staker, deposit_id)
    return success_response(data.model_dump(), request)
