"""sp_ledger REST API: balances are public, minting needs the admin key."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.sp_common.enums import TokenKind
from src.sp_common.response import ApiResponse, success_response
from src.sp_gateway.auth.dependencies import require_admin
from src.sp_ledger.application.schemas import BalanceResponse, MintRequest, SupplyResponse
from src.sp_staking.application.service import StakingApplicationService, get_staking_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ledger", tags=["ledger"])

Service = Annotated[StakingApplicationService, Depends(get_staking_service)]


@router.get("/{token}")
async def get_supply(token: TokenKind, service: Service, request: Request) -> ApiResponse:
    data = SupplyResponse.from_ledger(token, service.ledger_for(token))
    return success_response(data.model_dump(), request)


@router.get("/{token}/balances/{account}")
async def get_balance(
    token: TokenKind, account: str, service: Service, request: Request
) -> ApiResponse:
    data = BalanceResponse.from_ledger(token, service.ledger_for(token), account)
    return success_response(data.model_dump(), request)


@router.post("/{token}/mint", dependencies=[Depends(require_admin)])
async def mint(
    token: TokenKind, body: MintRequest, service: Service, request: Request
) -> ApiResponse:
    ledger = service.ledger_for(token)
    ledger.mint(body.account, body.amount)
    logger.info("Admin minted %s %s to %s", body.amount, token.value, body.account)
    data = BalanceResponse.from_ledger(token, ledger, body.account)
    return success_response(data.model_dump(), request)
