"""Agent endpoints."""
from fastapi import APIRouter, Depends
from agencydash.api.deps import get_store
from agencydash.api.schemas.agents import AgentCommissionList
from agencydash.infra.store.base import RemoteStore
from agencydash.services.commission_service import CommissionService

router = APIRouter(prefix="/agents", tags=["agents"])


@router.get("/commissions", response_model=AgentCommissionList)
async def list_commissions(store: RemoteStore = Depends(get_store)) -> AgentCommissionList:
    items = await CommissionService(store).calculate()
    return AgentCommissionList(items=items, total=len(items))
