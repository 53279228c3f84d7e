"""
Health advice callback - the external advisor posts its results here.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from ..models import HealthAdvice, Principal
from ..utils.auth import get_current_principal

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/advice", tags=["advice"])


@router.post("")
async def provide_health_advice_callback(
    health_advice: List[HealthAdvice],
    principal: Principal = Depends(get_current_principal)
):
    """Log each advice item received from the advisor."""
    logger.info(
        f"Advice callback from {principal.username} with {len(health_advice)} item(s)",
        extra={"extra_fields": {"caller": principal.username, "roles": sorted(principal.roles)}}
    )
    for advice in health_advice:
        logger.info(
            f"Advice for: {advice.username} Advice text: {advice.advice}",
            extra={"extra_fields": {"username": advice.username}}
        )
    return Response(status_code=status.HTTP_200_OK)
