"""
LinkedIn token authentication endpoint.
"""
from fastapi import APIRouter, Request

from ..dependencies import build_inbound_request, outcome_to_response

router = APIRouter()


@router.api_route("/auth/linkedin/token", methods=["GET", "POST"])
async def linkedin_token(request: Request):
    """Authenticate a LinkedIn access token from the body or query"""
    strategy = request.app.state.strategy
    inbound = await build_inbound_request(request)
    outcome = await strategy.authenticate(inbound)
    return outcome_to_response(outcome)
