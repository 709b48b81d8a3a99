"""Session API Routes"""

from fastapi import APIRouter, Depends

from src.app.use_cases.tenants.dtos import ActorDTO, ActorResponseDTO
from src.depends import get_current_actor

router = APIRouter(tags=["Session"])


@router.get("/me", response_model=ActorResponseDTO)
async def get_me(actor: ActorDTO = Depends(get_current_actor)):
    """The signed-in actor with the display name derived from the email."""
    return ActorResponseDTO.from_actor(actor)
