import typing as t

from fastapi import APIRouter, Depends, HTTPException, status

from core.auth import get_current_session, get_optional_session
from core.session import UserSession
from db.schemas.campaigns import CampaignBasics, CampaignBeneficiary, CampaignDraft
from utils.logger import logger, myself

campaigns_router = r = APIRouter()


@r.post("/start/basics", response_model=CampaignDraft, name="campaigns:start-basics")
async def start_basics(
    basics: CampaignBasics,
    session: t.Optional[UserSession] = Depends(get_optional_session),
):
    """
    Step 1 of 4: where the fundraiser is and what it is for
    """
    draft = CampaignDraft(**basics.model_dump(), step=2)
    if session is not None:
        session.campaign = draft
    return draft


@r.post("/start/beneficiary", response_model=CampaignDraft, name="campaigns:start-beneficiary")
async def start_beneficiary(
    beneficiary: CampaignBeneficiary,
    session: UserSession = Depends(get_current_session),
):
    """
    Step 2 of 4: who the money is for; needs a signed-in user
    """
    if beneficiary.basics is not None:
        basics = beneficiary.basics
    elif session.campaign is not None:
        basics = session.campaign
    else:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Complete the campaign basics first",
        )

    draft = CampaignDraft(
        country=basics.country,
        zipCode=basics.zipCode,
        category=basics.category,
        beneficiary=beneficiary.beneficiary,
        step=3,
    )
    session.campaign = draft
    logger.info(f'{myself()}: {session.user.email} started a {draft.category} campaign')
    return draft


@r.get("/start", response_model=CampaignDraft, name="campaigns:start-draft")
async def start_draft(session: UserSession = Depends(get_current_session)):
    if session.campaign is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="no campaign in progress")
    return session.campaign
