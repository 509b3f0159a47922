import pytest
from fastapi import HTTPException
from pydantic import ValidationError

from api.v1.routes.campaigns import start_basics, start_beneficiary, start_draft
from db.schemas.campaigns import CampaignBasics, CampaignBeneficiary
from db.schemas.users import User


def basics(**overrides):
    fields = dict(country='Sri Lanka', zipCode='20000', category='Medical')
    fields.update(overrides)
    return CampaignBasics(**fields)


@pytest.fixture
def session(sessions):
    return sessions.create(User(id='u1', email='priya@example.com', name='Priya'))


def test_basics_are_required():
    with pytest.raises(ValidationError):
        basics(zipCode='   ')

    with pytest.raises(ValidationError):
        basics(category='Gardening')


@pytest.mark.asyncio
async def test_anonymous_basics_are_not_kept():
    draft = await start_basics(basics(), session=None)

    assert draft.step == 2 and draft.category == 'Medical'


@pytest.mark.asyncio
async def test_two_steps(session):
    # act
    await start_basics(basics(zipCode=' 20000 '), session=session)
    draft = await start_beneficiary(CampaignBeneficiary(beneficiary='charity'), session=session)

    # assert
    assert draft.step == 3
    assert draft.zipCode == '20000' and draft.beneficiary == 'charity'
    assert await start_draft(session=session) == draft


@pytest.mark.asyncio
async def test_beneficiary_needs_basics(session):
    with pytest.raises(HTTPException) as e:
        await start_beneficiary(CampaignBeneficiary(beneficiary='yourself'), session=session)

    assert e.value.status_code == 409


@pytest.mark.asyncio
async def test_basics_can_be_resent_after_signing_in(session):
    step = CampaignBeneficiary(beneficiary='someone-else', basics=basics(category='Education'))

    draft = await start_beneficiary(step, session=session)

    assert draft.category == 'Education' and draft.beneficiary == 'someone-else'


def test_unknown_beneficiary():
    with pytest.raises(ValidationError):
        CampaignBeneficiary(beneficiary='my cat')


@pytest.mark.asyncio
async def test_no_draft_yet(session):
    with pytest.raises(HTTPException) as e:
        await start_draft(session=session)

    assert e.value.status_code == 404
