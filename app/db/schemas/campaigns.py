from pydantic import BaseModel, StringConstraints, field_validator
import typing as t

### SCHEMAS FOR THE CAMPAIGN START WIZARD ###

WIZARD_CATEGORIES = [
    'Animals', 'Business', 'Community', 'Creative', 'Education',
    'Emergencies', 'Environment', 'Events', 'Faith', 'Family',
    'Funeral & Memorial', 'Medical', 'Monthly Bills', 'Newlyweds',
    'Other', 'Sports', 'Travel', 'Ukraine Relief', 'Volunteer', 'Wishes',
]

Required = t.Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CampaignBasics(BaseModel):
    country: Required
    zipCode: Required
    category: Required

    @field_validator('category')
    @classmethod
    def known_category(cls, v):
        if v not in WIZARD_CATEGORIES:
            raise ValueError('Please select a fundraising category')
        return v


class CampaignBeneficiary(BaseModel):
    beneficiary: t.Literal['yourself', 'someone-else', 'charity']
    # lets a caller who signed in between the two steps resend step one
    basics: t.Optional[CampaignBasics] = None


class CampaignDraft(CampaignBasics):
    beneficiary: t.Optional[t.Literal['yourself', 'someone-else', 'charity']] = None
    step: int = 1
