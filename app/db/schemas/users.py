from pydantic import BaseModel, Field
import typing as t

AVATAR_URL = 'https://api.dicebear.com/7.x/initials/svg?seed={seed}'


class UserBase(BaseModel):
    email: str
    name: t.Optional[str] = None


class UserCreate(UserBase):
    name: str = Field(min_length=1)
    password: str


class User(UserBase):
    id: str
    name: str
    role: t.Literal['user', 'admin'] = 'user'
    avatar: t.Optional[str] = None

    @property
    def is_superuser(self) -> bool:
        return self.role == 'admin'


class Token(BaseModel):
    access_token: str
    token_type: str = 'bearer'
    permissions: str
