"""User profile and link routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, UploadFile, status
from pydantic import BaseModel, Field

from linkbio.application.usecase.common import UserResponse
from linkbio.application.usecase.link import (
    AddLinkRequest,
    AddLinkUseCase,
    LinkInput,
    RemoveLinkRequest,
    RemoveLinkUseCase,
    ReplaceLinksRequest,
    ReplaceLinksUseCase,
)
from linkbio.application.usecase.user import (
    CreateUserRequest,
    CreateUserUseCase,
    GetUserRequest,
    GetUserUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
    UploadProfileImageRequest,
    UploadProfileImageUseCase,
)
from linkbio.domain.value import Socials

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserProfileAPIRequest(BaseModel):
    """API request for updating a profile. Omitted fields are unchanged."""

    name: str | None = Field(None, max_length=255)
    bio: str | None = Field(None, max_length=1000)
    headline: str | None = Field(None, max_length=255)
    socials: Socials | None = None
    username: str | None = Field(None, max_length=254)


class AddLinkAPIRequest(BaseModel):
    """API request for adding a link."""

    title: str
    url: str
    icon: str | None = None


class ReplaceLinksAPIRequest(BaseModel):
    """API request carrying the complete, ordered link list."""

    links: list[LinkInput]


@router.get("", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    q: str | None = None,
) -> ListUsersResponse:
    """List all users, or search by username and name.

    Example:
        GET /users?q=ali
    """
    return await list_users_use_case.execute(ListUsersRequest(query=q))


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserRequest,
    create_user_use_case: FromDishka[CreateUserUseCase],
) -> UserResponse:
    """Register a user after sign-in with the identity provider.

    Example:
        POST /users

        Request:
        {
            "email": "alice@example.com",
            "username": "alice",
            "name": "Alice"
        }

        The stored username is "@alice" and the profile image defaults to
        "/uploads/default.png".
    """
    return await create_user_use_case.execute(request)


@router.get("/email/{email}", response_model=UserResponse)
async def get_user_by_email(
    email: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserResponse:
    """Look a user up by email (used right after sign-in)."""
    return await get_user_use_case.execute(GetUserRequest(email=email))


@router.get("/{username}", response_model=UserResponse)
async def get_user_by_username(
    username: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserResponse:
    """Get a public profile by username, with or without the leading "@"."""
    return await get_user_use_case.execute(GetUserRequest(username=username))


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user_profile(
    user_id: str,
    request: UpdateUserProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
) -> UserResponse:
    """Update profile fields.

    Example:
        PATCH /users/{user_id}

        Request:
        {
            "bio": "Researcher in computational biology",
            "socials": {"github": "https://github.com/alice"}
        }
    """
    return await update_user_profile_use_case.execute(
        UpdateUserProfileRequest(
            user_id=user_id, **request.model_dump(exclude_unset=True)
        )
    )


@router.post("/{user_id}/profile-image", response_model=UserResponse)
async def upload_profile_image(
    user_id: str,
    upload_profile_image_use_case: FromDishka[UploadProfileImageUseCase],
    image: UploadFile = File(...),
) -> UserResponse:
    """Upload a new profile image (multipart field ``image``)."""
    content = await image.read()
    return await upload_profile_image_use_case.execute(
        UploadProfileImageRequest(
            user_id=user_id,
            filename=image.filename or "image",
            content=content,
        )
    )


@router.post(
    "/{user_id}/links", response_model=UserResponse, status_code=status.HTTP_201_CREATED
)
async def add_link(
    user_id: str,
    request: AddLinkAPIRequest,
    add_link_use_case: FromDishka[AddLinkUseCase],
) -> UserResponse:
    """Append a link to the profile."""
    return await add_link_use_case.execute(
        AddLinkRequest(
            user_id=user_id, title=request.title, url=request.url, icon=request.icon
        )
    )


@router.put("/{user_id}/links", response_model=UserResponse)
async def replace_links(
    user_id: str,
    request: ReplaceLinksAPIRequest,
    replace_links_use_case: FromDishka[ReplaceLinksUseCase],
) -> UserResponse:
    """Save the complete link list, e.g. after editing or reordering."""
    return await replace_links_use_case.execute(
        ReplaceLinksRequest(user_id=user_id, links=request.links)
    )


@router.delete("/{user_id}/links/{link_id}", response_model=UserResponse)
async def remove_link(
    user_id: str,
    link_id: str,
    remove_link_use_case: FromDishka[RemoveLinkUseCase],
) -> UserResponse:
    """Remove a link. Unknown links are ignored."""
    return await remove_link_use_case.execute(
        RemoveLinkRequest(user_id=user_id, link_id=link_id)
    )
