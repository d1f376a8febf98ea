from fastapi import APIRouter, Depends, Request, status

from app.core.exceptions import DuplicateUserError, ForbiddenError, InvalidTokenError, UnauthorizedError
from app.core.logging_config import logger, set_user_id
from app.core.rate_limiter import auth_rate_limit
from app.core.security import (
    create_access_token,
    create_refresh_token,
    decode_token,
    get_password_hash,
    get_token_subject,
    verify_password,
)
from app.models.kinds import EntityKind
from app.models.user import User
from app.modules.auth.dependencies import get_current_user
from app.modules.storage import EntityStore, get_store
from app.schemas.auth import (
    LoginResponse,
    RefreshTokenRequest,
    Token,
    UserLogin,
    UserRegister,
    UserResponse,
    UserUpdate,
)

router = APIRouter()


def _issue_tokens(user: User) -> Token:
    token_data = {"sub": user.id, "username": user.username}
    return Token(
        access_token=create_access_token(token_data),
        refresh_token=create_refresh_token({"sub": user.id}),
    )


async def _find_user(store: EntityStore, **filters) -> User:
    matches = await store.list(EntityKind.USER, **filters)
    return matches[0] if matches else None


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@auth_rate_limit()
async def register(
    request: Request,
    user_data: UserRegister,
    store: EntityStore = Depends(get_store),
):
    """Register a new account"""
    client_ip = request.client.host if request.client else "unknown"

    if await _find_user(store, username=user_data.username):
        logger.log_auth_event(
            event="register",
            success=False,
            username=user_data.username,
            reason="Username already exists",
            client_ip=client_ip,
        )
        raise DuplicateUserError("username")

    if await _find_user(store, email=user_data.email):
        logger.log_auth_event(
            event="register",
            success=False,
            username=user_data.username,
            reason="Email already exists",
            client_ip=client_ip,
        )
        raise DuplicateUserError("email")

    user = await store.create(EntityKind.USER, {
        "username": user_data.username,
        "email": user_data.email,
        "full_name": user_data.full_name,
        "hashed_password": get_password_hash(user_data.password),
    })

    logger.log_auth_event(event="register", success=True, username=user.username, client_ip=client_ip)
    return user


@router.post("/login", response_model=LoginResponse)
@auth_rate_limit()
async def login(
    request: Request,
    credentials: UserLogin,
    store: EntityStore = Depends(get_store),
):
    """Exchange username and password for access and refresh tokens"""
    client_ip = request.client.host if request.client else "unknown"

    user = await _find_user(store, username=credentials.username)
    if not user or not verify_password(credentials.password, user.hashed_password):
        logger.log_auth_event(
            event="login",
            success=False,
            username=credentials.username,
            reason="Invalid credentials",
            client_ip=client_ip,
        )
        raise UnauthorizedError("Invalid username or password")

    if not user.is_active:
        logger.log_auth_event(
            event="login",
            success=False,
            username=user.username,
            reason="Account inactive",
            client_ip=client_ip,
        )
        raise ForbiddenError("User account is inactive")

    set_user_id(user.id)
    logger.log_auth_event(event="login", success=True, username=user.username, client_ip=client_ip)

    tokens = _issue_tokens(user)
    return LoginResponse(
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
        user=UserResponse.model_validate(user),
    )


@router.post("/token/refresh", response_model=Token)
async def refresh_token(
    payload: RefreshTokenRequest,
    store: EntityStore = Depends(get_store),
):
    """Issue a fresh token pair from a refresh token"""
    claims = decode_token(payload.refresh_token)
    user_id = get_token_subject(claims, expected_type="refresh")

    user = await store.get(EntityKind.USER, user_id)
    if not user or not user.is_active:
        logger.log_auth_event(event="refresh", success=False, reason="User not found or inactive")
        raise InvalidTokenError("Invalid refresh token")

    logger.log_auth_event(event="refresh", success=True, username=user.username)
    return _issue_tokens(user)


@router.post("/logout")
async def logout(current_user: User = Depends(get_current_user)):
    """Tokens are stateless; the client discards them"""
    logger.log_auth_event(event="logout", success=True, username=current_user.username)
    return {"message": "Logged out successfully"}


@router.get("/user", response_model=UserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get the signed-in user"""
    return current_user


@router.patch("/user", response_model=UserResponse)
async def update_profile(
    updates: UserUpdate,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
):
    """Update profile fields"""
    changes = updates.model_dump(exclude_unset=True, exclude_none=True)

    if "email" in changes and changes["email"] != current_user.email:
        if await _find_user(store, email=changes["email"]):
            raise DuplicateUserError("email")

    if not changes:
        return current_user

    user = await store.update(EntityKind.USER, current_user.id, changes)
    logger.info(f"[Auth] Profile updated for user {user.username}: {sorted(changes)}")
    return user
