from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.models import User
from app.repositories.user_repo import UserRepository
from app.schemas.enums import UserRole
from app.schemas.user import RoleUpdate, UserCreate, UserRead
from app.deps.auth import get_current_user, require_role

router = APIRouter(prefix="/users", tags=["users"])

@router.get("", response_model=list[UserRead], dependencies=[Depends(require_role(UserRole.coach, UserRole.admin))])
def list_users(
    db: Session = Depends(get_db),
    role: UserRole | None = Query(None),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    return UserRepository(db).list(role=role, limit=limit, offset=offset).items

@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    # owner, or staff looking after a client
    if current.id != user_id and not current.is_staff:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed")
    user = UserRepository(db).get(user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user

# Staff-created accounts have no password until the client resets it
@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_role(UserRole.admin))])
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    repo = UserRepository(db)
    if repo.get_by_email(payload.email):
        raise HTTPException(status_code=400, detail="email already registered")
    try:
        user = repo.create(email=payload.email, name=payload.name, password_hash="", role=payload.role)
    except ValueError as e:
        if str(e) == "email_already_exists":
            raise HTTPException(status_code=400, detail="email already registered")
        raise
    return user

@router.patch("/{user_id}/role", response_model=UserRead,
              dependencies=[Depends(require_role(UserRole.admin))])
def update_role(user_id: int, payload: RoleUpdate, db: Session = Depends(get_db)):
    user = UserRepository(db).set_role(user_id, role=payload.role)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
