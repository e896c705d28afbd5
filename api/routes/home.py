# api/routes/home.py

from typing import List
from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session

from core.sa.database import get_db
from core.session import PatronSession
from core.services.catalog_service import CatalogService
from api.session_store import get_patron_session, remember_session, forget_session
from api.schemas.catalog import (
    LoginRequest, SerialRequest, SuccessResponse, MessageResponse,
    SessionStatus, CatalogEntry, CheckoutEntry
)

router = APIRouter(tags=["catalog"])

@router.post("/login", response_model=SuccessResponse)
def check_login(
    credentials: LoginRequest,
    request: Request,
    response: Response,
    patron_session: PatronSession = Depends(get_patron_session),
    db: Session = Depends(get_db)
):
    """
    Log a patron in with their name and card number.

    Returns success=false, leaving the session as it was, when no patron
    matches both values.
    """
    service = CatalogService(db)
    success = service.authenticate(patron_session, credentials.name, credentials.card_num)
    if success:
        remember_session(request, response, patron_session)
    return SuccessResponse(success=success)

@router.get("/login", response_model=MessageResponse)
def login_page(
    request: Request,
    response: Response,
    patron_session: PatronSession = Depends(get_patron_session)
):
    """Opening the login page ends the current session."""
    patron_session.clear()
    forget_session(request, response)
    return MessageResponse(message="Please login.")

@router.post("/logout", response_model=SuccessResponse)
def log_out(
    request: Request,
    response: Response,
    patron_session: PatronSession = Depends(get_patron_session),
    db: Session = Depends(get_db)
):
    service = CatalogService(db)
    success = service.logout(patron_session)
    forget_session(request, response)
    return SuccessResponse(success=success)

@router.get("/session", response_model=SessionStatus)
def session_status(patron_session: PatronSession = Depends(get_patron_session)):
    """Tell the front end whether to show the catalog or the login page."""
    return SessionStatus.model_validate(patron_session)

@router.post("/titles", response_model=List[CatalogEntry])
def all_titles(db: Session = Depends(get_db)):
    """
    List every known title.

    Titles the library does not own have a null serial. ``name`` holds the
    borrower of a checked out copy, or "" when the copy is available.
    """
    service = CatalogService(db)
    return service.list_catalog()

@router.post("/my-books", response_model=List[CheckoutEntry])
def list_my_books(
    patron_session: PatronSession = Depends(get_patron_session),
    db: Session = Depends(get_db)
):
    service = CatalogService(db)
    return service.list_my_checkouts(patron_session)

@router.post("/checkout", response_model=SuccessResponse)
def check_out_book(
    body: SerialRequest,
    patron_session: PatronSession = Depends(get_patron_session),
    db: Session = Depends(get_db)
):
    service = CatalogService(db)
    return SuccessResponse(success=service.check_out(patron_session, body.serial))

@router.post("/return", response_model=SuccessResponse)
def return_book(
    body: SerialRequest,
    patron_session: PatronSession = Depends(get_patron_session),
    db: Session = Depends(get_db)
):
    service = CatalogService(db)
    return SuccessResponse(success=service.return_book(patron_session, body.serial))
