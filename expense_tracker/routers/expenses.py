import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import select
from sqlalchemy.orm import Session

from expense_tracker.db import get_db
from expense_tracker.models import Expense
from expense_tracker.schemas.common import (
    ErrorBody,
    MessageBody,
    make_error_response,
    make_message_response,
)
from expense_tracker.schemas.expenses import ExpenseCreate, ExpenseResponse, ExpenseUpdate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/expenses",
    tags=["Expenses"],
)

NOT_FOUND_MESSAGE = "Expense not found"


def _not_found() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=make_error_response(NOT_FOUND_MESSAGE),
    )


def _store_failure(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=make_error_response(message),
    )


def _parse_id(expense_id: str) -> UUID | None:
    # Ids are opaque to callers; anything that is not one of ours simply does not exist
    try:
        return UUID(expense_id)
    except ValueError:
        return None


@router.get("", response_model=List[ExpenseResponse])
async def list_expenses(db: Session = Depends(get_db)):
    try:
        expenses = db.execute(
            select(Expense).order_by(Expense.created_at.desc())
        ).scalars().all()
    except Exception as e:
        logger.error(f"Listing expenses failed: {e}")
        return _store_failure(str(e))
    return [ExpenseResponse.model_validate(e) for e in expenses]


@router.post(
    "",
    response_model=ExpenseResponse,
    status_code=status.HTTP_201_CREATED,
    responses={500: {"model": ErrorBody}},
)
async def create_expense(payload: ExpenseCreate, db: Session = Depends(get_db)):
    try:
        db_expense = Expense(**payload.model_dump())
        db.add(db_expense)
        db.commit()
        db.refresh(db_expense)
    except Exception as e:
        db.rollback()
        logger.error(f"Creating expense failed: {e}")
        return _store_failure(str(e))

    logger.info(f"Created expense {db_expense.id} ({db_expense.type} {db_expense.amount})")
    return ExpenseResponse.model_validate(db_expense)


@router.put(
    "/{expense_id}",
    response_model=ExpenseResponse,
    responses={404: {"model": ErrorBody}, 500: {"model": ErrorBody}},
)
async def update_expense(expense_id: str, payload: ExpenseUpdate, db: Session = Depends(get_db)):
    parsed_id = _parse_id(expense_id)
    if parsed_id is None:
        return _not_found()

    # Explicit nulls would violate NOT NULL columns; treat them as "not provided"
    update_data = payload.model_dump(exclude_unset=True, exclude_none=True)

    try:
        db_expense = db.execute(select(Expense).filter_by(id=parsed_id)).scalar_one_or_none()
        if not db_expense:
            return _not_found()

        for key, value in update_data.items():
            setattr(db_expense, key, value)

        db.commit()
        db.refresh(db_expense)
    except Exception as e:
        db.rollback()
        logger.error(f"Updating expense {expense_id} failed: {e}")
        return _store_failure(str(e))

    return ExpenseResponse.model_validate(db_expense)


@router.delete(
    "/{expense_id}",
    response_model=MessageBody,
    responses={404: {"model": ErrorBody}, 500: {"model": ErrorBody}},
)
async def delete_expense(expense_id: str, db: Session = Depends(get_db)):
    parsed_id = _parse_id(expense_id)
    if parsed_id is None:
        return _not_found()

    try:
        db_expense = db.execute(select(Expense).filter_by(id=parsed_id)).scalar_one_or_none()
        if not db_expense:
            return _not_found()

        db.delete(db_expense)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Deleting expense {expense_id} failed: {e}")
        return _store_failure(str(e))

    return make_message_response("Deleted successfully")
