from typing import Iterator

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.db import SessionLocal
from app.storage.reference_store import ReferenceStore


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_store(db: Session = Depends(get_db)) -> ReferenceStore:
    return ReferenceStore(db)
