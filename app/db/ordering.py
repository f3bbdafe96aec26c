from sqlalchemy import func
from sqlalchemy.orm import Session


def lock_parent(db: Session, model, parent_id: int):
    """Row-lock a parent so sibling ``order`` values are assigned one writer at a time.

    Backends without ``SELECT ... FOR UPDATE`` (SQLite) ignore the lock.
    """
    return db.query(model).filter(model.id == parent_id).with_for_update().first()


def next_order(db: Session, parent_column, parent_id: int) -> int:
    """Position for a new child appended after its existing siblings.

    Equal to the sibling count while nothing has been deleted, and never
    reuses a value after a deletion.
    """
    model = parent_column.class_
    current = db.query(func.max(model.order)).filter(parent_column == parent_id).scalar()
    return 0 if current is None else current + 1
