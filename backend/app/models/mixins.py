"""Column sets shared by singleton content blocks and ordered collections."""

from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.sql import func

SINGLETON_ID = 1


class SingletonMixin:
    """One logical row per table, pinned to ``id = SINGLETON_ID``."""

    id = Column(Integer, primary_key=True, autoincrement=False, default=SINGLETON_ID)
    version = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())


class OrderedMixin:
    id = Column(Integer, primary_key=True, autoincrement=True)
    display_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
