"""ORM Models — SQLAlchemy declarative models.

Design Decisions:
    - All models imported here so Base.metadata is complete before
      create_all or alembic autogenerate runs
"""

from todo_app.models.todo import Todo  # noqa: F401
