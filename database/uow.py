import contextlib
import logging
from typing import Generator

from database.database import Database
from database.repository import HrRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def hr_uow(database: Database) -> Generator[HrRepository, None, None]:
    """Per-unit-of-work transaction scope.

    Yields an HrRepository bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with hr_uow(database) as repo:
            template = repo.templates.get_by_id(template_id)
            # perform operations...
        # commit happens automatically on successful exit
    """
    with database.session_scope() as session:
        yield HrRepository(session)
