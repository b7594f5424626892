from typing import Optional

from sqlalchemy import select

from database.models import Employee
from database.repositories.base import BaseRepository


class EmployeeRepository(BaseRepository):
    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        stmt = select(Employee).where(Employee.id == employee_id)
        return self.db.execute(stmt).scalar_one_or_none()
