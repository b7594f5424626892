from sqlalchemy import Column, Text, TIMESTAMP, func
from sqlalchemy.orm import relationship

from .base import Base, JSONType, new_id


class Employee(Base):
    """
    Employee profile fields used by provisioning rule conditions.

    meta holds free-form attributes (e.g. jiraBoardId) that rules may also
    match on.
    """
    __tablename__ = 'employee'

    id = Column(Text, primary_key=True, default=new_id)
    full_name = Column(Text, nullable=False)
    personal_email = Column(Text)
    work_email = Column(Text)

    department = Column(Text, index=True)
    employment_type = Column(Text)
    job_title = Column(Text)
    location = Column(Text)
    status = Column(Text, default='OFFER_STAGE')

    meta = Column(JSONType, default=dict)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    contracts = relationship("Contract", back_populates="employee")
